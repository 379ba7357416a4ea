# Path: order_config/output/table_formatter.py
"""
Table Formatter

Renders the unified manifest table and match results as text for
diagnostic logs and the command line.
"""

import csv
import io
import logging
from typing import Iterable, Optional

from ..constants import MENU_SEPARATOR
from ..core.logger import get_output_logger
from ..process.matcher.models.match_result import ScoredManifest
from ..process.matcher.models.table import Table


def format_table(table: Table) -> str:
    """
    Render a table as CSV, one line per row in table order.

    Cells a row does not have are left empty.

    Args:
        table: Table to render

    Returns:
        CSV text with the header line first
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator='\n')

    writer.writerow(table.headers)
    for row in table.rows.values():
        writer.writerow([row.get(header, '') for header in table.headers])

    return output.getvalue()


def format_manifests(ranked: Iterable[ScoredManifest]) -> str:
    """
    Render ranked manifests as an aligned two-column listing.

    Args:
        ranked: Manifests, most specific first

    Returns:
        Text block, or a one-line notice when nothing matched
    """
    ranked = list(ranked)
    if not ranked:
        return "  (no applicable manifests)\n"

    width = max(len('Manifest'), *(len(m.manifest) for m in ranked))
    lines = [
        f"  {'Manifest':<{width}}  {'Score':>5}",
        f"  {MENU_SEPARATOR[:width + 7]}",
    ]
    for match in ranked:
        lines.append(f"  {match.manifest:<{width}}  {match.score:>5}")
    return '\n'.join(lines) + '\n'


def log_table(table: Table, logger: Optional[logging.Logger] = None) -> None:
    """Dump a table at debug level."""
    logger = logger or get_output_logger('table_formatter')
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Table {table.source}:\n{format_table(table)}")


__all__ = ['format_table', 'format_manifests', 'log_table']
