# Path: order_config/loaders/table_loader.py
"""
Table Loader for order_config

Turns raw comma-delimited lines into a normalized Table.

Normalization rules:
- Line 0 is the header, every other non-blank line is one row
- Every cell is upper-cased; an empty cell becomes the wildcard '*'
- The identity column's raw cell (before upper-casing) is the row key
- A row whose field count differs from the header is refused
"""

from typing import Iterable, Optional

from ..constants import CELL_DELIMITER, IDENTITY_COLUMN, WILDCARD
from ..core.logger import get_input_logger
from ..exceptions import LoadError, MalformedRowError
from ..process.matcher.models import Row, Table


logger = get_input_logger('table_loader')


def normalize_cell(value: Optional[str]) -> str:
    """Upper-case a cell, mapping empty or missing to the wildcard."""
    if not value:
        return WILDCARD
    return value.upper()


def load_table(
    lines: Optional[Iterable[str]],
    identity_column: str = IDENTITY_COLUMN,
    source: str = '<memory>'
) -> Table:
    """
    Build a Table from raw lines.

    Args:
        lines: Header line followed by row lines; None or empty is allowed
        identity_column: Header token naming the key column (case-sensitive)
        source: Label used in log and error messages

    Returns:
        Table keyed by identity value, with the header order preserved

    Raises:
        LoadError: If the header lacks the identity column
        MalformedRowError: If a row has more or fewer fields than the header
    """
    numbered = [
        (number, line)
        for number, line in enumerate(lines or [], start=1)
        if line.strip()
    ]
    if not numbered:
        logger.info(f"{source}: empty table")
        return Table(source=source)

    # Quotes carry no meaning; every delimiter separates two cells
    headers = numbered[0][1].split(CELL_DELIMITER)

    if identity_column not in headers:
        raise LoadError(
            f"header has no '{identity_column}' column: {headers}",
            source=source,
        )

    rows: dict[str, Row] = {}
    for line_number, line in numbered[1:]:
        fields = line.split(CELL_DELIMITER)
        if len(fields) != len(headers):
            raise MalformedRowError(
                line_number=line_number,
                expected=len(headers),
                actual=len(fields),
                source=source,
            )

        key = ''
        cells = {}
        for header, value in zip(headers, fields):
            cells[header] = normalize_cell(value)
            if header == identity_column:
                key = value or WILDCARD

        if key in rows:
            logger.warning(
                f"{source}: duplicate {identity_column} '{key}' on line "
                f"{line_number} replaces the earlier row"
            )
        rows[key] = Row(cells)

    logger.info(f"{source}: loaded {len(rows)} rows, {len(headers)} columns")
    return Table(rows=rows, headers=tuple(headers), source=source)


__all__ = ['normalize_cell', 'load_table']
