# Path: order_config/loaders/table_merger.py
"""
Table Merger for order_config

Joins the manifest (rule) table and the values table on their
identity key. Runs once per service build, never per request.
"""

from ..core.logger import get_input_logger
from ..process.matcher.models.table import Row, Table


logger = get_input_logger('table_merger')


def merge_headers(*header_lists: tuple[str, ...]) -> tuple[str, ...]:
    """
    Union of header lists in first-seen order.

    Duplicates are detected case-insensitively; the first spelling wins.
    """
    seen: set[str] = set()
    merged = []
    for headers in header_lists:
        for header in headers:
            if header.upper() not in seen:
                seen.add(header.upper())
                merged.append(header)
    return tuple(merged)


def merge_tables(rule_table: Table, values_table: Table) -> Table:
    """
    Merge rule and values tables into one unified table.

    Every rule row is overlaid with the values row under the same key
    (values win on a shared column). Values-only rows are appended
    after the rule rows, unchanged.

    Args:
        rule_table: Manifest table (matchable columns)
        values_table: Values table (payload columns)

    Returns:
        Unified Table with the union of both headers, rule headers first
    """
    rows: dict[str, Row] = {}

    for key, rule_row in rule_table.rows.items():
        values_row = values_table.get(key)
        rows[key] = rule_row.overlay(values_row) if values_row is not None else rule_row

    values_only = 0
    for key, values_row in values_table.rows.items():
        if key not in rows:
            rows[key] = values_row
            values_only += 1

    if values_only:
        logger.info(f"{values_only} values rows have no manifest row")

    return Table(
        rows=rows,
        headers=merge_headers(rule_table.headers, values_table.headers),
        source=f"{rule_table.source}+{values_table.source}",
    )


__all__ = ['merge_headers', 'merge_tables']
