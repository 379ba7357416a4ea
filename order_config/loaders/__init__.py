# Path: order_config/loaders/__init__.py
"""
order_config Loaders Package

INPUT layer: everything between the files on disk and the unified
manifest table.

- TableSource: reads raw lines from a file
- load_table: raw lines -> normalized Table
- merge_tables: rule table + values table -> unified Table
"""

from .table_source import TableSource
from .table_loader import load_table, normalize_cell
from .table_merger import merge_tables, merge_headers

__all__ = [
    'TableSource',
    'load_table',
    'normalize_cell',
    'merge_tables',
    'merge_headers',
]
