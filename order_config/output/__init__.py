# Path: order_config/output/__init__.py
"""
order_config Output Package

OUTPUT layer: text renderings of tables and match results.
"""

from .table_formatter import format_table, format_manifests, log_table

__all__ = [
    'format_table',
    'format_manifests',
    'log_table',
]
