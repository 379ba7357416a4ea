# Path: order_config/process/matcher/models/__init__.py
"""
Matcher Models

Data models for the matching engine:
- Row / Table: Normalized, read-only manifest tables
- Order: Order attributes matched against manifests
- ScoredManifest / ResolvedValue: Matching and resolution results
"""

from .table import Row, Table
from .order import Order
from .match_result import ScoredManifest, ResolvedValue

__all__ = [
    # Tables
    'Row',
    'Table',
    # Order
    'Order',
    # Results
    'ScoredManifest',
    'ResolvedValue',
]
