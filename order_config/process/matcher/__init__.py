# Path: order_config/process/matcher/__init__.py
"""
Matching Engine - Manifest Resolution

Resolves configuration values for an order by matching its attributes
against manifest rows and picking the most specific applicable one.

Core Components:
    - ConfigService: Main entry point
    - ManifestMatcher: Wildcard matching and specificity scoring
    - ValueResolver: (section, key, type) lookup over ranked manifests
    - Scoring: Positional weights and tiebreaking
    - Models: Tables, orders and results

Key Principle:
    Specificity comes only from header order. The first matchable
    column weighs most, and a wildcard cell never adds weight.

Example:
    from order_config.process.matcher import ConfigService, Order

    service = ConfigService(manifest_lines, values_lines)
    service.get_int_config(
        Order(strategy='VWAP'), 'CloseAuction', 'SendTimeOffsetSeconds', 23400
    )
"""

from .models import Row, Table, Order, ScoredManifest, ResolvedValue
from .scoring import WeightMap, build_weight_map, Tiebreaker, TiebreakerType
from .engine import ConfigService, ManifestMatcher, ValueResolver

__all__ = [
    'ConfigService',
    'ManifestMatcher',
    'ValueResolver',
    'Row',
    'Table',
    'Order',
    'ScoredManifest',
    'ResolvedValue',
    'WeightMap',
    'build_weight_map',
    'Tiebreaker',
    'TiebreakerType',
]
