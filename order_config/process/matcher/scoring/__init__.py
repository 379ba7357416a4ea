# Path: order_config/process/matcher/scoring/__init__.py
"""
Scoring Module

Components for ranking manifests by specificity:
- build_weight_map / WeightMap: Positional weight per manifest header
- Tiebreaker: Deterministic ordering of equal scores
"""

from .specificity import WeightMap, build_weight_map
from .tiebreaker import Tiebreaker, TiebreakerType

__all__ = [
    'WeightMap',
    'build_weight_map',
    'Tiebreaker',
    'TiebreakerType',
]
