# Path: order_config/process/matcher/scoring/specificity.py
"""
Specificity Scorer

Derives a positional weight for every manifest header. The first
header after the identity column weighs most; each later position
weighs WEIGHT_STEP less, down to WEIGHT_STEP for the last one.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from ....constants import IDENTITY_COLUMN, WEIGHT_STEP


@dataclass(frozen=True)
class WeightMap:
    """
    Read-only header -> weight mapping.

    Lookups are case-insensitive. Headers without a registered weight
    (payload or unknown columns) weigh 0.

    Attributes:
        headers: Weighted headers in header order
        weights: Upper-cased header -> weight
    """
    headers: tuple[str, ...] = ()
    weights: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'weights', MappingProxyType(dict(self.weights)))

    def weight_for(self, header: str) -> int:
        """Get the weight of a header, 0 when it has none."""
        return self.weights.get(header.upper(), 0)

    def __contains__(self, header: object) -> bool:
        return isinstance(header, str) and header.upper() in self.weights

    def __len__(self) -> int:
        return len(self.weights)

    def as_dict(self) -> dict[str, int]:
        """Header (as spelled) -> weight, in header order."""
        return {h: self.weight_for(h) for h in self.headers}


def build_weight_map(
    headers: Iterable[str],
    identity_column: str = IDENTITY_COLUMN
) -> WeightMap:
    """
    Build the weight map for an ordered header list.

    Args:
        headers: Manifest table headers in file order
        identity_column: Column excluded from weighting

    Returns:
        WeightMap; six weighted headers give 60, 50, 40, 30, 20, 10

    Example:
        weights = build_weight_map(['Manifest', 'Strategy', 'Aggression'])
        weights.weight_for('strategy')  # 20
    """
    weighted = tuple(
        h for h in headers if h.upper() != identity_column.upper()
    )
    count = len(weighted)
    weights = {
        header.upper(): (count - position) * WEIGHT_STEP
        for position, header in enumerate(weighted)
    }
    return WeightMap(headers=weighted, weights=weights)


__all__ = ['WeightMap', 'build_weight_map']
