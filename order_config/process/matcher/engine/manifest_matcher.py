# Path: order_config/process/matcher/engine/manifest_matcher.py
"""
Manifest Matcher

Finds every manifest whose matchable fields all equal the order's
value or are wildcarded, and scores it by specificity.
"""

from typing import Iterable

from ....constants import IDENTITY_COLUMN, WILDCARD
from ....core.logger import get_process_logger
from ..models.order import Order
from ..models.table import Row, Table
from ..scoring.specificity import WeightMap


def matchable_headers(
    headers: Iterable[str],
    identity_column: str = IDENTITY_COLUMN
) -> tuple[str, ...]:
    """
    Select the headers that name order attributes.

    Args:
        headers: Manifest table headers in file order
        identity_column: Column never matched on

    Returns:
        Matchable headers, in header order
    """
    return tuple(
        h for h in headers
        if h.upper() != identity_column.upper() and Order.is_order_field(h)
    )


class ManifestMatcher:
    """
    Matches an order against the unified manifest table.

    A field matches when the row holds the wildcard (worth nothing) or
    the order's value (worth the field's weight). A row lacking a
    matchable column treats it as a wildcard. The first mismatching
    field rejects the row.

    Example:
        matcher = ManifestMatcher(
            headers=('Strategy', 'Aggression'),
            weights=build_weight_map(['Manifest', 'Strategy', 'Aggression']),
        )
        scores = matcher.match(Order(strategy='VWAP'), table)
        # {'BASE': 0, 'VWAP': 20}
    """

    def __init__(self, headers: tuple[str, ...], weights: WeightMap):
        """
        Initialize manifest matcher.

        Args:
            headers: Matchable headers in header order
            weights: Weight per header
        """
        self.headers = tuple(headers)
        self.weights = weights
        self.logger = get_process_logger('matcher.manifest_matcher')

    def score_row(self, row: Row, order_values: dict[str, str]) -> int:
        """
        Score one row against normalized order values.

        Args:
            row: Unified table row
            order_values: Header -> normalized order value

        Returns:
            Specificity score, or -1 when the row does not apply
        """
        score = 0
        for header in self.headers:
            cell = row.get(header, WILDCARD)
            if cell == WILDCARD:
                continue
            if cell != order_values[header]:
                return -1
            score += self.weights.weight_for(header)
        return score

    def match(self, order: Order, table: Table) -> dict[str, int]:
        """
        Find the manifests applicable to an order.

        Args:
            order: Order to match
            table: Unified manifest table

        Returns:
            Manifest key -> score, in table order; empty when nothing applies
        """
        order_values = {h: order.value_for(h) for h in self.headers}

        results = {}
        for key, row in table.rows.items():
            score = self.score_row(row, order_values)
            if score >= 0:
                results[key] = score

        self.logger.debug(
            f"{len(results)}/{len(table)} manifests apply to {order_values}"
        )
        return results


__all__ = ['matchable_headers', 'ManifestMatcher']
