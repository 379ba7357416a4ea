# Path: order_config/process/matcher/scoring/tiebreaker.py
"""
Tiebreaker

Ranks matching manifests by specificity and settles equal scores
deterministically.
"""

from enum import Enum
from typing import Mapping

from ....core.logger import get_process_logger
from ..models.match_result import ScoredManifest


class TiebreakerType(str, Enum):
    """
    How manifests with equal scores are ordered.

    MANIFEST_KEY: Identity keys ascending (ordinal string order)
    LOAD_ORDER: Order the rows appear in the unified table
    """
    MANIFEST_KEY = 'manifest_key'
    LOAD_ORDER = 'load_order'


class Tiebreaker:
    """
    Orders scored manifests, highest score first.

    Example:
        tiebreaker = Tiebreaker()
        ranked = tiebreaker.rank({'VWAP': 60, 'BASE': 0, 'ALGO': 60})
        # ALGO (60), VWAP (60), BASE (0)
    """

    def __init__(self, strategy: TiebreakerType = TiebreakerType.MANIFEST_KEY):
        """
        Initialize tiebreaker.

        Args:
            strategy: Ordering applied among equal scores
        """
        self.strategy = strategy
        self.logger = get_process_logger('matcher.scoring.tiebreaker')

    def rank(self, scores: Mapping[str, int]) -> tuple[ScoredManifest, ...]:
        """
        Rank manifests by descending score.

        Args:
            scores: Manifest key -> score, in table order

        Returns:
            Ranked ScoredManifest tuple
        """
        if self.strategy == TiebreakerType.MANIFEST_KEY:
            ordered = sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))
        else:
            # sorted() is stable, so equal scores keep table order
            ordered = sorted(scores.items(), key=lambda kv: -kv[1])

        ranked = tuple(ScoredManifest(manifest=k, score=s) for k, s in ordered)

        if len(ranked) > 1 and ranked[0].score == ranked[1].score:
            self.logger.debug(
                f"Tie at score {ranked[0].score} settled by "
                f"{self.strategy.value}: {ranked[0].manifest} first"
            )
        return ranked


__all__ = ['TiebreakerType', 'Tiebreaker']
