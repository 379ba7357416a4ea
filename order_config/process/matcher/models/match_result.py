# Path: order_config/process/matcher/models/match_result.py
"""
Match Result Models

Models representing the results of manifest matching and value
resolution.
"""

from dataclasses import dataclass
from typing import Optional

from ....constants import ResolutionStatus


@dataclass(frozen=True)
class ScoredManifest:
    """
    A manifest that matched an order, with its specificity score.

    Attributes:
        manifest: Identity key of the matching row
        score: Sum of the weights of its non-wildcard fields
    """
    manifest: str
    score: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'manifest': self.manifest,
            'score': self.score,
        }


@dataclass(frozen=True)
class ResolvedValue:
    """
    Result of resolving one (section, key, type) request.

    A miss is a normal outcome and is reported through the status,
    never raised.

    Attributes:
        status: FOUND, NO_MANIFEST or NOT_DEFINED
        value: Stored value string when found
        manifest: Manifest that supplied the value
        score: Specificity score of that manifest
        candidates: Ranked manifests that were considered
    """
    status: ResolutionStatus
    value: Optional[str] = None
    manifest: Optional[str] = None
    score: int = 0
    candidates: tuple[ScoredManifest, ...] = ()

    @classmethod
    def no_manifest(cls) -> 'ResolvedValue':
        """Create a result for an order no manifest applies to."""
        return cls(status=ResolutionStatus.NO_MANIFEST)

    @classmethod
    def not_defined(cls, candidates: tuple[ScoredManifest, ...]) -> 'ResolvedValue':
        """
        Create a result for when no applicable manifest defines the request.

        Args:
            candidates: Ranked manifests that were considered
        """
        return cls(status=ResolutionStatus.NOT_DEFINED, candidates=candidates)

    @classmethod
    def from_candidate(
        cls,
        winner: ScoredManifest,
        value: str,
        candidates: tuple[ScoredManifest, ...]
    ) -> 'ResolvedValue':
        """
        Create a result from the manifest that supplied the value.

        Args:
            winner: Highest-ranked manifest defining the request
            value: Its stored value
            candidates: Ranked manifests that were considered
        """
        return cls(
            status=ResolutionStatus.FOUND,
            value=value,
            manifest=winner.manifest,
            score=winner.score,
            candidates=candidates,
        )

    @property
    def is_found(self) -> bool:
        """Check if a value was resolved."""
        return self.status == ResolutionStatus.FOUND

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'status': self.status.value,
            'value': self.value,
            'manifest': self.manifest,
            'score': self.score,
            'candidates': [c.to_dict() for c in self.candidates],
        }


__all__ = ['ScoredManifest', 'ResolvedValue']
