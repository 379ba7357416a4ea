# Path: order_config/process/matcher/engine/value_resolver.py
"""
Value Resolver

Walks the ranked applicable manifests and returns the value of the
first one that defines the requested (section, key, type).
"""

from typing import Mapping, Optional, Union

from ....constants import DataType, PayloadColumns
from ....core.logger import get_process_logger
from ..models.match_result import ResolvedValue
from ..models.table import Row, Table
from ..scoring.tiebreaker import Tiebreaker


class ValueResolver:
    """
    Resolves a parameter from scored manifests.

    The first ranked manifest whose section and key match decides only
    if its data type matches too; otherwise the search moves on to the
    next manifest. The first full hit wins and ends the search.

    Example:
        resolver = ValueResolver()
        result = resolver.resolve(
            scores={'VWAP': 60, 'BASE': 0},
            table=unified_table,
            section='CloseAuction',
            key='SendTimeOffsetSeconds',
            data_type=DataType.INT,
        )
        if result.is_found:
            print(result.value, result.manifest)
    """

    def __init__(self, tiebreaker: Optional[Tiebreaker] = None):
        """
        Initialize value resolver.

        Args:
            tiebreaker: Ranking of equal scores (manifest key order by default)
        """
        self.tiebreaker = tiebreaker or Tiebreaker()
        self.logger = get_process_logger('matcher.value_resolver')

    @staticmethod
    def defines(
        row: Row,
        section: str,
        key: str,
        data_type: str
    ) -> bool:
        """
        Check if a row defines the request.

        Args:
            row: Unified table row (cells already upper-cased)
            section: Requested ParamSection
            key: Requested ParamKey
            data_type: Requested DataType tag

        Returns:
            True if section, key and type all match and a value is present
        """
        if row.get(PayloadColumns.SECTION) != section.upper():
            return False
        if row.get(PayloadColumns.KEY) != key.upper():
            return False
        return (
            row.get(PayloadColumns.DATA_TYPE) == data_type.upper()
            and PayloadColumns.VALUE in row
        )

    def resolve(
        self,
        scores: Mapping[str, int],
        table: Table,
        section: str,
        key: str,
        data_type: Union[DataType, str]
    ) -> ResolvedValue:
        """
        Resolve one request against the applicable manifests.

        Args:
            scores: Manifest key -> score from the matcher
            table: Unified manifest table
            section: Requested ParamSection
            key: Requested ParamKey
            data_type: Requested type tag

        Returns:
            ResolvedValue; a miss is reported through its status
        """
        if not scores:
            return ResolvedValue.no_manifest()

        type_tag = data_type.value if isinstance(data_type, DataType) else data_type
        ranked = self.tiebreaker.rank(scores)

        for candidate in ranked:
            row = table.get(candidate.manifest)
            if row is None:
                continue
            if self.defines(row, section, key, type_tag):
                self.logger.debug(
                    f"{section}/{key} ({type_tag}) resolved by "
                    f"{candidate.manifest} (score {candidate.score})"
                )
                return ResolvedValue.from_candidate(
                    candidate, row[PayloadColumns.VALUE], ranked
                )

        self.logger.debug(
            f"{section}/{key} ({type_tag}) not defined by any of "
            f"{len(ranked)} applicable manifests"
        )
        return ResolvedValue.not_defined(ranked)


__all__ = ['ValueResolver']
