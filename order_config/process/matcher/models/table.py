# Path: order_config/process/matcher/models/table.py
"""
Table Models

Read-only row and table structures built once by the loaders and
shared by every request afterwards.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional


class Row(Mapping[str, str]):
    """
    One table row: column name -> normalized cell value.

    Column lookups are case-insensitive. Iteration yields the column
    names as they were spelled in the originating header.

    Example:
        row = Row({'Strategy': 'VWAP', 'Aggression': '*'})
        row['strategy']   # 'VWAP'
        'AGGRESSION' in row  # True
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Mapping[str, str]] = None):
        normalized: dict[str, tuple[str, str]] = {}
        for name, value in (cells or {}).items():
            normalized[name.upper()] = (name, value)
        self._cells = MappingProxyType(normalized)

    def __getitem__(self, column: str) -> str:
        return self._cells[column.upper()][1]

    def __contains__(self, column: object) -> bool:
        return isinstance(column, str) and column.upper() in self._cells

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def overlay(self, other: 'Row') -> 'Row':
        """
        Return a new row with other's cells laid over this row's.

        Columns only this row has are kept; on a shared column the
        value from other wins.
        """
        combined = dict(self._cells)
        combined.update(other._cells)
        return Row(dict(combined.values()))

    def __repr__(self) -> str:
        return f"Row({dict(self.items())!r})"


@dataclass(frozen=True)
class Table:
    """
    Rows keyed by identity value, plus the ordered header.

    The header order is kept apart from the row mapping because it
    drives specificity weighting.

    Attributes:
        rows: Identity key -> Row, in load order
        headers: Column names in header order
        source: Where the table came from
    """
    rows: Mapping[str, Row] = field(default_factory=dict)
    headers: tuple[str, ...] = ()
    source: str = '<memory>'

    def __post_init__(self):
        object.__setattr__(self, 'rows', MappingProxyType(dict(self.rows)))
        object.__setattr__(self, 'headers', tuple(self.headers))

    def __len__(self) -> int:
        return len(self.rows)

    def __contains__(self, key: object) -> bool:
        return key in self.rows

    def get(self, key: str) -> Optional[Row]:
        """Get the row stored under key, if any."""
        return self.rows.get(key)

    @property
    def is_empty(self) -> bool:
        """Check if the table holds no rows."""
        return len(self.rows) == 0


__all__ = ['Row', 'Table']
