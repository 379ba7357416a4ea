# Path: order_config/process/matcher/engine/config_service.py
"""
Config Service

The primary entry point for resolving order configuration.

Builds an immutable snapshot (unified table, weight map, matcher) once
per construction or reload, then answers typed lookups against it.
Requests only read the current snapshot reference, so concurrent
lookups need no locking; reload swaps the whole snapshot in one
assignment.
"""

import logging
import re
import threading
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Optional, Union

from ....constants import IDENTITY_COLUMN, DataType
from ....core.logger import get_process_logger
from ....exceptions import LoadError
from ....loaders.table_loader import load_table
from ....loaders.table_merger import merge_tables
from ....loaders.table_source import TableSource
from ....output.table_formatter import log_table
from ..models.match_result import ResolvedValue
from ..models.order import Order
from ..models.table import Table
from ..scoring.specificity import WeightMap, build_weight_map
from ..scoring.tiebreaker import Tiebreaker
from .manifest_matcher import ManifestMatcher, matchable_headers
from .value_resolver import ValueResolver


# Stored numbers: optional sign, ASCII digits, surrounding blanks allowed
INT_PATTERN = re.compile(r"^[ \t]*[+-]?[0-9]+[ \t]*\Z")
DECIMAL_PATTERN = re.compile(r"^[ \t]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)[ \t]*\Z")

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class ManifestSnapshot:
    """
    Everything a lookup reads, built in one pass.

    Attributes:
        table: Unified manifest + values table
        rule_headers: Manifest table header in file order
        weights: Weight per manifest header
        matcher: Matcher bound to the matchable headers and weights
    """
    table: Table
    rule_headers: tuple[str, ...]
    weights: WeightMap
    matcher: ManifestMatcher


def build_snapshot(
    rule_lines: Optional[Iterable[str]],
    value_lines: Optional[Iterable[str]],
    identity_column: str = IDENTITY_COLUMN,
    rule_source: str = '<manifest>',
    values_source: str = '<values>'
) -> ManifestSnapshot:
    """
    Load, merge and weight both tables.

    Raises:
        LoadError: If either table cannot be parsed
    """
    rule_table = load_table(rule_lines, identity_column, source=rule_source)
    values_table = load_table(value_lines, identity_column, source=values_source)

    weights = build_weight_map(rule_table.headers, identity_column)
    matcher = ManifestMatcher(
        headers=matchable_headers(rule_table.headers, identity_column),
        weights=weights,
    )
    return ManifestSnapshot(
        table=merge_tables(rule_table, values_table),
        rule_headers=rule_table.headers,
        weights=weights,
        matcher=matcher,
    )


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a 32-bit int config value, None when unparseable.

    Only ASCII digits with an optional sign are accepted; digit
    separators and non-ASCII digits are rejected.
    """
    if not value or not INT_PATTERN.match(value):
        return None
    result = int(value)
    return result if INT32_MIN <= result <= INT32_MAX else None


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    """Parse a finite decimal config value, None when unparseable."""
    if not value or not DECIMAL_PATTERN.match(value):
        return None
    try:
        result = Decimal(value)
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


class ConfigService:
    """
    Resolves typed configuration values for orders.

    Example:
        service = ConfigService.from_files(
            Path('input_files/manifest.csv'),
            Path('input_files/cfgs.csv'),
        )
        order = Order(strategy='VWAP', aggression='P')
        offset = service.get_int_config(
            order, 'CloseAuction', 'SendTimeOffsetSeconds', 23400
        )
        # 900
    """

    def __init__(
        self,
        rule_lines: Optional[Iterable[str]] = None,
        value_lines: Optional[Iterable[str]] = None,
        identity_column: str = IDENTITY_COLUMN,
        tiebreaker: Optional[Tiebreaker] = None,
        rule_source: str = '<manifest>',
        values_source: str = '<values>'
    ):
        """
        Build the service from raw table lines.

        Args:
            rule_lines: Manifest table lines, header first
            value_lines: Values table lines, header first
            identity_column: Key column shared by both tables
            tiebreaker: Ordering of equally specific manifests
            rule_source: Label for the manifest table in messages
            values_source: Label for the values table in messages

        Raises:
            LoadError: If either table cannot be parsed
        """
        self.identity_column = identity_column
        self.logger = get_process_logger('matcher.config_service')
        self.resolver = ValueResolver(tiebreaker)
        self.load_error: Optional[LoadError] = None
        self._lock = threading.Lock()

        self._snapshot = build_snapshot(
            rule_lines, value_lines, identity_column, rule_source, values_source
        )
        self._log_snapshot(self._snapshot)

    @classmethod
    def empty(cls, **kwargs) -> 'ConfigService':
        """Create a service with no manifests; every lookup returns defaults."""
        return cls(None, None, **kwargs)

    @classmethod
    def from_files(
        cls,
        manifest_path: Union[str, Path],
        values_path: Union[str, Path],
        strict: bool = False,
        source: Optional[TableSource] = None,
        **kwargs
    ) -> 'ConfigService':
        """
        Build the service from the manifest and values files.

        Args:
            manifest_path: Manifest (rule) table file
            values_path: Values table file
            strict: Raise load failures instead of returning an empty service
            source: Reader for the files
            **kwargs: Passed to the constructor

        Returns:
            ConfigService; when lenient and loading failed, an empty
            service whose load_error is set

        Raises:
            LoadError: If strict and either file cannot be loaded
        """
        source = source or TableSource()
        try:
            return cls(
                source.read_lines(manifest_path),
                source.read_lines(values_path),
                rule_source=str(manifest_path),
                values_source=str(values_path),
                **kwargs
            )
        except LoadError as e:
            if strict:
                raise
            service = cls.empty(**kwargs)
            service.load_error = e
            service.logger.warning(
                f"Manifest tables not loaded, all lookups will return defaults: {e}"
            )
            return service

    def reload(
        self,
        rule_lines: Optional[Iterable[str]],
        value_lines: Optional[Iterable[str]],
        rule_source: str = '<manifest>',
        values_source: str = '<values>'
    ) -> None:
        """
        Replace the tables atomically.

        The new snapshot is built completely before it replaces the
        current one. On failure the current snapshot stays in place.

        Raises:
            LoadError: If either table cannot be parsed
        """
        snapshot = build_snapshot(
            rule_lines, value_lines, self.identity_column, rule_source, values_source
        )
        with self._lock:
            self._snapshot = snapshot
            self.load_error = None
        self._log_snapshot(snapshot)

    def _log_snapshot(self, snapshot: ManifestSnapshot) -> None:
        self.logger.info(
            f"Loaded {len(snapshot.table)} manifests, "
            f"{len(snapshot.matcher.headers)} matchable fields"
        )
        log_table(snapshot.table)

    # ------------------------------------------------------------------
    # Snapshot views
    # ------------------------------------------------------------------

    @property
    def table(self) -> Table:
        """Unified manifest table."""
        return self._snapshot.table

    @property
    def headers(self) -> tuple[str, ...]:
        """Manifest table header in file order."""
        return self._snapshot.rule_headers

    @property
    def weights(self) -> WeightMap:
        """Weight per manifest header."""
        return self._snapshot.weights

    @property
    def is_empty(self) -> bool:
        """Check if no manifest is loaded."""
        return self._snapshot.table.is_empty

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_applicable_manifests(self, order: Order) -> dict[str, int]:
        """
        Get the manifests applicable to an order.

        Args:
            order: Order to match

        Returns:
            Manifest key -> specificity score; empty when none applies
        """
        snapshot = self._snapshot
        return snapshot.matcher.match(order, snapshot.table)

    def resolve(
        self,
        order: Order,
        section: str,
        key: str,
        data_type: Union[DataType, str]
    ) -> ResolvedValue:
        """
        Resolve a request to the most specific manifest defining it.

        Args:
            order: Order to match
            section: ParamSection
            key: ParamKey
            data_type: Type tag

        Returns:
            ResolvedValue with the value, or a not-found status
        """
        snapshot = self._snapshot
        scores = snapshot.matcher.match(order, snapshot.table)
        return self.resolver.resolve(scores, snapshot.table, section, key, data_type)

    def get_config_value(
        self,
        order: Order,
        section: str,
        key: str,
        data_type: Union[DataType, str]
    ) -> Optional[str]:
        """Get the raw value string, or None when not found."""
        return self.resolve(order, section, key, data_type).value

    def get_int_config(
        self, order: Order, section: str, key: str, default: int
    ) -> int:
        """
        Get an int config value for an order.

        Returns:
            The most specific int value, or default when none is
            found or the stored value is not an integer
        """
        value = self.get_config_value(order, section, key, DataType.INT)
        parsed = parse_int(value)
        if parsed is None:
            self._log_default(section, key, value)
            return default
        return parsed

    def get_decimal_config(
        self, order: Order, section: str, key: str, default: Decimal
    ) -> Decimal:
        """
        Get a decimal config value for an order.

        Returns:
            The most specific decimal value, or default when none is
            found or the stored value is not a finite decimal
        """
        value = self.get_config_value(order, section, key, DataType.DECIMAL)
        parsed = parse_decimal(value)
        if parsed is None:
            self._log_default(section, key, value)
            return default
        return parsed

    def get_string_config(
        self, order: Order, section: str, key: str, default: str
    ) -> str:
        """
        Get a string config value for an order.

        Values are stored upper-cased, so the result is upper-cased too.
        """
        value = self.get_config_value(order, section, key, DataType.STRING)
        if not value:
            self._log_default(section, key, value)
            return default
        return value

    def _log_default(self, section: str, key: str, value: Optional[str]) -> None:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        if value is None:
            self.logger.debug(f"{section}/{key}: not found, using default")
        else:
            self.logger.debug(f"{section}/{key}: unparseable value '{value}', using default")

    def __repr__(self) -> str:
        return (
            f"ConfigService(manifests={len(self.table)}, "
            f"headers={list(self.headers)})"
        )


__all__ = [
    'ManifestSnapshot',
    'build_snapshot',
    'parse_int',
    'parse_decimal',
    'ConfigService',
]
