# Path: tests/unit/test_config_service.py
"""
Unit Tests for ConfigService

Tests typed accessors, default fallback, file loading policy and
snapshot reload.
"""

import threading
from decimal import Decimal

import pytest

from order_config import ConfigService, LoadError, Order, ResolutionStatus
from order_config.constants import DataType
from order_config.process.matcher.engine.config_service import (
    parse_decimal,
    parse_int,
)
from order_config.process.matcher.scoring import Tiebreaker, TiebreakerType
from tests.fixtures.sample_data import (
    MANIFEST_LINES,
    VALUES_LINES,
    build_tables,
    manifest_row,
    values_row,
)


SECTION = 'CloseAuction'
KEY = 'SendTimeOffsetSeconds'


TYPED_VALUES = (
    ('MaxQty', 'int', '500'),
    ('BadInt', 'int', 'lots'),
    ('Rate', 'decimal', '0.25'),
    ('BadRate', 'decimal', 'NaN'),
    ('Venue', 'string', 'xlon'),
    ('Blank', 'string', ''),
)


def typed_service():
    """One all-wildcard manifest per Limits parameter."""
    names = [f"BASE_{key.upper()}" for key, _, _ in TYPED_VALUES]
    return ConfigService(*build_tables(
        [manifest_row(name) for name in names],
        [
            values_row(name, 'Limits', key, data_type, value)
            for name, (key, data_type, value) in zip(names, TYPED_VALUES)
        ],
    ))


class TestParsers:
    """Test the value parsers."""

    def test_parse_int(self):
        assert parse_int('60') == 60
        assert parse_int('-5') == -5

    def test_parse_int_failure(self):
        assert parse_int('6.5') is None
        assert parse_int('ABC') is None
        assert parse_int('') is None
        assert parse_int(None) is None

    def test_parse_int_rejects_separators_and_non_ascii(self):
        assert parse_int('1_000') is None
        assert parse_int('１２３') is None
        assert parse_int('1e3') is None

    def test_parse_int_32_bit_range(self):
        assert parse_int('2147483647') == 2147483647
        assert parse_int('-2147483648') == -2147483648
        assert parse_int('2147483648') is None
        assert parse_int('-2147483649') is None

    def test_parse_int_surrounding_blanks(self):
        assert parse_int(' +42 ') == 42

    def test_parse_decimal(self):
        assert parse_decimal('0.25') == Decimal('0.25')
        assert parse_decimal('-.5') == Decimal('-0.5')

    def test_parse_decimal_rejects_separators_and_exponent(self):
        assert parse_decimal('1_000.5') is None
        assert parse_decimal('1E3') is None

    def test_parse_decimal_rejects_non_finite(self):
        assert parse_decimal('NAN') is None
        assert parse_decimal('INFINITY') is None

    def test_parse_decimal_failure(self):
        assert parse_decimal('ABC') is None
        assert parse_decimal(None) is None


class TestTypedAccessors:
    """Test typed lookups against the reference tables."""

    def test_int_most_specific(self, service):
        order = Order(strategy='VWAP', aggression='P', trader_id='Joe')

        assert service.get_int_config(order, SECTION, KEY, 23400) == 900

    def test_int_default_when_not_defined(self, service):
        order = Order(strategy='VWAP', aggression='M')

        assert service.get_int_config(order, SECTION, 'CancelSeconds', 23400) == 23400

    def test_int_unparseable_returns_default(self):
        assert typed_service().get_int_config(Order(), 'Limits', 'BadInt', 7) == 7

    def test_int(self):
        assert typed_service().get_int_config(Order(), 'Limits', 'MaxQty', 0) == 500

    def test_int_with_digit_separator_returns_default(self):
        service = ConfigService(*build_tables(
            [manifest_row('BASE')], [values_row('BASE', 'Limits', 'MaxQty', 'int', '1_000')]
        ))

        assert service.get_int_config(Order(), 'Limits', 'MaxQty', 7) == 7

    def test_decimal(self):
        value = typed_service().get_decimal_config(Order(), 'Limits', 'Rate', Decimal(0))

        assert value == Decimal('0.25')

    def test_decimal_nan_returns_default(self):
        value = typed_service().get_decimal_config(Order(), 'Limits', 'BadRate', Decimal(1))

        assert value == Decimal(1)

    def test_type_isolation(self):
        service = typed_service()

        assert service.get_decimal_config(Order(), 'Limits', 'MaxQty', Decimal(3)) == Decimal(3)
        assert service.get_int_config(Order(), 'Limits', 'Rate', 3) == 3

    def test_string_upper_cased(self):
        assert typed_service().get_string_config(Order(), 'Limits', 'Venue', 'none') == 'XLON'

    def test_string_blank_cell_is_wildcard(self):
        assert typed_service().get_string_config(Order(), 'Limits', 'Blank', 'none') == '*'

    def test_string_default(self):
        assert typed_service().get_string_config(Order(), 'Limits', 'Missing', 'none') == 'none'

    def test_config_value_raw(self, service):
        value = service.get_config_value(Order(strategy='VWAP'), SECTION, KEY, DataType.INT)

        assert value == '600'


class TestResolve:
    """Test the detailed resolution result."""

    def test_found(self, service):
        order = Order(strategy='VWAP', aggression='P', account='CLIENTXYZ')

        result = service.resolve(order, SECTION, KEY, 'int')

        assert result.is_found
        assert result.manifest == 'VWAP_PASSIVE_XYZ'
        assert result.score == 130

    def test_no_manifest(self):
        service = ConfigService(*build_tables([manifest_row('ONLY', strategy='VWAP')], []))

        result = service.resolve(Order(strategy='TWAP'), SECTION, KEY, 'int')

        assert result.status == ResolutionStatus.NO_MANIFEST

    def test_applicable_manifests(self, service):
        scores = service.get_applicable_manifests(Order(strategy='TWAP'))

        assert scores == {'BASE': 0}

    def test_custom_tiebreaker(self):
        rule_lines, value_lines = build_tables(
            [manifest_row('ZULU', strategy='VWAP'), manifest_row('ALPHA', strategy='VWAP')],
            [values_row('ZULU', 'S', 'K', 'int', '1'),
             values_row('ALPHA', 'S', 'K', 'int', '2')],
        )
        service = ConfigService(
            rule_lines, value_lines, tiebreaker=Tiebreaker(TiebreakerType.LOAD_ORDER)
        )

        assert service.get_int_config(Order(strategy='VWAP'), 'S', 'K', 0) == 1


class TestConstruction:
    """Test building the service."""

    def test_properties(self, service):
        assert len(service.table) == 4
        assert service.headers[0] == 'Manifest'
        assert service.weights.weight_for('Strategy') == 60
        assert not service.is_empty
        assert service.load_error is None

    def test_idempotent(self):
        first = ConfigService(MANIFEST_LINES, VALUES_LINES)
        second = ConfigService(MANIFEST_LINES, VALUES_LINES)

        assert first.table == second.table
        assert first.weights == second.weights

    def test_malformed_raises(self):
        with pytest.raises(LoadError):
            ConfigService(['Manifest,Strategy', 'A'], VALUES_LINES)

    def test_empty(self):
        service = ConfigService.empty()

        assert service.is_empty
        assert service.get_int_config(Order(strategy='VWAP'), SECTION, KEY, 5) == 5

    def test_values_only_rows_apply_everywhere(self):
        service = ConfigService(*build_tables([], [values_row('GLOBAL', 'S', 'K', 'int', '4')]))

        assert service.get_int_config(Order(strategy='ANY'), 'S', 'K', 0) == 4

    def test_repr(self, service):
        assert 'manifests=4' in repr(service)


class TestFromFiles:
    """Test loading from disk."""

    def test_loads(self, table_files):
        manifest_path, values_path = table_files

        service = ConfigService.from_files(manifest_path, values_path)

        assert len(service.table) == 4
        assert service.table.source == f"{manifest_path}+{values_path}"

    def test_missing_file_lenient(self, temp_dir):
        service = ConfigService.from_files(temp_dir / 'none.csv', temp_dir / 'none2.csv')

        assert service.is_empty
        assert isinstance(service.load_error, LoadError)
        assert service.get_int_config(Order(), SECTION, KEY, 11) == 11

    def test_missing_file_strict(self, temp_dir):
        with pytest.raises(LoadError):
            ConfigService.from_files(temp_dir / 'none.csv', temp_dir / 'none2.csv', strict=True)

    def test_malformed_file_lenient(self, table_files):
        manifest_path, values_path = table_files
        manifest_path.write_text('Manifest,Strategy\nA\n', encoding='utf-8')

        service = ConfigService.from_files(manifest_path, values_path)

        assert service.is_empty
        assert str(manifest_path) in str(service.load_error)

    def test_unbalanced_quote_keeps_next_row(self, table_files):
        manifest_path, values_path = table_files
        values_path.write_text(
            'Manifest,ParamSection,ParamKey,DataType,Value\n'
            'BASE,CloseAuction,Venue,string,"primary\n'
            'VWAP,CloseAuction,SendTimeOffsetSeconds,int,600\n',
            encoding='utf-8',
        )

        service = ConfigService.from_files(manifest_path, values_path, strict=True)

        assert service.get_int_config(Order(strategy='VWAP'), SECTION, KEY, 23400) == 600
        assert service.get_string_config(Order(), SECTION, 'Venue', '') == '"PRIMARY'

    def test_oversized_quoted_cell(self, table_files):
        manifest_path, values_path = table_files
        big = 'x' * 200000
        values_path.write_text(
            'Manifest,ParamSection,ParamKey,DataType,Value\n'
            f'BASE,CloseAuction,Note,string,"{big}"\n',
            encoding='utf-8',
        )

        service = ConfigService.from_files(manifest_path, values_path, strict=False)

        assert service.load_error is None
        assert len(service.get_string_config(Order(), SECTION, 'Note', '')) == 200002


class TestReload:
    """Test snapshot replacement."""

    def test_reload_replaces_tables(self, service):
        rule_lines, value_lines = build_tables(
            [manifest_row('BASE')], [values_row('BASE', SECTION, KEY, 'int', '42')]
        )

        service.reload(rule_lines, value_lines)

        assert len(service.table) == 1
        assert service.get_int_config(Order(strategy='VWAP'), SECTION, KEY, 0) == 42

    def test_failed_reload_keeps_snapshot(self, service):
        table = service.table

        with pytest.raises(LoadError):
            service.reload(['Manifest,Strategy', 'A'], [])

        assert service.table is table
        assert service.get_int_config(Order(strategy='VWAP'), SECTION, KEY, 0) == 600

    def test_reload_clears_load_error(self, temp_dir):
        service = ConfigService.from_files(temp_dir / 'none.csv', temp_dir / 'none2.csv')

        service.reload(MANIFEST_LINES, VALUES_LINES)

        assert service.load_error is None
        assert not service.is_empty

    def test_lookups_during_reload(self, service):
        """Readers see either the old or the new snapshot, never a mix."""
        new_rules, new_values = build_tables(
            [manifest_row('BASE'), manifest_row('VWAP', strategy='VWAP')],
            [values_row('BASE', SECTION, KEY, 'int', '1'),
             values_row('VWAP', SECTION, KEY, 'int', '2')],
        )
        order = Order(strategy='VWAP', aggression='P')
        seen = set()
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                seen.add(service.get_int_config(order, SECTION, KEY, -1))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for _ in range(20):
            service.reload(new_rules, new_values)
            service.reload(MANIFEST_LINES, VALUES_LINES)
        stop.set()
        for t in threads:
            t.join()

        assert seen <= {900, 2}
