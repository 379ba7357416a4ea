# Path: tests/unit/test_value_resolver.py
"""
Unit Tests for the Value Resolver

Tests the first-match-wins walk over ranked manifests.
"""

from order_config.constants import DataType, ResolutionStatus
from order_config.loaders.table_loader import load_table
from order_config.loaders.table_merger import merge_tables
from order_config.process.matcher.engine.value_resolver import ValueResolver
from order_config.process.matcher.models import Row
from order_config.process.matcher.scoring import Tiebreaker, TiebreakerType
from tests.fixtures.sample_data import build_tables, manifest_row, values_row


def unified(manifests, values):
    rule_lines, value_lines = build_tables(manifests, values)
    return merge_tables(load_table(rule_lines), load_table(value_lines))


class TestDefines:
    """Test the per-row request check."""

    ROW = Row({
        'ParamSection': 'CLOSEAUCTION',
        'ParamKey': 'SENDTIMEOFFSETSECONDS',
        'DataType': 'INT',
        'Value': '600',
    })

    def test_full_match(self):
        assert ValueResolver.defines(self.ROW, 'CloseAuction', 'SendTimeOffsetSeconds', 'int')

    def test_case_insensitive_request(self):
        assert ValueResolver.defines(self.ROW, 'closeauction', 'SENDTIMEOFFSETSECONDS', 'INT')

    def test_wrong_section(self):
        assert not ValueResolver.defines(self.ROW, 'Open', 'SendTimeOffsetSeconds', 'int')

    def test_wrong_key(self):
        assert not ValueResolver.defines(self.ROW, 'CloseAuction', 'CancelSeconds', 'int')

    def test_wrong_type(self):
        assert not ValueResolver.defines(self.ROW, 'CloseAuction', 'SendTimeOffsetSeconds', 'decimal')

    def test_rule_only_row(self):
        assert not ValueResolver.defines(Row({'Strategy': 'VWAP'}), 'CloseAuction', 'X', 'int')


class TestResolve:
    """Test resolution against a unified table."""

    def test_no_scores(self):
        result = ValueResolver().resolve({}, unified([], []), 'S', 'K', DataType.INT)

        assert result.status == ResolutionStatus.NO_MANIFEST

    def test_highest_score_wins(self):
        table = unified(
            [manifest_row('BASE'), manifest_row('VWAP', strategy='VWAP')],
            [values_row('BASE', 'S', 'K', 'int', '1'),
             values_row('VWAP', 'S', 'K', 'int', '2')],
        )

        result = ValueResolver().resolve({'BASE': 0, 'VWAP': 60}, table, 'S', 'K', DataType.INT)

        assert result.value == '2'
        assert result.manifest == 'VWAP'
        assert result.score == 60
        assert [c.manifest for c in result.candidates] == ['VWAP', 'BASE']

    def test_falls_through_to_less_specific(self):
        table = unified(
            [manifest_row('BASE'), manifest_row('VWAP', strategy='VWAP')],
            [values_row('BASE', 'S', 'K', 'int', '1'),
             values_row('VWAP', 'S', 'OTHER', 'int', '2')],
        )

        result = ValueResolver().resolve({'BASE': 0, 'VWAP': 60}, table, 'S', 'K', DataType.INT)

        assert result.value == '1'
        assert result.manifest == 'BASE'

    def test_type_mismatch_moves_on(self):
        table = unified(
            [manifest_row('BASE'), manifest_row('VWAP', strategy='VWAP')],
            [values_row('BASE', 'S', 'K', 'int', '1'),
             values_row('VWAP', 'S', 'K', 'decimal', '2.5')],
        )
        resolver = ValueResolver()
        scores = {'BASE': 0, 'VWAP': 60}

        assert resolver.resolve(scores, table, 'S', 'K', DataType.INT).value == '1'
        assert resolver.resolve(scores, table, 'S', 'K', DataType.DECIMAL).value == '2.5'

    def test_not_defined(self):
        table = unified(
            [manifest_row('BASE')],
            [values_row('BASE', 'S', 'K', 'int', '1')],
        )

        result = ValueResolver().resolve({'BASE': 0}, table, 'S', 'MISSING', DataType.INT)

        assert result.status == ResolutionStatus.NOT_DEFINED
        assert result.value is None
        assert len(result.candidates) == 1

    def test_string_type_tag(self):
        table = unified([manifest_row('BASE')], [values_row('BASE', 'S', 'K', 'string', 'abc')])

        result = ValueResolver().resolve({'BASE': 0}, table, 'S', 'K', 'string')

        assert result.value == 'ABC'

    def test_tie_uses_tiebreaker(self):
        table = unified(
            [manifest_row('ZULU', strategy='VWAP'), manifest_row('ALPHA', strategy='VWAP')],
            [values_row('ZULU', 'S', 'K', 'int', '1'),
             values_row('ALPHA', 'S', 'K', 'int', '2')],
        )
        scores = {'ZULU': 60, 'ALPHA': 60}

        by_key = ValueResolver().resolve(scores, table, 'S', 'K', DataType.INT)
        by_load = ValueResolver(Tiebreaker(TiebreakerType.LOAD_ORDER)).resolve(
            scores, table, 'S', 'K', DataType.INT
        )

        assert by_key.manifest == 'ALPHA'
        assert by_load.manifest == 'ZULU'

    def test_unknown_manifest_skipped(self):
        table = unified([manifest_row('BASE')], [values_row('BASE', 'S', 'K', 'int', '1')])

        result = ValueResolver().resolve({'GONE': 60, 'BASE': 0}, table, 'S', 'K', DataType.INT)

        assert result.manifest == 'BASE'
