"""Repository filter model tests."""

import pytest

from variantfilters.domain.filters import (
    FILTER_LIST_ADAPTER,
    EndFilter,
    MafFilter,
    PolyphenFilter,
    RelationalOperator,
    SiftFilter,
    StartFilter,
    StudyFilter,
    VariantTypeFilter,
)
from variantfilters.domain.variant_type import VariantType


class TestThresholdComparison:
    """Raw thresholds split into operator + operand only on demand."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0.3", (RelationalOperator.EQ, 0.3)),
            ("=0.3", (RelationalOperator.EQ, 0.3)),
            ("<0.3", (RelationalOperator.LT, 0.3)),
            ("<=0.3", (RelationalOperator.LTE, 0.3)),
            (">0.9", (RelationalOperator.GT, 0.9)),
            (">= 0.9", (RelationalOperator.GTE, 0.9)),
            ("<1e-3", (RelationalOperator.LT, 0.001)),
            (">-.5", (RelationalOperator.GT, -0.5)),
            ("  <1  ", (RelationalOperator.LT, 1.0)),
        ],
    )
    def test_operator_prefixes(self, raw, expected):
        assert MafFilter(value=raw).comparison() == expected

    @pytest.mark.parametrize(
        "raw", ["", "   ", "<", "abc", ">=high", "=>0.1", "nan", "<inf", "-Infinity", "1_0", "1e999"]
    )
    def test_malformed_threshold_raises_on_comparison(self, raw):
        f = SiftFilter(value=raw)
        with pytest.raises(ValueError, match="threshold"):
            f.comparison()

    def test_construction_does_not_validate(self):
        assert PolyphenFilter(value="garbage").value == "garbage"


class TestFilterFields:
    def test_store_fields(self):
        assert MafFilter.field == "st.maf"
        assert StudyFilter.field == "files.sid"
        assert StartFilter.field == "start"
        assert EndFilter.field == "end"
        assert VariantTypeFilter.field == "type"

    def test_filters_are_frozen(self):
        f = StartFilter(value=1, operator=RelationalOperator.GTE)
        with pytest.raises(ValueError):
            f.value = 2

    def test_membership_operator_is_in(self):
        assert StudyFilter(values=["S1"]).operator == RelationalOperator.IN


class TestDiscriminatedUnion:
    def test_json_dump_tags_each_filter_with_kind(self):
        filters = [
            MafFilter(value="<0.01"),
            VariantTypeFilter(values=[VariantType.SNV]),
            EndFilter(value=300, operator=RelationalOperator.LTE),
        ]
        dumped = FILTER_LIST_ADAPTER.dump_python(filters, mode="json")
        assert dumped == [
            {"value": "<0.01", "kind": "maf"},
            {"operator": "in", "kind": "variant_type", "values": ["SNV"]},
            {"value": 300, "operator": "lte", "kind": "end"},
        ]

    def test_validate_picks_variant_by_kind(self):
        filters = FILTER_LIST_ADAPTER.validate_python(
            [
                {"kind": "start", "value": 10, "operator": "gte"},
                {"kind": "study", "values": ["S1"]},
            ]
        )
        assert filters == [
            StartFilter(value=10, operator=RelationalOperator.GTE),
            StudyFilter(values=["S1"]),
        ]
