"""Tests for criteria combinators."""

import pytest

from elastic_query.exception import InvalidArgumentError
from elastic_query.search import (
    AndCriteria,
    ExistsCriteria,
    LogicalOperator,
    MissingCriteria,
    NotCriteria,
    OrCriteria,
    RangeComparison,
    RangeCriteria,
    RangeSpecificationCriteria,
    TermCriteria,
    and_criteria,
    combine,
    format_criteria,
    merge_ranges,
    not_criteria,
    or_criteria,
)


@pytest.fixture
def exists():
    return ExistsCriteria("fieldShouldExist")


@pytest.fixture
def term():
    return TermCriteria("term1", ["alpha", "bravo"])


class TestOrCriteria:
    """Test or_criteria collapsing rules."""

    def test_single_operand_collapses(self, exists):
        """A single operand is returned unwrapped."""
        assert or_criteria(exists) is exists

    def test_single_operand_formats_the_same(self, exists):
        assert format_criteria(or_criteria(exists)) == format_criteria(exists)

    def test_two_operands_preserve_order(self, exists, term):
        result = or_criteria(exists, term)

        assert isinstance(result, OrCriteria)
        assert result.criteria == (exists, term)

    def test_no_operands_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="or requires at least one operand"):
            or_criteria()

    def test_none_operand_raises_error(self, exists):
        with pytest.raises(InvalidArgumentError, match="operands must be criteria"):
            or_criteria(exists, None)


class TestAndCriteria:
    """Test and_criteria collapsing rules."""

    def test_single_operand_collapses(self, term):
        assert and_criteria(term) is term

    def test_two_operands_preserve_order(self, exists, term):
        result = and_criteria(term, exists)

        assert result == AndCriteria((term, exists))

    def test_no_operands_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="and requires at least one operand"):
            and_criteria()

    def test_nested_composites_not_flattened(self, exists, term):
        """Only the single-operand case is simplified."""
        inner = and_criteria(exists, term)
        result = and_criteria(inner, MissingCriteria("gone"))

        assert result.criteria[0] == inner


class TestCombine:
    """Test combine dispatch on LogicalOperator."""

    def test_combine_and(self, exists, term):
        assert combine(LogicalOperator.AND, exists, term) == AndCriteria((exists, term))

    def test_combine_or(self, exists, term):
        assert combine(LogicalOperator.OR, exists, term) == OrCriteria((exists, term))

    def test_combine_single_collapses(self, exists):
        assert combine(LogicalOperator.OR, exists) is exists

    def test_unknown_operator_raises_error(self, exists):
        with pytest.raises(InvalidArgumentError, match="Unknown logical operator"):
            combine("xor", exists)


class TestNotCriteria:
    """Test not_criteria."""

    def test_wraps(self, exists):
        assert not_criteria(exists) == NotCriteria(exists)

    def test_double_negation_preserved(self, exists):
        """Negating a negation nests rather than cancelling."""
        result = not_criteria(not_criteria(exists))

        assert result == NotCriteria(NotCriteria(exists))
        assert format_criteria(result) == {
            "not": {"not": {"exists": {"field": "fieldShouldExist"}}}
        }


class TestMergeRanges:
    """Test merge_ranges."""

    def test_merges_same_field(self):
        lower = RangeCriteria.single("price", RangeComparison.GREATER_THAN_OR_EQUAL, 10)
        upper = RangeCriteria.single("price", RangeComparison.LESS_THAN, 100)

        merged = merge_ranges(lower, upper)

        assert merged == RangeCriteria(
            "price",
            [
                RangeSpecificationCriteria(RangeComparison.GREATER_THAN_OR_EQUAL, 10),
                RangeSpecificationCriteria(RangeComparison.LESS_THAN, 100),
            ],
        )
        assert format_criteria(merged) == {"range": {"price": {"gte": 10, "lt": 100}}}

    def test_single_range_returned(self):
        only = RangeCriteria.single("price", RangeComparison.LESS_THAN, 100)

        assert merge_ranges(only) is only

    def test_different_fields_raise_error(self):
        with pytest.raises(InvalidArgumentError, match="different fields"):
            merge_ranges(
                RangeCriteria.single("minField", RangeComparison.GREATER_THAN, 1),
                RangeCriteria.single("maxField", RangeComparison.LESS_THAN, 2),
            )

    def test_duplicate_comparison_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="duplicate 'gt' comparison"):
            merge_ranges(
                RangeCriteria.single("price", RangeComparison.GREATER_THAN, 1),
                RangeCriteria.single("price", RangeComparison.GREATER_THAN, 2),
            )

    def test_no_ranges_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="at least one range"):
            merge_ranges()

    def test_non_range_raises_error(self, exists):
        with pytest.raises(InvalidArgumentError, match="must be range criteria"):
            merge_ranges(exists)
