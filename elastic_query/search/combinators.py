"""
Combinators for composing search criteria.

These keep the criteria tree minimal: a single operand is returned as-is
rather than wrapped, so the request body never carries a one-element
``and``/``or`` clause.
"""

from typing import Dict

from elastic_query.exception import InvalidArgumentError
from elastic_query.search.criteria import (
    CRITERIA_TYPES,
    AndCriteria,
    Criteria,
    NotCriteria,
    OrCriteria,
    RangeCriteria,
    RangeSpecificationCriteria,
)
from elastic_query.search.operators import LogicalOperator, RangeComparison


def _check_operands(operator: LogicalOperator, criteria: tuple) -> None:
    if not criteria:
        raise InvalidArgumentError(
            f"{operator.value} requires at least one operand"
        )
    for operand in criteria:
        if not isinstance(operand, CRITERIA_TYPES):
            raise InvalidArgumentError(
                f"{operator.value} operands must be criteria, got {operand!r}"
            )


def and_criteria(*criteria: Criteria) -> Criteria:
    """Combine criteria so that all must match."""
    _check_operands(LogicalOperator.AND, criteria)
    if len(criteria) == 1:
        return criteria[0]
    return AndCriteria(criteria)


def or_criteria(*criteria: Criteria) -> Criteria:
    """Combine criteria so that any may match."""
    _check_operands(LogicalOperator.OR, criteria)
    if len(criteria) == 1:
        return criteria[0]
    return OrCriteria(criteria)


def combine(operator: LogicalOperator, *criteria: Criteria) -> Criteria:
    """Combine criteria with the given logical operator."""
    if operator is LogicalOperator.AND:
        return and_criteria(*criteria)
    if operator is LogicalOperator.OR:
        return or_criteria(*criteria)
    raise InvalidArgumentError(f"Unknown logical operator: {operator!r}")


def not_criteria(criteria: Criteria) -> NotCriteria:
    """Negate criteria. Always wraps, even if it is already a negation."""
    return NotCriteria(criteria)


def merge_ranges(*ranges: RangeCriteria) -> RangeCriteria:
    """
    Merge range criteria on the same field into one range.

    Bounds keep their input order. Every range must target the same field and
    each comparison may appear only once across all of them.

    Raises:
        InvalidArgumentError: If no ranges are given, fields differ, or a
            comparison is repeated.
    """
    if not ranges:
        raise InvalidArgumentError("merge_ranges requires at least one range")
    for candidate in ranges:
        if not isinstance(candidate, RangeCriteria):
            raise InvalidArgumentError(
                f"merge_ranges operands must be range criteria, got {candidate!r}"
            )
    if len(ranges) == 1:
        return ranges[0]

    field = ranges[0].field
    merged: Dict[RangeComparison, RangeSpecificationCriteria] = {}
    for candidate in ranges:
        if candidate.field != field:
            raise InvalidArgumentError(
                f"Cannot merge ranges on different fields: '{field}' and '{candidate.field}'"
            )
        for specification in candidate.specifications:
            if specification.comparison in merged:
                raise InvalidArgumentError(
                    f"Cannot merge ranges on '{field}': duplicate "
                    f"'{specification.comparison.value}' comparison"
                )
            merged[specification.comparison] = specification

    return RangeCriteria(field, tuple(merged.values()))
