"""
Operator definitions for search criteria.

RangeComparison values are the keys Elasticsearch expects inside a
``range`` clause, so they can be written to the body directly.
"""

from enum import Enum


class RangeComparison(Enum):
    """Comparisons allowed inside a range criteria."""

    LESS_THAN = "lt"
    LESS_THAN_OR_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_THAN_OR_EQUAL = "gte"


class LogicalOperator(Enum):
    """Logical operators for combining search criteria."""

    AND = "and"
    OR = "or"
