"""
Search criteria for building Elasticsearch filters and queries.

Each criteria type is an immutable value object describing one node of the
filter/query tree. Construction invariants are checked eagerly; rendering to
JSON lives entirely in elastic_query.search.formatter.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Any, Tuple, Union

from elastic_query.exception import InvalidArgumentError
from elastic_query.search.operators import RangeComparison


def _require_field(field: Any, kind: str) -> None:
    if not isinstance(field, str) or not field.strip():
        raise InvalidArgumentError(f"{kind} requires a non-empty field name")


def _term_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class TermCriteria:
    """
    Field must equal one of the given values.

    A single value is written as a ``term`` clause, several values as ``terms``.
    Values may be passed as one string or as a sequence; booleans become
    "true"/"false" and other non-string values are converted with str().
    """

    field: str
    values: Tuple[str, ...]

    def __post_init__(self) -> None:
        _require_field(self.field, "term criteria")
        values = self.values
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            values = (values,)
        values = tuple(values)
        if any(value is None for value in values):
            raise InvalidArgumentError(
                f"term criteria for '{self.field}' cannot contain None"
            )
        normalized = tuple(_term_value(value) for value in values)
        if not normalized:
            raise InvalidArgumentError(
                f"term criteria for '{self.field}' requires at least one value"
            )
        object.__setattr__(self, "values", normalized)

    @property
    def name(self) -> str:
        return "term" if len(self.values) == 1 else "terms"


@dataclass(frozen=True)
class ExistsCriteria:
    """Field must be present on the document."""

    field: str

    def __post_init__(self) -> None:
        _require_field(self.field, "exists criteria")

    @property
    def name(self) -> str:
        return "exists"


@dataclass(frozen=True)
class MissingCriteria:
    """Field must be absent from the document."""

    field: str

    def __post_init__(self) -> None:
        _require_field(self.field, "missing criteria")

    @property
    def name(self) -> str:
        return "missing"


@dataclass(frozen=True)
class NotCriteria:
    """Inverts the wrapped criteria. Nested negations are kept as written."""

    criteria: "Criteria"

    def __post_init__(self) -> None:
        if not isinstance(self.criteria, CRITERIA_TYPES):
            raise InvalidArgumentError(
                f"not criteria requires a criteria operand, got {self.criteria!r}"
            )

    @property
    def name(self) -> str:
        return "not"


def _normalize_children(criteria: Iterable["Criteria"], kind: str) -> Tuple["Criteria", ...]:
    if not isinstance(criteria, Iterable):
        raise InvalidArgumentError(
            f"{kind} operands must be a sequence of criteria, got {criteria!r}"
        )
    children = tuple(criteria)
    if not children:
        raise InvalidArgumentError(f"{kind} requires at least one operand")
    for child in children:
        if not isinstance(child, CRITERIA_TYPES):
            raise InvalidArgumentError(
                f"{kind} operands must be criteria, got {child!r}"
            )
    return children


@dataclass(frozen=True)
class AndCriteria:
    """All child criteria must match. Prefer and_criteria() to build one."""

    criteria: Tuple["Criteria", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "criteria", _normalize_children(self.criteria, "and"))

    @property
    def name(self) -> str:
        return "and"


@dataclass(frozen=True)
class OrCriteria:
    """Any child criteria must match. Prefer or_criteria() to build one."""

    criteria: Tuple["Criteria", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "criteria", _normalize_children(self.criteria, "or"))

    @property
    def name(self) -> str:
        return "or"


@dataclass(frozen=True)
class RangeSpecificationCriteria:
    """One bound of a range: a comparison and the value to compare against."""

    comparison: RangeComparison
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.comparison, RangeComparison):
            raise InvalidArgumentError(
                f"Unknown range comparison: {self.comparison!r}"
            )
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float, str, date)):
            raise InvalidArgumentError(
                f"Range value must be a number, string or date, got {value!r}"
            )
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidArgumentError(f"Range value must be finite, got {value!r}")

    @property
    def name(self) -> str:
        return self.comparison.value


@dataclass(frozen=True)
class RangeCriteria:
    """
    Field must fall within every one of the given bounds.

    At most one bound per comparison is allowed; use merge_ranges() to fold
    single-bound ranges on the same field into one.
    """

    field: str
    specifications: Tuple[RangeSpecificationCriteria, ...]

    def __post_init__(self) -> None:
        _require_field(self.field, "range criteria")
        if not isinstance(self.specifications, Iterable):
            raise InvalidArgumentError(
                f"range criteria for '{self.field}' requires a sequence of specifications, "
                f"got {self.specifications!r}"
            )
        specifications = tuple(self.specifications)
        if not specifications:
            raise InvalidArgumentError(
                f"range criteria for '{self.field}' requires at least one specification"
            )

        seen = set()
        for specification in specifications:
            if not isinstance(specification, RangeSpecificationCriteria):
                raise InvalidArgumentError(
                    f"range criteria for '{self.field}' got {specification!r}"
                )
            if specification.comparison in seen:
                raise InvalidArgumentError(
                    f"range criteria for '{self.field}' has duplicate "
                    f"'{specification.comparison.value}' comparison"
                )
            seen.add(specification.comparison)

        object.__setattr__(self, "specifications", specifications)

    @classmethod
    def single(cls, field: str, comparison: RangeComparison, value: Any) -> "RangeCriteria":
        """Create a range with exactly one bound."""
        return cls(field, (RangeSpecificationCriteria(comparison, value),))

    @property
    def name(self) -> str:
        return "range"


@dataclass(frozen=True)
class QueryStringCriteria:
    """Free-text query in Lucene query-string syntax. Query context only."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("query string criteria requires non-empty text")

    @property
    def name(self) -> str:
        return "query_string"


Criteria = Union[
    TermCriteria,
    ExistsCriteria,
    MissingCriteria,
    NotCriteria,
    AndCriteria,
    OrCriteria,
    RangeCriteria,
    QueryStringCriteria,
]

CRITERIA_TYPES = (
    TermCriteria,
    ExistsCriteria,
    MissingCriteria,
    NotCriteria,
    AndCriteria,
    OrCriteria,
    RangeCriteria,
    QueryStringCriteria,
)
