"""
Search request specification and its fluent builder.

ElasticSearchRequest is the backend-agnostic description of one search:
document type, filter and query criteria, sort, field projection and paging.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from elastic_query.exception import InvalidArgumentError
from elastic_query.search.combinators import and_criteria
from elastic_query.search.criteria import CRITERIA_TYPES, Criteria
from elastic_query.search.sort_option import SortOption


def _check_paging(value: Optional[int], name: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def _as_tuple(value: Any, name: str) -> tuple:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Iterable):
        raise InvalidArgumentError(f"{name} must be a sequence, got {value!r}")
    return tuple(value)


def _check_criteria(value: Optional[Criteria], name: str) -> None:
    if value is not None and not isinstance(value, CRITERIA_TYPES):
        raise InvalidArgumentError(f"{name} must be criteria, got {value!r}")


@dataclass(frozen=True)
class ElasticSearchRequest:
    """Everything needed to format one search request."""

    document_type: str
    from_: Optional[int] = None
    size: Optional[int] = None
    fields: Tuple[str, ...] = ()
    sort_options: Tuple[SortOption, ...] = ()
    filter: Optional[Criteria] = None
    query: Optional[Criteria] = None

    def __post_init__(self) -> None:
        if not isinstance(self.document_type, str) or not self.document_type.strip():
            raise InvalidArgumentError("search request requires a document type")

        _check_paging(self.from_, "from")
        _check_paging(self.size, "size")
        _check_criteria(self.filter, "filter")
        _check_criteria(self.query, "query")

        fields = _as_tuple(self.fields, "fields")
        for field in fields:
            if not isinstance(field, str) or not field.strip():
                raise InvalidArgumentError(f"Invalid field selection: {field!r}")

        sort_options = _as_tuple(self.sort_options, "sort_options")
        for sort_option in sort_options:
            if not isinstance(sort_option, SortOption):
                raise InvalidArgumentError(f"Invalid sort option: {sort_option!r}")

        object.__setattr__(self, "fields", fields)
        object.__setattr__(self, "sort_options", sort_options)

    @classmethod
    def builder(cls, document_type: str) -> "ElasticSearchRequestBuilder":
        """Create a builder for ElasticSearchRequest."""
        return ElasticSearchRequestBuilder(document_type)


class ElasticSearchRequestBuilder:
    """Fluent builder for ElasticSearchRequest."""

    def __init__(self, document_type: str) -> None:
        self._document_type = document_type
        self._from: Optional[int] = None
        self._size: Optional[int] = None
        self._fields: List[str] = []
        self._sort_options: List[SortOption] = []
        self._filter: Optional[Criteria] = None
        self._query: Optional[Criteria] = None

    def filter(self, criteria: Criteria) -> "ElasticSearchRequestBuilder":
        """Replace the filter criteria."""
        self._filter = criteria
        return self

    def and_filter(self, criteria: Criteria) -> "ElasticSearchRequestBuilder":
        """AND criteria onto the existing filter, or set it if there is none."""
        if self._filter is None:
            self._filter = criteria
        else:
            self._filter = and_criteria(self._filter, criteria)
        return self

    def query(self, criteria: Criteria) -> "ElasticSearchRequestBuilder":
        """Set the query criteria."""
        self._query = criteria
        return self

    def sort(
        self, field: str, ascending: bool = True, ignore_unmapped: bool = False
    ) -> "ElasticSearchRequestBuilder":
        """Add a sort on field after any existing sorts."""
        self._sort_options.append(SortOption(field, ascending, ignore_unmapped))
        return self

    def fields(self, *names: str) -> "ElasticSearchRequestBuilder":
        """Add fields to the projection."""
        self._fields.extend(names)
        return self

    def skip(self, count: int) -> "ElasticSearchRequestBuilder":
        """Set the paging offset."""
        self._from = count
        return self

    def take(self, count: int) -> "ElasticSearchRequestBuilder":
        """Set the maximum number of hits."""
        self._size = count
        return self

    def build(self) -> ElasticSearchRequest:
        """Build the search request."""
        return ElasticSearchRequest(
            document_type=self._document_type,
            from_=self._from,
            size=self._size,
            fields=tuple(self._fields),
            sort_options=tuple(self._sort_options),
            filter=self._filter,
            query=self._query,
        )
