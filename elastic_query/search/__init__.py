"""
Search request module.

Criteria types and combinators for describing filters and queries, the
request specification, and the formatter that renders it for Elasticsearch.
"""

from elastic_query.search.combinators import (
    and_criteria,
    combine,
    merge_ranges,
    not_criteria,
    or_criteria,
)
from elastic_query.search.criteria import (
    AndCriteria,
    Criteria,
    ExistsCriteria,
    MissingCriteria,
    NotCriteria,
    OrCriteria,
    QueryStringCriteria,
    RangeCriteria,
    RangeSpecificationCriteria,
    TermCriteria,
)
from elastic_query.search.formatter import (
    FormattedRequest,
    PostBodyRequestFormatter,
    format_criteria,
    format_request,
)
from elastic_query.search.operators import LogicalOperator, RangeComparison
from elastic_query.search.request import ElasticSearchRequest, ElasticSearchRequestBuilder
from elastic_query.search.sort_option import SortOption

__all__ = [
    "AndCriteria",
    "Criteria",
    "ElasticSearchRequest",
    "ElasticSearchRequestBuilder",
    "ExistsCriteria",
    "FormattedRequest",
    "LogicalOperator",
    "MissingCriteria",
    "NotCriteria",
    "OrCriteria",
    "PostBodyRequestFormatter",
    "QueryStringCriteria",
    "RangeComparison",
    "RangeCriteria",
    "RangeSpecificationCriteria",
    "SortOption",
    "TermCriteria",
    "and_criteria",
    "combine",
    "format_criteria",
    "format_request",
    "merge_ranges",
    "not_criteria",
    "or_criteria",
]
