"""
Formats an ElasticSearchRequest as a POST ``_search`` request.

All rendering of criteria to the Elasticsearch JSON shapes happens here, in a
single dispatch over the criteria types.
"""

import json
import logging
from datetime import date
from typing import Any, Dict, NamedTuple, Union
from urllib.parse import quote

from elastic_query.config import ElasticConnection
from elastic_query.constants import SEARCH_ENDPOINT
from elastic_query.exception import ConfigurationError, InvalidArgumentError
from elastic_query.search.criteria import (
    AndCriteria,
    Criteria,
    ExistsCriteria,
    MissingCriteria,
    NotCriteria,
    OrCriteria,
    QueryStringCriteria,
    RangeCriteria,
    TermCriteria,
)
from elastic_query.search.request import ElasticSearchRequest
from elastic_query.search.sort_option import SortOption

logger = logging.getLogger(__name__)


class FormattedRequest(NamedTuple):
    """Path and JSON body of a search request, ready to POST."""

    path: str
    body: str


class PostBodyRequestFormatter:
    """
    Formats a search request with everything in the POST body.

    The path and body are recomputed on every access; the formatter holds no
    state beyond its two inputs, so one instance may be shared across threads.
    """

    def __init__(
        self, connection: ElasticConnection, search_request: ElasticSearchRequest
    ) -> None:
        if not isinstance(connection, ElasticConnection):
            raise ConfigurationError(
                f"Formatter requires an ElasticConnection, got {connection!r}"
            )
        if not isinstance(search_request, ElasticSearchRequest):
            raise InvalidArgumentError(
                f"Formatter requires an ElasticSearchRequest, got {search_request!r}"
            )
        self.connection = connection
        self.search_request = search_request

    @property
    def path(self) -> str:
        """URL path: /{index}/{type}/_search, index omitted when not configured."""
        segments = [self.search_request.document_type, SEARCH_ENDPOINT]
        if self.connection.index:
            segments.insert(0, self.connection.index)
        return "/" + "/".join(quote(segment, safe="") for segment in segments)

    @property
    def uri(self) -> str:
        """Absolute URL of the search request."""
        return self.connection.endpoint.rstrip("/") + self.path

    @property
    def body(self) -> str:
        """JSON request body."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the request body as a dict.

        Only sections present on the request are included, in the order
        filter, query, sort, fields, from, size.
        """
        request = self.search_request
        body: Dict[str, Any] = {}

        if request.filter is not None:
            body["filter"] = self._format_filter(request.filter)

        if request.query is not None:
            body["query"] = self._format_query(request.query)

        if request.sort_options:
            body["sort"] = [self._format_sort_option(option) for option in request.sort_options]

        if request.fields:
            body["fields"] = list(request.fields)

        if request.from_ is not None:
            body["from"] = request.from_

        if request.size is not None:
            body["size"] = request.size

        return body

    def format(self) -> FormattedRequest:
        """Format the request as a (path, body) pair."""
        path = self.path
        body = self.body
        logger.debug(f"Formatted search request for {path}: {body}")
        return FormattedRequest(path=path, body=body)

    @staticmethod
    def _format_filter(criteria: Criteria) -> Dict[str, Any]:
        if isinstance(criteria, QueryStringCriteria):
            raise InvalidArgumentError(
                "query_string criteria cannot be used in filter context"
            )
        return PostBodyRequestFormatter._format_criteria(criteria)

    @staticmethod
    def _format_query(criteria: Criteria) -> Dict[str, Any]:
        if isinstance(criteria, (NotCriteria, AndCriteria, OrCriteria)):
            raise InvalidArgumentError(
                f"'{criteria.name}' criteria cannot be used in query context"
            )
        return PostBodyRequestFormatter._format_criteria(criteria)

    @staticmethod
    def _format_criteria(criteria: Criteria) -> Dict[str, Any]:
        """Render a single criteria node and its children."""
        if isinstance(criteria, TermCriteria):
            if len(criteria.values) == 1:
                return {"term": {criteria.field: criteria.values[0]}}
            return {"terms": {criteria.field: list(criteria.values)}}

        if isinstance(criteria, (ExistsCriteria, MissingCriteria)):
            return {criteria.name: {"field": criteria.field}}

        if isinstance(criteria, NotCriteria):
            return {"not": PostBodyRequestFormatter._format_filter(criteria.criteria)}

        if isinstance(criteria, (AndCriteria, OrCriteria)):
            return {
                criteria.name: [
                    PostBodyRequestFormatter._format_filter(child)
                    for child in criteria.criteria
                ]
            }

        if isinstance(criteria, RangeCriteria):
            bounds = {
                specification.name: PostBodyRequestFormatter._format_value(specification.value)
                for specification in criteria.specifications
            }
            return {"range": {criteria.field: bounds}}

        if isinstance(criteria, QueryStringCriteria):
            return {"query_string": {"query": criteria.value}}

        raise InvalidArgumentError(f"Unknown criteria type: {type(criteria).__name__}")

    @staticmethod
    def _format_sort_option(option: SortOption) -> Union[str, Dict[str, Any]]:
        if option.ignore_unmapped:
            return {option.name: {"ignore_unmapped": True, "order": option.order}}
        if option.ascending:
            return option.name
        return {option.name: "desc"}

    @staticmethod
    def _format_value(value: Any) -> Any:
        if isinstance(value, date):
            return value.isoformat()
        return value


def format_request(
    connection: ElasticConnection, search_request: ElasticSearchRequest
) -> FormattedRequest:
    """Format a search request as a (path, body) pair."""
    return PostBodyRequestFormatter(connection, search_request).format()


def format_criteria(criteria: Criteria) -> Dict[str, Any]:
    """Render criteria as it would appear in filter context."""
    return PostBodyRequestFormatter._format_filter(criteria)

