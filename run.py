#!/usr/bin/env python3
"""
Print the Elasticsearch request for a sample search.

Builds the request for people tagged "tech" in the state of WA and prints the
path and body that would be POSTed. No request is sent.

    python run.py

Environment variables:
    ELASTIC_ENDPOINT: Elasticsearch base URL (default: http://localhost:9200)
    ELASTIC_TIMEOUT: Request timeout in seconds (default: 10)
    ELASTIC_INDEX: Index to search (default: none)
"""
import logging
import os
import sys

from elastic_query.config import ElasticConnection
from elastic_query.constants import ENV_ELASTIC_ENDPOINT
from elastic_query.search import ElasticSearchRequest, TermCriteria, and_criteria, format_request

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if os.getenv("APP_DEBUG", "false").lower() == "true" else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    os.environ.setdefault(ENV_ELASTIC_ENDPOINT, "http://localhost:9200")
    connection = ElasticConnection.from_env()

    search_request = (
        ElasticSearchRequest.builder("people")
        .filter(and_criteria(TermCriteria("tags", "tech"), TermCriteria("state", "WA")))
        .sort("name")
        .take(25)
        .build()
    )

    path, body = format_request(connection, search_request)
    print(f"POST {connection.endpoint.rstrip('/')}{path}")
    print(body)
