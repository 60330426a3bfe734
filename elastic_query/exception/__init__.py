"""Exceptions raised while building or formatting search requests."""

from elastic_query.exception.exceptions import (
    ConfigurationError,
    ElasticQueryError,
    InvalidArgumentError,
)

__all__ = [
    "ConfigurationError",
    "ElasticQueryError",
    "InvalidArgumentError",
]
