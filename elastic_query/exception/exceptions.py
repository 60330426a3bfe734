"""
Exception hierarchy for elastic_query.

All errors are raised eagerly at construction or formatting time.
"""


class ElasticQueryError(Exception):
    """Base class for all elastic_query errors."""

    pass


class InvalidArgumentError(ElasticQueryError, ValueError):
    """Raised when criteria, a request or a formatter input is malformed."""

    pass


class ConfigurationError(ElasticQueryError, ValueError):
    """Raised when the connection configuration is missing or invalid."""

    pass
