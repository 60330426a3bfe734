"""Connection configuration."""

from elastic_query.config.config import ElasticConnection

__all__ = ["ElasticConnection"]
