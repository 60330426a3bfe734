"""Request formatting and connection constants."""

# ============================================================================
# Connection Configuration
# ============================================================================

# Default request timeout used when none is configured (seconds)
DEFAULT_TIMEOUT_SECONDS = 10.0

# Environment variables read by ElasticConnection.from_env()
ENV_ELASTIC_ENDPOINT = "ELASTIC_ENDPOINT"
ENV_ELASTIC_TIMEOUT = "ELASTIC_TIMEOUT"
ENV_ELASTIC_INDEX = "ELASTIC_INDEX"

# ============================================================================
# Wire Format
# ============================================================================

# Final path segment of every search request
SEARCH_ENDPOINT = "_search"

__all__ = [
    'DEFAULT_TIMEOUT_SECONDS',
    'ENV_ELASTIC_ENDPOINT',
    'ENV_ELASTIC_INDEX',
    'ENV_ELASTIC_TIMEOUT',
    'SEARCH_ENDPOINT',
]
