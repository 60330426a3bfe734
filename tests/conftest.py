"""Pytest configuration for tests.

Sets up Python path and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from elastic_query.config import ElasticConnection  # noqa: E402


@pytest.fixture
def default_connection():
    """Connection without an index."""
    return ElasticConnection(endpoint="http://a.b.com:9000/", timeout=10)


@pytest.fixture
def index_connection():
    """Connection with an index configured."""
    return ElasticConnection(endpoint="http://a.b.com:9000/", timeout=10, index="myIndex")
