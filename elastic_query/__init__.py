"""
Elastic query request builder.

Builds the URL path and JSON body of an Elasticsearch ``_search`` request
from a backend-agnostic criteria tree, sort order, field projection and paging.
"""

__version__ = "0.1.0"
