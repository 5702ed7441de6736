from meilisearch_client.core.client import Client
from meilisearch_client.core.config import ClientSettings, load_settings
from meilisearch_client.core.exceptions import (
    ConnectionFailedError,
    DecodeError,
    HTTPStatusError,
    MalformedResponseError,
    SearchError,
    TransportError,
)
from meilisearch_client.core.index import Index
from meilisearch_client.models.error import APIError
from meilisearch_client.models.search_results import SearchResults, parse_search_results
from meilisearch_client.search.query import FacetsDistribution, Query

__all__ = [
    "APIError",
    "Client",
    "ClientSettings",
    "ConnectionFailedError",
    "DecodeError",
    "FacetsDistribution",
    "HTTPStatusError",
    "Index",
    "MalformedResponseError",
    "Query",
    "SearchError",
    "SearchResults",
    "TransportError",
    "load_settings",
    "parse_search_results",
]
