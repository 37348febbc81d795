"""
moviequery - OMDb client

Looks up movies, series and games on OMDb and returns the results as
uniform tables, paging through searches automatically.
"""
from .models import Query, QueryMode
from .errors import (
    OMDbError,
    InvalidModeError,
    MissingCredentialError,
    TransportError,
    RemoteRejectionError,
    FieldCoercionWarning
)
from .credentials import load_api_key
from .query_builder import QueryBuilder
from .transport import TransportClient
from .normalizer import RecordNormalizer, start_year
from .aggregator import SearchAggregator
from .client import MovieQueryClient, query

__version__ = "0.1.0"
__all__ = [
    "Query",
    "QueryMode",
    "OMDbError",
    "InvalidModeError",
    "MissingCredentialError",
    "TransportError",
    "RemoteRejectionError",
    "FieldCoercionWarning",
    "load_api_key",
    "QueryBuilder",
    "TransportClient",
    "RecordNormalizer",
    "start_year",
    "SearchAggregator",
    "MovieQueryClient",
    "query",
]
