"""Public entry point: look titles up on OMDb and get a table back."""
import logging
from typing import Any

import pandas as pd
import requests

from .aggregator import SearchAggregator
from .credentials import CredentialProvider, static_credential_provider
from .models import QueryMode
from .normalizer import RecordNormalizer
from .query_builder import QueryBuilder
from .transport import OMDB_BASE_URL, TransportClient


log = logging.getLogger(__name__)


class MovieQueryClient:
    """
    Client for the OMDb movie-information service.

    Usage::

        client = MovieQueryClient()
        client.query("id", "tt0078346")
        client.query("title", "Batman", y=1966)
        client.query("search", "Batman", page=2, type="series")
    """

    def __init__(
        self,
        api_key: str | None = None,
        credential_provider: CredentialProvider | None = None,
        session: requests.Session | None = None,
        base_url: str = OMDB_BASE_URL,
        timeout: float | None = None,
        verbose: bool = False,
    ):
        """
        Initialize the client.

        Args:
            api_key: OMDb API key. Takes precedence over credential_provider.
            credential_provider: Callable returning the API key. When neither
                                 this nor api_key is given, the key is read
                                 from OMDB_API_KEY or a .env file.
            session: requests session to reuse for connections.
            base_url: OMDb endpoint URL.
            timeout: Per-request timeout in seconds (None for no override).
            verbose: Echo request diagnostics to stdout.
        """
        if api_key is not None:
            credential_provider = static_credential_provider(api_key)
        self.verbose = verbose
        self.builder = QueryBuilder(credential_provider, verbose=verbose)
        self.transport = TransportClient(
            session=session, base_url=base_url, timeout=timeout, verbose=verbose
        )
        self.normalizer = RecordNormalizer()
        self.aggregator = SearchAggregator(self.transport, verbose=verbose)

    def fetch_records(
        self,
        mode: QueryMode | str,
        value: str | None = None,
        page: int | None = None,
        **extra_filters: Any,
    ) -> list[dict[str, Any]]:
        """
        Run a query and return its records as a list of dicts.

        Args:
            mode: 'id', 'title' or 'search' (or a QueryMode)
            value: IMDb ID, title or search term
            page: Search page to return on its own. When omitted, every page
                  of a search is fetched.
            **extra_filters: Passed through to the service unchecked
                             (e.g. ``type="series"``, ``y=1966``, ``plot="full"``)

        Raises:
            InvalidModeError: If mode is not supported
            MissingCredentialError: If no API key is configured
            TransportError: If an HTTP request fails
            RemoteRejectionError: If the service reports an error
        """
        query = self.builder.make_query(mode, value, page, extra_filters)
        params = self.builder.to_params(query)
        raw = self.transport.send(params)

        if query.is_search:
            return self.aggregator.aggregate(
                raw, params, page_was_explicit=query.page is not None
            )
        return [self.normalizer.normalize(raw)]

    def query(
        self,
        mode: QueryMode | str,
        value: str | None = None,
        page: int | None = None,
        **extra_filters: Any,
    ) -> pd.DataFrame:
        """Run a query and return its records as a DataFrame, one row per record."""
        records = self.fetch_records(mode, value, page, **extra_filters)
        log.debug("Query returned %d record(s)", len(records))
        return pd.DataFrame.from_records(records)


def query(
    mode: QueryMode | str,
    value: str | None = None,
    page: int | None = None,
    **extra_filters: Any,
) -> pd.DataFrame:
    """One-off query using the API key from the environment."""
    return MovieQueryClient().query(mode, value, page, **extra_filters)
