"""Translate a caller's lookup into OMDb request parameters."""
import logging
from types import MappingProxyType
from typing import Any, Mapping

from .credentials import CredentialProvider, env_credential_provider
from .errors import InvalidModeError
from .models import DEFAULT_VALUES, MODE_PARAMS, Query, QueryMode


log = logging.getLogger(__name__)

API_KEY_PARAM = "apikey"
FORMAT_PARAM = "r"
PAGE_PARAM = "page"

# Keys the builder manages itself; callers cannot override them
RESERVED_PARAMS = frozenset(
    set(MODE_PARAMS.values()) | {FORMAT_PARAM, PAGE_PARAM, API_KEY_PARAM}
)


def coerce_mode(mode: QueryMode | str) -> QueryMode:
    """Accept a QueryMode or its string value ('id', 'title', 'search')."""
    if isinstance(mode, QueryMode):
        return mode
    try:
        return QueryMode(mode)
    except ValueError:
        raise InvalidModeError(mode) from None


def render_params(params: Mapping[str, str]) -> str:
    """Human-readable rendering of request parameters, minus the API key."""
    return ", ".join(
        f"{key}={value}" for key, value in params.items() if key != API_KEY_PARAM
    )


class QueryBuilder:
    """Builds request parameters, including the API key, for one query."""

    def __init__(
        self,
        credential_provider: CredentialProvider | None = None,
        verbose: bool = False,
    ):
        """
        Initialize the builder.

        Args:
            credential_provider: Callable returning the API key. Defaults to
                                 the environment/.env lookup.
            verbose: Echo the assembled parameters to stdout.
        """
        self.credential_provider = credential_provider or env_credential_provider
        self.verbose = verbose

    def _log(self, message: str) -> None:
        log.debug(message)
        if self.verbose:
            print(f"  [OMDb] {message}")

    def make_query(
        self,
        mode: QueryMode | str,
        value: str | None = None,
        page: int | None = None,
        extra_filters: Mapping[str, Any] | None = None,
    ) -> Query:
        """
        Validate caller input and freeze it into a Query.

        Raises:
            InvalidModeError: If mode is not supported
            ValueError: If page is not a positive integer
        """
        mode = coerce_mode(mode)
        if value is None or value == "":
            value = DEFAULT_VALUES[mode]

        if mode is QueryMode.BY_SEARCH:
            if page is not None and (
                isinstance(page, bool) or int(page) != page or int(page) < 1
            ):
                raise ValueError(f"page must be a positive integer, got {page!r}")
            page = int(page) if page is not None else None
        else:
            page = None

        filters = {}
        for key, filter_value in (extra_filters or {}).items():
            if key in RESERVED_PARAMS:
                log.debug("Ignoring reserved filter %r", key)
                continue
            if filter_value is None:
                continue
            filters[key] = filter_value

        return Query(
            mode=mode,
            value=str(value),
            page=page,
            extra_filters=MappingProxyType(filters),
        )

    def to_params(self, query: Query) -> dict[str, str]:
        """Flatten a Query into string-typed request parameters."""
        params: dict[str, str] = {MODE_PARAMS[query.mode]: query.value}
        if query.is_search:
            params[PAGE_PARAM] = str(query.page or 1)

        for key, value in query.extra_filters.items():
            params[key] = str(value)
        params[FORMAT_PARAM] = "json"

        self._log(f"Query parameters: {render_params(params)}")

        params[API_KEY_PARAM] = self.credential_provider()
        return params

    def build(
        self,
        mode: QueryMode | str,
        value: str | None = None,
        page: int | None = None,
        extra_filters: Mapping[str, Any] | None = None,
    ) -> dict[str, str]:
        """Shortcut for ``to_params(make_query(...))``."""
        return self.to_params(self.make_query(mode, value, page, extra_filters))
