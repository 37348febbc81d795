"""Data models for the moviequery package."""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class QueryMode(str, Enum):
    """How a query identifies what it is looking for."""
    BY_ID = "id"
    BY_TITLE = "title"
    BY_SEARCH = "search"


# Wire-level parameter key for each mode
MODE_PARAMS = {
    QueryMode.BY_ID: "i",
    QueryMode.BY_TITLE: "t",
    QueryMode.BY_SEARCH: "s",
}

# Used when no value is supplied; handy for trying the client out
DEFAULT_VALUES = {
    QueryMode.BY_ID: "tt0078346",
    QueryMode.BY_TITLE: "Superman",
    QueryMode.BY_SEARCH: "Batman",
}


@dataclass(frozen=True)
class Query:
    """One intended lookup against the movie-information service."""
    mode: QueryMode
    value: str
    page: int | None = None
    extra_filters: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_search(self) -> bool:
        return self.mode is QueryMode.BY_SEARCH
