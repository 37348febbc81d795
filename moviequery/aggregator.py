"""Collect every page of an OMDb search into one ordered record list."""
import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping

from .normalizer import coerce_field, parse_int, shape_fields, start_year
from .query_builder import PAGE_PARAM
from .transport import SEARCH_FIELD, TransportClient


log = logging.getLogger(__name__)

PAGE_SIZE = 10
TOTAL_RESULTS_FIELD = "totalResults"


@dataclass
class PageCursor:
    """Tracks progress through the pages of one search."""
    total_results: int
    page: int = 1
    page_size: int = PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_results / self.page_size)

    def remaining_pages(self) -> range:
        """Page numbers still to be fetched after the current one."""
        return range(self.page + 1, self.total_pages + 1)


def sort_key(record: Mapping[str, Any]) -> tuple[str, str, str]:
    """Order by title, media type, then the display year compared as text."""
    return (
        record.get("title") or "",
        record.get("type") or "",
        record.get("year") or "",
    )


def _page_results(raw: Mapping[str, Any]) -> list[dict[str, Any]]:
    return [entry for entry in raw.get(SEARCH_FIELD) or [] if isinstance(entry, dict)]


class SearchAggregator:
    """Pages through search results using a TransportClient."""

    def __init__(self, transport: TransportClient, verbose: bool = False):
        self.transport = transport
        self.verbose = verbose

    def _log(self, message: str) -> None:
        log.debug(message)
        if self.verbose:
            print(f"  [OMDb] {message}")

    def aggregate(
        self,
        first_page_raw: Mapping[str, Any],
        params_used: Mapping[str, str],
        page_was_explicit: bool,
    ) -> list[dict[str, Any]]:
        """
        Build the full, sorted record list for a search.

        Args:
            first_page_raw: Normalized payload of the page already fetched
            params_used: Parameters that produced it; reused for other pages
            page_was_explicit: The caller pinned a page, so fetch nothing more

        Returns:
            Records sorted by (title, type, year), each with ``start_year`` and
            ``total_results`` attached

        Raises:
            TransportError, RemoteRejectionError: If any further page fails.
                Pages already fetched are discarded.
        """
        total_results = coerce_field(
            TOTAL_RESULTS_FIELD, first_page_raw.get(TOTAL_RESULTS_FIELD), parse_int
        )
        entries = _page_results(first_page_raw)
        if total_results is None:
            total_results = len(entries)

        cursor = PageCursor(
            total_results=total_results,
            page=int(params_used.get(PAGE_PARAM, 1)),
        )
        self._log(
            f"Search reports {cursor.total_results} results "
            f"over {cursor.total_pages} page(s)"
        )

        if not page_was_explicit:
            for page in cursor.remaining_pages():
                params = dict(params_used)
                params[PAGE_PARAM] = str(page)
                self._log(f"Fetching page {page}/{cursor.total_pages}")
                entries.extend(_page_results(self.transport.send(params)))
                cursor.page = page

        records = []
        for entry in entries:
            record = shape_fields(entry)
            record["start_year"] = start_year(record.get("year"))
            record["total_results"] = cursor.total_results
            records.append(record)

        records.sort(key=sort_key)
        return records
