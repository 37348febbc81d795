"""HTTP transport for the OMDb API."""
import logging
from typing import Any, Mapping

import requests

from .errors import RemoteRejectionError, TransportError


log = logging.getLogger(__name__)

OMDB_BASE_URL = "https://www.omdbapi.com/"

# Ways the service says "nothing here"
MISSING_TOKENS = ("", "N/A")

RESPONSE_FIELD = "Response"
ERROR_FIELD = "Error"
SEARCH_FIELD = "Search"


def is_missing(value: Any) -> bool:
    """True for None, empty strings/collections and the 'N/A' marker."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() in MISSING_TOKENS
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def normalize_missing(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Replace every absent-looking top-level value with None."""
    return {key: None if is_missing(value) else value for key, value in payload.items()}


class TransportClient:
    """Sends one GET per call to the fixed OMDb endpoint."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = OMDB_BASE_URL,
        timeout: float | None = None,
        verbose: bool = False,
    ):
        """
        Initialize the transport.

        Args:
            session: requests session to send through. A new one is created
                     when not given.
            base_url: Endpoint URL.
            timeout: Per-request timeout in seconds; None keeps the
                     requests default.
            verbose: Echo request diagnostics to stdout.
        """
        self.session = session or requests.Session()
        self.base_url = base_url
        self.timeout = timeout
        self.verbose = verbose

    def _log(self, message: str) -> None:
        log.debug(message)
        if self.verbose:
            print(f"  [OMDb] {message}")

    def send(self, params: Mapping[str, str]) -> dict[str, Any]:
        """
        Perform the request and classify the outcome.

        Args:
            params: Request parameters including the API key

        Returns:
            Decoded JSON body with missing values normalized to None

        Raises:
            TransportError: Connection failure, non-2xx status or undecodable body
            RemoteRejectionError: The body reports ``Response: "False"``
        """
        try:
            response = self.session.get(self.base_url, params=dict(params), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(None, f"Request to {self.base_url} failed: {e}") from e

        self._log(f"Response status: {response.status_code}")
        if not 200 <= response.status_code < 300:
            raise TransportError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(response.status_code, "Response body is not valid JSON") from e
        if not isinstance(data, dict):
            raise TransportError(response.status_code, "Response body is not a JSON object")

        data = normalize_missing(data)
        if isinstance(data.get(SEARCH_FIELD), list):
            data[SEARCH_FIELD] = [
                normalize_missing(entry) if isinstance(entry, dict) else entry
                for entry in data[SEARCH_FIELD]
            ]

        if str(data.get(RESPONSE_FIELD)).lower() != "true":
            message = data.get(ERROR_FIELD) or "Unknown error"
            self._log(f"Service rejected request: {message}")
            raise RemoteRejectionError(message)

        if data.get(SEARCH_FIELD) is not None:
            self._log(f"Found {len(data[SEARCH_FIELD])} results")
        return data
