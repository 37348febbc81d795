"""Exceptions and warnings raised by the moviequery package."""


class OMDbError(Exception):
    """Base class for all errors raised by this package."""
    pass


class InvalidModeError(OMDbError):
    """Raised when a query mode is not one of the supported modes."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(
            f"Unsupported query mode: {mode!r} (expected 'id', 'title' or 'search')"
        )


class MissingCredentialError(OMDbError):
    """Raised when no API key can be found."""
    pass


class TransportError(OMDbError):
    """The HTTP call failed or returned a non-2xx status."""

    def __init__(self, status_code: int | None, message: str = ""):
        self.status_code = status_code
        if not message:
            message = f"HTTP request failed with status {status_code}"
        super().__init__(message)


class RemoteRejectionError(OMDbError):
    """The service answered but reported a failure of its own.

    ``message`` holds the service's error text verbatim, e.g.
    ``"Incorrect IMDb ID."`` or ``"Too many results."``.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FieldCoercionWarning(UserWarning):
    """A numeric or date field was present but could not be parsed."""
    pass
