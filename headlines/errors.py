from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a required setting such as the API key is missing."""


class FetchError(Exception):
    """Base class for a failed attempt against the headlines endpoint."""

    kind = "FetchError"

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.kind}: {detail}" if detail else self.kind


class TransportError(FetchError):
    """Network unreachable, DNS failure or timeout."""

    kind = "TransportError"


class HttpError(FetchError):
    """Remote answered with a non-success status."""

    kind = "HttpError"

    def __init__(self, status: int, remote_message: str | None = None) -> None:
        self.status = status
        self.remote_message = remote_message
        super().__init__(f"{status} - {remote_message or 'Unknown issue'}")


class ParseError(FetchError):
    """Response body was not the expected JSON shape."""

    kind = "ParseError"
