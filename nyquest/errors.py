"""Errors raised while building clients and performing requests."""

from __future__ import annotations


class Error(Exception):
    """Base class of errors produced by a backend while performing a request."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class InvalidUrlError(Error):
    """The backend does not recognise the input as a valid URL."""

    default_message = "Invalid URL"


class TransportError(Error):
    """A generic I/O error reported by the backend.

    The underlying exception, if any, is available as ``__cause__``.
    """

    default_message = "IO Error"


class JsonError(Error):
    """A value could not be serialised to, or deserialised from, JSON."""

    default_message = "JSON ser/de Error"


class ResponseTooLargeError(Error):
    """The response body exceeds the configured maximum buffer size."""

    default_message = "Response body size exceeds max limit"


class RequestTimeoutError(Error):
    """The request did not finish within the configured timeout."""

    default_message = "Request is not finished within timeout"


class BuildClientError(Exception):
    """Base class of errors produced while building a client."""


class NoBackendError(BuildClientError):
    """No backend has been registered."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            if message is not None
            else "No backend registered. Please find a backend package and call "
            "its `register` function at program startup."
        )


class BackendBuildError(BuildClientError):
    """The backend reported an error while creating the client."""

    def __init__(self, error: Error) -> None:
        self.error = error
        super().__init__(f"Error creating client: {error}")