"""Blocking client and response.

A blocking client performs each request on the calling thread and returns
once the response is available or an error occurs.
"""

from __future__ import annotations

import contextlib
import io
import json as _json
from collections.abc import Iterator
from typing import Any

from nyquest import backend as _backend
from nyquest.errors import Error, JsonError, TransportError
from nyquest.request import Request


@contextlib.contextmanager
def _backend_errors() -> Iterator[None]:
    """Turn I/O errors escaping a backend into ``TransportError``."""
    try:
        yield
    except Error:
        raise
    except OSError as exc:
        raise TransportError() from exc


class _ResponseReader(io.RawIOBase):
    """A raw binary stream over a backend response body."""

    def __init__(self, inner: _backend.BlockingResponse) -> None:
        super().__init__()
        self._inner = inner

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        with _backend_errors():
            data = self._inner.read(len(buffer))
        count = len(data)
        buffer[:count] = data
        return count


class Response:
    """A response returned by a blocking client.

    The body can be taken once, through ``text``, ``bytes``, ``json`` or
    ``into_read``.
    """

    def __init__(self, inner: _backend.BlockingResponse) -> None:
        if not isinstance(inner, _backend.BlockingResponse):
            raise TypeError(
                f"expected a BlockingResponse, got {type(inner).__name__}"
            )
        self._inner = inner
        self._consumed = False

    def status(self) -> int:
        """The HTTP status code."""
        return self._inner.status()

    def content_length(self) -> int | None:
        """The ``content-length`` of the response, if known by the backend."""
        return self._inner.content_length()

    def get_header(self, header: str) -> list[str]:
        """All values of the given header.

        Several values may be returned if the header appears more than once,
        depending on the backend.
        """
        with _backend_errors():
            return list(self._inner.get_header(header))

    def _take(self) -> _backend.BlockingResponse:
        if self._consumed:
            raise RuntimeError("response body has already been consumed")
        self._consumed = True
        return self._inner

    def text(self) -> str:
        """The whole response body as text.

        Raises ``ResponseTooLargeError`` if the body exceeds the client's
        maximum response buffer size.
        """
        inner = self._take()
        with _backend_errors():
            return inner.text()

    def bytes(self) -> bytes:
        """The whole response body as bytes.

        Raises ``ResponseTooLargeError`` if the body exceeds the client's
        maximum response buffer size.
        """
        inner = self._take()
        with _backend_errors():
            return inner.bytes()

    def json(self) -> Any:
        """The whole response body decoded as JSON."""
        data = self.bytes()
        try:
            return _json.loads(data)
        except ValueError as exc:
            raise JsonError() from exc

    def into_read(self) -> io.BufferedReader:
        """A binary file object streaming the response body."""
        return io.BufferedReader(_ResponseReader(self._take()))

    def __repr__(self) -> str:
        return (
            f"BlockingResponse(status={self.status()!r}, "
            f"content_length={self.content_length()!r}, "
            f"inner={self._inner.describe()})"
        )


class BlockingClient:
    """A blocking HTTP client.

    Depending on the backend it may hold pools of connections or threads, so
    create one and reuse it. It may be shared between threads.
    """

    def __init__(self, client: _backend.BlockingClient) -> None:
        if not isinstance(client, _backend.BlockingClient):
            raise TypeError(
                f"expected a BlockingClient backend client, got {type(client).__name__}"
            )
        self._client = client

    def request(self, req: Request) -> Response:
        """Send a request and wait for its response."""
        if not isinstance(req, Request):
            raise TypeError(f"expected a Request, got {type(req).__name__}")
        with _backend_errors():
            response = self._client.request(req)
        return Response(response)

    def clone(self) -> BlockingClient:
        """A client sharing this one's backend configuration."""
        return BlockingClient(self._client.clone())

    def __repr__(self) -> str:
        return self._client.describe()