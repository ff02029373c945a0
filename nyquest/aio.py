"""Async client and response.

An async client does not need an event loop of its own from the backend;
its requests and body reads are awaited.
"""

from __future__ import annotations

import contextlib
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


class AsyncResponse:
    """A response returned by an async client.

    The body can be taken once, through ``text``, ``bytes`` or ``json``.
    """

    def __init__(self, inner: _backend.AsyncResponse) -> None:
        if not isinstance(inner, _backend.AsyncResponse):
            raise TypeError(f"expected an AsyncResponse, got {type(inner).__name__}")
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

    def _take(self) -> _backend.AsyncResponse:
        if self._consumed:
            raise RuntimeError("response body has already been consumed")
        self._consumed = True
        return self._inner

    async def text(self) -> str:
        """The whole response body as text.

        Raises ``ResponseTooLargeError`` if the body exceeds the client's
        maximum response buffer size.
        """
        inner = self._take()
        with _backend_errors():
            return await inner.text()

    async def bytes(self) -> bytes:
        """The whole response body as bytes.

        Raises ``ResponseTooLargeError`` if the body exceeds the client's
        maximum response buffer size.
        """
        inner = self._take()
        with _backend_errors():
            return await inner.bytes()

    async def json(self) -> Any:
        """The whole response body decoded as JSON."""
        data = await self.bytes()
        try:
            return _json.loads(data)
        except ValueError as exc:
            raise JsonError() from exc

    def __repr__(self) -> str:
        return (
            f"AsyncResponse(status={self.status()!r}, "
            f"content_length={self.content_length()!r}, "
            f"inner={self._inner.describe()})"
        )


class AsyncClient:
    """An async HTTP client.

    Depending on the backend it may hold pools of connections or threads, so
    create one and reuse it.
    """

    def __init__(self, client: _backend.AsyncClient) -> None:
        if not isinstance(client, _backend.AsyncClient):
            raise TypeError(
                f"expected an AsyncClient backend client, got {type(client).__name__}"
            )
        self._client = client

    async def request(self, req: Request) -> AsyncResponse:
        """Send a request and return its response."""
        if not isinstance(req, Request):
            raise TypeError(f"expected a Request, got {type(req).__name__}")
        with _backend_errors():
            response = await self._client.request(req)
        return AsyncResponse(response)

    def clone(self) -> AsyncClient:
        """A client sharing this one's backend configuration."""
        return AsyncClient(self._client.clone())

    def __repr__(self) -> str:
        return self._client.describe()