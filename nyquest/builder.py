"""Building blocking and async clients from a set of options."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any

from nyquest.aio import AsyncClient
from nyquest.backend import AsyncBackend, BlockingBackend
from nyquest.blocking import BlockingClient
from nyquest.errors import BackendBuildError, Error, NoBackendError
from nyquest.options import CachingBehavior, ClientOptions
from nyquest.registry import registered_backend


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    return value


def _to_timedelta(timeout: Any) -> timedelta:
    if isinstance(timeout, timedelta):
        result = timeout
    elif isinstance(timeout, numbers.Real) and not isinstance(timeout, bool):
        result = timedelta(seconds=float(timeout))
    else:
        raise TypeError(
            f"timeout must be a timedelta or a number of seconds, got {type(timeout).__name__}"
        )
    if result < timedelta(0):
        raise ValueError("timeout must not be negative")
    return result


@dataclass(frozen=True)
class ClientBuilder:
    """Options for a client to be built.

    Every method returns a new builder and leaves this one unchanged.
    """

    options: ClientOptions = field(default_factory=ClientOptions)

    def _with(self, **changes: Any) -> ClientBuilder:
        return ClientBuilder(replace(self.options, **changes))

    def base_url(self, base_url: str) -> ClientBuilder:
        """Set the URL that relative request URIs are resolved against."""
        return self._with(base_url=_require_str(base_url, "base_url"))

    def user_agent(self, user_agent: str) -> ClientBuilder:
        """Set the ``user-agent`` header of the client."""
        return self._with(user_agent=_require_str(user_agent, "user_agent"))

    def with_header(self, name: str, value: str) -> ClientBuilder:
        """Add a header sent with every request of the client."""
        header = (_require_str(name, "header name"), _require_str(value, "header value"))
        return self._with(default_headers=[*self.options.default_headers, header])

    def no_caching(self) -> ClientBuilder:
        """Ask the backend to bypass caches."""
        return self._with(caching_behavior=CachingBehavior.DISABLED)

    def no_proxy(self) -> ClientBuilder:
        """Ask the backend to bypass preset proxies."""
        return self._with(use_default_proxy=False)

    def no_cookies(self) -> ClientBuilder:
        """Ask the backend not to keep cookies between requests."""
        return self._with(use_cookies=False)

    def max_response_buffer_size(self, size: int) -> ClientBuilder:
        """Set the most bytes buffered for a response by ``text`` and ``bytes``.

        Streaming a response is not affected.
        """
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"size must be an int, got {type(size).__name__}")
        if size < 0:
            raise ValueError("size must not be negative")
        return self._with(max_response_buffer_size=size)

    def request_timeout(self, timeout: timedelta | float) -> ClientBuilder:
        """Set the time a whole request may take; a number means seconds.

        The precision of the timeout depends on the backend.
        """
        return self._with(request_timeout=_to_timedelta(timeout))

    def _options_for_backend(self) -> ClientOptions:
        return replace(self.options, default_headers=list(self.options.default_headers))

    def build_blocking(self) -> BlockingClient:
        """Build a blocking client with the registered backend.

        Raises ``NoBackendError`` without a suitable backend and
        ``BackendBuildError`` when the backend fails to create the client.
        """
        backend = registered_backend()
        if not isinstance(backend, BlockingBackend):
            raise NoBackendError("The registered backend does not support blocking clients.")
        try:
            client = backend.create_blocking_client(self._options_for_backend())
        except Error as exc:
            raise BackendBuildError(exc) from exc
        return BlockingClient(client)

    async def build_async(self) -> AsyncClient:
        """Build an async client with the registered backend.

        Raises ``NoBackendError`` without a suitable backend and
        ``BackendBuildError`` when the backend fails to create the client.
        """
        backend = registered_backend()
        if not isinstance(backend, AsyncBackend):
            raise NoBackendError("The registered backend does not support async clients.")
        try:
            client = await backend.create_async_client(self._options_for_backend())
        except Error as exc:
            raise BackendBuildError(exc) from exc
        return AsyncClient(client)