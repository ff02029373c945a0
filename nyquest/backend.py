"""Interfaces that backends implement to perform HTTP requests."""

from __future__ import annotations

import abc
import copy

from nyquest.options import ClientOptions
from nyquest.request import Request


class BlockingResponse(abc.ABC):
    """A response produced by a blocking client.

    Content reading methods are expected to be called at most once.
    """

    def describe(self) -> str:
        """A textual description of this response."""
        return "BlockingResponse"

    @abc.abstractmethod
    def status(self) -> int:
        """The HTTP status code."""

    @abc.abstractmethod
    def content_length(self) -> int | None:
        """The length of the response body, if known."""

    @abc.abstractmethod
    def get_header(self, header: str) -> list[str]:
        """All values of the given header."""

    @abc.abstractmethod
    def text(self) -> str:
        """The whole response body as text."""

    @abc.abstractmethod
    def bytes(self) -> bytes:
        """The whole response body as bytes."""

    @abc.abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes of the body; all remaining bytes if negative."""


class BlockingClient(abc.ABC):
    """A client that performs requests on the calling thread."""

    def describe(self) -> str:
        """A textual description of this client."""
        return "BlockingClient"

    def clone(self) -> BlockingClient:
        """A client sharing this one's configuration."""
        return copy.copy(self)

    @abc.abstractmethod
    def request(self, req: Request) -> BlockingResponse:
        """Send a request and return its response."""


class BlockingBackend(abc.ABC):
    """A backend able to create blocking clients."""

    @abc.abstractmethod
    def create_blocking_client(self, options: ClientOptions) -> BlockingClient:
        """Create a blocking client with the given options."""


class AsyncResponse(abc.ABC):
    """A response produced by an async client.

    Content reading methods are expected to be awaited at most once.
    """

    def describe(self) -> str:
        """A textual description of this response."""
        return "AsyncResponse"

    @abc.abstractmethod
    def status(self) -> int:
        """The HTTP status code."""

    @abc.abstractmethod
    def content_length(self) -> int | None:
        """The length of the response body, if known."""

    @abc.abstractmethod
    def get_header(self, header: str) -> list[str]:
        """All values of the given header."""

    @abc.abstractmethod
    async def text(self) -> str:
        """The whole response body as text."""

    @abc.abstractmethod
    async def bytes(self) -> bytes:
        """The whole response body as bytes."""


class AsyncClient(abc.ABC):
    """A client whose requests are awaited."""

    def describe(self) -> str:
        """A textual description of this client."""
        return "AsyncClient"

    def clone(self) -> AsyncClient:
        """A client sharing this one's configuration."""
        return copy.copy(self)

    @abc.abstractmethod
    async def request(self, req: Request) -> AsyncResponse:
        """Send a request and return its response."""


class AsyncBackend(abc.ABC):
    """A backend able to create async clients."""

    @abc.abstractmethod
    async def create_async_client(self, options: ClientOptions) -> AsyncClient:
        """Create an async client with the given options."""