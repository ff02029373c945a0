"""HTTP methods and requests."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from nyquest.body import Body, MultipartBody, StreamBody, StreamPartBody


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Method:
    """An HTTP request method.

    The well-known methods and a custom method with the same spelling are
    distinct values.
    """

    value: str
    is_custom: bool = False

    @classmethod
    def custom(cls, method: str) -> Method:
        """A method given by its name."""
        return cls(_require_str(method, "method"), is_custom=True)

    @classmethod
    def get(cls) -> Method:
        """The ``GET`` method."""
        return cls("GET")

    @classmethod
    def post(cls) -> Method:
        """The ``POST`` method."""
        return cls("POST")

    @classmethod
    def put(cls) -> Method:
        """The ``PUT`` method."""
        return cls("PUT")

    @classmethod
    def delete(cls) -> Method:
        """The ``DELETE`` method."""
        return cls("DELETE")

    @classmethod
    def patch(cls) -> Method:
        """The ``PATCH`` method."""
        return cls("PATCH")

    def __str__(self) -> str:
        return self.value


def _holds_stream(body: Body | None) -> bool:
    if isinstance(body, StreamBody):
        return True
    if isinstance(body, MultipartBody):
        return any(isinstance(part.body, StreamPartBody) for part in body.parts)
    return False


@dataclass(frozen=True)
class Request:
    """An HTTP request to be sent by a client.

    The URI may be relative, in which case it is resolved against the base URL
    of the client that sends it.
    """

    method: Method
    relative_uri: str
    additional_headers: tuple[tuple[str, str], ...] = ()
    body: Body | None = None

    @classmethod
    def new(cls, method: Method, relative_uri: str) -> Request:
        """A request with the given method and a relative or absolute URI."""
        if not isinstance(method, Method):
            raise TypeError(f"method must be a Method, got {type(method).__name__}")
        return cls(method=method, relative_uri=_require_str(relative_uri, "uri"))

    @classmethod
    def get(cls, uri: str) -> Request:
        """A ``GET`` request."""
        return cls.new(Method.get(), uri)

    @classmethod
    def post(cls, uri: str) -> Request:
        """A ``POST`` request."""
        return cls.new(Method.post(), uri)

    @classmethod
    def put(cls, uri: str) -> Request:
        """A ``PUT`` request."""
        return cls.new(Method.put(), uri)

    @classmethod
    def delete(cls, uri: str) -> Request:
        """A ``DELETE`` request."""
        return cls.new(Method.delete(), uri)

    @classmethod
    def patch(cls, uri: str) -> Request:
        """A ``PATCH`` request."""
        return cls.new(Method.patch(), uri)

    def with_header(self, name: str, value: str) -> Request:
        """A copy of this request with one more header attached."""
        header = (_require_str(name, "header name"), _require_str(value, "header value"))
        return replace(self, additional_headers=self.additional_headers + (header,))

    def with_body(self, body: Body) -> Request:
        """A copy of this request with the given body, replacing any previous one."""
        if not isinstance(body, Body):
            raise TypeError(f"body must be a Body, got {type(body).__name__}")
        return replace(self, body=body)

    def clone(self) -> Request:
        """A copy of this request.

        Requests whose body is read from a stream cannot be copied.
        """
        if _holds_stream(self.body):
            raise TypeError("a request with a streaming body cannot be cloned")
        return replace(self)