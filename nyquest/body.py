"""Request bodies and multipart form parts."""

from __future__ import annotations

import json as _json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from nyquest.errors import JsonError


def _to_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str")
    return bytes(data)


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    return value


def _pairs(fields: Iterable[tuple[str, str]] | Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    items = fields.items() if isinstance(fields, Mapping) else fields
    result = []
    for key, value in items:
        result.append((_require_str(key, "form key"), _require_str(value, "form value")))
    return tuple(result)


@dataclass(frozen=True)
class StreamReader:
    """A readable stream used as body data, with its length if known."""

    stream: Any
    content_length: int | None = None

    def __post_init__(self) -> None:
        if self.content_length is not None and self.content_length < 0:
            raise ValueError("content_length must not be negative")


class PartBody:
    """The body of a field in a multipart form."""

    __slots__ = ()

    @classmethod
    def text(cls, text: str) -> BytesPartBody:
        """A part body holding the UTF-8 encoding of ``text``."""
        return BytesPartBody(_require_str(text, "text").encode("utf-8"))

    @classmethod
    def bytes(cls, data: Any) -> BytesPartBody:
        """A part body holding raw bytes."""
        return BytesPartBody(_to_bytes(data))

    @classmethod
    def stream(cls, stream: Any, content_length: int | None = None) -> StreamPartBody:
        """A part body read from a stream."""
        return StreamPartBody(StreamReader(stream, content_length))


@dataclass(frozen=True)
class BytesPartBody(PartBody):
    """A part body of raw bytes."""

    content: bytes


@dataclass(frozen=True)
class StreamPartBody(PartBody):
    """A part body read from a stream."""

    reader: StreamReader


@dataclass(frozen=True)
class Part:
    """A field in a multipart form."""

    name: str
    content_type: str
    body: PartBody
    filename: str | None = None
    headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def new_with_content_type(cls, name: str, content_type: str, body: PartBody) -> Part:
        """A part with the given name and a body of the given content type."""
        return cls(
            name=_require_str(name, "name"),
            content_type=_require_str(content_type, "content_type"),
            body=body,
        )

    def with_header(self, name: str, value: str) -> Part:
        """A copy of this part with one more header attached.

        Support for per-part headers depends on the backend.
        """
        header = (_require_str(name, "header name"), _require_str(value, "header value"))
        return replace(self, headers=self.headers + (header,))

    def with_filename(self, filename: str) -> Part:
        """A copy of this part with the given filename."""
        return replace(self, filename=_require_str(filename, "filename"))


class Body:
    """A request body."""

    __slots__ = ()

    @classmethod
    def plain_text(cls, text: str) -> BytesBody:
        """A body from a string of content type ``text/plain``."""
        return cls.text(text, "text/plain")

    @classmethod
    def text(cls, text: str, content_type: str) -> BytesBody:
        """A body from a string of the given content type."""
        return BytesBody(
            _require_str(text, "text").encode("utf-8"),
            _require_str(content_type, "content_type"),
        )

    @classmethod
    def binary_bytes(cls, data: Any) -> BytesBody:
        """A body from bytes of content type ``application/octet-stream``."""
        return cls.bytes(data, "application/octet-stream")

    @classmethod
    def bytes(cls, data: Any, content_type: str) -> BytesBody:
        """A body from bytes of the given content type."""
        return BytesBody(_to_bytes(data), _require_str(content_type, "content_type"))

    @classmethod
    def json_bytes(cls, data: Any) -> BytesBody:
        """A body from bytes of content type ``application/json``."""
        return cls.bytes(data, "application/json")

    @classmethod
    def json(cls, value: Any) -> BytesBody:
        """A body holding ``value`` serialised as JSON."""
        try:
            encoded = _json.dumps(
                value, ensure_ascii=False, separators=(",", ":"), allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            raise JsonError() from exc
        return cls.json_bytes(encoded.encode("utf-8"))

    @classmethod
    def form(cls, fields: Iterable[tuple[str, str]] | Mapping[str, str]) -> FormBody:
        """A url-encoded form body from key-value string pairs, in order."""
        return FormBody(_pairs(fields))

    @classmethod
    def multipart(cls, parts: Iterable[Part]) -> MultipartBody:
        """A multipart form body from the given parts."""
        collected = tuple(parts)
        for part in collected:
            if not isinstance(part, Part):
                raise TypeError(f"expected Part, got {type(part).__name__}")
        return MultipartBody(collected)

    @classmethod
    def stream(cls, stream: Any, content_length: int | None = None) -> StreamBody:
        """A body read from a stream."""
        return StreamBody(StreamReader(stream, content_length))


@dataclass(frozen=True)
class BytesBody(Body):
    """Raw bytes with a content type."""

    content: bytes
    content_type: str


@dataclass(frozen=True)
class FormBody(Body):
    """URL-encoded form fields."""

    fields: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class MultipartBody(Body):
    """A multipart form."""

    parts: tuple[Part, ...]


@dataclass(frozen=True)
class StreamBody(Body):
    """Body data read from a stream."""

    reader: StreamReader


def body_form(*args: Any, **kwargs: str) -> FormBody:
    """Build a form body from pairs, mappings and keyword arguments, in that order."""
    fields: list[tuple[str, str]] = []
    for arg in args:
        if isinstance(arg, Mapping):
            fields.extend(arg.items())
        else:
            key, value = arg
            fields.append((key, value))
    fields.extend(kwargs.items())
    return Body.form(fields)