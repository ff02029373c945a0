from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

import pytest

from nyquest import backend
from nyquest.blocking import BlockingClient, Response
from nyquest.body import Body
from nyquest.errors import (
    JsonError,
    RequestTimeoutError,
    ResponseTooLargeError,
    TransportError,
)
from nyquest.options import ClientOptions
from nyquest.request import Request


@dataclass
class Reply:
    status: int = 200
    headers: list[tuple[str, str]] = field(default_factory=list)
    chunks: list[bytes] = field(default_factory=list)
    delay: float = 0.0
    chunked: bool = False


class FakeResponse(backend.BlockingResponse):
    def __init__(self, reply: Reply, limit: int | None) -> None:
        self._reply = reply
        self._limit = limit
        self._data = b"".join(reply.chunks)
        self._pos = 0

    def describe(self) -> str:
        return "FakeResponse"

    def status(self) -> int:
        return self._reply.status

    def content_length(self) -> int | None:
        return None if self._reply.chunked else len(self._data)

    def get_header(self, header: str) -> list[str]:
        return [v for k, v in self._reply.headers if k.lower() == header.lower()]

    def bytes(self) -> bytes:
        if self._limit is not None and len(self._data) > self._limit:
            raise ResponseTooLargeError()
        return self.read()

    def text(self) -> str:
        return self.bytes().decode("utf-8")

    def read(self, size: int = -1) -> bytes:
        end = len(self._data) if size < 0 else min(len(self._data), self._pos + size)
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk


class FakeClient(backend.BlockingClient):
    def __init__(self, routes, options: ClientOptions) -> None:
        self.routes = routes
        self.options = options

    def describe(self) -> str:
        return f"FakeClient({self.options.base_url})"

    def request(self, req: Request) -> backend.BlockingResponse:
        reply = self.routes[req.relative_uri](req)
        timeout = self.options.request_timeout
        if timeout is not None and reply.delay > timeout.total_seconds():
            raise RequestTimeoutError()
        return FakeResponse(reply, self.options.max_response_buffer_size)


def make_client(routes, **options) -> BlockingClient:
    return BlockingClient(FakeClient(routes, ClientOptions(base_url="http://127.0.0.1", **options)))


def test_get_text():
    body = '{"message": "Hello, world!"}'
    methods = []

    def handler(req):
        methods.append(req.method)
        return Reply(chunks=[body.encode()])

    client = make_client({"responses/get_text": handler})
    res = client.request(Request.get("responses/get_text"))
    assert res.status() == 200
    assert res.content_length() == len(body)
    assert res.text() == body
    assert [str(m) for m in methods] == ["GET"]


def test_get_bytes():
    body = b"\x01\x02\x03\x04"
    client = make_client({"responses/get_bytes": lambda req: Reply(chunks=[body])})
    res = client.request(Request.get("responses/get_bytes"))
    assert res.status() == 200
    assert res.content_length() == 4
    assert res.bytes() == body


@pytest.mark.parametrize("code", [400, 404, 500, 502])
def test_status_codes(code):
    def handler(req):
        return Reply(status=int(req.body.content.decode()))

    client = make_client({"responses/status_codes": handler})
    req = Request.post("responses/status_codes").with_body(Body.text(str(code), "text/plain"))
    assert client.request(req).status() == code


def test_get_header():
    client = make_client(
        {"responses/get_header": lambda req: Reply(headers=[("X-Test-Header", "test-value")])}
    )
    res = client.request(Request.get("responses/get_header"))
    assert res.get_header("X-Test-Header")[-1] == "test-value"
    assert res.get_header("missing") == []


def test_response_within_limit():
    client = make_client(
        {"client_options/response_within_limit": lambda req: Reply(chunks=[b"1234567890"])},
        max_response_buffer_size=10,
    )
    res = client.request(Request.get("client_options/response_within_limit"))
    assert res.text() == "1234567890"


def test_response_exceeds_limit():
    client = make_client(
        {"client_options/response_exceeds_limit": lambda req: Reply(chunks=[b"1234567890"])},
        max_response_buffer_size=9,
    )
    res = client.request(Request.get("client_options/response_exceeds_limit"))
    with pytest.raises(ResponseTooLargeError):
        res.text()


def test_request_timeout():
    client = make_client(
        {"client_options/request_timeout": lambda req: Reply(chunks=[b"1234567890"], delay=3)},
        request_timeout=timedelta(seconds=1),
    )
    with pytest.raises(RequestTimeoutError):
        client.request(Request.get("client_options/request_timeout")).text()


def test_request_didnt_timeout():
    client = make_client(
        {"client_options/request_didnt_timeout": lambda req: Reply(chunks=[b"1234567890"], delay=3)},
        request_timeout=timedelta(seconds=10),
    )
    res = client.request(Request.get("client_options/request_didnt_timeout"))
    assert res.text() == "1234567890"


def test_chunked_encoding():
    chunks = [b"Hello", b", ", b"chunked ", b"world!"]
    client = make_client(
        {"scenarios/chunked_encoding": lambda req: Reply(chunks=chunks, chunked=True)}
    )
    res = client.request(Request.get("scenarios/chunked_encoding"))
    assert res.content_length() is None
    assert res.text() == "Hello, chunked world!"


def test_into_read_streams_body():
    client = make_client({"stream": lambda req: Reply(chunks=[b"abc", b"defgh"])})
    reader = client.request(Request.get("stream")).into_read()
    assert reader.read(3) == b"abc"
    assert reader.read() == b"defgh"
    assert reader.read() == b""


def test_body_taken_only_once():
    client = make_client({"once": lambda req: Reply(chunks=[b"x"])})
    res = client.request(Request.get("once"))
    assert res.text() == "x"
    with pytest.raises(RuntimeError):
        res.bytes()


def test_json_decodes_body():
    client = make_client({"json": lambda req: Reply(chunks=[b'{"message": "Hello"}'])})
    assert client.request(Request.get("json")).json() == {"message": "Hello"}


def test_json_invalid_body_raises():
    client = make_client({"bad": lambda req: Reply(chunks=[b"not json"])})
    with pytest.raises(JsonError):
        client.request(Request.get("bad")).json()


def test_os_error_becomes_transport_error():
    def handler(req):
        raise ConnectionResetError("reset")

    client = make_client({"reset": handler})
    with pytest.raises(TransportError) as info:
        client.request(Request.get("reset"))
    assert isinstance(info.value.__cause__, ConnectionResetError)


def test_clone_and_repr():
    client = make_client({"a": lambda req: Reply(chunks=[b"ok"])})
    copy = client.clone()
    assert repr(copy) == "FakeClient(http://127.0.0.1)"
    assert copy.request(Request.get("a")).text() == "ok"


def test_response_repr():
    client = make_client({"a": lambda req: Reply(status=201, chunks=[b"ok"])})
    text = repr(client.request(Request.get("a")))
    assert text == "BlockingResponse(status=201, content_length=2, inner=FakeResponse)"


def test_request_type_checked():
    client = make_client({})
    with pytest.raises(TypeError):
        client.request("a")


def test_wrappers_type_checked():
    with pytest.raises(TypeError):
        BlockingClient(object())
    with pytest.raises(TypeError):
        Response(object())