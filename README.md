# nyquest

A small HTTP client facade. Application code builds requests and reads
responses through one consistent interface; the actual transfer is done by a
backend that the application registers once at startup. Both a blocking
interface and an `asyncio` interface are provided.

## What this package does not do

nyquest contains no backend of its own: it opens no connections and sends
nothing over the network by itself. To make requests you must supply a backend
that subclasses the abstract classes in `nyquest.backend` and register it.
Async responses offer no streaming read; only the blocking response can be
read as a stream (`Response.into_read`).

## Writing and registering a backend

A backend subclasses `nyquest.backend.BlockingBackend` (implementing
`create_blocking_client(options)`), `nyquest.backend.AsyncBackend`
(implementing the coroutine `create_async_client(options)`), or both.
`options` is a `nyquest.options.ClientOptions` holding `base_url`,
`user_agent`, `default_headers`, `caching_behavior`
(`nyquest.options.CachingBehavior`), `use_default_proxy`, `use_cookies`,
`follow_redirects`, `max_response_buffer_size` and `request_timeout`.

The clients it returns subclass `nyquest.backend.BlockingClient` or
`nyquest.backend.AsyncClient` and implement `request(req)`; the responses
subclass `nyquest.backend.BlockingResponse` (`status`, `content_length`,
`get_header`, `text`, `bytes`, `read`) or `nyquest.backend.AsyncResponse`
(`status`, `content_length`, `get_header` and the coroutines `text` and
`bytes`). A backend signals failures by raising the errors listed below;
any `OSError` escaping it is turned into `TransportError`.

```python
from nyquest.registry import register_backend

register_backend(MyBackend())
```

`register_backend` accepts only instances of `BlockingBackend` or
`AsyncBackend` (`TypeError` otherwise). A backend can be registered only once
per process; a second call raises `RuntimeError`. `registered_backend()`
returns the registered backend, or raises `nyquest.errors.NoBackendError` if
there is none.

## Blocking requests

```python
from nyquest.body import Body, body_form
from nyquest.builder import ClientBuilder
from nyquest.request import Request

client = ClientBuilder().base_url("http://localhost:8080").build_blocking()

response = client.request(Request.get("/status"))
print(response.status(), response.content_length())
print(response.text())

form = body_form(key1="value1", key2="value2")
client.request(Request.post("/submit").with_body(form))
```

A response body can be taken once, through `text()`, `bytes()`, `json()` or
`into_read()` (a binary file object); taking it again raises `RuntimeError`.
`get_header(name)` returns a list of values.

For a one-off request, `nyquest.shortcuts.get(uri)` builds a client, sends a
`GET` and returns the response. Build and reuse a client when making many
requests.

## Async requests

```python
from nyquest.builder import ClientBuilder
from nyquest.request import Request

async def fetch() -> str:
    client = await ClientBuilder().build_async()
    response = await client.request(Request.get("http://localhost:8080/"))
    return await response.text()
```

`nyquest.shortcuts.get_async(uri)` is the async shortcut.

## Requests

`Request.get`, `post`, `put`, `delete` and `patch` take a URI; `Request.new`
takes a `Method` (including `Method.custom(name)`) and a URI. Relative URIs
are resolved by the backend against the client's base URL. Requests are
immutable: `with_header(name, value)` and `with_body(body)` return new
requests, and the last body set wins. `clone()` copies a request, except one
whose body is read from a stream (`TypeError`).

## Request bodies

- `Body.plain_text(text)`, `Body.text(text, content_type)`
- `Body.binary_bytes(data)`, `Body.bytes(data, content_type)`
- `Body.json_bytes(data)`, `Body.json(value)` (raises `JsonError` if the value
  cannot be serialised)
- `Body.form(fields)` or `body_form(...)` for url-encoded forms; `body_form`
  takes pairs, mappings and keyword arguments, kept in that order
- `Body.stream(stream, content_length)` for a body read from a stream
- `Body.multipart(parts)` with `Part` and `PartBody`:

```python
from nyquest.body import Body, Part, PartBody

body = Body.multipart([
    Part.new_with_content_type("text", "text/plain", PartBody.text("ttt")),
    Part.new_with_content_type("file", "audio/mpeg", PartBody.bytes(b"ID3"))
        .with_filename("track.mp3"),
    Part.new_with_content_type("headed", "text/plain", PartBody.text("head"))
        .with_header("content-language", "zh-CN"),
])
```

## Client options

`ClientBuilder` is immutable; each method returns a new builder:
`base_url`, `user_agent`, `with_header` (default headers), `no_caching`,
`no_proxy`, `no_cookies`, `max_response_buffer_size(size)` and
`request_timeout(timeout)` (a `timedelta` or a number of seconds). How far
each option is honoured depends on the backend.

`build_blocking()` and `build_async()` raise `NoBackendError` when no backend
is registered or the registered one does not support that kind of client, and
`BackendBuildError` (with the backend's error as `.error`) when the backend
fails to create the client.

## Errors

All request errors derive from `nyquest.errors.Error`: `InvalidUrlError`,
`TransportError`, `JsonError`, `ResponseTooLargeError` and
`RequestTimeoutError`. Client construction failures derive from
`nyquest.errors.BuildClientError`: `NoBackendError` and `BackendBuildError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```