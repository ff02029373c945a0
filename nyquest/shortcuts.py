"""One-off requests without keeping a client around.

Each call builds a new client, so these should not be used for many requests.
"""

from __future__ import annotations

from nyquest.aio import AsyncResponse
from nyquest.blocking import Response
from nyquest.builder import ClientBuilder
from nyquest.errors import BackendBuildError
from nyquest.request import Request


def get(uri: str) -> Response:
    """Send a ``GET`` request with a fresh blocking client."""
    try:
        client = ClientBuilder().build_blocking()
    except BackendBuildError as exc:
        raise exc.error
    return client.request(Request.get(uri))


async def get_async(uri: str) -> AsyncResponse:
    """Send a ``GET`` request with a fresh async client."""
    try:
        client = await ClientBuilder().build_async()
    except BackendBuildError as exc:
        raise exc.error
    return await client.request(Request.get(uri))