"""The process-wide backend used by clients."""

from __future__ import annotations

import threading

from nyquest.backend import AsyncBackend, BlockingBackend
from nyquest.errors import NoBackendError

Backend = BlockingBackend | AsyncBackend


class _Registry:
    """Holds at most one backend, set once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._backend: Backend | None = None

    def set(self, backend: Backend) -> None:
        with self._lock:
            if self._backend is not None:
                raise RuntimeError("Backend already registered")
            self._backend = backend

    def get(self) -> Backend | None:
        return self._backend


_REGISTRY = _Registry()


def register_backend(backend: Backend) -> None:
    """Register the backend that all clients will use.

    Raises ``RuntimeError`` if a backend has already been registered.
    """
    if not isinstance(backend, (BlockingBackend, AsyncBackend)):
        raise TypeError(
            f"expected a BlockingBackend or AsyncBackend, got {type(backend).__name__}"
        )
    _REGISTRY.set(backend)


def registered_backend() -> Backend:
    """The registered backend; raises ``NoBackendError`` if there is none."""
    backend = _REGISTRY.get()
    if backend is None:
        raise NoBackendError()
    return backend