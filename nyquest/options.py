"""Configuration handed to a backend when it creates a client."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta


class CachingBehavior(enum.Enum):
    """How the client should treat response caching."""

    DISABLED = "disabled"
    BEST_EFFORT = "best_effort"


@dataclass
class ClientOptions:
    """Options for creating an HTTP client."""

    base_url: str | None = None
    user_agent: str | None = None
    default_headers: list[tuple[str, str]] = field(default_factory=list)
    caching_behavior: CachingBehavior = CachingBehavior.BEST_EFFORT
    use_default_proxy: bool = True
    use_cookies: bool = True
    follow_redirects: bool = True
    max_response_buffer_size: int | None = None
    request_timeout: timedelta | None = None