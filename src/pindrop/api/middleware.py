"""CORS, response security headers, and per-client rate limiting."""

import time
from collections import deque
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from pindrop.core.config import Settings

_PROXY_HEADERS = ("CF-Connecting-IP", "X-Forwarded-For", "X-Real-IP")

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}

_WINDOW_SECONDS = 60.0


def get_client_ip(request: Request, proxy_headers: Sequence[str] = _PROXY_HEADERS) -> str:
    """Return the client address, preferring proxy headers in the given order.

    ``X-Forwarded-For`` may hold a chain; its leftmost entry is the client.
    Falls back to the socket peer, then ``"unknown"``.
    """
    for header in proxy_headers:
        value = request.headers.get(header, "").strip()
        if value:
            return value.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Register CORS middleware; origins must be configured explicitly."""
    kwargs: dict[str, Any] = {
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
    }
    if settings.cors_origin_list:
        kwargs["allow_origins"] = settings.cors_origin_list
    if settings.cors_origin_regex.strip():
        kwargs["allow_origin_regex"] = settings.cors_origin_regex.strip()
    app.add_middleware(CORSMiddleware, **kwargs)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach static security headers to every response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in _SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory sliding-window rate limit per client IP.

    The client is the socket peer unless ``trusted_proxy_headers`` names the
    headers a fronting proxy sets. State is per process; run behind a shared
    limiter when scaling out.
    """

    def __init__(
        self,
        app: ASGIApp,
        requests_per_minute: int = 200,
        trusted_proxy_headers: Sequence[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.trusted_proxy_headers = tuple(trusted_proxy_headers or ())
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = time.monotonic()

    def _sweep(self, now: float) -> None:
        """Drop clients whose every hit has left the window."""
        cutoff = now - _WINDOW_SECONDS
        for client_ip in [ip for ip, hits in self._hits.items() if hits[-1] <= cutoff]:
            del self._hits[client_ip]
        self._last_sweep = now

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client_ip = get_client_ip(request, self.trusted_proxy_headers)
        now = time.monotonic()
        if now - self._last_sweep >= _WINDOW_SECONDS:
            self._sweep(now)

        hits = self._hits.setdefault(client_ip, deque())
        while hits and hits[0] <= now - _WINDOW_SECONDS:
            hits.popleft()

        if len(hits) >= self.requests_per_minute:
            retry_after = max(1, int(_WINDOW_SECONDS - (now - hits[0])))
            return Response(
                content='{"detail":"Rate limit exceeded","code":"rate_limited"}',
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": str(retry_after)},
            )

        hits.append(now)
        return await call_next(request)
