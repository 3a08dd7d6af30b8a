"""
SEO context middleware.

Resolves page metadata once per request and leaves it on ``request.state``
for the page routes:

- ``request.state.seo``: the ResolvedMetadata
- ``request.state.context``: the template context with the fixed keys
"""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from sasi_site.components.seo import (
    SITE_ROUTE_TABLE,
    MetadataResolver,
    publish_context,
)

logger = logging.getLogger(__name__)


class StarletteRequestAdapter:
    """Presents a Starlette request through the resolver's request port."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def path(self) -> str:
        return self._request.url.path

    @property
    def protocol(self) -> str | None:
        return self._request.url.scheme

    @property
    def host(self) -> str | None:
        return self._request.headers.get("host")

    def header(self, name: str) -> str | None:
        return self._request.headers.get(name)


class SeoContextMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, resolver: MetadataResolver | None = None) -> None:
        super().__init__(app)
        self._resolver = resolver or MetadataResolver(SITE_ROUTE_TABLE)

    def _resolver_for(self, request: Request) -> MetadataResolver:
        # Resolver configured at startup from the site rules wins.
        configured = getattr(request.app.state, "seo_resolver", None)
        return configured or self._resolver

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        resolved = self._resolver_for(request).resolve(StarletteRequestAdapter(request))
        request.state.seo = resolved
        request.state.context = publish_context({}, resolved)
        logger.debug("SEO context for %s: %s", request.url.path, resolved.canonical_url)
        return await call_next(request)
