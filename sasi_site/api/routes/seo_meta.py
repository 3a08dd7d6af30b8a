"""
Metadata inspection endpoint.

Returns what a page at ``path`` would render in its <head>. Useful for
checking the route table and canonical URLs without fetching HTML.
"""

from typing import Any

from fastapi import APIRouter, Query, Request

from sasi_site.api.middleware import StarletteRequestAdapter
from sasi_site.components.seo import SITE_ROUTE_TABLE, MetadataResolver, SimpleRequest

router = APIRouter()


def _resolver(request: Request) -> MetadataResolver:
    configured = getattr(request.app.state, "seo_resolver", None)
    return configured or MetadataResolver(SITE_ROUTE_TABLE)


@router.get("/meta", summary="Resolved metadata for a path")
def get_meta(
    request: Request,
    path: str = Query("/", description="Site path to resolve"),
) -> dict[str, Any]:
    resolver = _resolver(request)
    # Scheme and host come from this request; only the path is replaced.
    incoming = StarletteRequestAdapter(request)
    target = SimpleRequest(
        path=path,
        protocol=incoming.protocol,
        host=incoming.host,
        headers=dict(request.headers),
    )
    # A page request never carries its query or fragment in the path.
    page_path = path.split("#", 1)[0].split("?", 1)[0] or "/"
    meta: dict[str, Any] = dict(resolver.get_metadata(page_path))
    meta["canonical"] = resolver.get_canonical_url(target)
    return meta
