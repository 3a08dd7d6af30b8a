"""
SEO component - metadata resolution entry points.

Invariants:
- I1: Every resolution returns a full record (default fills the gaps)
- I2: Canonical URLs are https on the preferred host, with no query string
- I3: Resolution never raises
"""

from __future__ import annotations

from ._impl import (
    CanonicalConfig,
    MetadataResolver,
    RouteMetadataTable,
    publish_context,
)
from .models import (
    ResolveMetadataInput,
    ResolveMetadataOutput,
    SimpleRequest,
)
from .ports import RequestLike, SeoRulesPort
from .table import SITE_ROUTE_TABLE


def _build_config(rules: SeoRulesPort | None) -> CanonicalConfig:
    """Build canonical config from rules port."""
    if rules is None:
        return CanonicalConfig()
    return CanonicalConfig(preferred_host=rules.preferred_host)


def _create_resolver(
    table: RouteMetadataTable | None,
    rules: SeoRulesPort | None,
) -> MetadataResolver:
    return MetadataResolver(
        table=table if table is not None else SITE_ROUTE_TABLE,
        config=_build_config(rules),
    )


_site_resolver = MetadataResolver(table=SITE_ROUTE_TABLE)


# --- Component Entry Points ---


def run_resolve(
    inp: ResolveMetadataInput,
    *,
    table: RouteMetadataTable | None = None,
    rules: SeoRulesPort | None = None,
) -> ResolveMetadataOutput:
    """
    Resolve metadata for a request described by plain data.

    Args:
        inp: Path, protocol, host and headers of the request.
        table: Optional route table (defaults to the site table).
        rules: Optional rules port for the preferred host.

    Returns:
        ResolveMetadataOutput with the resolved metadata and template context.
    """
    resolver = _create_resolver(table, rules)
    request = SimpleRequest(
        path=inp.path,
        protocol=inp.protocol,
        host=inp.host,
        headers=inp.headers,
    )
    resolved = resolver.resolve(request)
    context = dict(publish_context({}, resolved))
    return ResolveMetadataOutput(metadata=resolved, context=context)


def get_metadata(path: str) -> dict[str, str]:
    """Site metadata for a path."""
    return _site_resolver.get_metadata(path)


def get_canonical_url(request: RequestLike) -> str:
    """Site canonical URL for a request."""
    return _site_resolver.get_canonical_url(request)


def run(inp: ResolveMetadataInput) -> ResolveMetadataOutput:
    """Default entry point."""
    return run_resolve(inp)
