"""
SEO component - route metadata and canonical URLs.
"""

from ._impl import (
    DEFAULT_CONFIG,
    DEFAULT_KEY,
    PREFERRED_HOST,
    CanonicalConfig,
    MetadataResolver,
    RouteMetadataTable,
    RouteTableError,
    build_canonical_url,
    build_route_table,
    canonical_path,
    create_metadata_resolver,
    normalize_path,
    publish_context,
    resolve_scheme,
    strip_default_port,
)
from .component import (
    get_canonical_url,
    get_metadata,
    run,
    run_resolve,
)
from .models import (
    CONTEXT_KEYS,
    MetadataRecord,
    ResolvedMetadata,
    ResolveMetadataInput,
    ResolveMetadataOutput,
    SimpleRequest,
)
from .ports import RequestLike, SeoRulesPort
from .table import SITE_METADATA, SITE_ROUTE_TABLE

__all__ = [
    # Entry points
    "run",
    "run_resolve",
    "get_metadata",
    "get_canonical_url",
    # Models
    "CONTEXT_KEYS",
    "MetadataRecord",
    "ResolvedMetadata",
    "ResolveMetadataInput",
    "ResolveMetadataOutput",
    "SimpleRequest",
    # Ports
    "RequestLike",
    "SeoRulesPort",
    # Table
    "SITE_METADATA",
    "SITE_ROUTE_TABLE",
    "DEFAULT_KEY",
    "RouteMetadataTable",
    "RouteTableError",
    "build_route_table",
    # Resolver
    "CanonicalConfig",
    "DEFAULT_CONFIG",
    "PREFERRED_HOST",
    "MetadataResolver",
    "create_metadata_resolver",
    "publish_context",
    # Canonical URLs
    "build_canonical_url",
    "canonical_path",
    "normalize_path",
    "resolve_scheme",
    "strip_default_port",
]
