"""
MetadataResolver - per-request SEO metadata and canonical URLs.

Resolves page metadata from the static route table and builds the single
canonical URL search engines should index for a request.

Key behaviors:
- Lookup keys strip exactly one trailing slash (root is left alone)
- Unknown paths get the default record
- Missing keywords/images inherit from the default record
- Canonical URLs always use https and the preferred host
- Query strings, fragments and /index.html never reach the canonical URL
- Nothing here raises: a page must never fail because of its metadata
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .models import MetadataRecord, ResolvedMetadata
from .ports import RequestLike

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"
PREFERRED_HOST = "www.spreadasmileindia.com"
CANONICAL_SCHEME = "https"

_INDEX_HTML = re.compile(r"/index\.html$", re.IGNORECASE)
_DEFAULT_PORT = re.compile(r":(80|443)$")


# --- Configuration ---


@dataclass(frozen=True)
class CanonicalConfig:
    """Canonical URL configuration."""

    preferred_host: str = PREFERRED_HOST
    default_scheme: str = CANONICAL_SCHEME


DEFAULT_CONFIG = CanonicalConfig()


class RouteTableError(ValueError):
    """Raised when a route table is built from invalid entries."""


# --- Path Normalization ---


def normalize_path(path: str) -> str:
    """
    Normalize a request path into a route table key.

    Strips exactly one trailing slash unless the path is the root.
    An empty path is the root.
    """
    if not path:
        return "/"
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


# --- Canonical URL Building ---


def resolve_scheme(request: RequestLike, config: CanonicalConfig = DEFAULT_CONFIG) -> str:
    """
    Scheme the request arrived with.

    A proxy's X-Forwarded-Proto wins over the connection's own protocol.
    """
    forwarded = request.header("x-forwarded-proto")
    if forwarded:
        # Proxies may append their own hop: "https, http"
        forwarded = forwarded.split(",")[0].strip()
    scheme = forwarded or request.protocol or config.default_scheme
    return scheme.lower()


def strip_default_port(host: str | None) -> str | None:
    """Remove a trailing :80 or :443 from a host value."""
    if not host:
        return host
    return _DEFAULT_PORT.sub("", host)


def canonical_path(path: str) -> str:
    """
    Canonical form of a request path.

    - Drops any query string or fragment
    - Collapses a trailing /index.html to /
    - Strips one trailing slash (except root)
    """
    path = path.split("#", 1)[0].split("?", 1)[0] or "/"
    path = _INDEX_HTML.sub("/", path)
    if path != "/" and path.endswith("/"):
        path = path[:-1]
    return path


def build_canonical_url(
    request: RequestLike,
    config: CanonicalConfig = DEFAULT_CONFIG,
) -> str:
    """
    Build the canonical URL for a request.

    The presented scheme and host are only logged; the URL always uses
    https and the preferred host.
    """
    path = canonical_path(request.path or "/")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Canonicalizing %s://%s%s",
            resolve_scheme(request, config),
            strip_default_port(request.host),
            request.path,
        )
    return f"{CANONICAL_SCHEME}://{config.preferred_host}{path}"


# --- Route Table ---


class RouteMetadataTable(Mapping[str, MetadataRecord]):
    """
    Read-only path -> MetadataRecord mapping with a default record.

    Built once; there is no mutation path.
    """

    def __init__(self, entries: Mapping[str, MetadataRecord]) -> None:
        _validate_entries(entries)
        self._entries: Mapping[str, MetadataRecord] = MappingProxyType(dict(entries))

    @property
    def default(self) -> MetadataRecord:
        """The fallback record."""
        return self._entries[DEFAULT_KEY]

    def lookup(self, path: str) -> MetadataRecord:
        """Exact-match lookup; callers normalize first."""
        return self._entries.get(path, self.default)

    def paths(self) -> list[str]:
        """All page paths, without the default key."""
        return sorted(k for k in self._entries if k != DEFAULT_KEY)

    def __getitem__(self, key: str) -> MetadataRecord:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _validate_entries(entries: Mapping[str, MetadataRecord]) -> None:
    default = entries.get(DEFAULT_KEY)
    if default is None:
        raise RouteTableError("Route table has no 'default' record")
    if not default.is_complete:
        raise RouteTableError(
            "Default record must define keywords, social_image and secondary_image"
        )

    for key, record in entries.items():
        if key == DEFAULT_KEY:
            continue
        if not key.startswith("/"):
            raise RouteTableError(f"Route key must start with '/': {key!r}")
        if key != "/" and key.endswith("/"):
            raise RouteTableError(f"Route key must not end with '/': {key!r}")
        if not record.title or not record.description:
            raise RouteTableError(f"Route {key!r} needs a title and a description")


def build_route_table(entries: Mapping[str, Mapping[str, str]]) -> RouteMetadataTable:
    """Build a route table from plain dict entries."""
    return RouteMetadataTable(
        {
            key: MetadataRecord(
                title=value["title"],
                description=value["description"],
                keywords=value.get("keywords"),
                social_image=value.get("social_image"),
                secondary_image=value.get("secondary_image"),
            )
            for key, value in entries.items()
        }
    )


# --- Resolver ---


class MetadataResolver:
    """Resolves page metadata and canonical URLs against a route table."""

    def __init__(
        self,
        table: RouteMetadataTable,
        config: CanonicalConfig | None = None,
    ) -> None:
        self._table = table
        self._config = config or DEFAULT_CONFIG

    @property
    def table(self) -> RouteMetadataTable:
        return self._table

    @property
    def config(self) -> CanonicalConfig:
        return self._config

    def lookup(self, path: str) -> tuple[str, MetadataRecord]:
        """Normalize a path and return it with its record."""
        normalized = normalize_path(path)
        return normalized, self._table.lookup(normalized)

    def get_metadata(self, path: str) -> dict[str, str]:
        """Metadata for a path, optional fields filled from the default record."""
        normalized, record = self.lookup(path)
        default = self._table.default
        return {
            "title": record.title,
            "metaDescription": record.description,
            "keywords": record.keywords or default.keywords or "",
            "ogImage": record.social_image or default.social_image or "",
            "twitterImage": record.secondary_image or default.secondary_image or "",
            "currentPath": normalized,
        }

    def get_canonical_url(self, request: RequestLike) -> str:
        """Canonical URL for a request."""
        return build_canonical_url(request, self._config)

    def resolve(self, request: RequestLike) -> ResolvedMetadata:
        """Resolve everything a page template needs for this request."""
        meta = self.get_metadata(request.path)
        return ResolvedMetadata(
            title=meta["title"],
            description=meta["metaDescription"],
            keywords=meta["keywords"],
            social_image=meta["ogImage"],
            secondary_image=meta["twitterImage"],
            normalized_path=meta["currentPath"],
            canonical_url=self.get_canonical_url(request),
        )


def publish_context(
    context: MutableMapping[str, Any],
    resolved: ResolvedMetadata,
) -> MutableMapping[str, Any]:
    """Write resolved metadata into a template context under the fixed keys."""
    context.update(resolved.to_context())
    context["seo"] = {
        "title": resolved.title,
        "metaDescription": resolved.description,
        "keywords": resolved.keywords,
        "ogImage": resolved.social_image,
        "twitterImage": resolved.secondary_image,
        "currentPath": resolved.normalized_path,
    }
    return context


# --- Factory ---


def create_metadata_resolver(
    table: RouteMetadataTable,
    preferred_host: str | None = None,
) -> MetadataResolver:
    """Create a MetadataResolver."""
    config = CanonicalConfig(preferred_host=preferred_host) if preferred_host else None
    return MetadataResolver(table=table, config=config)
