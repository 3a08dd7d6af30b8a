"""
SEO component models.

Metadata records, the per-request resolved output, and plain-data request
objects used outside a web framework.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# --- Context Keys ---

CONTEXT_KEYS = (
    "title",
    "metaDescription",
    "keywords",
    "currentPath",
    "ogImage",
    "twitterImage",
    "canonical",
)


# --- Metadata Record ---


@dataclass(frozen=True)
class MetadataRecord:
    """
    Metadata bundle for one logical page.

    Optional fields left as None inherit from the default record at
    resolution time.
    """

    title: str
    description: str
    keywords: str | None = None
    social_image: str | None = None
    secondary_image: str | None = None

    @property
    def is_complete(self) -> bool:
        """True when no optional field is missing."""
        return all((self.keywords, self.social_image, self.secondary_image))


# --- Resolved Metadata ---


@dataclass(frozen=True)
class ResolvedMetadata:
    """Metadata resolved for a single request."""

    title: str
    description: str
    keywords: str
    social_image: str
    secondary_image: str
    normalized_path: str
    canonical_url: str

    def to_context(self) -> dict[str, str]:
        """Template context with the fixed rendering keys."""
        return {
            "title": self.title,
            "metaDescription": self.description,
            "keywords": self.keywords,
            "currentPath": self.normalized_path,
            "ogImage": self.social_image,
            "twitterImage": self.secondary_image,
            "canonical": self.canonical_url,
        }


# --- Plain Request ---


@dataclass(frozen=True)
class SimpleRequest:
    """Request-like value built from plain data."""

    path: str = "/"
    protocol: str | None = None
    host: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


# --- Input / Output Models ---


@dataclass(frozen=True)
class ResolveMetadataInput:
    """Input for resolving metadata for a request."""

    path: str = "/"
    protocol: str | None = None
    host: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolveMetadataOutput:
    """Resolved metadata plus the published template context."""

    metadata: ResolvedMetadata
    context: dict[str, Any]
