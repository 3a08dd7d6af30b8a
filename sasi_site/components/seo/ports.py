"""
SEO component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RequestLike(Protocol):
    """Minimal request surface needed to build a canonical URL."""

    @property
    def path(self) -> str:
        """Request path, without the query string where the framework strips it."""
        ...

    @property
    def protocol(self) -> str | None:
        """Scheme of the direct connection."""
        ...

    @property
    def host(self) -> str | None:
        """Host header value."""
        ...

    def header(self, name: str) -> str | None:
        """Look up a request header (case-insensitive)."""
        ...


class SeoRulesPort(Protocol):
    """Port for SEO configuration."""

    @property
    def preferred_host(self) -> str:
        """Host name emitted in every canonical URL."""
        ...
