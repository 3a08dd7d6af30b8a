"""
Unit tests for the SEO component.

Tests:
- Path normalization for route lookups
- Route table fallback and validation
- Canonical URL building
- End-to-end resolution into the template context
"""

from __future__ import annotations

import pytest

from .._impl import (
    CanonicalConfig,
    MetadataResolver,
    RouteMetadataTable,
    RouteTableError,
    build_canonical_url,
    build_route_table,
    canonical_path,
    normalize_path,
    publish_context,
    resolve_scheme,
    strip_default_port,
)
from ..component import get_canonical_url, get_metadata, run_resolve
from ..models import (
    CONTEXT_KEYS,
    MetadataRecord,
    ResolveMetadataInput,
    SimpleRequest,
)
from ..table import SITE_METADATA, SITE_ROUTE_TABLE

HOST = "www.spreadasmileindia.com"


# --- Fixtures ---


@pytest.fixture
def table() -> RouteMetadataTable:
    """Small route table with a complete default."""
    return build_route_table(
        {
            "default": {
                "title": "Default",
                "description": "Default description",
                "keywords": "default, keywords",
                "social_image": "/img/og.jpg",
                "secondary_image": "/img/twitter.jpg",
            },
            "/": {
                "title": "Home",
                "description": "Home description",
                "social_image": "/img/home.jpg",
            },
            "/about": {
                "title": "About",
                "description": "About description",
                "keywords": "about",
            },
        }
    )


@pytest.fixture
def resolver(table: RouteMetadataTable) -> MetadataResolver:
    return MetadataResolver(table=table, config=CanonicalConfig(preferred_host="www.example.org"))


# --- Path Normalization ---


class TestNormalizePath:
    """Test route key normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/about/", "/about"),
            ("/programs/education/", "/programs/education"),
            ("/about//", "/about/"),
            ("//", "/"),
        ],
    )
    def test_strips_exactly_one_trailing_slash(self, raw: str, expected: str) -> None:
        """One trailing slash is removed, never more."""
        assert normalize_path(raw) == expected

    def test_root_untouched(self) -> None:
        """Root path is never modified."""
        assert normalize_path("/") == "/"

    def test_empty_is_root(self) -> None:
        """Empty path is treated as root."""
        assert normalize_path("") == "/"

    def test_no_trailing_slash_unchanged(self) -> None:
        """Paths without a trailing slash pass through."""
        assert normalize_path("/contact") == "/contact"

    def test_case_preserved(self) -> None:
        """Lookup keys are case-sensitive."""
        assert normalize_path("/About/") == "/About"

    @pytest.mark.parametrize("raw", ["/", "", "/about", "/about/", "/a/b/c/", "/index.html"])
    def test_idempotent(self, raw: str) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize_path(raw)
        assert normalize_path(once) == once


# --- Route Table ---


class TestRouteTable:
    """Test lookup and fallback contract."""

    def test_exact_match(self, table: RouteMetadataTable) -> None:
        assert table.lookup("/about").title == "About"

    def test_root_has_homepage_record(self, table: RouteMetadataTable) -> None:
        assert table.lookup("/").title == "Home"

    def test_miss_returns_default(self, table: RouteMetadataTable) -> None:
        assert table.lookup("/nope") is table.default

    def test_lookup_requires_normalized_key(self, table: RouteMetadataTable) -> None:
        """Un-normalized keys do not match."""
        assert table.lookup("/about/") is table.default

    def test_paths_excludes_default(self, table: RouteMetadataTable) -> None:
        assert table.paths() == ["/", "/about"]

    def test_table_is_read_only(self, table: RouteMetadataTable) -> None:
        with pytest.raises(TypeError):
            table._entries["/new"] = table.default  # type: ignore[index]

    def test_missing_default_rejected(self) -> None:
        with pytest.raises(RouteTableError):
            RouteMetadataTable({"/": MetadataRecord(title="Home", description="Home")})

    def test_incomplete_default_rejected(self) -> None:
        with pytest.raises(RouteTableError):
            RouteMetadataTable(
                {"default": MetadataRecord(title="D", description="D", keywords="k")}
            )

    def test_trailing_slash_key_rejected(self) -> None:
        with pytest.raises(RouteTableError):
            build_route_table(
                {
                    "default": {
                        "title": "D",
                        "description": "D",
                        "keywords": "k",
                        "social_image": "/a.jpg",
                        "secondary_image": "/b.jpg",
                    },
                    "/about/": {"title": "About", "description": "About"},
                }
            )


class TestSiteTable:
    """The shipped site table satisfies the table contract."""

    def test_default_complete(self) -> None:
        assert SITE_ROUTE_TABLE.default.is_complete

    def test_every_entry_loaded(self) -> None:
        assert len(SITE_ROUTE_TABLE) == len(SITE_METADATA)

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/about/founder",
            "/programs/education",
            "/impact/reports",
            "/get-involved/donate",
            "/media",
            "/candle-shop/collections",
            "/contact",
        ],
    )
    def test_pages_registered(self, path: str) -> None:
        assert SITE_ROUTE_TABLE.lookup(path) is not SITE_ROUTE_TABLE.default


# --- Canonical URL ---


class TestCanonicalPath:
    """Test canonical path rules."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/about/", "/about"),
            ("/index.html", "/"),
            ("/INDEX.HTML", "/"),
            ("/about/index.html", "/about"),
            ("/contact?ref=email", "/contact"),
            ("/contact/?ref=email#form", "/contact"),
            ("/", "/"),
            ("", "/"),
        ],
    )
    def test_canonical_path(self, raw: str, expected: str) -> None:
        assert canonical_path(raw) == expected


class TestBuildCanonicalUrl:
    """Test canonical URL output."""

    def test_trailing_slash_stripped(self) -> None:
        url = build_canonical_url(SimpleRequest(path="/about/"))
        assert url == f"https://{HOST}/about"

    def test_index_html_collapses_to_root(self) -> None:
        url = build_canonical_url(SimpleRequest(path="/index.html"))
        assert url == f"https://{HOST}/"

    def test_query_string_dropped(self) -> None:
        url = build_canonical_url(SimpleRequest(path="/contact?ref=email"))
        assert url == f"https://{HOST}/contact"

    def test_request_host_and_scheme_ignored(self) -> None:
        """Plain http on another host still yields the preferred https URL."""
        request = SimpleRequest(
            path="/media",
            protocol="http",
            host="example.org:80",
            headers={"X-Forwarded-Proto": "http"},
        )
        assert build_canonical_url(request) == f"https://{HOST}/media"

    def test_configured_host(self) -> None:
        config = CanonicalConfig(preferred_host="www.example.org")
        url = build_canonical_url(SimpleRequest(path="/about"), config)
        assert url == "https://www.example.org/about"

    def test_missing_everything(self) -> None:
        """No path, protocol or host still produces a URL."""
        assert build_canonical_url(SimpleRequest(path="")) == f"https://{HOST}/"


class TestRequestDiagnostics:
    """Scheme and host values used for logging."""

    def test_forwarded_proto_wins(self) -> None:
        request = SimpleRequest(protocol="http", headers={"X-Forwarded-Proto": "HTTPS"})
        assert resolve_scheme(request) == "https"

    def test_forwarded_proto_list(self) -> None:
        request = SimpleRequest(protocol="http", headers={"x-forwarded-proto": "https, http"})
        assert resolve_scheme(request) == "https"

    def test_connection_protocol(self) -> None:
        assert resolve_scheme(SimpleRequest(protocol="HTTP")) == "http"

    def test_default_scheme(self) -> None:
        assert resolve_scheme(SimpleRequest()) == "https"

    @pytest.mark.parametrize(
        ("host", "expected"),
        [
            ("example.org:80", "example.org"),
            ("example.org:443", "example.org"),
            ("example.org:8080", "example.org:8080"),
            (None, None),
        ],
    )
    def test_strip_default_port(self, host: str | None, expected: str | None) -> None:
        assert strip_default_port(host) == expected


# --- Resolver ---


class TestMetadataResolver:
    """Test resolution and default fallbacks."""

    def test_get_metadata_fills_from_default(self, resolver: MetadataResolver) -> None:
        meta = resolver.get_metadata("/about/")
        assert meta == {
            "title": "About",
            "metaDescription": "About description",
            "keywords": "about",
            "ogImage": "/img/og.jpg",
            "twitterImage": "/img/twitter.jpg",
            "currentPath": "/about",
        }

    def test_homepage_keeps_own_image(self, resolver: MetadataResolver) -> None:
        meta = resolver.get_metadata("/")
        assert meta["ogImage"] == "/img/home.jpg"
        assert meta["twitterImage"] == "/img/twitter.jpg"
        assert meta["keywords"] == "default, keywords"

    def test_unknown_path_uses_default(self, resolver: MetadataResolver) -> None:
        meta = resolver.get_metadata("/missing/")
        assert meta["title"] == "Default"
        assert meta["currentPath"] == "/missing"

    def test_resolve(self, resolver: MetadataResolver) -> None:
        resolved = resolver.resolve(SimpleRequest(path="/about/", host="localhost:443"))
        assert resolved.normalized_path == "/about"
        assert resolved.canonical_url == "https://www.example.org/about"
        assert resolved.title == "About"

    def test_index_html_resolves_default_with_root_canonical(
        self, resolver: MetadataResolver
    ) -> None:
        resolved = resolver.resolve(SimpleRequest(path="/index.html"))
        assert resolved.title == "Default"
        assert resolved.normalized_path == "/index.html"
        assert resolved.canonical_url == "https://www.example.org/"

    def test_publish_context(self, resolver: MetadataResolver) -> None:
        context: dict[str, object] = {"theme": "light"}
        publish_context(context, resolver.resolve(SimpleRequest(path="/about")))

        assert context["theme"] == "light"
        for key in CONTEXT_KEYS:
            assert isinstance(context[key], str)
        assert context["canonical"] == "https://www.example.org/about"
        assert context["seo"]["currentPath"] == "/about"  # type: ignore[index]


# --- Component Entry Points ---


class TestComponent:
    """Test the site-bound entry points."""

    def test_end_to_end_program_page(self) -> None:
        """Trailing slash request resolves the program record."""
        output = run_resolve(
            ResolveMetadataInput(
                path="/programs/education/",
                protocol="http",
                host="spreadasmileindia.com:80",
            )
        )
        expected = SITE_ROUTE_TABLE.lookup("/programs/education")

        assert output.metadata.canonical_url == output.context["canonical"]
        assert output.context["currentPath"] == "/programs/education"
        assert output.context["canonical"] == f"https://{HOST}/programs/education"
        assert output.context["title"] == expected.title
        assert output.context["metaDescription"] == expected.description
        assert output.context["title"] != SITE_ROUTE_TABLE.default.title

    def test_run_resolve_with_rules(self) -> None:
        class Rules:
            preferred_host = "staging.example.org"

        output = run_resolve(ResolveMetadataInput(path="/contact"), rules=Rules())
        assert output.metadata.canonical_url == "https://staging.example.org/contact"

    def test_get_metadata(self) -> None:
        meta = get_metadata("/contact/")
        assert meta["currentPath"] == "/contact"
        assert meta["twitterImage"] == SITE_ROUTE_TABLE.default.secondary_image

    def test_get_canonical_url(self) -> None:
        request = SimpleRequest(path="/impact/", protocol="http", host="example.org")
        assert get_canonical_url(request) == f"https://{HOST}/impact"

    def test_output_has_no_failure_flag(self) -> None:
        """Resolution cannot fail, so the output carries no success flag."""
        output = run_resolve(ResolveMetadataInput(path="/media"))
        assert not hasattr(output, "success")
        assert output.context["title"] == SITE_ROUTE_TABLE.lookup("/media").title
