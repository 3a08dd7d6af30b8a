"""
Public site pages.

Every page's <head> comes from the metadata the SEO middleware resolved for
the request (``request.state.context``). Program detail pages are filled
from the program store; everything else is a static page from the route
table.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from sasi_site.api.deps import get_program_service
from sasi_site.components.programs import ProgramService
from sasi_site.components.seo import DEFAULT_KEY, SITE_ROUTE_TABLE, normalize_path
from sasi_site.domain.entities import Program

router = APIRouter()

HOME_ALIASES = frozenset({"/", "/index.html"})


# --- HTML Rendering ---


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def render_head_html(context: Mapping[str, Any]) -> str:
    """Render the metadata part of <head> from a published SEO context."""
    title = _escape_html(context["title"])
    description = _escape_html(context["metaDescription"])
    canonical = _escape_html(context["canonical"])
    og_image = _escape_html(context["ogImage"])
    twitter_image = _escape_html(context["twitterImage"])

    html_parts = [
        f"<title>{title}</title>",
        f'<meta name="description" content="{description}" />',
        f'<meta name="keywords" content="{_escape_html(context["keywords"])}" />',
        f'<meta property="og:title" content="{title}" />',
        f'<meta property="og:description" content="{description}" />',
        f'<meta property="og:image" content="{og_image}" />',
        f'<meta property="og:url" content="{canonical}" />',
        '<meta name="twitter:card" content="summary_large_image" />',
        f'<meta name="twitter:title" content="{title}" />',
        f'<meta name="twitter:description" content="{description}" />',
        f'<meta name="twitter:image" content="{twitter_image}" />',
        f'<link rel="canonical" href="{canonical}" />',
    ]
    return "\n    ".join(html_parts)


def render_page(context: Mapping[str, Any], body_content: str = "") -> str:
    """Render a complete HTML page with metadata."""
    head_html = render_head_html(context)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    {head_html}
</head>
<body>
    {body_content}
</body>
</html>"""


def _static_body(context: Mapping[str, Any]) -> str:
    return f"""
    <main>
        <h1>{_escape_html(context["title"])}</h1>
        <p>{_escape_html(context["metaDescription"])}</p>
    </main>
    """


def _program_card(program: Program) -> str:
    return f"""
        <li class="program-card">
            <i class="{_escape_html(program.icon)}"></i>
            <a href="/programs/{_escape_html(program.slug)}">{_escape_html(program.title)}</a>
            <p>{_escape_html(program.short_description)}</p>
        </li>"""


def _program_body(program: Program) -> str:
    highlights = "".join(f"<li>{_escape_html(h)}</li>" for h in program.highlights)
    stats = "".join(
        f"<li><strong>{_escape_html(s.value)}</strong> {_escape_html(s.label)}</li>"
        for s in program.stats
    )
    return f"""
    <article>
        <h1>{_escape_html(program.title)}</h1>
        <img src="{_escape_html(program.image.url)}" alt="{_escape_html(program.image.alt)}" />
        <p>{_escape_html(program.full_description)}</p>
        <ul class="highlights">{highlights}</ul>
        <ul class="stats">{stats}</ul>
    </article>
    """


def is_site_page(path: str) -> bool:
    """True when the path has its own entry in the route table."""
    normalized = normalize_path(path)
    return normalized in HOME_ALIASES or (
        normalized != DEFAULT_KEY and normalized in SITE_ROUTE_TABLE
    )


def _context(request: Request) -> Mapping[str, Any]:
    return request.state.context


# --- Page Endpoints ---


@router.get("/", response_class=HTMLResponse, summary="Homepage")
def homepage(request: Request) -> HTMLResponse:
    context = _context(request)
    return HTMLResponse(content=render_page(context, _static_body(context)), status_code=200)


@router.get("/programs/", response_class=HTMLResponse, include_in_schema=False)
@router.get("/programs", response_class=HTMLResponse, summary="Programs overview")
def programs_page(
    request: Request,
    service: ProgramService = Depends(get_program_service),
) -> HTMLResponse:
    """Programs overview with every active program."""
    context = _context(request)
    cards = "".join(_program_card(p) for p in service.list_active())
    body = f"""
    <main>
        <h1>{_escape_html(context["title"])}</h1>
        <p>{_escape_html(context["metaDescription"])}</p>
        <ul class="programs">{cards}
        </ul>
    </main>
    """
    return HTMLResponse(content=render_page(context, body), status_code=200)


@router.get("/programs/{slug}/", response_class=HTMLResponse, include_in_schema=False)
@router.get("/programs/{slug}", response_class=HTMLResponse, summary="Program page")
def program_page(
    slug: str,
    request: Request,
    service: ProgramService = Depends(get_program_service),
) -> HTMLResponse:
    """
    Program detail page.

    An active program with this slug is rendered from the store; otherwise
    the static programs page for the path is served.
    """
    context = _context(request)
    program = service.get_by_slug(slug)
    if program is not None and program.is_active:
        return HTMLResponse(content=render_page(context, _program_body(program)), status_code=200)

    return site_page(f"programs/{slug}", request)


@router.get("/{page_path:path}", response_class=HTMLResponse, summary="Site page")
def site_page(page_path: str, request: Request) -> HTMLResponse:
    """Static site page. Unknown paths are 404."""
    if not is_site_page(f"/{page_path}"):
        raise HTTPException(status_code=404, detail="Page not found")

    context = _context(request)
    return HTMLResponse(content=render_page(context, _static_body(context)), status_code=200)
