"""
Global exception handlers.

Browsers get an HTML error page carrying the request's SEO metadata.
API clients keep FastAPI's ``{"detail": ...}`` body for HTTP errors and get
``{"error": message}`` for unhandled failures. Server errors are logged
with their traceback.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from sasi_site.api.routes.pages import _escape_html, render_page
from sasi_site.components.seo import SimpleRequest, get_canonical_url, get_metadata

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The page you are looking for does not exist."
SERVER_ERROR_MESSAGE = "Something went wrong on our end."


def wants_html(request: Request) -> bool:
    """Decide between an HTML error page and a JSON error body."""
    if request.url.path.startswith("/api/"):
        return False
    accept = request.headers.get("accept", "")
    if "text/html" in accept:
        return True
    return "application/json" not in accept


def _error_context(request: Request) -> Mapping[str, Any]:
    context = getattr(request.state, "context", None)
    if context is not None:
        return context

    # Failure happened before the SEO middleware ran.
    fallback: dict[str, Any] = dict(get_metadata(request.url.path))
    fallback["canonical"] = get_canonical_url(SimpleRequest(path=request.url.path))
    return fallback


def _error_page(request: Request, status_code: int) -> HTMLResponse:
    heading = "Page Not Found" if status_code == 404 else "Server Error"
    message = NOT_FOUND_MESSAGE if status_code == 404 else SERVER_ERROR_MESSAGE
    body = f"""
    <main class="error">
        <h1>{status_code} - {_escape_html(heading)}</h1>
        <p>{_escape_html(message)}</p>
        <a href="/">Back to home</a>
    </main>
    """
    return HTMLResponse(
        content=render_page(_error_context(request), body),
        status_code=status_code,
    )


async def handle_http_exception(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, StarletteHTTPException)
    if exc.status_code >= 500:
        logger.error("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
    if exc.status_code in (404, 500) and wants_html(request):
        return _error_page(request, exc.status_code)
    return await http_exception_handler(request, exc)


async def handle_unexpected_exception(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    if wants_html(request):
        return _error_page(request, 500)
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
