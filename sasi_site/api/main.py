import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sasi_site.api.deps import get_settings
from sasi_site.api.errors import register_error_handlers
from sasi_site.api.middleware import SeoContextMiddleware
from sasi_site.app_shell.config import configure_logging, validate_ops_rules
from sasi_site.components.seo import SITE_ROUTE_TABLE, create_metadata_resolver
from sasi_site.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        configure_logging(rules)
        validate_ops_rules(rules)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    app.state.seo_resolver = create_metadata_resolver(
        SITE_ROUTE_TABLE, preferred_host=rules.seo.preferred_host
    )
    logger.info("Rules for %s loaded from %s", rules.site.name, settings.rules_path)

    yield
    # Shutdown cleanup if needed


app = FastAPI(
    title="Spread A Smile India",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

register_error_handlers(app)

# --- Routers ---
from sasi_site.api.routes import (  # noqa: E402
    admin_programs,
    pages,
    public_programs,
    seo_meta,
)

app.include_router(seo_meta.router, prefix="/api/seo", tags=["SEO"])
app.include_router(public_programs.router, prefix="/api/programs", tags=["Programs"])
app.include_router(admin_programs.router, prefix="/api/admin/programs", tags=["Admin Programs"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "site"}


# Catch-all page route, registered last
app.include_router(pages.router, prefix="", tags=["Pages"])

app.add_middleware(SeoContextMiddleware)

# CORS
origins = [
    "https://www.spreadasmileindia.com",
    "https://spreadasmileindia.com",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
