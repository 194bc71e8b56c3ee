from __future__ import annotations
import logging
import time

from fastapi import FastAPI, Request

from realestate_api.core.config import settings, configure_cors
from realestate_api.core.exceptions import register_exception_handlers
from realestate_api.core.logging import setup_logging
from realestate_api.db.session import SessionLocal, engine, init_models, list_tables, ping
from realestate_api.services.seeder import DatabaseSeeder

# Routers (import once, include once)
from realestate_api.api.v1.admin import router as admin_router
from realestate_api.api.v1.diagnostics import router as diagnostics_router
from realestate_api.api.v1.owners import router as owners_router
from realestate_api.api.v1.properties import router as properties_router
from realestate_api.api.v1.property_records import router as property_records_router
from realestate_api.api.v1.search import router as search_router

logger = logging.getLogger("realestate_api")

app = FastAPI(title=settings.app_name, version=settings.app_version)
configure_cors(app)
register_exception_handlers(app)


@app.on_event("startup")
def on_startup():
    """
    - Configure logging
    - Create tables
    - Seed the fixture dataset when enabled (idempotent)
    """
    setup_logging(settings.log_level, settings.log_format)

    try:
        ping()
        logger.info("Database connection OK: %s", engine.url.render_as_string(hide_password=True))
        init_models()
        if settings.seed_on_startup:
            with SessionLocal() as db:
                DatabaseSeeder(db).seed()
        logger.info("Tables: %s", ", ".join(list_tables()))
    except Exception:
        # The API still serves; /test-db reports the failure per request
        logger.exception("Database setup failed")


# Mount API routers (once)
app.include_router(properties_router, prefix=settings.api_prefix)
app.include_router(owners_router, prefix=settings.api_prefix)
app.include_router(property_records_router, prefix=settings.api_prefix)
app.include_router(search_router, prefix=settings.api_prefix)
app.include_router(admin_router, prefix=settings.api_prefix)
app.include_router(diagnostics_router)


@app.middleware("http")
async def _log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response
