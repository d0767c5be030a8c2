import logging

from fastapi import FastAPI

from vehicle_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_catalog.entrypoints.http.routes.brands import router as brands_router
from vehicle_catalog.entrypoints.http.routes.clients import router as clients_router
from vehicle_catalog.entrypoints.http.routes.health import router as health_router
from vehicle_catalog.entrypoints.http.routes.prices import router as prices_router
from vehicle_catalog.entrypoints.http.routes.subtypes import router as subtypes_router
from vehicle_catalog.entrypoints.http.routes.vehicle_models import router as models_router
from vehicle_catalog.entrypoints.http.routes.vehicle_types import router as types_router
from vehicle_catalog.infra.config import log_level


def build_app() -> FastAPI:
    logging.getLogger("vehicle_catalog").setLevel(log_level())

    app = FastAPI(
        title="Vehicle Catalog API",
        description="""
        Back-office API for the vehicle catalog: brands, models, types,
        subtypes, the model/subtype price matrix, and registered clients.

        ## Conventions
        - GET lists a collection with optional query filters (bare JSON array)
        - POST creates, PUT partially updates, DELETE removes (body `{"id": ...}`)
        - Mutations answer `{"ok": true, "data": ...}`

        ## Error Handling
        Failures answer `{"message", "code", "errors"?, "detail"?}` with
        400 (validation), 404 (not found) or 500 (internal).
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(brands_router, prefix="/v1")
    app.include_router(types_router, prefix="/v1")
    app.include_router(models_router, prefix="/v1")
    app.include_router(subtypes_router, prefix="/v1")
    app.include_router(prices_router, prefix="/v1")
    app.include_router(clients_router, prefix="/v1")

    return app


app = build_app()
