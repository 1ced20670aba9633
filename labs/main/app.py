"""
FastAPI application factory.

`create_app` wires the container, the envelope error handlers, CORS and every
router; `app` is the instance uvicorn serves (`labs.main.app:app`).
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from time import perf_counter
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from labs.main.config import AppSettings, get_settings
from labs.main.container import app_lifespan, init_container
from labs.presentation.controllers import api_routers, system_router
from labs.presentation.errors import register_exception_handlers
from labs.shared import configure_logging, get_logger, update_logging_from_settings

# Logging must work while settings are still being read
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", title=app.title, version=app.version)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


async def bind_request_context(request: Request, call_next):
    """Tag every log line of a request with its id and log one access line."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )

    start = perf_counter()
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    # /health is polled constantly
    if request.url.path != "/health":
        logger.info(
            "request.completed",
            status_code=response.status_code,
            duration_ms=round((perf_counter() - start) * 1000, 3),
        )
    return response


def _add_middleware(app: FastAPI, settings: AppSettings) -> None:
    app.middleware("http")(bind_request_context)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app() -> FastAPI:
    settings = get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.api.title,
        description=settings.api.description,
        version=settings.api.version,
        debug=settings.api.debug,
        lifespan=lifespan,
    )
    _add_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(system_router)
    for router in api_routers:
        app.include_router(router)

    logger.debug("app.routes.registered", count=len(app.routes))
    return app


app = create_app()
