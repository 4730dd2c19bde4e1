"""People API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly from route tables (no auto-discovery)
    - Global error handlers map PeopleApiError and defects → structured JSON responses
    - One InMemoryPersonStore per app, owned by app.state and reached only through PersonService
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app() factory: tests build a fresh app + store per case, uvicorn uses
      the module-level `app`
    - Lifespan over @app.on_event: logging configured once at startup
    - Swagger UI and the OpenAPI document served under settings.docs_url (/api-docs)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from people_api.api.error_handlers import register_error_handlers
from people_api.api.routes import health, people
from people_api.config import Settings, get_settings
from people_api.infrastructure.observability import RequestLoggingMiddleware, setup_logging
from people_api.infrastructure.person_store import InMemoryPersonStore
from people_api.services.person_service import PersonService

logger = logging.getLogger(__name__)

API_TITLE = "People API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "CRUD service for Person records kept in process memory."


def create_app(
    settings: Settings | None = None, store: InMemoryPersonStore | None = None,
) -> FastAPI:
    """Build a fully wired application around one person store."""
    settings = settings or get_settings()
    store = store if store is not None else InMemoryPersonStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"People API started (docs at {settings.docs_url})")
        yield
        logger.info("People API shutting down")

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
        docs_url=settings.docs_url,
        openapi_url=f"{settings.docs_url}/openapi.json",
        redoc_url=None,
        openapi_tags=[
            {"name": people.TAG, "description": "Create, read, update and delete people"},
            {"name": "Health", "description": "Liveness probe"},
        ],
    )
    app.state.settings = settings
    app.state.person_store = store
    app.state.person_service = PersonService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(people.build_router())

    register_error_handlers(app)
    return app


app = create_app()
