"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
See guardian_gate.core.lifespan and guardian_gate.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from guardian_gate.api.router import api_router
from guardian_gate.core.config import get_settings
from guardian_gate.core.exception_handlers import register_exception_handlers
from guardian_gate.core.lifespan import create_lifespan
from guardian_gate.infrastructure.persistence.repositories import InMemoryCredentialStore
from guardian_gate.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from guardian_gate.schemas.health import RootResponse


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # Created here rather than in the lifespan so it exists even when the
    # server (or test transport) does not run lifespan events.
    if settings.database_backend == "memory":
        app.state.credential_store = InMemoryCredentialStore()

    register_exception_handlers(app)

    # Middleware: first added = outermost. Order: request ID → security → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, include_hsts=not settings.is_development)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", response_model=RootResponse)
    def root() -> RootResponse:
        return RootResponse()

    return app


app = create_app()
