"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ngestream.config import Settings
from ngestream.interface.api.routes import comments, entitlements, health
from ngestream.util.di.container import create_container, setup_di
from ngestream.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does so in production and tests/conftest.py does so under pytest.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="NgeStream Comments API",
        description="Threaded movie discussions for NgeStream subscribers",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(entitlements.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
