"""
Main application entry point for the Onboarding Gateway.
Initializes FastAPI application with Twilio Lookup/Verify endpoints and the onboarding UI.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import gradio as gr

from onboarding_gateway.api.lookup_routes import router as lookup_router
from onboarding_gateway.api.verify_routes import router as verify_router
from onboarding_gateway.api.schemas import HealthResponse, NotFoundResponse
from onboarding_gateway.ui.gradio_app import create_gradio_interface
from onboarding_gateway.utils.logger import setup_logger
from onboarding_gateway.config import settings

SERVICE_NAME = "Onboarding Gateway"
APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server running on http://%s:%s", settings.server_host, settings.server_port)
    logger.info("Environment: %s", settings.environment)
    yield
    logger.info("Server shutting down")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application with the onboarding UI.

    Returns:
        Configured FastAPI application instance with mounted Gradio UI
    """
    app = FastAPI(
        title="Onboarding Gateway API",
        description="Phone lookup and one-time passcode verification backed by Twilio",
        version=APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        query = dict(request.query_params)
        if query:
            logger.info("%s %s - Query: %s", request.method, request.url.path, query)
        else:
            logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        message = "Internal server error" if settings.is_production else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message}
        )

    # Include API routers
    app.include_router(lookup_router)
    app.include_router(verify_router)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="OK",
            service=SERVICE_NAME,
            version=APP_VERSION,
            timestamp=_utcnow()
        )

    @app.api_route(
        "/api/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        status_code=status.HTTP_404_NOT_FOUND,
        response_model=NotFoundResponse,
        include_in_schema=False
    )
    async def api_not_found(request: Request, path: str):
        """Unmatched API routes answer with JSON instead of the UI."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Not Found",
                "message": f"Cannot {request.method} {request.url.path}",
                "timestamp": _utcnow().isoformat(),
            }
        )

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory %s not found, /static disabled", static_dir)

    # Create and mount Gradio interface at root path
    gradio_app = create_gradio_interface()
    app = gr.mount_gradio_app(app, gradio_app, path="/")

    return app


setup_logger(log_level=settings.log_level)

# Create application instance
app = create_app()


def run() -> None:
    """Start the server with uvicorn, refusing to start without Twilio credentials."""
    import uvicorn

    missing = settings.missing_credentials()
    if missing:
        logger.error("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    uvicorn.run(
        "onboarding_gateway.main:app",
        host=settings.server_host,
        port=settings.server_port,
        proxy_headers=settings.trust_proxy,
        forwarded_allow_ips="*" if settings.trust_proxy else None,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
