"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException as FastAPIHTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from codemurf.api.routes import (catalog, catalog_pages, health, metrics, pages, profile,
                                 profile_pages)
from codemurf.core.backend_client import close_backend_client
from codemurf.core.config import get_settings
from codemurf.core.errors import CodemurfError
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.middleware import LoggingContextMiddleware
from codemurf.core.middleware_metrics import MetricsMiddleware
from codemurf.core.templates import STATIC_DIR

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} in {settings.app_env} mode "
        f"(catalog source: {settings.catalog_source}, backend: {settings.backend_api_url})"
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await close_backend_client()


_settings = get_settings()
app = FastAPI(
    title=_settings.app_name,
    description="Codemurf marketplace for templates and UI components",
    version="0.1.0",
    lifespan=lifespan,
)

# Add logging context middleware (before CORS to capture all requests)
app.add_middleware(LoggingContextMiddleware)
if _settings.enable_metrics:
    app.add_middleware(MetricsMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CodemurfError)
async def codemurf_exception_handler(request: Request, exc: CodemurfError):
    """Domain errors that escaped a route keep their status code"""
    logger.warning(
        f"Unhandled {type(exc).__name__}: {exc.message}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to log all unhandled errors"""
    # Don't handle HTTPException - let FastAPI handle it
    if isinstance(exc, FastAPIHTTPException):
        raise exc

    error_msg = str(exc)
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={
            "error": error_msg,
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": error_msg,
            "type": type(exc).__name__
        }
    )


app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# JSON API
app.include_router(catalog.router)
app.include_router(profile.router)
app.include_router(health.router)
if _settings.enable_metrics:
    app.include_router(metrics.router)

# Web pages
app.include_router(pages.router)
app.include_router(catalog_pages.router)
app.include_router(profile_pages.router)


@app.get("/api")
async def root():
    """Root API endpoint"""
    settings = get_settings()
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "running",
        "environment": settings.app_env,
        "catalog_source": settings.catalog_source,
    }
