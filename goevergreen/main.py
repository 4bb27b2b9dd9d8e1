# goevergreen/main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from goevergreen.config import settings
from goevergreen.middleware.security_headers import setup_security_headers
from goevergreen.database.connection import DatabaseConnection
from goevergreen.database.schema import init_database
from goevergreen.templates.errors import build_error_response


import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"Starting GoEvergreen proxy for {settings.domain} ({settings.environment})...")
    try:
        await DatabaseConnection.get_pool()
        await init_database()
        logger.info("Database connection pool initialized")
    except Exception as e:
        # Pages keep working without a database; forms and analytics degrade
        logger.warning(f"Database unavailable, running without database features: {e}")

    yield

    # Shutdown
    logger.info("Shutting down GoEvergreen proxy...")
    try:
        await DatabaseConnection.close_pool()
        logger.info("Database connections closed")
    except Exception as e:
        logger.warning(f"Error closing database connections: {e}")

app = FastAPI(
    title="GoEvergreen",
    description="WordPress.com content proxy with custom branding, newsletter and analytics",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)

setup_security_headers(app)

# Route classification order matters: assets, API, form post, sitemap, then pages
from goevergreen.routes.assets import router as assets_router
app.include_router(assets_router)

from goevergreen.routes.newsletter import router as newsletter_router
app.include_router(newsletter_router)

from goevergreen.routes.contact import router as contact_router
app.include_router(contact_router)

from goevergreen.routes.analytics import router as analytics_router
app.include_router(analytics_router)

from goevergreen.routes.sitemap import router as sitemap_router
app.include_router(sitemap_router)

from goevergreen.content.routes import router as pages_router
app.include_router(pages_router)

def _is_api_request(request: Request) -> bool:
    path = request.url.path
    return path.startswith("/api/") or (path == "/newsletter/subscribe" and request.method == "POST")

def _error_json(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message}
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if _is_api_request(request):
        return _error_json(message, exc.status_code)
    return build_error_response(message, exc.status_code, settings)

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    if _is_api_request(request):
        return _error_json("Internal server error. Please try again.", 500)
    return build_error_response("Service temporarily unavailable", 500, settings)
