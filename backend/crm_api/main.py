"""
CRM Dashboard - Backend API
Authentication and data endpoints for the CRM dashboard
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Load environment variables before settings are read
load_dotenv()

from crm_api.api import auth, customers, dashboard, products
from crm_api.api.utils import error_response
from crm_api.core.config import settings
from crm_api.core.database import check_connection, close_pool, init_pool


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

ENDPOINTS = [
    ("POST", "/api/login"),
    ("GET", "/api/dashboard/stats"),
    ("GET", "/api/dashboard/revenue-chart"),
    ("GET", "/api/dashboard/category-chart"),
    ("GET", "/api/dashboard/recent-orders"),
    ("GET", "/api/customers"),
    ("GET", "/api/products"),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool on startup, close it on shutdown"""
    try:
        init_pool()
        latency_ms = check_connection()
        logger.info(f"Connected to PostgreSQL database ({latency_ms} ms)")
    except Exception as e:
        # Requests retry pool creation on demand and fail individually meanwhile
        logger.error(f"Error connecting to PostgreSQL database: {e}", exc_info=True)

    logger.info("Available endpoints:")
    for method, path in ENDPOINTS:
        logger.info(f"  {method:<6} {path}")

    yield

    logger.info("Shutting down, closing database connections")
    close_pool()


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return error_response(500, "Internal server error")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Unparseable request input; login treats it as a credential mismatch"""
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    if request.url.path == "/api/login":
        return error_response(401, "Invalid email or password")
    return error_response(500, "Internal server error")


# Include API routers
app.include_router(auth.router, prefix="/api", tags=["Authentication"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(customers.router, prefix="/api/customers", tags=["Customers"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])


@app.get("/health")
def health():
    """Health check endpoint - tests database connectivity"""
    db_status = "connected"
    db_latency_ms = None

    try:
        db_latency_ms = check_connection()
    except Exception as e:
        logger.warning(f"Health check could not reach the database: {e}")
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "crm-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms
        }
    }


# Dashboard HTML pages; mounted last so /api and /health take precedence
static_dir = Path(settings.STATIC_DIR)
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")


def run():
    """Entry point for the crm-api console script"""
    import uvicorn
    uvicorn.run(
        "crm_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
