"""
Orders API - Backend
Order management REST service
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orders_api.api import orders
from orders_api.core.config import settings
from orders_api.core.database import get_db_connection_with_retry, init_db

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.uses_database and settings.AUTO_CREATE_TABLES:
        init_db()
    elif not settings.uses_database:
        logger.info("DATABASE_URL not configured, using in-memory order store")
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request (bad JSON, wrong field types) -> 400 with the first error"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = first.get("loc", ["request"])[-1]
        detail = f"{field}: {first.get('msg')}"
    else:
        detail = "Invalid request"
    logger.warning(f"Invalid request to {request.url.path}: {detail}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "name": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION
    }


@app.get("/health")
def health():
    """Health check endpoint - tests database connectivity"""
    if not settings.uses_database:
        return {
            "status": "healthy",
            "database": {"status": "in-memory"}
        }

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    conn = None
    try:
        # Single attempt, the health check must answer fast
        conn = get_db_connection_with_retry(max_retries=1)
        cursor = conn.cursor()

        try:
            db_start = time.time()
            cursor.execute("SELECT 1")
            cursor.fetchone()
            db_latency_ms = round((time.time() - db_start) * 1000, 2)
        finally:
            cursor.close()

        db_status = "connected"
    except Exception as e:
        db_status = "disconnected"
        db_error = str(e)
    finally:
        if conn:
            conn.close()

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error
        }
    }
