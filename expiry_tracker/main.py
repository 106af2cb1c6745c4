from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import uvicorn
import time
from sqlalchemy import text

from expiry_tracker.database import SessionLocal, init_db
from expiry_tracker.errors import AppError
from expiry_tracker.utils.logger import logger
from expiry_tracker.routers import auth, products

# Import settings
from expiry_tracker.config import settings

# Environment configuration
ENVIRONMENT = settings.environment
DEBUG_MODE = settings.debug
HOST = settings.api_host
PORT = settings.api_port

# CORS configuration
ALLOWED_ORIGINS = settings.allowed_origins.split(",")
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager for startup and shutdown events
    """
    logger.info("Starting Expiry Tracker API...")

    try:
        logger.info("Creating database tables...")
        init_db()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}")
        raise

    yield

    logger.info("Shutting down Expiry Tracker API...")


app = FastAPI(
    title="Expiry Tracker API",
    description="Track perishable products and their expiration dates, per user",
    version="1.0.0",
    docs_url="/docs" if DEBUG_MODE else None,
    redoc_url="/redoc" if DEBUG_MODE else None,
    openapi_url="/openapi.json" if DEBUG_MODE else None,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=ALLOWED_METHODS,
    allow_headers=ALLOWED_HEADERS,
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.warning(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message}
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(f"HTTP {exc.status_code} error on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"}
    )


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    logger.info(f"Incoming request: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"Request completed: {request.method} {request.url.path} - {response.status_code} in {process_time:.4f}s")

    return response


@app.get("/health")
def health_check():
    """Application health check"""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "disconnected"

    return {
        "status": "healthy",
        "service": "expiry-tracker",
        "version": "1.0.0",
        "environment": ENVIRONMENT,
        "components": {
            "database": db_status,
            "email": "configured" if settings.smtp_host else "not_configured"
        }
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Expiry Tracker API",
        "version": "1.0.0",
        "docs": "/docs" if DEBUG_MODE else "Documentation disabled in production",
        "health": "/health"
    }


app.include_router(auth.router)
app.include_router(products.router)


def run():
    logger.info(f"Starting server in {ENVIRONMENT} mode...")
    uvicorn.run(
        "expiry_tracker.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG_MODE,
        log_level="info" if DEBUG_MODE else "warning",
    )


if __name__ == "__main__":
    run()
