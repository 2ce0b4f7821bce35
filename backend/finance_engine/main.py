"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from finance_engine.api.v1.router import api_router
from finance_engine.config import settings
from finance_engine.core.exceptions import FinancingError
from finance_engine.core.logging import setup_logging

setup_logging(settings.LOG_LEVEL, service_name=settings.SERVICE_NAME)

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Vehicle Financing Estimator API",
    description="API for estimating ranked lender offers for vehicle loans",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(FinancingError)
async def financing_error_handler(request: Request, exc: FinancingError) -> JSONResponse:
    """Domain errors raised outside endpoint bodies (e.g. catalog loading) become 400s."""
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are reported as 400 with the same error shape."""
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request: " + "; ".join(messages)},
    )


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Vehicle Financing Estimator API",
        "version": "1.0.0",
        "docs": "/api/docs",
    }
