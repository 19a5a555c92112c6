"""
Safety-Aware Routing API - FastAPI Main Application

A RESTful API for calculating routes that balance distance and street risk.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import uvicorn

from api.routes.routing import router as routing_router
from api.services.routing_service import API_VERSION, routing_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - startup and shutdown events.
    """
    logger.info("Starting Safety-Aware Routing API...")

    health = routing_service.get_health_status()
    if health.graph_loaded:
        logger.info(f"✓ Routing service ready with {health.vertex_count} intersections")
    else:
        logger.warning("⚠ Routing service running in degraded mode - street graph not loaded")

    yield

    logger.info("Shutting down Safety-Aware Routing API...")


app = FastAPI(
    title="Safety-Aware Routing API",
    description="""
    **Calculate safer walking routes over a street-intersection graph**

    Every street segment carries a length and a risk score from 1 (safest)
    to 5 (most dangerous). Route cost is
    `length * (1 - safety_weight) + risk * safety_weight`.

    ## Features

    - **Adjustable weighting**: Slide between shortest and safest
    - **Two Dijkstra variants**: Linear scan, O(V^2), or binary heap, O((V+E) log V)
    - **Map snapping**: Clicked coordinates snap to the nearest intersection
    - **GeoJSON output**: Route plus per-segment risk styling
    - **Weight advice**: Suggestions from simulated public-safety news

    ## Quick Start

    1. Check service health: `GET /api/routing/health`
    2. Calculate a route: `POST /api/routing/calculate`
    3. Compare both variants: `POST /api/routing/compare`
    """,
    version=API_VERSION,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
    lifespan=lifespan
)

# Add CORS middleware for web applications
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors with detailed information.
    """
    logger.warning(f"Validation error for {request.url}: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "validation_error",
            "message": "Request validation failed",
            "details": jsonable_errors(exc)
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle unexpected errors gracefully.
    """
    logger.error(f"Unexpected error for {request.url}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "details": None
        }
    )


def jsonable_errors(exc: RequestValidationError):
    """Validation errors without the raw exception objects pydantic may attach."""
    return [
        {key: value for key, value in error.items() if key != 'ctx'}
        for error in exc.errors()
    ]


app.include_router(routing_router)


@app.get("/", tags=["general"])
async def root():
    """
    API root endpoint with basic information.
    """
    return {
        "api": "Safety-Aware Routing API",
        "version": API_VERSION,
        "status": "operational",
        "documentation": "/docs",
        "health_check": "/api/routing/health"
    }


@app.get("/health", tags=["general"])
async def api_health():
    """
    Simple health check endpoint.
    """
    service_health = routing_service.get_health_status()
    return {
        "api_status": "healthy",
        "service_status": service_health.status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# Development server configuration
if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
