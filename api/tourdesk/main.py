"""
TourDesk Admin API - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, Response
import time
import logging

# Prometheus metrics
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST, REGISTRY

from tourdesk.config import settings

# Define Prometheus metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

REQUEST_LATENCY = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint']
)
from tourdesk.routers import (
    about,
    bookings,
    cache,
    dashboard,
    destinations,
    health,
    notifications,
    photos,
    preferences,
    trips,
    videos,
)
from tourdesk.services.registry import init_registry, close_registry
from tourdesk.services.resources import ResourceError
from tourdesk.services.stores import RecordNotFound
from tourdesk.utils.http import init_http_client, close_http_client
from tourdesk.utils.redis import init_redis, close_redis

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager - handles startup and shutdown events
    """
    # Startup
    logger.info("Starting TourDesk Admin API...")

    # Sign-in is delegated to the identity provider; refuse to start without its key
    settings.require_identity_key()

    await init_http_client()
    if settings.CACHE_BACKEND == "redis":
        await init_redis()
    await init_registry()

    logger.info(f"TourDesk Admin API ready, mirroring {settings.REMOTE_API_BASE_URL}")

    yield

    # Shutdown
    logger.info("Shutting down TourDesk Admin API...")

    await close_registry()
    await close_http_client()
    await close_redis()

    logger.info("Cleanup completed")


# Create FastAPI application
app = FastAPI(
    title="TourDesk Admin API",
    description="""
    ## Administration API for a tour operator

    Staff-facing backend mirroring the public tourism REST service.

    ### Features
    - Manage trips, bookings, videos, gallery photos and destinations
    - Edit the About Us content
    - Dashboard analytics over bookings and trips
    - Toast-style notifications for every change

    Deletes require an explicit `?confirm=true`.
    """,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware with Prometheus metrics
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    # Record metrics (skip /metrics endpoint to avoid recursion)
    if request.url.path != "/metrics":
        endpoint = request.url.path
        method = request.method
        status = response.status_code

        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(process_time)

    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(ResourceError)
async def resource_error_handler(request: Request, exc: ResourceError):
    """Remote service failures surface as 502 with the server's message"""
    return ORJSONResponse(
        status_code=502,
        content={
            "detail": exc.message,
            "resource": exc.resource,
            "upstream_status": exc.status_code,
        },
    )


@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return ORJSONResponse(status_code=404, content={"detail": str(exc)})


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(trips.router, prefix="/trips", tags=["Trips"])
app.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])
app.include_router(videos.router, prefix="/videos", tags=["Videos"])
app.include_router(photos.router, prefix="/photos", tags=["Photos"])
app.include_router(destinations.router, prefix="/destinations", tags=["Destinations"])
app.include_router(about.router, prefix="/about", tags=["About Us"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
app.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
app.include_router(preferences.router, prefix="/preferences", tags=["Preferences"])
app.include_router(cache.router, prefix="/cache", tags=["Cache"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - API information"""
    return {
        "name": "TourDesk Admin API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint"""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST
    )
