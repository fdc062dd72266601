from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging, time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from slotsync import __version__, settings
from slotsync.errors import register_exception_handlers
from slotsync.routers.mock_api import router as mock_api_router
from slotsync.routers.slots import router as slots_router
from slotsync.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging
log = logging.getLogger(__name__)

SERVICE_NAME = "Appointment Sync API"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time so /health can report uptime."""
    app.state.started_at = time.monotonic()
    log.info("%s starting (env=%s)", SERVICE_NAME, settings.APP_ENV)
    yield
    log.info("%s shutting down", SERVICE_NAME)


# Swagger UI lives at /api-docs
app = FastAPI(
    title=SERVICE_NAME,
    version=__version__,
    description="Republishes appointment slots from a messy scheduling system in one stable shape.",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    max_age=86400,
)


@app.middleware("http")
async def log_and_harden(request: Request, call_next):
    log.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    for k, v in SECURITY_HEADERS.items():
        response.headers.setdefault(k, v)
    return response


register_exception_handlers(app)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/")
def hello():
    return {
        "success": True,
        "data": {
            "message": "Hello World! 🌍",
            "service": SERVICE_NAME,
            "version": __version__,
            "timestamp": _now(),
        },
    }


@app.get("/health")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - status: static "healthy" if the app is alive
      - uptime: seconds since startup
      - environment: APP_ENV
    """
    started = getattr(app.state, "started_at", None)
    uptime = time.monotonic() - started if started is not None else 0.0
    return {
        "success": True,
        "data": {
            "status": "healthy",
            "uptime": uptime,
            "timestamp": _now(),
            "environment": settings.APP_ENV,
        },
    }


# Register API routers:
app.include_router(mock_api_router)
app.include_router(slots_router)
