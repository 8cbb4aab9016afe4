"""FastAPI application entrypoint.

Responsibilities kept minimal:
  * App / lifespan initialization
  * Router registration (picker, backend popup)
  * Cross-cutting concerns: metrics middleware & exception handlers
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from .api.picker import router as picker_router
from .api.backend import router as backend_router
from .config import configure_logging, cors_origins
from .db import models  # noqa: F401 register models before create_all
from .db.session import engine, Base
from .errors import BaseAppException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - simple startup path
    """Configure logging and create the schema (idempotent)."""
    configure_logging()
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="Calendar Picker API", version="0.1.0", lifespan=lifespan)

# --- Metrics setup ---
REQUEST_COUNT = Counter(
    "calendar_picker_requests_total", "Total HTTP requests", ["method", "path", "status"]
)
REQUEST_LATENCY = Histogram(
    "calendar_picker_request_latency_seconds", "Latency of HTTP requests", ["method", "path"]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Register routers once ---
app.include_router(picker_router)
app.include_router(backend_router)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    path = request.url.path
    method = request.method
    with REQUEST_LATENCY.labels(method=method, path=path).time():
        response: Response = await call_next(request)
    REQUEST_COUNT.labels(method=method, path=path, status=str(response.status_code)).inc()
    return response


@app.get("/metrics")
def metrics():  # pragma: no cover - external scrape
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    if exc.http_status >= 500:
        logger.error("%s: %s", exc.code, exc.message)
    else:
        logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.http_status, exc.code)
    return JSONResponse(
        status_code=exc.http_status,
        content={"detail": {"code": exc.code, "message": exc.message}},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):  # pragma: no cover
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": {"code": "INTERNAL_ERROR", "message": "unexpected error"}},
    )


@app.get("/healthz")
async def health():
    return {"status": "ok"}
