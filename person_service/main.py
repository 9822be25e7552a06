import time
import logging
from contextlib import asynccontextmanager
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine

from .config import settings
from .domain.errors import ConnectivityError, ConstraintViolation, StorageError
from .domain.ports import IPersonRepository
from .infrastructure.db import engine as default_engine, SessionLocal
from .infrastructure.metrics import (
    metrics_endpoint,
    http_requests_total,
    http_request_duration_seconds
)
from .infrastructure.models import Base
from .infrastructure.repositories import PersonRepository
from .interfaces.http.routers import person as person_router

VERSION = "0.1.0"

# Настройка структурированного логирования
log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


async def log_and_measure(request: Request, call_next):
    start_time = time.time()
    method = request.method
    path = request.url.path

    response = await call_next(request)

    if response.headers.get("content-type", "").startswith("application/json"):
        response.headers["content-type"] = "application/json; charset=utf-8"

    # Метрики
    duration = time.time() - start_time
    status_code = response.status_code
    http_requests_total.labels(method=method, endpoint=path, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=path).observe(duration)

    # Логирование
    logger.info(
        "http_request",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=round(duration * 1000, 2)
    )

    return response


def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    if isinstance(exc, ConnectivityError):
        return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})
    if isinstance(exc, ConstraintViolation):
        return JSONResponse(status_code=400, content={"detail": "Storage rejected the record"})
    return JSONResponse(status_code=500, content={"detail": "Storage error"})


def create_app(repository: IPersonRepository | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the application around an explicitly supplied persistence gateway.

    Both arguments default to the gateway and engine built from ``settings``.
    """
    engine = engine if engine is not None else default_engine
    if repository is None:
        repository = PersonRepository(SessionLocal)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting person service", version=VERSION)
        Base.metadata.create_all(bind=engine)

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection established")
        yield

    app = FastAPI(title="Person Service", version=VERSION, lifespan=lifespan)
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_and_measure)
    app.add_exception_handler(StorageError, storage_error_handler)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics():
        """Prometheus metrics endpoint"""
        return metrics_endpoint()

    app.include_router(person_router.router)
    return app


app = create_app()
