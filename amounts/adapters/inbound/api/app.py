import time
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import ValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from amounts.adapters.inbound.api.routes import currencies, display, health
from amounts.domain.exceptions.currency import CurrencySourceError
from amounts.shared.config import get_settings
from amounts.shared.di import cleanup_resources, get_container
from amounts.shared.logging import configure_logging, get_logger
from amounts.shared.observability import (
    generate_metrics,
    get_metrics_registry,
    init_metrics,
    init_tracing,
    instrument_engine,
)

settings = get_settings()

configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

logger = get_logger(__name__)

if settings.ENABLE_METRICS:
    init_metrics()
    logger.info("metrics_enabled")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("api_starting_up")

    container = get_container(app_type="api")
    setattr(app, "state", type("State", (), {"container": container})())

    if settings.ENABLE_TRACING:
        instrument_engine(container.db_engine())

    # Redis only fronts the currency table; amounts keep working without it.
    try:
        redis_client = container.redis_client()
        await redis_client.ping()
        logger.info("redis_connection_verified")
    except Exception as e:
        logger.warning("redis_connection_failed", error=str(e))

    yield

    logger.info("api_shutting_down")

    await cleanup_resources(container)

    logger.info("api_shutdown_complete")


app = FastAPI(
    title="Currency Amounts API",
    description="Currency precision metadata and minor/major unit amount handling",
    version="0.1.0",
    lifespan=lifespan,
)

if settings.ENABLE_TRACING and settings.OPEN_TELEMETRY_COLLECTOR_ENDPOINT:
    init_tracing(
        service_name="currency-amounts-api",
        otlp_endpoint=settings.OPEN_TELEMETRY_COLLECTOR_ENDPOINT,
        app=app,
    )
    logger.info("tracing_enabled")

app.include_router(currencies.router)
app.include_router(display.router)
app.include_router(health.router)


def _join_errors(errors: Sequence[Any]) -> str:
    messages = []

    for error in errors:
        field = ".".join(str(x) for x in error["loc"])
        messages.append(f"{field}: {error['msg']}")

    return "; ".join(messages)


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    if not settings.ENABLE_METRICS:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Metrics are disabled"},
        )

    content, content_type = generate_metrics()
    return Response(content=content, media_type=content_type)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "request_validation_error",
        path=request.url.path,
        method=request.method,
        errors=exc.errors(),
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": _join_errors(exc.errors())},
    )


@app.exception_handler(ValidationError)
async def pydantic_validation_exception_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logger.warning(
        "pydantic_validation_error",
        path=request.url.path,
        method=request.method,
        errors=exc.errors(),
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": _join_errors(exc.errors())},
    )


@app.exception_handler(CurrencySourceError)
async def currency_source_error_handler(
    request: Request, exc: CurrencySourceError
) -> JSONResponse:
    # Only catalogue listing reaches here; precision lookups never raise.
    logger.warning(
        "currency_source_error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Currency metadata is temporarily unavailable"},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning(
        "domain_validation_error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    logger.warning(
        "http_exception",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        detail=exc.detail,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal server error occurred"},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            "http_request_failed",
            method=request.method,
            path=request.url.path,
            error=str(e),
            duration_ms=round(duration * 1000, 2),
            exc_info=True,
        )
        raise

    duration = time.time() - start_time

    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round(duration * 1000, 2),
    )

    if settings.ENABLE_METRICS:
        mtr = get_metrics_registry()
        mtr.http_requests_total.labels(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code,
        ).inc()
        mtr.http_request_duration_seconds.labels(
            method=request.method, endpoint=request.url.path
        ).observe(duration)

    return response
