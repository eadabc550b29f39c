from typing import Any, Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from amounts.shared.logging import get_logger

logger = get_logger(__name__)

_tracing_enabled = False


def init_tracing(
    service_name: str = "currency-amounts",
    otlp_endpoint: Optional[str] = None,
    app: Optional[Any] = None,
) -> None:
    """
    Export spans over OTLP and instrument FastAPI and Redis.

    The database engine only exists once the container is built, so it is
    instrumented separately through :func:`instrument_engine`.
    """
    global _tracing_enabled

    if not otlp_endpoint:
        logger.info("tracing_disabled", reason="no_otlp_endpoint")
        return

    tracer_provider = TracerProvider(
        resource=Resource.create({"service.name": service_name})
    )
    tracer_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))
    )
    trace.set_tracer_provider(tracer_provider)

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)

    RedisInstrumentor().instrument()

    _tracing_enabled = True

    logger.info(
        "tracing_initialized",
        service_name=service_name,
        otlp_endpoint=otlp_endpoint,
        app_instrumented=app is not None,
    )


def instrument_engine(engine: Any) -> None:
    if not _tracing_enabled:
        return

    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    logger.debug("sqlalchemy_instrumented")


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)
