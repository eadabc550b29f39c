from .metrics import generate_metrics, get_metrics_registry, init_metrics
from .tracing import get_tracer, init_tracing, instrument_engine

__all__ = [
    "generate_metrics",
    "get_metrics_registry",
    "get_tracer",
    "init_metrics",
    "init_tracing",
    "instrument_engine",
]
