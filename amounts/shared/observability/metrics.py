from functools import lru_cache
from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from amounts.shared.logging import get_logger

logger = get_logger(__name__)


class Metrics:
    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )
        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency",
            ["method", "endpoint"],
            registry=self.registry,
        )

        self.precision_lookups_total = Counter(
            "precision_lookups_total",
            "Currency precision lookups by resolving tier",
            ["tier"],
            registry=self.registry,
        )
        self.precision_map_loads_total = Counter(
            "precision_map_loads_total",
            "Precision map loads by outcome",
            ["outcome"],
            registry=self.registry,
        )
        self.precision_map_load_duration_seconds = Histogram(
            "precision_map_load_duration_seconds",
            "Time spent loading the precision map",
            registry=self.registry,
        )

        self.format_fallbacks_total = Counter(
            "format_fallbacks_total",
            "Amount formatting that fell back to the plain format",
            ["currency"],
            registry=self.registry,
        )

        self.cache_hits_total = Counter(
            "cache_hits_total",
            "Cache hit count",
            ["cache_type"],
            registry=self.registry,
        )
        self.cache_misses_total = Counter(
            "cache_misses_total",
            "Cache miss count",
            ["cache_type"],
            registry=self.registry,
        )

        self.db_queries_total = Counter(
            "db_queries_total",
            "Total database queries",
            ["operation", "table"],
            registry=self.registry,
        )
        self.db_query_duration_seconds = Histogram(
            "db_query_duration_seconds",
            "Database query duration",
            ["operation", "table"],
            registry=self.registry,
        )

        logger.info("metrics_initialized")


@lru_cache()
def get_metrics_registry() -> Metrics:
    return Metrics()


def init_metrics() -> Metrics:
    get_metrics_registry.cache_clear()
    return get_metrics_registry()


def generate_metrics() -> tuple[str, str]:
    metrics = get_metrics_registry()
    content = generate_latest(metrics.registry)
    return content.decode("utf-8"), CONTENT_TYPE_LATEST
