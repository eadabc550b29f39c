import asyncio
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Optional

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from amounts.app.ports.outbound.currency_source import CurrencySource
from amounts.domain.exceptions.currency import (
    CurrencySourceUnavailableError,
    InvalidCurrencyDataError,
)
from amounts.domain.values import (
    DEFAULT_DECIMALS,
    FALLBACK_DECIMALS,
    CurrencyCode,
    PrecisionMap,
)
from amounts.shared.config import get_settings
from amounts.shared.logging import get_logger
from amounts.shared.observability import get_metrics_registry, get_tracer

logger = get_logger(__name__)
settings = get_settings()
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class LoadedPrecisionMap:
    decimals: PrecisionMap
    is_fallback: bool = False
    loaded_at: float = field(default_factory=time.monotonic)


class PrecisionMapCache:
    """
    Process-wide holder of the current precision map.

    Readers on a warm cache only dereference ``_entry``, they never take the
    lock. Populating and invalidating swap the whole entry in one assignment.
    A load that was already running when ``invalidate`` is called hands its
    map to its own caller but never publishes it.

    Maps that came from the static fallback expire after
    ``fallback_retry_seconds`` so the live source gets retried. Live maps
    expire after ``max_age_seconds`` when it is set, which bounds how long a
    process keeps serving a map that another process has invalidated.
    """

    def __init__(
        self,
        fallback_retry_seconds: float = 60,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fallback_retry_seconds = fallback_retry_seconds
        self._max_age_seconds = max_age_seconds
        self._clock = clock
        self._entry: Optional[LoadedPrecisionMap] = None
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def current(self) -> Optional[PrecisionMap]:
        entry = self._entry

        if entry is None or self._is_expired(entry):
            return None

        return entry.decimals

    @property
    def is_fallback(self) -> bool:
        entry = self._entry
        return entry is not None and entry.is_fallback

    async def get_or_load(
        self, loader: Callable[[], Awaitable[LoadedPrecisionMap]]
    ) -> PrecisionMap:
        decimals = self.current

        if decimals is not None:
            return decimals

        async with self._lock:
            decimals = self.current

            if decimals is not None:
                return decimals

            generation = self._generation
            entry = await loader()

            if generation == self._generation:
                self._entry = replace(entry, loaded_at=self._clock())
            else:
                logger.debug("precision_map_discarded", reason="invalidated_during_load")

            return entry.decimals

    def invalidate(self) -> None:
        self._generation += 1
        self._entry = None

    def _is_expired(self, entry: LoadedPrecisionMap) -> bool:
        age = self._clock() - entry.loaded_at

        if entry.is_fallback:
            return age >= self._fallback_retry_seconds

        return self._max_age_seconds is not None and age >= self._max_age_seconds


class CurrencyMetadataStore:
    """
    Answers "how many decimal places does currency X use?".

    Lookups resolve through three tiers: the cached live map, the static
    fallback table, then ``default_decimals``. Nothing here raises for an
    unknown code or an unreachable source.
    """

    def __init__(
        self,
        source: CurrencySource,
        cache: Optional[PrecisionMapCache] = None,
        fallback: Mapping[str, int] = FALLBACK_DECIMALS,
        default_decimals: int = DEFAULT_DECIMALS,
        timeout_seconds: float = 5.0,
        retry_attempts: int = 2,
    ):
        self._source = source
        self._cache = cache or PrecisionMapCache()
        self._fallback = (
            fallback if isinstance(fallback, PrecisionMap) else PrecisionMap(fallback)
        )
        self._default = default_decimals
        self._timeout = timeout_seconds
        self._retry_attempts = retry_attempts

    @property
    def cache(self) -> PrecisionMapCache:
        return self._cache

    async def get_decimals(self, currency: str) -> int:
        """
        Get the number of decimal places for a currency.

        :param currency: Currency code, any case
        :return: Precision, always >= 0
        """
        code = CurrencyCode.canonicalize(currency)
        live = await self._cache.get_or_load(self._load)

        decimals, tier = self.resolve(code, live)

        if settings.ENABLE_METRICS:
            metrics = get_metrics_registry()
            metrics.precision_lookups_total.labels(tier=tier).inc()

        return decimals

    def resolve(self, code: str, live: Mapping[str, int]) -> tuple[int, str]:
        if code in live:
            return live[code], "live"

        if code in self._fallback:
            return self._fallback[code], "fallback"

        return self._default, "default"

    async def load_precision_map(self) -> PrecisionMap:
        """
        Fetch the full precision map from the source.

        :return: The live map, or the static fallback table if the source
            failed, timed out or returned malformed data
        """
        entry = await self._load()
        return entry.decimals

    async def invalidate_cache(self) -> None:
        """
        Drop the cached map so the next lookup refetches it.

        The source's own cache is cleared first so the refetch cannot pick
        up the stale copy again.
        """
        try:
            await self._source.invalidate()
        except Exception as e:
            logger.warning(
                "currency_source_invalidation_failed",
                error_type=type(e).__name__,
                error=str(e),
            )

        self._cache.invalidate()

        logger.info("precision_cache_invalidated")

    async def _load(self) -> LoadedPrecisionMap:
        start_time = time.time()

        with tracer.start_as_current_span("precision_map_load"):
            try:
                raw = await asyncio.wait_for(
                    self._fetch_with_retries(), timeout=self._timeout
                )
                decimals = self._validate(raw)

            except Exception as e:
                duration = time.time() - start_time

                logger.warning(
                    "precision_map_load_failed",
                    error_type=type(e).__name__,
                    error=str(e),
                    fallback_currency_count=len(self._fallback),
                    duration_ms=round(duration * 1000, 2),
                )

                if settings.ENABLE_METRICS:
                    metrics = get_metrics_registry()
                    metrics.precision_map_loads_total.labels(outcome="fallback").inc()

                return LoadedPrecisionMap(self._fallback, is_fallback=True)

        duration = time.time() - start_time

        logger.info(
            "precision_map_loaded",
            currency_count=len(decimals),
            duration_ms=round(duration * 1000, 2),
        )

        if settings.ENABLE_METRICS:
            metrics = get_metrics_registry()
            metrics.precision_map_loads_total.labels(outcome="live").inc()
            metrics.precision_map_load_duration_seconds.observe(duration)

        return LoadedPrecisionMap(decimals)

    @staticmethod
    def _validate(raw: object) -> PrecisionMap:
        if not isinstance(raw, Mapping):
            raise InvalidCurrencyDataError(
                f"expected a code -> decimals mapping, got {type(raw).__name__}"
            )

        try:
            return PrecisionMap(raw)
        except ValueError as e:
            raise InvalidCurrencyDataError(str(e)) from e

    async def _fetch_with_retries(self) -> Mapping[str, int]:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
            retry=retry_if_exception_type(CurrencySourceUnavailableError),
            reraise=True,
        ):
            with attempt:
                return await self._source.fetch_decimals_map()

        # To let linter know we're guaranteed to raise an exception by this point
        raise CurrencySourceUnavailableError(
            type(self._source).__name__, "fetch failed after retries"
        )
