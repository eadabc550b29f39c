import redis.asyncio as redis
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from amounts.adapters.inbound.api.dependencies import (
    get_db_session,
    get_metadata_store,
    get_redis_client,
)
from amounts.adapters.inbound.api.schemas.health import (
    HealthCheckResponse,
    ServiceHealthResponse,
)
from amounts.app.services import CurrencyMetadataStore
from amounts.shared.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=ServiceHealthResponse,
    summary="Health Check",
    description="Check currency metadata dependencies and which precision map is in use",
)
async def health_check(
    db: AsyncSession = Depends(get_db_session),
    redis_client: redis.Redis = Depends(get_redis_client),
    store: CurrencyMetadataStore = Depends(get_metadata_store),
) -> ServiceHealthResponse:
    checks: dict[str, HealthCheckResponse] = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["postgres"] = HealthCheckResponse(status="healthy", error=None)
        logger.debug("health_check_postgres", status="healthy")
    except Exception as e:
        checks["postgres"] = HealthCheckResponse(status="unhealthy", error=str(e))
        logger.warning("health_check_postgres", status="unhealthy", error=str(e))

    try:
        await redis_client.ping()
        checks["redis"] = HealthCheckResponse(status="healthy", error=None)
        logger.debug("health_check_redis", status="healthy")
    except Exception as e:
        checks["redis"] = HealthCheckResponse(status="unhealthy", error=str(e))
        logger.warning("health_check_redis", status="unhealthy", error=str(e))

    # Serving the static table keeps amounts working, so it only degrades.
    if store.cache.is_fallback:
        checks["precision_map"] = HealthCheckResponse(
            status="degraded", error="Serving static fallback decimals"
        )
    else:
        checks["precision_map"] = HealthCheckResponse(status="healthy", error=None)

    statuses = {c.status for c in checks.values()}

    if "unhealthy" in statuses:
        overall = "unhealthy"
    elif "degraded" in statuses:
        overall = "degraded"
    else:
        overall = "healthy"

    logger.info("health_check_complete", overall_status=overall)

    return ServiceHealthResponse(status=overall, checks=checks)
