from typing import Literal, Optional

from pydantic import BaseModel, Field

HealthStatus = Literal["healthy", "degraded", "unhealthy"]


class HealthCheckResponse(BaseModel):
    status: HealthStatus = Field(
        ...,
        description="Dependency status. 'degraded' means amounts are served from the static decimals table.",
        examples=["healthy"],
    )
    error: Optional[str] = Field(
        None,
        description="What is wrong, if anything.",
        examples=["Serving static fallback decimals"],
    )


class ServiceHealthResponse(BaseModel):
    status: HealthStatus = Field(
        ..., description="Worst status across all checks.", examples=["degraded"]
    )
    checks: dict[str, HealthCheckResponse] = Field(
        ..., description="Per-dependency results: postgres, redis, precision_map."
    )
