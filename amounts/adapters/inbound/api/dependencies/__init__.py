from .container import get_container_dependency
from .db import get_db_session
from .services import (
    get_amount_service,
    get_currencies_query_handler,
    get_metadata_store,
    get_redis_client,
)

__all__ = [
    "get_container_dependency",
    "get_db_session",
    "get_amount_service",
    "get_currencies_query_handler",
    "get_metadata_store",
    "get_redis_client",
]
