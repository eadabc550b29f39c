from collections.abc import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from amounts.shared.di import Container

from .container import get_container_dependency


async def get_db_session(
    container: Container = Depends(get_container_dependency),
) -> AsyncIterator[AsyncSession]:
    """Short-lived read-only session, used by the health probe."""
    async with container.db_session_factory()() as session:
        yield session
