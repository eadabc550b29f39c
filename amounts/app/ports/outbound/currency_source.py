from abc import ABC, abstractmethod
from typing import Optional

from amounts.domain.models import Currency


class CurrencySource(ABC):
    @abstractmethod
    async def fetch_decimals_map(self) -> dict[str, int]:
        """
        Fetch the full currency code -> decimal places mapping,
        inactive currencies included.
        """
        raise NotImplementedError()

    @abstractmethod
    async def fetch_active_currencies(self) -> list[Currency]:
        """Fetch every active currency, ordered by name."""
        raise NotImplementedError()

    @abstractmethod
    async def invalidate(self) -> None:
        """Drop whatever the source caches on its own side."""
        raise NotImplementedError()


class CurrencyWriter(ABC):
    @abstractmethod
    async def save_batch(self, currencies: list[Currency]) -> None:
        """Insert new currencies and update existing ones, keyed by code."""
        raise NotImplementedError()


class CurrencyMetadataCache(ABC):
    @abstractmethod
    async def get_decimals_map(self) -> Optional[dict[str, int]]:
        raise NotImplementedError()

    @abstractmethod
    async def save_decimals_map(self, decimals: dict[str, int]) -> None:
        raise NotImplementedError()

    @abstractmethod
    async def get_currencies(self) -> Optional[list[Currency]]:
        raise NotImplementedError()

    @abstractmethod
    async def save_currencies(self, currencies: list[Currency]) -> None:
        raise NotImplementedError()

    @abstractmethod
    async def invalidate(self) -> None:
        raise NotImplementedError()
