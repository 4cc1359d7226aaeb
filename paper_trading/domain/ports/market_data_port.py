"""
Port (interface) for the simulated market data store.
Infrastructure adapters (e.g. InMemoryMarketDataStore) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from paper_trading.domain.entities.stock import (
    HistoryPoint,
    StockDefinition,
    StockSnapshot,
    TickData,
)


class IMarketDataStore(ABC):
    @abstractmethod
    def initialize(self, definitions: Sequence[StockDefinition]) -> None:
        """Seed a tick and a one-point history for every definition. Runs once."""
        ...

    @abstractmethod
    def symbols(self) -> list[str]: ...

    @abstractmethod
    def get_all(self) -> list[StockSnapshot]: ...

    @abstractmethod
    def get(self, symbol: str) -> StockSnapshot:
        """Raises SymbolNotSupportedError when *symbol* is not in the catalog."""
        ...

    @abstractmethod
    def get_history(self, symbol: str) -> list[HistoryPoint]:
        """Raises SymbolNotSupportedError when *symbol* is not in the catalog."""
        ...

    @abstractmethod
    def apply_tick(self, symbol: str, tick: TickData) -> None: ...

    @abstractmethod
    def append_history(self, symbol: str, point: HistoryPoint) -> None: ...
