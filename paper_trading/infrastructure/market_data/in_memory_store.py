"""
Infrastructure adapter: process memory -> IMarketDataStore.

Ticks are frozen dataclasses swapped in whole under a lock, and history reads
return a copy taken under the same lock, so readers never see a half-applied
update. The PriceSimulator is the only writer after initialize().
"""

import logging
import random
from collections import deque
from datetime import datetime, timezone
from threading import Lock
from typing import Optional, Sequence

from paper_trading.domain.entities.stock import (
    HistoryPoint,
    StockDefinition,
    StockSnapshot,
    TickData,
)
from paper_trading.domain.exceptions import SymbolNotSupportedError
from paper_trading.domain.ports.market_data_port import IMarketDataStore

logger = logging.getLogger(__name__)


class InMemoryMarketDataStore(IMarketDataStore):
    """Holds current ticks and a bounded price history per symbol."""

    INITIAL_PRICE_RANGE: tuple[float, float] = (50.0, 450.0)
    INITIAL_VOLUME_RANGE: tuple[int, int] = (50_000, 1_050_000)
    PREVIOUS_CLOSE_SPREAD: float = 0.02

    def __init__(self, history_limit: int = 100, rng: Optional[random.Random] = None) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        self._history_limit = history_limit
        self._rng = rng or random.Random()
        self._lock = Lock()
        self._definitions: dict[str, StockDefinition] = {}
        self._ticks: dict[str, TickData] = {}
        self._history: dict[str, deque[HistoryPoint]] = {}

    def initialize(self, definitions: Sequence[StockDefinition]) -> None:
        with self._lock:
            if self._definitions:
                raise RuntimeError("market data store is already initialized")
            for definition in definitions:
                symbol = definition.symbol.upper()
                tick = self._seed_tick()
                self._definitions[symbol] = StockDefinition(symbol=symbol, name=definition.name)
                self._ticks[symbol] = tick
                self._history[symbol] = deque(
                    [HistoryPoint(timestamp=tick.timestamp, price=tick.price)],
                    maxlen=self._history_limit,
                )
        logger.info("Initialized %d stocks with simulated data.", len(self._definitions))

    def _seed_tick(self) -> TickData:
        low, high = self.INITIAL_PRICE_RANGE
        price = round(self._rng.uniform(low, high), 2)
        spread = (self._rng.random() - 0.5) * self.PREVIOUS_CLOSE_SPREAD
        return TickData(
            price=price,
            change=0.0,
            change_percent=0.0,
            open=price,
            high=price,
            low=price,
            volume=self._rng.randrange(*self.INITIAL_VOLUME_RANGE),
            previous_close=round(price * (1 + spread), 2),
            timestamp=datetime.now(timezone.utc),
        )

    def symbols(self) -> list[str]:
        with self._lock:
            return list(self._definitions)

    def get_all(self) -> list[StockSnapshot]:
        with self._lock:
            return [
                StockSnapshot(definition=definition, tick=self._ticks[symbol])
                for symbol, definition in self._definitions.items()
            ]

    def get(self, symbol: str) -> StockSnapshot:
        key = symbol.upper()
        with self._lock:
            definition = self._definitions.get(key)
            if definition is None:
                raise SymbolNotSupportedError(symbol)
            return StockSnapshot(definition=definition, tick=self._ticks[key])

    def get_history(self, symbol: str) -> list[HistoryPoint]:
        key = symbol.upper()
        with self._lock:
            if key not in self._definitions:
                raise SymbolNotSupportedError(symbol)
            history = self._history.get(key)
            if history is None:
                logger.warning("No history found for initialized stock %s, returning empty.", key)
                return []
            return list(history)

    def apply_tick(self, symbol: str, tick: TickData) -> None:
        key = symbol.upper()
        with self._lock:
            if key not in self._definitions:
                raise SymbolNotSupportedError(symbol)
            self._ticks[key] = tick

    def append_history(self, symbol: str, point: HistoryPoint) -> None:
        key = symbol.upper()
        with self._lock:
            if key not in self._definitions:
                raise SymbolNotSupportedError(symbol)
            history = self._history.setdefault(key, deque(maxlen=self._history_limit))
            # deque(maxlen=...) drops the oldest point once the bound is reached
            history.append(point)
