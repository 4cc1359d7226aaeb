"""
Application service: drives the simulated market with a bounded random walk.

Business decisions owned here:
  - MAX_PRICE_CHANGE: the largest relative move allowed per tick.
  - MIN_PRICE: the floor that keeps every price strictly positive.
  - VOLUME_INCREMENT_RANGE: how much volume each tick adds.

The service is the only writer of IMarketDataStore after startup. Each tick is
independent: stopping the loop cancels future ticks and keeps applied ones.
"""

import asyncio
import contextlib
import logging
import random
from datetime import datetime, timezone
from typing import Callable, Optional

from paper_trading.domain.entities.stock import HistoryPoint, TickData
from paper_trading.domain.ports.market_data_port import IMarketDataStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PriceSimulator:
    MAX_PRICE_CHANGE: float = 0.015
    MIN_PRICE: float = 1.0
    VOLUME_INCREMENT_RANGE: tuple[int, int] = (100, 10_100)

    def __init__(
        self,
        store: IMarketDataStore,
        interval_seconds: float = 5.0,
        max_price_change: Optional[float] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._store = store
        self._interval = interval_seconds
        self._max_change = self.MAX_PRICE_CHANGE if max_price_change is None else max_price_change
        self._rng = rng or random.Random()
        self._clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def next_tick(self, current: TickData) -> TickData:
        """Compute the successor of *current*. Pure apart from the rng and clock."""
        drift = (self._rng.random() - 0.5) * 2 * self._max_change
        price = round(max(self.MIN_PRICE, current.price * (1 + drift)), 2)
        change = round(price - current.open, 2)
        change_percent = round(change / current.open * 100, 2) if current.open else 0.0
        timestamp = max(self._clock(), current.timestamp)

        return TickData(
            price=price,
            change=change,
            change_percent=change_percent,
            open=current.open,
            high=max(current.high, price),
            low=min(current.low, price),
            volume=current.volume + self._rng.randrange(*self.VOLUME_INCREMENT_RANGE),
            previous_close=current.previous_close,
            timestamp=timestamp,
        )

    def tick(self) -> None:
        """Advance every symbol in the store by one step."""
        logger.debug("Simulating stock price updates...")
        for symbol in self._store.symbols():
            current = self._store.get(symbol).tick
            updated = self.next_tick(current)
            self._store.apply_tick(symbol, updated)
            self._store.append_history(
                symbol, HistoryPoint(timestamp=updated.timestamp, price=updated.price)
            )

    async def run(self) -> None:
        """Tick forever on the configured interval."""
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.tick()
            except Exception:
                logger.exception("Stock price simulation tick failed")

    def start(self) -> asyncio.Task:
        if self.running:
            return self._task
        self._task = asyncio.create_task(self.run())
        logger.info("Stock price simulation started (updates every %ss).", self._interval)
        return self._task

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            logger.info("Stock price simulation stopped.")
