"""
Domain entities for simulated stock market data.
Zero external dependencies: pure Python dataclasses only.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StockDefinition:
    symbol: str
    name: str


@dataclass(frozen=True)
class TickData:
    """Current state of one symbol for the simulated session.

    Instances are replaced whole on every tick, never mutated, so a reader
    always sees a consistent snapshot.
    """

    price: float
    change: float
    change_percent: float
    open: float
    high: float
    low: float
    volume: int
    previous_close: Optional[float]
    timestamp: datetime


@dataclass(frozen=True)
class StockSnapshot:
    """A TickData joined with its StockDefinition."""

    definition: StockDefinition
    tick: TickData

    @property
    def symbol(self) -> str:
        return self.definition.symbol

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def price(self) -> float:
        return self.tick.price


@dataclass(frozen=True)
class HistoryPoint:
    timestamp: datetime
    price: float


def is_valid_price(price: object) -> bool:
    """True for a finite, strictly positive number (bools excluded)."""
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price > 0
