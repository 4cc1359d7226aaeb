"""
Domain entities for market orders and their execution result.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum


class TradeSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class TradeResult:
    message: str
    symbol: str
    quantity: int
    side: TradeSide
    price: float
    total: float
