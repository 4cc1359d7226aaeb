"""
Pydantic request/response models for the HTTP API.

Responses use camelCase field names (changePercent, previousClose, totalValue).
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from paper_trading.domain.entities.portfolio import PortfolioValuation
from paper_trading.domain.entities.stock import HistoryPoint, StockSnapshot
from paper_trading.domain.entities.trade import TradeResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StockResponse(_CamelModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    open: float
    high: float
    low: float
    volume: int
    previous_close: Optional[float] = None
    timestamp: datetime

    @classmethod
    def from_entity(cls, snapshot: StockSnapshot) -> "StockResponse":
        tick = snapshot.tick
        return cls(
            symbol=snapshot.symbol,
            name=snapshot.name,
            price=tick.price,
            change=tick.change,
            change_percent=tick.change_percent,
            open=tick.open,
            high=tick.high,
            low=tick.low,
            volume=tick.volume,
            previous_close=tick.previous_close,
            timestamp=tick.timestamp,
        )


class HistoryPointResponse(_CamelModel):
    timestamp: datetime
    price: float

    @classmethod
    def from_entity(cls, point: HistoryPoint) -> "HistoryPointResponse":
        return cls(timestamp=point.timestamp, price=point.price)


class HoldingResponse(_CamelModel):
    symbol: str
    quantity: int
    price: float
    value: float


class PortfolioResponse(_CamelModel):
    cash: float
    holdings: list[HoldingResponse]
    total_value: float

    @classmethod
    def from_entity(cls, valuation: PortfolioValuation) -> "PortfolioResponse":
        return cls(
            cash=valuation.cash,
            holdings=[
                HoldingResponse(symbol=h.symbol, quantity=h.quantity, price=h.price, value=h.value)
                for h in valuation.holdings
            ],
            total_value=valuation.total_value,
        )


class TradeRequest(BaseModel):
    symbol: str = Field(min_length=1)
    quantity: int = Field(ge=1, strict=True)
    side: Literal["buy", "sell"]

    @field_validator("symbol")
    @classmethod
    def _normalize_symbol(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("Symbol cannot be empty.")
        return value


class TradeResponse(_CamelModel):
    message: str
    symbol: str
    quantity: int
    side: str
    price: float
    total: float

    @classmethod
    def from_entity(cls, result: TradeResult) -> "TradeResponse":
        return cls(
            message=result.message,
            symbol=result.symbol,
            quantity=result.quantity,
            side=result.side.value,
            price=result.price,
            total=result.total,
        )
