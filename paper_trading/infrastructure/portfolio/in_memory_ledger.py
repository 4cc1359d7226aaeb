"""
Infrastructure adapter: process memory -> IPortfolioLedger.

The ledger is a plain bookkeeper. It never refuses a write; keeping cash and
holdings non-negative is the job of ExecuteTradeUseCase, which validates
before it calls update_cash / update_holdings.
"""

import logging
from threading import Lock
from typing import Mapping

from paper_trading.domain.entities.portfolio import (
    HoldingValuation,
    PortfolioValuation,
    round2,
)
from paper_trading.domain.entities.stock import is_valid_price
from paper_trading.domain.ports.portfolio_ledger_port import IPortfolioLedger

logger = logging.getLogger(__name__)


class InMemoryPortfolioLedger(IPortfolioLedger):
    def __init__(self, initial_cash: float = 100_000.0) -> None:
        self._cash = float(initial_cash)
        self._holdings: dict[str, int] = {}
        self._lock = Lock()

    def get_cash(self) -> float:
        with self._lock:
            return self._cash

    def get_holdings_snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._holdings)

    def update_cash(self, delta: float) -> None:
        with self._lock:
            self._cash += delta
            balance = self._cash
        logger.info("Cash updated by %.2f. New balance: %.2f", delta, balance)

    def update_holdings(self, symbol: str, delta_quantity: int) -> None:
        with self._lock:
            new_quantity = self._holdings.get(symbol, 0) + delta_quantity
            if new_quantity <= 0:
                self._holdings.pop(symbol, None)
            else:
                self._holdings[symbol] = new_quantity

        if new_quantity <= 0:
            logger.info("Removed %s from holdings as quantity reached zero or less.", symbol)
        else:
            logger.info(
                "Holdings for %s updated by %d. New quantity: %d",
                symbol,
                delta_quantity,
                new_quantity,
            )

    def value_portfolio(self, prices: Mapping[str, float]) -> PortfolioValuation:
        """Value every holding at *prices*; a missing or non-positive price counts as 0.

        Holdings without a usable price are still listed with their quantity.
        """
        with self._lock:
            cash = self._cash
            holdings = list(self._holdings.items())

        valuations: list[HoldingValuation] = []
        holdings_value = 0.0
        for symbol, quantity in holdings:
            price = prices.get(symbol)
            if not is_valid_price(price):
                logger.warning(
                    "Missing or invalid price for held stock %s. Using price 0 for calculation.",
                    symbol,
                )
                valuations.append(HoldingValuation(symbol=symbol, quantity=quantity, price=0.0, value=0.0))
                continue
            value = round2(price * quantity)
            holdings_value += value
            valuations.append(
                HoldingValuation(symbol=symbol, quantity=quantity, price=float(price), value=value)
            )

        return PortfolioValuation(
            cash=round2(cash),
            holdings=valuations,
            total_value=round2(cash + holdings_value),
        )
