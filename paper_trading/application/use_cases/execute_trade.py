"""
Use-case: execute an immediate market buy or sell against the simulated price.

The whole read -> validate -> write span runs under one lock, so two trades can
never both pass validation against cash or shares that only one of them can
use. Validation always completes before the ledger is touched.
"""

import logging
from threading import Lock

from paper_trading.domain.entities.portfolio import round2
from paper_trading.domain.entities.stock import is_valid_price
from paper_trading.domain.entities.trade import TradeResult, TradeSide
from paper_trading.domain.exceptions import (
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidMarketDataError,
    LedgerWriteError,
)
from paper_trading.domain.ports.market_data_port import IMarketDataStore
from paper_trading.domain.ports.portfolio_ledger_port import IPortfolioLedger

logger = logging.getLogger(__name__)


class ExecuteTradeUseCase:
    def __init__(self, store: IMarketDataStore, ledger: IPortfolioLedger) -> None:
        self._store = store
        self._ledger = ledger
        self._lock = Lock()

    def execute(self, symbol: str, quantity: int, side: TradeSide) -> TradeResult:
        """Execute a market order for *quantity* shares of *symbol*.

        Callers pass an uppercase symbol, a quantity >= 1 and a valid side.

        Raises:
            SymbolNotSupportedError: *symbol* is not in the catalog.
            InvalidMarketDataError:  the store holds no usable price for *symbol*.
            InsufficientFundsError:  a buy costs more than the available cash.
            InsufficientSharesError: a sell exceeds the shares owned.
            LedgerWriteError:        the ledger failed after validation passed.
        """
        side = TradeSide(side)
        logger.info("Attempting %s trade: %d %s", side.value.upper(), quantity, symbol)

        with self._lock:
            price = self._store.get(symbol).price
            if not is_valid_price(price):
                logger.error(
                    "Cannot execute trade for %s: invalid or missing price %r from market data.",
                    symbol,
                    price,
                )
                raise InvalidMarketDataError(symbol, price)

            total = round2(price * quantity)

            if side is TradeSide.BUY:
                cash = self._ledger.get_cash()
                if cash < total:
                    logger.warning(
                        "Trade rejected: Insufficient funds for %s. Need $%.2f, have $%.2f",
                        symbol,
                        total,
                        cash,
                    )
                    raise InsufficientFundsError(required=total, available=cash)
            else:
                owned = self._ledger.get_holdings_snapshot().get(symbol, 0)
                if owned < quantity:
                    logger.warning(
                        "Trade rejected: Insufficient shares for %s. Trying to sell %d, own %d",
                        symbol,
                        quantity,
                        owned,
                    )
                    raise InsufficientSharesError(symbol, requested=quantity, owned=owned)

            try:
                if side is TradeSide.BUY:
                    self._ledger.update_cash(-total)
                    self._ledger.update_holdings(symbol, quantity)
                else:
                    self._ledger.update_cash(total)
                    self._ledger.update_holdings(symbol, -quantity)
            except Exception as exc:
                logger.critical(
                    "CRITICAL: Error during portfolio state update for %s %s trade of %d",
                    side.value,
                    symbol,
                    quantity,
                    exc_info=True,
                )
                raise LedgerWriteError("Failed to update portfolio state during trade.") from exc

        logger.info(
            "Successfully executed %s trade: %d %s @ $%.2f",
            side.value.upper(),
            quantity,
            symbol,
            price,
        )
        return TradeResult(
            message=f"Trade successful: {side.value.upper()} {quantity} {symbol}",
            symbol=symbol,
            quantity=quantity,
            side=side,
            price=float(price),
            total=total,
        )
