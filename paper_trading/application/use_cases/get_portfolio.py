"""
Use-case: value the ledger at the current simulated prices.
Depends only on Domain ports and entities: no infrastructure imports.
"""

import logging

from paper_trading.domain.entities.portfolio import PortfolioValuation
from paper_trading.domain.exceptions import SymbolNotSupportedError
from paper_trading.domain.ports.market_data_port import IMarketDataStore
from paper_trading.domain.ports.portfolio_ledger_port import IPortfolioLedger

logger = logging.getLogger(__name__)


class GetPortfolioUseCase:
    def __init__(self, ledger: IPortfolioLedger, store: IMarketDataStore) -> None:
        self._ledger = ledger
        self._store = store

    def execute(self) -> PortfolioValuation:
        symbols = list(self._ledger.get_holdings_snapshot())
        prices: dict[str, float] = {}

        if symbols:
            logger.info("Fetching current prices for held stocks: %s", ", ".join(symbols))
        for symbol in symbols:
            try:
                prices[symbol] = self._store.get(symbol).price
            except SymbolNotSupportedError:
                logger.warning(
                    "Could not retrieve price for held stock %s. It will be valued at $0.", symbol
                )

        return self._ledger.value_portfolio(prices)
