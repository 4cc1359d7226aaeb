"""
Use-cases: read the current simulated quote for one or all symbols.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from paper_trading.domain.entities.stock import StockSnapshot
from paper_trading.domain.ports.market_data_port import IMarketDataStore


class GetAllStocksUseCase:
    def __init__(self, store: IMarketDataStore) -> None:
        self._store = store

    def execute(self) -> list[StockSnapshot]:
        return self._store.get_all()


class GetStockUseCase:
    def __init__(self, store: IMarketDataStore) -> None:
        self._store = store

    def execute(self, symbol: str) -> StockSnapshot:
        """Fetch the current quote for *symbol* (uppercased).

        Raises:
            ValueError: if *symbol* is blank.
            SymbolNotSupportedError: if *symbol* is not in the catalog.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        return self._store.get(symbol.upper().strip())
