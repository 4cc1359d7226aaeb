"""
Use-case: retrieve the recent simulated price history for a symbol.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from paper_trading.domain.entities.stock import HistoryPoint
from paper_trading.domain.ports.market_data_port import IMarketDataStore


class GetStockHistoryUseCase:
    def __init__(self, store: IMarketDataStore) -> None:
        self._store = store

    def execute(self, symbol: str) -> list[HistoryPoint]:
        """Return the points for *symbol*, oldest first.

        A catalog symbol with no recorded history yields an empty list.

        Raises:
            ValueError: if *symbol* is blank.
            SymbolNotSupportedError: if *symbol* is not in the catalog.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        return self._store.get_history(symbol.upper().strip())
