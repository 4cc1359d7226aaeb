"""
Port (interface) for the cash and holdings ledger.
Infrastructure adapters (e.g. InMemoryPortfolioLedger) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Mapping

from paper_trading.domain.entities.portfolio import PortfolioValuation


class IPortfolioLedger(ABC):
    @abstractmethod
    def get_cash(self) -> float: ...

    @abstractmethod
    def get_holdings_snapshot(self) -> dict[str, int]:
        """Return a copy of symbol -> quantity; mutating it never affects the ledger."""
        ...

    @abstractmethod
    def update_cash(self, delta: float) -> None:
        """Add *delta* to cash. No validation happens at this layer."""
        ...

    @abstractmethod
    def update_holdings(self, symbol: str, delta_quantity: int) -> None:
        """Adjust a position, dropping it once the quantity reaches zero or below."""
        ...

    @abstractmethod
    def value_portfolio(self, prices: Mapping[str, float]) -> PortfolioValuation: ...
