"""
Test portfolio valuation at current simulated prices
"""

import pytest

from paper_trading.application.use_cases.get_portfolio import GetPortfolioUseCase
from paper_trading.application.use_cases.get_stock_history import GetStockHistoryUseCase
from paper_trading.application.use_cases.get_stocks import GetAllStocksUseCase, GetStockUseCase
from paper_trading.domain.entities.trade import TradeSide
from paper_trading.domain.exceptions import SymbolNotSupportedError


def test_empty_portfolio(store, ledger):
    valuation = GetPortfolioUseCase(ledger, store).execute()
    assert valuation.holdings == []
    assert valuation.total_value == 100_000.0


def test_portfolio_after_buy(store, ledger, executor, set_price):
    set_price("AAPL", 190.0)
    executor.execute("AAPL", 10, TradeSide.BUY)

    valuation = GetPortfolioUseCase(ledger, store).execute()

    assert valuation.cash == 98_100.0
    assert [(h.symbol, h.quantity, h.price, h.value) for h in valuation.holdings] == [
        ("AAPL", 10, 190.0, 1_900.0)
    ]
    assert valuation.total_value == 100_000.0


def test_portfolio_tracks_price_moves(store, ledger, executor, set_price):
    set_price("AAPL", 190.0)
    executor.execute("AAPL", 10, TradeSide.BUY)
    set_price("AAPL", 200.0)

    valuation = GetPortfolioUseCase(ledger, store).execute()

    assert valuation.holdings[0].value == 2_000.0
    assert valuation.total_value == 100_100.0


def test_holding_outside_catalog_is_valued_at_zero(store, ledger):
    ledger.update_holdings("DELISTED", 4)

    valuation = GetPortfolioUseCase(ledger, store).execute()

    holding = valuation.holdings[0]
    assert (holding.symbol, holding.quantity, holding.price, holding.value) == ("DELISTED", 4, 0, 0)
    assert valuation.total_value == 100_000.0


def test_holding_with_invalid_price_is_valued_at_zero(store, ledger, set_price):
    ledger.update_holdings("MSFT", 2)
    set_price("MSFT", 0.0)

    valuation = GetPortfolioUseCase(ledger, store).execute()

    assert valuation.holdings[0].value == 0


class TestQuoteUseCases:
    def test_get_all(self, store):
        assert len(GetAllStocksUseCase(store).execute()) == 6

    def test_get_normalizes_symbol(self, store):
        assert GetStockUseCase(store).execute(" aapl ").symbol == "AAPL"

    @pytest.mark.parametrize("symbol", ["", "   "])
    def test_blank_symbol_rejected(self, store, symbol):
        with pytest.raises(ValueError):
            GetStockUseCase(store).execute(symbol)
        with pytest.raises(ValueError):
            GetStockHistoryUseCase(store).execute(symbol)

    def test_unknown_symbol(self, store):
        with pytest.raises(SymbolNotSupportedError):
            GetStockUseCase(store).execute("ZZZZ")
        with pytest.raises(SymbolNotSupportedError):
            GetStockHistoryUseCase(store).execute("zzzz")

    def test_history(self, store):
        assert len(GetStockHistoryUseCase(store).execute("tsla")) == 1
