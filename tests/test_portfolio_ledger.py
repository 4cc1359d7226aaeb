"""
Test the in-memory portfolio ledger
"""

import math

import pytest

from paper_trading.infrastructure.portfolio.in_memory_ledger import InMemoryPortfolioLedger


class TestPortfolioLedger:
    def test_initial_state(self, ledger):
        assert ledger.get_cash() == 100_000.0
        assert ledger.get_holdings_snapshot() == {}

    def test_update_cash_is_unvalidated(self):
        ledger = InMemoryPortfolioLedger(initial_cash=10.0)
        ledger.update_cash(-25.0)
        assert ledger.get_cash() == -15.0

    def test_update_holdings_accumulates(self, ledger):
        ledger.update_holdings("AAPL", 5)
        ledger.update_holdings("AAPL", 3)
        assert ledger.get_holdings_snapshot() == {"AAPL": 8}

    def test_round_trip_removes_symbol(self, ledger):
        ledger.update_holdings("AAPL", 7)
        ledger.update_holdings("AAPL", -7)
        assert "AAPL" not in ledger.get_holdings_snapshot()

    def test_overshooting_sell_removes_symbol(self, ledger):
        ledger.update_holdings("MSFT", 2)
        ledger.update_holdings("MSFT", -5)
        assert ledger.get_holdings_snapshot() == {}

    def test_negative_update_on_missing_symbol_stores_nothing(self, ledger):
        ledger.update_holdings("TSLA", -1)
        assert ledger.get_holdings_snapshot() == {}

    def test_snapshot_is_a_copy(self, ledger):
        ledger.update_holdings("AAPL", 1)
        snapshot = ledger.get_holdings_snapshot()
        snapshot["AAPL"] = 1_000
        snapshot["META"] = 5
        assert ledger.get_holdings_snapshot() == {"AAPL": 1}


class TestValuePortfolio:
    def test_empty_portfolio(self, ledger):
        valuation = ledger.value_portfolio({})
        assert valuation.cash == 100_000.0
        assert valuation.holdings == []
        assert valuation.total_value == 100_000.0

    def test_values_holdings_at_given_prices(self, ledger):
        ledger.update_cash(-1_900.0)
        ledger.update_holdings("AAPL", 10)

        valuation = ledger.value_portfolio({"AAPL": 190.0})

        assert valuation.cash == 98_100.0
        assert len(valuation.holdings) == 1
        holding = valuation.holdings[0]
        assert (holding.symbol, holding.quantity, holding.price, holding.value) == ("AAPL", 10, 190.0, 1_900.0)
        assert valuation.total_value == 100_000.0

    @pytest.mark.parametrize("price", [None, 0, -3.5, math.nan, "190"])
    def test_unusable_price_counts_as_zero(self, ledger, price):
        ledger.update_holdings("AAPL", 4)
        prices = {} if price is None else {"AAPL": price}

        valuation = ledger.value_portfolio(prices)

        holding = valuation.holdings[0]
        assert holding.quantity == 4
        assert holding.price == 0
        assert holding.value == 0
        assert valuation.total_value == 100_000.0

    def test_monetary_figures_are_rounded(self):
        ledger = InMemoryPortfolioLedger(initial_cash=1_000.005)
        ledger.update_holdings("GOOGL", 3)

        valuation = ledger.value_portfolio({"GOOGL": 33.333})

        assert valuation.holdings[0].value == 100.0
        assert valuation.cash == round(1_000.005, 2)
        assert valuation.total_value == round(1_000.005 + 100.0, 2)
        # internal cash is kept unrounded
        assert ledger.get_cash() == 1_000.005

    def test_valuation_does_not_mutate(self, ledger):
        ledger.update_holdings("AAPL", 2)
        ledger.value_portfolio({"AAPL": 10.0})
        assert ledger.get_cash() == 100_000.0
        assert ledger.get_holdings_snapshot() == {"AAPL": 2}
