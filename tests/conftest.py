import dataclasses
import random

import pytest

from paper_trading.application.use_cases.execute_trade import ExecuteTradeUseCase
from paper_trading.infrastructure.market_data.catalog import DEFAULT_STOCKS
from paper_trading.infrastructure.market_data.in_memory_store import InMemoryMarketDataStore
from paper_trading.infrastructure.portfolio.in_memory_ledger import InMemoryPortfolioLedger


@pytest.fixture
def rng():
    """Seeded random source so simulated prices are reproducible."""
    return random.Random(1234)


@pytest.fixture
def store(rng):
    market = InMemoryMarketDataStore(history_limit=100, rng=rng)
    market.initialize(DEFAULT_STOCKS)
    return market


@pytest.fixture
def ledger():
    return InMemoryPortfolioLedger(initial_cash=100_000.0)


@pytest.fixture
def executor(store, ledger):
    return ExecuteTradeUseCase(store, ledger)


@pytest.fixture
def set_price(store):
    """Pin a symbol's current price, keeping low <= price <= high."""

    def _set(symbol, price, market=None):
        target = market or store
        current = target.get(symbol).tick
        target.apply_tick(
            symbol,
            dataclasses.replace(
                current,
                price=price,
                high=max(current.high, price) if price > 0 else current.high,
                low=min(current.low, price) if price > 0 else current.low,
            ),
        )

    return _set
