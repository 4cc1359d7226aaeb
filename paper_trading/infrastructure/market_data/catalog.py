"""
The fixed catalog of tradable symbols.
"""

from paper_trading.domain.entities.stock import StockDefinition

DEFAULT_STOCKS: tuple[StockDefinition, ...] = (
    StockDefinition(symbol="AAPL", name="Apple Inc."),
    StockDefinition(symbol="GOOGL", name="Alphabet Inc."),
    StockDefinition(symbol="MSFT", name="Microsoft Corp."),
    StockDefinition(symbol="AMZN", name="Amazon.com, Inc."),
    StockDefinition(symbol="TSLA", name="Tesla, Inc."),
    StockDefinition(symbol="META", name="Meta Platforms, Inc."),
)
