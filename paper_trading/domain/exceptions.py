"""
Domain error hierarchy.

Client-input errors (SymbolNotSupportedError, InsufficientFundsError,
InsufficientSharesError) carry enough structure for a precise message.
Integrity errors (InvalidMarketDataError, LedgerWriteError) are reported
generically by the entrypoints and logged in full where they are raised.
"""


class PaperTradingError(Exception):
    """Base class for every error raised by the trading core."""


class SymbolNotSupportedError(PaperTradingError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Stock symbol {symbol!r} is not supported.")


class InvalidMarketDataError(PaperTradingError):
    def __init__(self, symbol: str, price: object) -> None:
        self.symbol = symbol
        self.price = price
        super().__init__(f"Invalid price {price!r} for {symbol}.")


class InsufficientFundsError(PaperTradingError):
    def __init__(self, required: float, available: float) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient funds. Need ${required:.2f}, but only have ${available:.2f}."
        )


class InsufficientSharesError(PaperTradingError):
    def __init__(self, symbol: str, requested: int, owned: int) -> None:
        self.symbol = symbol
        self.requested = requested
        self.owned = owned
        super().__init__(
            f"Insufficient shares. Trying to sell {requested} {symbol}, "
            f"but only own {owned}."
        )


class LedgerWriteError(PaperTradingError):
    """The ledger mutation failed after validation had already passed."""
