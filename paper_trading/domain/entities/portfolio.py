"""
Domain entities for a valued portfolio snapshot.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass


def round2(amount: float) -> float:
    """Round a monetary amount to cents for reporting."""
    return round(float(amount), 2)


@dataclass(frozen=True)
class HoldingValuation:
    symbol: str
    quantity: int
    price: float
    value: float


@dataclass(frozen=True)
class PortfolioValuation:
    cash: float
    holdings: list[HoldingValuation]
    total_value: float
