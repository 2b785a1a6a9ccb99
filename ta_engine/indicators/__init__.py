"""Pure indicator functions grouped by family.

Every function takes plain numeric sequences (lists, tuples, numpy arrays or
pandas Series, oldest sample first) and returns fresh lists, or a small
NamedTuple of lists for multi-line indicators. Nothing is cached between
calls and no input is modified.
"""

from .momentum import KDJResult, MACDResult, cci, kdj, macd, rsi, williams_r
from .trend import ema, sma
from .volatility import BollingerBandsResult, bollinger_bands
from .volume import rolling_vwap, vwap
from .window import true_range, typical_price

__all__ = [
    # Trend
    "sma",
    "ema",
    # Momentum
    "rsi",
    "macd",
    "kdj",
    "williams_r",
    "cci",
    "MACDResult",
    "KDJResult",
    # Volatility
    "bollinger_bands",
    "BollingerBandsResult",
    # Volume
    "vwap",
    "rolling_vwap",
    # Helpers
    "typical_price",
    "true_range",
]
