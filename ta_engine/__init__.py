"""Technical indicator engine for OHLCV price series.

Pure functions turn price/volume sequences into indicator series (moving
averages, oscillators, bands, volume-weighted prices) and classify readings
into BUY/SELL/HOLD signals. The optional ``ta_engine.frame`` package wraps the
same functions for datetime-indexed pandas DataFrames.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"
__all__ = [
    "sma",
    "ema",
    "rsi",
    "macd",
    "kdj",
    "williams_r",
    "cci",
    "bollinger_bands",
    "vwap",
    "typical_price",
    "true_range",
    "MACDResult",
    "KDJResult",
    "BollingerBandsResult",
    "SignalType",
    "rsi_signal",
    "macd_signal",
    "kdj_signal",
    "IndicatorFactory",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "sma": ("ta_engine.indicators.trend", "sma"),
    "ema": ("ta_engine.indicators.trend", "ema"),
    "rsi": ("ta_engine.indicators.momentum", "rsi"),
    "macd": ("ta_engine.indicators.momentum", "macd"),
    "kdj": ("ta_engine.indicators.momentum", "kdj"),
    "williams_r": ("ta_engine.indicators.momentum", "williams_r"),
    "cci": ("ta_engine.indicators.momentum", "cci"),
    "bollinger_bands": ("ta_engine.indicators.volatility", "bollinger_bands"),
    "vwap": ("ta_engine.indicators.volume", "vwap"),
    "typical_price": ("ta_engine.indicators.window", "typical_price"),
    "true_range": ("ta_engine.indicators.window", "true_range"),
    "MACDResult": ("ta_engine.indicators.momentum", "MACDResult"),
    "KDJResult": ("ta_engine.indicators.momentum", "KDJResult"),
    "BollingerBandsResult": ("ta_engine.indicators.volatility", "BollingerBandsResult"),
    "SignalType": ("ta_engine.signal.signal_types", "SignalType"),
    "rsi_signal": ("ta_engine.signal.classifiers", "rsi_signal"),
    "macd_signal": ("ta_engine.signal.classifiers", "macd_signal"),
    "kdj_signal": ("ta_engine.signal.classifiers", "kdj_signal"),
    "IndicatorFactory": ("ta_engine.frame", "IndicatorFactory"),
}


def __getattr__(name: str) -> Any:
    """Lazily resolve exports so importing the package stays cheap."""
    try:
        module_path, attr_name = _EXPORTS[name]
    except KeyError as exc:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from exc
    module = import_module(module_path)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    """Expose dynamically-resolved attributes via dir()."""
    return sorted(list(globals().keys()) + __all__)
