"""Trading signal types and indicator signal classifiers."""

from .classifiers import (
    KDJ_OVERBOUGHT,
    KDJ_OVERSOLD,
    RSI_OVERBOUGHT,
    RSI_OVERSOLD,
    kdj_signal,
    macd_signal,
    rsi_signal,
)
from .signal_types import SignalDict, SignalGenerator, SignalType

__all__ = [
    "SignalType",
    "SignalGenerator",
    "SignalDict",
    "rsi_signal",
    "macd_signal",
    "kdj_signal",
    "RSI_OVERBOUGHT",
    "RSI_OVERSOLD",
    "KDJ_OVERBOUGHT",
    "KDJ_OVERSOLD",
]
