"""Stateless classifiers mapping indicator readings to a trading signal."""

from .signal_types import SignalType

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0
KDJ_OVERBOUGHT = 80.0
KDJ_OVERSOLD = 20.0


def rsi_signal(rsi: float) -> SignalType:
    """SELL at or above 70, BUY at or below 30, otherwise HOLD."""
    if rsi >= RSI_OVERBOUGHT:
        return SignalType.SELL
    if rsi <= RSI_OVERSOLD:
        return SignalType.BUY
    return SignalType.HOLD


def macd_signal(macd: float, signal: float, prev_macd: float, prev_signal: float) -> SignalType:
    """Classify a MACD/signal-line crossover between two consecutive bars.

    BUY when the MACD line crosses above the signal line, SELL when it crosses
    below, HOLD otherwise.
    """
    if prev_macd <= prev_signal and macd > signal:
        return SignalType.BUY
    if prev_macd >= prev_signal and macd < signal:
        return SignalType.SELL
    return SignalType.HOLD


def kdj_signal(k: float, d: float, j: float) -> SignalType:
    """SELL when K and D are both overbought, BUY when both are oversold.

    J is accepted so callers can pass a full KDJ reading, but it does not gate
    the decision.
    """
    if k >= KDJ_OVERBOUGHT and d >= KDJ_OVERBOUGHT:
        return SignalType.SELL
    if k <= KDJ_OVERSOLD and d <= KDJ_OVERSOLD:
        return SignalType.BUY
    return SignalType.HOLD
