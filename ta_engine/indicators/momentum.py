"""Momentum family: RSI, MACD, KDJ, Williams %R and CCI.

All oscillators here follow the engine's empty-result policy: a non-positive
period, too few samples, or mismatched high/low/close lengths produce empty
output rather than an exception. Degenerate windows (zero range, zero
deviation, no losses) resolve to fixed fallback values, never NaN or inf.
"""

import logging
from typing import NamedTuple

import numpy as np

from .trend import ema
from .window import (
    ArrayLike,
    as_float_array,
    is_valid_period,
    recursive_average,
    rolling_max,
    rolling_mean,
    rolling_mean_deviation,
    rolling_min,
    safe_divide,
    typical_price,
)

logger = logging.getLogger(__name__)

CCI_CONSTANT = 0.015
KDJ_SEED = 50.0


class MACDResult(NamedTuple):
    """MACD line, signal line and histogram.

    ``histogram[i] == macd[i + offset] - signal[i]`` with
    ``offset = len(macd) - len(signal)``.
    """

    macd: list[float]
    signal: list[float]
    histogram: list[float]


class KDJResult(NamedTuple):
    """Aligned K, D and J lines."""

    k: list[float]
    d: list[float]
    j: list[float]


def _matched_hlc(
    high: ArrayLike, low: ArrayLike, close: ArrayLike, period: int, name: str
) -> tuple[np.ndarray, np.ndarray, np.ndarray] | None:
    highs = as_float_array(high)
    lows = as_float_array(low)
    closes = as_float_array(close)
    if not len(highs) == len(lows) == len(closes):
        logger.debug(
            f"{name} skipped: mismatched lengths high={len(highs)}, "
            f"low={len(lows)}, close={len(closes)}"
        )
        return None
    if not is_valid_period(period, len(closes)):
        logger.debug(f"{name} skipped: period={period}, samples={len(closes)}")
        return None
    return highs, lows, closes


def _wilder_average(values: np.ndarray, period: int) -> np.ndarray:
    seed = float(values[:period].mean())
    tail = recursive_average(values[period:], 1.0 / period, seed)
    return np.concatenate(([seed], tail))


def rsi(data: ArrayLike, period: int = 14) -> list[float]:
    """Relative Strength Index with Wilder smoothing.

    The first average gain/loss is the plain mean of the first ``period``
    price changes; each later average is ``(prev * (period - 1) + x) / period``.
    Needs more than ``period`` samples and returns ``len(data) - period`` values,
    each in [0, 100]. A window without losses reads 100.
    """
    values = as_float_array(data)
    if period <= 0 or len(values) <= period:
        logger.debug(f"RSI skipped: period={period}, samples={len(values)}")
        return []

    deltas = np.diff(values)
    avg_gain = _wilder_average(np.clip(deltas, 0.0, None), period)
    avg_loss = _wilder_average(np.clip(-deltas, 0.0, None), period)

    relative_strength = safe_divide(avg_gain, avg_loss)
    result = np.where(avg_loss == 0.0, 100.0, 100.0 - 100.0 / (1.0 + relative_strength))
    return np.clip(result, 0.0, 100.0).tolist()


def macd(
    data: ArrayLike, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9
) -> MACDResult:
    """Moving Average Convergence Divergence.

    The MACD line is ``ema(fast) - ema(slow)`` over the samples both EMAs
    cover, the signal line is the EMA of the MACD line and the histogram is
    their difference, trimmed from the front of the MACD line to the signal's
    length. Stages without enough data come back empty.
    """
    fast = np.asarray(ema(data, fast_period), dtype=float)
    slow = np.asarray(ema(data, slow_period), dtype=float)
    overlap = min(len(fast), len(slow))
    if overlap == 0:
        return MACDResult([], [], [])

    macd_line = fast[len(fast) - overlap :] - slow[len(slow) - overlap :]
    signal_line = np.asarray(ema(macd_line, signal_period), dtype=float)
    offset = len(macd_line) - len(signal_line)
    histogram = macd_line[offset:] - signal_line

    return MACDResult(macd_line.tolist(), signal_line.tolist(), histogram.tolist())


def kdj(
    high: ArrayLike,
    low: ArrayLike,
    close: ArrayLike,
    period: int = 9,
    k_smooth: int = 3,
    d_smooth: int = 3,
) -> KDJResult:
    """KDJ stochastic oscillator.

    RSV is the close's position inside the ``period`` high/low range scaled to
    0-100 (0 when the range is zero). K is the recursive average of RSV,
    ``K = ((k_smooth - 1) * K_prev + RSV) / k_smooth``, D the same average of
    K with ``d_smooth``, both starting from 50. ``J = 3K - 2D``.

    K and D are clamped to [0, 100]; J is not clamped. All three lines have
    ``len(close) - period + 1`` values.
    """
    matched = _matched_hlc(high, low, close, period, "KDJ")
    if matched is None or k_smooth < 1 or d_smooth < 1:
        return KDJResult([], [], [])
    highs, lows, closes = matched

    highest = rolling_max(highs, period)
    lowest = rolling_min(lows, period)
    rsv = safe_divide((closes[period - 1 :] - lowest) * 100.0, highest - lowest)

    k_line = np.clip(recursive_average(rsv, 1.0 / k_smooth, KDJ_SEED), 0.0, 100.0)
    d_line = np.clip(recursive_average(k_line, 1.0 / d_smooth, KDJ_SEED), 0.0, 100.0)
    j_line = 3.0 * k_line - 2.0 * d_line

    return KDJResult(k_line.tolist(), d_line.tolist(), j_line.tolist())


def williams_r(
    high: ArrayLike, low: ArrayLike, close: ArrayLike, period: int = 14
) -> list[float]:
    """Williams %R, ``(highestHigh - close) / (highestHigh - lowestLow) * -100``.

    Values lie in [-100, 0]; a zero-range window reads 0.
    """
    matched = _matched_hlc(high, low, close, period, "Williams %R")
    if matched is None:
        return []
    highs, lows, closes = matched

    highest = rolling_max(highs, period)
    lowest = rolling_min(lows, period)
    result = safe_divide((highest - closes[period - 1 :]) * -100.0, highest - lowest)
    return np.clip(result, -100.0, 0.0).tolist()


def cci(high: ArrayLike, low: ArrayLike, close: ArrayLike, period: int = 20) -> list[float]:
    """Commodity Channel Index.

    ``CCI = (tp - sma(tp)) / (0.015 * meanDeviation)`` where ``tp`` is the
    typical price. A window with zero mean deviation reads 0.
    """
    matched = _matched_hlc(high, low, close, period, "CCI")
    if matched is None:
        return []
    highs, lows, closes = matched

    prices = typical_price(highs, lows, closes)
    means = rolling_mean(prices, period)
    deviation = rolling_mean_deviation(prices, period, means)
    return safe_divide(prices[period - 1 :] - means, CCI_CONSTANT * deviation).tolist()
