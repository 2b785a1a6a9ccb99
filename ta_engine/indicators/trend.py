"""Trend family: simple and exponential moving averages."""

import logging

import numpy as np

from .window import ArrayLike, as_float_array, is_valid_period, recursive_average, rolling_mean

logger = logging.getLogger(__name__)


def sma(data: ArrayLike, period: int) -> list[float]:
    """Simple Moving Average.

    Args:
        data: Price series, oldest first
        period: Window size

    Returns:
        One mean per complete window, ``len(data) - period + 1`` values, or an
        empty list when the period is not positive or exceeds the data length
    """
    values = as_float_array(data)
    if not is_valid_period(period, len(values)):
        logger.debug(f"SMA skipped: period={period}, samples={len(values)}")
        return []
    return rolling_mean(values, period).tolist()


def ema(data: ArrayLike, period: int) -> list[float]:
    """Exponential Moving Average seeded with the SMA of the first window.

    The first value equals ``sma(data[:period], period)[0]``; each later value
    applies ``ema[i] = value * k + ema[i - 1] * (1 - k)`` with ``k = 2 / (period + 1)``.
    Output length and the empty-result policy match ``sma``.
    """
    values = as_float_array(data)
    if not is_valid_period(period, len(values)):
        logger.debug(f"EMA skipped: period={period}, samples={len(values)}")
        return []

    seed = float(rolling_mean(values[:period], period)[0])
    smoothing = 2.0 / (period + 1)
    tail = recursive_average(values[period:], smoothing, seed)
    return np.concatenate(([seed], tail)).tolist()
