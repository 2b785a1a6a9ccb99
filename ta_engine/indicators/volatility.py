"""Volatility family: Bollinger Bands."""

import logging
from typing import NamedTuple

from .window import ArrayLike, as_float_array, is_valid_period, rolling_mean, rolling_std

logger = logging.getLogger(__name__)


class BollingerBandsResult(NamedTuple):
    """Upper, middle and lower bands, index-aligned."""

    upper: list[float]
    middle: list[float]
    lower: list[float]


def bollinger_bands(
    data: ArrayLike, period: int = 20, multiplier: float = 2.0
) -> BollingerBandsResult:
    """Bollinger Bands around a simple moving average.

    The middle band is ``sma(data, period)``; the outer bands sit
    ``multiplier`` population standard deviations above and below it. With a
    non-negative multiplier ``upper >= middle >= lower`` at every index, with
    equality only for perfectly flat windows.

    Args:
        data: Price series, oldest first
        period: Window size
        multiplier: Number of standard deviations for the outer bands

    Returns:
        BollingerBandsResult with three lists of ``len(data) - period + 1``
        values, all empty when the period does not fit the data
    """
    values = as_float_array(data)
    if not is_valid_period(period, len(values)):
        logger.debug(f"Bollinger Bands skipped: period={period}, samples={len(values)}")
        return BollingerBandsResult([], [], [])

    middle = rolling_mean(values, period)
    width = multiplier * rolling_std(values, period)
    return BollingerBandsResult(
        (middle + width).tolist(), middle.tolist(), (middle - width).tolist()
    )
