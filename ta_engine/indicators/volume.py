"""Volume family: rolling volume-weighted average price."""

import logging

import numpy as np

from .window import ArrayLike, as_float_array, is_valid_period, rolling_max, rolling_sum

logger = logging.getLogger(__name__)


def rolling_vwap(price: ArrayLike, volume: ArrayLike, period: int) -> np.ndarray:
    """Window-aligned VWAP with NaN for windows that traded no volume.

    Value ``i`` covers samples ``i .. i + period - 1``, which keeps the result
    positionally aligned with other windowed indicators. ``vwap`` drops the
    NaN windows; adapters that need alignment use this form instead.
    Mismatched lengths or an unusable period give an empty array.
    """
    prices = as_float_array(price)
    volumes = as_float_array(volume)
    if len(prices) != len(volumes) or not is_valid_period(period, len(prices)):
        logger.debug(
            f"VWAP skipped: period={period}, prices={len(prices)}, volumes={len(volumes)}"
        )
        return np.empty(0, dtype=float)

    weighted = rolling_sum(prices * volumes, period)
    total = rolling_sum(volumes, period)
    traded = (rolling_max(np.abs(volumes), period) > 0) & (total > 0)

    result = np.full(len(total), np.nan)
    np.divide(weighted, total, out=result, where=traded)
    return result


def vwap(price: ArrayLike, volume: ArrayLike, period: int) -> list[float]:
    """Rolling volume-weighted average price, ``sum(p * v) / sum(v)`` per window.

    Windows whose total volume is zero are skipped entirely, so the output can
    be shorter than ``len(price) - period + 1``.
    """
    windows = rolling_vwap(price, volume, period)
    traded = ~np.isnan(windows)
    if not traded.all():
        logger.debug(f"VWAP skipped {int((~traded).sum())} zero-volume windows")
    return windows[traded].tolist()
