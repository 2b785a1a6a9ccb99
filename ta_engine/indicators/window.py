"""Shared windowing and statistics helpers for the indicator families.

Every rolling helper takes a one-dimensional float array and returns only the
values of complete windows: a ``period`` window over ``n`` samples yields
``n - period + 1`` values, where value ``i`` covers samples ``i .. i + period - 1``.
Callers are expected to check ``is_valid_period`` first.
"""

from collections.abc import Sequence

import numpy as np
import pandas as pd

ArrayLike = Sequence[float] | np.ndarray | pd.Series


def as_float_array(data: ArrayLike) -> np.ndarray:
    """Copy ``data`` into a fresh one-dimensional float64 array."""
    return np.array(data, dtype=float).reshape(-1)


def is_valid_period(period: int, length: int) -> bool:
    """Return True when a ``period`` window fits at least once in ``length`` samples."""
    return 0 < period <= length


def _complete(rolled: pd.Series, period: int) -> np.ndarray:
    return rolled.to_numpy(dtype=float)[period - 1 :]


def rolling_sum(values: np.ndarray, period: int) -> np.ndarray:
    """Sum of each complete window."""
    return _complete(pd.Series(values).rolling(window=period).sum(), period)


def rolling_mean(values: np.ndarray, period: int) -> np.ndarray:
    """Arithmetic mean of each complete window."""
    return _complete(pd.Series(values).rolling(window=period).mean(), period)


def rolling_max(values: np.ndarray, period: int) -> np.ndarray:
    """Maximum of each complete window."""
    return _complete(pd.Series(values).rolling(window=period).max(), period)


def rolling_min(values: np.ndarray, period: int) -> np.ndarray:
    """Minimum of each complete window."""
    return _complete(pd.Series(values).rolling(window=period).min(), period)


def flat_windows(values: np.ndarray, period: int) -> np.ndarray:
    """Boolean mask of windows whose samples are all equal."""
    return rolling_max(values, period) == rolling_min(values, period)


def rolling_std(values: np.ndarray, period: int) -> np.ndarray:
    """Population standard deviation of each complete window.

    Flat windows report exactly 0 so running-sum rounding can never leak a
    tiny positive deviation into band or oscillator math.
    """
    variance = _complete(pd.Series(values).rolling(window=period).var(ddof=0), period)
    std = np.sqrt(np.maximum(variance, 0.0))
    return np.where(flat_windows(values, period), 0.0, std)


class _RankedWindow:
    """Count and sum of the samples inside a sliding window, indexed by value rank.

    A Fenwick tree over ranks, so adding, removing and querying a prefix of
    smaller values each cost O(log n).
    """

    def __init__(self, size: int) -> None:
        self._counts = [0] * (size + 1)
        self._sums = [0.0] * (size + 1)

    def update(self, rank: int, value: float, sign: int) -> None:
        """Add (``sign=1``) or remove (``sign=-1``) one sample."""
        i = rank + 1
        while i < len(self._counts):
            self._counts[i] += sign
            self._sums[i] += sign * value
            i += i & -i

    def below(self, rank: int) -> tuple[int, float]:
        """Count and sum of the samples whose rank is lower than ``rank``."""
        count = 0
        total = 0.0
        i = rank
        while i > 0:
            count += self._counts[i]
            total += self._sums[i]
            i -= i & -i
        return count, total


def rolling_mean_deviation(
    values: np.ndarray, period: int, means: np.ndarray | None = None
) -> np.ndarray:
    """Mean absolute deviation of each complete window from its mean.

    With ``c`` samples strictly below the window mean ``m`` and ``s`` their
    sum, the deviation is ``2 * (m * c - s) / period``. Counts and sums come
    from a rank-indexed tree that slides with the window, so the cost is
    O(n log n) time and O(n) memory whatever the period.

    Args:
        values: Sample array
        period: Window size
        means: Precomputed window means (as returned by ``rolling_mean``)

    Returns:
        Array of mean absolute deviations, 0 for flat windows
    """
    if means is None:
        means = rolling_mean(values, period)

    order = np.argsort(values, kind='stable')
    ranks = np.empty(len(values), dtype=np.intp)
    ranks[order] = np.arange(len(values))
    thresholds = np.searchsorted(values[order], means, side='left').tolist()

    sample_ranks = ranks.tolist()
    samples = values.tolist()
    window_means = means.tolist()
    window = _RankedWindow(len(samples))
    deviation = np.empty(len(window_means), dtype=float)

    for j, (rank, value) in enumerate(zip(sample_ranks, samples)):
        window.update(rank, value, 1)
        if j >= period:
            window.update(sample_ranks[j - period], samples[j - period], -1)
        start = j - period + 1
        if start >= 0:
            count, total = window.below(thresholds[start])
            deviation[start] = 2.0 * (window_means[start] * count - total) / period

    deviation = np.maximum(deviation, 0.0)
    return np.where(flat_windows(values, period), 0.0, deviation)


def safe_divide(
    numerator: np.ndarray, denominator: np.ndarray, fallback: float = 0.0
) -> np.ndarray:
    """Element-wise division returning ``fallback`` wherever the denominator is zero."""
    numerator = np.asarray(numerator, dtype=float)
    denominator = np.asarray(denominator, dtype=float)
    result = np.full(np.broadcast(numerator, denominator).shape, fallback, dtype=float)
    np.divide(numerator, denominator, out=result, where=denominator != 0)
    return result


def recursive_average(values: np.ndarray, alpha: float, seed: float) -> np.ndarray:
    """Exponentially smooth ``values`` starting from ``seed``.

    Computes ``out[i] = alpha * values[i] + (1 - alpha) * out[i - 1]`` with
    ``out[-1] = seed``. The seed itself is not part of the output.
    """
    if len(values) == 0:
        return np.empty(0, dtype=float)
    seeded = pd.Series(np.concatenate(([seed], values)))
    return seeded.ewm(alpha=alpha, adjust=False).mean().to_numpy(dtype=float)[1:]


def typical_price(
    high: float | ArrayLike, low: float | ArrayLike, close: float | ArrayLike
) -> float | np.ndarray:
    """Typical price ``(high + low + close) / 3``.

    Scalars give a float; sequences give an array of equal-length element-wise values.
    """
    if np.isscalar(high) and np.isscalar(low) and np.isscalar(close):
        return (float(high) + float(low) + float(close)) / 3.0
    return (as_float_array(high) + as_float_array(low) + as_float_array(close)) / 3.0


def true_range(high: float, low: float, prev_close: float) -> float:
    """Largest of the bar range and the gaps to the previous close."""
    return max(high - low, abs(high - prev_close), abs(low - prev_close))
