"""Pytest configuration and shared fixtures for the ta_engine test suite."""

from typing import Any

import numpy as np
import pandas as pd
import pytest


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "performance: marks tests as performance suites")


# =============================================================================
# Plain series fixtures
# =============================================================================


@pytest.fixture
def zigzag_prices() -> list[float]:
    """Fifteen closes rising to 15, falling to 10 and recovering to 14."""
    return [10.0, 11.0, 12.0, 13.0, 14.0, 15.0, 14.0, 13.0, 12.0, 11.0, 10.0, 11.0, 12.0, 13.0, 14.0]


@pytest.fixture
def zigzag_high(zigzag_prices: list[float]) -> list[float]:
    """Highs half a point above each close."""
    return [price + 0.5 for price in zigzag_prices]


@pytest.fixture
def zigzag_low(zigzag_prices: list[float]) -> list[float]:
    """Lows half a point below each close."""
    return [price - 0.5 for price in zigzag_prices]


@pytest.fixture
def zigzag_volume() -> list[float]:
    """Volumes following the same zigzag shape as the closes."""
    return [
        1000.0, 1100.0, 1200.0, 1300.0, 1400.0, 1500.0, 1400.0, 1300.0,
        1200.0, 1100.0, 1000.0, 1100.0, 1200.0, 1300.0, 1400.0,
    ]  # fmt: skip


@pytest.fixture
def random_walk() -> np.ndarray:
    """Reproducible 500-sample random walk around 100."""
    np.random.seed(42)
    return 100 + np.random.randn(500).cumsum()


# =============================================================================
# OHLCV DataFrame fixtures
# =============================================================================


@pytest.fixture
def sample_ohlcv_data() -> pd.DataFrame:
    """Create sample OHLCV data for basic testing.

    Returns:
        DataFrame with 50 daily bars of realistic but simple OHLCV data
    """
    dates = pd.date_range('2023-01-01', periods=50, freq='D')

    np.random.seed(42)
    base_price = 100
    price_changes = np.random.randn(50) * 0.5

    data = pd.DataFrame(index=dates)
    data['close'] = base_price + price_changes.cumsum()
    data['open'] = data['close'] + np.random.randn(50) * 0.1
    data['high'] = np.maximum(data['open'], data['close']) + np.abs(np.random.randn(50)) * 0.1
    data['low'] = np.minimum(data['open'], data['close']) - np.abs(np.random.randn(50)) * 0.1
    data['volume'] = np.random.randint(100000, 1000000, 50)

    return data


@pytest.fixture
def trending_up_data() -> pd.DataFrame:
    """Create 40 bars of a steady uptrend with a one point bar range."""
    dates = pd.date_range('2023-01-01', periods=40, freq='D')
    close = np.linspace(100.0, 140.0, 40)

    return pd.DataFrame(
        {
            'open': close - 0.2,
            'high': close + 0.5,
            'low': close - 0.5,
            'close': close,
            'volume': np.full(40, 100000.0),
        },
        index=dates,
    )


@pytest.fixture
def trending_down_data() -> pd.DataFrame:
    """Create 40 bars of a steady downtrend with a one point bar range."""
    dates = pd.date_range('2023-01-01', periods=40, freq='D')
    close = np.linspace(140.0, 100.0, 40)

    return pd.DataFrame(
        {
            'open': close + 0.2,
            'high': close + 0.5,
            'low': close - 0.5,
            'close': close,
            'volume': np.full(40, 100000.0),
        },
        index=dates,
    )
