"""Exponential Moving Average (EMA) adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.trend import ema

from .base_indicator import BaseIndicator, IndicatorFactory
from .indicator_configs import EMAConfig


@IndicatorFactory.register("ema")
class EMAIndicator(BaseIndicator):
    """Exponential Moving Average trend indicator.

    Weights recent prices more heavily than the SMA, starting from the SMA of
    the first window.
    """

    config_class = EMAConfig
    output_lines = ('ema',)
    config: EMAConfig

    @classmethod
    def default_config(cls) -> EMAConfig:
        """Return the canonical EMA configuration."""
        return EMAConfig()

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Smooth the configured price column."""
        return {'ema': ema(data[self.config.price_column], self.config.period)}
