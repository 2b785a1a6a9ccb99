"""Simple Moving Average (SMA) adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.trend import sma

from .base_indicator import BaseIndicator, IndicatorFactory
from .indicator_configs import SMAConfig


@IndicatorFactory.register("sma")
class SMAIndicator(BaseIndicator):
    """Simple Moving Average trend indicator.

    The unweighted mean of the previous ``period`` prices.
    """

    config_class = SMAConfig
    output_lines = ('sma',)
    config: SMAConfig

    @classmethod
    def default_config(cls) -> SMAConfig:
        """Return the reference SMA configuration."""
        return SMAConfig()

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Average the configured price column."""
        return {'sma': sma(data[self.config.price_column], self.config.period)}
