"""Bollinger Bands adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.volatility import bollinger_bands

from .base_indicator import BaseIndicator, IndicatorFactory
from .indicator_configs import BollingerBandsConfig


@IndicatorFactory.register("bollinger_bands")
class BollingerBandsIndicator(BaseIndicator):
    """Bollinger Bands volatility indicator.

    A middle SMA band with upper and lower bands ``multiplier`` population
    standard deviations away.
    """

    config_class = BollingerBandsConfig
    output_lines = ('upper', 'middle', 'lower')
    config: BollingerBandsConfig

    @classmethod
    def default_config(cls) -> BollingerBandsConfig:
        """Return the 20-period, two standard deviation configuration."""
        return BollingerBandsConfig()

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run Bollinger Bands over the configured price column."""
        result = bollinger_bands(
            data[self.config.price_column],
            period=self.config.period,
            multiplier=self.config.multiplier,
        )
        return result._asdict()
