"""Commodity Channel Index (CCI) adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.momentum import cci

from .base_indicator import HLC_COLUMNS, BaseIndicator, IndicatorFactory
from .indicator_configs import CCIConfig


@IndicatorFactory.register("cci")
class CCIIndicator(BaseIndicator):
    """Commodity Channel Index momentum indicator.

    CCI = (Typical Price - SMA of Typical Price) / (0.015 x Mean Deviation)
    """

    config_class = CCIConfig
    output_lines = ('cci',)
    config: CCIConfig

    @classmethod
    def default_config(cls) -> CCIConfig:
        """Return the 20-period CCI configuration."""
        return CCIConfig()

    def get_required_columns(self) -> list[str]:
        """CCI reads the high, low and close columns."""
        return list(HLC_COLUMNS)

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run CCI over the high/low/close columns."""
        return {'cci': cci(data['high'], data['low'], data['close'], self.config.period)}
