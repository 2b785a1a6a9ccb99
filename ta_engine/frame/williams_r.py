"""Williams %R adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.momentum import williams_r

from .base_indicator import HLC_COLUMNS, BaseIndicator, IndicatorFactory
from .indicator_configs import WilliamsRConfig


@IndicatorFactory.register("williams_r")
class WilliamsRIndicator(BaseIndicator):
    """Williams %R momentum oscillator, bounded to [-100, 0]."""

    config_class = WilliamsRConfig
    output_lines = ('wr',)
    config: WilliamsRConfig

    @classmethod
    def default_config(cls) -> WilliamsRConfig:
        """Return the 14-period Williams %R configuration."""
        return WilliamsRConfig()

    def get_required_columns(self) -> list[str]:
        """Williams %R reads the high, low and close columns."""
        return list(HLC_COLUMNS)

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run Williams %R over the high/low/close columns."""
        return {'wr': williams_r(data['high'], data['low'], data['close'], self.config.period)}
