"""Rolling Volume Weighted Average Price (VWAP) adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.volume import rolling_vwap
from ta_engine.indicators.window import typical_price

from .base_indicator import HLC_COLUMNS, BaseIndicator, IndicatorFactory
from .indicator_configs import VWAPConfig


@IndicatorFactory.register("vwap")
class VWAPIndicator(BaseIndicator):
    """Rolling VWAP over each bar's typical price.

    Windows that traded no volume are left as NaN so every value stays on the
    row that closes its window.
    """

    config_class = VWAPConfig
    output_lines = ('vwap',)
    config: VWAPConfig

    @classmethod
    def default_config(cls) -> VWAPConfig:
        """Return the 20-period VWAP configuration."""
        return VWAPConfig()

    def get_required_columns(self) -> list[str]:
        """VWAP reads high, low, close and the configured volume column."""
        return [*HLC_COLUMNS, self.config.volume_column]

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Weight each bar's typical price by its volume."""
        prices = typical_price(data['high'], data['low'], data['close'])
        volumes = data[self.config.volume_column]
        return {'vwap': rolling_vwap(prices, volumes, self.config.period)}
