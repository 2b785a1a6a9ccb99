"""KDJ stochastic oscillator adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.momentum import kdj
from ta_engine.signal.classifiers import kdj_signal
from ta_engine.signal.signal_types import SignalType

from .base_indicator import HLC_COLUMNS, BaseIndicator, IndicatorFactory
from .indicator_configs import KDJConfig


@IndicatorFactory.register("kdj")
class KDJIndicator(BaseIndicator):
    """KDJ momentum indicator.

    K and D are smoothed stochastic lines bounded to 0-100, J = 3K - 2D is
    left unbounded. Signals fire when K and D are both overbought or both
    oversold.
    """

    config_class = KDJConfig
    output_lines = ('k', 'd', 'j')
    config: KDJConfig

    @classmethod
    def default_config(cls) -> KDJConfig:
        """Return the 9/3/3 KDJ configuration."""
        return KDJConfig()

    def get_required_columns(self) -> list[str]:
        """KDJ reads the high, low and close columns."""
        return list(HLC_COLUMNS)

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run KDJ over the high/low/close columns."""
        result = kdj(
            data['high'],
            data['low'],
            data['close'],
            period=self.config.period,
            k_smooth=self.config.k_smooth,
            d_smooth=self.config.d_smooth,
        )
        return result._asdict()

    def _classify(self, readings: pd.DataFrame) -> tuple[SignalType, str, float]:
        latest = readings.iloc[-1]
        k_value = float(latest[self.column_name('k')])
        d_value = float(latest[self.column_name('d')])
        j_value = float(latest[self.column_name('j')])
        signal_type = kdj_signal(k_value, d_value, j_value)

        if signal_type is SignalType.SELL:
            return signal_type, f"Overbought: K {k_value:.1f}, D {d_value:.1f}", 0.6
        if signal_type is SignalType.BUY:
            return signal_type, f"Oversold: K {k_value:.1f}, D {d_value:.1f}", 0.6
        return signal_type, f"Neutral: K {k_value:.1f}, D {d_value:.1f}", 0.3
