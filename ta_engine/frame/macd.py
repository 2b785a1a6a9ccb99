"""Moving Average Convergence Divergence (MACD) adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.momentum import macd
from ta_engine.signal.classifiers import macd_signal
from ta_engine.signal.signal_types import SignalType

from .base_indicator import BaseIndicator, IndicatorFactory
from .indicator_configs import MACDConfig


@IndicatorFactory.register("macd")
class MACDIndicator(BaseIndicator):
    """MACD momentum indicator.

    Adds the MACD line (fast EMA minus slow EMA), its signal line and the
    histogram between them. Signals fire on MACD/signal-line crossovers.
    """

    config_class = MACDConfig
    output_lines = ('macd', 'signal', 'histogram')
    config: MACDConfig

    @classmethod
    def default_config(cls) -> MACDConfig:
        """Return the standard 12/26/9 MACD configuration."""
        return MACDConfig()

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run MACD over the configured price column."""
        result = macd(
            data[self.config.price_column],
            fast_period=self.config.fast_period,
            slow_period=self.config.slow_period,
            signal_period=self.config.signal_period,
        )
        return result._asdict()

    def _classify(self, readings: pd.DataFrame) -> tuple[SignalType, str, float]:
        if len(readings) < 2:
            return SignalType.HOLD, "Waiting for a second MACD reading", 0.3

        macd_line = readings[self.column_name('macd')]
        signal_line = readings[self.column_name('signal')]
        signal_type = macd_signal(
            macd=float(macd_line.iloc[-1]),
            signal=float(signal_line.iloc[-1]),
            prev_macd=float(macd_line.iloc[-2]),
            prev_signal=float(signal_line.iloc[-2]),
        )

        if signal_type is SignalType.BUY:
            return signal_type, "Bullish crossover: MACD crossed above signal line", 0.7
        if signal_type is SignalType.SELL:
            return signal_type, "Bearish crossover: MACD crossed below signal line", 0.7
        return signal_type, "No MACD crossover on the latest bar", 0.3
