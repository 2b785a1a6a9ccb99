"""Relative Strength Index (RSI) adapter."""

from collections.abc import Sequence

import pandas as pd

from ta_engine.indicators.momentum import rsi
from ta_engine.signal.classifiers import RSI_OVERBOUGHT, RSI_OVERSOLD, rsi_signal
from ta_engine.signal.signal_types import SignalType

from .base_indicator import BaseIndicator, IndicatorFactory
from .indicator_configs import RSIConfig


@IndicatorFactory.register("rsi")
class RSIIndicator(BaseIndicator):
    """Relative Strength Index momentum indicator.

    Oscillates between 0 and 100; readings at or above 70 are treated as
    overbought and at or below 30 as oversold.
    """

    config_class = RSIConfig
    output_lines = ('rsi',)
    config: RSIConfig

    @classmethod
    def default_config(cls) -> RSIConfig:
        """Return the canonical RSI configuration."""
        return RSIConfig()

    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run Wilder RSI over the configured price column."""
        return {'rsi': rsi(data[self.config.price_column], self.config.period)}

    def _classify(self, readings: pd.DataFrame) -> tuple[SignalType, str, float]:
        current_rsi = float(readings[self.column_name('rsi')].iloc[-1])
        signal_type = rsi_signal(current_rsi)

        if signal_type is SignalType.SELL:
            action = f"Overbought: RSI {current_rsi:.1f} at or above {RSI_OVERBOUGHT:.0f}"
            confidence = min(0.9, (current_rsi - RSI_OVERBOUGHT) / 20 + 0.5)
        elif signal_type is SignalType.BUY:
            action = f"Oversold: RSI {current_rsi:.1f} at or below {RSI_OVERSOLD:.0f}"
            confidence = min(0.9, (RSI_OVERSOLD - current_rsi) / 20 + 0.5)
        else:
            action = f"Neutral: RSI {current_rsi:.1f} in normal range"
            confidence = 0.3
        return signal_type, action, confidence
