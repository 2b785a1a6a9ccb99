"""Tests for the BaseIndicator contract shared by every adapter."""

import logging

import numpy as np
import pandas as pd
import pytest

from ta_engine.frame.base_indicator import BaseIndicator
from ta_engine.frame.indicator_configs import EMAConfig, RSIConfig, SMAConfig
from ta_engine.frame.rsi import RSIIndicator
from ta_engine.frame.sma import SMAIndicator


class TestConstruction:
    """Adapters accept only their own config model."""

    def test_wrong_config_type(self) -> None:
        """Passing another indicator's config raises TypeError."""
        with pytest.raises(TypeError, match="SMAIndicator expects SMAConfig"):
            SMAIndicator(EMAConfig())

    def test_base_class_is_abstract(self) -> None:
        """BaseIndicator cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseIndicator(SMAConfig())  # type: ignore[abstract]

    def test_custom_logger(self) -> None:
        """An explicit logger is used as given."""
        logger = logging.getLogger("ta_engine.tests.custom")
        indicator = SMAIndicator(SMAConfig(), logger=logger)

        assert indicator.logger is logger

    def test_indicator_info(self) -> None:
        """Info reports name, family, columns and config."""
        info = SMAIndicator(SMAConfig(period=5)).get_indicator_info()

        assert info['name'] == "sma"
        assert info['type'] == "trend"
        assert info['columns'] == ["sma_sma"]
        assert info['config']['period'] == 5


class TestValidateData:
    """Input frames are checked before any calculation."""

    def test_valid_data(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """A datetime-indexed frame with the price column passes."""
        assert SMAIndicator(SMAConfig()).validate_data(sample_ohlcv_data) is True

    def test_empty_data(self) -> None:
        """Empty frames are rejected."""
        with pytest.raises(ValueError, match="cannot be None or empty"):
            SMAIndicator(SMAConfig()).calculate(pd.DataFrame())

    def test_requires_datetime_index(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """A positional index is rejected."""
        with pytest.raises(ValueError, match="datetime indexed"):
            SMAIndicator(SMAConfig()).calculate(sample_ohlcv_data.reset_index(drop=True))

    def test_missing_price_column(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """The configured price column must exist."""
        indicator = SMAIndicator(SMAConfig(price_column="adj_close"))

        with pytest.raises(ValueError, match="Missing required columns"):
            indicator.calculate(sample_ohlcv_data)


class TestCalculate:
    """Output columns are aligned to the newest rows."""

    def test_does_not_modify_input(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """calculate works on a copy."""
        original_columns = list(sample_ohlcv_data.columns)
        result = SMAIndicator(SMAConfig()).calculate(sample_ohlcv_data)

        assert list(sample_ohlcv_data.columns) == original_columns
        assert "sma_sma" in result.columns
        assert result.index.equals(sample_ohlcv_data.index)

    def test_warmup_rows_are_nan(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """Rows before the first complete window hold NaN."""
        result = SMAIndicator(SMAConfig(period=20)).calculate(sample_ohlcv_data)

        assert result['sma_sma'].iloc[:19].isna().all()
        assert result['sma_sma'].iloc[19:].notna().all()

    def test_column_prefix_follows_name(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """A custom indicator name changes the column prefix."""
        indicator = SMAIndicator(SMAConfig(indicator_name="SMA_Fast", period=5))
        result = indicator.calculate(sample_ohlcv_data)

        assert "sma_fast_sma" in result.columns
        assert indicator.get_indicator_columns() == ["sma_fast_sma"]

    def test_period_longer_than_data(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """An oversized window yields an all-NaN column."""
        result = SMAIndicator(SMAConfig(period=100)).calculate(sample_ohlcv_data)
        assert result['sma_sma'].isna().all()


class TestGenerateSignal:
    """Signals come from the latest complete reading."""

    def test_missing_columns_returns_none(
        self, sample_ohlcv_data: pd.DataFrame, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Uncalculated data gives no signal and a warning."""
        indicator = SMAIndicator(SMAConfig(), logger=logging.getLogger("ta_engine.tests.signal"))

        with caplog.at_level(logging.WARNING, logger="ta_engine.tests.signal"):
            assert indicator.generate_signal(sample_ohlcv_data) is None
        assert "columns not found" in caplog.text

    def test_no_complete_reading_returns_none(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """All-NaN indicator columns give no signal."""
        indicator = SMAIndicator(SMAConfig(period=100))
        assert indicator.generate_signal(indicator.calculate(sample_ohlcv_data)) is None

    def test_informational_indicator_holds(self, sample_ohlcv_data: pd.DataFrame) -> None:
        """Indicators without a classifier report HOLD with their latest value."""
        indicator = SMAIndicator(SMAConfig(period=10))
        data = indicator.calculate(sample_ohlcv_data)
        signal = indicator.generate_signal(data)

        assert signal is not None
        assert set(signal) == {"timestamp", "signal_type", "action", "confidence", "metadata"}
        assert signal['signal_type'] == "HOLD"
        assert signal['confidence'] == 0.3
        assert signal['timestamp'] == data.index[-1]
        assert signal['metadata']['indicator_name'] == "sma"
        assert signal['metadata']['indicator_type'] == "trend"
        assert signal['metadata']['sma_sma'] == pytest.approx(data['sma_sma'].iloc[-1])

    def test_uses_latest_complete_row(self, trending_up_data: pd.DataFrame) -> None:
        """Trailing NaN rows are skipped when picking the reading."""
        indicator = RSIIndicator(RSIConfig())
        data = indicator.calculate(trending_up_data)
        data.loc[data.index[-1], 'rsi_rsi'] = np.nan

        signal = indicator.generate_signal(data)

        assert signal is not None
        assert signal['timestamp'] == data.index[-2]
