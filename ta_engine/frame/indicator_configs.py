"""Typed indicator configuration models for the DataFrame adapters.

Each indicator has its own pydantic model with explicit, validated fields, so
a misspelled or out-of-range parameter fails when the config is built rather
than deep inside a calculation.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

VALID_INDICATOR_TYPES = ('trend', 'momentum', 'volatility', 'volume')


class IndicatorConfig(BaseModel):
    """Settings shared by every indicator adapter.

    Concrete configs pin ``indicator_type`` to the family of their indicator.
    """

    model_config = ConfigDict(extra='forbid')

    indicator_name: str = Field(description="Name of the indicator, used as column prefix")
    indicator_type: str = Field(default="trend", description="Indicator family")
    price_column: str = Field(default="close", description="Price column to use")
    volume_column: str = Field(default="volume", description="Volume column name")

    @field_validator('indicator_name')
    @classmethod
    def validate_indicator_name(cls, v: str) -> str:
        """Ensure indicator name is a non-empty string."""
        if not v.strip():
            raise ValueError("indicator_name must be a non-empty string")
        return v.strip()

    @field_validator('indicator_type', mode='before')
    @classmethod
    def validate_indicator_type(cls, v: str) -> str:
        """Validate indicator type is one of the indicator families."""
        value = str(v).lower().strip()
        if value not in VALID_INDICATOR_TYPES:
            raise ValueError(f"indicator_type must be one of {list(VALID_INDICATOR_TYPES)}")
        return value

    @field_validator(
        'period',
        'fast_period',
        'slow_period',
        'signal_period',
        'k_smooth',
        'd_smooth',
        check_fields=False,
    )
    @classmethod
    def validate_positive_periods(cls, v: int) -> int:
        """Validate that all period parameters are positive."""
        if v <= 0:
            raise ValueError("Period must be positive")
        return v


class SMAConfig(IndicatorConfig):
    """Simple Moving Average settings."""

    indicator_name: str = "sma"
    indicator_type: Literal['trend'] = 'trend'
    period: int = Field(default=20, description="Averaging window")


class EMAConfig(IndicatorConfig):
    """Exponential Moving Average settings."""

    indicator_name: str = "ema"
    indicator_type: Literal['trend'] = 'trend'
    period: int = Field(default=12, description="Smoothing window")


class RSIConfig(IndicatorConfig):
    """Relative Strength Index settings."""

    indicator_name: str = "rsi"
    indicator_type: Literal['momentum'] = 'momentum'
    period: int = Field(default=14, description="Wilder smoothing window")


class MACDConfig(IndicatorConfig):
    """MACD settings."""

    indicator_name: str = "macd"
    indicator_type: Literal['momentum'] = 'momentum'
    fast_period: int = Field(default=12, description="Fast EMA period")
    slow_period: int = Field(default=26, description="Slow EMA period")
    signal_period: int = Field(default=9, description="Signal line EMA period")

    @model_validator(mode='after')
    def _check_fast_below_slow(self) -> 'MACDConfig':
        if self.fast_period >= self.slow_period:
            raise ValueError("Fast period must be less than slow period for MACD")
        return self


class KDJConfig(IndicatorConfig):
    """KDJ stochastic settings."""

    indicator_name: str = "kdj"
    indicator_type: Literal['momentum'] = 'momentum'
    period: int = Field(default=9, description="RSV high/low window")
    k_smooth: int = Field(default=3, description="K smoothing period")
    d_smooth: int = Field(default=3, description="D smoothing period")


class WilliamsRConfig(IndicatorConfig):
    """Williams %R settings."""

    indicator_name: str = "williams_r"
    indicator_type: Literal['momentum'] = 'momentum'
    period: int = Field(default=14, description="High/low window")


class CCIConfig(IndicatorConfig):
    """Commodity Channel Index settings."""

    indicator_name: str = "cci"
    indicator_type: Literal['momentum'] = 'momentum'
    period: int = Field(default=20, description="Typical price window")


class BollingerBandsConfig(IndicatorConfig):
    """Bollinger Bands settings."""

    indicator_name: str = "bollinger_bands"
    indicator_type: Literal['volatility'] = 'volatility'
    period: int = Field(default=20, description="Middle band window")
    multiplier: float = Field(default=2.0, description="Standard deviation multiplier")

    @field_validator('multiplier')
    @classmethod
    def validate_multiplier(cls, v: float) -> float:
        """Bands must open outwards."""
        if v <= 0:
            raise ValueError("Standard deviation multiplier must be positive")
        return v


class VWAPConfig(IndicatorConfig):
    """Rolling VWAP settings."""

    indicator_name: str = "vwap"
    indicator_type: Literal['volume'] = 'volume'
    period: int = Field(default=20, description="Volume weighting window")
