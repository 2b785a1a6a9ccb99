"""DataFrame adapters for the indicator functions.

Importing this package registers every adapter with ``IndicatorFactory``.
"""

from .base_indicator import BaseIndicator, IndicatorFactory
from .bollinger_bands import BollingerBandsIndicator
from .cci import CCIIndicator
from .ema import EMAIndicator
from .indicator_configs import (
    BollingerBandsConfig,
    CCIConfig,
    EMAConfig,
    IndicatorConfig,
    KDJConfig,
    MACDConfig,
    RSIConfig,
    SMAConfig,
    VWAPConfig,
    WilliamsRConfig,
)
from .kdj import KDJIndicator
from .macd import MACDIndicator
from .rsi import RSIIndicator
from .sma import SMAIndicator
from .vwap import VWAPIndicator
from .williams_r import WilliamsRIndicator

__all__ = [
    "BaseIndicator",
    "IndicatorFactory",
    # Configs
    "IndicatorConfig",
    "SMAConfig",
    "EMAConfig",
    "RSIConfig",
    "MACDConfig",
    "KDJConfig",
    "WilliamsRConfig",
    "CCIConfig",
    "BollingerBandsConfig",
    "VWAPConfig",
    # Indicator classes
    "SMAIndicator",
    "EMAIndicator",
    "RSIIndicator",
    "MACDIndicator",
    "KDJIndicator",
    "WilliamsRIndicator",
    "CCIIndicator",
    "BollingerBandsIndicator",
    "VWAPIndicator",
]
