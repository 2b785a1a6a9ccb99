"""Base adapter class and factory for DataFrame indicator calculations.

Adapters wrap the pure functions in ``ta_engine.indicators`` for callers that
keep OHLCV bars in a datetime-indexed DataFrame. An adapter copies the frame,
appends its output lines as columns aligned to the newest rows (older rows are
NaN) and can classify the latest reading into a trading signal.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

import numpy as np
import pandas as pd

from ta_engine.core.logger import get_engine_logger
from ta_engine.signal.signal_types import SignalDict, SignalGenerator, SignalType

from .indicator_configs import IndicatorConfig

HLC_COLUMNS = ('high', 'low', 'close')


class BaseIndicator(ABC):
    """Abstract base class for all DataFrame indicator adapters.

    Subclasses declare the config model they accept, the output lines they
    produce and implement ``compute`` by calling the matching pure function.
    """

    config_class: ClassVar[type[IndicatorConfig]] = IndicatorConfig
    output_lines: ClassVar[tuple[str, ...]] = ()

    def __init__(self, config: IndicatorConfig, logger: logging.Logger | None = None) -> None:
        """Initialize the indicator with configuration.

        Args:
            config: Indicator configuration, an instance of ``config_class``
            logger: Optional logger instance

        Raises:
            TypeError: If the config is not an instance of ``config_class``
        """
        if not isinstance(config, self.config_class):
            raise TypeError(
                f"{type(self).__name__} expects {self.config_class.__name__}, "
                f"got {type(config).__name__}"
            )
        self.config = config
        self.logger = logger or get_engine_logger(__name__)
        self.name = config.indicator_name
        self.type = config.indicator_type

        self.logger.debug(f"Initialized indicator: {self.name} (type: {self.type})")

    @classmethod
    def default_config(cls) -> IndicatorConfig:
        """Return the default configuration for the indicator implementation."""
        raise NotImplementedError(f"{cls.__name__} must define default_config()")

    @abstractmethod
    def compute(self, data: pd.DataFrame) -> dict[str, Sequence[float]]:
        """Run the underlying indicator function on validated data.

        Returns:
            Mapping of output line name to its values, newest value last
        """

    def calculate(self, data: pd.DataFrame) -> pd.DataFrame:
        """Calculate indicator values.

        Args:
            data: DataFrame with OHLCV data (datetime indexed)

        Returns:
            Copy of ``data`` with one column per output line. Rows older than
            the first complete window hold NaN.

        Raises:
            ValueError: If data is empty, not datetime indexed or lacks columns
        """
        self.validate_data(data)
        result = data.copy()

        for line, values in self.compute(data).items():
            result[self.column_name(line)] = self._align(values, data.index)

        self.logger.debug(f"Calculated {self.name} over {len(data)} rows")
        return result

    def generate_signal(self, data: pd.DataFrame) -> SignalDict | None:
        """Classify the latest complete reading into a trading signal.

        Args:
            data: DataFrame returned by ``calculate``

        Returns:
            Signal dictionary, or None when the indicator columns are missing
            or hold no complete reading yet
        """
        columns = self.get_indicator_columns()
        missing = [column for column in columns if column not in data.columns]
        if missing:
            self.logger.warning(f"{self.name} columns not found in data: {missing}")
            return None

        readings = data[columns].dropna()
        if readings.empty:
            self.logger.debug(f"No complete {self.name} reading available")
            return None

        signal_type, action, confidence = self._classify(readings)
        latest = readings.iloc[-1]
        return self._create_standard_signal(
            signal_type=signal_type,
            action=action,
            confidence=confidence,
            timestamp=readings.index[-1],
            **{column: float(latest[column]) for column in columns},
        )

    def _classify(self, readings: pd.DataFrame) -> tuple[SignalType, str, float]:
        """Map complete readings to (signal, action, confidence).

        Indicators without a classifier report HOLD with their latest values.
        """
        return SignalType.HOLD, f"{self.name} reading (informational)", 0.3

    def validate_data(self, data: pd.DataFrame) -> bool:
        """Validate input data format and required columns.

        Returns:
            True if data is valid, raises ValueError otherwise
        """
        if data is None or data.empty:
            raise ValueError("Input data cannot be None or empty")

        if not isinstance(data.index, pd.DatetimeIndex):
            raise ValueError("Data must be datetime indexed")

        missing_columns = [col for col in self.get_required_columns() if col not in data.columns]
        if missing_columns:
            raise ValueError(f"Missing required columns: {missing_columns}")
        return True

    def get_required_columns(self) -> list[str]:
        """Get list of data columns the calculation reads."""
        return [self.config.price_column]

    def column_name(self, line: str) -> str:
        """Column name used for one output line."""
        return f"{self.name.lower()}_{line}"

    def get_indicator_columns(self) -> list[str]:
        """Get the column names that this indicator adds to the DataFrame."""
        return [self.column_name(line) for line in self.output_lines]

    def get_indicator_info(self) -> dict[str, Any]:
        """Get indicator information and current configuration."""
        return {
            "name": self.name,
            "type": self.type,
            "columns": self.get_indicator_columns(),
            "config": self.config.model_dump(),
        }

    @staticmethod
    def _align(values: Sequence[float], index: pd.Index) -> pd.Series:
        """Place ``values`` on the newest rows of ``index``, NaN before them."""
        aligned = np.full(len(index), np.nan)
        if len(values):
            aligned[len(index) - len(values) :] = values
        return pd.Series(aligned, index=index)

    def _create_standard_signal(
        self,
        signal_type: SignalType,
        action: str,
        confidence: float,
        timestamp: Any,
        **metadata: Any,
    ) -> SignalDict:
        """Create a standardized trading signal tagged with this indicator."""
        full_metadata = {'indicator_name': self.name, 'indicator_type': self.type, **metadata}

        return SignalGenerator.create_signal(
            signal_type=signal_type,
            action=action,
            confidence=confidence,
            timestamp=timestamp,
            metadata=full_metadata,
        )


class IndicatorFactory:
    """Factory for creating indicator adapters by registered name.

    ``_indicators`` is filled only by ``register`` while adapter modules are
    imported; calculations never read or write it.
    """

    _indicators: dict[str, type[BaseIndicator]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[BaseIndicator]], type[BaseIndicator]]:
        """Register an indicator class with the factory.

        Args:
            name: Name to register the indicator under

        Returns:
            Decorator function for registering the indicator class
        """

        def decorator(indicator_class: type[BaseIndicator]) -> type[BaseIndicator]:
            cls._indicators[name.lower()] = indicator_class
            return indicator_class

        return decorator

    @classmethod
    def _get_indicator_class(cls, name: str) -> type[BaseIndicator]:
        slug = name.lower()
        indicator_class = cls._indicators.get(slug)
        if indicator_class is None:
            available = sorted(cls._indicators)
            raise ValueError(f"Unknown indicator: {slug}. Available indicators: {available}")
        return indicator_class

    @classmethod
    def default_config(cls, name: str) -> IndicatorConfig:
        """Return the registered indicator's default configuration."""
        return cls._get_indicator_class(name).default_config()

    @classmethod
    def create(
        cls,
        name: str,
        config: IndicatorConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> BaseIndicator:
        """Create an indicator instance by name.

        Args:
            name: Name of the indicator to create
            config: Configuration for the indicator. When omitted the registered
                indicator default is used.
            logger: Optional logger passed to the indicator

        Returns:
            Indicator instance

        Raises:
            ValueError: If the indicator name is not registered
        """
        indicator_class = cls._get_indicator_class(name)
        resolved_config = config or indicator_class.default_config()
        return indicator_class(resolved_config, logger=logger)

    @classmethod
    def get_available_indicators(cls) -> list[str]:
        """Get list of available indicator names."""
        return list(cls._indicators.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if an indicator is registered."""
        return name.lower() in cls._indicators
