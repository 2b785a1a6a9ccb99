"""Signal types and the signal payload returned by the DataFrame adapters.

``SignalType`` is the three-way outcome of every classifier.
``SignalGenerator.create_signal`` builds the dictionary an adapter returns
from ``generate_signal``, so every indicator reports the same field set.
"""

from enum import Enum
from typing import Any

SignalDict = dict[str, Any]

_SIGNAL_COLORS = {"BUY": "green", "SELL": "red", "HOLD": "gray"}


class SignalType(Enum):
    """Classifier outcome for one indicator reading."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"

    @property
    def color(self) -> str:
        """Display color conventionally used for the signal."""
        return _SIGNAL_COLORS[self.value]


class SignalGenerator:
    """Builds adapter signal payloads."""

    @staticmethod
    def create_signal(
        signal_type: SignalType,
        action: str,
        confidence: float,
        timestamp: Any,
        metadata: dict[str, Any] | None = None,
    ) -> SignalDict:
        """Create the signal payload for one classified reading.

        Args:
            signal_type: Classifier outcome
            action: Human readable description of the reading
            confidence: Confidence level (0.0 to 1.0)
            timestamp: Index label of the bar the reading belongs to
            metadata: Indicator name, family and the latest line values

        Returns:
            Dictionary with ``timestamp``, ``signal_type`` (the enum value),
            ``action``, ``confidence`` and ``metadata``

        Raises:
            ValueError: If confidence is outside [0, 1]
        """
        if not 0.0 <= confidence <= 1.0:
            raise ValueError("Confidence must be between 0.0 and 1.0")

        return {
            'timestamp': timestamp,
            'signal_type': signal_type.value,
            'action': action,
            'confidence': float(confidence),
            'metadata': metadata or {},
        }
