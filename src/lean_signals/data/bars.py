"""
Bar records and source-value extraction for Lean-Signals.

Indicators consume any object exposing numeric ``open``, ``high``, ``low``,
``close`` and ``volume`` attributes. ``Bar`` is the concrete record shipped
with the package.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..serialization import JSONSerializable


class SourceField(Enum):
    """Bar field an indicator reads its input from."""
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"

    @classmethod
    def parse(cls, source: Union["SourceField", str, None]) -> "SourceField":
        """Resolve a field selector, defaulting to close.

        Args:
            source: A SourceField, its name/value as a string, or None

        Returns:
            SourceField: The resolved field

        Raises:
            ValueError: If a string selector names no known field
        """
        if source is None:
            return cls.CLOSE
        if isinstance(source, cls):
            return source
        try:
            return cls(str(source).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown source field '{source}', expected one of "
                f"{[field.value for field in cls]}"
            ) from None


@dataclass(frozen=True)
class Bar(JSONSerializable):
    """
    One time step of OHLCV data.

    Time is informational only; indicators never look at it.
    """
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    time: Optional[datetime] = None

    def __post_init__(self):
        """Validate data after initialization."""
        if min(self.open, self.high, self.low, self.close) <= 0:
            raise ValueError("Prices must be positive")
        if self.high < max(self.open, self.close):
            raise ValueError("High must be >= max(open, close)")
        if self.low > min(self.open, self.close):
            raise ValueError("Low must be <= min(open, close)")
        if self.volume < 0:
            raise ValueError("Volume cannot be negative")

    @classmethod
    def flat(cls, price: float, volume: float = 0.0, time: Optional[datetime] = None) -> "Bar":
        """Create a bar whose open, high, low and close all equal ``price``."""
        return cls(price, price, price, price, volume, time)

    def __str__(self) -> str:
        return (f"O:{self.open:.2f} H:{self.high:.2f} L:{self.low:.2f} "
                f"C:{self.close:.2f} V:{self.volume}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'open': self.open,
            'high': self.high,
            'low': self.low,
            'close': self.close,
            'volume': self.volume,
            'time': self.time.isoformat() if self.time else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Bar':
        """Create Bar from dictionary."""
        time = data.get('time')
        return cls(
            open=data['open'],
            high=data['high'],
            low=data['low'],
            close=data['close'],
            volume=data.get('volume', 0.0),
            time=datetime.fromisoformat(time) if time else None
        )


def extract_source_value(bar: Any, source: Optional[SourceField] = None) -> float:
    """Return the scalar an indicator consumes from ``bar``.

    Args:
        bar: Object exposing open, high, low, close and volume attributes
        source (Optional[SourceField]): Field to read; None means close

    Returns:
        float: The selected field's value
    """
    if source is None:
        source = SourceField.CLOSE
    return getattr(bar, source.value)
