"""
Indicator result values for Lean-Signals.

An indicator output is either ``Available`` (a computed number) or
``UNAVAILABLE`` (not enough data yet, or no such historical point).
"""

from dataclasses import dataclass
from typing import Optional, Union


class ValueUnavailableError(LookupError):
    """Raised when an unavailable indicator value is unwrapped."""


@dataclass(frozen=True)
class Available:
    """A computed indicator value."""

    value: float

    @property
    def is_available(self) -> bool:
        return True

    def value_or(self, default: Optional[float] = None) -> float:
        """Return the wrapped value (the default is ignored)."""
        return self.value

    def unwrap(self) -> float:
        """Return the wrapped value."""
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Available({self.value!r})"


class Unavailable:
    """Marker for a value that cannot be produced.

    Use the module level ``UNAVAILABLE`` instance rather than creating new ones.
    """

    _instance: Optional["Unavailable"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_available(self) -> bool:
        return False

    def value_or(self, default: Optional[float] = None) -> Optional[float]:
        """Return ``default``."""
        return default

    def unwrap(self) -> float:
        raise ValueUnavailableError("Indicator value is not available")

    def __float__(self) -> float:
        raise ValueUnavailableError("Indicator value is not available")

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other) -> bool:
        return isinstance(other, Unavailable)

    def __hash__(self) -> int:
        return hash(Unavailable)

    def __reduce__(self):
        return (Unavailable, ())

    def __repr__(self) -> str:
        return "UNAVAILABLE"


UNAVAILABLE = Unavailable()

IndicatorValue = Union[Available, Unavailable]


def as_optional(value: IndicatorValue) -> Optional[float]:
    """Convert an indicator value to ``float`` or ``None``."""
    return value.value_or(None)
