"""
Base indicator class for Lean-Signals.

This module defines the ``Indicator`` protocol every indicator satisfies and
``BaseIndicator``, which implements the shared history and configuration
handling on top of a per-indicator ``_calculate`` hook.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable

from ..data.bars import SourceField, extract_source_value
from .indicator_config import IndicatorConfig
from .ring_buffer import RingBuffer
from .values import UNAVAILABLE, IndicatorValue

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 1000


@runtime_checkable
class Indicator(Protocol):
    """Capability contract shared by all indicators."""

    @property
    def name(self) -> str:
        ...

    @property
    def kind(self) -> str:
        ...

    @property
    def period(self) -> int:
        ...

    @property
    def source(self) -> SourceField:
        ...

    def update(self, bar: Any) -> None:
        ...

    def get_value(self, offset: int = 0) -> IndicatorValue:
        ...

    def is_ready(self) -> bool:
        ...

    def reset(self) -> None:
        ...

    def get_config(self) -> IndicatorConfig:
        ...

    def get_history(self) -> List[IndicatorValue]:
        ...


def _require_positive_int(label: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{label} must be a positive integer, got {value!r}")
    return value


class BaseIndicator(ABC):
    """Base class for technical indicators with bounded output history."""

    kind: str = ""

    def __init__(self, period: int = 14,
                 source: Union[SourceField, str, None] = SourceField.CLOSE,
                 name: Optional[str] = None,
                 max_history: int = DEFAULT_MAX_HISTORY):
        """Initialize the base indicator.

        Args:
            period (int): The lookback period for the indicator
            source: Bar field to read, as a SourceField or its name
            name (Optional[str]): Display name, defaults to the indicator kind
            max_history (int): Number of past outputs to retain

        Raises:
            ValueError: If period or max_history is not a positive integer,
                or the source field is unknown
        """
        self._period = _require_positive_int("Period", period)
        self._max_history = _require_positive_int("max_history", max_history)
        self._source = SourceField.parse(source)
        self._name = name or self.kind
        self._history: RingBuffer[IndicatorValue] = RingBuffer(self._max_history)

        logger.debug(f"Created {self!r}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def period(self) -> int:
        return self._period

    @property
    def source(self) -> SourceField:
        return self._source

    @property
    def max_history(self) -> int:
        return self._max_history

    @property
    def latest(self) -> IndicatorValue:
        """The most recent output."""
        return self.get_value(0)

    def update(self, bar: Any) -> None:
        """Update the indicator with a new bar.

        Args:
            bar: Object exposing open, high, low, close and volume
        """
        source_value = extract_source_value(bar, self._source)
        self._history.append(self._calculate(source_value))

    def get_value(self, offset: int = 0) -> IndicatorValue:
        """Get an output by recency.

        Args:
            offset (int): Steps back from the most recent output (0 = latest)

        Returns:
            IndicatorValue: The stored output, or UNAVAILABLE if there is
            no such point
        """
        if offset < 0 or offset >= len(self._history):
            return UNAVAILABLE
        return self._history.recent(offset)

    def get_history(self) -> List[IndicatorValue]:
        """Get all retained outputs, oldest first."""
        return self._history.to_list()

    def get_config(self) -> IndicatorConfig:
        """Get a snapshot of the indicator configuration."""
        return IndicatorConfig(
            name=self._name,
            kind=self.kind,
            parameters=self._parameters(),
            source=self._source
        )

    def reset(self):
        """Reset the indicator to its state before the first update."""
        self._history.clear()
        self._reset_state()
        logger.debug(f"Reset {self._name}")

    @abstractmethod
    def is_ready(self) -> bool:
        """Whether the indicator has left its warm-up phase."""
        pass

    @abstractmethod
    def _calculate(self, value: float) -> IndicatorValue:
        """Advance the algorithm by one source value and return its output."""
        pass

    @abstractmethod
    def _reset_state(self):
        """Clear algorithm-private state."""
        pass

    def _parameters(self) -> Dict[str, Any]:
        return {'period': self._period}

    def __len__(self) -> int:
        return len(self._history)

    def __bool__(self) -> bool:
        # An indicator is truthy even with an empty history.
        return True

    def __getitem__(self, offset: int) -> IndicatorValue:
        return self.get_value(offset)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(name='{self._name}', period={self._period}, "
                f"source={self._source.value})")
