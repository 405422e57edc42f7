"""
Moving average indicators for Lean-Signals.

This module provides simple and exponential moving average indicators.
"""

from typing import List, Optional

from .base_indicator import BaseIndicator
from .ring_buffer import RingBuffer
from .values import UNAVAILABLE, Available, IndicatorValue


class SimpleMovingAverage(BaseIndicator):
    """Simple Moving Average (SMA) indicator."""

    kind = "SMA"

    def __init__(self, period: int = 14, **kwargs):
        """Initialize the SMA.

        Args:
            period (int): Number of samples averaged
            **kwargs: source, name and max_history, see BaseIndicator
        """
        super().__init__(period, **kwargs)
        self._prices: RingBuffer[float] = RingBuffer(self.period)

    def _calculate(self, value: float) -> IndicatorValue:
        self._prices.append(value)

        if not self._prices.is_full:
            return UNAVAILABLE

        return Available(sum(self._prices) / self.period)

    def is_ready(self) -> bool:
        return self._prices.is_full and self.get_value().is_available

    def _reset_state(self):
        self._prices.clear()

    def get_prices(self) -> List[float]:
        """Get the current price window, oldest first."""
        return self._prices.to_list()


class ExponentialMovingAverage(BaseIndicator):
    """Exponential Moving Average (EMA) indicator.

    The first update seeds the average with the raw value, so the EMA is
    ready immediately.
    """

    kind = "EMA"

    def __init__(self, period: int = 14, **kwargs):
        """Initialize the EMA.

        Args:
            period (int): Smoothing horizon
            **kwargs: source, name and max_history, see BaseIndicator
        """
        super().__init__(period, **kwargs)
        self._smoothing_factor = 2.0 / (self.period + 1)
        self._previous_ema: Optional[float] = None

    @property
    def smoothing_factor(self) -> float:
        return self._smoothing_factor

    @property
    def previous_ema(self) -> IndicatorValue:
        if self._previous_ema is None:
            return UNAVAILABLE
        return Available(self._previous_ema)

    def _calculate(self, value: float) -> IndicatorValue:
        if self._previous_ema is None:
            self._previous_ema = value
        else:
            self._previous_ema = (value * self._smoothing_factor) + (self._previous_ema * (1 - self._smoothing_factor))

        return Available(self._previous_ema)

    def is_ready(self) -> bool:
        return self._previous_ema is not None

    def _reset_state(self):
        self._previous_ema = None
