"""
Oscillator indicators for Lean-Signals.

This module provides the RSI oscillator.
"""

from typing import List, Optional

from .base_indicator import BaseIndicator
from .ring_buffer import RingBuffer
from .values import UNAVAILABLE, Available, IndicatorValue

DEFAULT_RSI_SATURATION = 100.0


class RSI(BaseIndicator):
    """Relative Strength Index (RSI) indicator.

    Uses simple averages of the last ``period`` gains and losses. When the
    average loss is zero the output is ``saturation_value`` (100 unless
    configured otherwise).
    """

    kind = "RSI"

    def __init__(self, period: int = 14, saturation_value: float = DEFAULT_RSI_SATURATION, **kwargs):
        """Initialize the RSI.

        Args:
            period (int): Number of price changes averaged
            saturation_value (float): Output when there are no losses in the window
            **kwargs: source, name and max_history, see BaseIndicator
        """
        super().__init__(period, **kwargs)
        self._saturation_value = float(saturation_value)
        self._gains: RingBuffer[float] = RingBuffer(self.period)
        self._losses: RingBuffer[float] = RingBuffer(self.period)
        self._previous_price: Optional[float] = None

    @property
    def saturation_value(self) -> float:
        return self._saturation_value

    def _calculate(self, value: float) -> IndicatorValue:
        if self._previous_price is None:
            self._previous_price = value
            return UNAVAILABLE

        change = value - self._previous_price
        self._gains.append(max(change, 0))
        self._losses.append(max(-change, 0))
        self._previous_price = value

        if not self._gains.is_full:
            return UNAVAILABLE

        avg_gain = sum(self._gains) / self.period
        avg_loss = sum(self._losses) / self.period

        if avg_loss == 0:
            return Available(self._saturation_value)

        rs = avg_gain / avg_loss
        return Available(100 - (100 / (1 + rs)))

    def is_ready(self) -> bool:
        return self._gains.is_full and self.get_value().is_available

    def _reset_state(self):
        self._gains.clear()
        self._losses.clear()
        self._previous_price = None

    def _parameters(self):
        parameters = super()._parameters()
        parameters['saturation_value'] = self._saturation_value
        return parameters

    def average_gain(self) -> IndicatorValue:
        """Mean gain over the window, UNAVAILABLE until warmed up."""
        if not self._gains.is_full:
            return UNAVAILABLE
        return Available(sum(self._gains) / self.period)

    def average_loss(self) -> IndicatorValue:
        """Mean loss over the window, UNAVAILABLE until warmed up."""
        if not self._losses.is_full:
            return UNAVAILABLE
        return Available(sum(self._losses) / self.period)

    def relative_strength(self) -> IndicatorValue:
        """Average gain over average loss.

        UNAVAILABLE until warmed up, and while the average loss is zero.
        """
        avg_gain = self.average_gain()
        avg_loss = self.average_loss()

        if not avg_gain or not avg_loss or avg_loss.value == 0:
            return UNAVAILABLE

        return Available(avg_gain.value / avg_loss.value)

    def get_gains(self) -> List[float]:
        return self._gains.to_list()

    def get_losses(self) -> List[float]:
        return self._losses.to_list()
