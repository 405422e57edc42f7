"""
Indicators package for Lean-Signals.

This package contains the streaming technical indicators, their result
type, configuration snapshots and the kind registry.
"""

from .values import Available, Unavailable, UNAVAILABLE, IndicatorValue, ValueUnavailableError, as_optional
from .ring_buffer import RingBuffer
from .indicator_config import IndicatorConfig
from .base_indicator import BaseIndicator, Indicator, DEFAULT_MAX_HISTORY
from .moving_averages import SimpleMovingAverage, ExponentialMovingAverage
from .oscillators import RSI, DEFAULT_RSI_SATURATION
from .registry import IndicatorRegistry, UnknownIndicatorError, default_registry, create_indicator

__all__ = [
    "Available",
    "Unavailable",
    "UNAVAILABLE",
    "IndicatorValue",
    "ValueUnavailableError",
    "as_optional",
    "RingBuffer",
    "IndicatorConfig",
    "BaseIndicator",
    "Indicator",
    "DEFAULT_MAX_HISTORY",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "RSI",
    "DEFAULT_RSI_SATURATION",
    "IndicatorRegistry",
    "UnknownIndicatorError",
    "default_registry",
    "create_indicator"
]
