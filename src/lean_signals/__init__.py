"""
Lean-Signals: streaming technical indicators for OHLCV bar feeds.

This package provides incremental SMA, EMA and RSI indicators with bounded
memory, suitable for long-running live feeds and backtests alike.
"""

__version__ = "0.1.0"
__author__ = "Lean-Signals Team"

from .config import IndicatorSettings, configure_logging
from .data import Bar, SourceField
from .indicators import (
    UNAVAILABLE, Available, IndicatorConfig, SimpleMovingAverage,
    ExponentialMovingAverage, RSI, create_indicator
)

__all__ = [
    "IndicatorSettings",
    "configure_logging",
    "Bar",
    "SourceField",
    "UNAVAILABLE",
    "Available",
    "IndicatorConfig",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "RSI",
    "create_indicator"
]
