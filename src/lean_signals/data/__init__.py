"""
Data package for Lean-Signals.

This package holds the OHLCV bar record, source-field extraction and
pandas adapters.
"""

from .bars import Bar, SourceField, extract_source_value
from .frames import bars_from_frame, run_indicator, indicator_frame

__all__ = [
    "Bar",
    "SourceField",
    "extract_source_value",
    "bars_from_frame",
    "run_indicator",
    "indicator_frame"
]
