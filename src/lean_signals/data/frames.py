"""
pandas adapters for Lean-Signals.

Helpers for feeding OHLCV DataFrames through indicators and collecting the
outputs as Series/DataFrames, with NaN standing in for unavailable values.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .bars import Bar, SourceField

logger = logging.getLogger(__name__)

OHLCV_COLUMNS = [field.value for field in SourceField]


def _resolve_columns(df: pd.DataFrame) -> dict:
    lookup = {str(column).lower(): column for column in df.columns}
    missing = [name for name in OHLCV_COLUMNS if name not in lookup]
    if missing:
        raise ValueError(f"DataFrame is missing OHLCV columns: {missing}")
    return {name: lookup[name] for name in OHLCV_COLUMNS}


def bars_from_frame(df: pd.DataFrame) -> List[Bar]:
    """Convert an OHLCV DataFrame into bars.

    Column names are matched case-insensitively. A datetime-like index is
    carried over as each bar's time. Rows with missing values are skipped.

    Args:
        df (pd.DataFrame): Frame with open, high, low, close and volume columns

    Returns:
        List[Bar]: One bar per complete row, in frame order

    Raises:
        ValueError: If a required column is missing
    """
    bars, _ = _frame_bars(df)
    return bars


def _frame_bars(df: pd.DataFrame) -> Tuple[List[Bar], pd.Index]:
    """Convert ``df`` into bars plus the index labels of the rows kept."""
    columns = _resolve_columns(df)
    with_time = isinstance(df.index, pd.DatetimeIndex)

    bars = []
    kept = []
    for position, (index, row) in enumerate(df.iterrows()):
        values = {name: row[column] for name, column in columns.items()}
        if any(pd.isna(value) for value in values.values()):
            continue

        kept.append(position)
        bars.append(Bar(
            open=float(values['open']),
            high=float(values['high']),
            low=float(values['low']),
            close=float(values['close']),
            volume=float(values['volume']),
            time=index.to_pydatetime() if with_time else None
        ))

    skipped = len(df) - len(kept)
    if skipped:
        logger.warning(f"Skipped {skipped} incomplete OHLCV rows")

    return bars, df.index.take(kept)


def _as_bars(data: Union[pd.DataFrame, Iterable[Any]]) -> Tuple[Sequence[Any], Optional[pd.Index]]:
    """Resolve ``data`` to bars and the index their outputs should carry.

    A DataFrame keeps its own index (minus skipped rows). Plain bars get a
    DatetimeIndex when every bar has a time, otherwise None.
    """
    if isinstance(data, pd.DataFrame):
        return _frame_bars(data)

    bars = list(data)
    times = [getattr(bar, 'time', None) for bar in bars]
    index = pd.DatetimeIndex(times) if times and all(times) else None
    return bars, index


def _collect(indicator, bars: Sequence[Any], index: Optional[pd.Index]) -> pd.Series:
    outputs = []
    for bar in bars:
        indicator.update(bar)
        outputs.append(indicator.get_value().value_or(np.nan))

    return pd.Series(outputs, index=index, name=indicator.name, dtype=float)


def run_indicator(indicator, data: Union[pd.DataFrame, Iterable[Any]]) -> pd.Series:
    """Feed every bar through ``indicator`` and collect its outputs.

    Args:
        indicator: Any object satisfying the Indicator protocol
        data: An OHLCV DataFrame or an iterable of bars

    Returns:
        pd.Series: One output per bar, NaN where unavailable. For a
        DataFrame the Series is aligned to the frame's index.
    """
    bars, index = _as_bars(data)
    return _collect(indicator, bars, index)


def indicator_frame(indicators: Sequence[Any], data: Union[pd.DataFrame, Iterable[Any]]) -> pd.DataFrame:
    """Run several indicators over the same bars.

    Returns:
        pd.DataFrame: One column per indicator, keyed by indicator name
    """
    bars, index = _as_bars(data)
    if not indicators:
        return pd.DataFrame()

    names = [indicator.name for indicator in indicators]
    if len(set(names)) != len(names):
        raise ValueError(f"Indicator names must be unique, got {names}")

    return pd.concat([_collect(indicator, bars, index) for indicator in indicators], axis=1)
