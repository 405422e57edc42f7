"""
Tests for the pandas adapters.
"""

import numpy as np
import pandas as pd
import pytest

from lean_signals.data.bars import Bar
from lean_signals.data.frames import bars_from_frame, run_indicator, indicator_frame
from lean_signals.indicators import SimpleMovingAverage, ExponentialMovingAverage, RSI


@pytest.fixture
def ohlcv_frame():
    """Four daily bars with closes 1 through 4."""
    closes = [1.0, 2.0, 3.0, 4.0]
    return pd.DataFrame({
        'Open': closes,
        'High': [c + 0.5 for c in closes],
        'Low': [c - 0.5 for c in closes],
        'Close': closes,
        'Volume': [100, 200, 300, 400],
    }, index=pd.date_range("2024-01-01", periods=4, freq="D"))


class TestBarsFromFrame:
    """Test cases for bars_from_frame."""

    def test_conversion(self, ohlcv_frame):
        """Test converting a frame into bars."""
        bars = bars_from_frame(ohlcv_frame)

        assert len(bars) == 4
        assert bars[0] == Bar(1.0, 1.5, 0.5, 1.0, 100.0, time=pd.Timestamp("2024-01-01").to_pydatetime())
        assert bars[-1].close == 4.0

    def test_missing_column(self, ohlcv_frame):
        """Test that missing OHLCV columns are reported."""
        with pytest.raises(ValueError, match="volume"):
            bars_from_frame(ohlcv_frame.drop(columns=['Volume']))

    def test_incomplete_rows_skipped(self, ohlcv_frame):
        """Test that rows with NaN are skipped."""
        ohlcv_frame.iloc[1, ohlcv_frame.columns.get_loc('Close')] = np.nan

        bars = bars_from_frame(ohlcv_frame)

        assert [bar.close for bar in bars] == [1.0, 3.0, 4.0]

    def test_plain_index(self, ohlcv_frame):
        """Test that a non-datetime index leaves bar time unset."""
        bars = bars_from_frame(ohlcv_frame.reset_index(drop=True))

        assert all(bar.time is None for bar in bars)


class TestRunIndicator:
    """Test cases for run_indicator and indicator_frame."""

    def test_run_indicator(self, ohlcv_frame):
        """Test collecting SMA outputs with NaN during warm-up."""
        series = run_indicator(SimpleMovingAverage(3), ohlcv_frame)

        assert series.name == "SMA"
        assert series.isna().tolist() == [True, True, False, False]
        assert series.iloc[2:].tolist() == [2.0, 3.0]
        assert series.index.equals(ohlcv_frame.index)

    def test_run_indicator_keeps_frame_index(self, ohlcv_frame):
        """Test that outputs align with a non-datetime frame index."""
        df = ohlcv_frame.iloc[:3].reset_index(drop=True)
        df.index = [10, 11, 12]

        series = run_indicator(SimpleMovingAverage(2), df)

        assert series.index.tolist() == [10, 11, 12]
        assert df.assign(sma=series)['sma'].tolist()[1:] == [1.5, 2.5]

    def test_run_indicator_skips_incomplete_rows_in_index(self, ohlcv_frame):
        """Test that skipped rows are left out of the output index."""
        df = ohlcv_frame.reset_index(drop=True)
        df.index = [10, 11, 12, 13]
        df.loc[11, 'Close'] = np.nan

        series = run_indicator(SimpleMovingAverage(2), df)

        assert series.index.tolist() == [10, 12, 13]
        assert series.tolist()[1:] == [2.0, 3.5]

    def test_indicator_frame_keeps_frame_index(self, ohlcv_frame):
        """Test that indicator_frame aligns with the frame index."""
        df = ohlcv_frame.reset_index(drop=True)
        df.index = [10, 11, 12, 13]

        frame = indicator_frame([SimpleMovingAverage(2)], df)

        assert frame.index.tolist() == [10, 11, 12, 13]
        assert df.join(frame)['SMA'].tolist()[1:] == [1.5, 2.5, 3.5]

    def test_run_indicator_on_bars(self):
        """Test feeding a plain list of bars."""
        series = run_indicator(ExponentialMovingAverage(2), [Bar.flat(10), Bar.flat(13)])

        assert series.iloc[0] == 10.0
        assert series.iloc[1] == pytest.approx(12.0)
        assert isinstance(series.index, pd.RangeIndex)

    def test_indicator_frame(self, ohlcv_frame):
        """Test running several indicators side by side."""
        frame = indicator_frame([SimpleMovingAverage(2), RSI(2)], ohlcv_frame)

        assert list(frame.columns) == ["SMA", "RSI"]
        assert frame["SMA"].tolist()[1:] == [1.5, 2.5, 3.5]
        assert frame["RSI"].tolist()[2:] == [100.0, 100.0]

    def test_indicator_frame_requires_unique_names(self, ohlcv_frame):
        """Test that duplicate column names are rejected."""
        with pytest.raises(ValueError):
            indicator_frame([SimpleMovingAverage(2), SimpleMovingAverage(3)], ohlcv_frame)

    def test_indicator_frame_empty(self, ohlcv_frame):
        """Test that no indicators yields an empty frame."""
        assert indicator_frame([], ohlcv_frame).empty
