"""
Indicator Stream Example for Lean-Signals.

This example feeds a synthetic bar stream through SMA, EMA and RSI
indicators, then runs the same indicators over a pandas DataFrame.
"""

import math
from datetime import datetime, timedelta

import pandas as pd

from lean_signals.config import IndicatorSettings, configure_logging
from lean_signals.data import Bar, indicator_frame
from lean_signals.indicators import IndicatorConfig, create_indicator


def synthetic_bars(count: int = 60):
    """Generate a gently oscillating price series."""
    start = datetime(2024, 1, 2, 9, 30)
    bars = []
    for i in range(count):
        close = 100 + 5 * math.sin(i / 6) + i * 0.1
        bars.append(Bar(
            open=close - 0.2,
            high=close + 0.5,
            low=close - 0.5,
            close=close,
            volume=1000 + 10 * i,
            time=start + timedelta(minutes=i)
        ))
    return bars


def demonstrate_streaming(settings: IndicatorSettings):
    """Update indicators bar by bar and print crossovers."""
    print("Streaming indicators")

    fast = create_indicator(IndicatorConfig("sma_fast", "SMA", {'period': 5}), settings)
    slow = create_indicator(IndicatorConfig("sma_slow", "SMA", {'period': 20}), settings)
    rsi = create_indicator(IndicatorConfig("rsi_14", "RSI", {'period': 14}), settings)

    for bar in synthetic_bars():
        for indicator in (fast, slow, rsi):
            indicator.update(bar)

        if not (fast.is_ready() and slow.is_ready()):
            continue

        previous_fast, previous_slow = fast.get_value(1), slow.get_value(1)
        if not (previous_fast and previous_slow):
            continue

        crossed_up = fast.latest.unwrap() > slow.latest.unwrap() and previous_fast.unwrap() <= previous_slow.unwrap()
        if crossed_up:
            print(f"  {bar.time:%H:%M} bullish crossover, RSI={rsi.latest.value_or(float('nan')):.1f}")

    print(f"  Configs: {[indicator.get_config().to_dict() for indicator in (fast, slow, rsi)]}")


def demonstrate_frames(settings: IndicatorSettings):
    """Run indicators over a DataFrame."""
    print("DataFrame indicators")

    bars = synthetic_bars()
    df = pd.DataFrame([bar.to_dict() for bar in bars]).set_index('time')
    df.index = pd.to_datetime(df.index)

    configs = [
        IndicatorConfig("ema_12", "EMA", {'period': 12}),
        IndicatorConfig("rsi_14", "RSI", {'period': 14}),
    ]
    frame = indicator_frame([create_indicator(config, settings) for config in configs], df)
    print(frame.tail())


if __name__ == "__main__":
    settings = IndicatorSettings()
    configure_logging(settings.log_level)
    demonstrate_streaming(settings)
    demonstrate_frames(settings)
