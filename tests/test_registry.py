"""
Tests for the indicator registry.
"""

import os
from unittest.mock import patch

import pytest

from lean_signals.config import IndicatorSettings
from lean_signals.data.bars import SourceField
from lean_signals.indicators import (
    IndicatorConfig, IndicatorRegistry, UnknownIndicatorError, SimpleMovingAverage,
    ExponentialMovingAverage, RSI, create_indicator, default_registry
)


@patch.dict(os.environ, {}, clear=True)
class TestIndicatorRegistry:
    """Test cases for IndicatorRegistry."""

    def test_default_kinds(self):
        """Test the kinds registered by default."""
        assert default_registry.kinds() == ["EMA", "RSI", "SMA"]
        assert "sma" in default_registry

    def test_create_from_config(self):
        """Test building an indicator from a config."""
        config = IndicatorConfig("sma_fast", "sma", {'period': 3}, SourceField.HIGH)

        indicator = create_indicator(config, IndicatorSettings())

        assert isinstance(indicator, SimpleMovingAverage)
        assert indicator.name == "sma_fast"
        assert indicator.period == 3
        assert indicator.source == SourceField.HIGH

    def test_round_trip_through_config(self):
        """Test that a created indicator reports the config it came from."""
        config = IndicatorConfig("ema_12", "EMA", {'period': 12})

        indicator = create_indicator(config, IndicatorSettings())

        assert isinstance(indicator, ExponentialMovingAverage)
        assert indicator.get_config() == config

    def test_settings_defaults(self):
        """Test that settings supply parameters the config leaves out."""
        settings = IndicatorSettings(max_history=10, rsi_saturation_value=90.0)
        config = IndicatorConfig("rsi", "RSI", {'period': 2})

        rsi = create_indicator(config, settings)

        assert isinstance(rsi, RSI)
        assert rsi.max_history == 10
        assert rsi.saturation_value == 90.0

    def test_config_overrides_settings(self):
        """Test that explicit parameters win over settings."""
        settings = IndicatorSettings(max_history=10, rsi_saturation_value=90.0)
        config = IndicatorConfig("rsi", "RSI", {'period': 2, 'max_history': 3, 'saturation_value': 80.0})

        rsi = create_indicator(config, settings)

        assert rsi.max_history == 3
        assert rsi.saturation_value == 80.0

    def test_unknown_kind(self):
        """Test that unknown kinds raise a clear error."""
        config = IndicatorConfig("boll", "BOLLINGER", {'period': 20})

        with pytest.raises(UnknownIndicatorError) as exc_info:
            create_indicator(config)

        assert str(exc_info.value) == "Unknown indicator type: BOLLINGER"
        assert isinstance(exc_info.value, KeyError)

    def test_invalid_period(self):
        """Test that invalid parameters surface as ValueError."""
        config = IndicatorConfig("sma", "SMA", {'period': 0})

        with pytest.raises(ValueError):
            create_indicator(config)

    def test_custom_registry(self):
        """Test registering a custom kind."""
        class FastSMA(SimpleMovingAverage):
            kind = "FAST_SMA"

        registry = IndicatorRegistry()
        registry.register("fast_sma", FastSMA)

        indicator = registry.create(IndicatorConfig("f", "FAST_SMA", {'period': 2}), IndicatorSettings())

        assert isinstance(indicator, FastSMA)
        assert registry.kinds() == ["FAST_SMA"]
        assert "SMA" not in registry
