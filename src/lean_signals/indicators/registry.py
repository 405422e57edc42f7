"""
Indicator registry for Lean-Signals.

Maps indicator kinds ("SMA", "EMA", "RSI") to classes so callers can build
indicators from serialized ``IndicatorConfig`` data.
"""

import logging
from typing import Dict, List, Type

from .base_indicator import BaseIndicator
from .indicator_config import IndicatorConfig
from .moving_averages import ExponentialMovingAverage, SimpleMovingAverage
from .oscillators import RSI

logger = logging.getLogger(__name__)


class UnknownIndicatorError(KeyError):
    """Raised when a config names an indicator kind nobody registered."""

    def __init__(self, kind: str):
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown indicator type: {self.kind}"


class IndicatorRegistry:
    """Lookup table from indicator kind to indicator class."""

    def __init__(self):
        self._classes: Dict[str, Type[BaseIndicator]] = {}

    def register(self, kind: str, indicator_class: Type[BaseIndicator]):
        """Register an indicator class under ``kind`` (case-insensitive)."""
        key = kind.upper()
        if key in self._classes:
            logger.warning(f"Replacing indicator registration for {key}")
        self._classes[key] = indicator_class
        logger.debug(f"Registered indicator {key} -> {indicator_class.__name__}")

    def kinds(self) -> List[str]:
        return sorted(self._classes)

    def __contains__(self, kind: str) -> bool:
        return kind.upper() in self._classes

    def create(self, config: IndicatorConfig, settings=None) -> BaseIndicator:
        """Build an indicator from a configuration snapshot.

        Args:
            config (IndicatorConfig): Kind, name, source and parameters
            settings (Optional[IndicatorSettings]): Defaults for parameters
                the config leaves out

        Returns:
            BaseIndicator: A fresh indicator instance

        Raises:
            UnknownIndicatorError: If the kind is not registered
            ValueError: If the parameters are invalid
        """
        indicator_class = self._classes.get(config.kind.upper())
        if indicator_class is None:
            raise UnknownIndicatorError(config.kind)

        if settings is None:
            from ..config import IndicatorSettings
            settings = IndicatorSettings()

        parameters = dict(config.parameters)
        kwargs = {
            'source': config.source,
            'name': config.name,
            'max_history': parameters.pop('max_history', settings.max_history),
        }
        if issubclass(indicator_class, RSI):
            kwargs['saturation_value'] = parameters.pop('saturation_value', settings.rsi_saturation_value)

        if 'period' in parameters:
            kwargs['period'] = parameters.pop('period')
        if parameters:
            logger.warning(f"Ignoring unsupported parameters for {config.name}: {sorted(parameters)}")

        return indicator_class(**kwargs)


def _build_default_registry() -> IndicatorRegistry:
    registry = IndicatorRegistry()
    registry.register(SimpleMovingAverage.kind, SimpleMovingAverage)
    registry.register(ExponentialMovingAverage.kind, ExponentialMovingAverage)
    registry.register(RSI.kind, RSI)
    return registry


default_registry = _build_default_registry()


def create_indicator(config: IndicatorConfig, settings=None) -> BaseIndicator:
    """Build an indicator from ``config`` using the default registry."""
    return default_registry.create(config, settings)
