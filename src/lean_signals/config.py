"""
Configuration management for Lean-Signals.

This module holds the runtime defaults applied when indicators are built
through the registry, plus the package logging setup.
"""

import logging
import os
from dataclasses import dataclass

from .indicators.base_indicator import DEFAULT_MAX_HISTORY
from .indicators.oscillators import DEFAULT_RSI_SATURATION

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class IndicatorSettings:
    """Runtime defaults for indicator construction."""

    max_history: int = DEFAULT_MAX_HISTORY
    rsi_saturation_value: float = DEFAULT_RSI_SATURATION
    log_level: str = "INFO"

    def __post_init__(self):
        """Load overrides from environment variables."""
        max_history = os.getenv("LEAN_SIGNALS_MAX_HISTORY")
        if max_history is not None:
            try:
                self.max_history = int(max_history)
            except ValueError:
                logger.warning(f"Ignoring non-integer LEAN_SIGNALS_MAX_HISTORY={max_history!r}")

        saturation = os.getenv("LEAN_SIGNALS_RSI_SATURATION")
        if saturation is not None:
            try:
                self.rsi_saturation_value = float(saturation)
            except ValueError:
                logger.warning(f"Ignoring non-numeric LEAN_SIGNALS_RSI_SATURATION={saturation!r}")

        self.log_level = os.getenv("LOG_LEVEL", self.log_level)

        logger.debug(f"Indicator settings loaded: max_history={self.max_history}, "
                     f"rsi_saturation_value={self.rsi_saturation_value}")

    def validate(self) -> bool:
        """Validate the settings."""
        if self.max_history <= 0:
            logger.error(f"max_history must be positive, got {self.max_history}")
            return False

        if not 0 <= self.rsi_saturation_value <= 100:
            logger.error(f"rsi_saturation_value must be within [0, 100], got {self.rsi_saturation_value}")
            return False

        if logging.getLevelName(self.log_level.upper()) not in (
                logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            logger.error(f"Unknown log level: {self.log_level}")
            return False

        return True


def configure_logging(level: str = "INFO"):
    """Configure root logging with the package's format."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
