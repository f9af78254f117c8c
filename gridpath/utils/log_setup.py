"""Apply the ``logging`` section of the configuration."""

from __future__ import annotations

import logging

from ..config import CONFIG, LoggingConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: LoggingConfig = CONFIG.logging) -> None:
    """Set the root log level and any per-module overrides from ``settings``."""

    numeric_level = getattr(logging, settings.global_level.upper(), None)
    valid = isinstance(numeric_level, int)
    logging.basicConfig(level=numeric_level if valid else logging.INFO, format=LOG_FORMAT, force=True)
    if not valid:
        logger.warning("Invalid global log level '%s' in config; using INFO.", settings.global_level)

    for module_name, level_str in settings.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


__all__ = ["configure_logging", "LOG_FORMAT"]
