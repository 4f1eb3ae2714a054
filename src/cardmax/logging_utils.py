"""Logging helpers for CardMax."""

import logging

from cardmax.config import Settings


def resolve_level(config: Settings) -> int:
    if config.log_level:
        level = logging.getLevelName(config.log_level.upper())
        if isinstance(level, int):
            return level
    return logging.INFO if config.environment.upper() == "PROD" else logging.DEBUG


def configure_logging(config: Settings) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return

    logging.basicConfig(
        level=resolve_level(config),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
