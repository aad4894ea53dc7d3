"""Logging setup shared by test runs and helpers."""

import logging
from typing import Optional

from e2e.config import FrameworkConfig

STEP = 25
logging.addLevelName(STEP, "STEP")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def resolve_level(config: FrameworkConfig) -> int:
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if config.ci:
        level = max(level, logging.INFO)
    return level


def configure_logging(config: Optional[FrameworkConfig] = None) -> int:
    """Configure root logging for a test run and return the applied level."""
    config = config or FrameworkConfig()
    level = resolve_level(config)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, force=True)
    return level


def log_step(logger: logging.Logger, step_name: str, description: Optional[str] = None):
    """Log a test step marker at the STEP level."""
    msg = f"{step_name} - {description}" if description else step_name
    logger.log(STEP, msg)
