"""
Output and logging configuration for the auto-scheduler utilities.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from autosched.utils.errors import ConfigError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """
    Settings for verbosity-gated diagnostic output.

    Attributes:
        default_threshold: Minimum verbose level at which output is shown
        rule_width: Width of the separator lines in a title banner
        title_indent: Number of dashes before the title label
    """

    default_threshold: int = 1
    rule_width: int = 60
    title_indent: int = 25

    def __post_init__(self) -> None:
        if self.rule_width < 0:
            raise ConfigError("must not be negative", "rule_width")
        if self.title_indent < 0:
            raise ConfigError("must not be negative", "title_indent")


_config = OutputConfig()


def get_config() -> OutputConfig:
    """Return the active output configuration."""
    return _config


def set_config(config: OutputConfig) -> OutputConfig:
    """Install a new output configuration and return the previous one."""
    global _config
    if not isinstance(config, OutputConfig):
        raise ConfigError(f"expected OutputConfig, got {type(config).__name__}")
    previous, _config = _config, config
    return previous


def verbose_to_log_level(verbose: int) -> int:
    """Map a search verbose level to a logging level."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbose: int = 1) -> logging.Logger:
    """
    Configure the ``autosched`` logger for a given verbose level.

    Installs a basic stderr handler if the root logger has none and
    returns the package logger.
    """
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logger = logging.getLogger("autosched")
    logger.setLevel(verbose_to_log_level(verbose))
    return logger
