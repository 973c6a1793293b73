"""
Error types and invariant checks for the auto-scheduler support layer.
"""

import logging
from typing import Any, NoReturn, Optional

logger = logging.getLogger(__name__)


class AutoSchedError(Exception):
    """Base exception for recoverable auto-scheduler errors."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        self.message = message
        self.field_name = field_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.field_name:
            return f"[{self.field_name}] {self.message}"
        return self.message


class ConfigError(AutoSchedError):
    """Raised when an output configuration value is invalid."""

    pass


class FatalError(BaseException):
    """
    Raised when an internal invariant is violated.

    This signals a bug in the caller, not a runtime condition. It derives
    from BaseException so that ``except Exception`` handlers in the search
    loop do not swallow it.

    Attributes:
        message: Description of the violated invariant
        context: Values that help locate the violation
    """

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.context = dict(context or {})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


def fatal(message: str, **context: Any) -> NoReturn:
    """Log an invariant violation and raise FatalError."""
    error = FatalError(message, context)
    logger.critical("%s", error)
    raise error


def check(condition: Any, message: str = "Check failed", **context: Any) -> None:
    """
    Assert an invariant that must hold regardless of optimization flags.

    Args:
        condition: Value that must be truthy
        message: Description of the invariant
        **context: Extra values reported alongside the message

    Raises:
        FatalError: If the condition is falsy
    """
    if not condition:
        fatal(message, **context)
