"""
Verbosity-gated output streams for search diagnostics.

Callers write progress reports to ``std_cout(verbose)`` unconditionally;
when the verbose level is below the threshold the text goes to a shared
NullStream and is dropped.

Usage:
    print_title("Search", verbose)
    std_cout(verbose).write(f"best cost: {cost:.3f}\n")
"""

from __future__ import annotations

import io
import sys
import threading
from typing import ClassVar, Optional, TextIO

from autosched.utils.config import get_config
from autosched.utils.strings import chars


class NullStream(io.TextIOBase):
    """A text stream that discards everything written to it."""

    _instance: ClassVar[Optional["NullStream"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def global_instance(cls) -> "NullStream":
        """Return the process-wide NullStream, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def writable(self) -> bool:
        """Report that the stream accepts writes."""
        return True

    def write(self, s: str) -> int:
        """Discard ``s`` and report it as fully written."""
        return len(s)

    def flush(self) -> None:
        """Do nothing; no text is buffered."""
        pass

    def close(self) -> None:
        # Shared across callers; never closed.
        pass


def std_cout(verbose: int, setting: Optional[int] = None) -> TextIO:
    """
    Get standard output with verbose control.

    Args:
        verbose: The caller's verbose level
        setting: Minimum level required to print, defaults to the
            configured threshold (1)

    Returns:
        ``sys.stdout`` if ``verbose >= setting``, else the global NullStream
    """
    if setting is None:
        setting = get_config().default_threshold
    return sys.stdout if verbose >= setting else NullStream.global_instance()


def print_title(title: str, verbose: int) -> None:
    """Print a three-line title banner."""
    config = get_config()
    out = std_cout(verbose)
    out.write(
        chars("-", config.rule_width)
        + "\n"
        + chars("-", config.title_indent)
        + "  [ "
        + title
        + " ]\n"
        + chars("-", config.rule_width)
        + "\n"
    )
    out.flush()
