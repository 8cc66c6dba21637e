"""Severity-filtered message logging with a replaceable callback.

Messages are delivered to a single process-wide callback, but only when
their severity bit is enabled in the configured severity mask.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Callable, Optional


class Severity(enum.IntFlag):
    """Message severities; each is a single bit so they combine into masks."""

    DEBUG = 1 << 0
    VERBOSE = 1 << 1
    INFO = 1 << 2
    WARNING = 1 << 3
    ERROR = 1 << 4


DEFAULT_SEVERITY = Severity.ERROR | Severity.WARNING | Severity.INFO
"""Severity mask in effect until ``set_severity`` is called."""

Callback = Callable[[Severity, str], None]

# Label and whether the message goes to standard error.
_LABELS = {
    Severity.DEBUG: ("  DEBUG", False),
    Severity.VERBOSE: ("VERBOSE", False),
    Severity.INFO: ("   INFO", False),
    Severity.WARNING: ("WARNING", False),
    Severity.ERROR: ("  ERROR", True),
}


def default_callback(severity: Severity, message: str) -> None:
    """Print a message with its severity label.

    Errors go to standard error, everything else to standard output.
    Messages whose severity is not exactly one known level are dropped.
    """
    entry = _LABELS.get(severity)
    if entry is None:
        return
    label, to_stderr = entry
    stream = sys.stderr if to_stderr else sys.stdout
    print(f"{label}: {message}", file=stream)


@dataclass
class _Logger:
    severity: Severity
    callback: Optional[Callback]


_state = _Logger(severity=DEFAULT_SEVERITY, callback=default_callback)


def set_severity(severity: Severity) -> None:
    """Set the mask of severities that are delivered."""
    _state.severity = Severity(severity)


def set_callback(callback: Optional[Callback]) -> None:
    """Set the function that receives messages; ``None`` silences logging."""
    _state.callback = callback


def log(severity: Severity, message: str) -> None:
    """Deliver a message if its severity is enabled and a callback is set."""
    if not (_state.severity & severity) or _state.callback is None:
        return
    _state.callback(Severity(severity), message)