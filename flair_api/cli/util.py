"""
Utility functions for CLI argument parsing and graceful interrupt handling.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import signal
import sys
from typing import Any

CANCELLED_EXIT = 130  # POSIX: 128 + SIGINT (2)


def _print_cancelled(msg: str = "✖ Cancelled by user") -> None:
    """Print cancellation message to stderr."""
    sys.stderr.write("\n" + msg + "\n")
    sys.stderr.flush()


def graceful_main(fn: Callable[[list[str]], int], argv: list[str]) -> int:
    """
    Run fn(argv) and handle Ctrl-C/SIGTERM nicely.

    Returns:
        Exit code (130 for cancelled, or fn's return value)
    """

    # Handle SIGTERM like Ctrl-C
    def _term(_signum: int, _frame: Any) -> None:
        raise KeyboardInterrupt()

    old_term = signal.getsignal(signal.SIGTERM)
    signal.signal(signal.SIGTERM, _term)

    try:
        return int(fn(argv) or 0)
    except KeyboardInterrupt:
        _print_cancelled()
        return CANCELLED_EXIT
    finally:
        signal.signal(signal.SIGTERM, old_term)


def _coerce(raw: str) -> Any:
    # Numbers, booleans and null are read as JSON; anything else stays a string.
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parse_attributes(pairs: list[str] | None) -> dict[str, Any]:
    """``["percent-open=50", "name=Den"]`` -> ``{"percent-open": 50, "name": "Den"}``."""
    result: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        result[key] = _coerce(value)
    return result


def parse_relationships(pairs: list[str] | None) -> dict[str, Any]:
    """``["room=rooms:12"]`` -> ``{"room": {"id": "12", "type": "rooms"}}``.

    Repeating a name builds a to-many list.
    """
    result: dict[str, Any] = {}
    for pair in pairs or []:
        name, sep, ref = pair.partition("=")
        rtype, colon, rid = ref.partition(":")
        if not sep or not colon or not name or not rtype or not rid:
            raise ValueError(f"Expected name=type:id, got {pair!r}")
        reference = {"id": rid, "type": rtype}
        if name in result:
            existing = result[name]
            result[name] = (existing if isinstance(existing, list) else [existing]) + [reference]
        else:
            result[name] = reference
    return result
