"""Trampoline error types."""

from __future__ import annotations

from typing import Any


class TrampolineError(Exception):
    """Base class for errors raised by the trampoline drivers."""


class MalformedStepError(TrampolineError, TypeError):
    """Raised when a generator returns a value the active driver cannot dispatch.

    Attributes:
        step: The offending value.
        driver: Name of the driver that received it.
        expected: Variant names the driver accepts.
    """

    def __init__(self, step: Any, driver: str, expected: tuple[str, ...]) -> None:
        self.step = step
        self.driver = driver
        self.expected = expected
        super().__init__(
            f"{driver} trampoline received {type(step).__name__} ({step!r}); "
            f"expected one of: {', '.join(expected)}"
        )


class PendingStackImbalanceError(TrampolineError, AssertionError):
    """Raised when the pending-operation stack underflows during ascent."""


class UnknownChainTargetError(TrampolineError, KeyError):
    """Raised when a Chain refers to a key missing from the chain table."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"Chain target not found: {key!r}\n"
            f"Hint: Pass a table containing {key!r} via `table=` or use a callable target"
        )


class MissingKeyError(KeyError):
    """Raised when a persistent map lookup finds no entry and no default was given."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"Key not found: {key!r}\n"
            f"Hint: Check with `has(m, {key!r})` first or pass `default=`"
        )


__all__ = [
    "MalformedStepError",
    "MissingKeyError",
    "PendingStackImbalanceError",
    "TrampolineError",
    "UnknownChainTargetError",
]
