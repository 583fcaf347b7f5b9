"""
The trampolined decorator.

Turns a step-producing function into a callable that drives itself:

    @trampolined("tail")
    def count_down(n, acc=0):
        return Base(acc) if n == 0 else Step((n - 1, acc + n))

    count_down(1_000_000)  # no RecursionError

The undecorated function stays available as ``step_fn``. Generators that
refer to each other (``Chain`` targets, nested ``Step`` re-entry) must use
``step_fn`` rather than the driving wrapper.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Generic, Literal, TypeVar

from tramp.indirect import ChainTable, run_chain
from tramp.modcons import run_modcons
from tramp.tail import run_tail

T = TypeVar("T")

DriverName = Literal["tail", "modcons", "chain"]

_DRIVERS: dict[str, Callable[..., Any]] = {
    "tail": run_tail,
    "modcons": run_modcons,
    "chain": run_chain,
}


class Trampolined(Generic[T]):
    """Callable that runs ``step_fn`` under a fixed driver."""

    def __init__(
        self,
        step_fn: Callable[..., Any],
        driver: DriverName,
        table: ChainTable | None = None,
    ) -> None:
        if driver not in _DRIVERS:
            raise ValueError(
                f"Unknown driver {driver!r}; expected one of: {', '.join(_DRIVERS)}"
            )
        if table is not None and driver != "chain":
            raise ValueError(f"A chain table only applies to the chain driver, not {driver!r}")
        self.step_fn = step_fn
        self.driver = driver
        self.table = table
        self._run = _DRIVERS[driver]

        for attr in ("__doc__", "__module__", "__name__", "__qualname__", "__annotations__"):
            value = getattr(step_fn, attr, None)
            if value is not None:
                setattr(self, attr, value)

        try:
            signature = inspect.signature(step_fn)
        except (TypeError, ValueError):
            signature = None
        if signature is not None:
            self.__signature__ = signature

    def __call__(self, *args: Any) -> T:
        if self.table is not None:
            return run_chain(self.step_fn, *args, table=self.table)
        return self._run(self.step_fn, *args)

    def __repr__(self) -> str:
        return f"Trampolined({getattr(self.step_fn, '__qualname__', self.step_fn)!r}, driver={self.driver!r})"


def trampolined(
    driver: DriverName = "tail",
    *,
    table: ChainTable | None = None,
) -> Callable[[Callable[..., Any]], Trampolined[Any]]:
    """Decorator factory selecting which driver runs the decorated function.

    ``table`` resolves key-based ``Chain`` targets and requires ``driver="chain"``.
    """

    def decorator(step_fn: Callable[..., Any]) -> Trampolined[Any]:
        return Trampolined(step_fn, driver, table)

    return decorator


__all__ = ["DriverName", "Trampolined", "trampolined"]
