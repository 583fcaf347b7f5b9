"""Trampoline for plain tail recursion.

The generator returns ``Step(args)`` where it would otherwise make a tail call
and ``Base(value)`` when it is done. Native call depth stays constant no matter
how many steps are taken.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger

from tramp import config
from tramp.errors import MalformedStepError
from tramp.steps import Base, Step

log = logger.bind(component="tail")

_EXPECTED = ("Base", "Step")


def run_tail(generator: Callable[..., Any], *args: Any) -> Any:
    """Drive ``generator(*args)`` until it produces a ``Base``.

    Example:
        >>> def count_down(n, acc):
        ...     return Base(acc) if n == 0 else Step((n - 1, acc + n))
        >>> run_tail(count_down, 100_000, 0)
        5000050000
    """
    trace = config.settings.trace_steps
    log.debug("start {}", getattr(generator, "__qualname__", generator))

    current = generator(*args)
    iterations = 0
    while True:
        match current:
            case Step(step_args):
                if trace:
                    log.trace("step {} args={!r}", iterations, step_args)
                iterations += 1
                current = generator(*step_args)
            case Base(value):
                log.debug("done after {} steps", iterations)
                return value
            case _:
                raise MalformedStepError(current, "tail", _EXPECTED)


__all__ = ["run_tail"]
