"""Reification of deferred call trees.

Composing N functions into ``f1(f2(...fN(x)))`` and evaluating it natively
needs N Python frames. ``compk`` instead makes each composition link return a
flat ``Cont`` holding the rest of the work, and ``run_cont`` unwraps one link
per loop iteration.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any

from loguru import logger

from tramp import config
from tramp.steps import Base, Cont

log = logger.bind(component="continuation")


def identity(x: Any) -> Any:
    return x


def compk(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Cont]:
    """Compose ``f`` after ``g`` as a deferred link.

    ``compk(f, g)(x)`` returns ``Cont(lambda k: k(f(g(x))))``. When ``f`` is
    itself a ``compk`` link its result is another ``Cont``, which the driver
    unwraps on the next iteration.
    """

    def link(x: Any) -> Cont:
        return Cont(lambda k: k(f(g(x))))

    return link


def run_cont(value: Any) -> Any:
    """Unwrap ``Cont`` values until a final value appears.

    A ``Base`` final value is unwrapped; anything else is returned as is.
    """
    trace = config.settings.trace_steps

    iterations = 0
    while isinstance(value, Cont):
        if trace:
            log.trace("unwrap {}", iterations)
        value = value.k(identity)
        iterations += 1
    log.debug("done after {} unwraps", iterations)
    if isinstance(value, Base):
        return value.value
    return value


def trampoline_cont(fn: Callable[..., Any], *args: Any) -> Any:
    """Call ``fn(*args)`` and drive the result with ``run_cont``."""
    log.debug("start {}", getattr(fn, "__qualname__", fn))
    return run_cont(fn(*args))


def compose_all(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Reify ``fns[0] . fns[1] . ... . fns[-1]`` as a chain of ``compk`` links.

    The rightmost function is applied first. The result must be driven with
    ``run_cont`` (or called through ``trampoline_cont``).

    Example:
        >>> inc = lambda x: x + 1
        >>> trampoline_cont(compose_all(*[inc] * 100_000), 0)
        100000
    """
    if not fns:
        return identity
    return reduce(compk, fns[1:], fns[0])


__all__ = ["compk", "compose_all", "identity", "run_cont", "trampoline_cont"]
