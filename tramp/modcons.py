"""Trampoline for tail recursion modulo constructor (TRMC).

A generator may return ``Call(fn, nested)`` when its recursive result still
needs post-processing by ``fn``. The driver descends through ``nested`` while
pushing ``fn`` onto a pending stack, then ascends by popping the stack and
applying each function to the running result.

Unwind order is innermost first, so non-associative combinators see exactly
the order a native nested evaluation would produce:

    right fold of ``-`` over [1, 1, 1] from 0  ==  1 - (1 - (1 - 0))  ==  1

During ascent a function may return ``Base(value)`` to short-circuit: the
value is unwrapped and the remaining pending functions are discarded.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger

from tramp import config
from tramp.errors import MalformedStepError, PendingStackImbalanceError
from tramp.steps import Base, Call, Step

log = logger.bind(component="modcons")

_EXPECTED = ("Base", "Step", "Call")


def _descend(
    generator: Callable[..., Any],
    current: Any,
    pending: list[Callable[[Any], Any]],
    trace: bool,
) -> tuple[Any, int]:
    frames = 0
    while True:
        match current:
            case Call(fn, nested):
                pending.append(fn)
                frames += 1
                if trace:
                    log.trace("push depth={}", len(pending))
                current = nested
            case Step(step_args):
                current = generator(*step_args)
            case Base(value):
                return value, frames
            case _:
                raise MalformedStepError(current, "modcons", _EXPECTED)


def _ascend(result: Any, pending: list[Callable[[Any], Any]], frames: int, trace: bool) -> Any:
    for remaining in range(frames, 0, -1):
        if not pending:
            raise PendingStackImbalanceError(
                f"pending stack empty with {remaining} unresolved call frame(s)"
            )
        fn = pending.pop()
        result = fn(result)
        if trace:
            log.trace("pop depth={}", len(pending))
        if isinstance(result, Base):
            log.debug("short-circuit with {} pending function(s) discarded", len(pending))
            pending.clear()
            return result.value
    return result


def run_modcons(generator: Callable[..., Any], *args: Any) -> Any:
    """Drive a TRMC generator to completion.

    Example:
        >>> def build(n):
        ...     if n == 0:
        ...         return Base(())
        ...     return Call(lambda rest, n=n: (n, *rest), Step((n - 1,)))
        >>> run_modcons(build, 3)
        (3, 2, 1)
    """
    trace = config.settings.trace_steps
    log.debug("start {}", getattr(generator, "__qualname__", generator))

    pending: list[Callable[[Any], Any]] = []
    result, frames = _descend(generator, generator(*args), pending, trace)
    log.debug("descent finished with {} pending function(s)", frames)

    result = _ascend(result, pending, frames, trace)
    if pending:
        raise PendingStackImbalanceError(
            f"{len(pending)} pending function(s) left after {frames} call frame(s) unwound"
        )
    return result


__all__ = ["run_modcons"]
