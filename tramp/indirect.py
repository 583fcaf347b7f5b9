"""Trampoline for indirect and mutual recursion.

Independently defined entry points hand control to each other by returning
``Chain(fn, args)`` instead of calling ``fn(*args)`` directly. Targets are
callables, or keys resolved through a chain table:

    table = frozendict(even=is_even, odd=is_odd)

    def is_even(n):
        return Base(True) if n == 0 else Chain("odd", (n - 1,))

``compose_chain`` sequences a chained computation with a continuation without
running it, which makes it a bind operator over {Base, Chain}.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from tramp import config
from tramp.errors import MalformedStepError, UnknownChainTargetError
from tramp.steps import Base, Chain

log = logger.bind(component="chain")

_EXPECTED = ("Base", "Chain")

ChainTable = Mapping[Any, Callable[..., Any]]


def compose_chain(mx: Any, continuation: Callable[[Any], Any]) -> Any:
    """Sequence ``mx`` with ``continuation``.

    A ``Chain`` is wrapped in a new ``Chain`` whose evaluation is deferred until
    driven; a ``Base`` feeds its value to ``continuation`` immediately.
    Table-keyed targets stay keys and are resolved by the driver that runs
    the result.
    """
    match mx:
        case Chain(fn, args):
            return Chain(_ComposedLink(fn, args, continuation), ())
        case Base(value):
            return continuation(value)
        case _:
            raise MalformedStepError(mx, "chain", _EXPECTED)


class _ComposedLink:
    """Deferred ``compose_chain(Chain(fn, args), continuation)``.

    ``drive_chain`` never calls a link: it pushes ``continuation`` onto its own
    pending list and carries on with ``fn``/``args``.
    """

    __slots__ = ("fn", "args", "continuation")

    def __init__(self, fn: Any, args: tuple[Any, ...], continuation: Callable[[Any], Any]) -> None:
        self.fn = fn
        self.args = args
        self.continuation = continuation

    def __call__(self) -> Any:
        if isinstance(self.fn, _ComposedLink):
            inner = self.fn()
        else:
            inner = _resolve_target(self.fn, None)(*self.args)
        return compose_chain(inner, self.continuation)


def _resolve_target(fn: Any, table: ChainTable | None) -> Callable[..., Any]:
    if callable(fn):
        return fn
    if table is None or fn not in table:
        raise UnknownChainTargetError(fn)
    return table[fn]


def drive_chain(mx: Any, table: ChainTable | None = None) -> Any:
    """Drive an already built chain value until it reaches ``Base``.

    Continuations introduced by ``compose_chain`` are kept on an explicit
    pending list, so neither hop count nor composition depth grows the
    Python stack.
    """
    trace = config.settings.trace_steps

    pending: list[Callable[[Any], Any]] = []
    current = mx
    hops = 0
    while True:
        match current:
            case Chain(_ComposedLink() as link, _):
                pending.append(link.continuation)
                current = Chain(link.fn, link.args)
                continue
            case Chain(fn, args):
                if trace:
                    log.trace("hop {} -> {!r} pending={}", hops, fn, len(pending))
                current = _resolve_target(fn, table)(*args)
            case Base(value) if pending:
                current = pending.pop()(value)
            case Base(value):
                log.debug("done after {} hops", hops)
                return value
            case _:
                raise MalformedStepError(current, "chain", _EXPECTED)
        hops += 1


def run_chain(generator: Callable[..., Any], *args: Any, table: ChainTable | None = None) -> Any:
    """Drive ``generator(*args)`` through any number of ``Chain`` hops.

    Example:
        >>> def is_even(n):
        ...     return Base(True) if n == 0 else Chain(is_odd, (n - 1,))
        >>> def is_odd(n):
        ...     return Base(False) if n == 0 else Chain(is_even, (n - 1,))
        >>> run_chain(is_even, 10_000)
        True
    """
    log.debug("start {}", getattr(generator, "__qualname__", generator))
    return drive_chain(generator(*args), table)


__all__ = ["ChainTable", "compose_chain", "drive_chain", "run_chain"]
