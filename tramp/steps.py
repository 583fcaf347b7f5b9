"""Step descriptor types shared by every trampoline driver.

This module provides:
- Base: terminal result
- Step: re-enter the driving generator with new arguments
- Call: resolve a nested step, then post-process its value
- Chain: jump to another step-producing entry point
- Cont: a reified continuation-accepting function
- Lower-case factories mirroring each variant
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")


# ============================================================================
# Variants
# ============================================================================


@dataclass(frozen=True)
class Base(Generic[T]):
    """Terminal result of a recursive computation."""

    value: T


@dataclass(frozen=True)
class Step:
    """Continue driving the generator with ``args``."""

    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Call:
    """Resolve ``nested`` to a value ``v``, then continue with ``fn(v)``.

    ``nested`` is itself a ``Step``, ``Base`` or ``Call``.
    """

    fn: Callable[[Any], Any]
    nested: StepValue


@dataclass(frozen=True)
class Chain:
    """Invoke ``fn(*args)`` to obtain the next step.

    ``fn`` is either a callable or a key into a chain table.
    """

    fn: Callable[..., Any] | Hashable
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Cont:
    """Wraps a function that accepts the rest of the computation."""

    k: Callable[[Callable[[Any], Any]], Any]


StepValue: TypeAlias = "Base[Any] | Step | Call | Chain"


# ============================================================================
# Factories
# ============================================================================


def base(value: T) -> Base[T]:
    return Base(value)


def step(*args: Any) -> Step:
    return Step(args)


def call(fn: Callable[[Any], Any], nested: StepValue) -> Call:
    return Call(fn, nested)


def chain(fn: Callable[..., Any] | Hashable, *args: Any) -> Chain:
    return Chain(fn, args)


def cont(k: Callable[[Callable[[Any], Any]], Any]) -> Cont:
    return Cont(k)


def is_step_value(value: Any) -> bool:
    """Return ``True`` when ``value`` is one of the step variants."""

    return isinstance(value, (Base, Step, Call, Chain, Cont))


__all__ = [
    "Base",
    "Call",
    "Chain",
    "Cont",
    "Step",
    "StepValue",
    "base",
    "call",
    "chain",
    "cont",
    "is_step_value",
    "step",
]
