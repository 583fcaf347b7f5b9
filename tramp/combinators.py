"""Folds and composition built on the trampolines."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from frozendict import frozendict

from tramp.continuation import compose_all
from tramp.modcons import run_modcons
from tramp.steps import Base, Call, Step
from tramp.tail import run_tail

T = TypeVar("T")
A = TypeVar("A")


def fold_left(f: Callable[[A, T], A], init: A, items: Sequence[T]) -> A:
    """``f(...f(f(init, items[0]), items[1])..., items[-1])``."""

    def go(i: int, acc: A) -> Any:
        if i == len(items):
            return Base(acc)
        return Step((i + 1, f(acc, items[i])))

    return run_tail(go, 0, init)


def fold_right(f: Callable[[T, A], A], init: A, items: Sequence[T]) -> A:
    """``f(items[0], f(items[1], ...f(items[-1], init)...))``."""

    def go(i: int) -> Any:
        if i == len(items):
            return Base(init)
        item = items[i]
        return Call(lambda acc: f(item, acc), Step((i + 1,)))

    return run_modcons(go, 0)


def mutual(**entries: Callable[..., Any]) -> frozendict:
    """Build an immutable chain table from named step functions."""
    return frozendict(entries)


__all__ = ["compose_all", "fold_left", "fold_right", "mutual"]
