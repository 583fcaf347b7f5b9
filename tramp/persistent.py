"""Immutable key/value store used by code built on the trampolines.

Every update returns a new ``frozendict``; the previous version is left
untouched and shares its unaffected entries with the new one.

``MapConfig`` controls how keys and values are normalised on the way in:

    >>> ci = MapConfig(key_fn=str.lower)
    >>> m = assoc(empty(), ci, MapConfig(), "Depth", 3)
    >>> get(m, "depth")
    3
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from frozendict import frozendict

from tramp.errors import MissingKeyError

_MISSING: Any = object()


def _same(x: Any) -> Any:
    return x


@dataclass(frozen=True)
class MapConfig:
    """Normalisation applied by ``assoc``/``dissoc``/``update``.

    Attributes:
        key_fn: Maps a caller key to the stored key.
        value_fn: Maps a caller value to the stored value.
    """

    key_fn: Callable[[Hashable], Hashable] = _same
    value_fn: Callable[[Any], Any] = _same


DEFAULT_CONFIG = MapConfig()


def empty() -> frozendict:
    return frozendict()


def get(container: frozendict, key: Hashable, default: Any = _MISSING) -> Any:
    if key in container:
        return container[key]
    if default is _MISSING:
        raise MissingKeyError(key)
    return default


def has(container: frozendict, key: Hashable) -> bool:
    return key in container


def assoc(
    container: frozendict,
    key_config: MapConfig,
    value_config: MapConfig,
    key: Hashable,
    value: Any,
) -> frozendict:
    """Return a copy of ``container`` with ``key`` bound to ``value``."""
    return container.set(key_config.key_fn(key), value_config.value_fn(value))


def dissoc(container: frozendict, config: MapConfig, key: Hashable) -> frozendict:
    """Return a copy of ``container`` without ``key``; missing keys are a no-op."""
    stored = config.key_fn(key)
    if stored not in container:
        return container
    return container.delete(stored)


def update(
    container: frozendict,
    config: MapConfig,
    key: Hashable,
    fn: Callable[[Any], Any],
) -> frozendict:
    """Rebind ``key`` to ``fn(current)``; ``current`` is ``None`` when absent."""
    stored = config.key_fn(key)
    return container.set(stored, config.value_fn(fn(container.get(stored))))


__all__ = [
    "DEFAULT_CONFIG",
    "MapConfig",
    "assoc",
    "dissoc",
    "empty",
    "get",
    "has",
    "update",
]
