"""Runtime settings read from the environment.

Enable driver logging by setting TRAMP_DEBUG:
    export TRAMP_DEBUG=1

Per-iteration trace records additionally require TRAMP_TRACE_STEPS=1.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes")


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    trace_steps: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    debug = _flag(environ, "TRAMP_DEBUG")
    return Settings(debug=debug, trace_steps=debug and _flag(environ, "TRAMP_TRACE_STEPS"))


settings = load_settings()


__all__ = ["Settings", "load_settings", "settings"]
