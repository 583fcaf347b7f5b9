"""
Pytest configuration for trampoline tests.

Provides a parameterized ``driver`` fixture so boundary and idempotence tests
run against all four drivers, plus a loguru capture fixture.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from loguru import logger

from tramp import config
from tramp.config import Settings
from tramp.continuation import trampoline_cont
from tramp.indirect import run_chain
from tramp.modcons import run_modcons
from tramp.tail import run_tail

Driver = Callable[..., Any]

_DRIVERS: dict[str, Driver] = {
    "tail": run_tail,
    "modcons": run_modcons,
    "chain": run_chain,
    "cont": trampoline_cont,
}


@pytest.fixture(params=sorted(_DRIVERS))
def driver(request: pytest.FixtureRequest) -> Driver:
    """
    Parameterized fixture providing every driver.

    Each driver is called as ``driver(generator, *args)``.
    """
    return _DRIVERS[request.param]


@pytest.fixture
def log_messages(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[str]]:
    """Capture tramp log records, including per-iteration traces."""
    monkeypatch.setattr(config, "settings", Settings(debug=True, trace_steps=True))
    messages: list[str] = []
    logger.enable("tramp")
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="TRACE")
    try:
        yield messages
    finally:
        logger.remove(sink_id)
        logger.disable("tramp")
