"""
tramp - stack-safe trampolines for recursive step descriptors.

Recursive functions return step values instead of recursing natively, and an
iterative driver evaluates them:

- run_tail: plain tail recursion (Base / Step)
- run_modcons: tail recursion modulo constructor (Base / Step / Call)
- run_chain: indirect and mutual recursion (Base / Chain)
- run_cont: reified composition chains (Cont)

Example:
    >>> from tramp import Base, Step, run_tail
    >>>
    >>> def total(n, acc):
    ...     return Base(acc) if n == 0 else Step((n - 1, acc + n))
    >>> run_tail(total, 100_000, 0)
    5000050000
"""

from loguru import logger

from tramp.config import Settings, load_settings, settings
from tramp.steps import (
    Base,
    Call,
    Chain,
    Cont,
    Step,
    StepValue,
    base,
    call,
    chain,
    cont,
    is_step_value,
    step,
)
from tramp.errors import (
    MalformedStepError,
    MissingKeyError,
    PendingStackImbalanceError,
    TrampolineError,
    UnknownChainTargetError,
)
from tramp.tail import run_tail
from tramp.modcons import run_modcons
from tramp.indirect import ChainTable, compose_chain, drive_chain, run_chain
from tramp.continuation import compk, compose_all, identity, run_cont, trampoline_cont
from tramp.decorators import Trampolined, trampolined
from tramp.combinators import fold_left, fold_right, mutual

if settings.debug:
    logger.enable("tramp")
else:
    logger.disable("tramp")

__version__ = "0.1.0"

__all__ = [
    # Steps
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
    # Drivers
    "ChainTable",
    "compk",
    "compose_all",
    "compose_chain",
    "drive_chain",
    "identity",
    "run_chain",
    "run_cont",
    "run_modcons",
    "run_tail",
    "trampoline_cont",
    # Decorators and combinators
    "Trampolined",
    "fold_left",
    "fold_right",
    "mutual",
    "trampolined",
    # Errors
    "MalformedStepError",
    "MissingKeyError",
    "PendingStackImbalanceError",
    "TrampolineError",
    "UnknownChainTargetError",
    # Config
    "Settings",
    "load_settings",
    "settings",
]
