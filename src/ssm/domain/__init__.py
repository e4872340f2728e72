"""Domínio do motor: tipos, descritores, tabela de transições e hooks.

Exporta:
- HookKind: pontos de hook (before/after/enter/leave)
- EventDesc, LoopDesc, EventCallbackDesc, StateCallbackDesc, MachineConfig
- TransitionTable: tabela (event, from_state) → to_state
- CallbackRegistry: hooks por tipo + hook global
- StateMachineError, InvalidTransitionError
"""

from ssm.domain.callbacks import CallbackRegistry
from ssm.domain.descriptors import (
    EventCallbackDesc,
    EventDesc,
    LoopDesc,
    MachineConfig,
    StateCallbackDesc,
)
from ssm.domain.errors import InvalidTransitionError, StateMachineError
from ssm.domain.transitions import TransitionTable
from ssm.domain.types import Callback, HookKind

__all__ = [
    "Callback",
    "CallbackRegistry",
    "EventCallbackDesc",
    "EventDesc",
    "HookKind",
    "InvalidTransitionError",
    "LoopDesc",
    "MachineConfig",
    "StateCallbackDesc",
    "StateMachineError",
    "TransitionTable",
]
