"""ssm: motor de máquina de estados finitos com hooks declarativos."""

from ssm.application import (
    StateMachine,
    build_config,
    new,
    with_after_callback,
    with_event_callbacks,
    with_events,
    with_initial,
    with_loops,
    with_state_callbacks,
)
from ssm.domain import (
    Callback,
    CallbackRegistry,
    EventCallbackDesc,
    EventDesc,
    HookKind,
    InvalidTransitionError,
    LoopDesc,
    MachineConfig,
    StateCallbackDesc,
    StateMachineError,
    TransitionTable,
)

__version__ = "0.1.0"

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
    "StateMachine",
    "StateMachineError",
    "TransitionTable",
    "build_config",
    "new",
    "with_after_callback",
    "with_event_callbacks",
    "with_events",
    "with_initial",
    "with_loops",
    "with_state_callbacks",
]
