"""Motor de estados e construtor por opções."""

from ssm.application.builder import (
    build_config,
    new,
    with_after_callback,
    with_event_callbacks,
    with_events,
    with_initial,
    with_loops,
    with_state_callbacks,
)
from ssm.application.engine import StateMachine

__all__ = [
    "StateMachine",
    "build_config",
    "new",
    "with_after_callback",
    "with_event_callbacks",
    "with_events",
    "with_initial",
    "with_loops",
    "with_state_callbacks",
]
