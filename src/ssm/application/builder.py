"""Opções de configuração compostas funcionalmente.

Cada ``with_*`` retorna uma opção que altera um ``MachineConfig``; ``new``
aplica as opções na ordem recebida e só então constrói o motor.

Exemplo:
    machine = new(
        with_initial(State.A),
        with_events([(Event.A_TO_B, [State.A], State.B)]),
        with_loops([(Event.LOOP, [State.A, State.B])]),
    )
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from ssm.application.engine import StateMachine
from ssm.config.settings import Settings
from ssm.domain.descriptors import (
    EventCallbackDesc,
    EventDesc,
    LoopDesc,
    MachineConfig,
    StateCallbackDesc,
)
from ssm.domain.types import Callback

Option = Callable[[MachineConfig], None]


def with_initial(state: Hashable) -> Option:
    def option(config: MachineConfig) -> None:
        config.initial = state

    return option


def with_events(events: Iterable[Any]) -> Option:
    """Registra descritores (event, [src...], dst); aceita EventDesc, dict ou tupla."""
    descs = [EventDesc.coerce(item) for item in events]

    def option(config: MachineConfig) -> None:
        config.transitions.extend(descs)

    return option


def with_loops(loops: Iterable[Any]) -> Option:
    """Registra descritores (event, [stay...]) de transições loop."""
    descs = [LoopDesc.coerce(item) for item in loops]

    def option(config: MachineConfig) -> None:
        config.transitions.extend(descs)

    return option


def with_event_callbacks(callbacks: Iterable[Any]) -> Option:
    """Registra hooks (kind, event, callback) com kind em before|after."""
    descs = [EventCallbackDesc.coerce(item) for item in callbacks]

    def option(config: MachineConfig) -> None:
        config.callbacks.extend(descs)

    return option


def with_state_callbacks(callbacks: Iterable[Any]) -> Option:
    """Registra hooks (kind, state, callback) com kind em enter|leave."""
    descs = [StateCallbackDesc.coerce(item) for item in callbacks]

    def option(config: MachineConfig) -> None:
        config.callbacks.extend(descs)

    return option


def with_after_callback(callback: Callback) -> Option:
    def option(config: MachineConfig) -> None:
        config.after_callback = callback

    return option


def build_config(*options: Option) -> MachineConfig:
    """Aplica as opções sobre um ``MachineConfig`` vazio."""
    config = MachineConfig()
    for option in options:
        option(config)
    return config


def new(*options: Option, settings: Settings | None = None) -> StateMachine:
    """Constrói um ``StateMachine`` a partir das opções."""
    return StateMachine.from_config(build_config(*options), settings=settings)
