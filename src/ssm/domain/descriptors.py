"""Descritores declarativos de transições e hooks (contratos de configuração)."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ssm.domain.types import EVENT_HOOK_KINDS, STATE_HOOK_KINDS, Callback, HookKind


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def coerce(cls, item: Any) -> Any:
        """Aceita instância, mapping ou tupla posicional na ordem dos campos."""
        if isinstance(item, cls):
            return item
        if isinstance(item, Mapping):
            return cls.model_validate(item)
        if isinstance(item, tuple | list):
            return cls.model_validate(dict(zip(cls.model_fields, item, strict=True)))
        raise TypeError(f"{cls.__name__} inválido: {item!r}")


class EventDesc(_Descriptor):
    """Evento que leva de qualquer estado em ``src`` para ``dst``."""

    event: Hashable
    src: list[Hashable] = Field(default_factory=list)
    dst: Hashable


class LoopDesc(_Descriptor):
    """Evento que mantém a máquina em cada estado de ``stay``."""

    event: Hashable
    stay: list[Hashable] = Field(default_factory=list)


class EventCallbackDesc(_Descriptor):
    """Hook BEFORE/AFTER associado a um evento."""

    kind: HookKind
    event: Hashable
    callback: Callback

    @field_validator("kind")
    @classmethod
    def _event_kind(cls, value: HookKind) -> HookKind:
        if value not in EVENT_HOOK_KINDS:
            raise ValueError(f"hook de evento deve ser before|after, recebido {value}")
        return value


class StateCallbackDesc(_Descriptor):
    """Hook ENTER/LEAVE associado a um estado."""

    kind: HookKind
    state: Hashable
    callback: Callback

    @field_validator("kind")
    @classmethod
    def _state_kind(cls, value: HookKind) -> HookKind:
        if value not in STATE_HOOK_KINDS:
            raise ValueError(f"hook de estado deve ser enter|leave, recebido {value}")
        return value


class MachineConfig(BaseModel):
    """Registro explícito de configuração, montado antes de construir o motor.

    As listas preservam a ordem de registro: entre descritores com a mesma
    chave (event, estado), vence o último registrado.
    """

    initial: Hashable | None = None
    transitions: list[EventDesc | LoopDesc] = Field(default_factory=list)
    callbacks: list[EventCallbackDesc | StateCallbackDesc] = Field(default_factory=list)
    after_callback: Callback | None = None
