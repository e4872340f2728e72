"""Erros do motor de estados."""

from __future__ import annotations

from typing import Any


class StateMachineError(Exception):
    """Erro base do pacote ssm."""

    pass


class InvalidTransitionError(StateMachineError):
    """Não existe transição para (event, estado corrente).

    Sempre terminal para a chamada: nenhum hook executado, nenhuma mutação.
    """

    def __init__(self, event: Any, from_state: Any) -> None:
        self.event = event
        self.from_state = from_state
        super().__init__(f"Invalid transition error [Event: {event}, From: {from_state}]")
