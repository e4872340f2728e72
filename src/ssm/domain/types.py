"""Tipos básicos do motor de estados.

State e Event são valores opacos definidos pela aplicação hospedeira.
O motor só exige que sejam hashable e comparáveis por igualdade.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from enum import StrEnum
from typing import Any, TypeAlias

State: TypeAlias = Hashable
Event: TypeAlias = Hashable

Callback: TypeAlias = Callable[..., Any]
"""Hook chamado como ``callback(current, *args, **kwargs)``; falha = exceção."""


class HookKind(StrEnum):
    """Pontos do ciclo de transição onde um hook pode ser registrado."""

    BEFORE = "before"
    """Antes da transição; chaveado por Event."""

    AFTER = "after"
    """Depois da mutação de estado; chaveado por Event."""

    ENTER = "enter"
    """Ao entrar no estado destino; chaveado por State."""

    LEAVE = "leave"
    """Ao sair do estado corrente; chaveado por State."""


EVENT_HOOK_KINDS = frozenset({HookKind.BEFORE, HookKind.AFTER})
"""Hooks indexados por Event."""

STATE_HOOK_KINDS = frozenset({HookKind.ENTER, HookKind.LEAVE})
"""Hooks indexados por State."""
