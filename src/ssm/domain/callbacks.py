"""Registro de hooks por tipo (BEFORE/AFTER por evento, ENTER/LEAVE por estado)."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from ssm.domain.descriptors import EventCallbackDesc, StateCallbackDesc
from ssm.domain.types import Callback, HookKind


class CallbackRegistry:
    """Quatro mapeamentos chave → callback mais o hook global ``after``.

    Ausência de entrada não é erro: significa apenas que a fase é pulada.
    """

    __slots__ = ("_hooks", "_after")

    def __init__(self, after: Callback | None = None) -> None:
        self._hooks: dict[HookKind, dict[Hashable, Callback]] = {kind: {} for kind in HookKind}
        self._after = after

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[EventCallbackDesc | StateCallbackDesc],
        after: Callback | None = None,
    ) -> CallbackRegistry:
        """Monta o registro; a mesma (kind, chave) registrada duas vezes sobrescreve."""
        registry = cls(after=after)
        for desc in descriptors:
            key = desc.event if isinstance(desc, EventCallbackDesc) else desc.state
            registry._hooks[desc.kind][key] = desc.callback
        return registry

    def get(self, kind: HookKind, key: Hashable) -> Callback | None:
        return self._hooks[kind].get(key)

    @property
    def after(self) -> Callback | None:
        """Hook global executado após toda transição não-loop bem-sucedida."""
        return self._after

    def count(self, kind: HookKind) -> int:
        return len(self._hooks[kind])
