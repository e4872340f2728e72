"""Tabela de transições do motor.

- TRANSITIONS[(event, from_state)] = to_state
- Loops são armazenados na mesma tabela com to_state == from_state
- Chave duplicada: vence a última registrada (sem erro)
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator

from ssm.domain.descriptors import EventDesc, LoopDesc
from ssm.domain.errors import InvalidTransitionError


class TransitionTable:
    """Mapeamento imutável (event, from_state) → to_state."""

    __slots__ = ("_table",)

    def __init__(self, table: dict[tuple[Hashable, Hashable], Hashable] | None = None) -> None:
        self._table = dict(table or {})

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[EventDesc | LoopDesc]) -> TransitionTable:
        """Expande descritores em entradas, na ordem recebida."""
        table: dict[tuple[Hashable, Hashable], Hashable] = {}
        for desc in descriptors:
            if isinstance(desc, LoopDesc):
                for stay in desc.stay:
                    table[(desc.event, stay)] = stay
            else:
                for src in desc.src:
                    table[(desc.event, src)] = desc.dst
        return cls(table)

    def resolve(self, event: Hashable, current: Hashable) -> Hashable:
        """Retorna o destino de ``event`` a partir de ``current``.

        Raises:
            InvalidTransitionError: se a chave não existe na tabela
        """
        key = (event, current)
        if key not in self._table:
            raise InvalidTransitionError(event=event, from_state=current)
        return self._table[key]

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[tuple[Hashable, Hashable]]:
        return iter(self._table)
