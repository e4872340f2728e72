"""Motor FSM: tabela de transições + despacho de hooks.

Ordem de execução em ``event()`` para uma transição não-loop:
    BEFORE(event) → ENTER(dst) → LEAVE(current) → mutação → AFTER(event) → after global

- Loops (dst == current) executam só BEFORE/ENTER/LEAVE, sem mutação
- Exceções de hooks propagam sem encapsulamento e abortam a sequência
- Sem locks: uma instância por ator ou serialização externa
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from ssm.config.settings import Settings, get_settings
from ssm.domain.callbacks import CallbackRegistry
from ssm.domain.descriptors import MachineConfig
from ssm.domain.errors import InvalidTransitionError
from ssm.domain.transitions import TransitionTable
from ssm.domain.types import Callback, HookKind
from ssm.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class StateMachine:
    """Máquina de estados com hooks before/after/enter/leave."""

    def __init__(
        self,
        transitions: TransitionTable,
        callbacks: CallbackRegistry,
        initial: Hashable | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Sem ``settings``, usa ``get_settings()``, que lê as variáveis ``SSM_*``.

        Valor inválido no ambiente (ex.: ``SSM_LOG_DISPATCH=talvez``) levanta
        ``pydantic.ValidationError`` aqui, na construção. Passar ``settings``
        explícito dispensa a leitura do ambiente.
        """
        self._current = initial
        self._transitions = transitions
        self._callbacks = callbacks
        self._trace = (settings or get_settings()).log_dispatch

    @classmethod
    def from_config(cls, config: MachineConfig, settings: Settings | None = None) -> StateMachine:
        """Constrói tabela e registro uma única vez a partir do registro de configuração."""
        return cls(
            transitions=TransitionTable.from_descriptors(config.transitions),
            callbacks=CallbackRegistry.from_descriptors(
                config.callbacks, after=config.after_callback
            ),
            initial=config.initial,
            settings=settings,
        )

    @property
    def current(self) -> Hashable | None:
        """Estado corrente."""
        return self._current

    def set_current(self, state: Hashable) -> None:
        """Sobrescreve o estado corrente sem validação nem hooks."""
        self._current = state

    def event(self, event: Hashable, *args: Any, **kwargs: Any) -> None:
        """Dispara ``event`` a partir do estado corrente.

        Args:
            event: evento disparador
            *args, **kwargs: repassados sem alteração a cada hook

        Raises:
            InvalidTransitionError: sem entrada (event, current); nada executa
            Exception: a primeira exceção de hook, propagada sem alteração.
                Falha em BEFORE/ENTER/LEAVE preserva o estado anterior;
                falha em AFTER/after global ocorre com o estado já em ``dst``.
        """
        dst = self._pre_transition(event, args, kwargs)

        src = self._current
        if dst == src:
            return

        self._current = dst
        if self._trace:
            logger.debug(
                "FSM transition committed",
                extra={"event": event, "current_state": src, "next_state": dst},
            )

        self._run(HookKind.AFTER, self._callbacks.get(HookKind.AFTER, event), args, kwargs)
        self._run("after_any", self._callbacks.after, args, kwargs)

    def can(self, event: Hashable, *args: Any, **kwargs: Any) -> tuple[bool, Exception | None]:
        """Verifica se ``event`` é aceito a partir do estado corrente.

        Executa de fato os hooks BEFORE/ENTER/LEAVE (com seus side effects),
        mas nunca muda o estado nem chama AFTER/after global.

        Retorna:
        - (True, None): transição existe e os pré-hooks passaram
        - (False, erro): InvalidTransitionError ou exceção do pré-hook
        """
        try:
            self._pre_transition(event, args, kwargs)
        except Exception as exc:
            return False, exc
        return True, None

    def _pre_transition(
        self, event: Hashable, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Hashable:
        """Valida a chave e executa BEFORE → ENTER → LEAVE; retorna o destino."""
        current = self._current
        try:
            dst = self._transitions.resolve(event, current)
        except InvalidTransitionError:
            if self._trace:
                logger.debug(
                    "FSM transition invalid",
                    extra={"event": event, "current_state": current},
                )
            raise
        if self._trace:
            logger.debug(
                "FSM transition valid",
                extra={
                    "event": event,
                    "current_state": current,
                    "next_state": dst,
                    "loop": dst == current,
                },
            )

        self._run(HookKind.BEFORE, self._callbacks.get(HookKind.BEFORE, event), args, kwargs)
        self._run(HookKind.ENTER, self._callbacks.get(HookKind.ENTER, dst), args, kwargs)
        leave = self._callbacks.get(HookKind.LEAVE, self._current)
        self._run(HookKind.LEAVE, leave, args, kwargs)
        return dst

    def _run(
        self,
        hook: str,
        callback: Callback | None,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        if callback is None:
            return
        if self._trace:
            logger.debug("FSM hook", extra={"hook": str(hook), "current_state": self._current})
        callback(self._current, *args, **kwargs)
