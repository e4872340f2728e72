"""Testes para logging estruturado e correlation id."""

from __future__ import annotations

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from ssm.config.settings import Settings
from ssm.observability.context import _correlation_id, correlation_scope, get_correlation_id
from ssm.observability.logging import (
    CorrelationIdFilter,
    configure_logging,
    configure_logging_from_settings,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestCorrelationId:
    """correlation_id em contextvars."""

    def test_correlation_id_default_empty(self) -> None:
        """get_correlation_id deve retornar "" se não setado."""
        assert get_correlation_id() == ""

    def test_scope_sets_and_restores(self) -> None:
        """correlation_scope define o id no bloco e restaura na saída."""
        token = _correlation_id.set("outer")
        try:
            with correlation_scope("inner") as value:
                assert value == "inner"
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"
        finally:
            _correlation_id.reset(token)

    def test_scope_generates_id(self) -> None:
        """Sem id explícito, gera um uuid4."""
        with correlation_scope() as value:
            assert len(value) == 36
            assert get_correlation_id() == value

    def test_scope_restores_on_exception(self) -> None:
        """O id anterior volta mesmo com exceção no bloco."""
        with pytest.raises(RuntimeError):
            with correlation_scope("boom"):
                raise RuntimeError("x")
        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Filtro que injeta correlation_id/service."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("ssm", logging.INFO, __file__, 1, "msg", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_filter_injects_fields(self) -> None:
        """service e correlation_id do contexto são adicionados."""
        record = self._record()
        with correlation_scope("cid-1"):
            assert CorrelationIdFilter("svc").filter(record) is True

        assert record.correlation_id == "cid-1"  # type: ignore[attr-defined]
        assert record.service == "svc"  # type: ignore[attr-defined]

    def test_filter_stamps_environment(self) -> None:
        """environment é carimbado junto com service."""
        record = self._record()
        CorrelationIdFilter("svc", "production").filter(record)

        assert record.service == "svc"  # type: ignore[attr-defined]
        assert record.environment == "production"  # type: ignore[attr-defined]

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """correlation_id passado via extra tem precedência."""
        record = self._record(correlation_id="explicit")
        with correlation_scope("ctx"):
            CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == "explicit"  # type: ignore[attr-defined]


class TestConfigureLogging:
    """configure_logging instala um único handler no root."""

    def test_json_output(self, restore_root_logger, capsys) -> None:
        """Formato json renomeia levelname/name e inclui service."""
        configure_logging("INFO", "ssm-test")

        with correlation_scope("cid-json"):
            logging.getLogger("ssm.test").info("hello", extra={"event": "a-b"})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "ssm.test"
        assert payload["service"] == "ssm-test"
        assert payload["correlation_id"] == "cid-json"
        assert payload["event"] == "a-b"

    def test_text_output(self, restore_root_logger, capsys) -> None:
        """Formato text usa Formatter simples."""
        configure_logging("INFO", "ssm-test", log_format="text")

        logging.getLogger("ssm.test").warning("plain")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert "WARNING" in line
        assert "ssm-test" in line
        assert line.endswith("plain")

    def test_replaces_handlers(self, restore_root_logger) -> None:
        """Chamadas repetidas não acumulam handlers."""
        configure_logging("INFO", "a")
        configure_logging("DEBUG", "b")

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.DEBUG


class TestConfigureLoggingFromSettings:
    """configure_logging_from_settings usa nível, formato e ambiente de Settings."""

    def test_text_format_from_env(
        self, restore_root_logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """SSM_LOG_FORMAT=text instala Formatter simples, não JsonFormatter."""
        monkeypatch.setenv("SSM_LOG_FORMAT", "text")
        monkeypatch.setenv("SSM_LOG_LEVEL", "WARNING")

        configure_logging_from_settings()

        (handler,) = restore_root_logger.handlers
        assert not isinstance(handler.formatter, JsonFormatter)
        assert restore_root_logger.level == logging.WARNING

    def test_json_payload_carries_settings(self, restore_root_logger, capsys) -> None:
        """service_name e environment chegam ao payload JSON."""
        configure_logging_from_settings(Settings(service_name="fsm-api", environment="staging"))

        logging.getLogger("ssm.test").info("hello")

        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["service"] == "fsm-api"
        assert payload["environment"] == "staging"

    def test_invalid_config_raises(self, restore_root_logger) -> None:
        """Erros de validate_logging_config viram ValueError e o root não muda."""
        handlers = restore_root_logger.handlers[:]

        with pytest.raises(ValueError, match="SSM_LOG_FORMAT"):
            configure_logging_from_settings(Settings(log_format="xml"))

        assert restore_root_logger.handlers == handlers

    def test_debug_in_production_rejected(self, restore_root_logger) -> None:
        """DEBUG em produção é recusado."""
        with pytest.raises(ValueError, match="produção"):
            configure_logging_from_settings(
                Settings(environment="production", log_level="DEBUG")
            )
