"""Configuração de logging estruturado (JSON)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from ssm.config.settings import Settings, get_settings
from ssm.observability.context import get_correlation_id

_JSON_FIELDS = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "%(correlation_id)s %(service)s %(environment)s"
)
_TEXT_FIELDS = (
    "%(asctime)s %(levelname)s %(name)s "
    "[%(correlation_id)s %(service)s/%(environment)s] %(message)s"
)


class CorrelationIdFilter(logging.Filter):
    """Carimba correlation_id, service e environment em cada record do motor.

    Importante: nunca adicionar argumentos de callbacks nos logs.
    """

    def __init__(self, service_name: str, environment: str = "development") -> None:
        super().__init__()
        self._stamp = {"service": service_name, "environment": environment}

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        # correlation_id explícito via `extra` tem precedência sobre o contexto
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id()
        for key, value in self._stamp.items():
            setattr(record, key, value)
        return True


def configure_logging(
    level: str,
    service_name: str,
    log_format: str = "json",
    environment: str = "development",
) -> None:
    """Configura o root logger com campos padrão (json ou text)."""

    formatter: logging.Formatter
    if log_format.lower() == "text":
        formatter = logging.Formatter(_TEXT_FIELDS)
    else:
        formatter = JsonFormatter(
            _JSON_FIELDS,
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler = logging.StreamHandler()
    handler.setLevel(level.upper())
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, environment))

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers = [handler]


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configura logging a partir de Settings (padrão: ``get_settings()``).

    Raises:
        ValueError: se ``validate_logging_config()`` reportar erros
    """
    settings = settings or get_settings()
    errors = settings.validate_logging_config()
    if errors:
        raise ValueError("; ".join(errors))

    configure_logging(
        settings.log_level,
        settings.service_name,
        log_format=settings.log_format,
        environment=settings.environment,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service/environment/correlation_id."""

    return logging.getLogger(name)
