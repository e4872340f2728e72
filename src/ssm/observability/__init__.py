"""Observabilidade: logging estruturado e correlation id."""

from ssm.observability.context import correlation_scope, get_correlation_id
from ssm.observability.logging import (
    CorrelationIdFilter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
]
