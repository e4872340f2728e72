"""Configurações do motor via variáveis de ambiente.

Todas as variáveis usam o prefixo ``SSM_`` (ex.: ``SSM_LOG_LEVEL=DEBUG``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_FORMATS = frozenset({"json", "text"})
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="SSM_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "ssm"
    environment: str = "development"

    # Observabilidade
    log_level: str = "INFO"
    log_format: str = "json"  # json | text
    log_dispatch: bool = True  # Tracing DEBUG de event()/can() no motor

    def validate_logging_config(self) -> list[str]:
        """Valida nível e formato de log.

        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"SSM_LOG_LEVEL '{self.log_level}' inválido. "
                f"Valores válidos: {sorted(VALID_LOG_LEVELS)}"
            )
        if self.log_format.lower() not in VALID_LOG_FORMATS:
            errors.append("SSM_LOG_FORMAT inválido: use json | text")
        if self.is_production and self.log_level.upper() == "DEBUG":
            errors.append("SSM_LOG_LEVEL=DEBUG é proibido em produção")
        return errors

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
