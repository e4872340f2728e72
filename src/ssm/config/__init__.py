"""Configurações centralizadas do ssm.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única

Uso típico:
    from ssm.config import get_settings
"""

from ssm.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
