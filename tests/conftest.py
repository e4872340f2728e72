from __future__ import annotations

import pytest

from ssm.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for var in ("SSM_LOG_LEVEL", "SSM_LOG_FORMAT", "SSM_LOG_DISPATCH", "SSM_ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
