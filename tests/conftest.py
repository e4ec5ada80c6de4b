"""Shared test fixtures for the envelope test suite."""

from __future__ import annotations

import pytest

from api_resp.config.settings import ApiRespSettings, get_settings


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------

_ENV_VARS = (
    "API_RESP_LOG_LEVEL",
    "API_RESP_LOG_JSON",
    "API_RESP_FALLBACK_ERROR_CODE",
)


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings and a fresh settings cache."""
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ApiRespSettings:
    return get_settings()
