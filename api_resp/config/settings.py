"""Pydantic Settings for the envelope package.

All environment variables use the API_RESP_ prefix.
Example: API_RESP_LOG_LEVEL=DEBUG, API_RESP_FALLBACK_ERROR_CODE=-500
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class ApiRespSettings(BaseSettings):
    """Envelope package configuration validated from environment variables."""

    # Logging
    log_level: str = "INFO"
    log_json: bool = True  # JsonFormatter vs. plain text

    # Code used when an exception is mapped into an error envelope
    fallback_error_code: int = -1

    model_config = {"env_prefix": "API_RESP_"}

    @field_validator("fallback_error_code")
    @classmethod
    def _fallback_code_non_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("fallback_error_code must be non-zero, 0 means success")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> ApiRespSettings:
    return ApiRespSettings()
