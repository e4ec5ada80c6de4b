"""Configuration module."""

from api_resp.config.settings import ApiRespSettings, get_settings

__all__ = [
    "ApiRespSettings",
    "get_settings",
]
