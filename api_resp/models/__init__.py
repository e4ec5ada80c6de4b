"""Public models for the envelope package."""

from api_resp.models.response import ApiResp

__all__ = [
    "ApiResp",
]
