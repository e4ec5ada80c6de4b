"""Generic JSON envelope for remote and asynchronous call results."""

from api_resp.errors import ApiRespError, EnvelopeParseError
from api_resp.models.response import ApiResp
from api_resp.transform import json_result, resolve, to_json_str

__all__ = [
    "ApiResp",
    "ApiRespError",
    "EnvelopeParseError",
    "json_result",
    "resolve",
    "to_json_str",
]
