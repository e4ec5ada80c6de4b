"""Error hierarchy for the envelope package.

All package-specific errors extend ApiRespError. Nothing here is caught inside
the package; callers decide whether to map them into an ``ApiResp.error``.
"""

from __future__ import annotations


class ApiRespError(Exception):
    """Base error for all envelope errors."""

    message: str = "Response envelope error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class EnvelopeParseError(ApiRespError):
    """Input is not valid JSON or does not match the envelope schema."""

    message = "Malformed response envelope"
