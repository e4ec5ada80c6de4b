"""Generic call-result envelope model.

Every remote or asynchronous call result is wrapped in this envelope:
{ success: bool, code: int, message: str, data: Any | None }

``code`` is ``0`` on success and a caller-defined non-zero value on failure.
The pairing is a convention only; constructors do not enforce it.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic import ValidationError as PydanticValidationError

from api_resp.errors import EnvelopeParseError

# How much of a rejected payload is kept on the parse error
_PREVIEW_CHARS = 200


class ApiResp(BaseModel):
    """JSON envelope for the outcome of one call.

    The business payload is stored on ``payload`` (wire name ``data``) and
    handed out as a deep copy through ``data`` and ``get_data()``, so nested
    objects cannot be changed after construction. Envelopes holding an object
    or array payload are not hashable.
    """

    success: bool = Field(strict=True)
    code: int = Field(strict=True)
    message: str = Field(default="", strict=True)
    payload: JsonValue = Field(default=None, alias="data")

    model_config = ConfigDict(frozen=True, extra="ignore")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def ok(cls) -> ApiResp:
        """Successful result with no payload."""
        return cls(success=True, code=0, message="", data=None)

    @classmethod
    def ok_with_data(cls, value: JsonValue) -> ApiResp:
        """Successful result carrying ``value`` as business data.

        ``value`` may be any JSON value (object, array, scalar or None); its
        shape is not inspected.
        """
        return cls(success=True, code=0, message="", data=value)

    @classmethod
    def error(cls, code: int, message: str) -> ApiResp:
        """Failed result. ``code`` is agreed per business interface."""
        return cls(success=False, code=code, message=message, data=None)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def is_success(self) -> bool:
        return self.success

    def get_code(self) -> int:
        return self.code

    def get_message(self) -> str:
        return self.message

    @property
    def data(self) -> JsonValue:
        return copy.deepcopy(self.payload)

    def get_data(self) -> JsonValue:
        return self.data

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        """Compact JSON in fixed field order; ``data`` is ``null`` when absent."""
        return self.model_dump_json(by_alias=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_json(cls, text: str | bytes) -> ApiResp:
        """Parse an envelope string.

        Unknown fields are ignored, a missing ``message`` becomes ``""`` and a
        missing ``data`` becomes None. Raises EnvelopeParseError on malformed
        JSON or a payload that does not match the envelope schema.
        """
        try:
            return cls.model_validate_json(text)
        except PydanticValidationError as exc:
            raise _parse_error(exc, text) from exc

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> ApiResp:
        """Build an envelope from already-decoded JSON."""
        try:
            return cls.model_validate(obj)
        except PydanticValidationError as exc:
            raise _parse_error(exc, obj) from exc


def _parse_error(exc: PydanticValidationError, raw: object) -> EnvelopeParseError:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return EnvelopeParseError(
        f"Malformed response envelope: {exc.error_count()} error(s)",
        input_preview=str(raw)[:_PREVIEW_CHARS],
        errors=exc.errors(include_url=False, include_context=False),
    )
