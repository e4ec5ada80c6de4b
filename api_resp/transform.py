"""Turn a call outcome into the envelope's wire string.

An outcome is either the ``ApiResp`` a call produced or the exception it
raised. Exceptions are logged with the caller's ``err_log`` prefix and mapped
to ``ApiResp.error(fallback_error_code, str(exc))``.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from api_resp.config.settings import get_settings
from api_resp.models.response import ApiResp

logger = logging.getLogger(__name__)

Outcome = Union[ApiResp, Exception]


def resolve(
    outcome: Outcome, err_log: object = "", fallback_code: int | None = None
) -> ApiResp:
    """Return the envelope for ``outcome``, mapping an exception to an error.

    ``fallback_code`` defaults to ``API_RESP_FALLBACK_ERROR_CODE``. Callers that
    must not fail on a bad configuration after the call load it up front.
    """
    if isinstance(outcome, ApiResp):
        return outcome
    if not isinstance(outcome, Exception):
        raise TypeError(
            f"outcome must be ApiResp or Exception, got {type(outcome).__name__}"
        )

    code = get_settings().fallback_error_code if fallback_code is None else fallback_code
    logger.error(
        "%s %r",
        err_log,
        outcome,
        exc_info=outcome,
        extra={"err_log": err_log, "error_code": code},
    )
    return ApiResp.error(code, str(outcome))


def to_json_str(
    outcome: Outcome, err_log: object = "", fallback_code: int | None = None
) -> str:
    """Serialize ``outcome`` as an envelope JSON string."""
    return resolve(outcome, err_log, fallback_code).to_json()


def json_result(err_log: object = "") -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate a call returning ``ApiResp`` so it returns the JSON string.

    Works for plain and ``async def`` functions. Any ``Exception`` raised by
    the call becomes an error envelope; cancellation and other
    BaseExceptions propagate. Settings are loaded when the function is
    decorated, so an invalid ``API_RESP_*`` variable fails there and never
    replaces the exception of a failed call.

    Example
    -------
    >>> @json_result("query dept failed")
    ... def list_depts() -> ApiResp:
    ...     return ApiResp.ok_with_data([{"id": "01"}])
    >>> list_depts()
    '{"success":true,"code":0,"message":"","data":[{"id":"01"}]}'
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        fallback_code = get_settings().fallback_error_code

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> str:
                coro: Awaitable[ApiResp] = func(*args, **kwargs)
                try:
                    outcome: Outcome = await coro
                except Exception as exc:
                    outcome = exc
                return to_json_str(outcome, err_log, fallback_code)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                outcome: Outcome = func(*args, **kwargs)
            except Exception as exc:
                outcome = exc
            return to_json_str(outcome, err_log, fallback_code)

        return wrapper

    return decorator
