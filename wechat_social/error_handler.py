"""
Translation of WeChat API responses into wechat-social exceptions.

WeChat reports most failures inside an HTTP 200 body of the form
``{"errcode": 40029, "errmsg": "invalid code"}`` instead of through the status code,
so a plain status check misses them.  WechatErrorHandler spots these envelopes and
raises the most applicable exception.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Callable, Dict, NoReturn, Optional, Type

import httpx

from .app_logging import wechat_logging
from .exceptions import (
    ApiError,
    DefaultResponseErrorHandler,
    InvalidAuthorizationError,
    NotAuthorizedError,
    OperationNotPermittedError,
    ResourceNotFoundError,
    UncategorizedError,
)
from .models import ERROR_CODE, ERROR_MESSAGE, ErrorPayload

WECHAT = "wechat"
NO_ERROR_DETAILS = "No error details from available information"

FallbackHandler = Callable[[httpx.Response], None]

_ERRORS_BY_CODE: Dict[str, Type[ApiError]] = {
    "40029": NotAuthorizedError,
    "40030": InvalidAuthorizationError,
    "40003": OperationNotPermittedError,
}


def read_body(response: httpx.Response) -> str:
    """Buffer the body once; later calls reuse the cached content."""
    response.read()
    return response.text


def _load_object(text: str) -> Optional[dict]:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def extract_error_payload(text: str) -> Optional[ErrorPayload]:
    """
    Parse the errcode/errmsg envelope out of a response body.
    Returns None when the body is not a JSON object.
    """
    data = _load_object(text)
    if data is None:
        return None
    return ErrorPayload.model_validate({ERROR_CODE: data.get(ERROR_CODE), ERROR_MESSAGE: data.get(ERROR_MESSAGE)})


class WechatErrorHandler:
    """
    Examines WeChat responses and raises the most applicable exception.

    `fallback` is called for error responses that carry no parsable envelope; it is expected
    to raise, and whatever it raises is wrapped in an UncategorizedError.
    """

    def __init__(self, fallback: Optional[FallbackHandler] = None, *, strict: bool = False):
        self.fallback: FallbackHandler = fallback or DefaultResponseErrorHandler()
        self.strict = strict

    def has_error(self, response: httpx.Response) -> bool:
        text = read_body(response)
        if self.strict:
            return self._has_error_code(text)
        if ERROR_CODE in text and ERROR_MESSAGE in text:
            return "ok" not in text[text.index(ERROR_MESSAGE):]
        return False

    @staticmethod
    def _has_error_code(text: str) -> bool:
        payload = extract_error_payload(text)
        if payload is None:
            return False
        return bool(payload.code) and payload.code != "0"

    def handle_error(self, response: httpx.Response) -> NoReturn:
        text = read_body(response)
        wechat_logging.debug(f"Error from WeChat: {text}")

        payload = extract_error_payload(text)
        if payload is None:
            self._handle_uncategorized_error(response)
        self._handle_wechat_error(response.status_code, payload)

    def _handle_wechat_error(self, status_code: int, payload: ErrorPayload) -> NoReturn:
        message = payload.describe()
        if status_code != HTTPStatus.OK:
            error_cls: Type[ApiError] = ResourceNotFoundError
        else:
            error_cls = _ERRORS_BY_CODE.get(payload.code, ResourceNotFoundError)
        wechat_logging.debug(f"WeChat error classified as {error_cls.__name__} (status={status_code}, {message})")
        raise error_cls(WECHAT, message)

    def _handle_uncategorized_error(self, response: httpx.Response) -> NoReturn:
        try:
            self.fallback(response)
        except Exception as exc:
            raise UncategorizedError(WECHAT, NO_ERROR_DETAILS, exc) from exc
        raise UncategorizedError(WECHAT, NO_ERROR_DETAILS)
