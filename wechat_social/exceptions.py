from __future__ import annotations

from http import HTTPStatus
from typing import Optional

import httpx


class SocialError(Exception):
    """Base exception for wechat-social errors."""


class ApiError(SocialError):
    """
    Raised when a provider API reports an error.

    `cause` mirrors `__cause__` so the wrapped failure stays reachable as a plain attribute
    (e.g. after the error is re-raised without chaining).
    """

    def __init__(self, provider_id: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.provider_id = provider_id
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class NotAuthorizedError(ApiError):
    """Raised when the request is not authorized (e.g. an invalid OAuth code)."""


class InvalidAuthorizationError(NotAuthorizedError):
    """Raised when the authorization presented is invalid (e.g. a stale refresh token)."""


class OperationNotPermittedError(ApiError):
    """Raised when the caller lacks permission for the operation."""


class ResourceNotFoundError(ApiError):
    """Raised for unrecognized application errors and non-OK responses carrying an error body."""


class UncategorizedError(ApiError):
    """Raised when an error could not be mapped to any other category."""


class TransportError(SocialError):
    """Raised when the request never produced a response (connect failure, timeout, ...)."""


class HttpStatusError(SocialError):
    """Raised by the default fallback handler, carrying the raw HTTP status."""

    def __init__(self, status_code: int, reason_phrase: str = "", body: str = ""):
        super().__init__(f"{status_code} {reason_phrase}".strip())
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body


class HttpClientError(HttpStatusError):
    """HTTP 4xx."""


class HttpServerError(HttpStatusError):
    """HTTP 5xx."""


class UnknownHttpStatusError(HttpStatusError):
    """Any status outside the 4xx/5xx series."""


def map_http_status(status_code: int, reason_phrase: str = "", body: str = "") -> HttpStatusError:
    """Translate an HTTP status code to a status error."""
    if HTTPStatus.BAD_REQUEST <= status_code < HTTPStatus.INTERNAL_SERVER_ERROR:
        return HttpClientError(status_code, reason_phrase, body)
    if HTTPStatus.INTERNAL_SERVER_ERROR <= status_code < 600:
        return HttpServerError(status_code, reason_phrase, body)
    return UnknownHttpStatusError(status_code, reason_phrase, body)


class DefaultResponseErrorHandler:
    """
    Generic fallback used when a response carries no parsable error envelope.

    Always raises: the caller only delegates here once it has decided the response is an error.
    """

    def __call__(self, response: httpx.Response) -> None:
        raise map_http_status(response.status_code, response.reason_phrase, response.text)
