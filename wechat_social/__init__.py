"""
WeChat API client binding that translates WeChat errcode/errmsg error envelopes into exceptions.
"""

from .client import WechatApiClient, AsyncWechatApiClient
from .config import WechatClientConfig, ConfigManager
from .error_handler import WechatErrorHandler, extract_error_payload
from .exceptions import (
    SocialError,
    ApiError,
    NotAuthorizedError,
    InvalidAuthorizationError,
    OperationNotPermittedError,
    ResourceNotFoundError,
    UncategorizedError,
    TransportError,
    HttpStatusError,
    HttpClientError,
    HttpServerError,
    UnknownHttpStatusError,
    DefaultResponseErrorHandler,
)
from .models import ErrorPayload

__all__ = [
    "WechatApiClient",
    "AsyncWechatApiClient",
    "WechatClientConfig",
    "ConfigManager",
    "WechatErrorHandler",
    "extract_error_payload",
    "SocialError",
    "ApiError",
    "NotAuthorizedError",
    "InvalidAuthorizationError",
    "OperationNotPermittedError",
    "ResourceNotFoundError",
    "UncategorizedError",
    "TransportError",
    "HttpStatusError",
    "HttpClientError",
    "HttpServerError",
    "UnknownHttpStatusError",
    "DefaultResponseErrorHandler",
    "ErrorPayload",
]

__version__ = "0.1.0"
