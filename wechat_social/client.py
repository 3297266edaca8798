from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from .app_logging import wechat_logging
from .config import ConfigManager, WechatClientConfig
from .error_handler import WechatErrorHandler, read_body
from .exceptions import TransportError


class _BaseWechatClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        config: Optional[WechatClientConfig] = None,
        error_handler: Optional[WechatErrorHandler] = None,
        timeout: Optional[float] = None,
        verify_tls: Optional[bool] = None,
    ):
        cfg = config or ConfigManager.get_config()
        self.base_url = (base_url or str(cfg.api_base_url)).rstrip("/")
        self.error_handler = error_handler or WechatErrorHandler(strict=cfg.strict_error_detection)
        self._client_kwargs: Dict[str, Any] = {
            "timeout": timeout if timeout is not None else cfg.http_timeout,
            "verify": cfg.verify if verify_tls is None else verify_tls,
        }

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _process(self, response: httpx.Response) -> Dict[str, Any]:
        """Run a buffered response through the error handler and decode the JSON object."""
        if self.error_handler.has_error(response):
            self.error_handler.handle_error(response)
        if response.is_error:
            self.error_handler.fallback(response)
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            # Not a JSON object (e.g. a gateway HTML page): no envelope, so the fallback path raises.
            self.error_handler.handle_error(response)
        return data


class WechatApiClient(_BaseWechatClient):
    """
    Synchronous WeChat API client.  Every response is checked for an errcode/errmsg envelope
    and translated into a wechat-social exception.

    The client maintains an httpx.Client underneath; close it via `close()` or use
    `with WechatApiClient() as client: ...`.
    """

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any):
        super().__init__(base_url, **kwargs)
        self._client = httpx.Client(**self._client_kwargs)

    def __enter__(self) -> "WechatApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", path, params=params)

    def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Dict[str, Any]:
        return self._request("POST", path, params=params, json=json)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Dict[str, Any]:
        url = self._url(path)
        try:
            response = self._client.request(method, url, params=params, json=json)
            read_body(response)
        except httpx.HTTPError as exc:
            wechat_logging.warning(f"{method} {url} failed: {exc}")
            raise TransportError(str(exc)) from exc
        return self._process(response)


class AsyncWechatApiClient(_BaseWechatClient):
    """
    Async variant of the WeChat API client using httpx.AsyncClient.
    """

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any):
        super().__init__(base_url, **kwargs)
        self._client = httpx.AsyncClient(**self._client_kwargs)

    async def __aenter__(self) -> "AsyncWechatApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Dict[str, Any]:
        return await self._request("POST", path, params=params, json=json)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Dict[str, Any]:
        url = self._url(path)
        try:
            response = await self._client.request(method, url, params=params, json=json)
            await response.aread()
        except httpx.HTTPError as exc:
            wechat_logging.warning(f"{method} {url} failed: {exc}")
            raise TransportError(str(exc)) from exc
        return self._process(response)
