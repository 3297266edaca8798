from typing import Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings


class WechatClientConfig(BaseSettings):
    """
    WeChat client configuration.  This is a pydantic base settings class, so every field can be overridden
    via environment variables (prefixed with WECHAT_) or an optional .env file.

    Example:
        export WECHAT_HTTP_TIMEOUT=10
        export WECHAT_STRICT_ERROR_DETECTION=true
    """
    api_base_url: HttpUrl = Field(
        default="https://api.weixin.qq.com",
        description="Base URL of the WeChat API",
    )
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout (seconds) for WeChat API calls.",
    )
    verify_tls: bool = Field(default=True, description="Verify WeChat TLS certificates.")
    ca_bundle: Optional[str] = Field(
        default=None,
        description="Optional CA bundle path when verify_tls=true and using a custom CA.",
    )
    strict_error_detection: bool = Field(
        default=False,
        description="Detect application errors by parsing the errcode field instead of the substring heuristic.",
    )

    class Config:
        env_prefix = "WECHAT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "forbid"

    @property
    def verify(self):
        if not self.verify_tls:
            return False
        if self.ca_bundle:
            return self.ca_bundle
        return True


class ConfigManager:
    """Singleton wrapper so callers can reload configuration on demand."""

    _config: Optional[WechatClientConfig] = None

    @classmethod
    def get_config(cls) -> WechatClientConfig:
        if cls._config is None:
            cls._config = WechatClientConfig()
        return cls._config

    @classmethod
    def reload_config(cls) -> WechatClientConfig:
        cls._config = WechatClientConfig()
        return cls._config
