import pytest
from pydantic import ValidationError

from wechat_social.config import ConfigManager, WechatClientConfig


def test_defaults():
    cfg = WechatClientConfig()
    assert str(cfg.api_base_url).startswith("https://api.weixin.qq.com")
    assert cfg.http_timeout == 30.0
    assert cfg.strict_error_detection is False
    assert cfg.verify is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WECHAT_STRICT_ERROR_DETECTION", "true")
    monkeypatch.setenv("WECHAT_HTTP_TIMEOUT", "5")
    cfg = ConfigManager.reload_config()
    assert cfg.strict_error_detection is True
    assert cfg.http_timeout == 5.0
    assert ConfigManager.get_config() is cfg


def test_verify_options():
    assert WechatClientConfig(verify_tls=False).verify is False
    assert WechatClientConfig(ca_bundle="/etc/ssl/wechat.pem").verify == "/etc/ssl/wechat.pem"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        WechatClientConfig(http_timeout=0)
