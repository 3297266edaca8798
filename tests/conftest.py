import pytest

from wechat_social.config import ConfigManager


@pytest.fixture(autouse=True)
def reset_config():
    ConfigManager._config = None
    yield
    ConfigManager._config = None
