from zoneinfo import ZoneInfo

from vkphoto.api import VkApi
from vkphoto.config import VkConfig
from vkphoto.transport import RequestsTransport


def test_from_env_defaults(monkeypatch):
    for name in (
        "VK_ACCESS_TOKEN",
        "VK_API_VERSION",
        "VK_API_URL",
        "VK_TIMEOUT",
        "VK_TIMEZONE",
        "VK_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    config = VkConfig.from_env()

    assert config.access_token == ""
    assert config.api_version == "5.9"
    assert config.api_url == "https://api.vk.com/method/"
    assert config.timeout == 10
    assert config.timezone is None
    assert config.log_dir is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("VK_ACCESS_TOKEN", "abc")
    monkeypatch.setenv("VK_API_VERSION", "5.131")
    monkeypatch.setenv("VK_TIMEOUT", "30")
    monkeypatch.setenv("VK_TIMEZONE", "Europe/Moscow")
    monkeypatch.delenv("VK_LOG_DIR", raising=False)

    config = VkConfig.from_env()
    api = VkApi.from_config(config)

    assert isinstance(api.transport, RequestsTransport)
    assert api.transport.timeout == 30
    assert api.tz == ZoneInfo("Europe/Moscow")
    assert api.build_url("photos.getAlbumsCount") == (
        "https://api.vk.com/method/photos.getAlbumsCount?v=5.131&access_token=abc"
    )
