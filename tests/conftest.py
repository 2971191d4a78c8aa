import json
from zoneinfo import ZoneInfo

import pytest

from vkphoto.api import VkApi

# 测试数据来自莫斯科时区的账号
MSK = ZoneInfo("Europe/Moscow")


class FakeTransport:
    """按完整 URL 返回预设的 JSON，未登记的 URL 直接断言失败"""

    def __init__(self, responses=None, uploads=None):
        self.responses = responses or {}
        self.uploads = uploads or {}
        self.requested = []
        self.posted = []

    def get(self, url):
        self.requested.append(url)
        assert url in self.responses, f"unexpected url: {url}"
        return self.responses[url]

    def post_multipart(self, url, files):
        self.posted.append((url, files))
        return self.uploads[url]


def make_api(url, payload):
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return VkApi(FakeTransport({url: text}), access_token="token", tz=MSK)


@pytest.fixture
def mocked_api():
    return make_api
