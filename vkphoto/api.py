# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-13 10:21:30

from datetime import tzinfo
from logging import Logger
from typing import Any, Optional

from vkphoto.config import DEFAULT_API_URL, DEFAULT_API_VERSION, VkConfig
from vkphoto.errors import VkError
from vkphoto.mapper import parse_envelope
from vkphoto.photos import PhotosCategory
from vkphoto.request import VkParameters
from vkphoto.transport import RequestsTransport, Transport, UploadFiles
from vkphoto.utils.logger import get_logger
from vkphoto.utils.timer import get_timezone


class VkApi:
    """
    VK API 的入口，持有 token、版本号、时区和注入的 transport。

    >>> api = VkApi(RequestsTransport(), access_token="token")
    >>> api.photos.get_albums(owner_id=1)
    """

    def __init__(
        self,
        transport: Transport,
        access_token: str,
        version: str = DEFAULT_API_VERSION,
        api_url: str = DEFAULT_API_URL,
        tz: Optional[tzinfo] = None,
        logger: Optional[Logger] = None,
    ):
        self.transport = transport
        self.access_token = access_token
        self.version = version
        self.api_url = api_url
        self.tz = tz
        self.logger = logger or get_logger()
        self.photos = PhotosCategory(self)

    @classmethod
    def from_config(cls, config: VkConfig) -> "VkApi":
        logger = get_logger(log_dir=config.log_dir)
        return cls(
            RequestsTransport(timeout=config.timeout, logger=logger),
            access_token=config.access_token,
            version=config.api_version,
            api_url=config.api_url,
            tz=get_timezone(config.timezone),
            logger=logger,
        )

    def build_url(self, method: str, params: Optional[VkParameters] = None) -> str:
        params = params or VkParameters()
        return f"{self.api_url}{method}?{params.to_query(self.version, self.access_token)}"

    def call(self, method: str, params: Optional[VkParameters] = None) -> Any:
        """
        发起请求并返回信封中 response 的内容

        Raises:
            TransportError / ApiError / MappingError
        """
        url = self.build_url(method, params)
        text = self.transport.get(url)
        try:
            return parse_envelope(text)
        except VkError as e:
            self.logger.error(f"❌ {method} failed: {e}")
            raise

    def upload(self, upload_url: str, files: UploadFiles) -> str:
        return self.transport.post_multipart(upload_url, files)
