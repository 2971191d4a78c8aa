# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 23:20:14

import mimetypes
import os
import re
from logging import Logger
from typing import Dict, Optional, Protocol, Union

import requests
from requests_toolbelt.multipart.encoder import MultipartEncoder

from vkphoto.errors import TransportError
from vkphoto.utils.logger import get_logger

TOKEN_PATTERN = re.compile(r"(access_token=)[^&]+")

# 字段名 -> 本地文件路径 或 (文件名, 内容, mime)
UploadFiles = Dict[str, Union[str, tuple]]


def mask_token(url: str) -> str:
    return TOKEN_PATTERN.sub(r"\1***", url)


class Transport(Protocol):
    def get(self, url: str) -> str: ...

    def post_multipart(self, url: str, files: UploadFiles) -> str: ...


class RequestsTransport:
    """
    基于 requests.Session 的默认实现，只负责收发，不做重试
    """

    def __init__(
        self,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
        logger: Optional[Logger] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or get_logger()

    def get(self, url: str) -> str:
        self.logger.info(f"🌐 Request URL: {mask_token(url)}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(f"❌ Request failed: {e}")
            raise TransportError(str(e), _status_code(e)) from e

        self.logger.debug(f"📄 Response Text: {response.text}")
        return response.text

    def post_multipart(self, url: str, files: UploadFiles) -> str:
        fields = []
        opened = []
        for name, value in files.items():
            if isinstance(value, str):
                mime_type = mimetypes.guess_type(value)[0] or "application/octet-stream"
                fp = open(value, "rb")
                opened.append(fp)
                value = (os.path.basename(value), fp, mime_type)
            fields.append((name, value))

        self.logger.info(f"📤 Upload URL: {url}, fields: {list(files)}")
        try:
            encoder = MultipartEncoder(fields=fields)
            response = self.session.post(
                url,
                data=encoder,
                headers={"Content-Type": encoder.content_type},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(f"❌ Upload failed: {e}")
            raise TransportError(str(e), _status_code(e)) from e
        finally:
            for fp in opened:
                fp.close()

        self.logger.debug(f"📄 Response Text: {response.text}")
        return response.text


def _status_code(e: requests.RequestException) -> Optional[int]:
    if e.response is not None:
        return e.response.status_code
    return None
