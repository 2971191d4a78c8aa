# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-13 10:05:44
# @Desc:   从环境变量读取配置

import os
from typing import Optional

from pydantic import BaseModel

DEFAULT_API_URL = "https://api.vk.com/method/"
DEFAULT_API_VERSION = "5.9"


class VkConfig(BaseModel):
    access_token: str = ""
    api_version: str = DEFAULT_API_VERSION
    api_url: str = DEFAULT_API_URL
    timeout: int = 10
    timezone: Optional[str] = None  # 如 "Europe/Moscow"，为空时用系统本地时区
    log_dir: Optional[str] = None

    class Config:
        extra = "ignore"
        frozen = True

    @classmethod
    def from_env(cls) -> "VkConfig":
        return cls(
            access_token=os.getenv("VK_ACCESS_TOKEN", ""),
            api_version=os.getenv("VK_API_VERSION", DEFAULT_API_VERSION),
            api_url=os.getenv("VK_API_URL", DEFAULT_API_URL),
            timeout=int(os.getenv("VK_TIMEOUT", "10")),
            timezone=os.getenv("VK_TIMEZONE") or None,
            log_dir=os.getenv("VK_LOG_DIR") or None,
        )
