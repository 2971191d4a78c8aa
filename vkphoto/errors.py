# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 21:04:37
# @Desc:   VK API 调用过程中的三类错误

from typing import Any, Dict, List, Optional


class VkError(Exception):
    """所有 vkphoto 异常的基类"""


class TransportError(VkError):
    """网络层 / HTTP 层失败（连接失败、超时、非 2xx 状态码）"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiError(VkError):
    """VK 返回了 {"error": {...}} 信封"""

    def __init__(
        self,
        code: int,
        message: str,
        request_params: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(f"VK API error ({code}): {message}")
        self.code = code
        self.message = message
        self.request_params = request_params or []


class MappingError(VkError):
    """响应内容与期望的结构不匹配"""
