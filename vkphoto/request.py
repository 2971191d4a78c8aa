# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 23:10:26
# @Desc:   按固定顺序拼接 VK 方法的查询参数

from datetime import datetime
from typing import Any, List, Tuple

from vkphoto.utils.timer import to_unix_timestamp


def format_value(value: Any) -> str:
    """
    把 Python 值转成 VK 查询串里的文本，不做 URL 转义。
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, datetime):
        return str(to_unix_timestamp(value))
    if isinstance(value, (list, tuple, set)):
        return ",".join(format_value(x) for x in value)
    return str(value)


def is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, set)) and len(value) == 0:
        return True
    return False


class VkParameters:
    """
    有序的方法参数：
    - add: 可选参数，值为空（None / False / "" / []）时跳过
    - require: 必填参数，0 等“假值”也会保留，None 直接报错

    调用顺序即查询串中的顺序，v 和 access_token 总是在最后。
    """

    def __init__(self):
        self._items: List[Tuple[str, str]] = []

    def add(self, key: str, value: Any) -> "VkParameters":
        if not is_empty(value):
            self._items.append((key, format_value(value)))
        return self

    def require(self, key: str, value: Any) -> "VkParameters":
        if value is None:
            raise ValueError(f"missing required parameter: {key}")
        self._items.append((key, format_value(value)))
        return self

    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def to_query(self, version: str, access_token: str) -> str:
        pairs = self._items + [("v", version), ("access_token", access_token)]
        return "&".join(f"{k}={v}" for k, v in pairs)

    def __len__(self) -> int:
        return len(self._items)
