# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-13 00:02:48

from typing import Iterable, Optional


class VkCollection(tuple):
    """
    只读、保持响应顺序的结果集。

    total_count 对应响应里的 count 字段（服务端可取到的总数），
    与 len() 不一定相等；数组形式的响应没有 count，此时为 None。
    """

    def __new__(cls, items: Iterable = (), total_count: Optional[int] = None):
        obj = super().__new__(cls, items)
        obj.total_count = total_count
        return obj

    def __repr__(self) -> str:
        return f"VkCollection({list(self)!r}, total_count={self.total_count})"
