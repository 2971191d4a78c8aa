# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 21:18:05

from datetime import datetime, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo


def get_timezone(name: Optional[str]) -> Optional[tzinfo]:
    # 空字符串 / None 表示使用系统本地时区
    if not name:
        return None
    return ZoneInfo(name)


def to_local_time(timestamp: Union[int, float], tz: Optional[tzinfo] = None) -> datetime:
    """
    将 Unix 时间戳（秒）转换为本地时间。

    Args:
        timestamp: Unix 时间戳
        tz: 目标时区，None 时返回系统本地时区下的 naive datetime

    Returns:
        datetime: 转换后的时间
    """
    return datetime.fromtimestamp(timestamp, tz)


def to_unix_timestamp(dt: datetime) -> int:
    # naive datetime 按系统本地时间处理
    return int(dt.timestamp())


def to_local_time_str(
    timestamp: Union[int, float],
    tz: Optional[tzinfo] = None,
    fmt: str = "%Y-%m-%d %H:%M:%S",
) -> str:
    return to_local_time(timestamp, tz).strftime(fmt)
