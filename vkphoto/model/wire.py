# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 22:30:41
# @Desc:   VK 返回值里几种特殊字段的解码规则

import math
import struct
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BeforeValidator,
    HttpUrl,
    StrictStr,
    TypeAdapter,
    ValidationInfo,
)

from vkphoto.utils.timer import to_local_time

_http_url = TypeAdapter(HttpUrl)


def decode_wire_bool(value: Any) -> bool:
    """
    VK 用整数 0/1 表示布尔值，JSON 里的 true/false 反而是非法的。
    """
    # bool 是 int 的子类，必须先排除
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"wire boolean must be 0 or 1, got {value!r}")
    if value not in (0, 1):
        raise ValueError(f"wire boolean must be 0 or 1, got {value}")
    return value == 1


def to_single(value: Any) -> float:
    """
    经过 IEEE-754 单精度截断，和 VK 服务端坐标的真实精度一致：
    29.999996 -> 29.999996185302734
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    try:
        result = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as e:
        raise ValueError(f"{value} is out of single precision range") from e
    # 3.11 起超出范围的有限值会被打包成 inf 而不是抛 OverflowError
    if math.isinf(result) and not math.isinf(value):
        raise ValueError(f"{value} is out of single precision range")
    return result


def decode_unix_time(value: Any, info: ValidationInfo) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"unix timestamp must be an integer, got {value!r}")
    context = info.context or {}
    return to_local_time(value, context.get("tz"))


def check_http_url(value: str) -> str:
    """
    只校验是合法的 http(s) 地址，保留服务端原样的字符串，
    不做 HttpUrl 的补斜杠、转义等规范化。
    """
    _http_url.validate_python(value)
    return value


WireBool = Annotated[bool, BeforeValidator(decode_wire_bool)]
Single = Annotated[float, BeforeValidator(to_single)]
UnixTime = Annotated[datetime, BeforeValidator(decode_unix_time)]
WireUrl = Annotated[StrictStr, AfterValidator(check_http_url)]
