# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 23:36:54
# @Desc:   把 VK 的 JSON 响应映射到 model

import json
from datetime import tzinfo
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from vkphoto.errors import ApiError, MappingError
from vkphoto.model.collection import VkCollection
from vkphoto.model.envelope import VkErrorBody
from vkphoto.model.wire import decode_wire_bool

T = TypeVar("T", bound=BaseModel)


def load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise MappingError(f"JSON decode failed: {e}") from e


def parse_envelope(text: str) -> Any:
    """
    解析 {"response": ...} / {"error": {...}} 信封，返回 response 的内容。

    Raises:
        ApiError: 服务端返回了 error
        MappingError: JSON 非法或缺少 response
    """
    payload = load_json(text)
    if not isinstance(payload, dict):
        raise MappingError(f"envelope must be an object, got {type(payload).__name__}")

    if "error" in payload:
        try:
            body = VkErrorBody.model_validate(payload["error"])
        except ValidationError as e:
            raise MappingError(f"malformed error envelope: {e}") from e
        raise ApiError(body.error_code, body.error_msg, body.request_params)

    if "response" not in payload:
        raise MappingError("envelope has neither 'response' nor 'error'")
    return payload["response"]


def map_int(response: Any) -> int:
    if isinstance(response, bool) or not isinstance(response, int):
        raise MappingError(f"expected an integer response, got {response!r}")
    return response


def map_bool(response: Any) -> bool:
    try:
        return decode_wire_bool(response)
    except ValueError as e:
        raise MappingError(str(e)) from e


def map_entity(model: Type[T], data: Any, tz: Optional[tzinfo] = None) -> T:
    try:
        return model.model_validate(data, context={"tz": tz})
    except ValidationError as e:
        raise MappingError(f"cannot map response to {model.__name__}: {e}") from e


def map_collection(
    model: Type[T], response: Any, tz: Optional[tzinfo] = None
) -> VkCollection:
    """
    {"count": N, "items": [...]}，count 只做记录，不和 items 长度校验
    """
    if not isinstance(response, dict) or not isinstance(response.get("items"), list):
        raise MappingError(f"expected a count/items object for {model.__name__}")
    count = response.get("count")
    if count is not None:
        count = map_int(count)
    items = [map_entity(model, item, tz) for item in response["items"]]
    return VkCollection(items, total_count=count)


def map_array(model: Type[T], response: Any, tz: Optional[tzinfo] = None) -> VkCollection:
    if not isinstance(response, list):
        raise MappingError(f"expected an array of {model.__name__}")
    return VkCollection(map_entity(model, item, tz) for item in response)
