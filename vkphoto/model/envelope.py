# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 23:48:10

from typing import Any, Dict, List

from pydantic import BaseModel, StrictInt, StrictStr


class VkErrorBody(BaseModel):
    error_code: StrictInt
    error_msg: StrictStr
    request_params: List[Dict[str, Any]] = []

    class Config:
        extra = "ignore"
