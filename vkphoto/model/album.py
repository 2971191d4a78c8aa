# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 22:41:19

from typing import Optional

from pydantic import BaseModel, StrictInt, StrictStr

from vkphoto.model.wire import UnixTime, WireBool, WireUrl


class PhotoAlbum(BaseModel):
    id: StrictInt
    thumb_id: Optional[StrictInt] = None
    owner_id: StrictInt
    title: StrictStr
    description: Optional[StrictStr] = None
    # 系统相册（-6 头像、-7 墙、-15 已保存）没有这两个时间
    created: Optional[UnixTime] = None
    updated: Optional[UnixTime] = None
    privacy: Optional[StrictInt] = None
    comment_privacy: Optional[StrictInt] = None
    size: StrictInt  # 相册内照片数
    thumb_src: Optional[WireUrl] = None  # need_covers=1 时返回
    can_upload: Optional[WireBool] = None

    class Config:
        extra = "ignore"
        frozen = True
