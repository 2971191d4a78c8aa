# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 22:58:33

from typing import Optional

from pydantic import BaseModel, StrictInt, StrictStr

from vkphoto.model.wire import WireUrl


class UploadServerInfo(BaseModel):
    upload_url: WireUrl
    # 只有 getMessagesUploadServer / getUploadServer 会返回
    album_id: Optional[StrictInt] = None
    user_id: Optional[StrictInt] = None

    class Config:
        extra = "ignore"
        frozen = True


class UploadedPhotos(BaseModel):
    """
    上传服务器直接返回的结果（没有 response 信封），
    原样作为 photos.save* 方法的参数。
    """

    server: StrictInt
    hash: StrictStr
    # 相册上传返回 photos_list + aid，墙/私信/头像上传返回 photo
    photos_list: Optional[StrictStr] = None
    aid: Optional[StrictInt] = None
    photo: Optional[StrictStr] = None

    class Config:
        extra = "ignore"
        frozen = True
