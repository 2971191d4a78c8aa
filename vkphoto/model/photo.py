# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 22:47:02

from typing import List, Optional

from pydantic import BaseModel, StrictInt, StrictStr

from vkphoto.model.wire import Single, UnixTime, WireBool, WireUrl

# 从大到小，photo_sizes=0 时 VK 只返回这些字段中的一部分
PHOTO_VARIANTS = [
    "photo_2560",
    "photo_1280",
    "photo_807",
    "photo_604",
    "photo_130",
    "photo_75",
]


class Likes(BaseModel):
    count: StrictInt
    user_likes: WireBool  # 当前用户是否点赞

    class Config:
        extra = "ignore"
        frozen = True


class Comments(BaseModel):
    count: StrictInt

    class Config:
        extra = "ignore"
        frozen = True


class Tags(BaseModel):
    count: StrictInt

    class Config:
        extra = "ignore"
        frozen = True


class PhotoSize(BaseModel):
    type: StrictStr
    src: WireUrl
    width: StrictInt
    height: StrictInt

    class Config:
        extra = "ignore"
        frozen = True


class Photo(BaseModel):
    id: StrictInt
    album_id: StrictInt
    owner_id: StrictInt
    user_id: Optional[StrictInt] = None  # 社区相册里由谁上传

    photo_75: Optional[WireUrl] = None
    photo_130: Optional[WireUrl] = None
    photo_604: Optional[WireUrl] = None
    photo_807: Optional[WireUrl] = None
    photo_1280: Optional[WireUrl] = None
    photo_2560: Optional[WireUrl] = None
    sizes: Optional[List[PhotoSize]] = None

    width: Optional[StrictInt] = None
    height: Optional[StrictInt] = None
    text: Optional[StrictStr] = None
    date: UnixTime
    post_id: Optional[StrictInt] = None
    access_key: Optional[StrictStr] = None

    lat: Optional[Single] = None
    long: Optional[Single] = None

    # extended=1 时返回
    likes: Optional[Likes] = None
    comments: Optional[Comments] = None
    tags: Optional[Tags] = None
    can_comment: Optional[WireBool] = None

    class Config:
        extra = "ignore"
        frozen = True

    def get_url(self) -> str:
        """
        返回尺寸最大的图片链接，没有可用链接时返回空字符串
        """
        if self.sizes:
            best = max(self.sizes, key=lambda s: s.width * s.height)
            return str(best.src)
        for name in PHOTO_VARIANTS:
            url = getattr(self, name)
            if url:
                return str(url)
        return ""


class PhotoTag(BaseModel):
    id: StrictInt
    user_id: StrictInt
    placer_id: StrictInt
    tagged_name: StrictStr
    date: UnixTime
    x: Single
    y: Single
    x2: Single
    y2: Single
    viewed: WireBool

    class Config:
        extra = "ignore"
        frozen = True


class PhotoComment(BaseModel):
    id: StrictInt
    from_id: StrictInt
    date: UnixTime
    text: StrictStr
    likes: Optional[Likes] = None  # need_likes=1 时返回

    class Config:
        extra = "ignore"
        frozen = True
