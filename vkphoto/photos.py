# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-13 11:02:15
# @Desc:   photos.* 方法

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Union

from vkphoto.errors import ApiError
from vkphoto.mapper import (
    load_json,
    map_array,
    map_bool,
    map_collection,
    map_entity,
    map_int,
)
from vkphoto.model import (
    Photo,
    PhotoAlbum,
    PhotoComment,
    PhotoTag,
    UploadedPhotos,
    UploadServerInfo,
    VkCollection,
)
from vkphoto.request import VkParameters
from vkphoto.transport import UploadFiles

if TYPE_CHECKING:
    from vkphoto.api import VkApi

Timestamp = Union[int, datetime]


class PhotosCategory:
    """
    照片相关方法，查询参数的顺序与 VK 文档一致
    """

    def __init__(self, api: "VkApi"):
        self.api = api

    def _entity(self, model, method: str, params: Optional[VkParameters] = None):
        return map_entity(model, self.api.call(method, params), self.api.tz)

    def _collection(self, model, method: str, params: VkParameters) -> VkCollection:
        return map_collection(model, self.api.call(method, params), self.api.tz)

    def _array(self, model, method: str, params: VkParameters) -> VkCollection:
        return map_array(model, self.api.call(method, params), self.api.tz)

    def _flag(self, method: str, params: VkParameters) -> bool:
        return map_bool(self.api.call(method, params))

    def _int(self, method: str, params: VkParameters) -> int:
        return map_int(self.api.call(method, params))

    # ---------------------------------------------------------------- upload

    def get_profile_upload_server(self) -> UploadServerInfo:
        return self._entity(UploadServerInfo, "photos.getProfileUploadServer")

    def get_messages_upload_server(self) -> UploadServerInfo:
        return self._entity(UploadServerInfo, "photos.getMessagesUploadServer")

    def get_upload_server(
        self, album_id: int, group_id: Optional[int] = None
    ) -> UploadServerInfo:
        params = VkParameters().require("album_id", album_id).add("group_id", group_id)
        return self._entity(UploadServerInfo, "photos.getUploadServer", params)

    def get_wall_upload_server(self, group_id: Optional[int] = None) -> UploadServerInfo:
        params = VkParameters().add("group_id", group_id)
        return self._entity(UploadServerInfo, "photos.getWallUploadServer", params)

    def upload(self, upload_url: str, files: UploadFiles) -> UploadedPhotos:
        """
        把文件 POST 到 get_*_upload_server 返回的地址。

        Args:
            upload_url: 上传地址
            files: 相册上传用 file1..file5，墙/私信上传用 photo

        Returns:
            UploadedPhotos: 传给 save / save_wall_photo / save_messages_photo
        """
        payload = load_json(self.api.upload(str(upload_url), files))
        # 上传服务器的错误是 {"error": "ERR_..."}，没有错误码
        if isinstance(payload, dict) and "error" in payload:
            raise ApiError(0, str(payload["error"]))
        return map_entity(UploadedPhotos, payload, self.api.tz)

    def save(
        self,
        album_id: int,
        server: int,
        photos_list: str,
        hash: str,
        group_id: Optional[int] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        caption: Optional[str] = None,
    ) -> VkCollection:
        params = (
            VkParameters()
            .require("album_id", album_id)
            .add("group_id", group_id)
            .require("server", server)
            .require("photos_list", photos_list)
            .require("hash", hash)
            .add("latitude", latitude)
            .add("longitude", longitude)
            .add("caption", caption)
        )
        return self._array(Photo, "photos.save", params)

    def save_wall_photo(
        self,
        photo: str,
        user_id: Optional[int] = None,
        group_id: Optional[int] = None,
        server: Optional[int] = None,
        hash: Optional[str] = None,
    ) -> VkCollection:
        params = (
            VkParameters()
            .add("user_id", user_id)
            .add("group_id", group_id)
            .require("photo", photo)
            .add("server", server)
            .add("hash", hash)
        )
        return self._array(Photo, "photos.saveWallPhoto", params)

    def save_messages_photo(
        self, photo: str, server: Optional[int] = None, hash: Optional[str] = None
    ) -> VkCollection:
        params = (
            VkParameters()
            .require("photo", photo)
            .add("server", server)
            .add("hash", hash)
        )
        return self._array(Photo, "photos.saveMessagesPhoto", params)

    # ---------------------------------------------------------------- albums

    def create_album(
        self,
        title: str,
        group_id: Optional[int] = None,
        description: Optional[str] = None,
        comment_privacy: Optional[int] = None,
        privacy: Optional[int] = None,
    ) -> PhotoAlbum:
        params = (
            VkParameters()
            .require("title", title)
            .add("group_id", group_id)
            .add("description", description)
            .add("comment_privacy", comment_privacy)
            .add("privacy", privacy)
        )
        return self._entity(PhotoAlbum, "photos.createAlbum", params)

    def edit_album(
        self,
        album_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        owner_id: Optional[int] = None,
        privacy: Optional[int] = None,
        comment_privacy: Optional[int] = None,
    ) -> bool:
        params = (
            VkParameters()
            .require("album_id", album_id)
            .add("title", title)
            .add("description", description)
            .add("owner_id", owner_id)
            .add("privacy", privacy)
            .add("comment_privacy", comment_privacy)
        )
        return self._flag("photos.editAlbum", params)

    def get_albums(
        self,
        owner_id: Optional[int] = None,
        album_ids: Optional[List[int]] = None,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        need_system: bool = False,
        need_covers: bool = False,
        photo_sizes: bool = False,
    ) -> VkCollection:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .add("album_ids", album_ids)
            .add("offset", offset)
            .add("count", count)
            .add("need_system", need_system)
            .add("need_covers", need_covers)
            .add("photo_sizes", photo_sizes)
        )
        return self._collection(PhotoAlbum, "photos.getAlbums", params)

    def get_albums_count(
        self, user_id: Optional[int] = None, group_id: Optional[int] = None
    ) -> int:
        params = VkParameters().add("user_id", user_id).add("group_id", group_id)
        return self._int("photos.getAlbumsCount", params)

    def delete_album(self, album_id: int, group_id: Optional[int] = None) -> bool:
        params = VkParameters().require("album_id", album_id).add("group_id", group_id)
        return self._flag("photos.deleteAlbum", params)

    # ---------------------------------------------------------------- photos

    def get(
        self,
        owner_id: Optional[int] = None,
        album_id: Optional[Union[int, str]] = None,
        photo_ids: Optional[List[int]] = None,
        rev: bool = False,
        extended: bool = False,
        feed_type: Optional[str] = None,
        feed: Optional[Timestamp] = None,
        photo_sizes: bool = False,
        offset: Optional[int] = None,
        count: Optional[int] = None,
    ) -> VkCollection:
        """
        album_id 可以是数字，也可以是 "wall" / "profile" / "saved"
        """
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .add("album_id", album_id)
            .add("photo_ids", photo_ids)
            .add("rev", rev)
            .add("extended", extended)
            .add("feed_type", feed_type)
            .add("feed", feed)
            .add("photo_sizes", photo_sizes)
            .add("offset", offset)
            .add("count", count)
        )
        return self._collection(Photo, "photos.get", params)

    def get_by_id(
        self, photos: List[str], extended: bool = False, photo_sizes: bool = False
    ) -> VkCollection:
        """
        photos 形如 ["1_263219735", "-49512556_331520481"]
        """
        if not photos:
            raise ValueError("missing required parameter: photos")
        params = (
            VkParameters()
            .require("photos", photos)
            .add("extended", extended)
            .add("photo_sizes", photo_sizes)
        )
        return self._array(Photo, "photos.getById", params)

    def get_profile(
        self,
        owner_id: Optional[int] = None,
        rev: bool = False,
        extended: bool = False,
        feed_type: Optional[str] = None,
        feed: Optional[Timestamp] = None,
        photo_sizes: bool = False,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> VkCollection:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .add("rev", rev)
            .add("extended", extended)
            .add("feed_type", feed_type)
            .add("feed", feed)
            .add("photo_sizes", photo_sizes)
            .add("count", count)
            .add("offset", offset)
        )
        return self._collection(Photo, "photos.getProfile", params)

    def get_all(
        self,
        owner_id: Optional[int] = None,
        extended: bool = False,
        count: Optional[int] = None,
        offset: Optional[int] = None,
        photo_sizes: bool = False,
        no_service_albums: bool = False,
    ) -> VkCollection:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .add("extended", extended)
            .add("count", count)
            .add("offset", offset)
            .add("photo_sizes", photo_sizes)
            .add("no_service_albums", no_service_albums)
        )
        return self._collection(Photo, "photos.getAll", params)

    def search(
        self,
        query: Optional[str] = None,
        lat: Optional[float] = None,
        longitude: Optional[float] = None,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
        sort: Optional[int] = None,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        radius: Optional[int] = None,
    ) -> VkCollection:
        """
        sort: 0 按点赞数，1 按时间（默认）
        """
        params = (
            VkParameters()
            .add("q", query)
            .add("lat", lat)
            .add("long", longitude)
            .add("start_time", start_time)
            .add("end_time", end_time)
            .add("sort", sort)
            .add("offset", offset)
            .add("count", count)
            .add("radius", radius)
        )
        return self._collection(Photo, "photos.search", params)

    def edit(
        self, photo_id: int, owner_id: Optional[int] = None, caption: Optional[str] = None
    ) -> bool:
        params = (
            VkParameters()
            .require("photo_id", photo_id)
            .add("owner_id", owner_id)
            .add("caption", caption)
        )
        return self._flag("photos.edit", params)

    def delete(self, photo_id: int, owner_id: Optional[int] = None) -> bool:
        params = VkParameters().require("photo_id", photo_id).add("owner_id", owner_id)
        return self._flag("photos.delete", params)

    def restore(self, photo_id: int, owner_id: Optional[int] = None) -> bool:
        params = VkParameters().require("photo_id", photo_id).add("owner_id", owner_id)
        return self._flag("photos.restore", params)

    def make_cover(
        self,
        photo_id: int,
        owner_id: Optional[int] = None,
        album_id: Optional[int] = None,
    ) -> bool:
        params = (
            VkParameters()
            .require("photo_id", photo_id)
            .add("owner_id", owner_id)
            .add("album_id", album_id)
        )
        return self._flag("photos.makeCover", params)

    def move(
        self, target_album_id: int, photo_id: int, owner_id: Optional[int] = None
    ) -> bool:
        params = (
            VkParameters()
            .require("target_album_id", target_album_id)
            .require("photo_id", photo_id)
            .add("owner_id", owner_id)
        )
        return self._flag("photos.move", params)

    def copy(self, owner_id: int, photo_id: int, access_key: Optional[str] = None) -> int:
        """
        复制到“已保存的照片”，返回新照片的 id
        """
        params = (
            VkParameters()
            .require("owner_id", owner_id)
            .require("photo_id", photo_id)
            .add("access_key", access_key)
        )
        return self._int("photos.copy", params)

    # ---------------------------------------------------------------- tags

    def get_tags(
        self,
        photo_id: int,
        owner_id: Optional[int] = None,
        access_key: Optional[str] = None,
    ) -> VkCollection:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .require("photo_id", photo_id)
            .add("access_key", access_key)
        )
        return self._array(PhotoTag, "photos.getTags", params)

    def put_tag(
        self,
        photo_id: int,
        user_id: int,
        owner_id: Optional[int] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
        x2: Optional[float] = None,
        y2: Optional[float] = None,
    ) -> int:
        """
        x/y/x2/y2 为标记框相对照片尺寸的百分比，返回新标记的 id
        """
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .require("photo_id", photo_id)
            .require("user_id", user_id)
            .add("x", x)
            .add("y", y)
            .add("x2", x2)
            .add("y2", y2)
        )
        return self._int("photos.putTag", params)

    def remove_tag(self, photo_id: int, tag_id: int, owner_id: Optional[int] = None) -> bool:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .require("photo_id", photo_id)
            .require("tag_id", tag_id)
        )
        return self._flag("photos.removeTag", params)

    # ---------------------------------------------------------------- comments

    def get_comments(
        self,
        photo_id: int,
        owner_id: Optional[int] = None,
        need_likes: bool = False,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        sort: Optional[str] = None,
        access_key: Optional[str] = None,
    ) -> VkCollection:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .require("photo_id", photo_id)
            .add("need_likes", need_likes)
            .add("offset", offset)
            .add("count", count)
            .add("sort", sort)
            .add("access_key", access_key)
        )
        return self._collection(PhotoComment, "photos.getComments", params)

    def create_comment(
        self,
        photo_id: int,
        message: str,
        owner_id: Optional[int] = None,
        from_group: bool = False,
    ) -> int:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .require("photo_id", photo_id)
            .require("message", message)
            .add("from_group", from_group)
        )
        return self._int("photos.createComment", params)

    def delete_comment(self, comment_id: int, owner_id: Optional[int] = None) -> bool:
        params = (
            VkParameters()
            .add("owner_id", owner_id)
            .require("comment_id", comment_id)
        )
        return self._flag("photos.deleteComment", params)
