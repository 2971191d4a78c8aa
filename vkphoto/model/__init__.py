from vkphoto.model.album import PhotoAlbum
from vkphoto.model.collection import VkCollection
from vkphoto.model.envelope import VkErrorBody
from vkphoto.model.photo import (
    Comments,
    Likes,
    Photo,
    PhotoComment,
    PhotoSize,
    PhotoTag,
    Tags,
)
from vkphoto.model.upload import UploadedPhotos, UploadServerInfo

__all__ = [
    "Comments",
    "Likes",
    "Photo",
    "PhotoAlbum",
    "PhotoComment",
    "PhotoSize",
    "PhotoTag",
    "Tags",
    "UploadServerInfo",
    "UploadedPhotos",
    "VkCollection",
    "VkErrorBody",
]
