from vkphoto.api import VkApi
from vkphoto.config import VkConfig
from vkphoto.errors import ApiError, MappingError, TransportError, VkError
from vkphoto.photos import PhotosCategory
from vkphoto.request import VkParameters
from vkphoto.transport import RequestsTransport, Transport

__all__ = [
    "ApiError",
    "MappingError",
    "PhotosCategory",
    "RequestsTransport",
    "Transport",
    "TransportError",
    "VkApi",
    "VkConfig",
    "VkError",
    "VkParameters",
]

__version__ = "0.1.0"
