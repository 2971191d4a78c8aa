from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from vkphoto.errors import MappingError
from vkphoto.mapper import map_entity
from vkphoto.model import Photo, PhotoAlbum, UploadServerInfo
from vkphoto.model.wire import decode_wire_bool, to_single


def test_to_single():
    assert to_single(29.999996) == 29.999996185302734
    assert to_single(29.942251) == 29.942251205444336
    assert to_single(30) == 30.0
    with pytest.raises(ValueError):
        to_single("30")
    with pytest.raises(ValueError):
        to_single(1e300)


def test_decode_wire_bool():
    assert decode_wire_bool(1) is True
    assert decode_wire_bool(0) is False
    with pytest.raises(ValueError):
        decode_wire_bool(False)


def test_timestamps_follow_given_timezone():
    data = {
        "id": 1,
        "thumb_id": -1,
        "owner_id": 2,
        "title": "t",
        "created": 1403185184,
        "updated": 1403185184,
        "size": 0,
    }
    utc = map_entity(PhotoAlbum, data, ZoneInfo("UTC"))
    assert utc.created == datetime(2014, 6, 19, 13, 39, 44, tzinfo=ZoneInfo("UTC"))

    local = map_entity(PhotoAlbum, data)
    assert local.created == datetime.fromtimestamp(1403185184)
    assert local.created.tzinfo is None


def test_absent_nested_objects_are_none():
    photo = map_entity(Photo, {"id": 1, "album_id": 2, "owner_id": 3, "date": 0})
    assert photo.likes is None
    assert photo.comments is None
    assert photo.tags is None
    assert photo.can_comment is None
    assert photo.text is None


def test_nested_zero_count_is_not_absent():
    photo = map_entity(
        Photo, {"id": 1, "album_id": 2, "owner_id": 3, "date": 0, "tags": {"count": 0}}
    )
    assert photo.tags is not None
    assert photo.tags.count == 0


def test_get_url_prefers_largest_variant():
    photo = map_entity(
        Photo,
        {
            "id": 1,
            "album_id": 2,
            "owner_id": 3,
            "date": 0,
            "photo_75": "http://vk.me/s.jpg",
            "photo_807": "http://vk.me/y.jpg",
        },
    )
    assert photo.get_url() == "http://vk.me/y.jpg"


def test_out_of_range_coordinate_is_mapping_error():
    assert to_single(float("inf")) == float("inf")
    with pytest.raises(MappingError):
        map_entity(
            Photo, {"id": 1, "album_id": 2, "owner_id": 3, "date": 0, "lat": 1e300}
        )


def test_urls_are_kept_verbatim():
    photo = map_entity(
        Photo,
        {
            "id": 1,
            "album_id": 2,
            "owner_id": 3,
            "date": 0,
            "photo_75": "http://cs618026.vk.com",
            "photo_130": "http://cs618026.vk.com/a b.jpg",
        },
    )
    assert photo.photo_75 == "http://cs618026.vk.com"
    assert photo.photo_130 == "http://cs618026.vk.com/a b.jpg"

    info = map_entity(UploadServerInfo, {"upload_url": "http://cs618026.vk.com"})
    assert info.upload_url == "http://cs618026.vk.com"


@pytest.mark.parametrize("url", ["/upload.php", "ftp://vk.com/a.jpg", 75])
def test_invalid_url_is_mapping_error(url):
    with pytest.raises(MappingError):
        map_entity(UploadServerInfo, {"upload_url": url})


def test_system_album_without_timestamps():
    album = map_entity(PhotoAlbum, {"id": -7, "owner_id": 1, "title": "wall", "size": 2})
    assert album.thumb_id is None
    assert album.created is None
    assert album.updated is None
