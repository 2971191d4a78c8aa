import os
from zoneinfo import ZoneInfo

import pytest
from aiohttp import web
from aiohttp import test_utils

from vkphoto import downloader
from vkphoto.downloader import build_save_path, download_photos, download_photos_async
from vkphoto.mapper import map_entity
from vkphoto.model import Photo

JPEG = b"\xff\xd8\xff" + b"x" * 4096


def make_photo(**extra):
    data = {"id": 7, "album_id": -6, "owner_id": 1, "date": 1403185184}
    data.update(extra)
    return map_entity(Photo, data, ZoneInfo("Europe/Moscow"))


def saved_files(root):
    return sorted(p.name for p in root.rglob("*") if p.is_file())


@pytest.fixture
def image_app(monkeypatch):
    monkeypatch.setattr(downloader, "RETRY_DELAY", 0)
    hits = {"ok": 0, "broken": 0, "truncated": 0, "flaky": 0}

    async def ok(request):
        hits["ok"] += 1
        return web.Response(body=JPEG, content_type="image/jpeg")

    async def broken(request):
        hits["broken"] += 1
        return web.Response(status=500)

    async def truncated(request):
        # 声明的长度比实际发送的多，发到一半断开连接
        hits["truncated"] += 1
        resp = web.StreamResponse(headers={"Content-Length": "100000"})
        await resp.prepare(request)
        await resp.write(b"x" * 5000)
        request.transport.close()
        return resp

    async def flaky(request):
        hits["flaky"] += 1
        if hits["flaky"] == 1:
            return web.Response(status=503)
        return web.Response(body=JPEG, content_type="image/jpeg")

    app = web.Application()
    app.router.add_get("/ok.jpg", ok)
    app.router.add_get("/broken.jpg", broken)
    app.router.add_get("/truncated.jpg", truncated)
    app.router.add_get("/flaky.jpg", flaky)
    return app, hits


def test_build_save_path():
    path = build_save_path(make_photo(), "images")
    assert path == os.path.join("images", "201406", "1403185184_1_7.jpg")


def test_photos_without_url_are_skipped(tmp_path):
    # 没有可下载的链接时不会发出任何请求
    assert download_photos([make_photo()], str(tmp_path)) == []
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_download_saves_largest_variant(tmp_path, image_app):
    app, hits = image_app
    async with test_utils.TestServer(app) as server:
        photo = make_photo(
            photo_75=str(server.make_url("/broken.jpg")),
            photo_604=str(server.make_url("/ok.jpg")),
        )
        saved = await download_photos_async([photo], str(tmp_path))

    path = build_save_path(photo, str(tmp_path))
    assert saved == [path]
    with open(path, "rb") as f:
        assert f.read() == JPEG
    assert hits["ok"] == 1
    assert hits["broken"] == 0
    assert saved_files(tmp_path) == ["1403185184_1_7.jpg"]


@pytest.mark.asyncio
async def test_server_error_is_retried_then_given_up(tmp_path, image_app):
    app, hits = image_app
    async with test_utils.TestServer(app) as server:
        photo = make_photo(photo_604=str(server.make_url("/broken.jpg")))
        saved = await download_photos_async([photo], str(tmp_path))

    assert saved == []
    assert hits["broken"] == downloader.MAX_RETRIES
    assert saved_files(tmp_path) == []


@pytest.mark.asyncio
async def test_retry_after_server_error_succeeds(tmp_path, image_app):
    app, hits = image_app
    async with test_utils.TestServer(app) as server:
        photo = make_photo(photo_604=str(server.make_url("/flaky.jpg")))
        saved = await download_photos_async([photo], str(tmp_path))

    assert saved == [build_save_path(photo, str(tmp_path))]
    assert hits["flaky"] == 2
    assert saved_files(tmp_path) == ["1403185184_1_7.jpg"]


@pytest.mark.asyncio
async def test_truncated_body_leaves_no_file(tmp_path, image_app):
    app, hits = image_app
    async with test_utils.TestServer(app) as server:
        good = make_photo(id=8, photo_604=str(server.make_url("/ok.jpg")))
        cut = make_photo(id=9, photo_604=str(server.make_url("/truncated.jpg")))
        saved = await download_photos_async([good, cut], str(tmp_path))

    assert saved == [build_save_path(good, str(tmp_path))]
    assert hits["truncated"] == downloader.MAX_RETRIES
    # 既没有半截的 .jpg，也没有残留的 .part
    assert saved_files(tmp_path) == ["1403185184_1_8.jpg"]
