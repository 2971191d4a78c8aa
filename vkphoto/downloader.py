# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-13 15:40:08
# @Desc:   并发下载照片原图

import argparse
import asyncio
import os
from logging import Logger
from typing import Iterable, List, Optional

import aiohttp
from aiohttp import ClientSession

from vkphoto.api import VkApi
from vkphoto.config import VkConfig
from vkphoto.model import Photo
from vkphoto.utils.logger import get_logger

MAX_RETRIES = 3
CONCURRENT_LIMIT = 10
RETRY_DELAY = 0.5


def remove_partial(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)


def build_save_path(photo: Photo, save_dir: str) -> str:
    """
    <save_dir>/<YYYYMM>/<unix时间>_<owner_id>_<id>.jpg
    """
    month = photo.date.strftime("%Y%m")
    timestamp = int(photo.date.timestamp())
    return os.path.join(
        save_dir, month, f"{timestamp}_{photo.owner_id}_{photo.id}.jpg"
    )


async def download_image(
    session: ClientSession,
    url: str,
    save_path: str,
    sem: asyncio.Semaphore,
    logger: Logger,
) -> bool:
    # 先写到 .part，读完整个响应再改名，失败时不留下半截文件
    part_path = f"{save_path}.part"
    async with sem:
        for attempt in range(1, MAX_RETRIES + 1):
            try:
                async with session.get(url) as resp:
                    if resp.status != 200:
                        logger.warning(f"⚠️ status {resp.status}, attempt {attempt}: {url}")
                    else:
                        os.makedirs(os.path.dirname(save_path), exist_ok=True)
                        with open(part_path, "wb") as f:
                            while True:
                                chunk = await resp.content.read(1024)
                                if not chunk:
                                    break
                                f.write(chunk)
                        os.replace(part_path, save_path)
                        logger.info(f"✅ Downloaded: {os.path.basename(save_path)}")
                        return True
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(f"⚠️ {url}, attempt {attempt}, error: {e}")
                remove_partial(part_path)
            await asyncio.sleep(RETRY_DELAY)

        logger.error(f"❌ Failed: {url}")
        return False


async def download_photos_async(
    photos: Iterable[Photo],
    save_dir: str,
    concurrency: int = CONCURRENT_LIMIT,
    logger: Optional[Logger] = None,
) -> List[str]:
    logger = logger or get_logger()
    sem = asyncio.Semaphore(concurrency)
    jobs = []
    for photo in photos:
        url = photo.get_url()
        if not url:
            logger.warning(f"⚠️ {photo.owner_id}_{photo.id} has no valid URL, skip!")
            continue
        jobs.append((url, build_save_path(photo, save_dir)))

    async with aiohttp.ClientSession() as session:
        results = await asyncio.gather(
            *[download_image(session, url, path, sem, logger) for url, path in jobs]
        )
    return [path for (_, path), ok in zip(jobs, results) if ok]


def download_photos(
    photos: Iterable[Photo],
    save_dir: str,
    concurrency: int = CONCURRENT_LIMIT,
    logger: Optional[Logger] = None,
) -> List[str]:
    """
    下载每张照片尺寸最大的版本，返回保存成功的文件路径
    """
    return asyncio.run(download_photos_async(photos, save_dir, concurrency, logger))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="下载 VK 相册中的照片",
        epilog="例如：python -m vkphoto.downloader --owner-id 1 --album-id profile",
    )
    parser.add_argument("--owner-id", type=int, required=True, help="用户或社区 id")
    parser.add_argument("--album-id", default="profile", help="相册 id 或 wall/profile/saved")
    parser.add_argument("--count", type=int, default=50, help="最多下载多少张")
    parser.add_argument("--token", required=False, help="VK access token")
    parser.add_argument("--output", default="images", help="保存目录")
    args = parser.parse_args(argv)

    config = VkConfig.from_env()
    if args.token:
        config = config.model_copy(update={"access_token": args.token})

    api = VkApi.from_config(config)
    logger = api.logger
    if not config.access_token:
        logger.warning("Empty access token!")
        return

    photos = api.photos.get(
        owner_id=args.owner_id, album_id=args.album_id, rev=True, count=args.count
    )
    logger.info(f"📥 {len(photos)} of {photos.total_count} photos to download")
    save_dir = os.path.join(args.output, str(args.owner_id))
    saved = download_photos(photos, save_dir, logger=logger)
    logger.info(f"✅ Saved {len(saved)} files to {save_dir}")


if __name__ == "__main__":
    main()
