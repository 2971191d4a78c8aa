# -*- coding: utf-8 -*-
# @Author: Lewis Tian
# @Date:   2026-10-12 21:11:52

import logging
import os
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

import colorlog

LOG_FORMAT = "%(asctime)s - %(filename)s:%(lineno)d - %(levelname)s: %(message)s"
COLOR_LOG_FORMAT = (
    "%(log_color)s%(asctime)s-%(filename)s:%(lineno)d-%(levelname)s%(reset)s: %(message)s"
)


def get_logger(
    name: str = "vkphoto",
    log_dir: Optional[str] = None,
    when: str = "midnight",
    interval: int = 1,
    backup_count: int = 7,
    encoding: str = "utf-8",
) -> Logger:
    """
    获取一个预配置的 Logger：
    - 控制台输出（INFO及以上）
    - 指定 log_dir 时追加文件输出（DEBUG及以上），每天轮转

    同名 Logger 只会挂载一次 handler，重复调用直接返回。

    Args:
        name (str): Logger 名称。
        log_dir (str): 日志目录，None 时只输出到控制台。
        when (str): 轮转时间单位（默认每天 "midnight"）。
        interval (int): 轮转间隔数量，配合 when 使用。
        backup_count (int): 轮转后保留的文件数量。
        encoding (str): 写日志文件的编码，默认 utf-8。

    Returns:
        Logger: 配置好的 Logger 对象。
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    colorlog_formatter = colorlog.ColoredFormatter(
        COLOR_LOG_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    )

    # 控制台 handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(colorlog_formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, f"{name}.log"),
            when=when,
            interval=interval,
            backupCount=backup_count,
            encoding=encoding,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.suffix = "%Y-%m-%d"  # 文件名日期后缀
        logger.addHandler(file_handler)

    return logger
