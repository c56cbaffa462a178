# -*- coding: utf-8 -*-
"""
日志工具
文件路径: src/utils/logger.py

统一输出格式为 "[模块名] 消息"，与命令行工具的输出风格保持一致。
"""

import logging
from src.config import Config

_FORMAT = "[%(name)s] %(message)s"


def setup_logger(name, level=None):
    """
    获取（并在首次调用时配置）一个模块日志器
    参数:
        name: 日志器名称，会显示在方括号内
        level: 日志级别，默认取 Config.LOG_LEVEL
    返回:
        logging.Logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level or Config.LOG_LEVEL)
    return logger
