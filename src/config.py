# -*- coding: utf-8 -*-
import os
import math

class Config:
    """
    系统全局配置 - 像素置乱参数
    """

    # --- 路径配置 ---
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    DATA_DIR = os.path.join(BASE_DIR, "data")
    # 仅用于源码目录内直接调用 ImageObfuscator；命令行默认写到当前工作目录
    OUTPUT_DIR = os.path.join(DATA_DIR, "obfuscated")
    CLI_OUTPUT_DIRNAME = "obfuscated"

    # --- 像素缓冲区 ---
    CHANNELS = 4              # RGBA

    # --- 混沌映射参数 ---
    # 略小于 2.0，避免帐篷映射落入不动点
    TENT_MU = 1.9999
    DEFAULT_SEED = 0.123456

    # --- Gilbert 曲线平移 ---
    GOLDEN_RATIO_CONJUGATE = (math.sqrt(5) - 1) / 2

    # --- 导出参数 ---
    JPEG_QUALITY = 92
    OUTPUT_SUFFIX = "_out"
    DEFAULT_OUTPUT_STEM = "obfusimg_out"

    # --- 日志 ---
    LOG_LEVEL = os.environ.get("OBFUSIMG_LOG_LEVEL", "INFO")
