# -*- coding: utf-8 -*-
import os
import time
import numpy as np

from src.config import Config
from src.obfuscator.dispatcher import Algorithm, run_obfuscation
from src.obfuscator.img_process import ImageProcessor
from src.utils.logger import setup_logger

logger = setup_logger("ImageObfuscator")


class ImageObfuscator:
    """
    图像置乱流程编排：读取 -> 置乱 (可多轮) -> 按原格式导出
    """

    def __init__(self, processor=None):
        self.processor = processor or ImageProcessor()

    def obfuscate(self, rgba, algorithm, seed=Config.DEFAULT_SEED, passes=1):
        """
        对 RGBA 矩阵执行置乱
        参数:
            rgba: (H, W, 4) uint8
            algorithm: Algorithm、标识字符串或编号
            seed: 混沌族种子
            passes: 连续执行的轮数，上一轮输出作为下一轮输入
        返回:
            numpy.ndarray: 新的 (H, W, 4) 矩阵
        """
        if isinstance(passes, bool) or not isinstance(passes, (int, np.integer)) or passes < 1:
            raise ValueError(f"passes must be a positive integer, got {passes!r}")

        algorithm = Algorithm.parse(algorithm)
        rgba = np.asarray(rgba)
        if rgba.ndim != 3 or rgba.shape[2] != Config.CHANNELS:
            raise ValueError(f"Expected an (H, W, {Config.CHANNELS}) RGBA array, got shape {rgba.shape}")
        h, w = rgba.shape[:2]

        out = rgba
        for _ in range(passes):
            out = run_obfuscation(out, w, h, algorithm, seed)
        return out

    def obfuscate_file(self, image_path, algorithm, seed=Config.DEFAULT_SEED, output_dir=None, passes=1):
        """
        读取图像文件、置乱并保存
        参数:
            image_path: 输入图像路径
            algorithm: Algorithm、标识字符串或编号
            seed: 混沌族种子
            output_dir: 输出目录，默认 Config.OUTPUT_DIR
            passes: 连续执行的轮数
        返回:
            str: 输出文件路径
        """
        start = time.time()
        if output_dir is None:
            output_dir = Config.OUTPUT_DIR

        rgba = self.processor.read_image(image_path)
        source_format = self.processor.detect_format(image_path)
        info = self.processor.get_image_info(rgba)
        logger.info(f"Loaded {os.path.basename(image_path)} ({info['width']}x{info['height']}, {source_format}).")

        out = self.obfuscate(rgba, algorithm, seed, passes)

        output_format = self.processor.choose_output_format(source_format, out)
        output_path = os.path.join(output_dir, self.processor.output_filename(image_path, output_format))
        if not self.processor.save_image(out, output_path, output_format):
            raise ValueError(f"Failed to encode image: {output_path}")

        logger.info(f"Saved {output_path} in {time.time() - start:.4f}s.")
        return output_path
