# -*- coding: utf-8 -*-
"""
图像读写模块
文件路径: src/obfuscator/img_process.py

置乱核心只处理 RGBA 像素缓冲区，本模块负责其外围工作：
1. 读取任意图像并转换为 RGBA (H, W, 4)
2. 记录原始容器格式与文件名
3. 按原格式导出 (PNG / JPEG)，含透明像素的 JPEG 改存 PNG
"""

import os
import cv2
import numpy as np
from PIL import Image
from src.config import Config

_EXIF_ORIENTATION = 0x0112


class ImageProcessor:
    """
    图像读写类，提供 RGBA 缓冲区与图像文件之间的转换
    """

    def read_image(self, image_path):
        """
        读取图像为 RGBA
        参数:
            image_path: 图像路径
        返回:
            numpy.ndarray: (H, W, 4) uint8，RGBA 顺序
        """
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Image file does not exist: {image_path}")

        img = cv2.imread(image_path, cv2.IMREAD_UNCHANGED)
        if img is None:
            raise ValueError(f"Cannot read image: {image_path}")

        # IMREAD_UNCHANGED 不处理 EXIF 方向，需按标签自行摆正
        rgba = self.to_rgba(img)
        return self.apply_orientation(rgba, self.exif_orientation(image_path))

    def exif_orientation(self, image_path):
        """
        读取 EXIF 方向标签 (0x0112)
        返回:
            int: 1..8，无标签或无法识别时为 1
        """
        try:
            with Image.open(image_path) as img:
                orientation = img.getexif().get(_EXIF_ORIENTATION, 1)
        except (IOError, SyntaxError):
            return 1
        return orientation if orientation in range(1, 9) else 1

    def apply_orientation(self, image, orientation):
        """
        按 EXIF 方向把 (H, W, C) 矩阵转为显示方向，与 ImageOps.exif_transpose 一致
        """
        if orientation == 2:
            image = np.fliplr(image)
        elif orientation == 3:
            image = np.rot90(image, 2)
        elif orientation == 4:
            image = np.flipud(image)
        elif orientation == 5:
            image = image.transpose(1, 0, 2)
        elif orientation == 6:
            image = np.rot90(image, -1)
        elif orientation == 7:
            image = np.rot90(image.transpose(1, 0, 2), 2)
        elif orientation == 8:
            image = np.rot90(image, 1)
        return np.ascontiguousarray(image)

    def to_rgba(self, image):
        """
        将 OpenCV 读出的灰度 / BGR / BGRA 矩阵转换为 RGBA
        """
        if image.dtype != np.uint8:
            # 16 位 PNG 等，缩放到 8 位
            image = cv2.convertScaleAbs(image, alpha=255.0 / np.iinfo(image.dtype).max)

        if image.ndim == 2:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        channels = image.shape[2]
        if channels == 1:
            return cv2.cvtColor(image[:, :, 0], cv2.COLOR_GRAY2RGBA)
        if channels == 3:
            return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
        if channels == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
        raise ValueError(f"Unsupported channel count: {channels}")

    def detect_format(self, image_path):
        """
        识别容器格式
        返回:
            str: 'PNG'、'JPEG' 或其他 Pillow 格式名，无法识别时为 None
        """
        try:
            with Image.open(image_path) as img:
                return img.format
        except (IOError, SyntaxError):
            return None

    def has_transparency(self, rgba):
        """是否存在 alpha != 255 的像素"""
        return bool(np.any(rgba[..., 3] != 255))

    def choose_output_format(self, source_format, rgba):
        """
        导出格式: PNG 保持 PNG，JPEG 保持 JPEG (有透明像素时改为 PNG)，其余一律 PNG
        """
        if source_format == 'JPEG' and not self.has_transparency(rgba):
            return 'JPEG'
        return 'PNG'

    def output_filename(self, source_path, output_format):
        """
        输出文件名: <原文件名去扩展名>_out.<png|jpg>
        """
        stem = os.path.splitext(os.path.basename(source_path or ""))[0]
        if not stem:
            stem = Config.DEFAULT_OUTPUT_STEM
        ext = 'jpg' if output_format == 'JPEG' else 'png'
        return f"{stem}{Config.OUTPUT_SUFFIX}.{ext}"

    def save_image(self, rgba, output_path, output_format='PNG'):
        """
        保存 RGBA 图像
        参数:
            rgba: (H, W, 4) uint8
            output_path: 输出路径
            output_format: 'PNG' 或 'JPEG'
        返回:
            bool: 保存是否成功
        """
        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir, exist_ok=True)

        # cv2.imwrite 按扩展名选择编码器
        if output_format == 'JPEG':
            bgr = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGR)
            return cv2.imwrite(output_path, bgr, [cv2.IMWRITE_JPEG_QUALITY, Config.JPEG_QUALITY])
        bgra = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)
        return cv2.imwrite(output_path, bgra)

    def get_image_info(self, image):
        """
        获取图像信息
        """
        h, w = image.shape[:2]
        channels = image.shape[2] if len(image.shape) > 2 else 1

        return {
            'height': h,
            'width': w,
            'channels': channels,
            'pixels': h * w,
            'dtype': str(image.dtype)
        }
