# -*- coding: utf-8 -*-
"""
置乱模块的异常类型
"""

from src.config import Config


class ObfuscationError(ValueError):
    """所有置乱错误的基类"""


class InvalidDimensions(ObfuscationError):
    """宽高非正，或与像素缓冲区长度不匹配"""

    def __init__(self, width, height, buffer_size=None):
        self.width = width
        self.height = height
        self.buffer_size = buffer_size
        # 字节数不是 4 的倍数时没有整数像素数
        if buffer_size is not None and buffer_size % Config.CHANNELS == 0:
            self.pixel_count = buffer_size // Config.CHANNELS
        else:
            self.pixel_count = None

        if buffer_size is None:
            msg = f"Invalid dimensions {width}x{height}: width and height must be positive integers"
        elif self.pixel_count is not None:
            msg = (f"Invalid dimensions {width}x{height}: expected {width * height} pixels, "
                   f"buffer holds {self.pixel_count}")
        else:
            msg = (f"Invalid dimensions {width}x{height}: expected {width * height * Config.CHANNELS} bytes, "
                   f"buffer holds {buffer_size} bytes (not a whole number of RGBA pixels)")
        super().__init__(msg)


class UnknownAlgorithm(ObfuscationError):
    """未知的算法标识"""

    def __init__(self, algorithm_id):
        self.algorithm_id = algorithm_id
        super().__init__(f"Unknown algorithm: {algorithm_id!r}")


class InvariantViolation(ObfuscationError):
    """生成的数组不是 [0, N) 上的双射，说明实现存在缺陷"""


class InvalidSeed(ObfuscationError):
    """种子不是有限实数"""

    def __init__(self, seed):
        self.seed = seed
        super().__init__(f"Invalid seed {seed!r}: must be a finite real number")
