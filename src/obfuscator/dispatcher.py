# -*- coding: utf-8 -*-
"""
置乱算法调度器
文件路径: src/obfuscator/dispatcher.py

按算法标识选择置换生成策略，返回源索引约定的置换，再交给 apply 重排像素。

| 编号 | 标识                  | 构造方式                          |
|------|-----------------------|-----------------------------------|
| 0    | compact-forward       | invert(normalize(紧凑 Hilbert 分数)) |
| 1    | compact-inverse       | normalize(紧凑 Hilbert 分数)        |
| 2    | gilbert-shift-forward | 黄金比例平移，加密构造              |
| 3    | gilbert-shift-inverse | 黄金比例平移，解密构造              |
| 4    | chaotic-forward       | normalize(帐篷映射分数)             |
| 5    | chaotic-inverse       | invert(chaotic-forward)            |
"""

import math
import numbers
from enum import Enum

import numpy as np

from src.config import Config
from src.permutation.algebra import normalize, invert, apply, validate_dimensions, validate_permutation
from src.permutation.compact_hilbert import generate_compact_scores
from src.permutation.gilbert import generate_gilbert_shift_permutation
from src.permutation.chaotic import generate_chaotic_permutation
from src.permutation.errors import InvalidDimensions, UnknownAlgorithm, InvalidSeed
from src.utils.logger import setup_logger

logger = setup_logger("Dispatcher")


class Algorithm(Enum):
    COMPACT_FORWARD = "compact-forward"
    COMPACT_INVERSE = "compact-inverse"
    GILBERT_SHIFT_FORWARD = "gilbert-shift-forward"
    GILBERT_SHIFT_INVERSE = "gilbert-shift-inverse"
    CHAOTIC_FORWARD = "chaotic-forward"
    CHAOTIC_INVERSE = "chaotic-inverse"

    @property
    def number(self):
        """
        与网页版下拉框编号对应 (0..5)
        注意: 混沌族方向与网页版相反，本工具的 4 对应网页版的 5，5 对应网页版的 4，
        因此解开网页版 4 号置乱的图像应使用本工具的 4 号 (chaotic-forward)
        """
        return list(Algorithm).index(self)

    @property
    def uses_seed(self):
        return self in (Algorithm.CHAOTIC_FORWARD, Algorithm.CHAOTIC_INVERSE)

    @property
    def inverse(self):
        """同一族中与之配对的另一个方向"""
        return _INVERSE_PAIRS[self]

    @classmethod
    def parse(cls, algorithm_id):
        """
        接受 Algorithm 成员、标识字符串或编号 0..5 (也接受 "0".."5")
        """
        if isinstance(algorithm_id, cls):
            return algorithm_id
        if isinstance(algorithm_id, str):
            key = algorithm_id.strip().lower()
            if key.isdigit():
                return cls._from_number(int(key), algorithm_id)
            try:
                return cls(key)
            except ValueError:
                raise UnknownAlgorithm(algorithm_id) from None
        if isinstance(algorithm_id, numbers.Integral) and not isinstance(algorithm_id, bool):
            return cls._from_number(int(algorithm_id), algorithm_id)
        raise UnknownAlgorithm(algorithm_id)

    @classmethod
    def _from_number(cls, number, original):
        members = list(cls)
        if 0 <= number < len(members):
            return members[number]
        raise UnknownAlgorithm(original)


_INVERSE_PAIRS = {
    Algorithm.COMPACT_FORWARD: Algorithm.COMPACT_INVERSE,
    Algorithm.COMPACT_INVERSE: Algorithm.COMPACT_FORWARD,
    Algorithm.GILBERT_SHIFT_FORWARD: Algorithm.GILBERT_SHIFT_INVERSE,
    Algorithm.GILBERT_SHIFT_INVERSE: Algorithm.GILBERT_SHIFT_FORWARD,
    Algorithm.CHAOTIC_FORWARD: Algorithm.CHAOTIC_INVERSE,
    Algorithm.CHAOTIC_INVERSE: Algorithm.CHAOTIC_FORWARD,
}


def _validate_seed(seed):
    if isinstance(seed, bool) or not isinstance(seed, numbers.Real):
        raise InvalidSeed(seed)
    seed = float(seed)
    if not math.isfinite(seed):
        raise InvalidSeed(seed)
    if seed == math.floor(seed):
        logger.warning(f"Seed {seed!r} has no fractional part; the tent map stays at 0 and "
                       f"the chaotic permutation is the identity")
    return seed


def _compact_forward(width, height, seed):
    return invert(normalize(generate_compact_scores(width, height)))


def _compact_inverse(width, height, seed):
    return normalize(generate_compact_scores(width, height))


def _gilbert_forward(width, height, seed):
    return generate_gilbert_shift_permutation(width, height, decrypt=False)


def _gilbert_inverse(width, height, seed):
    return generate_gilbert_shift_permutation(width, height, decrypt=True)


def _chaotic_forward(width, height, seed):
    return generate_chaotic_permutation(width * height, seed)


def _chaotic_inverse(width, height, seed):
    return invert(generate_chaotic_permutation(width * height, seed))


_BUILDERS = {
    Algorithm.COMPACT_FORWARD: _compact_forward,
    Algorithm.COMPACT_INVERSE: _compact_inverse,
    Algorithm.GILBERT_SHIFT_FORWARD: _gilbert_forward,
    Algorithm.GILBERT_SHIFT_INVERSE: _gilbert_inverse,
    Algorithm.CHAOTIC_FORWARD: _chaotic_forward,
    Algorithm.CHAOTIC_INVERSE: _chaotic_inverse,
}


def build_permutation(width, height, algorithm_id, seed=Config.DEFAULT_SEED):
    """
    生成源索引约定的置换
    参数:
        width, height: 网格宽高
        algorithm_id: Algorithm、标识字符串或编号
        seed: 混沌族使用的种子，其余算法忽略
    返回:
        np.ndarray (int64)，长度 width*height
    """
    algorithm = Algorithm.parse(algorithm_id)
    width, height = validate_dimensions(width, height)
    if algorithm.uses_seed:
        seed = _validate_seed(seed)

    perm = _BUILDERS[algorithm](width, height, seed)
    return validate_permutation(perm, width * height)


def run_obfuscation(pixels, width, height, algorithm_id, seed=Config.DEFAULT_SEED):
    """
    对 RGBA 像素缓冲区执行置乱，返回同尺寸的新缓冲区
    所有参数检查在任何生成器运行之前完成。
    """
    algorithm = Algorithm.parse(algorithm_id)
    width, height = validate_dimensions(width, height)
    pixels = np.asarray(pixels)
    if pixels.size != width * height * Config.CHANNELS:
        raise InvalidDimensions(width, height, pixels.size)

    perm = build_permutation(width, height, algorithm, seed)
    out = apply(pixels, perm, width, height)
    logger.info(f"Done. Algorithm {algorithm.number} ({algorithm.value}) applied on {width * height} pixels.")
    return out
