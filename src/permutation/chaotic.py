# -*- coding: utf-8 -*-
"""
帐篷映射混沌置换
文件路径: src/permutation/chaotic.py
"""

import math
import numpy as np
from src.config import Config
from src.permutation.algebra import normalize
from src.utils.logger import setup_logger

logger = setup_logger("Chaotic")


def tent_map(x, mu=Config.TENT_MU):
    """f(x) = mu*x (x < 0.5)，否则 mu*(1-x)"""
    return mu * x if x < 0.5 else mu * (1.0 - x)


def tent_map_sequence(n, seed, mu=Config.TENT_MU):
    """
    从种子的小数部分出发迭代帐篷映射，收集 x_1 ... x_n
    同一条混沌轨道连续迭代，而不是每个像素独立取值。
    必须使用双精度逐次计算，任何舍入差异都会改变整个置换。
    """
    x = float(seed) - math.floor(seed)
    scores = np.empty(n, dtype=np.float64)
    for k in range(n):
        x = tent_map(x, mu)
        scores[k] = x
    return scores


def generate_chaotic_permutation(n, seed, mu=Config.TENT_MU):
    """
    混沌分数经稳定排序得到秩约定的置换 (相同分数按下标升序)
    """
    scores = tent_map_sequence(n, seed, mu)
    logger.debug(f"n={n}, seed={seed!r}, mu={mu}")
    return normalize(scores)
