# -*- coding: utf-8 -*-
"""
紧凑 Hilbert 索引生成器
文件路径: src/permutation/compact_hilbert.py

对任意宽高 (不要求为 2 的幂，也不要求相等) 的网格，为每个单元计算保持局部性的
Hilbert 索引。两个轴各自使用自己的位精度：某一位层上只有一个轴有效时只输出 1 位。

输出是分数数组而不是置换，不同精度轴之间可能出现重复值，需要再经过 normalize。
"""

import numpy as np
from src.utils.logger import setup_logger

logger = setup_logger("CompactHilbert")

# 变换后的 2 位标签 t -> 输出值 r
_GRAY_RANK = (0, 1, 3, 2)


def axis_precision(n):
    """prec(n) = ceil(log2(n))，n <= 1 时为 0"""
    if n <= 1:
        return 0
    return (int(n) - 1).bit_length()


def compact_index(x, y, w_prec, h_prec):
    """
    计算单个单元 (x, y) 的紧凑 Hilbert 索引
    旋转状态 d 与反射状态 e 仅在本次计算内有效
    """
    max_prec = max(w_prec, h_prec)
    h_c = 0
    d = 0
    e = 0

    for i in range(max_prec - 1, -1, -1):
        x_active = w_prec > i
        y_active = h_prec > i

        bx = (x >> i) & 1 if x_active else 0
        by = (y >> i) & 1 if y_active else 0

        label = (bx << 1) | by
        if d:
            label = (label >> 1) | ((label & 1) << 1)
        t = label ^ e

        if x_active and y_active:
            r = _GRAY_RANK[t]
            if r == 0:
                d ^= 1
            elif r == 3:
                d ^= 1
                e ^= 3
            h_c = (h_c << 2) | r
        elif x_active:
            h_c = (h_c << 1) | ((t >> (0 if d else 1)) & 1)
        elif y_active:
            h_c = (h_c << 1) | ((t >> (1 if d else 0)) & 1)

    return h_c


def generate_compact_scores(width, height):
    """
    按光栅顺序 (p = y*W + x) 生成整幅网格的紧凑 Hilbert 分数

    向量化实现：所有单元在同一位层上同步推进，每个单元各自持有 (d, e)，
    结果与逐个调用 compact_index 完全一致。
    返回:
        np.ndarray (int64)，长度 W*H
    """
    w_prec = axis_precision(width)
    h_prec = axis_precision(height)
    max_prec = max(w_prec, h_prec)

    yy, xx = np.indices((height, width), dtype=np.int64)
    xx = xx.ravel()
    yy = yy.ravel()
    n = xx.shape[0]

    h_c = np.zeros(n, dtype=np.int64)
    d = np.zeros(n, dtype=np.int64)
    e = np.zeros(n, dtype=np.int64)
    gray_rank = np.array(_GRAY_RANK, dtype=np.int64)

    for i in range(max_prec - 1, -1, -1):
        x_active = w_prec > i
        y_active = h_prec > i

        bx = (xx >> i) & 1 if x_active else np.zeros(n, dtype=np.int64)
        by = (yy >> i) & 1 if y_active else np.zeros(n, dtype=np.int64)

        label = (bx << 1) | by
        swapped = (label >> 1) | ((label & 1) << 1)
        t = np.where(d == 1, swapped, label) ^ e

        if x_active and y_active:
            r = gray_rank[t]
            flip = (r == 0) | (r == 3)
            d = np.where(flip, d ^ 1, d)
            e = np.where(r == 3, e ^ 3, e)
            h_c = (h_c << 2) | r
        elif x_active:
            shift = np.where(d == 1, 0, 1)
            h_c = (h_c << 1) | ((t >> shift) & 1)
        else:
            shift = np.where(d == 1, 1, 0)
            h_c = (h_c << 1) | ((t >> shift) & 1)

    logger.debug(f"{width}x{height}: precision w={w_prec} h={h_prec}, {n} scores")
    return h_c
