# -*- coding: utf-8 -*-
"""
Gilbert 曲线遍历与黄金比例平移置换
文件路径: src/permutation/gilbert.py

Gilbert 曲线是广义 Hilbert 曲线，可覆盖任意矩形 (不要求 2 的幂)。
当前矩形由原点 (x, y)、主轴向量 a=(ax, ay) 与正交轴向量 b=(bx, by) 描述。
"""

import math
import numpy as np
from src.config import Config
from src.permutation.algebra import validate_dimensions
from src.utils.logger import setup_logger

logger = setup_logger("Gilbert")


def _sign(v):
    return (v > 0) - (v < 0)


def gilbert2d(width, height):
    """
    生成覆盖 width x height 网格的 Gilbert 曲线
    返回:
        list of (x, y)，长度 width*height，相邻两项在网格上相邻
    """
    width, height = validate_dimensions(width, height)
    coordinates = []
    if width >= height:
        _generate2d(0, 0, width, 0, 0, height, coordinates)
    else:
        _generate2d(0, 0, 0, height, width, 0, coordinates)
    return coordinates


def _generate2d(x, y, ax, ay, bx, by, coordinates):
    w = abs(ax + ay)
    h = abs(bx + by)

    dax, day = _sign(ax), _sign(ay)
    dbx, dby = _sign(bx), _sign(by)

    if h == 1:
        # 单行
        for _ in range(w):
            coordinates.append((x, y))
            x += dax
            y += day
        return

    if w == 1:
        # 单列
        for _ in range(h):
            coordinates.append((x, y))
            x += dbx
            y += dby
        return

    ax2, ay2 = ax // 2, ay // 2
    bx2, by2 = bx // 2, by // 2

    w2 = abs(ax2 + ay2)
    h2 = abs(bx2 + by2)

    if 2 * w > 3 * h:
        # 保持子矩形的长边为偶数
        if (w2 % 2) and (w > 2):
            ax2 += dax
            ay2 += day

        # 狭长矩形：沿主轴一分为二
        _generate2d(x, y, ax2, ay2, bx, by, coordinates)
        _generate2d(x + ax2, y + ay2, ax - ax2, ay - ay2, bx, by, coordinates)

    else:
        if (h2 % 2) and (h > 2):
            bx2 += dbx
            by2 += dby

        # 标准情形：上半步、整段主轴、镜像的下半步
        _generate2d(x, y, bx2, by2, ax2, ay2, coordinates)
        _generate2d(x + bx2, y + by2, ax, ay, bx - bx2, by - by2, coordinates)
        _generate2d(x + (ax - dax) + (bx2 - dbx),
                    y + (ay - day) + (by2 - dby),
                    -bx2, -by2, -(ax - ax2), -(ay - ay2),
                    coordinates)


def golden_offset(n):
    """offset = round(((sqrt(5) - 1) / 2) * n)，四舍五入取上"""
    return int(math.floor(Config.GOLDEN_RATIO_CONJUGATE * n + 0.5))


def generate_gilbert_shift_permutation(width, height, decrypt=False):
    """
    沿 Gilbert 曲线做黄金比例循环平移，构造源索引约定的置换

    曲线第 i 个点为 src，第 (i + offset) mod N 个点为 dst:
    - 加密 (decrypt=False): perm[dst] = src
    - 解密 (decrypt=True):  perm[src] = dst
    解密置换在同一轮遍历中直接写出，而不是对加密置换再求逆。
    """
    curve = np.asarray(gilbert2d(width, height), dtype=np.int64)
    n = width * height
    offset = golden_offset(n)

    src_raster = curve[:, 1] * width + curve[:, 0]
    dst_raster = np.roll(src_raster, -offset)

    perm = np.empty(n, dtype=np.int64)
    if not decrypt:
        perm[dst_raster] = src_raster
    else:
        perm[src_raster] = dst_raster

    logger.debug(f"{width}x{height}: curve length {n}, offset {offset}, decrypt={decrypt}")
    return perm
