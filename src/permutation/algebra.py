# -*- coding: utf-8 -*-
"""
置换代数
文件路径: src/permutation/algebra.py

两种约定并存，不可混淆:
1. 秩约定 (rank): perm[i] 为位置 i 的目标秩，normalize 的输出即为此约定
2. 源索引约定 (source lookup): perm[i] 为搬到目标位置 i 的源像素索引，apply 只接受此约定
"""

import numpy as np
from src.config import Config
from src.permutation.errors import InvalidDimensions, InvariantViolation


def validate_dimensions(width, height):
    """宽高必须为正整数"""
    if isinstance(width, bool) or isinstance(height, bool):
        raise InvalidDimensions(width, height)
    if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
        raise InvalidDimensions(width, height)
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    return int(width), int(height)


def validate_permutation(perm, n=None):
    """
    校验 perm 是否为 [0, n) 上的双射
    参数:
        perm: 一维整数数组
        n: 期望长度，默认取 len(perm)
    返回:
        np.ndarray (int64)
    """
    arr = np.asarray(perm)
    if n is None:
        n = arr.shape[0] if arr.ndim == 1 else -1
    if arr.ndim != 1 or arr.shape[0] != n:
        raise InvariantViolation(f"Permutation must be a 1-D array of length {n}, got shape {arr.shape}")
    if n == 0:
        return arr.astype(np.int64)
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvariantViolation(f"Permutation of length {n} must hold integers, got {arr.dtype}")
    arr = arr.astype(np.int64)
    if arr.min() < 0 or arr.max() >= n:
        raise InvariantViolation(f"Permutation of length {n} has entries outside [0, {n})")
    seen = np.zeros(n, dtype=bool)
    seen[arr] = True
    if not seen.all():
        raise InvariantViolation(f"Permutation of length {n} is not a bijection (repeated entries)")
    return arr


def normalize(scores):
    """
    将分数数组按从小到大排名，得到秩约定的置换
    相同分数按原始下标升序 (稳定排序)
    """
    scores = np.asarray(scores)
    order = np.argsort(scores, kind="stable")
    ranks = np.empty(order.shape[0], dtype=np.int64)
    ranks[order] = np.arange(order.shape[0], dtype=np.int64)
    return ranks


def invert(perm):
    """返回 inv，使 inv[perm[i]] = i"""
    perm = validate_permutation(perm)
    inv = np.empty_like(perm)
    inv[perm] = np.arange(perm.shape[0], dtype=np.int64)
    return inv


def apply(pixels, perm, width, height):
    """
    按源索引约定重排像素: out[i] = pixels[perm[i]]
    每个像素的 4 个通道整体搬运，输入缓冲区不被修改
    参数:
        pixels: uint8 数组，(H, W, 4) 或扁平的 (N*4,)
        perm: 长度为 N 的源索引置换
        width, height: 图像宽高
    返回:
        与输入同形状、同类型的新数组
    """
    width, height = validate_dimensions(width, height)
    pixels = np.asarray(pixels)
    n = width * height
    if pixels.size != n * Config.CHANNELS:
        raise InvalidDimensions(width, height, pixels.size)
    perm = validate_permutation(perm, n)

    flat = pixels.reshape(n, Config.CHANNELS)
    return flat[perm].reshape(pixels.shape)
