# -*- coding: utf-8 -*-
import unittest
import numpy as np

from src.permutation.algebra import normalize, invert, apply, validate_permutation
from src.permutation.errors import InvalidDimensions, InvariantViolation


class TestPermutationAlgebra(unittest.TestCase):
    """
    测试置换代数 (normalize / invert / apply)
    """

    def setUp(self):
        rng = np.random.default_rng(2024)
        self.random_perm = rng.permutation(97)

    def test_normalize_ranks(self):
        """
        测试按分数排名
        """
        print("\n=== 测试 normalize 排名 ===")
        self.assertEqual(normalize([10, 30, 20]).tolist(), [0, 2, 1])
        self.assertEqual(normalize([0.7, 0.1, 0.4, 0.9]).tolist(), [2, 0, 1, 3])
        print("✓ normalize 排名测试通过")

    def test_normalize_ties_break_by_index(self):
        """
        相同分数按原始下标升序
        """
        print("\n=== 测试 normalize 平局处理 ===")
        self.assertEqual(normalize([5, 1, 5, 1]).tolist(), [2, 0, 3, 1])
        self.assertEqual(normalize([7, 7, 7]).tolist(), [0, 1, 2])
        # 多次调用结果一致
        scores = np.array([3, 1, 3, 2, 1, 3])
        self.assertTrue(np.array_equal(normalize(scores), normalize(scores)))
        print("✓ normalize 平局测试通过")

    def test_normalize_idempotent_on_permutation(self):
        """
        对合法置换再次 normalize 结果不变
        """
        print("\n=== 测试 normalize 幂等性 ===")
        once = normalize(self.random_perm)
        self.assertTrue(np.array_equal(once, self.random_perm))
        self.assertTrue(np.array_equal(normalize(once), once))
        print("✓ normalize 幂等性测试通过")

    def test_invert(self):
        """
        测试求逆
        """
        print("\n=== 测试 invert ===")
        self.assertEqual(invert([2, 0, 3, 1]).tolist(), [1, 3, 0, 2])

        inv = invert(self.random_perm)
        self.assertTrue(np.array_equal(inv[self.random_perm], np.arange(97)))
        self.assertTrue(np.array_equal(invert(inv), self.random_perm))
        print("✓ invert 测试通过")

    def test_invert_rejects_non_bijection(self):
        """
        非双射输入应报错
        """
        print("\n=== 测试 invert 输入校验 ===")
        with self.assertRaises(InvariantViolation):
            invert([0, 0, 1])
        with self.assertRaises(InvariantViolation):
            invert([0, 1, 3])
        with self.assertRaises(InvariantViolation):
            invert([-1, 0, 1])
        with self.assertRaises(InvariantViolation):
            validate_permutation([0.0, 1.0])
        print("✓ invert 输入校验测试通过")

    def test_apply_source_lookup(self):
        """
        out[i] = pixels[perm[i]]，4 通道整体搬运
        """
        print("\n=== 测试 apply ===")
        pixels = np.array([
            [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]],
        ], dtype=np.uint8)  # 宽 3 高 1
        out = apply(pixels, [2, 0, 1], 3, 1)
        expected = np.array([[[9, 10, 11, 12], [1, 2, 3, 4], [5, 6, 7, 8]]], dtype=np.uint8)
        self.assertTrue(np.array_equal(out, expected))
        self.assertEqual(out.dtype, np.uint8)
        print("✓ apply 测试通过")

    def test_apply_does_not_mutate_input(self):
        """
        输入缓冲区保持不变，输出形状与输入一致
        """
        print("\n=== 测试 apply 不修改输入 ===")
        flat = np.arange(6 * 4, dtype=np.uint8)
        snapshot = flat.copy()
        out = apply(flat, [5, 4, 3, 2, 1, 0], 3, 2)
        self.assertTrue(np.array_equal(flat, snapshot))
        self.assertEqual(out.shape, flat.shape)
        self.assertEqual(out[:4].tolist(), [20, 21, 22, 23])
        print("✓ apply 不修改输入测试通过")

    def test_apply_dimension_errors(self):
        """
        测试尺寸校验
        """
        print("\n=== 测试 apply 尺寸校验 ===")
        pixels = np.zeros((2, 2, 4), dtype=np.uint8)
        with self.assertRaises(InvalidDimensions):
            apply(pixels, [0, 1, 2, 3], 0, 4)
        with self.assertRaises(InvalidDimensions):
            apply(pixels, [0, 1, 2, 3, 4, 5], 3, 2)
        with self.assertRaises(InvariantViolation):
            apply(pixels, [0, 1, 2], 2, 2)
        print("✓ apply 尺寸校验测试通过")


if __name__ == "__main__":
    unittest.main()
