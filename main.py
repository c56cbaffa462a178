# -*- coding: utf-8 -*-
"""
图像像素置乱工具入口
文件路径: main.py

用法示例:
    python main.py -i photo.png -a gilbert-shift-forward
    python main.py -i obfuscated/photo_out.png -a 3
    python main.py -i photo.jpg -a chaotic-forward -s 0.7311
"""

import os
import sys
import argparse

from src.config import Config
from src.obfuscator import Algorithm, ImageObfuscator


def print_algorithms():
    print("编号  标识                    逆算法")
    for alg in Algorithm:
        seed_note = " (需要种子)" if alg.uses_seed else ""
        print(f"{alg.number:<5} {alg.value:<23} {alg.inverse.value}{seed_note}")
    print("注意: 混沌族 (4/5) 与网页版方向相反 (本工具 4 = 网页版 5，本工具 5 = 网页版 4)，网页版 4 号置乱的图像请用 -a 4 还原，网页版 5 号请用 -a 5 还原")


def main(argv=None):
    parser = argparse.ArgumentParser(description="图像像素置乱工具 (可逆，非加密)")

    parser.add_argument("--input", "-i", help="输入图像路径")
    parser.add_argument("--algorithm", "-a", default=Algorithm.COMPACT_FORWARD.value,
                        help="算法标识或编号 0-5，见 --list")
    parser.add_argument("--seed", "-s", type=float, default=Config.DEFAULT_SEED, help="混沌算法种子 (仅小数部分有效)")
    parser.add_argument("--out", "-o", default=None, help="输出目录，默认为当前目录下的 obfuscated/")
    parser.add_argument("--passes", "-p", type=int, default=1, help="连续置乱轮数")
    parser.add_argument("--list", action="store_true", help="列出所有算法")

    args = parser.parse_args(argv)

    if args.list:
        print_algorithms()
        return 0

    if not args.input:
        parser.error("--input is required")

    if not os.path.exists(args.input):
        print(f"❌ 错误: 找不到输入图像 {args.input}")
        return 1

    try:
        obfuscator = ImageObfuscator()
        output_path = obfuscator.obfuscate_file(
            image_path=args.input,
            algorithm=args.algorithm,
            seed=args.seed,
            output_dir=args.out or os.path.join(os.getcwd(), Config.CLI_OUTPUT_DIRNAME),
            passes=args.passes
        )
    except ValueError as e:
        print(f"\n❌ 置乱失败: {str(e)}")
        return 1

    print(f"✓ 输出已保存: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
