# obfuscator模块初始化文件

from .dispatcher import Algorithm, build_permutation, run_obfuscation
from .img_process import ImageProcessor
from .orchestrator import ImageObfuscator

__all__ = ['Algorithm', 'build_permutation', 'run_obfuscation', 'ImageProcessor', 'ImageObfuscator']
