# permutation模块初始化文件

from .errors import ObfuscationError, InvalidDimensions, UnknownAlgorithm, InvariantViolation, InvalidSeed
from .algebra import normalize, invert, apply, validate_permutation, validate_dimensions
from .compact_hilbert import axis_precision, compact_index, generate_compact_scores
from .gilbert import gilbert2d, golden_offset, generate_gilbert_shift_permutation
from .chaotic import tent_map, tent_map_sequence, generate_chaotic_permutation

__all__ = ['ObfuscationError', 'InvalidDimensions', 'UnknownAlgorithm', 'InvariantViolation', 'InvalidSeed',
           'normalize', 'invert', 'apply', 'validate_permutation', 'validate_dimensions',
           'axis_precision', 'compact_index', 'generate_compact_scores',
           'gilbert2d', 'golden_offset', 'generate_gilbert_shift_permutation',
           'tent_map', 'tent_map_sequence', 'generate_chaotic_permutation']
