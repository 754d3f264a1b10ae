"""
Shared compute infrastructure for PyLinalg.

This module provides the flat-buffer operation engine, tolerance tiers
and timing utilities shared by the Vector and Matrix containers.

IMPORTANT: This is NOT where the containers live. Those go in
pylinalg.dense. This module works on plain row-major sequences only.

Submodules:
    ops: dot, transpose, matrix multiply, matrix-vector multiply, outer
    tolerances: Numerical comparison tiers
    timing: Execution timing utilities
"""

from pylinalg.core.compute.ops import (
    dot,
    mat_mul,
    mat_vec_mul,
    outer,
    transpose,
    write_mat_mul,
    write_mat_mul_transposed,
    write_transpose,
)
from pylinalg.core.compute.timing import Timer, timed

__all__ = [
    # Engine
    "dot",
    "transpose",
    "write_transpose",
    "mat_mul",
    "write_mat_mul",
    "write_mat_mul_transposed",
    "mat_vec_mul",
    "outer",
    # Timing
    "Timer",
    "timed",
]
