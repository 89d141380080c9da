"""
cachematrix: a square matrix that caches its inverse.

CachedMatrix holds one matrix and one cache slot. The inverse is computed
with numpy on the first request and reused until the matrix changes.
cache_solve is a free-function alias for CachedMatrix.get_inverse.
"""

__version__ = "0.1.0"

from cachematrix.errors import (
    CachematrixError,
    InvalidShapeError,
    SelfTestError,
    SingularMatrixError,
)
from cachematrix.matrix import CachedMatrix
from cachematrix.solve import cache_solve
from cachematrix.selftest import run_self_test

__all__ = [
    "CachedMatrix",
    "cache_solve",
    "run_self_test",
    "CachematrixError",
    "InvalidShapeError",
    "SingularMatrixError",
    "SelfTestError",
]
