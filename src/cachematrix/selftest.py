"""
Self-test harness for CachedMatrix.

Runs a fixed sequence of checks, printing a heading and PASS for each
group. The first failed check raises SelfTestError and stops the run.
"""

import numpy as np

from cachematrix.errors import InvalidShapeError, SelfTestError, SingularMatrixError
from cachematrix.matrix import CachedMatrix
from cachematrix.solve import cache_solve


def _check(condition: bool, message: str):
    if not condition:
        raise SelfTestError(f"Failed: {message}")


def _expect_error(error_type, func, *args):
    try:
        func(*args)
    except error_type:
        return
    raise SelfTestError(f"Failed: expected {error_type.__name__} from {func.__name__}{args!r}")


def run_self_test(verbose: bool = True, tolerance: float = 1e-9) -> bool:
    """
    Run the self-test sequence.

    Args:
        verbose: Print progress headings and PASS lines
        tolerance: Absolute tolerance for comparing against the identity

    Returns:
        bool: True when every check passed

    Raises:
        SelfTestError: On the first failed check
    """
    def report(msg: str):
        if verbose:
            print(msg)

    report("Testing default constructor...")
    z = CachedMatrix()
    default = z.get()
    _check(default.shape == (1, 1) and np.isnan(default[0, 0]),
           "doesn't create empty 1x1 matrix")
    zi = z.get_inverse()
    _check(zi.shape == (1, 1) and np.isnan(zi[0, 0]),
           "doesn't create empty 1x1 inverse matrix")
    report("PASS")

    report("Testing simple 2x2 matrix...")
    sm = np.array([[1.0, 0.0], [0.0, 2.0]])
    z.set(sm)
    _check(np.array_equal(z.get(), sm), "get doesn't return the right matrix")
    _check(np.allclose(z.get() @ z.get_inverse(), np.eye(2), rtol=0, atol=tolerance),
           "get_inverse doesn't create the right inverse")
    _check(z.get_inverse() is z.get_inverse(), "get_inverse recomputes a cached inverse")
    report("PASS")

    report("Testing cache_solve wrapper...")
    _check(cache_solve(z) is z.get_inverse(),
           "cache_solve doesn't return the same thing as z.get_inverse()")
    report("PASS")

    report("Testing error handling...")
    _expect_error(InvalidShapeError, CachedMatrix, [1, 2, 3, 4])
    _expect_error(InvalidShapeError, CachedMatrix, "not a matrix")
    _expect_error(InvalidShapeError, z.set, np.ones((2, 3)))
    _check(np.array_equal(z.get(), sm), "rejected set changed the matrix")
    _check(z.has_inverse(), "rejected set dropped the cached inverse")

    singular = CachedMatrix([[1.0, 2.0], [2.0, 4.0]])
    _expect_error(SingularMatrixError, singular.get_inverse)
    _check(not singular.has_inverse(), "singular failure was cached")
    singular.set(sm)
    _check(np.allclose(singular.get_inverse(), [[1.0, 0.0], [0.0, 0.5]], rtol=0, atol=tolerance),
           "get_inverse didn't recover after set")
    report("PASS")

    return True
