"""Free-function access to a CachedMatrix inverse."""

import numpy as np

from cachematrix.matrix import CachedMatrix


def cache_solve(x: CachedMatrix, *args, **kwargs) -> np.ndarray:
    """
    Return the inverse of x, computed on first use and cached afterwards.

    Equivalent to x.get_inverse(); extra arguments are accepted and ignored.

    Args:
        x: Matrix container

    Returns:
        np.ndarray: The cached inverse
    """
    return x.get_inverse()
