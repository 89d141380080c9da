"""
Cached Matrix: a square matrix that memoizes its inverse.

The inverse is computed lazily on the first request and reused until the
matrix is replaced with set() or the cache is dropped with clear_inverse().
"""

import logging
from typing import Callable, Optional, Tuple

import numpy as np

from cachematrix.errors import InvalidShapeError, SingularMatrixError

logger = logging.getLogger(__name__)


def default_matrix() -> np.ndarray:
    """Return the default 1x1 matrix holding a single NaN."""
    return np.array([[np.nan]])


def as_square_matrix(value) -> np.ndarray:
    """
    Coerce value into a square float matrix.

    Scalars become 1x1 matrices and 1-D sequences become column matrices,
    so only 2-D input (or a single element) can ever be square.

    Args:
        value: Array-like to coerce

    Returns:
        np.ndarray: Read-only copy of shape (N, N), N >= 1

    Raises:
        InvalidShapeError: If value is None, not numeric, cannot be converted
            to float, or is not square
    """
    if value is None:
        raise InvalidShapeError("Cannot convert None to a matrix")

    try:
        raw = np.array(value)
        # bool, signed, unsigned and float only; strings and objects are rejected
        if raw.dtype.kind not in "biuf":
            raise TypeError(f"non-numeric dtype {raw.dtype}")
        m = raw.astype(float)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidShapeError(f"Cannot convert {type(value).__name__} to a matrix: {exc}") from exc

    if m.ndim == 0:
        m = m.reshape(1, 1)
    elif m.ndim == 1:
        m = m.reshape(-1, 1)
    elif m.ndim > 2:
        raise InvalidShapeError(f"Expected a 2-D matrix, got {m.ndim} dimensions", m.shape)

    rows, cols = m.shape
    if rows != cols:
        raise InvalidShapeError(f"m must be a square matrix, got shape {m.shape}", m.shape)
    if rows == 0:
        raise InvalidShapeError("m must have at least one row", m.shape)

    m.setflags(write=False)
    return m


class CachedMatrix:
    """
    Square matrix with a memoized inverse.

    Attributes:
        solver (Callable): Solve primitive mapping a square matrix to its inverse
    """

    def __init__(self, initial=None,
                 solver: Callable[[np.ndarray], np.ndarray] = np.linalg.inv):
        """
        Initialize the container.

        Args:
            initial: Square array-like; defaults to a 1x1 NaN matrix
            solver: Inverse primitive, raising np.linalg.LinAlgError on singular input

        Raises:
            InvalidShapeError: If initial is not a square matrix
        """
        self.solver = solver
        self._value = None
        self._inverse = None
        self.set(default_matrix() if initial is None else initial)

    def get(self) -> np.ndarray:
        """
        Get the current matrix.

        Returns:
            np.ndarray: Shape (N, N), read-only
        """
        return self._value

    def set(self, value):
        """
        Replace the matrix and drop any cached inverse.

        Validation happens before anything is touched, so a rejected
        value leaves both the matrix and the cache as they were.

        Args:
            value: Square array-like

        Raises:
            InvalidShapeError: If value is not a square matrix
        """
        m = as_square_matrix(value)
        had_inverse = self._inverse is not None

        self._value = m
        self._inverse = None

        if had_inverse:
            logger.debug("Matrix replaced, cached inverse invalidated (n=%d)", len(m))

    def get_inverse(self) -> np.ndarray:
        """
        Get the matrix inverse, computing it only if not already cached.

        Returns:
            np.ndarray: Shape (N, N), read-only; the same object on every
            call until set() or clear_inverse()

        Raises:
            SingularMatrixError: If the matrix is not invertible. Failures
            are not cached.
        """
        if self._inverse is not None:
            logger.debug("Inverse cache hit (n=%d)", len(self._value))
            return self._inverse

        logger.debug("Inverse cache miss, computing (n=%d)", len(self._value))
        inverse = self._compute_inverse()
        inverse.setflags(write=False)
        self._inverse = inverse
        return inverse

    def _compute_inverse(self) -> np.ndarray:
        # NaN propagates through inversion as a NaN matrix
        if np.isnan(self._value).any():
            return np.full(self._value.shape, np.nan)

        try:
            inverse = self.solver(self._value)
        except np.linalg.LinAlgError as exc:
            logger.warning("Matrix of shape %s is singular: %s", self._value.shape, exc)
            raise SingularMatrixError(f"Matrix is not invertible: {exc}") from exc

        return np.array(inverse, dtype=float)

    def clear_inverse(self):
        """Drop the cached inverse, keeping the matrix."""
        if self._inverse is not None:
            logger.debug("Cached inverse cleared (n=%d)", len(self._value))
        self._inverse = None

    def has_inverse(self) -> bool:
        """Check if an inverse is currently cached."""
        return self._inverse is not None

    @property
    def shape(self) -> Tuple[int, int]:
        return self._value.shape

    def __repr__(self):
        return f"CachedMatrix(n={len(self._value)}, cached={self.has_inverse()})"

    def __len__(self):
        return len(self._value)
