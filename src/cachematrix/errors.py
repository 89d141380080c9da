"""Exceptions raised by cachematrix."""

from typing import Optional, Tuple

import numpy as np


class CachematrixError(Exception):
    """Base class for all cachematrix errors."""


class InvalidShapeError(CachematrixError, ValueError):
    """
    Raised when a value cannot be coerced into a square matrix.

    Attributes:
        shape: Shape of the rejected value after coercion, if it got that far
    """

    def __init__(self, message: str, shape: Optional[Tuple[int, ...]] = None):
        super().__init__(message)
        self.shape = shape


class SingularMatrixError(CachematrixError, np.linalg.LinAlgError):
    """Raised when the current matrix has no inverse."""


class SelfTestError(CachematrixError, AssertionError):
    """Raised by the self-test harness on the first failed check."""
