"""Dense square matrices with cofactor-expansion inversion.

Determinant, minor, cofactor and inverse work for any square size; the
renderer itself only uses 4x4 matrices. Inversion follows the classic
adjugate method: the transpose of the cofactor matrix divided by the
determinant. A matrix with a determinant of exactly zero cannot be
inverted and raises SingularMatrixError.

Example:
    >>> from whitted.core.matrix import Matrix
    >>> m = Matrix([[4.0, 7.0], [2.0, 6.0]])
    >>> m.determinant()
    10.0
    >>> (m @ m.inverse()) == Matrix.identity(2)
    True
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EQUALITY_TOLERANCE, Tuple


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class Matrix:
    """A square, row-major matrix backed by a float64 array.

    Attributes:
        data: The underlying array of shape (size, size).
    """

    __slots__ = ("data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        self.data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Tuple):
            return Tuple.from_array(self.data @ other.data)
        if isinstance(other, Matrix):
            return Matrix(self.data @ other.data)
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self.data.T)

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Row/column ({row}, {col}) out of range for a {self.size}x{self.size} matrix")

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column."""
        self._check_index(row, col)
        reduced = np.delete(np.delete(self.data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Signed minor: negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def determinant(self) -> float:
        """Determinant by recursive cofactor expansion along the first row.

        Returns:
            The determinant. The 2x2 base case is ad - bc, and the empty
            0x0 matrix left by a 1x1 submatrix has determinant 1.
        """
        if self.size == 0:
            return 1.0
        if self.size == 1:
            return float(self.data[0, 0])
        if self.size == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])
        return sum(float(self.data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert the matrix.

        Returns:
            The inverse, such that self @ inverse is the identity.

        Raises:
            SingularMatrixError: If the determinant is exactly zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError(f"Cannot invert a singular matrix (determinant is 0):\n{self.data}")

        n = self.size
        cofactors = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                cofactors[row, col] = self.cofactor(row, col)
        return Matrix(cofactors.T / det)

    def approx_equals(self, other: Matrix, tolerance: float = EQUALITY_TOLERANCE) -> bool:
        if self.data.shape != other.data.shape:
            return False
        return bool(np.all(np.abs(self.data - other.data) < tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.approx_equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.data.tolist()})"


IDENTITY = Matrix.identity(4)
