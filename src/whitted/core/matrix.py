"""Dense row-major matrices backed by NumPy.

The renderer only ever transforms geometry with 4x4 matrices, but the
determinant is defined recursively through submatrices, so Matrix supports
any rectangular size.

Determinants and inverses are computed by cofactor expansion (2x2 closed
form, expansion along row 0 otherwise) rather than by LU decomposition, so
the invertibility test is an exact function of the cofactors:

    inverse[col][row] = cofactor(row, col) / determinant

Example:
    >>> from whitted.core.matrix import Matrix
    >>> from whitted.core.tuples import point
    >>> m = Matrix([[1, 0, 0, 5], [0, 1, 0, -3], [0, 0, 1, 2], [0, 0, 0, 1]])
    >>> m @ point(-3, 4, 5) == point(2, 1, 7)
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from whitted.core.errors import MismatchedMatrixShapeError, NonInvertibleMatrixError
from whitted.core.tuples import EPSILON, Tuple


class Matrix:
    """A rows x columns matrix of float64 cells.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        """Build a matrix from nested rows or a 2-D array.

        Raises:
            MismatchedMatrixShapeError: If the rows are ragged, empty, or the
                input isn't two-dimensional.
        """
        if isinstance(cells, np.ndarray):
            array = np.array(cells, dtype=np.float64)
        else:
            lengths = {len(row) for row in cells}
            if len(lengths) != 1:
                raise MismatchedMatrixShapeError(
                    f"Matrix rows must all have the same length, got lengths {sorted(lengths)}"
                )
            array = np.array(cells, dtype=np.float64)
        if array.ndim != 2 or array.size == 0:
            raise MismatchedMatrixShapeError(
                f"Matrix cells must form a non-empty 2-D grid, got shape {array.shape}"
            )
        self._cells = array

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Return the size x size identity matrix."""
        return cls(np.identity(size, dtype=np.float64))

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self._cells.shape[1])

    def at(self, row: int, column: int) -> float:
        return float(self._cells[row, column])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.at(row, column)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the cells as a 2-D array."""
        return self._cells.copy()

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product self x other.

        Raises:
            MismatchedMatrixShapeError: If columns(self) != rows(other).
        """
        if self.columns != other.rows:
            raise MismatchedMatrixShapeError(
                f"Cannot multiply {self.rows}x{self.columns} by {other.rows}x{other.columns}"
            )
        return Matrix(self._cells @ other._cells)

    def multiply_tuple(self, t: Tuple) -> Tuple:
        """Treat t as a column vector and return self x t.

        Raises:
            MismatchedMatrixShapeError: If self is not 4x4.
        """
        if self._cells.shape != (4, 4):
            raise MismatchedMatrixShapeError(
                f"Only 4x4 matrices transform tuples, got {self.rows}x{self.columns}"
            )
        x, y, z, w = self._cells @ np.array((t.x, t.y, t.z, t.w))
        return Tuple(x, y, z, w)

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Tuple) -> Tuple: ...

    def __matmul__(self, other):
        if isinstance(other, Tuple):
            return self.multiply_tuple(other)
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Transpose, determinant, inverse
    # -------------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix(self._cells.T)

    def submatrix(self, row: int, column: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        reduced = np.delete(np.delete(self._cells, row, axis=0), column, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        """The minor, negated when row + column is odd."""
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def determinant(self) -> float:
        """Determinant by cofactor expansion along row 0.

        Raises:
            MismatchedMatrixShapeError: If the matrix is not square.
        """
        if self.rows != self.columns:
            raise MismatchedMatrixShapeError(
                f"Determinant requires a square matrix, got {self.rows}x{self.columns}"
            )
        cells = self._cells
        if self.rows == 1:
            return float(cells[0, 0])
        if self.rows == 2:
            return float(cells[0, 0] * cells[1, 1] - cells[0, 1] * cells[1, 0])
        return sum(float(cells[0, column]) * self.cofactor(0, column) for column in range(self.columns))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= EPSILON

    def inverse(self) -> Matrix:
        """Return the inverse matrix.

        Raises:
            NonInvertibleMatrixError: If |determinant| < EPSILON.
        """
        det = self.determinant()
        if abs(det) < EPSILON:
            raise NonInvertibleMatrixError(f"Matrix is not invertible (determinant {det:g})")
        size = self.rows
        cofactors = np.empty((size, size), dtype=np.float64)
        for row in range(size):
            for column in range(size):
                cofactors[row, column] = self.cofactor(row, column)
        # Transposition happens here: result[col][row] = cofactor(row, col) / det
        return Matrix(cofactors.T / det)

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cells.shape != other._cells.shape:
            return False
        return bool(np.all(np.abs(self._cells - other._cells) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self._cells)
        return f"Matrix([{rows}])"

    def __str__(self) -> str:
        return "\n".join("| " + " | ".join(f"{v:>8.4f}" for v in row) + " |" for row in self._cells)
