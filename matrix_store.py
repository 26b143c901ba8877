"""
Matrix Store Module

This module provides a dense, fixed-size, real-valued matrix backed by a
NumPy float64 buffer. It owns construction, bounds-checked element access,
random population and the text rendering used by the console driver. The
determinant algorithm itself lives in determinant_computer.py.

Usage Example:
--------------
    from matrix_store import Matrix, identity

    m = Matrix.from_array([[1, 2], [3, 4]])
    m[0, 1] = 5.0
    print(m)            # | 1.00  5.00 |
                        # | 3.00  4.00 |

    r = Matrix(3, 3)
    r.fill_random(-5, 5, rng=np.random.default_rng(0))
"""

from typing import Any, List, Optional, Sequence, Tuple, Union
import numpy as np
import sympy as sp


class MatrixError(Exception):
    """Base class for all matrix errors."""


class InvalidDimensionError(MatrixError, ValueError):
    """Raised when a matrix would have a non-positive or malformed shape."""


class NullInputError(MatrixError, TypeError):
    """Raised when a source array is missing."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised on element access outside [0, rows) x [0, columns)."""


class NotSquareError(MatrixError, ValueError):
    """Raised when a square-only operation receives a non-square matrix."""


class MatrixTooLargeError(MatrixError, ValueError):
    """Raised when an input exceeds a configured size guard."""


ArrayLike = Union[Sequence[Sequence[float]], np.ndarray]


def check_integer(name: str, value: Any) -> None:
    """Reject anything that is not an int (bools and floats included)."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def _check_dimension(name: str, value: Any) -> int:
    check_integer(name, value)
    if value <= 0:
        raise InvalidDimensionError(
            f"Matrix dimensions must be positive integers ({name}={value})"
        )
    return int(value)


class Matrix:
    """
    Dense rows x columns matrix of real numbers.

    The matrix exclusively owns its element buffer. Construction from an
    array and every export (to_numpy, to_list, to_sympy) copies, so no two
    Matrix objects ever alias the same storage.

    Parameters:
    -----------
    rows : int
        Number of rows (>= 1)
    cols : int
        Number of columns (>= 1)
    rng : optional
        Default random source for fill_random. Any object with a NumPy
        Generator-style ``uniform(low, high, size)`` method.

    Raises:
    -------
    InvalidDimensionError
        If rows or cols is not positive
    TypeError
        If rows or cols is not an integer
    """

    def __init__(self, rows: int, cols: int, rng: Optional[Any] = None):
        rows = _check_dimension("rows", rows)
        cols = _check_dimension("cols", cols)
        self._data = np.zeros((rows, cols), dtype=np.float64)
        self._rng = rng

    @classmethod
    def from_array(cls, values: Optional[ArrayLike], rng: Optional[Any] = None) -> "Matrix":
        """
        Build a matrix as a deep copy of a rectangular array.

        Parameters:
        -----------
        values : nested sequence or np.ndarray
            Rectangular two-dimensional array of real numbers

        Returns:
        --------
        Matrix
            New matrix whose shape is taken from ``values``

        Raises:
        -------
        NullInputError
            If values is None
        InvalidDimensionError
            If values is ragged, empty, or not two-dimensional
        """
        if values is None:
            raise NullInputError("values must not be None")

        try:
            arr = np.array(values, dtype=np.float64, copy=True)
        except ValueError as e:
            raise InvalidDimensionError(f"values must be a rectangular array of numbers: {e}") from e

        if arr.ndim != 2:
            raise InvalidDimensionError(
                f"values must be two-dimensional (got {arr.ndim} dimension(s))"
            )
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise InvalidDimensionError(
                f"Matrix dimensions must be positive integers (got shape {arr.shape})"
            )

        matrix = cls(arr.shape[0], arr.shape[1], rng=rng)
        matrix._data = arr
        return matrix

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _check_index(self, row: Any, col: Any) -> Tuple[int, int]:
        check_integer("row index", row)
        check_integer("col index", col)
        if not 0 <= row < self.rows:
            raise IndexOutOfRangeError(
                f"Row index {row} out of range (must be 0-{self.rows - 1})"
            )
        if not 0 <= col < self.columns:
            raise IndexOutOfRangeError(
                f"Column index {col} out of range (must be 0-{self.columns - 1})"
            )
        return int(row), int(col)

    def get(self, row: int, col: int) -> float:
        """Return the element at (row, col) as a Python float."""
        r, c = self._check_index(row, col)
        return float(self._data[r, c])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the element at (row, col)."""
        r, c = self._check_index(row, col)
        self._data[r, c] = float(value)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        return self.get(*key)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        self.set(key[0], key[1], value)

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def fill_random(
        self,
        min_value: float = -10.0,
        max_value: float = 10.0,
        rng: Optional[Any] = None,
    ) -> None:
        """
        Overwrite every element with a uniform sample from [min_value, max_value).

        The random source is resolved in order: the ``rng`` argument, the
        generator given at construction, then a fresh
        ``np.random.default_rng()``. Injecting a seeded generator makes the
        fill reproducible.

        Raises:
        -------
        ValueError
            If min_value > max_value
        """
        if min_value > max_value:
            raise ValueError(
                f"min_value must not exceed max_value (got {min_value} > {max_value})"
            )
        source = rng if rng is not None else self._rng
        if source is None:
            source = np.random.default_rng()
        samples = source.uniform(min_value, max_value, size=self.shape)
        self._data[:, :] = np.asarray(samples, dtype=np.float64)

    # ------------------------------------------------------------------
    # Copies and conversions
    # ------------------------------------------------------------------

    def copy(self) -> "Matrix":
        return Matrix.from_array(self._data, rng=self._rng)

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the element buffer."""
        return self._data.copy()

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def to_sympy(self) -> sp.Matrix:
        """
        Return an exact SymPy matrix with every float converted to a Rational.

        Used for exact reference determinants; the conversion is exact for
        binary floats, so no rounding is introduced.
        """
        return sp.Matrix(
            self.rows,
            self.columns,
            [sp.Rational(float(v)) for v in self._data.flat],
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """
        Render the matrix as a text block.

        Each row is wrapped in "| ... |" and terminated by a newline.
        Elements are formatted to two decimals and right-aligned to the
        width of the widest formatted element in the whole matrix, with two
        spaces between elements.
        """
        formatted = [[f"{v:.2f}" for v in row] for row in self._data.tolist()]
        width = max(len(s) for row in formatted for s in row)

        lines = []
        for row in formatted:
            lines.append("| " + "  ".join(s.rjust(width) for s in row) + " |\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, data={self.to_list()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable


def identity(size: int) -> Matrix:
    """Return the size x size identity matrix."""
    m = Matrix(size, size)
    for i in range(size):
        m[i, i] = 1.0
    return m


def zero(rows: int, cols: int) -> Matrix:
    """Return a zero-filled rows x cols matrix."""
    return Matrix(rows, cols)
