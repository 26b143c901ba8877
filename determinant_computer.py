"""
Determinant Computer Module

This module computes determinants of square Matrix objects by recursive
cofactor (Laplace) expansion along the first row. Sizes 1, 2 and 3 are
dispatched to closed forms (the sole element, ad - bc, and Sarrus' rule);
larger matrices are expanded into minors until those base cases are reached.

The general path is O(n!) and deliberately exact in its arithmetic order:
there is no elimination-based shortcut and no memoization of minors shared
between sibling branches.

Usage Example:
--------------
    from matrix_store import Matrix
    from determinant_computer import DeterminantComputer, determinant, minor

    m = Matrix.from_array([[1, 2, 3, 4],
                           [5, 6, 7, 8],
                           [9, 10, 11, 12],
                           [13, 14, 15, 16]])

    det = determinant(m)            # 0.0
    sub = minor(m, 0, 0)            # 3x3 Matrix without row 0 / column 0

    # Configured computer with a size guard and timing statistics
    det_comp = DeterminantComputer(max_size=10, show_performance_warnings=True)
    det = det_comp.compute_determinant(m)
    det_comp.print_performance_report()
"""

from typing import Dict, Optional
import time
import warnings

from matrix_store import (
    InvalidDimensionError,
    IndexOutOfRangeError,
    Matrix,
    MatrixTooLargeError,
    NotSquareError,
    check_integer,
)


class DeterminantComputer:
    """
    Cofactor-expansion determinant engine for Matrix objects.

    The engine never mutates its input. Every minor is a freshly allocated
    Matrix, so independent computers (or the module-level helpers, which
    build a new computer per call) can run concurrently on independent
    matrices.

    Parameters:
    -----------
    max_size : int, optional
        If given, square inputs larger than this raise MatrixTooLargeError
        before any expansion starts. Bounds the recursion depth.
    show_performance_warnings : bool
        If True, emit a RuntimeWarning for inputs of at least
        ``performance_warning_size`` rows (factorial cost).
    performance_warning_size : int
        Size threshold for the performance warning (default: 9)

    Methods:
    --------
    compute_determinant(matrix):
        Determinant of a square matrix
    get_minor(matrix, row_to_remove, col_to_remove):
        (n-1)x(n-1) copy of a square matrix without one row and one column
    cofactor(matrix, row, col):
        Signed minor determinant (-1)^(row+col) * det(minor)
    get_timing_statistics() / reset_timing_statistics() / print_performance_report()
        Call counts and elapsed time of the operations above
    """

    def __init__(
        self,
        max_size: Optional[int] = None,
        show_performance_warnings: bool = False,
        performance_warning_size: int = 9,
    ):
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be a positive integer or None (got {max_size})")
        if performance_warning_size < 1:
            raise ValueError(
                f"performance_warning_size must be a positive integer (got {performance_warning_size})"
            )
        self.max_size = max_size
        self.show_performance_warnings = show_performance_warnings
        self.performance_warning_size = performance_warning_size

        # Performance timing statistics
        self._timing_stats = {
            'compute_determinant': 0.0,
            'get_minor': 0.0,
        }
        self._timing_counts = {key: 0 for key in self._timing_stats.keys()}

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _require_square(matrix: Matrix, operation: str) -> None:
        if not isinstance(matrix, Matrix):
            raise TypeError(f"matrix must be a Matrix instance, got {type(matrix).__name__}")
        if not matrix.is_square:
            raise NotSquareError(
                f"{operation} is only defined for a square matrix "
                f"(got {matrix.rows}x{matrix.columns})"
            )

    def _check_size(self, n: int) -> None:
        if self.max_size is not None and n > self.max_size:
            raise MatrixTooLargeError(
                f"Matrix size {n} exceeds max_size={self.max_size}; "
                f"cofactor expansion would evaluate about {n}! terms"
            )
        if self.show_performance_warnings and n >= self.performance_warning_size:
            warnings.warn(
                f"Cofactor expansion of a {n}x{n} matrix has factorial cost "
                f"(threshold {self.performance_warning_size}); this may take a long time.",
                RuntimeWarning,
                stacklevel=3,
            )

    # ------------------------------------------------------------------
    # Minors
    # ------------------------------------------------------------------

    def get_minor(self, matrix: Matrix, row_to_remove: int, col_to_remove: int) -> Matrix:
        """
        Extract the minor obtained by deleting one row and one column.

        Parameters:
        -----------
        matrix : Matrix
            Square n x n matrix (n >= 2)
        row_to_remove : int
            Row index in [0, n)
        col_to_remove : int
            Column index in [0, n)

        Returns:
        --------
        Matrix
            New (n-1)x(n-1) matrix; remaining rows and columns keep their
            relative order. The parent is never aliased.

        Raises:
        -------
        NotSquareError
            If matrix is not square
        TypeError
            If the row or column to remove is not an integer
        IndexOutOfRangeError
            If the row or column to remove lies outside the matrix
        InvalidDimensionError
            If matrix is 1x1 (its minor would be empty)
        """
        start = time.time()
        self._require_square(matrix, "Minor extraction")
        check_integer("row_to_remove", row_to_remove)
        check_integer("col_to_remove", col_to_remove)

        n = matrix.rows
        if not 0 <= row_to_remove < n:
            raise IndexOutOfRangeError(
                f"row_to_remove {row_to_remove} out of range (must be 0-{n - 1})"
            )
        if not 0 <= col_to_remove < n:
            raise IndexOutOfRangeError(
                f"col_to_remove {col_to_remove} out of range (must be 0-{n - 1})"
            )
        if n == 1:
            raise InvalidDimensionError("A 1x1 matrix has no minor (result would be 0x0)")

        result = Matrix(n - 1, n - 1)
        minor_row = 0
        for i in range(n):
            if i == row_to_remove:
                continue
            minor_col = 0
            for j in range(n):
                if j == col_to_remove:
                    continue
                result[minor_row, minor_col] = matrix[i, j]
                minor_col += 1
            minor_row += 1

        self._timing_stats['get_minor'] += time.time() - start
        self._timing_counts['get_minor'] += 1
        return result

    # ------------------------------------------------------------------
    # Determinants
    # ------------------------------------------------------------------

    def compute_determinant(self, matrix: Matrix) -> float:
        """
        Compute the determinant of a square matrix by cofactor expansion.

        Parameters:
        -----------
        matrix : Matrix
            Square matrix; it is read but never modified

        Returns:
        --------
        float
            The determinant. A singular matrix yields 0.0 through the normal
            arithmetic path; there is no special case for it.

        Raises:
        -------
        TypeError
            If matrix is not a Matrix
        NotSquareError
            If matrix is not square
        MatrixTooLargeError
            If max_size is set and the matrix exceeds it
        """
        self._require_square(matrix, "Determinant")
        self._check_size(matrix.rows)

        start = time.time()
        det = self._determinant(matrix)
        self._timing_stats['compute_determinant'] += time.time() - start
        self._timing_counts['compute_determinant'] += 1
        return det

    def _determinant(self, matrix: Matrix) -> float:
        n = matrix.rows
        m = matrix

        if n == 1:
            return m[0, 0]

        if n == 2:
            return m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]

        # Sarrus' rule
        if n == 3:
            return (m[0, 0] * m[1, 1] * m[2, 2] +
                    m[0, 1] * m[1, 2] * m[2, 0] +
                    m[0, 2] * m[1, 0] * m[2, 1] -
                    m[0, 2] * m[1, 1] * m[2, 0] -
                    m[0, 1] * m[1, 0] * m[2, 2] -
                    m[0, 0] * m[1, 2] * m[2, 1])

        # Expansion along the first row
        det = 0.0
        sign = 1
        for j in range(n):
            sub = self.get_minor(m, 0, j)
            det += sign * m[0, j] * self._determinant(sub)
            sign = -sign
        return det

    def cofactor(self, matrix: Matrix, row: int, col: int) -> float:
        """
        Return (-1)^(row+col) times the determinant of minor(row, col).

        Subject to the same max_size guard and performance warning as
        compute_determinant, applied to the size of ``matrix``.
        """
        self._require_square(matrix, "Cofactor")
        self._check_size(matrix.rows)
        sub = self.get_minor(matrix, row, col)
        sign = -1 if (row + col) % 2 else 1
        return sign * self._determinant(sub)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_timing_statistics(self) -> Dict[str, Dict[str, float]]:
        """
        Per-operation timings for this computer.

        Keys are 'compute_determinant' (top-level calls only, not the
        recursion) and 'get_minor' (every minor copied, including those
        made while recursing). Each maps to total_time, call_count and
        avg_time in seconds.
        """
        return {
            op: {
                'total_time': elapsed,
                'call_count': self._timing_counts[op],
                'avg_time': elapsed / self._timing_counts[op] if self._timing_counts[op] else 0.0,
            }
            for op, elapsed in self._timing_stats.items()
        }

    def reset_timing_statistics(self):
        """Zero the counters, e.g. between benchmark runs."""
        self._timing_stats = dict.fromkeys(self._timing_stats, 0.0)
        self._timing_counts = dict.fromkeys(self._timing_counts, 0)

    def print_performance_report(self):
        """Print a formatted table of call counts and timings."""
        print("\n" + "=" * 60)
        print("PERFORMANCE REPORT")
        print("=" * 60)
        timing_stats = self.get_timing_statistics()
        print(f"{'Operation':<30} {'Calls':<10} {'Total (s)':<12} {'Avg (s)':<12}")
        print("-" * 60)
        for op, stats in sorted(timing_stats.items(), key=lambda x: x[1]['total_time'], reverse=True):
            if stats['call_count'] > 0:
                print(f"{op:<30} {stats['call_count']:<10} {stats['total_time']:<12.4f} {stats['avg_time']:<12.6f}")
        print("=" * 60 + "\n")


def determinant(matrix: Matrix) -> float:
    """Determinant of a square matrix (fresh DeterminantComputer per call)."""
    return DeterminantComputer().compute_determinant(matrix)


def minor(matrix: Matrix, row_to_remove: int, col_to_remove: int) -> Matrix:
    """Minor of a square matrix without the given row and column."""
    return DeterminantComputer().get_minor(matrix, row_to_remove, col_to_remove)
