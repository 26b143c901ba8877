"""
Determinant Verifier Module

This module provides an independent numerical check of the cofactor
expansion in DeterminantComputer. Each matrix is evaluated three ways:

- the cofactor engine under test
- NumPy's LU-based np.linalg.det
- SymPy's exact Berkowitz determinant of the rational conversion

The exact value is the reference. The NumPy value is reported for
comparison only, since LU rounding differs from cofactor rounding.
"""

from typing import Any, Dict, List, Optional
import numpy as np

from matrix_store import Matrix, NotSquareError
from determinant_computer import DeterminantComputer


class DeterminantVerifier:
    """
    Cross-checks DeterminantComputer against NumPy and SymPy references.

    Attributes
    ----------
    computer : DeterminantComputer
        Engine under test
    tolerance : float
        Relative tolerance; a result agrees when
        |cofactor - exact| <= tolerance * max(1, H), where H is Hadamard's
        bound (product of the Euclidean row norms). H bounds |exact| and
        also the size of the terms that cancel in a near-singular matrix.
    """

    def __init__(self, computer: Optional[DeterminantComputer] = None, tolerance: float = 1e-9):
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative (got {tolerance})")
        self.computer = computer if computer is not None else DeterminantComputer()
        self.tolerance = tolerance

    def reference_determinants(self, matrix: Matrix) -> Dict[str, float]:
        """
        Compute the reference determinants of a square matrix.

        Returns
        -------
        Dict[str, float]
            'numpy': np.linalg.det of the float buffer
            'exact': SymPy Berkowitz determinant of the exact rationals
        """
        if not isinstance(matrix, Matrix):
            raise TypeError(f"matrix must be a Matrix instance, got {type(matrix).__name__}")
        if not matrix.is_square:
            raise NotSquareError(
                f"Reference determinants need a square matrix (got {matrix.rows}x{matrix.columns})"
            )
        numeric = float(np.linalg.det(matrix.to_numpy()))
        exact = float(matrix.to_sympy().det(method='berkowitz'))
        return {'numpy': numeric, 'exact': exact}

    @staticmethod
    def hadamard_bound(matrix: Matrix) -> float:
        """Product of the row 2-norms, an upper bound on |det(matrix)|."""
        return float(np.prod(np.linalg.norm(matrix.to_numpy(), axis=1)))

    def verify(self, matrix: Matrix) -> Dict[str, Any]:
        """
        Compare the cofactor determinant with both references.

        Returns
        -------
        Dict[str, Any]
            Keys: 'cofactor', 'numpy', 'exact', 'abs_error_numpy',
            'abs_error_exact', 'agrees'
        """
        refs = self.reference_determinants(matrix)
        cofactor = self.computer.compute_determinant(matrix)

        abs_error_exact = abs(cofactor - refs['exact'])
        allowed = self.tolerance * max(1.0, self.hadamard_bound(matrix))
        return {
            'cofactor': cofactor,
            'numpy': refs['numpy'],
            'exact': refs['exact'],
            'abs_error_numpy': abs(cofactor - refs['numpy']),
            'abs_error_exact': abs_error_exact,
            'agrees': abs_error_exact <= allowed,
        }

    def verify_random(
        self,
        size: int,
        trials: int = 10,
        seed: Optional[int] = None,
        min_value: float = -10.0,
        max_value: float = 10.0,
    ) -> List[Dict[str, Any]]:
        """
        Verify randomly filled size x size matrices.

        A single np.random.default_rng(seed) drives every trial, so a fixed
        seed reproduces the whole batch.
        """
        if size < 1:
            raise ValueError(f"size must be >= 1 (got {size})")
        if trials < 1:
            raise ValueError(f"trials must be >= 1 (got {trials})")

        rng = np.random.default_rng(seed)
        reports = []
        for _ in range(trials):
            m = Matrix(size, size, rng=rng)
            m.fill_random(min_value, max_value)
            reports.append(self.verify(m))
        return reports

    def print_summary(self, reports: List[Dict[str, Any]]) -> None:
        """Print one line per report and an overall verdict."""
        print(f"{'#':<4} {'cofactor':>16} {'exact':>16} {'|err|':>10}  ok")
        for i, r in enumerate(reports):
            mark = "✓" if r['agrees'] else "✗"
            print(f"{i:<4} {r['cofactor']:>16.6f} {r['exact']:>16.6f} {r['abs_error_exact']:>10.2e}  {mark}")
        passed = sum(1 for r in reports if r['agrees'])
        print(f"{passed}/{len(reports)} determinants agree with the exact reference")
