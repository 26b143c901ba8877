#!/usr/bin/env python3
"""
Print a series of labelled matrices together with their determinants.

Examples:
    python matrix_demo.py
    python matrix_demo.py --seed 7 --random-size 4 --verify
    python matrix_demo.py --min -1 --max 1 --report
"""

import argparse
import sys
from typing import List, Optional, Tuple

import numpy as np

from matrix_store import Matrix, MatrixError, identity
from determinant_computer import DeterminantComputer
from determinant_verifier import DeterminantVerifier


def build_examples(
    random_size: int = 3,
    min_value: float = -5.0,
    max_value: float = 5.0,
    seed: Optional[int] = None,
) -> List[Tuple[str, Matrix]]:
    """Return the (label, matrix) pairs shown by the demo, in display order."""
    m2 = Matrix(2, 2)
    m2[0, 0] = 1
    m2[0, 1] = 2
    m2[1, 0] = 3
    m2[1, 1] = 4

    m3 = Matrix.from_array([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    m4 = Matrix.from_array([
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 10, 11, 12],
        [13, 14, 15, 16],
    ])

    random_matrix = Matrix(random_size, random_size, rng=np.random.default_rng(seed))
    random_matrix.fill_random(min_value, max_value)

    return [
        ("Matrix 2x2", m2),
        ("Matrix 3x3", m3),
        ("Matrix 4x4", m4),
        ("Identity matrix 3x3", identity(3)),
        (f"Random matrix {random_size}x{random_size}", random_matrix),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Show matrices and their cofactor-expansion determinants.")
    ap.add_argument("--seed", type=int, default=None, help="seed for the random matrix")
    ap.add_argument("--random-size", type=int, default=3, help="size of the random matrix (default: 3)")
    ap.add_argument("--min", dest="min_value", type=float, default=-5.0, help="lower bound of random values")
    ap.add_argument("--max", dest="max_value", type=float, default=5.0, help="upper bound of random values")
    ap.add_argument("--verify", action="store_true", help="cross-check each determinant against NumPy/SymPy")
    ap.add_argument("--report", action="store_true", help="print a timing report at the end")
    args = ap.parse_args(argv)

    det_comp = DeterminantComputer()
    verifier = DeterminantVerifier(det_comp) if args.verify else None

    try:
        examples = build_examples(args.random_size, args.min_value, args.max_value, args.seed)
        for label, matrix in examples:
            print(f"=== {label} ===")
            print(matrix)
            print(f"Determinant: {det_comp.compute_determinant(matrix):.2f}")
            if verifier is not None:
                report = verifier.verify(matrix)
                status = "OK" if report['agrees'] else "MISMATCH"
                print(f"Exact: {report['exact']:.6f}  NumPy: {report['numpy']:.6f}  [{status}]")
            print()
    except (MatrixError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.report:
        det_comp.print_performance_report()
    return 0


if __name__ == "__main__":
    sys.exit(main())
