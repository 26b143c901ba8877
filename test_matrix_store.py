"""
Tests for the matrix_store module
"""

import numpy as np
import pytest
import sympy as sp

from matrix_store import (
    IndexOutOfRangeError,
    InvalidDimensionError,
    Matrix,
    MatrixError,
    NullInputError,
    identity,
    zero,
)


class TestConstruction:
    """Creating matrices"""

    def test_zero_filled(self):
        m = Matrix(2, 3)
        assert m.rows == 2
        assert m.columns == 3
        assert m.shape == (2, 3)
        assert m.to_list() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    @pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2), (0, 0)])
    def test_non_positive_dimensions(self, rows, cols):
        """Non-positive sizes raise InvalidDimensionError"""
        with pytest.raises(InvalidDimensionError, match="positive"):
            Matrix(rows, cols)

    def test_non_integer_dimensions(self):
        with pytest.raises(TypeError, match="must be an integer"):
            Matrix(2.5, 2)

    def test_from_array(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m[1, 2] == 6.0

    def test_from_array_is_deep_copy(self):
        """The source array is never aliased"""
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(source)
        source[0, 0] = 99.0
        assert m[0, 0] == 1.0
        m[1, 1] = -1.0
        assert source[1, 1] == 4.0

    def test_from_array_none(self):
        with pytest.raises(NullInputError):
            Matrix.from_array(None)

    @pytest.mark.parametrize("values", [
        [],
        [[]],
        [1, 2, 3],
        [[1, 2], [3]],
        [[[1]]],
    ])
    def test_from_array_bad_shape(self, values):
        """Empty, ragged and non-2D inputs are rejected"""
        with pytest.raises(InvalidDimensionError):
            Matrix.from_array(values)

    def test_identity_and_zero(self):
        assert identity(3).to_list() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        assert zero(2, 4).to_list() == [[0.0] * 4, [0.0] * 4]
        with pytest.raises(InvalidDimensionError):
            identity(0)

    def test_errors_share_base_class(self):
        for exc in (InvalidDimensionError, NullInputError, IndexOutOfRangeError):
            assert issubclass(exc, MatrixError)


class TestElementAccess:
    """Bounds-checked reads and writes"""

    def test_get_set(self):
        m = Matrix(2, 2)
        m.set(0, 1, 2.5)
        m[1, 0] = -3
        assert m.get(0, 1) == 2.5
        assert m[1, 0] == -3.0
        assert isinstance(m[1, 0], float)

    @pytest.mark.parametrize("r, c", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range(self, r, c):
        """Negative indices are rejected rather than wrapped"""
        m = Matrix(2, 3)
        with pytest.raises(IndexOutOfRangeError, match="out of range"):
            m[r, c]
        with pytest.raises(IndexOutOfRangeError):
            m[r, c] = 1.0

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            Matrix(1, 1).get(1, 0)

    def test_bad_key(self):
        m = Matrix(2, 2)
        with pytest.raises(TypeError):
            m[0]
        with pytest.raises(TypeError):
            m[0, 1.0]


class TestFillRandom:
    """Random population"""

    def test_values_in_range(self):
        m = Matrix(10, 10)
        m.fill_random(-5, 5, rng=np.random.default_rng(0))
        data = m.to_numpy()
        assert np.all(data >= -5)
        assert np.all(data < 5)
        assert len(np.unique(data)) > 1

    def test_default_range(self):
        m = Matrix(8, 8)
        m.fill_random(rng=np.random.default_rng(1))
        data = m.to_numpy()
        assert np.all(data >= -10)
        assert np.all(data < 10)

    def test_seeded_fill_is_reproducible(self):
        a = Matrix(3, 3)
        b = Matrix(3, 3)
        a.fill_random(-1, 1, rng=np.random.default_rng(42))
        b.fill_random(-1, 1, rng=np.random.default_rng(42))
        assert a == b

    def test_constructor_generator(self):
        """A generator given at construction is used when none is passed"""
        a = Matrix(2, 2, rng=np.random.default_rng(7))
        b = Matrix(2, 2)
        a.fill_random()
        b.fill_random(rng=np.random.default_rng(7))
        assert a == b

    def test_pluggable_source(self):
        """Any object with uniform(low, high, size) can drive the fill"""

        class ConstantSource:
            def uniform(self, low, high, size):
                return np.full(size, (low + high) / 2)

        m = Matrix(2, 3)
        m.fill_random(0, 4, rng=ConstantSource())
        assert m.to_list() == [[2.0] * 3, [2.0] * 3]

    def test_returns_none(self):
        assert Matrix(1, 1).fill_random(rng=np.random.default_rng(0)) is None

    def test_inverted_range(self):
        with pytest.raises(ValueError, match="min_value"):
            Matrix(2, 2).fill_random(5, -5)


class TestRender:
    """Text rendering"""

    def test_two_by_two(self):
        m = Matrix.from_array([[1, 2], [3, 4]])
        assert m.render() == "| 1.00  2.00 |\n| 3.00  4.00 |\n"
        assert str(m) == m.render()

    def test_width_from_widest_element(self):
        """All elements are padded to the widest formatted value"""
        m = Matrix.from_array([[-1.5, 10], [0, 2]])
        assert m.render() == "| -1.50  10.00 |\n|  0.00   2.00 |\n"

    def test_rounding(self):
        m = Matrix.from_array([[1.234, 5.678]])
        assert m.render() == "| 1.23  5.68 |\n"

    def test_single_element(self):
        assert Matrix.from_array([[7]]).render() == "| 7.00 |\n"


class TestConversions:
    """Copies and exports"""

    def test_copy_is_independent(self):
        m = identity(2)
        c = m.copy()
        c[0, 0] = 5.0
        assert m[0, 0] == 1.0
        assert c != m

    def test_to_numpy_is_copy(self):
        m = identity(2)
        arr = m.to_numpy()
        arr[0, 0] = 9.0
        assert m[0, 0] == 1.0

    def test_to_sympy_exact(self):
        m = Matrix.from_array([[0.5, 0.1], [2, 3]])
        s = m.to_sympy()
        assert isinstance(s, sp.Matrix)
        assert s[0, 0] == sp.Rational(1, 2)
        assert s[0, 1] == sp.Rational(0.1)
        assert float(s[0, 1]) == 0.1

    def test_equality(self):
        assert Matrix.from_array([[1, 2]]) == Matrix.from_array([[1.0, 2.0]])
        assert Matrix(1, 2) != Matrix(2, 1)
        assert Matrix(1, 1) != "not a matrix"

    def test_repr(self):
        assert repr(Matrix.from_array([[1, 2]])) == "Matrix(rows=1, columns=2, data=[[1.0, 2.0]])"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
