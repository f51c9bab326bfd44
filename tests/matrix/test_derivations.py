"""
Tests for minor, cofactor, determinant, adjoint, inverse and pow.

Integer results are checked exactly; floating point results against
closed forms or SciPy (see test_reference_validation.py for the random
comparisons).
"""

import logging
import warnings

import numpy as np
import pytest

from pymatrix import (
    InvalidArgumentError,
    Matrix,
    NotSquareError,
    NumericalError,
    OutOfRangeError,
    SingularMatrixError,
    config_context,
)


@pytest.fixture
def nine():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def unimodular():
    """Integer matrix with determinant -1: its inverse is integral."""
    return Matrix.from_rows([[2, 1, 1], [1, 3, 2], [1, 0, 0]])


# ═══════════════════════════════════════════════════════════════════════
# Minor and cofactor
# ═══════════════════════════════════════════════════════════════════════


class TestMinor:

    def test_minor(self, nine):
        assert nine.minor(1, 1).to_list() == [[1, 3], [7, 9]]
        assert nine.minor(0, 0).to_list() == [[5, 6], [8, 9]]
        assert nine.minor(2, 0).to_list() == [[2, 3], [5, 6]]

    def test_minor_is_independent(self, nine):
        sub = nine.minor(0, 0)
        sub.set_at(0, 0, 100)
        assert nine.at(1, 1) == 5

    def test_minor_of_1x1(self):
        m = Matrix.from_rows([[5]])
        assert m.minor(0, 0).shape == (0, 0)

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix(2, 3).minor(0, 0)

    def test_out_of_range(self, nine):
        with pytest.raises(OutOfRangeError):
            nine.minor(3, 0)


class TestCofactor:

    def test_1x1_is_zero(self):
        assert Matrix.from_rows([[5]]).cofactor(0, 0) == 0
        assert Matrix.from_rows([[-2.5]]).cofactor(0, 0) == 0.0

    def test_signs(self, nine):
        assert nine.cofactor(0, 1) == 6
        assert nine.cofactor(1, 1) == -12
        assert nine.cofactor(2, 1) == 6

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix(3, 2).cofactor(0, 0)


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_2x2(self, simple_2x2):
        assert simple_2x2.determinant() == -2

    def test_3x3(self):
        m = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert m.determinant() == -306

    def test_singular(self, nine):
        assert nine.determinant() == 0

    def test_1x1(self):
        assert Matrix.from_rows([[5]]).determinant() == 5

    def test_empty_is_zero(self):
        assert Matrix().determinant() == 0
        assert Matrix(dtype=np.int32).determinant() == 0

    def test_integer_overflow_wraps_silently(self):
        m = Matrix.from_rows([[1, 2], [3, 4]], dtype=np.uint8)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert m.determinant() == 254
            m.adjoint()

    def test_large_int8_expansion_wraps_silently(self):
        m = Matrix.full(3, 3, 100, dtype=np.int8)
        m.set_diag([-128, 127, -128])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            m.determinant()
            m.adjoint()

    def test_identity(self):
        assert Matrix.identity(5).determinant() == 1.0

    def test_keeps_integer_dtype(self, int_square):
        det = int_square.determinant()
        assert isinstance(det, np.integer)

    def test_transpose_invariant(self, int_square):
        assert int_square.T.determinant() == int_square.determinant()

    def test_row_swap_flips_sign(self, int_square):
        det = int_square.determinant()
        int_square.swap_row(0, 3)
        assert int_square.determinant() == -det

    def test_float(self):
        m = Matrix.from_rows([[0.5, 1.5], [2.0, 4.0]])
        assert m.determinant() == pytest.approx(-1.0)

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix(2, 3).determinant()


# ═══════════════════════════════════════════════════════════════════════
# Adjoint
# ═══════════════════════════════════════════════════════════════════════


class TestAdjoint:

    def test_2x2(self, simple_2x2):
        assert simple_2x2.adjoint().to_list() == [[4, -2], [-3, 1]]

    def test_3x3(self, unimodular):
        assert unimodular.adjoint().to_list() == [[0, 0, -1], [2, -1, -3], [-3, 1, 5]]

    def test_1x1(self):
        assert Matrix.from_rows([[5]]).adjoint().to_list() == [[1]]

    def test_product_is_scaled_identity(self, int_square):
        det = int_square.determinant()
        expected = Matrix.identity(4, dtype=np.int64) * det
        assert int_square @ int_square.adjoint() == expected
        assert int_square.adjoint() @ int_square == expected

    def test_operand_untouched(self, simple_2x2):
        simple_2x2.adjoint()
        assert simple_2x2.to_list() == [[1, 2], [3, 4]]

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix(1, 2).adjoint()


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_float_2x2(self, simple_2x2):
        inv = simple_2x2.astype(np.float64).inverse()
        assert inv == Matrix.from_rows([[-2.0, 1.0], [1.5, -0.5]])

    def test_integer_truncates(self, simple_2x2):
        inv = simple_2x2.inverse()
        assert inv.dtype == np.int64
        assert inv.to_list() == [[-2, 1], [1, 0]]

    def test_exact_integral_inverse(self, unimodular):
        inv = unimodular.inverse()
        assert inv.to_list() == [[0, 0, 1], [-2, 1, 3], [3, -1, -5]]
        assert unimodular @ inv == Matrix.identity(3, dtype=np.int64)

    def test_product_is_identity(self, unimodular):
        a = unimodular.astype(np.float64)
        assert a * a.inverse() == Matrix.identity(3)

    def test_well_conditioned(self, well_conditioned):
        product = well_conditioned @ well_conditioned.inverse()
        np.testing.assert_allclose(product.to_numpy(), np.eye(4), atol=1e-12)

    def test_1x1(self):
        assert Matrix.from_rows([[4.0]]).inverse().to_list() == [[0.25]]

    def test_singular(self, nine):
        with pytest.raises(SingularMatrixError) as exc_info:
            nine.inverse()
        assert exc_info.value.determinant == 0
        assert exc_info.value.shape == (3, 3)

    def test_singular_float(self):
        m = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(NumericalError):
            m.inverse()

    def test_empty_is_singular(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            Matrix().inverse()
        assert exc_info.value.shape == (0, 0)
        with pytest.raises(SingularMatrixError):
            Matrix(dtype=np.int64).pow(-1)

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix(2, 3).inverse()


# ═══════════════════════════════════════════════════════════════════════
# Power
# ═══════════════════════════════════════════════════════════════════════


class TestPow:

    def test_positive(self):
        fib = Matrix.from_rows([[1, 1], [1, 0]])
        assert (fib ** 5).to_list() == [[8, 5], [5, 3]]
        assert fib.to_list() == [[1, 1], [1, 0]]

    def test_one_is_unchanged(self, int_square):
        assert int_square ** 1 == int_square

    def test_zero_is_identity(self, int_square):
        int_square.pow(0)
        assert int_square == Matrix.identity(4, dtype=np.int64)

    def test_in_place(self, int_square):
        expected = np.linalg.matrix_power(int_square.to_numpy(), 3)
        assert int_square.pow(3) is None
        np.testing.assert_array_equal(int_square.to_numpy(), expected)

    def test_ipow(self):
        m = Matrix.from_rows([[1, 1], [0, 1]])
        before = m
        m **= 4
        assert m is before
        assert m.to_list() == [[1, 4], [0, 1]]

    def test_negative(self):
        m = Matrix.from_rows([[2.0, 1.0], [1.0, 1.0]])
        assert (m ** -1).to_list() == [[1.0, -1.0], [-1.0, 2.0]]
        assert (m ** -2).to_list() == [[2.0, -3.0], [-3.0, 5.0]]

    def test_negative_singular(self, nine):
        snapshot = nine.copy()
        with pytest.raises(SingularMatrixError):
            nine.pow(-1)
        assert nine == snapshot

    def test_not_square(self):
        m = Matrix(2, 3)
        with pytest.raises(NotSquareError):
            m.pow(2)
        with pytest.raises(NotSquareError):
            m.pow(0)

    @pytest.mark.parametrize("power", [1.5, "2", True])
    def test_non_integer_power(self, simple_2x2, power):
        with pytest.raises(InvalidArgumentError):
            simple_2x2.pow(power)


# ═══════════════════════════════════════════════════════════════════════
# Expansion cost warning and logging
# ═══════════════════════════════════════════════════════════════════════


class TestExpansionWarning:

    def test_warns_at_threshold(self):
        m = Matrix.identity(3)
        with config_context(expansion_warning_order=3):
            with pytest.warns(RuntimeWarning, match="cofactor expansion"):
                m.determinant()
            with pytest.warns(RuntimeWarning):
                m.adjoint()
            with pytest.warns(RuntimeWarning):
                m.inverse()
            with pytest.warns(RuntimeWarning):
                m.pow(-1)

    def test_silent_below_threshold(self, simple_2x2):
        with config_context(expansion_warning_order=3):
            with warnings.catch_warnings():
                warnings.simplefilter("error")
                simple_2x2.determinant()
                simple_2x2.adjoint()

    def test_zero_disables(self):
        m = Matrix.identity(5)
        with config_context(expansion_warning_order=0):
            with warnings.catch_warnings():
                warnings.simplefilter("error")
                m.determinant()

    def test_default_threshold_silent_for_small(self, int_square):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            int_square.determinant()
            int_square.inverse()


class TestLogging:

    def test_debug_records(self, simple_2x2, caplog):
        caplog.set_level(logging.DEBUG, logger="pymatrix")
        simple_2x2.determinant()
        simple_2x2.pow(2)
        assert "determinant of 2x2" in caplog.text
        assert "pow(2)" in caplog.text
