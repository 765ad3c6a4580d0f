"""
Tests for the checked LU solves in core/compute/linalg.
"""

import numpy as np
import pytest

from pylogistic.core.exceptions import SingularMatrixError
from pylogistic.core.compute.linalg import (
    diagonal_solve,
    inverse_checked,
    lu_factor_checked,
    lu_solve_checked,
)


@pytest.fixture
def spd_matrix(rng):
    A = rng.standard_normal((6, 4))
    return A.T @ A + 0.1 * np.eye(4)


class TestLUSolve:

    def test_matches_numpy_solve(self, spd_matrix, rng):
        b = rng.standard_normal(4)
        np.testing.assert_allclose(
            lu_solve_checked(spd_matrix, b, "A"),
            np.linalg.solve(spd_matrix, b),
            rtol=1e-10,
        )

    def test_matrix_right_hand_side(self, spd_matrix, rng):
        B = rng.standard_normal((4, 3))
        np.testing.assert_allclose(
            lu_solve_checked(spd_matrix, B, "A"),
            np.linalg.solve(spd_matrix, B),
            rtol=1e-10,
        )

    def test_badly_scaled_columns_are_not_singular(self, rng):
        """Equilibration: column scale alone must not trigger the check."""
        A = rng.standard_normal((20, 3)) * np.array([1e-6, 1.0, 1e6])
        H = A.T @ A
        b = rng.standard_normal(3)
        d = np.sqrt(np.diag(H))
        # cond(H) ~ 1e23, so compare with the unit-diagonal system
        expected = np.linalg.solve(H / np.outer(d, d), b / d) / d
        np.testing.assert_allclose(lu_solve_checked(H, b, "H"), expected, rtol=1e-8)

    def test_inverse_matches_numpy(self, spd_matrix):
        np.testing.assert_allclose(
            inverse_checked(spd_matrix, "A"),
            np.linalg.inv(spd_matrix),
            rtol=1e-10,
        )

    def test_factor_reports_condition(self, spd_matrix):
        factor = lu_factor_checked(spd_matrix, "A")
        assert factor.rank == 4
        assert 1.0 <= factor.condition_number < 1e6


class TestSingular:

    def test_duplicated_column(self, rng):
        x = rng.standard_normal((10, 2))
        A = np.column_stack([x, x[:, 0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            lu_solve_checked(A.T @ A, np.ones(3), "hessian")
        err = exc_info.value
        assert err.matrix_name == "hessian"
        assert err.expected_rank == 3
        assert err.rank == 2

    def test_zero_diagonal(self):
        A = np.diag([1.0, 0.0, 2.0])
        with pytest.raises(SingularMatrixError, match="zero or non-finite"):
            lu_solve_checked(A, np.ones(3), "hessian")

    def test_non_finite_entry(self):
        A = np.array([[1.0, np.nan], [np.nan, 1.0]])
        with pytest.raises(SingularMatrixError):
            inverse_checked(A, "hessian")

    def test_non_square_rejected(self):
        with pytest.raises(ValueError, match="square"):
            lu_factor_checked(np.ones((2, 3)), "A")


class TestDiagonalSolve:

    def test_elementwise_division(self):
        np.testing.assert_allclose(
            diagonal_solve(np.array([2.0, 0.5]), np.array([1.0, 1.0]), "W"),
            [0.5, 2.0],
        )

    def test_zero_entry_is_singular(self):
        with pytest.raises(SingularMatrixError, match="1 zero diagonal entry") as exc_info:
            diagonal_solve(np.array([0.25, 0.0]), np.array([0.5, 0.0]), "weights")
        assert exc_info.value.matrix_name == "weights"
        assert exc_info.value.rank == 1

    def test_overflowing_quotient_is_singular(self):
        with pytest.raises(SingularMatrixError, match="non-finite"):
            diagonal_solve(np.array([1e-310]), np.array([1e10]), "weights")
