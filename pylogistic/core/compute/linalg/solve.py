"""
Checked dense solves.

LU-based solves (LAPACK via SciPy) that turn singular or numerically
singular systems into SingularMatrixError instead of returning NaN- or
Inf-filled results. Used for the IRLS Newton step, for the diagonal
weight system, and for the covariance of the fitted coefficients.
"""

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pylogistic.core.compute.tolerances import SINGULARITY_RCOND
from pylogistic.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class LUResult:
    """
    LU factorisation of a diagonally equilibrated square matrix.

    The factored matrix is D⁻¹ A D⁻¹ with D = diag(sqrt(|diag(A)|)), so
    solves must be pre- and post-scaled by ``scale``.

    Attributes:
        lu: Combined L and U factors (scipy.linalg.lu_factor layout)
        piv: Pivot indices
        scale: Equilibration vector sqrt(|diag(A)|)
        condition_number: 2-norm condition number of the equilibrated matrix
        rank: Numerical rank at SINGULARITY_RCOND
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    scale: NDArray[np.floating[Any]]
    condition_number: float
    rank: int


def lu_factor_checked(
    A: NDArray[np.floating[Any]],
    name: str,
    rcond: float = SINGULARITY_RCOND,
) -> LUResult:
    """
    Factor a square matrix with a positive diagonal, rejecting singular ones.

    Intended for information matrices X'WX. The matrix is equilibrated to
    unit diagonal before the condition check so that column scaling of
    the design does not count as ill-conditioning.

    Args:
        A: Square matrix (p x p)
        name: Matrix name used in error messages
        rcond: Reciprocal condition number below which A is singular

    Returns:
        LUResult ready for lu_solve_factored()

    Raises:
        SingularMatrixError: If A has a zero or non-finite diagonal entry,
            or its equilibrated reciprocal condition number is below rcond
    """
    p = A.shape[0]
    if A.ndim != 2 or A.shape[1] != p:
        raise ValueError(f"{name}: expected a square matrix, got shape {A.shape}")

    diag = np.abs(np.diag(A))
    if not np.all(np.isfinite(A)) or np.any(diag == 0.0):
        raise SingularMatrixError(
            f"{name} matrix is singular (non-invertible): "
            f"zero or non-finite diagonal entry",
            matrix_name=name,
            condition_number=float('inf'),
            expected_rank=p,
        )

    scale = np.sqrt(diag)
    A_eq = A / np.outer(scale, scale)

    s = np.linalg.svd(A_eq, compute_uv=False)
    with np.errstate(divide='ignore', invalid='ignore'):
        cond = float(s[0] / s[-1])
    rank = int(np.sum(s > s[0] * rcond))

    if not np.isfinite(cond) or cond * rcond > 1.0:
        raise SingularMatrixError(
            f"{name} matrix is singular (non-invertible): "
            f"condition number {cond:.3e}, numerical rank {rank} of {p}",
            matrix_name=name,
            condition_number=cond,
            rank=rank,
            expected_rank=p,
        )

    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A_eq, check_finite=False)

    return LUResult(lu=lu, piv=piv, scale=scale, condition_number=cond, rank=rank)


def lu_solve_factored(
    factor: LUResult,
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Solve A x = b given the equilibrated factorisation of A."""
    scale = factor.scale if b.ndim == 1 else factor.scale[:, np.newaxis]
    x = lu_solve((factor.lu, factor.piv), b / scale, check_finite=False)
    return x / scale


def lu_solve_checked(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b via LU, raising on a singular A.

    Args:
        A: Square matrix with positive diagonal (p x p)
        b: Right-hand side (p,) or (p, m)
        name: Matrix name used in error messages

    Returns:
        Solution x with the shape of b

    Raises:
        SingularMatrixError: If A is singular or numerically singular
    """
    return lu_solve_factored(lu_factor_checked(A, name), b)


def inverse_checked(
    A: NDArray[np.floating[Any]],
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix with positive diagonal via LU.

    Raises:
        SingularMatrixError: If A is singular or numerically singular
    """
    factor = lu_factor_checked(A, name)
    return lu_solve_factored(factor, np.eye(A.shape[0]))


def diagonal_solve(
    d: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Solve diag(d) x = b without forming the n x n matrix.

    Args:
        d: Diagonal entries (n,)
        b: Right-hand side (n,)
        name: Matrix name used in error messages

    Returns:
        x = b / d

    Raises:
        SingularMatrixError: If any diagonal entry is zero or the quotient
            is not finite
    """
    n_zero = int(np.sum(d == 0.0))
    if n_zero > 0:
        raise SingularMatrixError(
            f"{name} matrix is singular (non-invertible): "
            f"{n_zero} zero diagonal entr{'y' if n_zero == 1 else 'ies'}",
            matrix_name=name,
            rank=d.shape[0] - n_zero,
            expected_rank=d.shape[0],
        )

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        x = b / d

    if not np.all(np.isfinite(x)):
        raise SingularMatrixError(
            f"{name} matrix is numerically singular: solve produced non-finite values",
            matrix_name=name,
            expected_rank=d.shape[0],
        )
    return x
