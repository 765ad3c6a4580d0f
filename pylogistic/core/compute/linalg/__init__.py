"""
Linear algebra kernels for pylogistic.

All functions follow these conventions:
    - Dense operations use NumPy/SciPy (LAPACK under the hood)
    - Factorisations return a structured result dataclass
    - Singular systems raise SingularMatrixError immediately

Submodules:
    solve: LU-based checked solves, inversion, and diagonal solves
"""

from pylogistic.core.compute.linalg.solve import (
    LUResult,
    diagonal_solve,
    inverse_checked,
    lu_factor_checked,
    lu_solve_checked,
    lu_solve_factored,
)

__all__ = [
    "LUResult",
    "diagonal_solve",
    "inverse_checked",
    "lu_factor_checked",
    "lu_solve_checked",
    "lu_solve_factored",
]
