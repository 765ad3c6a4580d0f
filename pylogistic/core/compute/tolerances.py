"""
Numerical defaults and tolerance tiers.

Solver defaults used by pylogistic.fit(), the singularity threshold used by
the checked linear solves, and comparison tolerances used by the test suite.
"""

from dataclasses import dataclass

import numpy as np


# Convergence threshold on the Euclidean norm of the coefficient update.
# sqrt(machine epsilon) ~ 1.49e-8 for float64.
DEFAULT_TOLERANCE = float(np.sqrt(np.finfo(np.float64).eps))

# IRLS typically needs fewer than 10 steps on well-posed data. On
# (quasi-)separable data coefficients grow by roughly one unit per step
# until the weights underflow, which takes ~40 steps in float64.
DEFAULT_MAX_ITER = 100

# A diagonally-equilibrated matrix whose reciprocal condition number falls
# below this value is treated as singular.
SINGULARITY_RCOND = 1e-13


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Fits compared against closed-form maximum-likelihood estimates
CPU_FP64 = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='cpu_fp64',
    description='CPU double precision, IRLS stopped at sqrt(eps)',
)

# Repeated fits of identical input must agree exactly
BITWISE = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='bitwise',
    description='Deterministic engine, identical inputs',
)


def select_tolerance(deterministic: bool = False) -> ToleranceTier:
    """Select the tolerance tier for comparing fitted coefficients."""
    if deterministic:
        return BITWISE
    return CPU_FP64
