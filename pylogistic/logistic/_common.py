"""
Parameter payload for logistic regression results.

Frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


# Termination reasons recorded in LogisticParams.termination
TERMINATION_CONVERGED = 'converged'
TERMINATION_SINGULAR_WEIGHTS = 'singular_weights'


@dataclass(frozen=True)
class LogisticParams:
    """Binary logistic regression fit produced by IRLS."""

    coefficients: NDArray        # (k+1,), index 0 is the intercept
    iterations: int              # completed IRLS steps
    converged: bool              # step norm fell below tol
    termination: str             # 'converged' or 'singular_weights'
    final_change: float          # ‖β_new − β_prev‖₂ of the last step (inf if none)
    tolerance: float             # convergence threshold used
    linear_predictor: NDArray    # (n,) η = Xβ
    fitted_values: NDArray       # (n,) μ = logistic(η)
    hessian: NDArray             # (k+1, k+1) X'WX at the returned β
    log_likelihood: float
    deviance: float              # −2 · log-likelihood
    null_deviance: float         # deviance of the intercept-only model
    aic: float                   # deviance + 2(k+1)
    n_observations: int
    n_features: int              # k, excluding the intercept
