"""
CPU backend for binary logistic regression via IRLS.

Implements Iteratively Reweighted Least Squares, i.e. Newton's method on
the Bernoulli log-likelihood. Each iteration solves the weighted normal
equations with a checked LU solve.

Algorithm:
    Initialize: β = log(ȳ / (1 - ȳ)) for every coefficient
    For iteration 1..max_iter:
        η = X β
        μ = logistic(η)
        W = diag(μ (1 - μ))                  # Bernoulli variance
        H = X' W X                           # information matrix
        z = W⁻¹ (y - μ)                      # stop early if W singular
        Solve H β_new = X' W (η + z)         # raise if H singular
        Check: ‖β_new - β‖₂ < tol

The convergence test runs after every completed step, so at least one
step is always taken.

References:
    Hastie, Tibshirani & Friedman (2009). Elements of Statistical Learning, §4.4.1.
    Murphy, K. P. (2012). Machine Learning: A Probabilistic Perspective, §8.3.4.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from pylogistic.core.result import Result
from pylogistic.core.exceptions import ConvergenceError, SingularMatrixError
from pylogistic.core.compute.timing import Timer
from pylogistic.core.compute.tolerances import DEFAULT_MAX_ITER, DEFAULT_TOLERANCE
from pylogistic.core.compute.linalg.solve import diagonal_solve, lu_solve_checked
from pylogistic.logistic.activation import log_logistic, logistic
from pylogistic.logistic.design import LogisticDesign
from pylogistic.logistic._initial import initial_coefficients
from pylogistic.logistic._common import (
    LogisticParams,
    TERMINATION_CONVERGED,
    TERMINATION_SINGULAR_WEIGHTS,
)

logger = logging.getLogger(__name__)


class CPUIRLSBackend:
    """CPU backend using IRLS with an LU inner solve.

    Termination:
    - converged: coefficient update norm below tol
    - singular weights: some μᵢ saturated to 0 or 1, so W has no inverse;
      the last committed coefficients are returned with converged=False
    - singular Hessian: SingularMatrixError, no result
    - max_iter steps without convergence: ConvergenceError
    """

    @property
    def name(self) -> str:
        return 'cpu_irls'

    def solve(
        self,
        design: LogisticDesign,
        tol: float = DEFAULT_TOLERANCE,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> Result[LogisticParams]:
        """Run IRLS to fit the logistic regression.

        Args:
            design: Validated LogisticDesign
            tol: Convergence tolerance on ‖β_new - β‖₂
            max_iter: Maximum IRLS iterations

        Returns:
            Result[LogisticParams] with coefficients, iteration count,
            termination reason and fit diagnostics

        Raises:
            SingularMatrixError: If X'WX is singular at some iteration
            ConvergenceError: If max_iter steps complete without convergence
        """
        timer = Timer()
        timer.start()

        X, Xt, y = design.X, design.Xt, design.y
        warnings_list: list[str] = []

        # ------------------------------------------------------------------
        # Initialize β
        # ------------------------------------------------------------------
        with timer.section('initialize'):
            beta = initial_coefficients(y, design.p)

        # ------------------------------------------------------------------
        # IRLS loop
        # ------------------------------------------------------------------
        iterations = 0
        converged = False
        termination = TERMINATION_CONVERGED
        change = float('inf')

        with timer.section('irls'):
            while True:
                eta = X @ beta
                mu = logistic(eta)
                w = mu * (1.0 - mu)

                # X'W without materialising the n x n diagonal
                XtW = Xt * w
                hessian = XtW @ X

                try:
                    z = diagonal_solve(w, y - mu, 'weights')
                except SingularMatrixError as e:
                    termination = TERMINATION_SINGULAR_WEIGHTS
                    warnings_list.append(
                        f"IRLS stopped early after {iterations} iterations: "
                        f"weights matrix (W) is singular ({e}); returning the "
                        f"last coefficients, which did not converge"
                    )
                    logger.debug(
                        "IRLS iteration %d: singular weights, stopping early",
                        iterations + 1,
                    )
                    break

                beta_new = lu_solve_checked(hessian, XtW @ (eta + z), 'hessian')

                iterations += 1
                change = float(np.linalg.norm(beta_new - beta))
                beta = beta_new
                logger.debug("IRLS iteration %d: |delta beta| = %.3e", iterations, change)

                if change < tol:
                    converged = True
                    break

                if iterations >= max_iter:
                    raise ConvergenceError(
                        f"IRLS did not converge in {max_iter} iterations "
                        f"(last |delta beta| = {change:.3e}, tol = {tol:.3e})",
                        iterations=iterations,
                        final_change=change,
                        reason='max_iterations',
                        threshold=tol,
                    )

        # ------------------------------------------------------------------
        # Fit diagnostics at the returned coefficients
        # ------------------------------------------------------------------
        with timer.section('diagnostics'):
            eta = X @ beta
            mu = logistic(eta)
            hessian = (Xt * (mu * (1.0 - mu))) @ X
            log_lik = _log_likelihood(y, eta)
            deviance = -2.0 * log_lik
            null_deviance = _null_deviance(y)
            aic = deviance + 2.0 * design.p

        timer.stop()

        params = LogisticParams(
            coefficients=beta,
            iterations=iterations,
            converged=converged,
            termination=termination,
            final_change=change,
            tolerance=tol,
            linear_predictor=eta,
            fitted_values=mu,
            hessian=hessian,
            log_likelihood=log_lik,
            deviance=deviance,
            null_deviance=null_deviance,
            aic=aic,
            n_observations=design.n,
            n_features=design.k,
        )

        return Result(
            params=params,
            info={
                'method': 'irls',
                'converged': converged,
                'termination': termination,
                'iterations': iterations,
                'final_change': change,
                'tolerance': tol,
                'max_iter': max_iter,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _log_likelihood(y: NDArray, eta: NDArray) -> float:
    """Bernoulli log-likelihood Σ y log μ + (1 - y) log(1 - μ), from η."""
    return float(np.sum(y * log_logistic(eta) + (1.0 - y) * log_logistic(-eta)))


def _null_deviance(y: NDArray) -> float:
    """Deviance of the intercept-only model, whose MLE is μ = ȳ."""
    n = y.shape[0]
    y_bar = float(np.mean(y))
    return -2.0 * n * (y_bar * np.log(y_bar) + (1.0 - y_bar) * np.log(1.0 - y_bar))
