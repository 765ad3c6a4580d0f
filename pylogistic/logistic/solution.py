"""
Solution wrapper for logistic regression results.

LogisticSolution wraps a Result[LogisticParams] and exposes user-friendly
properties, Wald inference, predictions and an R-style summary().
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pylogistic.core.result import Result
from pylogistic.core.exceptions import DimensionError, SingularMatrixError
from pylogistic.core.compute.linalg.solve import inverse_checked
from pylogistic.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_binary,
    check_consistent_length,
    check_finite,
)
from pylogistic.logistic._common import LogisticParams, TERMINATION_CONVERGED
from pylogistic.logistic.activation import logistic


class LogisticSolution:
    """User-facing logistic regression results.

    A result that stopped early on singular weights is a valid, usable
    fit but not a converged one: check ``converged`` or ``termination``.
    """

    __slots__ = ('_result', '_covariance')

    def __init__(self, _result: Result[LogisticParams]) -> None:
        self._result = _result
        self._covariance: NDArray[np.floating[Any]] | None = None

    # -- Properties delegating to LogisticParams --

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """All k + 1 coefficients; index 0 is the intercept."""
        return self._result.params.coefficients

    @property
    def intercept(self) -> float:
        return float(self._result.params.coefficients[0])

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        """Feature coefficients, excluding the intercept."""
        return self._result.params.coefficients[1:]

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def termination(self) -> str:
        """'converged' or 'singular_weights'."""
        return self._result.params.termination

    @property
    def final_change(self) -> float:
        return self._result.params.final_change

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        """Fitted probabilities μ on the training data."""
        return self._result.params.fitted_values

    @property
    def linear_predictor(self) -> NDArray[np.floating[Any]]:
        return self._result.params.linear_predictor

    @property
    def hessian(self) -> NDArray[np.floating[Any]]:
        return self._result.params.hessian

    @property
    def log_likelihood(self) -> float:
        return self._result.params.log_likelihood

    @property
    def deviance(self) -> float:
        return self._result.params.deviance

    @property
    def null_deviance(self) -> float:
        return self._result.params.null_deviance

    @property
    def aic(self) -> float:
        return self._result.params.aic

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_features(self) -> int:
        return self._result.params.n_features

    # -- Wald inference --

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """
        Asymptotic covariance of the coefficients, (X'WX)⁻¹.

        All NaN when the information matrix is singular at the returned
        coefficients (e.g. after a singular-weight stop).
        """
        if self._covariance is None:
            p = len(self.coefficients)
            try:
                self._covariance = inverse_checked(self.hessian, 'hessian')
            except SingularMatrixError:
                self._covariance = np.full((p, p), np.nan, dtype=np.float64)
        return self._covariance

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        return np.sqrt(np.maximum(np.diag(self.covariance), 0.0))

    @property
    def z_statistics(self) -> NDArray[np.floating[Any]]:
        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            z = self.coefficients / se
        return np.where(np.isfinite(z), z, np.nan)

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided Wald p-values."""
        return 2.0 * stats.norm.sf(np.abs(self.z_statistics))

    # -- Prediction --

    def _features(self, X: ArrayLike) -> NDArray[np.floating[Any]]:
        X_arr = check_array(X, 'X')
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        check_2d(X_arr, 'X')
        if X_arr.shape[1] != self.n_features:
            raise DimensionError(
                f"X: expected {self.n_features} feature columns, got {X_arr.shape[1]}"
            )
        check_finite(X_arr, 'X')
        return X_arr

    def decision_function(self, X: ArrayLike) -> NDArray[np.floating[Any]]:
        """Linear predictor η = β₀ + X β for new observations (no intercept column in X)."""
        return self._features(X) @ self.slopes + self.intercept

    def predict_proba(self, X: ArrayLike) -> NDArray[np.floating[Any]]:
        """P(y = 1 | X) for new observations."""
        return logistic(self.decision_function(X))

    def predict(self, X: ArrayLike, threshold: float = 0.5) -> NDArray[np.floating[Any]]:
        """Class labels (0.0 / 1.0): 1 where P(y = 1 | X) > threshold."""
        if not 0.0 < threshold < 1.0:
            raise ValueError(f"threshold must be in (0, 1), got {threshold}")
        return (self.predict_proba(X) > threshold).astype(np.float64)

    def misclassification_rate(self, X: ArrayLike, y: ArrayLike) -> float:
        """Share of observations whose predicted label differs from y."""
        y_arr = check_array(y, 'y')
        check_1d(y_arr, 'y')
        check_binary(y_arr, 'y')
        check_finite(y_arr, 'y')
        y_hat = self.predict(X)
        check_consistent_length(y_hat, y_arr, names=('X', 'y'))
        return float(np.mean(y_hat != y_arr))

    # -- Envelope --

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Generate R-style summary output."""
        if self.termination == TERMINATION_CONVERGED:
            status = f"converged in {self.iterations} iterations"
        else:
            status = f"stopped early ({self.termination}) after {self.iterations} iterations"

        lines = [
            "Logistic Regression Results (IRLS)",
            "=" * 64,
            f"Observations: {self.n_observations}",
            f"Features: {self.n_features}",
            f"Status: {status}",
            "",
            "Coefficients:",
            "-" * 64,
            f"{'':<12} {'Estimate':>12} {'Std.Error':>12} {'z value':>10} {'Pr(>|z|)':>12}",
            "-" * 64,
        ]

        names = ["(Intercept)"] + [f"x{i}" for i in range(1, self.n_features + 1)]
        for name, coef, se, z, pv in zip(
            names, self.coefficients, self.standard_errors,
            self.z_statistics, self.p_values,
        ):
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            z_str = f"{z:10.3f}" if not np.isnan(z) else "        NA"
            p_str = f"{pv:12.4g}" if not np.isnan(pv) else "          NA"
            lines.append(f"{name:<12} {coef:12.6f} {se_str} {z_str} {p_str}")

        lines.append("-" * 64)
        lines.append(
            f"Null deviance: {self.null_deviance:.4f} on {self.n_observations - 1} DF"
        )
        lines.append(
            f"Residual deviance: {self.deviance:.4f} on "
            f"{self.n_observations - self.n_features - 1} DF"
        )
        lines.append(f"AIC: {self.aic:.4f}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LogisticSolution(n={self.n_observations}, k={self.n_features}, "
            f"iterations={self.iterations}, termination={self.termination!r})"
        )
