"""
Solver dispatch for logistic regression.

This module provides the fit() function (public API) and algorithm dispatch.
"""

import warnings

from numpy.typing import ArrayLike

from pylogistic.core.exceptions import AlgorithmNotImplementedError
from pylogistic.core.compute.tolerances import DEFAULT_MAX_ITER, DEFAULT_TOLERANCE
from pylogistic.core.validation import check_positive_float, check_positive_int
from pylogistic.logistic.algorithms import LogisticAlgorithm, resolve_algorithm
from pylogistic.logistic.design import LogisticDesign
from pylogistic.logistic.solution import LogisticSolution
from pylogistic.logistic.backends.cpu_irls import CPUIRLSBackend


def fit(
    X: ArrayLike,
    y: ArrayLike,
    *,
    algorithm: str | LogisticAlgorithm = LogisticAlgorithm.IRLS,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
) -> LogisticSolution:
    """
    Fit a binary logistic regression model.

    Maximises the Bernoulli log-likelihood of

        P(y = 1 | x) = logistic(β₀ + x'β)

    An intercept column is added automatically; do not include one in X.
    Neither X nor y is modified.

    Args:
        X: Feature matrix (n x k). A 1D array is read as one feature.
        y: Response vector (n,) with every element exactly 0 or 1.
        algorithm: Estimation strategy:
            - 'irls': Iteratively Reweighted Least Squares
            - 'mle': likelihood maximisation by automatic differentiation
              [not implemented; always raises AlgorithmNotImplementedError]
        tol: Convergence threshold on the Euclidean norm of the coefficient
            update. Must be finite and > 0.
        max_iter: Maximum IRLS iterations. Must be >= 1.

    Returns:
        LogisticSolution with coefficients, iteration count, termination
        reason, inference and prediction helpers. A fit that stopped early
        because the weights became singular returns normally with
        converged=False and emits a RuntimeWarning.

    Raises:
        ConfigurationError: If tol or max_iter is out of range
        ResponseError: If y has a value other than 0/1, or a single class
        DimensionError: If X and y disagree on the number of rows
        NonFiniteInputError: If X or y contains NaN or Inf
        AlgorithmNotImplementedError: If algorithm='mle'
        SingularMatrixError: If the Hessian X'WX becomes singular
        ConvergenceError: If max_iter iterations complete without convergence

    Example:
        >>> import numpy as np
        >>> from pylogistic import fit
        >>>
        >>> rng = np.random.default_rng(0)
        >>> X = rng.uniform(-1, 1, size=(500, 2))
        >>> y = rng.binomial(1, 1 / (1 + np.exp(-(0.3 + X @ [2.0, -1.0]))))
        >>>
        >>> result = fit(X, y)
        >>> print(result.coefficients)
        >>> print(result.summary())
    """
    # === Configuration ===
    tol = check_positive_float(tol, 'tol')
    max_iter = check_positive_int(max_iter, 'max_iter')
    choice = resolve_algorithm(algorithm)

    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = LogisticDesign.build(X, y)

    # === Select Backend ===
    backend = _get_backend(choice)

    # === Solve ===
    result = backend.solve(design, tol=tol, max_iter=max_iter)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return LogisticSolution(_result=result)


def _get_backend(choice: LogisticAlgorithm) -> CPUIRLSBackend:
    """
    Instantiate the backend for an estimation algorithm.

    Raises:
        AlgorithmNotImplementedError: If the algorithm has no backend
    """
    if choice is LogisticAlgorithm.IRLS:
        return CPUIRLSBackend()

    if choice is LogisticAlgorithm.MLE:
        raise AlgorithmNotImplementedError(
            "Logistic regression by automatic-differentiation MLE is not "
            "implemented; use algorithm='irls'",
            algorithm=choice.value,
        )

    raise ValueError(f"Unknown algorithm: {choice!r}")
