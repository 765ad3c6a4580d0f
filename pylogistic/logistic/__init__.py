"""
Binary logistic regression.

Public API:
    fit(X, y, ...) -> LogisticSolution

The fit() function is the only entry point. It handles:
    - Configuration and input validation
    - Design construction (intercept column added here)
    - Algorithm dispatch
    - Result wrapping

Example:
    >>> from pylogistic.logistic import fit
    >>> result = fit(X, y)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pylogistic.logistic.activation import logistic
from pylogistic.logistic.algorithms import LogisticAlgorithm, resolve_algorithm
from pylogistic.logistic.design import LogisticDesign, validate_and_augment
from pylogistic.logistic._common import LogisticParams
from pylogistic.logistic.solution import LogisticSolution
from pylogistic.logistic.solvers import fit

__all__ = [
    "fit",
    "logistic",
    "LogisticAlgorithm",
    "resolve_algorithm",
    "LogisticDesign",
    "validate_and_augment",
    "LogisticParams",
    "LogisticSolution",
]
