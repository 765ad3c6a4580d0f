"""
pylogistic: binary logistic regression by Iteratively Reweighted Least Squares.

Submodules:
    logistic: Design validation, IRLS estimation, solutions
    core: Exceptions, Result envelope, validation, linear algebra
"""

__version__ = "0.1.0"

from pylogistic import core
from pylogistic import logistic
from pylogistic.logistic import (
    fit,
    LogisticAlgorithm,
    LogisticDesign,
    LogisticSolution,
    validate_and_augment,
)

__all__ = [
    "__version__",
    "core",
    "logistic",
    "fit",
    "LogisticAlgorithm",
    "LogisticDesign",
    "LogisticSolution",
    "validate_and_augment",
]
