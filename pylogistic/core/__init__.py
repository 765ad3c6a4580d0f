"""
Core infrastructure for pylogistic.

This module provides shared abstractions and utilities used by the
estimation code in pylogistic.logistic.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, numerical defaults, linear algebra primitives
"""

from pylogistic.core.result import Result
from pylogistic.core.exceptions import (
    PyLogisticError,
    ValidationError,
    DimensionError,
    ResponseError,
    NonFiniteInputError,
    ConfigurationError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
    AlgorithmNotImplementedError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLogisticError",
    "ValidationError",
    "DimensionError",
    "ResponseError",
    "NonFiniteInputError",
    "ConfigurationError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
    "AlgorithmNotImplementedError",
]
