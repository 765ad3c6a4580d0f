"""
Exception hierarchy for pylogistic.

All exceptions inherit from PyLogisticError to allow catching any
library-specific error. Domain code raises the most specific class here
and never wraps one of these in another.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLogisticError(Exception):
    """Base exception for all pylogistic errors."""
    pass


class ValidationError(PyLogisticError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, always
    before any numerical work begins.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when the design matrix and response disagree on the number of rows.
    """
    pass


class ResponseError(ValidationError):
    """
    Response vector is not a valid binary outcome.

    Raised when y holds a finite value other than 0 or 1, or when every
    label is identical (the log-odds starting value is then undefined).

    Attributes:
        invalid_values: Up to a handful of offending values, if any
    """

    def __init__(self, message: str, invalid_values: tuple[float, ...] = ()):
        super().__init__(message)
        self.invalid_values = invalid_values


class NonFiniteInputError(ValidationError):
    """
    Input contains NaN or infinite values.

    Attributes:
        name: Name of the offending input
        n_nan: Number of NaN entries
        n_inf: Number of +/-Inf entries
    """

    def __init__(self, message: str, name: str | None = None, n_nan: int = 0, n_inf: int = 0):
        super().__init__(message)
        self.name = name
        self.n_nan = n_nan
        self.n_inf = n_inf


class ConfigurationError(ValidationError):
    """
    A solver setting is outside its valid range.

    Attributes:
        parameter: Name of the offending keyword argument
        value: The rejected value
    """

    def __init__(self, message: str, parameter: str | None = None, value: object = None):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(PyLogisticError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically the number of coefficients)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class ConvergenceError(PyLogisticError):
    """
    Iterative algorithm failed to converge.

    Raised when IRLS fails to meet its tolerance within the maximum
    number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Norm of the last coefficient update
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold


class AlgorithmNotImplementedError(PyLogisticError, NotImplementedError):
    """
    The selected estimation algorithm exists by name only.

    Also a NotImplementedError so generic callers can catch it the usual way.

    Attributes:
        algorithm: Value of the selector that was refused
    """

    def __init__(self, message: str, algorithm: str | None = None):
        super().__init__(message)
        self.algorithm = algorithm
