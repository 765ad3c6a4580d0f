"""
Estimation algorithm selector.

    LogisticAlgorithm.IRLS  Iteratively Reweighted Least Squares (Newton's
                            method on the Bernoulli log-likelihood)
    LogisticAlgorithm.MLE   Direct likelihood maximisation by automatic
                            differentiation; not available, fit() refuses it

References:
    Hastie, Tibshirani & Friedman (2009). Elements of Statistical Learning.
    Murphy, K. P. (2012). Machine Learning: A Probabilistic Perspective.
"""

from __future__ import annotations

from enum import Enum


class LogisticAlgorithm(str, Enum):
    """Closed set of estimation strategies accepted by fit()."""

    IRLS = 'irls'
    MLE = 'mle'

    @property
    def is_implemented(self) -> bool:
        return self is LogisticAlgorithm.IRLS


def resolve_algorithm(algorithm: str | LogisticAlgorithm) -> LogisticAlgorithm:
    """Resolve an algorithm argument to a LogisticAlgorithm member."""
    if isinstance(algorithm, LogisticAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return LogisticAlgorithm(algorithm.lower())
        except ValueError:
            valid = ', '.join(repr(a.value) for a in LogisticAlgorithm)
            raise ValueError(
                f"Unknown algorithm: {algorithm!r}. Valid algorithms: {valid}"
            ) from None
    raise TypeError(
        f"algorithm must be str or LogisticAlgorithm, got {type(algorithm).__name__}"
    )
