"""
IRLS starting values.

Every coefficient, intercept included, starts at the log-odds of the
overall positive rate:

    β₀ = log(ȳ / (1 - ȳ))  for all k + 1 entries

This is a uniform starting point, not a per-feature estimate. It is
undefined when all labels agree, which LogisticDesign already rejects.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylogistic.core.exceptions import ResponseError


def initial_log_odds(y: NDArray[np.floating[Any]]) -> float:
    """Log-odds of mean(y); raises ResponseError if mean(y) is 0 or 1."""
    y_bar = float(np.mean(y))
    if not 0.0 < y_bar < 1.0:
        raise ResponseError(
            f"y: positive rate {y_bar:g} has no finite log-odds; "
            f"both outcomes are required"
        )
    return float(np.log(y_bar / (1.0 - y_bar)))


def initial_coefficients(y: NDArray[np.floating[Any]], p: int) -> NDArray[np.floating[Any]]:
    """Length-p coefficient vector filled with initial_log_odds(y)."""
    return np.full(p, initial_log_odds(y), dtype=np.float64)
