"""
Logistic (sigmoid) activation.

    logistic(x) = 1 / (1 + exp(-x))

scipy.special.expit evaluates this without overflow: very negative input
underflows to exactly 0.0 and very positive input rounds to exactly 1.0,
and no finite input yields NaN.
"""

from __future__ import annotations

from typing import Any, overload

import numpy as np
from numpy.typing import NDArray
from scipy.special import expit, log_expit


@overload
def logistic(x: float) -> float: ...
@overload
def logistic(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]: ...


def logistic(x):
    """Elementwise logistic function; scalars in, float out."""
    if np.ndim(x) == 0:
        return float(expit(float(x)))
    return expit(np.asarray(x, dtype=np.float64))


def log_logistic(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """log(logistic(x)), accurate where logistic(x) underflows."""
    return log_expit(np.asarray(x, dtype=np.float64))
