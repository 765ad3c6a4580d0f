"""
Logistic regression design.

Validates the caller's feature matrix and binary response and prepares
the IRLS-ready form: the design matrix with an intercept column of ones
prepended, its transpose, and the response.

The caller's arrays are copied, never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylogistic.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_binary,
    check_both_classes,
    check_consistent_length,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class LogisticDesign:
    """
    Prepared input for a logistic regression fit.

    Immutable after construction. Build with LogisticDesign.build(X, y).

    Attributes (via properties):
        X: Augmented design matrix [1 | features], shape (n, k + 1)
        Xt: Transpose of X, shape (k + 1, n)
        y: Binary response, shape (n,)
        n: Number of observations
        k: Number of features (excluding the intercept)
        p: Number of coefficients (k + 1)
    """
    _X: NDArray[np.floating[Any]]
    _Xt: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _k: int

    @classmethod
    def build(cls, X: ArrayLike, y: ArrayLike) -> LogisticDesign:
        """
        Validate inputs and build the augmented design.

        Checks, failing on the first violation:
            0. X and y convert to numeric arrays, X is 2D (1D X is read as
               a single feature) and y is 1D, at least one observation
            1. every finite y is exactly 0 or 1          -> ResponseError
            2. rows(X) == len(y)                         -> DimensionError
            3. X and y contain no NaN/Inf                -> NonFiniteInputError
            4. y holds both outcomes                     -> ResponseError

        Returns:
            LogisticDesign ready for IRLS
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_min_samples(y_arr, 1, 'y')

        check_binary(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_both_classes(y_arr, 'y')

        n, k = X_arr.shape
        X_aug = np.column_stack([np.ones(n, dtype=np.float64), X_arr])

        return cls(
            _X=X_aug,
            _Xt=np.ascontiguousarray(X_aug.T),
            _y=y_arr,
            _n=n,
            _k=k,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Augmented design matrix (n x (k + 1)), column 0 is the intercept."""
        return self._X

    @property
    def Xt(self) -> NDArray[np.floating[Any]]:
        """Transpose of the augmented design matrix."""
        return self._Xt

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def k(self) -> int:
        """Number of features, excluding the intercept."""
        return self._k

    @property
    def p(self) -> int:
        """Number of coefficients, including the intercept."""
        return self._k + 1

    @property
    def positive_rate(self) -> float:
        """Share of observations with y == 1."""
        return float(np.mean(self._y))


def validate_and_augment(
    X: ArrayLike, y: ArrayLike
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Validate (X, y) and return (X_aug, X_aug.T, y); see LogisticDesign.build."""
    design = LogisticDesign.build(X, y)
    return design.X, design.Xt, design.y
