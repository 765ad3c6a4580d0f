"""
Tests for LogisticDesign and validate_and_augment.

Covers the check order (response, then dimensions, then finiteness),
the degenerate-label policy, and the augmented design layout.
"""

import numpy as np
import pytest

from pylogistic.core.exceptions import (
    DimensionError,
    NonFiniteInputError,
    ResponseError,
    ValidationError,
)
from pylogistic.logistic import LogisticDesign, validate_and_augment


class TestAugmentation:

    def test_intercept_column_prepended(self, small_case):
        X, y = small_case
        design = LogisticDesign.build(X, y)
        assert design.X.shape == (4, 4)
        np.testing.assert_array_equal(design.X[:, 0], np.ones(4))
        np.testing.assert_array_equal(design.X[:, 1:], X)

    def test_transpose(self, small_case):
        design = LogisticDesign.build(*small_case)
        np.testing.assert_array_equal(design.Xt, design.X.T)

    def test_response_unchanged(self, small_case):
        X, y = small_case
        np.testing.assert_array_equal(LogisticDesign.build(X, y).y, y)

    def test_sizes(self, small_case):
        design = LogisticDesign.build(*small_case)
        assert (design.n, design.k, design.p) == (4, 3, 4)
        assert design.positive_rate == 0.75

    def test_validate_and_augment_tuple(self, small_case):
        X, y = small_case
        X_aug, X_aug_t, y_out = validate_and_augment(X, y)
        assert X_aug.shape == (4, 4)
        np.testing.assert_array_equal(X_aug_t, X_aug.T)
        np.testing.assert_array_equal(y_out, y)

    def test_caller_arrays_untouched(self, small_case):
        X, y = small_case
        X_before, y_before = X.copy(), y.copy()
        design = LogisticDesign.build(X, y)
        np.testing.assert_array_equal(X, X_before)
        np.testing.assert_array_equal(y, y_before)
        assert not np.shares_memory(design.y, y)

    def test_1d_feature(self):
        design = LogisticDesign.build([0.5, -1.0, 2.0], [0, 1, 1])
        assert design.X.shape == (3, 2)
        assert design.k == 1

    def test_column_response_raveled(self):
        design = LogisticDesign.build(np.zeros((3, 1)), np.array([[0], [1], [1]]))
        assert design.y.shape == (3,)

    def test_no_features(self):
        design = LogisticDesign.build(np.empty((4, 0)), [0, 1, 1, 0])
        assert design.X.shape == (4, 1)
        assert design.p == 1

    def test_integer_and_list_inputs(self):
        design = LogisticDesign.build([[1, 2], [3, 4], [5, 7]], [1, 0, 1])
        assert design.X.dtype == np.float64
        assert design.y.dtype == np.float64

    def test_immutable(self, small_case):
        design = LogisticDesign.build(*small_case)
        with pytest.raises(AttributeError):
            design.n = 5


class TestValidation:

    @pytest.mark.parametrize("bad", [2.0, 0.5, -1.0])
    def test_non_binary_response(self, bad):
        with pytest.raises(ResponseError):
            LogisticDesign.build(np.zeros((3, 2)), [0.0, 1.0, bad])

    def test_response_checked_before_dimensions(self):
        with pytest.raises(ResponseError):
            LogisticDesign.build(np.zeros((5, 2)), [0.0, 1.0, 3.0])

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="X=5, y=3"):
            LogisticDesign.build(np.zeros((5, 2)), [0.0, 1.0, 1.0])

    def test_dimensions_checked_before_finiteness(self):
        X = np.zeros((5, 2))
        X[0, 0] = np.nan
        with pytest.raises(DimensionError):
            LogisticDesign.build(X, [0.0, 1.0, 1.0])

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite_features(self, value):
        X = np.zeros((3, 2))
        X[1, 1] = value
        with pytest.raises(NonFiniteInputError):
            LogisticDesign.build(X, [0.0, 1.0, 1.0])

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite_response(self, value):
        with pytest.raises(NonFiniteInputError) as exc_info:
            LogisticDesign.build(np.zeros((3, 2)), [0.0, value, 1.0])
        assert exc_info.value.name == "y"

    @pytest.mark.parametrize("y", [[0, 0, 0], [1, 1, 1]])
    def test_single_class_rejected(self, y):
        with pytest.raises(ResponseError, match="both outcomes"):
            LogisticDesign.build(np.arange(3.0), y)

    def test_three_dimensional_features(self):
        with pytest.raises(DimensionError):
            LogisticDesign.build(np.zeros((3, 2, 2)), [0, 1, 1])

    def test_matrix_response(self):
        with pytest.raises(DimensionError):
            LogisticDesign.build(np.zeros((3, 2)), np.zeros((3, 2)))

    def test_empty(self):
        with pytest.raises(ValidationError):
            LogisticDesign.build(np.empty((0, 2)), np.empty(0))

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            LogisticDesign.build([["a", "b"]], [1])
