"""
Tests for IRLS starting values.
"""

import numpy as np
import pytest

from pylogistic.core.exceptions import ResponseError
from pylogistic.logistic._initial import initial_coefficients, initial_log_odds


class TestInitialGuess:

    def test_log_odds_of_positive_rate(self):
        assert initial_log_odds(np.array([0.0, 1.0, 1.0, 1.0])) == pytest.approx(np.log(3.0))

    def test_balanced_labels_start_at_zero(self):
        assert initial_log_odds(np.array([0.0, 1.0])) == 0.0

    def test_uniform_vector(self):
        beta = initial_coefficients(np.array([1.0, 0.0, 0.0, 0.0]), 4)
        assert beta.shape == (4,)
        np.testing.assert_allclose(beta, np.full(4, np.log(1.0 / 3.0)))

    @pytest.mark.parametrize("y", [np.zeros(4), np.ones(4)])
    def test_degenerate_rate_rejected(self, y):
        with pytest.raises(ResponseError):
            initial_coefficients(y, 3)
