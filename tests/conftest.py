"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


def _simulate_logistic(rng, n, beta):
    """Features uniform on (-1, 1), labels Bernoulli(logistic(β₀ + Xβ))."""
    beta = np.asarray(beta, dtype=np.float64)
    X = rng.uniform(-1.0, 1.0, size=(n, len(beta) - 1))
    eta = beta[0] + X @ beta[1:]
    prob = 1.0 / (1.0 + np.exp(-eta))
    y = rng.binomial(1, prob).astype(np.float64)
    return X, y


@pytest.fixture
def simulate():
    """simulate(rng, n, beta) -> (X, y) drawn from a known logistic model."""
    return _simulate_logistic


@pytest.fixture
def logistic_data(rng):
    """Well-posed logistic dataset: n=400, two features."""
    beta_true = np.array([0.4, 1.5, -1.0])
    X, y = _simulate_logistic(rng, 400, beta_true)
    return X, y, beta_true


@pytest.fixture
def small_case():
    """4 observations, 3 features, y = [0, 1, 1, 1] (drawn with R set.seed(1234))."""
    X = np.array([
        [-1.2070657, 0.4291247, -0.5644520],
        [0.2774292, 0.5060559, -0.8900378],
        [1.0844412, -0.5747400, -0.4771927],
        [-2.3456977, -0.5466319, -0.9983864],
    ])
    y = np.array([0.0, 1.0, 1.0, 1.0])
    return X, y


@pytest.fixture
def grouped_binary_data():
    """
    One binary feature with a closed-form MLE.

    x = 0: 3 of 10 positive (p0 = 0.3); x = 1: 7 of 10 positive (p1 = 0.7).
    intercept = logit(p0), slope = logit(p1) - logit(p0).
    """
    x = np.repeat([0.0, 1.0], 10)
    y = np.array([1, 1, 1, 0, 0, 0, 0, 0, 0, 0,
                  1, 1, 1, 1, 1, 1, 1, 0, 0, 0], dtype=np.float64)
    return x.reshape(-1, 1), y


@pytest.fixture
def separable_data():
    """Perfectly separable, symmetric 1-feature data (MLE does not exist)."""
    X = np.array([[-2.0], [-1.0], [1.0], [2.0]])
    y = np.array([0.0, 0.0, 1.0, 1.0])
    return X, y


@pytest.fixture
def collinear_data(rng):
    """Third feature duplicates the first (X'WX singular at every step)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    X = np.column_stack([x1, x2, x1])
    y = rng.binomial(1, 0.5, size=n).astype(np.float64)
    return X, y
