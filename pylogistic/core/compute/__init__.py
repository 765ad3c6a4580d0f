"""
Shared compute infrastructure for pylogistic.

This module provides timing utilities, numerical defaults and linear
algebra kernels shared by the estimation backends.

IMPORTANT: This is NOT where estimation backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Solver defaults and comparison tolerance tiers
    linalg: Linear algebra kernels (checked LU solves)
"""

from pylogistic.core.compute.timing import Timer

__all__ = [
    "Timer",
]
