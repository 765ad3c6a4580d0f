"""
Logistic regression backends.

Available backends:
    CPUIRLSBackend: CPU implementation of IRLS with LU inner solves
"""

from pylogistic.logistic.backends.cpu_irls import CPUIRLSBackend

__all__ = [
    "CPUIRLSBackend",
]
