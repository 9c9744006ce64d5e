"""
Regression backends.

Available backends:
    CPUTwoPassBackend: closed-form two-pass OLS
"""

from pysimplelm.regression.backends.cpu import CPUTwoPassBackend

__all__ = [
    "CPUTwoPassBackend",
]
