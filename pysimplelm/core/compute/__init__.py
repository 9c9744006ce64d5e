"""
Shared compute infrastructure for pysimplelm.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and numeric thresholds
"""

from pysimplelm.core.compute.timing import Timer

__all__ = [
    "Timer",
]
