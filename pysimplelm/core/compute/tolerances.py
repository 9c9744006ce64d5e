"""
Tolerance tiers and numeric thresholds.

Used by the CPU backend's perfect-fit check and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form double precision: agrees with lm() to machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, closed-form OLS',
)

# Published reference values quoted to a handful of significant digits
REFERENCE_PUBLISHED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='reference_published',
    description='Agreement with rounded published results',
)

# Smallest number of samples that leaves a residual degree of freedom
# for a two-parameter line.
MIN_SAMPLES = 3

# Residual variance below this multiple of mean(fitted)^2 + var(fitted) is
# an exact fit. Same threshold as the "essentially perfect fit" check in
# R's summary.lm.
PERFECT_FIT_RELATIVE_VARIANCE = 1e-30
