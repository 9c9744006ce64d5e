"""
pysimplelm: simple linear regression with inferential statistics.

Fits y = slope * x + intercept by ordinary least squares and reports R^2
and the standard errors of both coefficients.

Submodules:
    regression: fit() and the SimpleLinearSolution query interface
    core: exceptions, validation, DataSource, Result envelope
    datasets: bundled years-of-experience / salary sample
"""

__version__ = "0.1.0"

from pysimplelm.core.datasource import DataSource
from pysimplelm.core.exceptions import (
    PySimpleLMError,
    ValidationError,
    DimensionError,
    ParseError,
    NumericalError,
    DegenerateInputError,
    SourceUnavailableError,
)
from pysimplelm.regression import fit, SimpleLinearSolution

__all__ = [
    "__version__",
    "fit",
    "SimpleLinearSolution",
    "DataSource",
    "PySimpleLMError",
    "ValidationError",
    "DimensionError",
    "ParseError",
    "NumericalError",
    "DegenerateInputError",
    "SourceUnavailableError",
]
