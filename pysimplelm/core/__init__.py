"""
Core infrastructure for pysimplelm.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: DataSource sample source (arrays, DataFrame, CSV)
    compute: Timing and tolerance constants
"""

from pysimplelm.core.protocols import Backend
from pysimplelm.core.result import Result
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

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Data
    "DataSource",
    # Exceptions
    "PySimpleLMError",
    "ValidationError",
    "DimensionError",
    "ParseError",
    "NumericalError",
    "DegenerateInputError",
    "SourceUnavailableError",
]
