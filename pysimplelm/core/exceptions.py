"""
Exception hierarchy for pysimplelm.

All exceptions inherit from PySimpleLMError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySimpleLMError(Exception):
    """Base exception for all pysimplelm errors."""
    pass


class ValidationError(PySimpleLMError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an array is not one-dimensional, or when the predictor
    and response samples have different lengths.
    """
    pass


class ParseError(ValidationError):
    """
    A sample source could not be parsed into numbers.

    Attributes:
        path: File being read, if any
        column: Column holding the offending value
        line: 1-based line number in the file (header is line 1)
        value: The raw text that failed to parse
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        column: str | None = None,
        line: int | None = None,
        value: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.column = column
        self.line = line
        self.value = value


class NumericalError(PySimpleLMError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    A regression statistic is mathematically undefined for the samples.

    Raised instead of returning NaN or Inf when the predictor is constant,
    the response is constant, or there are too few samples to leave a
    positive number of residual degrees of freedom.

    Attributes:
        reason: 'too_few_samples', 'constant_predictor' or 'constant_response'
        n: Number of samples supplied
    """

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        n: int | None = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.n = n


class SourceUnavailableError(PySimpleLMError):
    """
    A sample source could not be opened or read.

    Attributes:
        path: Location that was requested
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
