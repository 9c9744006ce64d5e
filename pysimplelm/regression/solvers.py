"""
Solver dispatch for simple linear regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pysimplelm.core.datasource import DataSource
from pysimplelm.regression.design import SimpleRegressionDesign
from pysimplelm.regression.solution import SimpleLinearSolution
from pysimplelm.regression.backends.cpu import CPUTwoPassBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_two_pass']


def fit(
    x: ArrayLike | SimpleRegressionDesign | DataSource,
    y: ArrayLike | str | None = None,
    *,
    x_column: str | None = None,
    backend: BackendChoice = 'auto',
) -> SimpleLinearSolution:
    """
    Fit a simple linear regression y = slope * x + intercept.

    This is the primary public API. All input validation, backend
    selection, and result wrapping happens here; nothing is returned
    unless every statistic is well defined.

    Args:
        x: Predictor samples, a prebuilt SimpleRegressionDesign, or a
            DataSource.
        y: Response samples. With a DataSource, the response column name
            (optional). Must be omitted with a design.
        x_column: With a DataSource, the predictor column name (optional).
        backend: 'auto', 'cpu' or 'cpu_two_pass'. All select the CPU
            two-pass backend.

    Returns:
        SimpleLinearSolution with the fitted line, R^2, standard errors,
        predict() and describe().

    Raises:
        ValidationError: Non-numeric or non-finite input
        DimensionError: len(x) != len(y), or input not 1-D
        DegenerateInputError: n < 3, constant x, or constant y
        ValueError: Unknown backend, or arguments that don't fit the
            kind of x given

    Example:
        >>> from pysimplelm import fit
        >>> model = fit([1, 2, 3], [1, 2, 2])
        >>> round(model.slope, 4), round(model.intercept, 4)
        (0.5, 0.6667)
        >>> model.describe()
        '0.50 x + 0.67    (R^2 = 0.750)'
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(x, SimpleRegressionDesign):
        if y is not None or x_column is not None:
            raise ValueError("y and x_column must be omitted when passing a design")
        design = x
    elif isinstance(x, DataSource):
        if y is not None and not isinstance(y, str):
            raise ValueError("With a DataSource, y must be a column name")
        design = SimpleRegressionDesign.from_datasource(x, x=x_column, y=y)
    else:
        if y is None:
            raise ValueError("y required when x is an array")
        if x_column is not None:
            raise ValueError("x_column only applies to a DataSource")
        design = SimpleRegressionDesign.build(x, y)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return SimpleLinearSolution(
        _result=result,
        _x_name=design.x_name,
        _y_name=design.y_name,
    )


def _get_backend(choice: BackendChoice) -> CPUTwoPassBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_two_pass'):
        return CPUTwoPassBackend()
    raise ValueError(f"Unknown backend: {choice!r}")
