"""
Simple linear regression.

Public API:
    fit(x, y, ...) -> SimpleLinearSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pysimplelm.regression import fit
    >>> model = fit(years, salary)
    >>> model.predict(5.0)
    >>> print(model.summary())
"""

from pysimplelm.regression.design import SimpleRegressionDesign
from pysimplelm.regression.solution import SimpleLinearSolution, SimpleLinearParams
from pysimplelm.regression.solvers import fit

__all__ = [
    "fit",
    "SimpleRegressionDesign",
    "SimpleLinearSolution",
    "SimpleLinearParams",
]
