"""
Simple regression design.

Design wraps the predictor and response samples and validates them.
It knows it's building a one-predictor regression; DataSource doesn't.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysimplelm.core.datasource import DataSource
from pysimplelm.core.exceptions import ValidationError
from pysimplelm.core.compute.tolerances import MIN_SAMPLES
from pysimplelm.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_min_samples,
    check_not_constant,
)


@dataclass(frozen=True)
class SimpleRegressionDesign:
    """
    Validated sample pair set for simple linear regression.

    Immutable after construction. Holding a design means every check has
    passed: equal lengths, finite values, n >= 3, and neither sample
    constant.

    Construction:
        SimpleRegressionDesign.build(x, y)
        SimpleRegressionDesign.from_datasource(ds, x='YearsExperience', y='Salary')
        SimpleRegressionDesign.from_datasource(ds)    # 'x'/'y', else first two columns
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _x_name: str = 'x'
    _y_name: str = 'y'

    @classmethod
    def build(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        x_name: str = 'x',
        y_name: str = 'y',
    ) -> SimpleRegressionDesign:
        """
        Build a design from array-likes.

        Raises:
            ValidationError: Non-numeric or non-finite values
            DimensionError: Not 1-D, or len(x) != len(y)
            DegenerateInputError: n < 3, constant x, or constant y
        """
        x_arr = _as_vector(check_array(x, x_name))
        y_arr = _as_vector(check_array(y, y_name))

        check_1d(x_arr, x_name)
        check_1d(y_arr, y_name)
        check_consistent_length(x_arr, y_arr, names=(x_name, y_name))
        check_finite(x_arr, x_name)
        check_finite(y_arr, y_name)
        check_min_samples(x_arr, MIN_SAMPLES, x_name)
        check_not_constant(x_arr, x_name, reason='constant_predictor')
        check_not_constant(y_arr, y_name, reason='constant_response')

        # Copies so later mutation of the caller's arrays can't reach the design
        return cls(
            _x=np.array(x_arr, dtype=np.float64),
            _y=np.array(y_arr, dtype=np.float64),
            _n=x_arr.shape[0],
            _x_name=x_name,
            _y_name=y_name,
        )

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        x: str | None = None,
        y: str | None = None,
    ) -> SimpleRegressionDesign:
        """
        Build a design from two columns of a DataSource.

        Column resolution, in order: the names given; the columns 'x' and
        'y'; the first two columns in source order (predictor, response).
        """
        if x is None and y is None:
            if 'x' in source and 'y' in source:
                x, y = 'x', 'y'
            else:
                keys = source.keys()
                if len(keys) < 2:
                    raise ValidationError(
                        f"DataSource needs two columns for x and y, has {list(keys)}"
                    )
                x, y = keys[0], keys[1]
        elif x is None or y is None:
            raise ValueError("Specify both x and y column names, or neither")

        return cls.build(source[x], source[y], x_name=x, y_name=y)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor samples (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response samples (n,)."""
        return self._y

    @property
    def n(self) -> int:
        return self._n

    @property
    def x_name(self) -> str:
        return self._x_name

    @property
    def y_name(self) -> str:
        return self._y_name


def _as_vector(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Flatten an (n, 1) column into (n,); leave anything else alone."""
    if array.ndim == 2 and array.shape[1] == 1:
        return array.ravel()
    return array
