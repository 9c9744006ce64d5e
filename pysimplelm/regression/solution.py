"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pysimplelm.core.result import Result


@dataclass(frozen=True)
class SimpleLinearParams:
    """
    Parameter payload for simple linear regression.

    The immutable fitted model computed by backends. Holds scalars only;
    the samples it was fit from are not retained.
    """
    slope: float
    intercept: float
    r_squared: float
    slope_variance: float
    intercept_variance: float
    n: int
    df_residual: int
    x_mean: float
    y_mean: float
    sxx: float
    rss: float
    tss: float
    perfect_fit: bool = False


@dataclass
class SimpleLinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides the fitted line, its
    inferential statistics, and prediction.
    """
    _result: Result[SimpleLinearParams]
    _x_name: str = 'x'
    _y_name: str = 'y'

    # Cached computations
    _t_statistics: NDArray[np.floating[Any]] | None = None
    _p_values: NDArray[np.floating[Any]] | None = None

    @property
    def params(self) -> SimpleLinearParams:
        return self._result.params

    # === Fitted line ===

    @property
    def slope(self) -> float:
        return self.params.slope

    @property
    def intercept(self) -> float:
        return self.params.intercept

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope], in lm() order."""
        return np.array([self.intercept, self.slope])

    @property
    def r_squared(self) -> float:
        """
        Coefficient of determination, SSR / SST.

        In [0, 1] up to floating-point rounding; not clipped.
        """
        return self.params.r_squared

    @property
    def adjusted_r_squared(self) -> float:
        n = self.params.n
        return 1.0 - (1.0 - self.r_squared) * (n - 1) / self.df_residual

    # === Standard errors ===

    @property
    def slope_standard_error(self) -> float:
        return float(np.sqrt(self.params.slope_variance))

    @property
    def intercept_standard_error(self) -> float:
        return float(np.sqrt(self.params.intercept_variance))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """[intercept SE, slope SE]."""
        return np.array([self.intercept_standard_error, self.slope_standard_error])

    @property
    def residual_std_error(self) -> float:
        return float(np.sqrt(self.params.rss / self.df_residual))

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """
        t-statistics for [intercept, slope].

        NaN for an essentially perfect fit (the same test that raises the
        warning) and wherever a standard error is zero.
        """
        if self._t_statistics is not None:
            return self._t_statistics

        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            t = np.where((se > 0) & (not self.params.perfect_fit), t, np.nan)
        self._t_statistics = t
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values for [intercept, slope] on df_residual DF."""
        if self._p_values is not None:
            return self._p_values

        t = self.t_statistics
        self._p_values = 2.0 * stats.t.sf(np.abs(t), self.df_residual)
        return self._p_values

    def conf_int(self, level: float = 0.95) -> NDArray[np.floating[Any]]:
        """
        Confidence intervals for [intercept, slope].

        Args:
            level: Confidence level in (0, 1)

        Returns:
            (2, 2) array; row 0 is the intercept, row 1 the slope,
            columns are lower and upper bounds.
        """
        if not 0.0 < level < 1.0:
            raise ValueError(f"level must be in (0, 1), got {level}")
        q = stats.t.ppf(0.5 + level / 2.0, self.df_residual)
        half = q * self.standard_errors
        return np.column_stack([self.coefficients - half, self.coefficients + half])

    @property
    def f_statistic(self) -> float:
        """F statistic for the slope on (1, df_residual) DF."""
        ssr = self.params.tss * self.r_squared
        with np.errstate(divide='ignore'):
            return float(np.float64(ssr) / (self.params.rss / self.df_residual))

    @property
    def f_p_value(self) -> float:
        return float(stats.f.sf(self.f_statistic, 1, self.df_residual))

    # === Prediction ===

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Expected response at x.

        Defined for any finite x, inside or outside the sampled range.
        A scalar gives a float; an array-like gives an array.
        """
        if np.ndim(x) == 0:
            return self.slope * float(x) + self.intercept
        return self.slope * np.asarray(x, dtype=np.float64) + self.intercept

    # === Metadata ===

    @property
    def n(self) -> int:
        return self.params.n

    @property
    def df_residual(self) -> int:
        return self.params.df_residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # === Presentation ===

    def describe(self) -> str:
        """One-line fitted equation with R^2."""
        return f"{self.slope:.2f} x + {self.intercept:.2f}    (R^2 = {self.r_squared:.3f})"

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Simple Linear Regression Results",
            "=" * 64,
            f"Formula: {self._y_name} ~ {self._x_name}",
            f"Observations: {self.n}",
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            f"F-statistic: {self.f_statistic:.4g} on 1 and {self.df_residual} DF, "
            f"p-value: {self.f_p_value:.4g}",
            "",
            "Coefficients:",
            "-" * 64,
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 64,
        ]

        labels = ("(Intercept)", self._x_name)
        for label, coef, se, t, pv in zip(
            labels, self.coefficients, self.standard_errors,
            self.t_statistics, self.p_values,
        ):
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            p_str = f"{pv:10.4g}" if not np.isnan(pv) else "        NA"
            lines.append(f"{label:<12} {coef:14.6f} {se:12.6f} {t_str} {p_str}")

        lines.append("-" * 64)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"SimpleLinearSolution(n={self.n}, slope={self.slope:.4g}, "
            f"intercept={self.intercept:.4g}, r_squared={self.r_squared:.4f})"
        )
