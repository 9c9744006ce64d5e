"""
CPU reference backend for simple linear regression.

Closed-form two-pass OLS: means first, then centered sums of squares
and cross-products. Centering before multiplying avoids the cancellation
of the one-pass sum(x^2) - n*xbar^2 form.
"""

from typing import Any
import numpy as np

from pysimplelm.core.result import Result
from pysimplelm.core.compute.timing import Timer
from pysimplelm.core.compute.tolerances import PERFECT_FIT_RELATIVE_VARIANCE
from pysimplelm.core.validation import check_sum_of_squares
from pysimplelm.regression.design import SimpleRegressionDesign
from pysimplelm.regression.solution import SimpleLinearParams


class CPUTwoPassBackend:
    """
    CPU backend using the two-pass closed form.

    Implements the Backend protocol for SimpleRegressionDesign -> SimpleLinearParams.
    The design rejects constant samples; centered sums that still underflow
    to zero (or overflow) are rejected here before any division.
    """

    @property
    def name(self) -> str:
        return 'cpu_two_pass'

    def solve(self, design: SimpleRegressionDesign) -> Result[SimpleLinearParams]:
        """
        Fit y = slope * x + intercept by ordinary least squares.

        Algorithm:
            1. xbar, ybar
            2. Sxx, Syy, Sxy about the means
            3. slope = Sxy / Sxx, intercept = ybar - slope * xbar
            4. RSS and SSR from the fitted values
            5. R^2 = SSR / Syy
            6. s^2 = RSS / (n - 2), Var(slope) = s^2 / Sxx,
               Var(intercept) = s^2 / n + xbar^2 Var(slope)
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n

        # === First pass: means ===
        with timer.section('means'):
            x_mean = float(np.mean(x))
            y_mean = float(np.mean(y))

        # === Second pass: centered sums ===
        with timer.section('sums_of_squares'):
            dx = x - x_mean
            dy = y - y_mean
            sxx = float(dx @ dx)
            syy = float(dy @ dy)
            sxy = float(dx @ dy)

        check_sum_of_squares(sxx, design.x_name, reason='constant_predictor', n=n)
        check_sum_of_squares(syy, design.y_name, reason='constant_response', n=n)

        with timer.section('coefficients'):
            slope = sxy / sxx
            intercept = y_mean - slope * x_mean

        # === Fit statistics ===
        with timer.section('residuals'):
            fitted = slope * x + intercept
            resid = fitted - y
            explained = fitted - y_mean
            rss = float(resid @ resid)
            ssr = float(explained @ explained)

        with timer.section('variances'):
            df_residual = n - 2
            r_squared = ssr / syy
            residual_variance = rss / df_residual
            slope_variance = residual_variance / sxx
            intercept_variance = residual_variance / n + x_mean * x_mean * slope_variance

        timer.stop()

        perfect_fit = (
            residual_variance < (y_mean ** 2 + ssr / (n - 1)) * PERFECT_FIT_RELATIVE_VARIANCE
        )
        warnings: list[str] = []
        if perfect_fit:
            warnings.append(
                "essentially perfect fit: standard errors are unreliable and "
                "t statistics are undefined"
            )

        params = SimpleLinearParams(
            slope=slope,
            intercept=intercept,
            r_squared=r_squared,
            slope_variance=slope_variance,
            intercept_variance=intercept_variance,
            n=n,
            df_residual=df_residual,
            x_mean=x_mean,
            y_mean=y_mean,
            sxx=sxx,
            rss=rss,
            tss=syy,
            perfect_fit=perfect_fit,
        )

        info: dict[str, Any] = {
            'method': 'two_pass',
            'n': n,
            'df_residual': df_residual,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
