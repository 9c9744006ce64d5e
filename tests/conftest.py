"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def noisy_line_data(rng):
    """Line with known coefficients plus Gaussian noise."""
    n = 50
    x = rng.uniform(0.0, 20.0, n)
    slope_true, intercept_true = 3.0, -4.0
    y = slope_true * x + intercept_true + rng.standard_normal(n) * 2.0
    return x, y, slope_true, intercept_true


@pytest.fixture
def salary_csv(tmp_path):
    """The bundled salary sample written out as a CSV with a header line."""
    from pysimplelm.datasets import salary

    path = tmp_path / "salaryData.csv"
    rows = ["YearsExperience,Salary"]
    rows += [f"{x},{y}" for x, y in salary]
    path.write_text("\n".join(rows) + "\n")
    return path
