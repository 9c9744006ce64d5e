"""
Tests for the pysimplelm exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PySimpleLMError)
    - Diagnostic attributes on ParseError, DegenerateInputError,
      SourceUnavailableError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pysimplelm.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    NumericalError,
    ParseError,
    PySimpleLMError,
    SourceUnavailableError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PySimpleLMError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        ParseError,
        NumericalError,
        DegenerateInputError,
        SourceUnavailableError,
    ])
    def test_is_pysimplelm_error(self, exc_type):
        with pytest.raises(PySimpleLMError):
            raise exc_type("boom")

    def test_dimension_error_is_validation_error(self):
        assert issubclass(DimensionError, ValidationError)

    def test_parse_error_is_validation_error(self):
        assert issubclass(ParseError, ValidationError)

    def test_degenerate_input_is_numerical_error(self):
        assert issubclass(DegenerateInputError, NumericalError)

    def test_degenerate_input_is_not_validation_error(self):
        assert not issubclass(DegenerateInputError, ValidationError)

    def test_source_unavailable_is_not_validation_error(self):
        assert not issubclass(SourceUnavailableError, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerateInputError:

    def test_attributes(self):
        err = DegenerateInputError("constant x", reason="constant_predictor", n=3)
        assert str(err) == "constant x"
        assert err.reason == "constant_predictor"
        assert err.n == 3

    def test_defaults_none(self):
        err = DegenerateInputError("bad")
        assert err.reason is None
        assert err.n is None


class TestParseError:

    def test_attributes(self):
        err = ParseError(
            "bad field", path="data.csv", column="Salary", line=4, value="abc",
        )
        assert err.path == "data.csv"
        assert err.column == "Salary"
        assert err.line == 4
        assert err.value == "abc"

    def test_defaults_none(self):
        err = ParseError("bad")
        assert err.path is None
        assert err.column is None
        assert err.line is None
        assert err.value is None


class TestSourceUnavailableError:

    def test_path_attribute(self):
        err = SourceUnavailableError("missing", path="/nope.csv")
        assert err.path == "/nope.csv"
        assert "missing" in str(err)
