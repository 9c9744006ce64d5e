"""
Tests for DataSource, the sample source.

Validates:
    - from_arrays / from_dataframe column access and metadata
    - from_file reads the whole file (no fixed capacity)
    - missing or unreadable files raise SourceUnavailableError
    - unparseable fields raise ParseError with column and line
"""

import numpy as np
import pandas as pd
import pytest

from pysimplelm.core.datasource import DataSource
from pysimplelm.core.exceptions import (
    DimensionError,
    ParseError,
    SourceUnavailableError,
    ValidationError,
)


def _write(tmp_path, text, name="data.csv"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestFromArrays:

    def test_columns_in_order(self):
        ds = DataSource.from_arrays(x=[1, 2, 3], y=[4, 5, 6])
        assert ds.keys() == ("x", "y")
        np.testing.assert_array_equal(ds["y"], [4.0, 5.0, 6.0])
        assert ds["x"].dtype == np.float64

    def test_metadata(self):
        ds = DataSource.from_arrays(x=[1, 2, 3], y=[4, 5, 6])
        assert ds.n_observations == 3
        assert ds.metadata["source"] == "arrays"

    def test_metadata_is_copy(self):
        ds = DataSource.from_arrays(x=[1, 2, 3])
        ds.metadata["source"] = "tampered"
        assert ds.metadata["source"] == "arrays"

    def test_missing_key_lists_available(self):
        ds = DataSource.from_arrays(x=[1, 2, 3], y=[4, 5, 6])
        with pytest.raises(KeyError, match=r"no column 'z'.*\['x', 'y'\]"):
            ds["z"]

    def test_contains_and_len(self):
        ds = DataSource.from_arrays(x=[1, 2, 3], y=[4, 5, 6])
        assert "x" in ds
        assert "z" not in ds
        assert len(ds) == 2

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="x: cannot convert"):
            DataSource.from_arrays(x=["a", "b"])

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError, match="x: expected 1D array, got 0D"):
            DataSource.from_arrays(x=5)

    def test_2d_rejected(self):
        with pytest.raises(ValidationError, match="y: expected 1D"):
            DataSource.from_arrays(x=[1, 2], y=[[1, 2], [3, 4]])


class TestFromDataFrame:

    def test_numeric_frame(self):
        df = pd.DataFrame({"YearsExperience": [1.0, 2.0], "Salary": [10.0, 20.0]})
        ds = DataSource.from_dataframe(df)
        assert ds.keys() == ("YearsExperience", "Salary")
        assert ds.n_observations == 2
        assert ds.metadata["columns"] == ["YearsExperience", "Salary"]

    def test_non_numeric_cell(self):
        df = pd.DataFrame({"a": ["1", "x", "3"]})
        with pytest.raises(ParseError, match=r"row 1: column 'a' value 'x'"):
            DataSource.from_dataframe(df)


class TestFromFile:

    def test_reads_header_and_pairs(self, tmp_path):
        path = _write(tmp_path, "YearsExperience,Salary\n1.1,39343\n1.3,46205\n")
        ds = DataSource.from_file(path)
        assert ds.keys() == ("YearsExperience", "Salary")
        np.testing.assert_array_equal(ds["YearsExperience"], [1.1, 1.3])
        np.testing.assert_array_equal(ds["Salary"], [39343.0, 46205.0])
        assert ds.metadata["source"] == "file"
        assert ds.metadata["source_path"] == str(path)

    def test_no_fixed_capacity(self, tmp_path):
        n = 500
        lines = ["x,y"] + [f"{i},{2 * i + 1}" for i in range(n)]
        path = _write(tmp_path, "\n".join(lines) + "\n")
        ds = DataSource.from_file(path)
        assert ds.n_observations == n
        assert ds["y"][-1] == 2 * (n - 1) + 1

    def test_whitespace_around_fields(self, tmp_path):
        path = _write(tmp_path, "x, y\n1, 2\n3, 4\n")
        ds = DataSource.from_file(path)
        assert ds.keys() == ("x", "y")
        np.testing.assert_array_equal(ds["y"], [2.0, 4.0])

    def test_tsv(self, tmp_path):
        path = _write(tmp_path, "x\ty\n1\t2\n3\t4\n", name="data.tsv")
        ds = DataSource.from_file(path)
        np.testing.assert_array_equal(ds["x"], [1.0, 3.0])

    def test_column_subset(self, tmp_path):
        path = _write(tmp_path, "id,x,y\na,1,2\nb,3,4\n")
        ds = DataSource.from_file(path, columns=["x", "y"])
        assert set(ds.keys()) == {"x", "y"}

    def test_missing_file(self, tmp_path):
        path = tmp_path / "absent.csv"
        with pytest.raises(SourceUnavailableError) as exc:
            DataSource.from_file(path)
        assert exc.value.path == str(path)

    def test_directory_is_unavailable(self, tmp_path):
        folder = tmp_path / "folder.csv"
        folder.mkdir()
        with pytest.raises(SourceUnavailableError):
            DataSource.from_file(folder)

    def test_bad_field_reports_line(self, tmp_path):
        path = _write(tmp_path, "x,y\n1,2\n3,four\n5,6\n")
        with pytest.raises(ParseError) as exc:
            DataSource.from_file(path)
        err = exc.value
        assert err.column == "y"
        assert err.line == 3
        assert err.value == "four"
        assert err.path == str(path)
        assert "line 3" in str(err)

    def test_empty_field(self, tmp_path):
        path = _write(tmp_path, "x,y\n1,2\n,4\n")
        with pytest.raises(ParseError) as exc:
            DataSource.from_file(path)
        assert exc.value.column == "x"
        assert exc.value.line == 3

    def test_rows_wider_than_header(self, tmp_path):
        # Extra fields must not be taken as an unnamed index column
        path = _write(tmp_path, "x,y\n1,2,3\n4,5,6\n7,8,9\n")
        with pytest.raises(ParseError, match="malformed"):
            DataSource.from_file(path)

    def test_one_wide_row(self, tmp_path):
        path = _write(tmp_path, "x,y\n1,2\n3,4,5\n6,7\n")
        with pytest.raises(ParseError):
            DataSource.from_file(path)

    def test_short_row(self, tmp_path):
        path = _write(tmp_path, "x,y\n1,2\n3\n")
        with pytest.raises(ParseError) as exc:
            DataSource.from_file(path)
        assert exc.value.column == "y"
        assert exc.value.line == 3

    def test_duplicate_header(self, tmp_path):
        path = _write(tmp_path, "x,x\n1,2\n3,4\n")
        with pytest.raises(ParseError, match="duplicate"):
            DataSource.from_file(path)

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, "")
        with pytest.raises(ParseError, match="empty"):
            DataSource.from_file(path)

    def test_unknown_column(self, tmp_path):
        path = _write(tmp_path, "x,y\n1,2\n")
        with pytest.raises(ParseError):
            DataSource.from_file(path, columns=["x", "nope"])

    def test_unknown_suffix(self, tmp_path):
        path = _write(tmp_path, "x,y\n1,2\n", name="data.json")
        with pytest.raises(ValidationError, match="Unknown file format"):
            DataSource.from_file(path)
