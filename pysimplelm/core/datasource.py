"""
DataSource: the sample source for pysimplelm.

DataSource is the "I have data" abstraction. It doesn't know it will be
used for a regression; it just provides named columns of numbers.

Usage:
    from pysimplelm import DataSource

    ds = DataSource.from_arrays(x=x, y=y)
    ds = DataSource.from_file("salary.csv")
    ds = DataSource.from_dataframe(df)

    ds.keys()       # ('YearsExperience', 'Salary')
    x = ds['YearsExperience']

Files are read in full, whatever their length. A missing file or a
field that is not a number is raised to the caller; nothing is
zero-filled or skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
import pandas as pd

from pysimplelm.core.exceptions import (
    ValidationError,
    DimensionError,
    ParseError,
    SourceUnavailableError,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


_DELIMITERS = {'.csv': ',', '.tsv': '\t', '.txt': ','}


@dataclass(frozen=True)
class DataSource:
    """
    Named numeric columns of equal length. Domain-agnostic.

    Construct via factory classmethods, not directly.
    """
    _data: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> tuple[str, ...]:
        """
        Return the column names in source order.

        Example:
            >>> ds = DataSource.from_arrays(x=x, y=y)
            >>> ds.keys()
            ('x', 'y')
        """
        return tuple(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with a message listing available keys
        """
        if key not in self._data:
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {list(self.keys())}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays: ArrayLike) -> DataSource:
        """Construct from 1-D array-likes, one keyword per column."""
        storage: dict[str, NDArray[np.floating[Any]]] = {}
        n_obs: int | None = None

        for name, arr in named_arrays.items():
            try:
                storage[name] = np.asarray(arr, dtype=np.float64)
            except (ValueError, TypeError) as e:
                raise ValidationError(f"{name}: cannot convert to float array: {e}") from e
            if storage[name].ndim != 1:
                raise DimensionError(
                    f"{name}: expected 1D array, got {storage[name].ndim}D "
                    f"with shape {storage[name].shape}"
                )
            n_obs = n_obs if n_obs is not None else storage[name].shape[0]

        return cls(
            _data=storage,
            _metadata={'n_observations': n_obs or 0, 'source': 'arrays'},
        )

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, *, source_path: str | None = None) -> DataSource:
        """
        Construct from a pandas DataFrame.

        Every column must be numeric. Non-numeric cells raise ParseError
        naming the column and, when source_path is given, the file line.
        """
        storage: dict[str, NDArray[np.floating[Any]]] = {}

        for col in df.columns:
            storage[str(col)] = _numeric_column(df[col], str(col), source_path)

        metadata: dict[str, Any] = {
            'n_observations': len(df),
            'source': 'dataframe',
            'columns': [str(c) for c in df.columns],
        }
        if source_path:
            metadata['source'] = 'file'
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def from_file(cls, path: str | Path, *, columns: list[str] | None = None) -> DataSource:
        """
        Construct from a delimited text file (CSV, TSV).

        The first line is a header naming the columns; each following
        line is one observation.

        Args:
            path: File location
            columns: Restrict to these columns. All columns if None.

        Raises:
            SourceUnavailableError: File missing or unreadable
            ParseError: File empty or malformed (including rows wider than the
                header), unknown column, or a field is not a number
            ValidationError: Unknown file suffix
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in _DELIMITERS:
            raise ValidationError(
                f"Unknown file format: {suffix!r}. Supported: {sorted(_DELIMITERS)}"
            )

        try:
            # header=None fixes the row width at the header line's, so a data
            # row with extra fields is a ParserError rather than an implicit
            # index column. dtype=str keeps raw text for error messages.
            raw = pd.read_csv(
                path,
                sep=_DELIMITERS[suffix],
                header=None,
                index_col=False,
                dtype=str,
                skipinitialspace=True,
                keep_default_na=False,
            )
        except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
            raise SourceUnavailableError(
                f"Cannot read sample source {str(path)!r}: {e.strerror or e}",
                path=str(path),
            ) from e
        except pd.errors.EmptyDataError as e:
            raise ParseError(f"{path}: file is empty", path=str(path)) from e
        except pd.errors.ParserError as e:
            raise ParseError(f"{path}: malformed file: {e}", path=str(path)) from e
        except ValueError as e:
            raise ParseError(f"{path}: {e}", path=str(path)) from e

        df = _split_header(raw, str(path))
        if columns is not None:
            missing = [c for c in columns if c not in df.columns]
            if missing:
                raise ParseError(
                    f"{path}: columns {missing} not in header {list(df.columns)}",
                    path=str(path),
                )
            df = df[list(columns)]

        return cls.from_dataframe(df, source_path=str(path))


def _numeric_column(
    series: pd.Series,
    name: str,
    source_path: str | None,
) -> NDArray[np.floating[Any]]:
    """Convert one column to float64, reporting the first unparseable cell."""
    if pd.api.types.is_numeric_dtype(series):
        return series.to_numpy(dtype=np.float64)

    text = series.astype(str).str.strip()
    values = pd.to_numeric(text, errors='coerce')
    bad = values.isna().to_numpy()
    if bad.any():
        row = int(np.flatnonzero(bad)[0])
        raw = text.iloc[row]
        # +2: header is line 1 and rows are 0-based
        line = row + 2 if source_path else None
        where = f"{source_path}, line {line}" if source_path else f"row {row}"
        raise ParseError(
            f"{where}: column {name!r} value {raw!r} is not a number",
            path=source_path,
            column=name,
            line=line,
            value=raw,
        )
    return values.to_numpy(dtype=np.float64)


def _split_header(raw: pd.DataFrame, source_path: str) -> pd.DataFrame:
    """Promote the first row of a header=None read to column names."""
    header = [str(h).strip() for h in raw.iloc[0]]
    if len(set(header)) != len(header):
        raise ParseError(
            f"{source_path}: duplicate column names in header {header}",
            path=source_path,
            line=1,
        )
    body = raw.iloc[1:].reset_index(drop=True)
    body.columns = header
    return body
