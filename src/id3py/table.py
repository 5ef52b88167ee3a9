"""String-typed training tables.

A :class:`Table` is an ordered list of column names (the last one is the
label) and an ordered list of rows whose cells are strings.  It is the only
input the tree builder accepts; helpers convert plain records and pandas
DataFrames into it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import pandas as pd

from id3py.exceptions import DuplicateColumnsError, RaggedRowError
from id3py.question import is_numeric


@dataclass(frozen=True)
class Table:
    """
    Immutable training table.

    Parameters
    ----------
    columns : sequence of str
        Unique column names.  All but the last are features; the last is the
        label.
    rows : iterable of sequences
        Rows aligned with ``columns``.  Cells are converted with ``str``.

    Raises
    ------
    DuplicateColumnsError
        If a column name is repeated.
    RaggedRowError
        If a row does not have exactly ``len(columns)`` cells.
    """

    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self):
        columns = tuple(str(c) for c in self.columns)
        if len(set(columns)) != len(columns):
            raise DuplicateColumnsError(list(columns))
        rows = []
        for i, row in enumerate(self.rows):
            cells = tuple(str(cell) for cell in row)
            if len(cells) != len(columns):
                raise RaggedRowError(i, len(cells), len(columns))
            rows.append(cells)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", tuple(rows))

    @classmethod
    def from_records(cls, columns: Sequence[str], rows: Iterable[Sequence]) -> Table:
        return cls(tuple(columns), tuple(tuple(r) for r in rows))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> Table:
        """Build a table from a DataFrame; its last column is the label."""
        return cls(tuple(df.columns), tuple(df.astype(str).itertuples(index=False, name=None)))

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def feature_columns(self) -> tuple[str, ...]:
        return self.columns[:-1]

    @property
    def label_column(self) -> str | None:
        return self.columns[-1] if self.columns else None

    @property
    def n_features(self) -> int:
        return max(len(self.columns) - 1, 0)

    def labels(self) -> list[str]:
        return [row[-1] for row in self.rows]

    def column_values(self, name: str) -> list[str]:
        j = self.columns.index(name)
        return [row[j] for row in self.rows]

    def mixed_type_columns(self) -> list[str]:
        """Feature columns holding both numeric and non-numeric values."""
        mixed = []
        for name in self.feature_columns:
            kinds = {is_numeric(v) for v in self.column_values(name)}
            if len(kinds) > 1:
                mixed.append(name)
        return mixed
