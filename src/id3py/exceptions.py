"""Exceptions raised by id3py.

Training-time problems (malformed or degenerate tables, inconsistent column
types under ``mixed_types="raise"``) are raised.  Query-time problems are
returned as failed :class:`~id3py.answer.QueryResult` objects instead and only
become :class:`MalformedQueryError` when the caller asks for it via
:meth:`~id3py.answer.QueryResult.unwrap`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from id3py.answer import QueryErrorKind


class ID3Error(Exception):
    """Base class for every error raised by id3py."""


class DuplicateColumnsError(ID3Error, ValueError):
    """Raised when a table is created with repeated column names.

    Attributes
    ----------
    columns : list[str]
        The offending column list.
    duplicate_columns : list[str]
        Each repeated name, listed once.
    """

    def __init__(self, columns: list[str]) -> None:
        self.columns = list(columns)
        seen: set[str] = set()
        self.duplicate_columns: list[str] = []
        for col in columns:
            if col in seen and col not in self.duplicate_columns:
                self.duplicate_columns.append(col)
            seen.add(col)
        super().__init__(f"Duplicate column names are not allowed: {self.duplicate_columns}")


class RaggedRowError(ID3Error, ValueError):
    """Raised when a row does not have exactly one cell per column."""

    def __init__(self, row_index: int, n_cells: int, n_columns: int) -> None:
        self.row_index = row_index
        self.n_cells = n_cells
        self.n_columns = n_columns
        super().__init__(
            f"Row {row_index} has {n_cells} cells but the table has {n_columns} columns"
        )


class DegenerateTrainingDataError(ID3Error, ValueError):
    """Raised when a tree is trained on a table without rows or without features."""

    def __init__(self, n_rows: int, n_features: int) -> None:
        self.n_rows = n_rows
        self.n_features = n_features
        super().__init__(
            "Cannot train a decision tree on a table with "
            f"{n_rows} rows and {n_features} feature columns; at least one of each is required"
        )


class MixedColumnTypesError(ID3Error, ValueError):
    """Raised when feature columns mix numeric and non-numeric values.

    Only raised when training with ``mixed_types="raise"``.
    """

    def __init__(self, columns: list[str]) -> None:
        self.columns = list(columns)
        super().__init__(f"Columns mix numeric and non-numeric values: {self.columns}")


class MalformedQueryError(ID3Error, ValueError):
    """Raised by :meth:`QueryResult.unwrap` for a query that could not be answered.

    Attributes
    ----------
    kind : QueryErrorKind
        Which validation step rejected the query.
    """

    def __init__(self, kind: QueryErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r}, message={str(self)!r})"
