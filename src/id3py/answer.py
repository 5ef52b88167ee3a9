"""Query outcomes: answers and the result type that carries validation failures."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from id3py.exceptions import MalformedQueryError


@dataclass(frozen=True)
class Answer:
    """Predicted label and integer confidence percentage (0-100)."""

    label: str
    confidence: int

    def __post_init__(self):
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence must be within [0, 100], got {self.confidence}")


class QueryErrorKind(enum.Enum):
    """Reasons a query record can be rejected, in the order they are checked."""

    MISSING_RECORD = "missing_record"
    UNKNOWN_COLUMN = "unknown_column"
    FEATURE_COUNT_MISMATCH = "feature_count_mismatch"
    MISSING_FEATURE = "missing_feature"
    EMPTY_LEAF = "empty_leaf"


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of :meth:`DecisionTree.query`.

    Exactly one of ``answer`` and ``error`` is set.

    Examples
    --------
    >>> QueryResult.success(Answer("Grape", 100)).ok
    True
    >>> QueryResult.failure(QueryErrorKind.MISSING_RECORD, "record is None").answer is None
    True
    """

    answer: Answer | None = None
    error: QueryErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, answer: Answer) -> QueryResult:
        return cls(answer=answer)

    @classmethod
    def failure(cls, kind: QueryErrorKind, message: str) -> QueryResult:
        return cls(error=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Answer:
        """Return the answer or raise :class:`MalformedQueryError`."""
        if self.error is not None:
            raise MalformedQueryError(self.error, self.message)
        return self.answer
