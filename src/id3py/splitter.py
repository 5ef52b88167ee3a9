"""
id3py.splitter
==============

Best-split search.  Every distinct value of every feature column is tried as
a :class:`~id3py.question.Question`; the candidate with the largest
information gain wins, and a later candidate replaces an earlier one on equal
gain.  Rows are positional sequences of strings whose last cell is the label.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from id3py.impurity import gini_impurity, information_gain
from id3py.question import Question

Row = Sequence[str]


@dataclass(frozen=True)
class Split:
    """Outcome of :func:`find_best_split`.

    ``question`` is ``None`` only when no candidate separated the rows at
    all, i.e. every feature is constant.  On pure rows the last separating
    candidate is kept with a gain of exactly zero.
    """

    gain: float
    question: Question | None


def _labels(rows: Sequence[Row]) -> list[str]:
    return [row[-1] for row in rows]


def partition(rows: Sequence[Row], question: Question,
              columns: Sequence[str]) -> tuple[list[Row], list[Row]]:
    """
    Split ``rows`` into those matching ``question`` and the rest.

    Both returned lists are new; ``rows`` is left untouched and relative row
    order is preserved on each side.
    """
    j = list(columns).index(question.column)
    true_rows: list[Row] = []
    false_rows: list[Row] = []
    for row in rows:
        if question.matches(row[j]):
            true_rows.append(row)
        else:
            false_rows.append(row)
    return true_rows, false_rows


def find_best_split(rows: Sequence[Row], columns: Sequence[str]) -> Split:
    """
    Find the question with the highest information gain.

    Parameters
    ----------
    rows : sequence of rows
        Non-empty training rows; the last cell of each row is the label.
    columns : sequence of str
        Column names aligned with the rows; the last one names the label.

    Returns
    -------
    Split
        Best gain (``0.0`` if nothing was accepted) and the question that
        achieved it.
    """
    best_gain = 0.0
    best_question = None
    current_uncertainty = gini_impurity(_labels(rows))

    for j, name in enumerate(list(columns)[:-1]):
        # distinct values, first-seen order
        values = dict.fromkeys(str(row[j]) for row in rows)
        for value in values:
            question = Question(name, value)
            true_rows, false_rows = partition(rows, question, columns)
            if not true_rows or not false_rows:
                continue
            gain = information_gain(_labels(true_rows), _labels(false_rows), current_uncertainty)
            if gain >= best_gain:
                best_gain, best_question = gain, question

    return Split(best_gain, best_question)
