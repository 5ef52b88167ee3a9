"""Gini impurity and information gain over label sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def class_counts(labels: Iterable[str]) -> dict[str, int]:
    """Count each label, keeping the order in which labels are first seen."""
    counts: dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return counts


def gini_impurity(labels: Sequence[str]) -> float:
    """
    Gini impurity of a label set: ``1 - sum(p_k ** 2)``.

    Zero for a pure set and ``1 - 1/k`` for ``k`` equally frequent labels.

    Raises
    ------
    ValueError
        If ``labels`` is empty; the impurity of an empty set is undefined.
    """
    total = len(labels)
    if total == 0:
        raise ValueError("Gini impurity is undefined for an empty set of labels")
    impurity = 1.0
    for count in class_counts(labels).values():
        prob = count / total
        impurity -= prob ** 2
    return impurity


def information_gain(left: Sequence[str], right: Sequence[str], parent_impurity: float) -> float:
    """
    Impurity of the parent minus the size-weighted impurity of both children.

    The value is not clamped and may be zero (or, through rounding, marginally
    negative) for splits that do not help.
    """
    p = len(left) / (len(left) + len(right))
    return parent_impurity - p * gini_impurity(left) - (1 - p) * gini_impurity(right)
