"""Greedy tree induction.

:func:`build_tree` follows the usual recursive definition (split the rows on
the best question, stop with a leaf when no split gains anything) but runs it
on an explicit work stack, so very deep trees are limited by memory rather
than by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from id3py.impurity import class_counts
from id3py.logging import Reporter
from id3py.nodes import DecisionNode, Leaf, Node
from id3py.splitter import Row, find_best_split, partition


def build_tree(rows: Sequence[Row], columns: Sequence[str], *,
               reporter: Reporter | None = None) -> Node:
    """
    Build a decision tree from ``rows``.

    Parameters
    ----------
    rows : sequence of rows
        Non-empty training rows aligned with ``columns``; the last cell is the
        label.
    columns : sequence of str
        Column names; the last one names the label.
    reporter : Reporter, optional
        Receives one DEBUG record per split and per leaf.  Defaults to the
        package logger.

    Returns
    -------
    Leaf or DecisionNode
        Root of the induced tree.
    """
    log = reporter if reporter is not None else logger
    columns = list(columns)

    # Pre-order plan of the tree.  Each entry is [question, counts, true_idx, false_idx];
    # children always get a larger index than their parent.
    plan: list[list] = []
    stack: list[tuple[Sequence[Row], int | None, bool, int]] = [(rows, None, True, 0)]
    while stack:
        part, parent, on_true, depth = stack.pop()
        idx = len(plan)
        split = find_best_split(part, columns)
        if split.gain == 0:
            counts = class_counts(row[-1] for row in part)
            log.debug("Leaf at depth {}: {}", depth, counts)
            plan.append([None, counts, None, None])
        else:
            log.debug("Split at depth {}: {} (gain={:.6f})", depth, split.question, split.gain)
            plan.append([split.question, None, None, None])
            true_rows, false_rows = partition(part, split.question, columns)
            stack.append((false_rows, idx, False, depth + 1))
            stack.append((true_rows, idx, True, depth + 1))
        if parent is not None:
            plan[parent][2 if on_true else 3] = idx

    nodes: list[Node | None] = [None] * len(plan)
    for idx in range(len(plan) - 1, -1, -1):
        question, counts, t_idx, f_idx = plan[idx]
        if question is None:
            nodes[idx] = Leaf(counts)
        else:
            nodes[idx] = DecisionNode(question, nodes[t_idx], nodes[f_idx])
    return nodes[0]
