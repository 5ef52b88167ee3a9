# -*- coding: utf-8 -*-
"""
id3py.tree
==========

This module holds :class:`DecisionTree`, the trained model: the column order
seen at training time and the root of an immutable binary tree of
:class:`~id3py.nodes.DecisionNode` and :class:`~id3py.nodes.Leaf` objects.

Training goes through :meth:`DecisionTree.train` (or the module-level
:func:`train`), which validates the table and delegates induction to
:func:`~id3py.builder.build_tree`.  Querying goes through
:meth:`DecisionTree.query`, which validates a ``{column: value}`` record,
descends to a leaf and turns the leaf's label counts into an
:class:`~id3py.answer.Answer` with an integer confidence percentage.

The model also provides rule tracing, rule export, pretty printing and
Graphviz export.  Every traversal is iterative, so arbitrarily deep trees
can be inspected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from loguru import logger

from id3py.answer import Answer, QueryErrorKind, QueryResult
from id3py.builder import build_tree
from id3py.exceptions import DegenerateTrainingDataError, MixedColumnTypesError
from id3py.logging import Reporter
from id3py.nodes import Leaf, Node, iter_nodes
from id3py.table import Table

TieBreak = Literal["insertion", "lexicographic"]
MixedTypes = Literal["warn", "ignore", "raise"]

_TIE_BREAKS = ("insertion", "lexicographic")
_MIXED_TYPES = ("warn", "ignore", "raise")


def _check_option(name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise ValueError(f"{name} must be one of {allowed}, got {value!r}")


def rank_labels(counts: Mapping[str, int], tie_break: TieBreak = "insertion") -> list[tuple[str, int]]:
    """
    Order ``(label, count)`` pairs by descending count.

    With ``tie_break="insertion"`` labels with equal counts keep the order in
    which they were first seen in the training rows; with
    ``"lexicographic"`` they are ordered by label.
    """
    if tie_break == "lexicographic":
        return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)


def format_leaf(leaf: Leaf) -> str:
    """Label distribution of a leaf as percentages, e.g. ``{Apple: 50.0%, Lemon: 50.0%}``."""
    total = leaf.total
    body = ", ".join(f"{label}: {count / total * 100}%" for label, count in leaf.counts.items())
    return "{" + body + "}"


class DecisionTree:
    """
    Trained Gini decision tree.

    Parameters
    ----------
    columns : sequence of str
        Training-time column order; the last name is the label column.
    root : Leaf or DecisionNode
        Root of the induced tree.
    tie_break : {"insertion", "lexicographic"}, default="insertion"
        How to choose among labels sharing the highest count in a leaf.
    reporter : Reporter, optional
        Diagnostics sink (see :mod:`id3py.logging`).  Defaults to the loguru
        logger.

    Attributes
    ----------
    columns : tuple[str, ...]
        Column names, label last.
    root : Leaf or DecisionNode
        The tree.  Never mutated after construction.
    n_features : int
        Number of feature columns a query record must provide.
    """

    def __init__(self, columns, root: Node, *, tie_break: TieBreak = "insertion",
                 reporter: Reporter | None = None):
        _check_option("tie_break", tie_break, _TIE_BREAKS)
        self.columns: tuple[str, ...] = tuple(columns)
        self.root = root
        self.tie_break = tie_break
        self._log = reporter if reporter is not None else logger

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    @classmethod
    def train(cls, table: Table, *, tie_break: TieBreak = "insertion",
              mixed_types: MixedTypes = "warn", reporter: Reporter | None = None) -> DecisionTree:
        """
        Induce a tree from ``table``.

        Parameters
        ----------
        table : Table
            Training data; the last column is the label.
        tie_break : {"insertion", "lexicographic"}, default="insertion"
            See :func:`rank_labels`.
        mixed_types : {"warn", "ignore", "raise"}, default="warn"
            What to do about feature columns that mix numeric and
            non-numeric values.  Such columns are matched value by value
            (threshold for numbers, equality otherwise).
        reporter : Reporter, optional
            Diagnostics sink.

        Raises
        ------
        DegenerateTrainingDataError
            If the table has no rows or no feature column.
        MixedColumnTypesError
            If ``mixed_types="raise"`` and a feature column mixes types.
        """
        _check_option("tie_break", tie_break, _TIE_BREAKS)
        _check_option("mixed_types", mixed_types, _MIXED_TYPES)
        log = reporter if reporter is not None else logger

        if len(table) == 0 or table.n_features == 0:
            raise DegenerateTrainingDataError(len(table), table.n_features)

        mixed = table.mixed_type_columns()
        if mixed:
            if mixed_types == "raise":
                raise MixedColumnTypesError(mixed)
            if mixed_types == "warn":
                log.warning("Columns mix numeric and non-numeric values: {}", mixed)

        root = build_tree(table.rows, table.columns, reporter=log)
        tree = cls(table.columns, root, tie_break=tie_break, reporter=log)
        log.info("Trained decision tree on {} rows: {} leaves, depth {}",
                 len(table), tree.n_leaves, tree.depth)
        return tree

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    @property
    def n_features(self) -> int:
        return len(self.columns) - 1

    @property
    def feature_columns(self) -> tuple[str, ...]:
        return self.columns[:-1]

    @property
    def label_column(self) -> str:
        return self.columns[-1]

    def leaves(self) -> list[Leaf]:
        """Leaves in pre-order, true branches first."""
        return [node for node, _ in iter_nodes(self.root) if node.is_leaf]

    @property
    def n_leaves(self) -> int:
        return len(self.leaves())

    @property
    def depth(self) -> int:
        return max(depth for _, depth in iter_nodes(self.root))

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def classify(self, record: Mapping[str, str]) -> Leaf:
        """Descend from the root to the leaf ``record`` falls into."""
        node = self.root
        while not node.is_leaf:
            node = node.true_branch if node.question.match_record(record) else node.false_branch
        return node

    def query(self, record: Mapping[str, str] | None) -> QueryResult:
        """
        Classify ``record`` and report the outcome.

        Validation happens in order and stops at the first failure: missing
        record, keys that are not training columns, wrong number of keys,
        a feature column absent from the record.  Failures are logged and
        returned, never raised.

        Parameters
        ----------
        record : mapping of str to str, or None
            One value per feature column.

        Returns
        -------
        QueryResult
            The answer, or the kind of validation failure.
        """
        if record is None:
            return self._reject(QueryErrorKind.MISSING_RECORD, "record is None!", level="warning")

        unknown = [key for key in record if key not in self.columns]
        if unknown:
            return self._reject(QueryErrorKind.UNKNOWN_COLUMN, f"Wrong data input, unknown columns: {unknown}")

        if len(record) != self.n_features:
            return self._reject(
                QueryErrorKind.FEATURE_COUNT_MISMATCH,
                f"Features count is incorrect: {self.n_features}/{len(record)}",
            )

        missing = [name for name in self.feature_columns if name not in record]
        if missing:
            return self._reject(QueryErrorKind.MISSING_FEATURE, f"Missing feature columns: {missing}")

        leaf = self.classify(record)
        counts = leaf.counts
        if not counts:
            return self._reject(QueryErrorKind.EMPTY_LEAF, "Reached a leaf without training rows")
        if len(counts) == 1:
            return QueryResult.success(Answer(next(iter(counts)), 100))

        self._log.warning("Leaf: {}", format_leaf(leaf))
        label, top = rank_labels(counts, self.tie_break)[0]
        percent = 100 * top // leaf.total
        self._log.warning("Answer success rate {}%!", percent)
        return QueryResult.success(Answer(label, percent))

    def get_answer(self, record: Mapping[str, str] | None) -> Answer | None:
        """Answer for ``record``, or ``None`` if the record was rejected."""
        return self.query(record).answer

    def _reject(self, kind: QueryErrorKind, message: str, level: str = "error") -> QueryResult:
        getattr(self._log, level)(message)
        return QueryResult.failure(kind, message)

    # ------------------------------------------------------------------
    # Rule tracing / printing / Graphviz helpers
    # ------------------------------------------------------------------
    def predict_rule(self, record: Mapping[str, str]) -> str:
        """Conjunction of the conditions ``record`` satisfies on its way to a leaf."""
        parts = []
        node = self.root
        while not node.is_leaf:
            q = node.question
            if q.match_record(record):
                parts.append(f"{q.column} {q.operator} {q.value}")
                node = node.true_branch
            else:
                parts.append(q.negated())
                node = node.false_branch
        return " AND ".join(parts) if parts else "<root>"

    def export_rules(self) -> list[str]:
        """
        All root-to-leaf rules as ``"<antecedent> => <label>"`` strings.

        Rules are listed in pre-order, true branches first; the label is the
        one :meth:`query` would predict at that leaf.
        """
        rules: list[str] = []
        stack: list[tuple[Node, list[str]]] = [(self.root, [])]
        while stack:
            node, parts = stack.pop()
            if node.is_leaf:
                body = " AND ".join(parts) if parts else "<root>"
                label = rank_labels(node.counts, self.tie_break)[0][0] if node.counts else "?"
                rules.append(f"{body} => {label}")
                continue
            q = node.question
            stack.append((node.false_branch, parts + [q.negated()]))
            stack.append((node.true_branch, parts + [f"{q.column} {q.operator} {q.value}"]))
        return rules

    def format_tree(self) -> str:
        """Indented dump of the tree, one node per line."""
        lines: list[str] = []
        stack: list[tuple[Node | str, str]] = [(self.root, "")]
        while stack:
            item, spacing = stack.pop()
            if isinstance(item, str):
                lines.append(spacing + item)
            elif item.is_leaf:
                lines.append(spacing + str(item))
            else:
                lines.append(spacing + str(item.question))
                stack.append((item.false_branch, spacing + "  "))
                stack.append(("--> False:", spacing))
                stack.append((item.true_branch, spacing + "  "))
                stack.append(("--> True:", spacing))
        return "\n".join(lines)

    def print_tree(self) -> None:
        """Pretty-print the tree to ``stdout``."""
        print(self.format_tree())

    def export_graphviz(self, filename: str | None = None, *, format: str = "png") -> str:
        """
        Export the tree structure in Graphviz format.

        Parameters
        ----------
        filename : str or None, default=None
            Basename of the output file.  If None, the DOT source is returned
            and nothing is written.
        format : str, default="png"
            Output format.  ``"dot"`` writes the DOT source directly and
            does not need the external ``dot`` binary.

        Returns
        -------
        str
            Path to the written file, or the DOT source if ``filename`` is None.

        Raises
        ------
        RuntimeError
            If the ``graphviz`` package is not installed.
        """
        try:
            import graphviz
        except ImportError as exc:
            raise RuntimeError("Graphviz is required for export_graphviz but not installed.") from exc
        dot = graphviz.Digraph(format=format)
        stack: list[tuple[Node, str]] = [(self.root, "0")]
        while stack:
            node, name = stack.pop()
            if node.is_leaf:
                label = rank_labels(node.counts, self.tie_break)[0][0] if node.counts else "?"
                dot.node(name, f"class={label}\n{dict(node.counts)}",
                         shape="box", style="filled", color="lightgrey")
                continue
            dot.node(name, str(node.question), shape="ellipse", style="filled", color="lightblue")
            l_id, r_id = name + "L", name + "R"
            dot.edge(name, l_id, label="True")
            dot.edge(name, r_id, label="False")
            stack.append((node.false_branch, r_id))
            stack.append((node.true_branch, l_id))

        if filename is None:
            return dot.source
        if format.lower() == "dot":
            path = f"{filename}.dot"
            dot.save(path)
            return path
        try:
            dot.render(filename, cleanup=True)
            return f"{filename}.{format}"
        except graphviz.ExecutableNotFound:
            fallback_path = f"{filename}.dot"
            dot.save(fallback_path)
            return fallback_path

    def __repr__(self) -> str:
        return f"DecisionTree(columns={list(self.columns)!r}, n_leaves={self.n_leaves}, depth={self.depth})"


def train(table: Table, **kwargs) -> DecisionTree:
    """Train a :class:`DecisionTree`; keyword arguments go to :meth:`DecisionTree.train`."""
    return DecisionTree.train(table, **kwargs)


def get_answer(tree: DecisionTree, record: Mapping[str, str] | None) -> Answer | None:
    """Answer ``record`` with ``tree``; ``None`` when the record is rejected."""
    return tree.get_answer(record)
