# -----------------------------------------------------------------------------
# Node types of a trained tree.
#
# A node is either a Leaf (label counts of the training rows that reached it)
# or a DecisionNode (a question plus both children).  Nodes are frozen once
# built, so a trained tree can be shared between threads without locking.
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from id3py.question import Question


@dataclass(frozen=True)
class Leaf:
    """Terminal node.

    Attributes
    ----------
    counts : Mapping[str, int]
        Read-only mapping label -> number of training rows with that label
        that reached this leaf, in first-seen order.
    """

    counts: Mapping[str, int]

    def __post_init__(self):
        counts = dict(self.counts)
        bad = {label: n for label, n in counts.items() if n <= 0}
        if bad:
            raise ValueError(f"Leaf counts must be positive, got {bad}")
        object.__setattr__(self, "counts", MappingProxyType(counts))

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def labels(self) -> list[str]:
        return list(self.counts)

    def __str__(self) -> str:
        return f"Predict {dict(self.counts)}"


@dataclass(frozen=True)
class DecisionNode:
    """Internal node: ``question`` routes to ``true_branch`` or ``false_branch``."""

    question: Question
    true_branch: Node
    false_branch: Node

    def __post_init__(self):
        if self.true_branch is None or self.false_branch is None:
            raise ValueError("A decision node needs both a true and a false branch")

    @property
    def is_leaf(self) -> bool:
        return False


Node = Union[Leaf, DecisionNode]


def iter_nodes(root: Node) -> Iterator[tuple[Node, int]]:
    """Yield ``(node, depth)`` in pre-order, true branch first, without recursion."""
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if not node.is_leaf:
            stack.append((node.false_branch, depth + 1))
            stack.append((node.true_branch, depth + 1))
