# id3py/__init__.py
"""
id3py: Gini-impurity decision trees over string-typed tables.

Exports:
    - Table, train, get_answer, DecisionTree
    - Answer, QueryResult, QueryErrorKind
    - ID3Classifier (scikit-learn style estimator)
    - building blocks: Question, Leaf, DecisionNode, gini_impurity,
      information_gain, find_best_split, partition, build_tree
"""
from loguru import logger

from .answer import Answer, QueryErrorKind, QueryResult
from .builder import build_tree
from .classifier import ID3Classifier
from .exceptions import (
    DegenerateTrainingDataError,
    DuplicateColumnsError,
    ID3Error,
    MalformedQueryError,
    MixedColumnTypesError,
    RaggedRowError,
)
from .impurity import class_counts, gini_impurity, information_gain
from .logging import PACKAGE_NAME, enable_logging
from .nodes import DecisionNode, Leaf
from .question import Question, parse_number
from .splitter import Split, find_best_split, partition
from .table import Table
from .tree import DecisionTree, get_answer, train

logger.disable(PACKAGE_NAME)

__all__ = [
    "Answer",
    "DecisionNode",
    "DecisionTree",
    "DegenerateTrainingDataError",
    "DuplicateColumnsError",
    "ID3Classifier",
    "ID3Error",
    "Leaf",
    "MalformedQueryError",
    "MixedColumnTypesError",
    "Question",
    "QueryErrorKind",
    "QueryResult",
    "RaggedRowError",
    "Split",
    "Table",
    "build_tree",
    "class_counts",
    "enable_logging",
    "find_best_split",
    "get_answer",
    "gini_impurity",
    "information_gain",
    "parse_number",
    "partition",
    "train",
]
__version__ = "0.1.0"
