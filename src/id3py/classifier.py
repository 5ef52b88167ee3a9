"""
id3py.classifier
================

A scikit-learn style estimator around :class:`~id3py.tree.DecisionTree`.

``X`` may hold numbers, strings or a mix of both (``dtype=object``); every
cell is converted with ``str`` before training and prediction, so numeric
columns become threshold questions and everything else equality questions.
Labels keep their original dtype in :meth:`ID3Classifier.predict`.
"""

from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.exceptions import NotFittedError

from id3py.answer import Answer
from id3py.exceptions import DegenerateTrainingDataError
from id3py.table import Table
from id3py.tree import DecisionTree, rank_labels


class ID3Classifier(ClassifierMixin, BaseEstimator):
    """
    Gini decision tree classifier with a scikit-learn API.

    Parameters
    ----------
    feature_names : list[str] or None, default=None
        Names of the input features.  Defaults to ``f0, f1, ...`` (or the
        columns of a pandas DataFrame passed to ``fit``).
    target_name : str, default="label"
        Name given to the label column of the training table.
    tie_break : {"insertion", "lexicographic"}, default="insertion"
        How to choose among equally frequent labels at a leaf.
    mixed_types : {"warn", "ignore", "raise"}, default="warn"
        Handling of feature columns that mix numeric and non-numeric values.

    Attributes
    ----------
    tree_ : DecisionTree
        The fitted tree.
    classes_ : ndarray
        Sorted class labels seen during ``fit``.
    feature_names_ : list[str]
        Feature names used by the fitted tree.
    n_features_in_ : int
        Number of features seen during ``fit``.

    Notes
    -----
    The tree is grown until no split improves Gini impurity; there is no
    depth limit and no pruning.
    """

    def __init__(
        self,
        *,
        feature_names: list[str] | None = None,
        target_name: str = "label",
        tie_break: str = "insertion",
        mixed_types: str = "warn",
    ):
        self.feature_names = feature_names
        self.target_name = target_name
        self.tie_break = tie_break
        self.mixed_types = mixed_types

    def fit(self, X, y, feature_names=None):
        if feature_names is None:
            feature_names = self.feature_names
        if feature_names is None and hasattr(X, "columns"):
            feature_names = [str(c) for c in X.columns]
        X = np.asarray(X, dtype=object)
        y = np.asarray(y)
        if X.ndim != 2:
            raise ValueError(f"X must be 2-dimensional, got shape {X.shape}")
        if len(X) != len(y):
            raise ValueError("X and y must have the same number of rows")
        if X.shape[0] == 0 or X.shape[1] == 0:
            raise DegenerateTrainingDataError(X.shape[0], X.shape[1])

        n_features = X.shape[1]
        if feature_names is not None:
            if len(feature_names) != n_features:
                raise ValueError("feature_names length must match X.shape[1]")
            self.feature_names_ = [str(n) for n in feature_names]
        else:
            self.feature_names_ = [f"f{i}" for i in range(n_features)]
        if self.target_name in self.feature_names_:
            raise ValueError(f"target_name {self.target_name!r} clashes with a feature name")

        self.classes_ = np.unique(y)
        self._label_lookup = {str(c): c for c in self.classes_}
        if len(self._label_lookup) != len(self.classes_):
            raise ValueError("Distinct class labels must have distinct string forms")
        self.n_features_in_ = n_features

        rows = [tuple(x) + (label,) for x, label in zip(X, y)]
        table = Table.from_records(self.feature_names_ + [self.target_name], rows)
        self.tree_ = DecisionTree.train(table, tie_break=self.tie_break, mixed_types=self.mixed_types)
        return self

    def _check_fitted(self):
        if getattr(self, "tree_", None) is None:
            raise NotFittedError("Estimator not fitted. Call fit(...) first.")

    def _records(self, X):
        X = np.asarray(X, dtype=object)
        if X.ndim != 2 or X.shape[1] != self.n_features_in_:
            raise ValueError(f"X must have shape (n_samples, {self.n_features_in_})")
        return [{name: str(v) for name, v in zip(self.feature_names_, x)} for x in X]

    def predict(self, X):
        """
        Predict class labels for the provided samples.

        Returns
        -------
        ndarray of shape (n_samples,)
            The majority label of the leaf each sample falls into.
        """
        self._check_fitted()
        preds = []
        for record in self._records(X):
            leaf = self.tree_.classify(record)
            label = rank_labels(leaf.counts, self.tie_break)[0][0]
            preds.append(self._label_lookup[label])
        return np.array(preds, dtype=self.classes_.dtype)

    def predict_proba(self, X):
        """
        Predict class probabilities for the provided samples.

        Returns
        -------
        ndarray of shape (n_samples, n_classes)
            Label distribution of the reached leaf, columns ordered like
            :attr:`classes_`.
        """
        self._check_fitted()
        rows = []
        for record in self._records(X):
            leaf = self.tree_.classify(record)
            tot = leaf.total
            rows.append([leaf.counts.get(str(c), 0) / tot for c in self.classes_])
        return np.array(rows, dtype=float)

    def predict_answer(self, X) -> list[Answer]:
        """:class:`~id3py.answer.Answer` (label and integer confidence) per sample."""
        self._check_fitted()
        return [self.tree_.query(record).unwrap() for record in self._records(X)]

    def predict_rule(self, X) -> list[str]:
        """Decision rule followed by each sample."""
        self._check_fitted()
        return [self.tree_.predict_rule(record) for record in self._records(X)]

    def export_rules(self) -> list[str]:
        self._check_fitted()
        return self.tree_.export_rules()

    def print_tree(self) -> None:
        self._check_fitted()
        self.tree_.print_tree()

    def export_graphviz(self, filename: str | None = None, *, format: str = "png") -> str:
        self._check_fitted()
        return self.tree_.export_graphviz(filename, format=format)
