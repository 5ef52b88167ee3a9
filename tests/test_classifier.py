import numpy as np
import pandas as pd
import pytest
from sklearn.exceptions import NotFittedError

from id3py import Answer, DegenerateTrainingDataError, ID3Classifier


def _tiny_dataset():
    """Return a small classification dataset with a numeric and categorical feature."""
    X = np.array([[1, 'A'], [2, 'A'], [3, 'B'], [4, 'B']], dtype=object)
    y = np.array([0, 0, 1, 1])
    return X, y


def test_classifier_smoke():
    X, y = _tiny_dataset()
    clf = ID3Classifier(feature_names=['num', 'cat'])
    clf.fit(X, y)
    preds = clf.predict(X)
    assert preds.shape == y.shape
    assert np.array_equal(preds, y)
    assert clf.score(X, y) == 1.0
    assert list(clf.classes_) == [0, 1]
    assert clf.n_features_in_ == 2


def test_classifier_proba_sums_to_one():
    X, y = _tiny_dataset()
    clf = ID3Classifier(feature_names=['num', 'cat']).fit(X, y)
    proba = clf.predict_proba(X)
    assert proba.shape == (4, 2)
    # probabilities for each row should sum to 1
    assert np.allclose(proba.sum(axis=1), 1.0)


def test_classifier_string_labels():
    X = np.array([[1, 'A'], [2, 'A'], [3, 'B'], [4, 'B']], dtype=object)
    y = np.array(['no', 'no', 'yes', 'yes'])
    clf = ID3Classifier().fit(X, y)
    assert list(clf.predict([[5, 'B'], [0, 'A']])) == ['yes', 'no']
    assert clf.feature_names_ == ['f0', 'f1']


def test_classifier_numeric_threshold_generalises():
    # alternating labels force several threshold splits
    X = np.array([[1], [2], [3], [4]])
    y = np.array([0, 1, 0, 1])
    clf = ID3Classifier().fit(X, y)
    assert clf.score(X, y) == 1.0


def test_classifier_predict_answer():
    X = np.array([['s'], ['s'], ['s'], ['t']], dtype=object)
    y = np.array(['a', 'b', 'a', 'c'])
    clf = ID3Classifier(feature_names=['k']).fit(X, y)
    answers = clf.predict_answer([['s'], ['t']])
    assert answers == [Answer('a', 66), Answer('c', 100)]


def test_classifier_rule_export():
    X, y = _tiny_dataset()
    clf = ID3Classifier(feature_names=['num', 'cat']).fit(X, y)
    # trace rule for each sample
    rules = clf.predict_rule(X)
    assert len(rules) == len(X)
    assert all(r != '<root>' for r in rules)
    # export full tree rules
    tree_rules = clf.export_rules()
    assert len(tree_rules) == 2
    # each exported rule should contain implication symbol
    assert all('=>' in r for r in tree_rules)


def test_classifier_print_tree(capsys):
    X, y = _tiny_dataset()
    ID3Classifier(feature_names=['num', 'cat']).fit(X, y).print_tree()
    assert 'Predict' in capsys.readouterr().out


def test_classifier_graphviz_export():
    pytest.importorskip("graphviz")
    X = np.array([[1, 2], [3, 4], [5, 6]])
    y = np.array([0, 1, 0])
    clf = ID3Classifier().fit(X, y)
    assert 'digraph' in clf.export_graphviz()


def test_classifier_not_fitted_raises():
    clf = ID3Classifier()
    with pytest.raises(NotFittedError):
        clf.predict([[1, 'A']])
    with pytest.raises(ValueError):
        clf.predict_rule([[1, 'A']])
    with pytest.raises(ValueError):
        clf.export_rules()


def test_classifier_dataframe_input():
    df = pd.DataFrame({'Color': ['Green', 'Yellow', 'Red', 'Red', 'Yellow'],
                       'Diameter': [3, 3, 1, 1, 3]})
    y = ['Apple', 'Apple', 'Grape', 'Grape', 'Lemon']
    clf = ID3Classifier(target_name='Fruit').fit(df, y)
    assert clf.feature_names_ == ['Color', 'Diameter']
    assert clf.tree_.columns == ('Color', 'Diameter', 'Fruit')
    assert clf.predict(pd.DataFrame({'Color': ['Red'], 'Diameter': [1]}))[0] == 'Grape'


def test_classifier_with_none_values():
    # None is just another category
    X = np.array([[1, 'A'], [2, None], [3, 'B'], [None, 'A']], dtype=object)
    y = np.array([0, 0, 1, 1])
    clf = ID3Classifier(feature_names=['num', 'cat'])
    clf.fit(X, y)
    preds = clf.predict(X)
    assert len(preds) == len(y)


def test_classifier_input_validation():
    X, y = _tiny_dataset()
    with pytest.raises(ValueError):
        ID3Classifier(feature_names=['only_one']).fit(X, y)
    with pytest.raises(ValueError):
        ID3Classifier(feature_names=['num', 'label']).fit(X, y)
    with pytest.raises(ValueError):
        ID3Classifier().fit(X, y[:3])
    with pytest.raises(DegenerateTrainingDataError):
        ID3Classifier().fit(np.empty((0, 2)), np.array([]))
    clf = ID3Classifier().fit(X, y)
    with pytest.raises(ValueError):
        clf.predict([[1, 'A', 'extra']])


def test_classifier_rejects_labels_with_same_string_form():
    # float32(0.1) != 0.1, but both print as "0.1"
    X = np.array([[1], [2]])
    y = np.array([np.float32(0.1), 0.1], dtype=object)
    with pytest.raises(ValueError, match="string forms"):
        ID3Classifier().fit(X, y)


def test_classifier_get_params_roundtrip():
    clf = ID3Classifier(tie_break='lexicographic', mixed_types='ignore')
    params = clf.get_params()
    assert params['tie_break'] == 'lexicographic'
    assert params['mixed_types'] == 'ignore'
    assert ID3Classifier(**params).get_params() == params
