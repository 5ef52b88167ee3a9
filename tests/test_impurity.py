import pytest

from id3py import class_counts, gini_impurity, information_gain


def test_class_counts_first_seen_order():
    counts = class_counts(["b", "a", "b", "c", "a", "b"])
    assert counts == {"b": 3, "a": 2, "c": 1}
    assert list(counts) == ["b", "a", "c"]


@pytest.mark.parametrize("labels", [["Apple"], ["Grape"] * 7, ["x"] * 100])
def test_gini_single_class_is_zero(labels):
    assert gini_impurity(labels) == 0.0


@pytest.mark.parametrize("k", [2, 3, 4, 5, 10])
def test_gini_equal_classes(k):
    labels = [f"c{i}" for i in range(k)] * 3
    assert gini_impurity(labels) == pytest.approx(1 - 1 / k)


def test_gini_mixed_distribution():
    # 2 Apple, 2 Grape, 1 Lemon
    labels = ["Apple", "Apple", "Grape", "Grape", "Lemon"]
    assert gini_impurity(labels) == pytest.approx(0.64)


def test_gini_empty_raises():
    with pytest.raises(ValueError):
        gini_impurity([])


def test_information_gain_perfect_split():
    assert information_gain(["a", "a"], ["b", "b"], 0.5) == pytest.approx(0.5)


def test_information_gain_useless_split():
    assert information_gain(["a", "b"], ["a", "b"], 0.5) == pytest.approx(0.0)


def test_information_gain_weighted_by_partition_size():
    left = ["Apple", "Apple", "Lemon"]
    right = ["Grape", "Grape"]
    parent = gini_impurity(left + right)
    expected = parent - 0.6 * gini_impurity(left) - 0.4 * gini_impurity(right)
    assert information_gain(left, right, parent) == pytest.approx(expected)
    assert information_gain(left, right, parent) == pytest.approx(0.64 - 0.6 * 4 / 9)
