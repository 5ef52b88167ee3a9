import pytest

from id3py import Question, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3", 3.0),
        ("-2.5", -2.5),
        ("+4", 4.0),
        ("2.5-", -2.5),
        (" 7 ", 7.0),
        ("1,000", 1000.0),
        ("1,250.75", 1250.75),
        (".5", 0.5),
        ("5.", 5.0),
    ],
)
def test_parse_number_accepts_invariant_numbers(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", " ", ".", "-", "Red", "1e5", "nan", "inf", "1_000", "+-1", "-1-", "3 4"])
def test_parse_number_rejects_non_numbers(text):
    assert parse_number(text) is None


def test_numeric_question_is_threshold():
    q = Question("Diameter", "3")
    assert q.is_numeric
    assert q.matches("3")
    assert q.matches("4")
    assert q.matches("10.5")
    assert not q.matches("1")
    assert not q.matches("2.99")


def test_categorical_question_is_equality():
    q = Question("Color", "Red")
    assert not q.is_numeric
    assert q.matches("Red")
    assert not q.matches("red")
    assert not q.matches("Green")


def test_inconsistent_values_fall_back_to_equality():
    assert not Question("x", "3").matches("big")
    assert Question("x", "3").matches("3")
    assert not Question("x", "small").matches("5")
    assert Question("x", "small").matches("small")


def test_non_string_cells_are_stringified():
    q = Question("Diameter", "3")
    assert q.matches(3)
    assert q.matches(3.5)
    assert not q.matches(1)
    assert Question("Flag", "True").matches(True)


def test_match_row_and_record():
    q = Question("Diameter", "3")
    columns = ["Color", "Diameter", "Label"]
    assert q.match_row(("Yellow", "3", "Apple"), columns)
    assert not q.match_row(("Red", "1", "Grape"), columns)
    assert q.match_record({"Color": "Green", "Diameter": "3"})
    assert not q.match_record({"Color": "Green", "Diameter": "1"})


def test_question_str_and_equality():
    assert str(Question("Diameter", "3")) == "Is Diameter >= 3"
    assert str(Question("Color", "Red")) == "Is Color == Red"
    assert Question("Color", "Red") == Question("Color", "Red")
    assert Question("Color", "Red") != Question("Color", "Green")
    assert Question("Diameter", "3").negated() == "Diameter < 3"
    assert Question("Color", "Red").negated() == "Color != Red"


def test_question_is_immutable():
    q = Question("Color", "Red")
    with pytest.raises(AttributeError):
        q.value = "Green"
