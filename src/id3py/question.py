"""
id3py.question
==============

A :class:`Question` records a column name and a comparison value and is used
both to partition training rows during split search and to route query
records during classification.

Matching is asymmetric on purpose: a numeric comparison value acts as a
threshold (``cell >= value``) while a categorical one acts as a partition
(``cell == value``).  Numbers are parsed in a culture-invariant way, see
:func:`parse_number`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache

# Leading or trailing sign, thousands separators in the integral part and an
# optional decimal part. No exponent and no nan/inf literals.
_NUMBER_RE = re.compile(
    r"""
    ^\s*
    (?P<lead>[+-])?
    (?P<int>\d[\d,]*)?
    (?:\.(?P<frac>\d*))?
    (?P<trail>[+-])?
    \s*$
    """,
    re.VERBOSE,
)


@lru_cache(maxsize=4096)
def parse_number(text: str) -> float | None:
    """Parse ``text`` as an invariant-culture number.

    Parameters
    ----------
    text : str
        Cell value or comparison value.

    Returns
    -------
    float or None
        The parsed value, or ``None`` when ``text`` is not a number.

    Examples
    --------
    >>> parse_number("3")
    3.0
    >>> parse_number(" 1,250.5 ")
    1250.5
    >>> parse_number("7-")
    -7.0
    >>> parse_number("Red") is None
    True
    """
    m = _NUMBER_RE.match(text)
    if m is None:
        return None
    lead, integral, frac, trail = m.group("lead", "int", "frac", "trail")
    if not integral and not frac:
        return None
    if lead and trail:
        return None
    digits = (integral or "0").replace(",", "")
    number = float(f"{digits}.{frac or '0'}")
    if (lead or trail) == "-":
        number = -number
    return number


def is_numeric(text: str) -> bool:
    return parse_number(text) is not None


@dataclass(frozen=True)
class Question:
    """A single ``column``/``value`` test.

    Parameters
    ----------
    column : str
        Name of the feature column the question inspects.
    value : str
        Comparison value.  When it parses as a number the question is a
        threshold test, otherwise an equality test.
    """

    column: str
    value: str
    _number: float | None = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "value", str(self.value))
        object.__setattr__(self, "_number", parse_number(self.value))

    @property
    def is_numeric(self) -> bool:
        return self._number is not None

    @property
    def operator(self) -> str:
        return ">=" if self.is_numeric else "=="

    def matches(self, cell) -> bool:
        """Return whether a single cell value satisfies the question.

        A cell that does not parse as a number is compared by string equality
        even when the question is numeric; inconsistently typed columns are
        therefore matched value by value rather than rejected.
        """
        cell = str(cell)
        if self._number is not None:
            number = parse_number(cell)
            if number is not None:
                return number >= self._number
        return cell == self.value

    def match_row(self, row: Sequence[str], columns: Sequence[str]) -> bool:
        """Evaluate the question against a positional training row."""
        return self.matches(row[columns.index(self.column)])

    def match_record(self, record: Mapping[str, str]) -> bool:
        """Evaluate the question against a ``{column: value}`` query record."""
        return self.matches(record[self.column])

    def negated(self) -> str:
        """Human-readable form of the false branch."""
        return f"{self.column} {'<' if self.is_numeric else '!='} {self.value}"

    def __str__(self) -> str:
        return f"Is {self.column} {self.operator} {self.value}"
