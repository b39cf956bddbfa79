"""
Card ordering.

Sorts cards by one of the allowed fields. Cost and power values are
numeric strings, sometimes prefixed with "#", so values that parse as
numbers are compared numerically ("10" after "3"); everything else is
compared as text.
"""

import locale
import math
import re
from collections.abc import Iterable
from functools import cmp_to_key

from decksmith.models.card import Card
from decksmith.models.failure import InvalidSortFieldError
from decksmith.models.query import SortField, SortOrder, SortSpec

# Leading decimal number, e.g. "3", "2.5", "-1", "4 (+1)"
_NUMBER_PATTERN = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def sort_cards(cards: Iterable[Card], spec: SortSpec) -> list[Card]:
    """
    Return cards ordered by a sort field and direction.

    The sort is stable: cards comparing equal keep their input order, so
    sorting already-sorted cards again changes nothing. The input is not
    modified.

    Raises:
        InvalidSortFieldError: If the sort field is not an allowed value
    """
    try:
        field = SortField(spec.field)
    except ValueError:
        raise InvalidSortFieldError(str(spec.field), [f.value for f in SortField]) from None

    attribute = field.attribute
    sign = -1 if spec.order == SortOrder.DESC else 1

    def compare(a: Card, b: Card) -> int:
        return sign * compare_values(getattr(a, attribute), getattr(b, attribute))

    return sorted(cards, key=cmp_to_key(compare))


def compare_values(a: str | None, b: str | None) -> int:
    """
    Compare two field values in ascending order.

    1. "#" characters are stripped from both values.
    2. If both parse as numbers, they are compared numerically. A parsed
       zero is still a number.
    3. Otherwise both are compared as text with the current locale's
       collation, case-insensitively first.

    Absent values compare as empty text.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal
    """
    a_clean = (a or "").replace("#", "")
    b_clean = (b or "").replace("#", "")

    a_number = parse_number(a_clean)
    b_number = parse_number(b_clean)
    if a_number is not None and b_number is not None:
        return _sign(a_number - b_number)

    a_key = _collation_key(a_clean)
    b_key = _collation_key(b_clean)
    if a_key < b_key:
        return -1
    if a_key > b_key:
        return 1
    return 0


def parse_number(value: str) -> float | None:
    """
    Parse the leading number of a value.

    Returns:
        The parsed number, or None if the value has no leading finite number
    """
    match = _NUMBER_PATTERN.match(value)
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


def _collation_key(value: str) -> tuple[str, str]:
    return (locale.strxfrm(value.casefold()), locale.strxfrm(value))


def _sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0
