"""Natural ordering for chapter and page names.

Digit runs compare by numeric value ("2" < "10"), letters compare
case- and accent-insensitively. A name is split into alternating
text and digit runs, so mixed names are compared run by run:
"ch1page2" < "ch10page1" because the first digit runs are 1 and 10.
"""

import re
import unicodedata
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")

_DIGIT_RUN = re.compile(r"(\d+)")


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def natural_key(text: str) -> tuple:
    """Return a sort key that orders embedded numbers by value.

    re.split with a capturing group always yields text at even positions
    and digit runs at odd positions, so keys of different names never
    compare an int against a str.
    """
    parts = _DIGIT_RUN.split(_fold(text))
    return tuple(int(part) if index % 2 else part for index, part in enumerate(parts))


def natural_sorted(items: Iterable[T], key: Callable[[T], str] = str) -> List[T]:
    """Stable natural sort of items by the string returned from ``key``."""
    return sorted(items, key=lambda item: natural_key(key(item)))
