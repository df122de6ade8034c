# brazilian_utils/_digits.py
#
# Small helpers shared by the check-digit modules.
from __future__ import annotations

import random
import string
from collections.abc import Iterable, Sequence

DIGITS = string.digits


def only_digits(value: str) -> str:
    """Keep ASCII digits only."""
    return "".join(c for c in value if c in DIGITS)


def is_digit_string(value: str, length: int | None = None) -> bool:
    """True iff *value* is made of ASCII digits only (and has *length*, if given).

    str.isdigit() is not used because it accepts non-ASCII digits such as '²'.
    """
    if length is not None and len(value) != length:
        return False
    return bool(value) and all(c in DIGITS for c in value)


def all_same(value: str) -> bool:
    return len(set(value)) == 1


def weighted_sum(digits: Iterable[str], weights: Sequence[int]) -> int:
    """Sum of int(digit) * weight, pairing positions until either side runs out."""
    return sum(int(d) * w for d, w in zip(digits, weights))


def random_digits(length: int) -> str:
    return "".join(random.choice(DIGITS) for _ in range(length))
