# brazilian_utils/renavam.py
#
# RENAVAM (Registro Nacional de Veiculos Automotores): 10 base digits and a
# mod-11 check digit computed over the base read right-to-left.
#
# Invariants:
#   - All-same-digit sequences are rejected.
from __future__ import annotations

from brazilian_utils._digits import all_same, is_digit_string, random_digits, weighted_sum

SIZE = 11
WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3)

_SYMBOLS = ".- "


def clean(dirty: str) -> str:
    """Remove dots, dashes and spaces."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def calculate_checksum(base_renavam: str) -> int:
    """Check digit for a 10-digit RENAVAM base, or 0 when the base is malformed."""
    if not is_digit_string(base_renavam, 10):
        return 0
    check_digit = 11 - weighted_sum(reversed(base_renavam), WEIGHTS) % 11
    return 0 if check_digit >= 10 else check_digit


def is_valid(renavam: str) -> bool:
    """True iff *renavam* is 11 ASCII digits, not all equal, with a matching check digit."""
    if not is_digit_string(renavam, SIZE) or all_same(renavam):
        return False
    return calculate_checksum(renavam[:10]) == int(renavam[10])


def generate() -> str:
    """Random valid RENAVAM."""
    base = random_digits(10)
    while all_same(base):
        base = random_digits(10)
    return f"{base}{calculate_checksum(base)}"


remove_symbols = clean
validate = is_valid
