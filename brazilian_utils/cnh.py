# brazilian_utils/cnh.py
#
# CNH (Carteira Nacional de Habilitacao) registration number: 9 base digits
# and two mod-11 check digits.
#
# Invariants:
#   - is_valid keeps only the ASCII digits of its input before checking, so
#     "097.703.047-34" and "09770304734" are equivalent, while a letter in
#     place of a digit shortens the number and fails the length check.
#   - All-same-digit sequences are rejected.
from __future__ import annotations

from brazilian_utils._digits import all_same, only_digits, random_digits, weighted_sum

SIZE = 11

_WEIGHTS_FIRST = (9, 8, 7, 6, 5, 4, 3, 2, 1)
_WEIGHTS_SECOND = (1, 2, 3, 4, 5, 6, 7, 8, 9)

_SYMBOLS = ".- ()"


def clean(dirty: str) -> str:
    """Remove dots, dashes, spaces and parentheses."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def calculate_first_check_digit(base: str) -> int:
    """First check digit: weights 9..1 over the 9 base digits, remainder above 9 becomes 0."""
    remainder = weighted_sum(base[:9], _WEIGHTS_FIRST) % 11
    return 0 if remainder > 9 else remainder


def calculate_second_check_digit(base: str, first_check_digit: int) -> int:
    """Second check digit: weights 1..9 over the 9 base digits.

    A first check digit above 9 shifts the result by -2 (wrapping by +9).
    """
    result = weighted_sum(base[:9], _WEIGHTS_SECOND) % 11
    if first_check_digit > 9:
        result = result + 9 if result < 2 else result - 2
    return 0 if result > 9 else result


def is_valid(cnh: str) -> bool:
    """True iff the digits of *cnh* form a valid 11-digit registration number."""
    digits = only_digits(cnh)
    if len(digits) != SIZE or all_same(digits):
        return False
    first = int(digits[9])
    if calculate_first_check_digit(digits) != first:
        return False
    return calculate_second_check_digit(digits, first) == int(digits[10])


def generate() -> str:
    """Random valid CNH in cleaned form."""
    base = random_digits(9)
    while all_same(base):
        base = random_digits(9)
    first = calculate_first_check_digit(base)
    second = calculate_second_check_digit(base, first)
    return f"{base}{first}{second}"


remove_symbols = clean
is_valid_cnh = is_valid
validate = is_valid
