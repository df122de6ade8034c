# brazilian_utils/voter_id.py
#
# Titulo de Eleitor (voter registration): an 8-digit sequence, the 2-digit
# numeric UF code and two check digits. Old SP and MG registrations carry a
# 9-digit sequence, so 13-digit numbers are accepted for UF 01 and 02 only.
#
# Invariants:
#   - The UF field is always characters L-4..L-2, whatever the length.
#   - Only the first 8 sequence digits enter the first check digit.
#   - For UF 01/02 a zero remainder becomes 1; independently, a remainder of
#     10 becomes 0. Both rules apply to both check digits.
from __future__ import annotations

from brazilian_utils._digits import is_digit_string, random_digits, weighted_sum
from brazilian_utils.uf import VOTER_UF_CODES

SIZE = 12
LONG_SIZE = 13

_WEIGHTS_FIRST = (2, 3, 4, 5, 6, 7, 8, 9)
_WEIGHTS_SECOND = (7, 8, 9)
_ZERO_REMAINDER_UFS = frozenset({"01", "02"})

_SYMBOLS = " .-"


def clean(dirty: str) -> str:
    """Remove spaces, dots and dashes."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def _sequential_number(voter_id: str) -> str:
    return voter_id[:8]


def _federative_union(voter_id: str) -> str:
    return voter_id[-4:-2]


def _verifying_digits(voter_id: str) -> str:
    return voter_id[-2:]


def _is_federative_union_valid(federative_union: str) -> bool:
    return is_digit_string(federative_union, 2) and 1 <= int(federative_union) <= 28


def _is_length_valid(voter_id: str) -> bool:
    if len(voter_id) == SIZE:
        return True
    return len(voter_id) == LONG_SIZE and _federative_union(voter_id) in _ZERO_REMAINDER_UFS


def _apply_remainder_rules(rest: int, federative_union: str) -> int:
    if rest == 0 and federative_union in _ZERO_REMAINDER_UFS:
        return 1
    if rest == 10:
        return 0
    return rest


def calculate_vd1(sequential_number: str, federative_union: str) -> int:
    """First check digit from the 8-digit sequence (weights 2..9)."""
    rest = weighted_sum(sequential_number[:8], _WEIGHTS_FIRST) % 11
    return _apply_remainder_rules(rest, federative_union)


def calculate_vd2(federative_union: str, vd1: int) -> int:
    """Second check digit from the two UF digits and the first check digit (weights 7, 8, 9)."""
    rest = weighted_sum(f"{federative_union}{vd1}", _WEIGHTS_SECOND) % 11
    return _apply_remainder_rules(rest, federative_union)


def is_valid(voter_id: str) -> bool:
    """True iff *voter_id* is a 12-digit (or 13-digit SP/MG) registration with matching check digits."""
    if not is_digit_string(voter_id) or not _is_length_valid(voter_id):
        return False

    federative_union = _federative_union(voter_id)
    if not _is_federative_union_valid(federative_union):
        return False

    verifying_digits = _verifying_digits(voter_id)
    vd1 = calculate_vd1(_sequential_number(voter_id), federative_union)
    if vd1 != int(verifying_digits[0]):
        return False
    return calculate_vd2(federative_union, vd1) == int(verifying_digits[1])


def format(voter_id: str) -> str | None:
    """XXXX XXXX XX XX (the leading group takes 5 digits in the 13-digit form), or None."""
    if not is_valid(voter_id):
        return None
    return f"{voter_id[:-8]} {voter_id[-8:-4]} {voter_id[-4:-2]} {voter_id[-2:]}"


def generate(federative_union: str | None = "ZZ") -> str | None:
    """Random valid 12-digit registration for the given UF abbreviation.

    Returns None when *federative_union* is not a known UF (or ZZ).
    """
    uf_code = VOTER_UF_CODES.get((federative_union or "ZZ").upper())
    if uf_code is None:
        return None
    sequential_number = random_digits(8)
    vd1 = calculate_vd1(sequential_number, uf_code)
    vd2 = calculate_vd2(uf_code, vd1)
    return f"{sequential_number}{uf_code}{vd1}{vd2}"


validate = is_valid
format_voter_id = format
