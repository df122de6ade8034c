# brazilian_utils/pis.py
#
# PIS/PASEP worker number: 10 base digits and one mod-11 check digit.
from __future__ import annotations

from brazilian_utils._digits import is_digit_string, random_digits, weighted_sum

SIZE = 11
WEIGHTS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_SYMBOLS = ".-"


def clean(dirty: str) -> str:
    """Remove dots and dashes."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def checksum(base_pis: str) -> int:
    """Check digit for the first 10 digits of a PIS: 11 - (sum mod 11), with 10 and 11 mapped to 0."""
    check_digit = 11 - weighted_sum(base_pis, WEIGHTS) % 11
    return 0 if check_digit in (10, 11) else check_digit


def is_valid(pis: str) -> bool:
    """True iff *pis*, once cleaned, is 11 ASCII digits with a matching check digit."""
    pis = clean(pis)
    if not is_digit_string(pis, SIZE):
        return False
    return checksum(pis[:10]) == int(pis[10])


def format(pis: str) -> str | None:
    """XXX.XXXXX.XX-X, or None when *pis* is not valid."""
    if not is_valid(pis):
        return None
    pis = clean(pis)
    return f"{pis[:3]}.{pis[3:8]}.{pis[8:10]}-{pis[10]}"


def generate() -> str:
    """Random valid PIS in cleaned form."""
    base = random_digits(10)
    return f"{base}{checksum(base)}"


remove_symbols = clean
validate = is_valid
format_pis = format
