# brazilian_utils/license_plate.py
#
# Vehicle plates in the two Brazilian layouts:
#   old       LLLNNNN (displayed LLL-NNNN)
#   Mercosul  LLLNLNN (since 2018)
#
# Invariants:
#   - Validation strips surrounding whitespace and dashes and uppercases
#     first, so "abc-1234" is a valid old plate.
#   - convert_to_mercosul maps the second digit 0..9 to A..J and touches
#     nothing else.
from __future__ import annotations

import random
import string
from enum import StrEnum

from brazilian_utils._digits import DIGITS


class PlateFormat(StrEnum):
    OLD = "LLLNNNN"
    MERCOSUL = "LLLNLNN"


# Names accepted by is_valid(format=...) besides the patterns themselves.
_FORMAT_NAMES = {
    "old_format": PlateFormat.OLD,
    "mercosul": PlateFormat.MERCOSUL,
}


def clean(license_plate: str) -> str:
    """Remove dashes."""
    return license_plate.replace("-", "")


def _normalize(license_plate: str) -> str:
    return clean(license_plate.strip()).upper()


def _matches(plate: str, pattern: PlateFormat) -> bool:
    if len(plate) != len(pattern):
        return False
    for char, kind in zip(plate, pattern):
        if kind == "L" and char not in string.ascii_uppercase:
            return False
        if kind == "N" and char not in DIGITS:
            return False
    return True


def get_format(license_plate: str) -> str | None:
    """"LLLNNNN" for an old plate, "LLLNLNN" for a Mercosul plate, None otherwise."""
    plate = _normalize(license_plate)
    for pattern in PlateFormat:
        if _matches(plate, pattern):
            return pattern.value
    return None


def is_valid(license_plate: str, format: str | None = None) -> bool:
    """True iff the plate matches *format*, or either layout otherwise.

    *format* may be "old_format", "mercosul" or one of the patterns
    "LLLNNNN"/"LLLNLNN"; None or any other string accepts both layouts.
    """
    pattern = None if format is None else _FORMAT_NAMES.get(format)
    if pattern is None and format is not None and format.upper() in set(PlateFormat):
        pattern = PlateFormat(format.upper())
    if pattern is None:
        return get_format(license_plate) is not None
    return _matches(_normalize(license_plate), pattern)


def format(license_plate: str) -> str | None:
    """LLL-NNNN for old plates, LLLNLNN for Mercosul plates, None otherwise."""
    plate = _normalize(license_plate)
    if _matches(plate, PlateFormat.OLD):
        return f"{plate[:3]}-{plate[3:]}"
    if _matches(plate, PlateFormat.MERCOSUL):
        return plate
    return None


def convert_to_mercosul(license_plate: str) -> str | None:
    """Old plate to Mercosul (ABC1234 -> ABC1C34), or None when not a valid old plate."""
    plate = _normalize(license_plate)
    if not _matches(plate, PlateFormat.OLD):
        return None
    letter = string.ascii_uppercase[int(plate[4])]
    return f"{plate[:4]}{letter}{plate[5:]}"


def generate(format: str | None = None) -> str | None:
    """Random plate for the pattern "LLLNLNN" (default) or "LLLNNNN"; None for any other pattern."""
    pattern = (PlateFormat.MERCOSUL.value if format is None else format).upper()
    if pattern not in set(PlateFormat):
        return None
    return "".join(
        random.choice(string.ascii_uppercase) if kind == "L" else random.choice(DIGITS)
        for kind in pattern
    )


remove_symbols = clean
format_license_plate = format
