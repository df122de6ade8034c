# brazilian_utils/boleto.py
#
# Boleto (bank payment slip) digitable line: 47 digits that encode the
# 44-digit barcode in a shuffled order, plus three field check digits.
#
# Two independent checks must pass:
#   1. mod-10 over each of the three leading fields of the digitable line;
#   2. mod-11 over the reassembled barcode, whose 5th digit is the general
#      check digit.
#
# Invariants:
#   - Every character that is not an ASCII digit (spaces, dots) is discarded
#     before any check.
from __future__ import annotations

from brazilian_utils._digits import only_digits

DIGITABLE_LINE_LENGTH = 47
BARCODE_LENGTH = 44

# (start, end, check_digit_index) of the three mod-10 fields.
PARTIALS_TO_VERIFY_MOD10: tuple[tuple[int, int, int], ...] = (
    (0, 9, 9),
    (10, 20, 20),
    (21, 31, 31),
)

# Slices of the digitable line that, concatenated in this order, give the barcode.
DIGITABLE_LINE_TO_BARCODE_POSITIONS: tuple[tuple[int, int], ...] = (
    (0, 4),
    (32, 47),
    (4, 9),
    (10, 20),
    (21, 31),
)

BARCODE_CHECK_DIGIT_POSITION = 4

MOD10_WEIGHTS = (2, 1)
MOD11_WEIGHT_INITIAL = 2
MOD11_WEIGHT_END = 9


def clean(dirty: str) -> str:
    """Keep only the digits of a digitable line."""
    return only_digits(dirty)


def mod10(partial: str) -> int:
    """Mod-10 check digit of a digitable-line field.

    Digits are read right-to-left with weights 2, 1, 2, 1, ...; products above
    9 contribute the sum of their two digits.
    """
    total = 0
    for index, char in enumerate(reversed(partial)):
        product = int(char) * MOD10_WEIGHTS[index % 2]
        total += 1 + product % 10 if product > 9 else product
    remainder = total % 10
    return 0 if remainder == 0 else 10 - remainder


def mod11(value: str) -> int:
    """Mod-11 general check digit of a barcode without its check digit.

    Digits are read right-to-left with weights cycling 2..9; remainders 0 and 1
    give 1.
    """
    total = 0
    weight = MOD11_WEIGHT_INITIAL
    for char in reversed(value):
        total += int(char) * weight
        weight = weight + 1 if weight < MOD11_WEIGHT_END else MOD11_WEIGHT_INITIAL
    remainder = total % 11
    return 1 if remainder in (0, 1) else 11 - remainder


def to_barcode(digitable_line: str) -> str | None:
    """Reassemble the 44-digit barcode from a digitable line, or None when the length is wrong."""
    line = clean(digitable_line)
    if len(line) != DIGITABLE_LINE_LENGTH:
        return None
    return "".join(line[start:end] for start, end in DIGITABLE_LINE_TO_BARCODE_POSITIONS)


def _partials_are_valid(line: str) -> bool:
    return all(
        mod10(line[start:end]) == int(line[check_index])
        for start, end, check_index in PARTIALS_TO_VERIFY_MOD10
    )


def _barcode_is_valid(barcode: str) -> bool:
    position = BARCODE_CHECK_DIGIT_POSITION
    without_check_digit = barcode[:position] + barcode[position + 1:]
    return mod11(without_check_digit) == int(barcode[position])


def is_valid(digitable_line: str) -> bool:
    """True iff the digits of *digitable_line* pass the three mod-10 checks and the mod-11 check."""
    line = clean(digitable_line)
    if len(line) != DIGITABLE_LINE_LENGTH:
        return False
    if not _partials_are_valid(line):
        return False
    barcode = to_barcode(line)
    return barcode is not None and _barcode_is_valid(barcode)


validate = is_valid
