# brazilian_utils/phone.py
#
# Brazilian phone numbers in cleaned form: 2-digit DDD (area code) followed by
#   mobile    9 + 8 digits   (11 digits)
#   landline  [2-5] + 7 digits (10 digits)
#
# Invariants:
#   - is_valid expects the cleaned form; clean() removes ( ) - + and spaces.
#   - Neither DDD digit may be 0.
from __future__ import annotations

import random
from enum import StrEnum

from brazilian_utils._digits import is_digit_string, random_digits

MOBILE_SIZE = 11
LANDLINE_SIZE = 10

_SYMBOLS = "()-+ "
_COUNTRY_CODE = "55"


class PhoneType(StrEnum):
    MOBILE = "mobile"
    LANDLINE = "landline"


def clean(phone_number: str) -> str:
    """Remove parentheses, dashes, plus signs and spaces."""
    return phone_number.translate(str.maketrans("", "", _SYMBOLS))


def _has_valid_ddd(phone_number: str) -> bool:
    return phone_number[0] != "0" and phone_number[1] != "0"


def _is_valid_mobile(phone_number: str) -> bool:
    return (
        is_digit_string(phone_number, MOBILE_SIZE)
        and _has_valid_ddd(phone_number)
        and phone_number[2] == "9"
    )


def _is_valid_landline(phone_number: str) -> bool:
    return (
        is_digit_string(phone_number, LANDLINE_SIZE)
        and _has_valid_ddd(phone_number)
        and phone_number[2] in "2345"
    )


def is_valid(phone_number: str, phone_type: str | None = None) -> bool:
    """True iff *phone_number* is a valid mobile or landline number.

    With *phone_type* "mobile" or "landline" only that kind is accepted; any
    other value behaves like None.
    """
    if phone_type == PhoneType.MOBILE:
        return _is_valid_mobile(phone_number)
    if phone_type == PhoneType.LANDLINE:
        return _is_valid_landline(phone_number)
    return _is_valid_mobile(phone_number) or _is_valid_landline(phone_number)


def format(phone_number: str) -> str | None:
    """(DD)XXXXX-XXXX or (DD)XXXX-XXXX, or None when not valid."""
    if not is_valid(phone_number):
        return None
    ddd, number = phone_number[:2], phone_number[2:]
    return f"({ddd}){number[:-4]}-{number[-4:]}"


def _ddd() -> str:
    return f"{random.randint(1, 9)}{random.randint(1, 9)}"


def _generate_mobile() -> str:
    return f"{_ddd()}9{random_digits(8)}"


def _generate_landline() -> str:
    return f"{_ddd()}{random.randint(2, 5)}{random_digits(7)}"


def generate(phone_type: str | None = None) -> str:
    """Random valid number of the given kind; a random kind when *phone_type* is None."""
    if phone_type == PhoneType.MOBILE:
        return _generate_mobile()
    if phone_type == PhoneType.LANDLINE:
        return _generate_landline()
    return random.choice((_generate_mobile, _generate_landline))()


def remove_international_dialing_code(phone_number: str) -> str:
    """Drop a leading 55 / +55 country code.

    Spaces are removed first; the code is only dropped when what remains is
    longer than 11 characters, otherwise the input comes back unchanged.
    """
    compact = phone_number.replace(" ", "")
    if len(compact) > MOBILE_SIZE and compact.startswith((_COUNTRY_CODE, "+" + _COUNTRY_CODE)):
        return compact.replace(_COUNTRY_CODE, "", 1)
    return phone_number


remove_symbols = clean
format_phone = format
