# brazilian_utils/cpf.py
#
# CPF (Cadastro de Pessoas Fisicas): 11 digits, the last two are mod-11
# check digits over the preceding ones.
#
# Invariants:
#   - is_valid only accepts the 11-digit cleaned form; punctuated input must
#     go through clean() first.
#   - Every all-same-digit sequence is rejected, even though 000.000.000-00
#     and friends satisfy the arithmetic.
from __future__ import annotations

from brazilian_utils._digits import all_same, is_digit_string, random_digits, weighted_sum

SIZE = 11
BASE_SIZE = 9

BLACKLIST: frozenset[str] = frozenset(str(d) * SIZE for d in range(10))

_SYMBOLS = ".-"


def clean(dirty: str) -> str:
    """Remove dots and dashes, leaving any other character untouched."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def hashdigit(cpf: str, position: int) -> int:
    """Compute the check digit that belongs at *position* (10 or 11) of a CPF.

    Weights run from *position* down to 2 over the first ``position - 1``
    digits. When the eleventh digit is requested from the nine base digits
    alone, the tenth digit is derived first.

    Args:
        cpf:      Leading digits of a CPF (at least the 9 base digits).
        position: 1-based position of the requested check digit, 10 or 11.

    Returns:
        The check digit, 0..9.
    """
    if position not in (10, 11):
        raise ValueError(f"position must be 10 or 11, got {position}")
    digits = cpf[: position - 1]
    if position == 11 and len(digits) == BASE_SIZE:
        digits += str(hashdigit(digits, 10))
    resto = weighted_sum(digits, range(position, 1, -1)) % 11
    return 0 if resto < 2 else 11 - resto


def compute_checksum(basenum: str) -> str:
    """Return the two check digits for a 9-digit CPF base."""
    first = hashdigit(basenum, 10)
    second = hashdigit(basenum + str(first), 11)
    return f"{first}{second}"


def is_valid(cpf: str) -> bool:
    """True iff *cpf* is 11 ASCII digits, not blacklisted, with matching check digits."""
    if not is_digit_string(cpf, SIZE) or cpf in BLACKLIST:
        return False
    return compute_checksum(cpf[:BASE_SIZE]) == cpf[BASE_SIZE:]


def format(cpf: str) -> str | None:
    """XXX.XXX.XXX-XX, or None when *cpf* is not valid."""
    if not is_valid(cpf):
        return None
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"


def mask(cpf: str) -> str | None:
    """***.XXX.XXX-** (only the middle six digits visible), or None when invalid."""
    if not is_valid(cpf):
        return None
    return f"***.{cpf[3:6]}.{cpf[6:9]}-**"


def generate() -> str:
    """Random valid CPF in cleaned form."""
    base = random_digits(BASE_SIZE)
    while all_same(base):
        base = random_digits(BASE_SIZE)
    return base + compute_checksum(base)


remove_symbols = clean
validate = is_valid
format_cpf = format
