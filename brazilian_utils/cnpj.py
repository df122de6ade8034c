# brazilian_utils/cnpj.py
#
# CNPJ (Cadastro Nacional da Pessoa Juridica): 8-digit company root, 4-digit
# branch number and two mod-11 check digits.
#
# Invariants:
#   - is_valid only accepts the 14-digit cleaned form.
#   - All-same-digit sequences are rejected.
#   - generate() always yields a branch in 0001..9999.
from __future__ import annotations

from brazilian_utils._digits import all_same, is_digit_string, random_digits, weighted_sum

SIZE = 14
BASE_SIZE = 12

_WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_SYMBOLS = "./-"


def clean(dirty: str) -> str:
    """Remove dots, slashes and dashes, leaving any other character untouched."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def hashdigit(cnpj: str, position: int) -> int:
    """Compute the check digit that belongs at *position* (13 or 14) of a CNPJ.

    Args:
        cnpj:     At least the ``position - 1`` leading digits of a CNPJ.
        position: 1-based position of the requested check digit, 13 or 14.

    Returns:
        The check digit, 0..9.
    """
    if position == 13:
        weights = _WEIGHTS_FIRST
    elif position == 14:
        weights = _WEIGHTS_SECOND
    else:
        raise ValueError(f"position must be 13 or 14, got {position}")
    resto = weighted_sum(cnpj[: position - 1], weights) % 11
    return 0 if resto < 2 else 11 - resto


def compute_checksum(basenum: str) -> str:
    """Return the two check digits for a 12-digit CNPJ base."""
    first = hashdigit(basenum, 13)
    second = hashdigit(basenum + str(first), 14)
    return f"{first}{second}"


def is_valid(cnpj: str) -> bool:
    """True iff *cnpj* is 14 ASCII digits, not all equal, with matching check digits."""
    if not is_digit_string(cnpj, SIZE) or all_same(cnpj):
        return False
    return compute_checksum(cnpj[:BASE_SIZE]) == cnpj[BASE_SIZE:]


def format(cnpj: str) -> str | None:
    """XX.XXX.XXX/XXXX-XX, or None when *cnpj* is not valid."""
    if not is_valid(cnpj):
        return None
    return f"{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:]}"


def generate(branch: int | None = 1) -> str:
    """Random valid CNPJ for the given branch number.

    The branch is reduced modulo 10000 and 0 becomes 1, so ``generate(10000)``
    and ``generate(0)`` both produce branch ``0001``.
    """
    branch = (branch or 0) % 10000
    if branch == 0:
        branch = 1
    root = random_digits(8)
    base = f"{root}{branch:04d}"
    while all_same(base):
        root = random_digits(8)
        base = f"{root}{branch:04d}"
    return base + compute_checksum(base)


remove_symbols = clean
validate = is_valid
format_cnpj = format
