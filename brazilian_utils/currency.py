# brazilian_utils/currency.py
#
# Brazilian Real (BRL) display and Portuguese number words.
#
# Design decisions:
#   - Monetary values go through Decimal(str(value)) and are rounded
#     ROUND_HALF_UP to centavos, so 10.555 becomes R$ 10,56 instead of
#     inheriting the binary float error.
#   - number_to_words works on Python ints and has no upper bound besides the
#     quatrilhao scale, which simply repeats for larger values.
#
# Invariants:
#   - A value that rounds to zero is displayed without sign (R$ 0,00).
#   - Non-finite input (inf, nan) gives None.
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

_CENTS = Decimal("0.01")

_ONES = ("", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove")
_TEENS = (
    "", "onze", "doze", "treze", "catorze", "quinze",
    "dezesseis", "dezessete", "dezoito", "dezenove",
)
_TENS = (
    "", "dez", "vinte", "trinta", "quarenta", "cinquenta",
    "sessenta", "setenta", "oitenta", "noventa",
)
_HUNDREDS = (
    "", "cento", "duzentos", "trezentos", "quatrocentos", "quinhentos",
    "seiscentos", "setecentos", "oitocentos", "novecentos",
)

# (value, singular, plural), largest first. "mil" is handled apart because
# it has no "um" in front and no plural form.
_SCALES = (
    (10**15, "quatrilhão", "quatrilhões"),
    (10**12, "trilhão", "trilhões"),
    (10**9, "bilhão", "bilhões"),
    (10**6, "milhão", "milhões"),
)


def number_to_words(n: int) -> str:
    """Brazilian Portuguese words for an integer.

    >>> number_to_words(1111)
    'mil, cento e onze'
    >>> number_to_words(-42)
    'menos quarenta e dois'
    """
    if n == 0:
        return "zero"
    if n < 0:
        return f"menos {number_to_words(-n)}"

    for scale, singular, plural in _SCALES:
        if n >= scale:
            count, remainder = divmod(n, scale)
            text = f"um {singular}" if count == 1 else f"{number_to_words(count)} {plural}"
            if remainder == 0:
                return text
            connector = " e " if remainder < 100 else ", "
            return f"{text}{connector}{number_to_words(remainder)}"

    if n >= 1000:
        count, remainder = divmod(n, 1000)
        text = "mil" if count == 1 else f"{number_to_words(count)} mil"
        if remainder == 0:
            return text
        # Round hundreds join with "e": "dois mil e quinhentos".
        connector = " e " if remainder < 100 or remainder % 100 == 0 else ", "
        return f"{text}{connector}{number_to_words(remainder)}"

    if n >= 100:
        hundreds, remainder = divmod(n, 100)
        if remainder == 0:
            return "cem" if hundreds == 1 else _HUNDREDS[hundreds]
        return f"{_HUNDREDS[hundreds]} e {number_to_words(remainder)}"

    if n >= 20:
        tens, ones = divmod(n, 10)
        if ones == 0:
            return _TENS[tens]
        return f"{_TENS[tens]} e {_ONES[ones]}"

    if n >= 11:
        return _TEENS[n - 10]
    if n == 10:
        return _TENS[1]
    return _ONES[n]


def _to_cents(value: float | int | Decimal) -> int | None:
    """Signed amount in whole centavos, rounded half up; None when not finite."""
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    # quantize needs every integer digit plus the two centavo digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return int(amount.quantize(_CENTS, rounding=ROUND_HALF_UP).scaleb(2))


def _group_thousands(n: int) -> str:
    return f"{n:,}".replace(",", ".")


def format(value: float | int | Decimal) -> str | None:
    """R$ 1.234,56 style display, or None for inf/nan.

    Negative values read "R$ -1.234,56".
    """
    cents = _to_cents(value)
    if cents is None:
        return None
    reais, centavos = divmod(abs(cents), 100)
    sign = "-" if cents < 0 else ""
    return f"R$ {sign}{_group_thousands(reais)},{centavos:02d}"


def convert_real_to_text(value: float | int | Decimal) -> str | None:
    """Amount in words, e.g. 1111.11 -> "mil, cento e onze reais e onze centavos".

    Returns None for inf/nan.
    """
    cents = _to_cents(value)
    if cents is None:
        return None
    if cents == 0:
        return "zero real"

    reais, centavos = divmod(abs(cents), 100)
    parts = []
    if reais > 0:
        if reais == 1:
            unit = "real"
        elif reais >= 1_000_000:
            unit = "de reais"
        else:
            unit = "reais"
        parts.append(f"{number_to_words(reais)} {unit}")
    if centavos > 0:
        unit = "centavo" if centavos == 1 else "centavos"
        parts.append(f"{number_to_words(centavos)} {unit}")

    text = " e ".join(parts)
    return f"menos {text}" if cents < 0 else text


format_currency = format
