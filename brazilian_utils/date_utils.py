# brazilian_utils/date_utils.py
#
# Dates in Portuguese words and the Brazilian holiday calendar.
#
# Design decisions:
#   - Holidays are data: each rule is a frozen object that resolves to the
#     date it falls on in a given year, or None when it does not apply that
#     year. is_holiday and list_holidays share the same rule tables.
#   - State holidays only exist from 1996 on (Lei 9.093/1995).
#   - Easter uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher).
#
# Invariants:
#   - is_holiday returns None only for an unknown UF; otherwise True/False.
#   - Rule tables are module-level tuples of frozen dataclasses.
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from types import MappingProxyType

from brazilian_utils.currency import number_to_words
from brazilian_utils.uf import UFS

STATE_HOLIDAYS_SINCE = 1996

NATIONAL = "national"

MONTHS = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

_DATE_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")


def convert_date_to_text(value: str) -> str | None:
    """"01/01/2024" -> "Primeiro de janeiro de dois mil e vinte e quatro".

    Returns None unless *value* is a real calendar date written dd/mm/yyyy.
    """
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        return None
    day, month, year = (int(group) for group in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return None

    if day == 1:
        day_text = "Primeiro"
    else:
        words = number_to_words(day)
        day_text = words[0].upper() + words[1:]
    return f"{day_text} de {MONTHS[month - 1]} de {number_to_words(year)}"


def calculate_easter(year: int) -> date:
    """Easter Sunday of *year* (Gregorian calendar)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    el = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * el) // 451
    month, day = divmod(h + el - 7 * m + 114, 31)
    return date(year, month, day + 1)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    """Common year window of every holiday rule (bounds inclusive)."""

    name: str
    since: int | None = None
    until: int | None = None
    excluded: frozenset[int] = field(default_factory=frozenset)

    def applies(self, year: int) -> bool:
        if self.since is not None and year < self.since:
            return False
        if self.until is not None and year > self.until:
            return False
        return year not in self.excluded

    def resolve(self, year: int) -> date | None:
        if not self.applies(year):
            return None
        return self._date(year)

    def _date(self, year: int) -> date | None:
        raise NotImplementedError


@dataclass(frozen=True)
class FixedDate(Rule):
    month: int = 1
    day: int = 1

    def _date(self, year: int) -> date:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class FirstSundayFrom(Rule):
    """The first Sunday on or after month/day, if it is still in that month."""

    month: int = 1
    day: int = 1

    def _date(self, year: int) -> date | None:
        start = date(year, self.month, self.day)
        sunday = start + timedelta(days=(6 - start.weekday()) % 7)
        return sunday if sunday.month == self.month else None


@dataclass(frozen=True)
class EasterOffset(Rule):
    days: int = 0

    def _date(self, year: int) -> date:
        return calculate_easter(year) + timedelta(days=self.days)


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
    scope: str


NATIONAL_RULES: tuple[Rule, ...] = (
    FixedDate("Confraternização Universal", month=1, day=1),
    FixedDate("Tiradentes", month=4, day=21, excluded=frozenset({1931, 1932})),
    FixedDate("Dia do Trabalho", since=1925, month=5, day=1),
    FixedDate("Independência do Brasil", since=1890, month=9, day=7),
    FixedDate("Nossa Senhora Aparecida", until=1930, month=10, day=12),
    FixedDate("Nossa Senhora Aparecida", since=1980, month=10, day=12),
    FixedDate("Finados", month=11, day=2),
    FixedDate("Proclamação da República", month=11, day=15),
    FixedDate("Natal", since=1922, month=12, day=25),
    EasterOffset("Sexta-feira Santa", days=-2),
)

_BLACK_AWARENESS = "Dia da Consciência Negra"
_EVANGELICAL = "Dia do Evangélico"

STATE_RULES = MappingProxyType({
    "AC": (
        FixedDate(_EVANGELICAL, since=2005, month=1, day=23),
        FixedDate("Dia Internacional da Mulher", since=2002, month=3, day=8),
        FixedDate("Aniversário do Acre", month=6, day=15),
        FixedDate("Dia da Amazônia", since=2004, month=9, day=5),
        FixedDate("Assinatura do Tratado de Petrópolis", month=11, day=17),
    ),
    "AL": (
        FixedDate("São João", month=6, day=24),
        FixedDate("São Pedro", month=6, day=29),
        FixedDate("Emancipação Política de Alagoas", month=9, day=16),
        FixedDate(_BLACK_AWARENESS, month=11, day=20),
        FixedDate(_EVANGELICAL, since=2013, month=11, day=30),
    ),
    "AM": (
        FixedDate("Elevação do Amazonas à categoria de província", month=9, day=5),
        FixedDate(_BLACK_AWARENESS, since=2010, month=11, day=20),
    ),
    "AP": (
        FixedDate("São José", since=2003, month=3, day=19),
        FixedDate("São Tiago", since=2012, month=7, day=25),
        FixedDate("Criação do Território Federal", month=9, day=13),
        FixedDate(_BLACK_AWARENESS, since=2008, month=11, day=20),
    ),
    "BA": (
        FixedDate("Independência da Bahia", month=7, day=2),
    ),
    "CE": (
        FixedDate("São José", month=3, day=19),
        FixedDate("Abolição da escravidão no Ceará", month=3, day=25),
        FixedDate("Nossa Senhora da Assunção", since=2004, month=8, day=15),
    ),
    "DF": (
        FixedDate("Fundação de Brasília", month=4, day=21),
        FixedDate(_EVANGELICAL, month=11, day=30),
    ),
    "ES": (
        EasterOffset("Nossa Senhora da Penha", since=2020, days=8),
    ),
    "GO": (
        FixedDate("Fundação da Cidade de Goiás", month=7, day=26),
        FixedDate("Fundação de Goiânia", month=10, day=24),
    ),
    "MA": (
        FixedDate("Adesão do Maranhão à independência", month=7, day=28),
    ),
    "MG": (
        FixedDate("Execução de Tiradentes", month=4, day=21),
    ),
    "MS": (
        FixedDate("Criação do Estado", month=10, day=11),
    ),
    "MT": (
        FixedDate(_BLACK_AWARENESS, since=2003, month=11, day=20),
    ),
    "PA": (
        FixedDate("Adesão do Grão-Pará à independência", month=8, day=15),
    ),
    "PB": (
        FixedDate("Fundação do Estado", month=8, day=5),
    ),
    "PE": (
        FirstSundayFrom("Revolução Pernambucana", since=2008, month=3, day=1),
    ),
    "PI": (
        FixedDate("Dia do Piauí", month=10, day=19),
    ),
    "PR": (
        FixedDate("Emancipação do Paraná", month=12, day=19),
    ),
    "RJ": (
        FixedDate("São Jorge", since=2008, month=4, day=23),
        FixedDate(_BLACK_AWARENESS, since=2002, month=11, day=20),
    ),
    "RN": (
        FixedDate("Dia do Rio Grande do Norte", since=2000, month=8, day=7),
        FixedDate("Mártires de Cunhaú e Uruaçu", since=2007, month=10, day=3),
    ),
    "RO": (
        FixedDate("Criação do Estado", month=1, day=4),
        FixedDate(_EVANGELICAL, since=2002, month=6, day=18),
    ),
    "RR": (
        FixedDate("Criação do Estado", month=10, day=5),
    ),
    "RS": (
        FixedDate("Revolução Farroupilha", month=9, day=20),
    ),
    "SC": (
        FixedDate("Dia de Santa Catarina", since=2004, until=2004, month=8, day=11),
        FirstSundayFrom("Dia de Santa Catarina", since=2005, month=8, day=11),
        FixedDate("Santa Catarina de Alexandria", until=1998, month=11, day=25),
        FixedDate("Santa Catarina de Alexandria", since=2004, until=2004, month=11, day=25),
        FixedDate("Santa Catarina de Alexandria", since=2031, month=11, day=25),
        FirstSundayFrom(
            "Santa Catarina de Alexandria",
            since=1999,
            until=2030,
            excluded=frozenset({2004}),
            month=11,
            day=25,
        ),
    ),
    "SE": (
        FixedDate("Emancipação Política de Sergipe", month=7, day=8),
    ),
    "SP": (
        FixedDate("Revolução Constitucionalista", since=1997, month=7, day=9),
    ),
    "TO": (
        FixedDate("Autonomia do Estado", since=1998, month=3, day=18),
        FixedDate("Nossa Senhora da Natividade", month=9, day=8),
        FixedDate("Criação do Estado", month=10, day=5),
    ),
})


def _normalize_uf(uf: str | None) -> str | None:
    """Uppercase *uf*; "ba" and "BA" name the same state, unlike a strict abbreviation lookup."""
    return None if uf is None else uf.upper()


def _rules_for(year: int, uf: str | None) -> list[tuple[Rule, str]]:
    rules = [(rule, NATIONAL) for rule in NATIONAL_RULES]
    if uf is not None and year >= STATE_HOLIDAYS_SINCE:
        rules.extend((rule, uf) for rule in STATE_RULES[uf])
    return rules


def is_holiday(target: date, uf: str | None = None) -> bool | None:
    """True when *target* is a national holiday, or a holiday of *uf*.

    Args:
        target: The day to check (a datetime is reduced to its date).
        uf:     Optional state abbreviation. Matching is case-insensitive, a
                deliberate loosening: "ba" is accepted as Bahia.

    Returns:
        True/False, or None when *uf* is not one of the 27 states.
    """
    uf = _normalize_uf(uf)
    if uf is not None and uf not in UFS:
        return None
    if isinstance(target, datetime):
        target = target.date()
    return any(
        rule.resolve(target.year) == target
        for rule, _scope in _rules_for(target.year, uf)
    )


def list_holidays(year: int, uf: str | None = None) -> list[Holiday] | None:
    """Every holiday of *year* (national, plus *uf*'s), sorted by date.

    Returns None when *uf* is not one of the 27 states.
    """
    uf = _normalize_uf(uf)
    if uf is not None and uf not in UFS:
        return None
    holidays = []
    for rule, scope in _rules_for(year, uf):
        day = rule.resolve(year)
        if day is not None:
            holidays.append(Holiday(date=day, name=rule.name, scope=scope))
    return sorted(holidays, key=lambda holiday: (holiday.date, holiday.scope != NATIONAL))
