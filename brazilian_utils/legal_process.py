# brazilian_utils/legal_process.py
#
# CNJ unified legal-process number: NNNNNNN-DD.AAAA.J.TR.OOOO
#   NNNNNNN  sequential number
#   DD       mod-97 check digits
#   AAAA     filing year
#   J        justice segment (orgao, 1..9)
#   TR       tribunal
#   OOOO     originating forum (foro)
#
# Design decisions:
#   - The admissible (tribunal, foro) sets per segment ship as package data
#     (data/legal_process_ids.json) and are loaded once, then exposed as
#     frozensets.
#   - The check digits are computed with Python integers over the full 18-digit
#     base; no modular tricks are needed.
#
# Invariants:
#   - format() succeeds iff is_valid() holds.
#   - generate() never yields a year earlier than the current one.
from __future__ import annotations

import json
import random
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from brazilian_utils._digits import is_digit_string, random_digits

SIZE = 20

_DATA_FILE = Path(__file__).parent / "data" / "legal_process_ids.json"
_SYMBOLS = ".-"

SEGMENTS = MappingProxyType({
    1: "Supremo Tribunal Federal",
    2: "Conselho Nacional de Justiça",
    3: "Superior Tribunal de Justiça",
    4: "Justiça Federal",
    5: "Justiça do Trabalho",
    6: "Justiça Eleitoral",
    7: "Justiça Militar da União",
    8: "Justiça dos Estados e do Distrito Federal",
    9: "Justiça Militar Estadual",
})


@dataclass(frozen=True)
class OrgaoIds:
    """Admissible tribunal and foro identifiers of one justice segment."""

    tribunals: frozenset[int]
    foros: frozenset[int]


@dataclass(frozen=True)
class LegalProcess:
    """The fields of a valid CNJ number."""

    sequential: str
    check_digits: str
    year: int
    orgao: int
    tribunal: str
    foro: str
    segment: str


@lru_cache(maxsize=1)
def reference_table() -> MappingProxyType:
    """Segment number -> OrgaoIds, read once from the packaged JSON."""
    raw = json.loads(_DATA_FILE.read_text(encoding="utf-8"))
    table = {
        int(key.removeprefix("orgao_")): OrgaoIds(
            tribunals=frozenset(entry["id_tribunal"]),
            foros=frozenset(entry["id_foro"]),
        )
        for key, entry in raw.items()
    }
    return MappingProxyType(table)


def clean(dirty: str) -> str:
    """Remove dots and dashes."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def checksum(basenum: int | str) -> str:
    """Two mod-97 check digits for the 18-digit base NNNNNNN AAAA J TR OOOO."""
    return f"{97 - (int(basenum) * 100) % 97:02d}"


def _split(legal_process_id: str) -> tuple[str, str, str, str, str, str]:
    return (
        legal_process_id[:7],
        legal_process_id[7:9],
        legal_process_id[9:13],
        legal_process_id[13],
        legal_process_id[14:16],
        legal_process_id[16:],
    )


def is_valid(legal_process_id: str) -> bool:
    """True iff the cleaned id has 20 digits, a known (segment, tribunal, foro) and matching check digits."""
    value = clean(legal_process_id)
    if not is_digit_string(value, SIZE):
        return False

    sequential, check_digits, year, orgao, tribunal, foro = _split(value)
    ids = reference_table().get(int(orgao))
    if ids is None:
        return False
    if int(tribunal) not in ids.tribunals or int(foro) not in ids.foros:
        return False
    return checksum(f"{sequential}{year}{orgao}{tribunal}{foro}") == check_digits


def format(legal_process_id: str) -> str | None:
    """NNNNNNN-DD.AAAA.J.TR.OOOO, or None when the id is not valid."""
    if not is_valid(legal_process_id):
        return None
    value = clean(legal_process_id)
    sequential, check_digits, year, orgao, tribunal, foro = _split(value)
    return f"{sequential}-{check_digits}.{year}.{orgao}.{tribunal}.{foro}"


def parse(legal_process_id: str) -> LegalProcess | None:
    """Break a valid CNJ number into its fields, or None when it is not valid."""
    if not is_valid(legal_process_id):
        return None
    sequential, check_digits, year, orgao, tribunal, foro = _split(clean(legal_process_id))
    return LegalProcess(
        sequential=sequential,
        check_digits=check_digits,
        year=int(year),
        orgao=int(orgao),
        tribunal=tribunal,
        foro=foro,
        segment=SEGMENTS[int(orgao)],
    )


def generate(year: int | None = None, orgao: int | None = None) -> str | None:
    """Random valid CNJ number in cleaned form.

    Args:
        year:  Filing year; defaults to the current year. Past years give None.
        orgao: Justice segment 1..9; defaults to a random one. Others give None.
    """
    current_year = date.today().year
    if year is None:
        year = current_year
    if year < current_year or year > 9999:
        return None
    if orgao is None:
        orgao = random.randint(1, 9)
    ids = reference_table().get(orgao)
    if ids is None:
        return None

    sequential = random_digits(7)
    tribunal = f"{random.choice(sorted(ids.tribunals)):02d}"
    foro = f"{random.choice(sorted(ids.foros)):04d}"
    check_digits = checksum(f"{sequential}{year}{orgao}{tribunal}{foro}")
    return f"{sequential}{check_digits}{year}{orgao}{tribunal}{foro}"


remove_symbols = clean
format_legal_process = format
