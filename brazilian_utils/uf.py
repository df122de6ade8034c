# brazilian_utils/uf.py
#
# Federative units (UF): the 27 state abbreviations and the numeric codes the
# electoral courts use in voter registrations.
from __future__ import annotations

from types import MappingProxyType

UFS: frozenset[str] = frozenset({
    "AC", "AL", "AM", "AP", "BA", "CE", "DF", "ES", "GO", "MA",
    "MG", "MS", "MT", "PA", "PB", "PE", "PI", "PR", "RJ", "RN",
    "RO", "RR", "RS", "SC", "SE", "SP", "TO",
})

# ZZ is used for voters registered abroad.
VOTER_UF_CODES = MappingProxyType({
    "SP": "01",
    "MG": "02",
    "RJ": "03",
    "RS": "04",
    "BA": "05",
    "PR": "06",
    "CE": "07",
    "PE": "08",
    "SC": "09",
    "GO": "10",
    "MA": "11",
    "PB": "12",
    "PA": "13",
    "ES": "14",
    "PI": "15",
    "RN": "16",
    "AL": "17",
    "MT": "18",
    "MS": "19",
    "DF": "20",
    "SE": "21",
    "AM": "22",
    "RO": "23",
    "AC": "24",
    "AP": "25",
    "RR": "26",
    "TO": "27",
    "ZZ": "28",
})


def is_valid_uf(uf: str) -> bool:
    """True iff *uf* is one of the 27 state abbreviations (case-insensitive)."""
    return uf.upper() in UFS
