# brazilian_utils/value_objects.py
#
# Typed, immutable wrappers over the identifier modules, for callers that want
# an invalid identifier to be unrepresentable instead of passing booleans and
# bare strings around.
#
# Design decisions:
#   - Each class binds one identifier module; cleaning, validation, display
#     and generation all go through that module, so the rules have a single
#     home.
#   - parse() is the non-raising factory (None on invalid input), matching
#     the absent-value convention of the module functions; the constructor
#     raises ValueError.
#
# Invariants:
#   - The stored value is always the module's cleaned form and is valid.
#   - Equality and hashing are by (class, value).
#   - A full CPF never appears in repr() or str(); only cpf.mask() does.
from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import ClassVar

from brazilian_utils import cep, cnh, cnpj, cpf, legal_process, pis, renavam, voter_id


@dataclass(frozen=True, init=False)
class Identifier:
    module: ClassVar[ModuleType]
    label: ClassVar[str]

    value: str

    def __init__(self, raw: str) -> None:
        cleaned = self.module.clean(raw.strip())
        if not cleaned:
            raise ValueError(f"{self.label} inválido: valor vazio")
        if not self.module.is_valid(cleaned):
            raise ValueError(f"{self.label} inválido: formato ou dígito verificador incorreto")
        object.__setattr__(self, "value", cleaned)

    @classmethod
    def parse(cls, raw: str):
        """Instance for *raw*, or None when it is not valid."""
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def generate(cls):
        return cls(cls.module.generate())

    @property
    def formatted(self) -> str:
        """Display form; types without punctuation return the digits."""
        format_ = getattr(self.module, "format", None)
        return self.value if format_ is None else format_(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.formatted!r})"

    def __str__(self) -> str:
        return self.formatted


class CPF(Identifier):
    module = cpf
    label = "CPF"

    @property
    def masked(self) -> str:
        """***.XXX.XXX-**, safe for logs."""
        return cpf.mask(self.value)

    def __repr__(self) -> str:
        return f"CPF({self.masked!r})"

    def __str__(self) -> str:
        return self.masked


class CNPJ(Identifier):
    module = cnpj
    label = "CNPJ"

    @classmethod
    def generate(cls, branch: int | None = 1) -> CNPJ:
        return cls(cnpj.generate(branch))

    @property
    def root(self) -> str:
        """First 8 digits, shared by every establishment of the company."""
        return self.value[:8]

    @property
    def branch(self) -> str:
        # 0001 is the head office
        return self.value[8:12]

    @property
    def is_head_office(self) -> bool:
        return self.branch == "0001"


class CEP(Identifier):
    module = cep
    label = "CEP"


class PIS(Identifier):
    module = pis
    label = "PIS"


class CNH(Identifier):
    module = cnh
    label = "CNH"


class RENAVAM(Identifier):
    module = renavam
    label = "RENAVAM"


class VoterID(Identifier):
    module = voter_id
    label = "Título de eleitor"

    @classmethod
    def generate(cls, federative_union: str = "ZZ") -> VoterID | None:
        raw = voter_id.generate(federative_union)
        return None if raw is None else cls(raw)

    @property
    def uf_code(self) -> str:
        """Two-digit state code (01 SP ... 27 TO, 28 abroad)."""
        return self.value[-4:-2]


class LegalProcess(Identifier):
    module = legal_process
    label = "Processo"

    @classmethod
    def generate(cls, year: int | None = None, orgao: int | None = None) -> LegalProcess | None:
        raw = legal_process.generate(year, orgao)
        return None if raw is None else cls(raw)

    def fields(self) -> legal_process.LegalProcess:
        return legal_process.parse(self.value)
