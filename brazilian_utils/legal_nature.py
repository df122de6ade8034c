# brazilian_utils/legal_nature.py
#
# Natureza Juridica: the 4-digit legal-nature codes of the Receita Federal
# (Tabela de Natureza Juridica 2021), keyed as "NNNN".
#
# Invariants:
#   - The shared table is read-only; list_all() hands out a fresh dict.
#   - Codes are accepted as "NNNN" or "NNN-N"; any input whose digits are
#     exactly four characters long normalises to those four digits.
from __future__ import annotations

from types import MappingProxyType

from brazilian_utils._digits import only_digits

# ---------------------------------------------------------------------------
# Code → description (first digit is the group)
# ---------------------------------------------------------------------------

LEGAL_NATURES = MappingProxyType({
    # 1 - Administração Pública
    "1015": "Órgão Público do Poder Executivo Federal",
    "1023": "Órgão Público do Poder Executivo Estadual ou do Distrito Federal",
    "1031": "Órgão Público do Poder Executivo Municipal",
    "1040": "Órgão Público do Poder Legislativo Federal",
    "1058": "Órgão Público do Poder Legislativo Estadual ou do Distrito Federal",
    "1066": "Órgão Público do Poder Legislativo Municipal",
    "1074": "Órgão Público do Poder Judiciário Federal",
    "1082": "Órgão Público do Poder Judiciário Estadual",
    "1104": "Autarquia Federal",
    "1112": "Autarquia Estadual ou do Distrito Federal",
    "1120": "Autarquia Municipal",
    "1139": "Fundação Federal",
    "1147": "Fundação Estadual ou do Distrito Federal",
    "1155": "Fundação Municipal",
    "1163": "Órgão Público Autônomo da União",
    "1171": "Órgão Público Autônomo Estadual ou do Distrito Federal",
    "1180": "Órgão Público Autônomo Municipal",
    # 2 - Entidades Empresariais
    "2011": "Empresa Pública",
    "2038": "Sociedade de Economia Mista",
    "2046": "Sociedade Anônima Aberta",
    "2054": "Sociedade Anônima Fechada",
    "2062": "Sociedade Empresária Limitada",
    "2070": "Sociedade Empresária em Nome Coletivo",
    "2089": "Sociedade Empresária em Comandita Simples",
    "2097": "Sociedade Empresária em Comandita por Ações",
    "2100": "Sociedade Mercantil de Capital e Indústria (extinta pelo NCC/2002)",
    "2127": "Sociedade Empresária em Conta de Participação",
    "2135": "Empresário (Individual)",
    "2143": "Cooperativa",
    "2151": "Consórcio de Sociedades",
    "2160": "Grupo de Sociedades",
    "2178": "Estabelecimento, no Brasil, de Sociedade Estrangeira",
    "2194": "Estabelecimento, no Brasil, de Empresa Binacional Argentino-Brasileira",
    "2208": "Entidade Binacional Itaipu",
    "2216": "Empresa Domiciliada no Exterior",
    "2224": "Clube/Fundo de Investimento",
    "2232": "Sociedade Simples Pura",
    "2240": "Sociedade Simples Limitada",
    "2259": "Sociedade em Nome Coletivo",
    "2267": "Sociedade em Comandita Simples",
    "2275": "Sociedade Simples em Conta de Participação",
    "2305": "Empresa Individual de Responsabilidade Limitada",
    # 3 - Entidades sem Fins Lucrativos
    "3034": "Serviço Notarial e Registral (Cartório)",
    "3042": "Organização Social",
    "3050": "Organização da Sociedade Civil de Interesse Público (Oscip)",
    "3069": "Outras Formas de Fundações Mantidas com Recursos Privados",
    "3077": "Serviço Social Autônomo",
    "3085": "Condomínio Edilícios",
    "3093": "Unidade Executora (Programa Dinheiro Direto na Escola)",
    "3107": "Comissão de Conciliação Prévia",
    "3115": "Entidade de Mediação e Arbitragem",
    "3123": "Partido Político",
    "3131": "Entidade Sindical",
    "3204": "Estabelecimento, no Brasil, de Fundação ou Associação Estrangeiras",
    "3212": "Fundação ou Associação Domiciliada no Exterior",
    "3999": "Outras Formas de Associação",
    # 4 - Pessoas Físicas
    "4014": "Empresa Individual Imobiliária",
    "4022": "Segurado Especial",
    "4081": "Contribuinte individual",
    # 5 - Organizações Internacionais e Outras Instituições Extraterritoriais
    "5002": "Organização Internacional e Outras Instituições Extraterritoriais",
})


def normalize(code: str) -> str | None:
    """Digits of *code* when there are exactly four of them, else None."""
    digits = only_digits(code)
    return digits if len(digits) == 4 else None


def is_valid(code: str) -> bool:
    """True iff *code* ("NNNN" or "NNN-N") is a known legal-nature code."""
    normalized = normalize(code)
    return normalized is not None and normalized in LEGAL_NATURES


def get_description(code: str) -> str | None:
    normalized = normalize(code)
    if normalized is None:
        return None
    return LEGAL_NATURES.get(normalized)


def list_all() -> dict[str, str]:
    """A fresh copy of the whole table; mutating it leaves the module untouched."""
    return dict(LEGAL_NATURES)
