# tests/domain/test_voter_id.py
from __future__ import annotations

import pytest

from brazilian_utils import voter_id
from brazilian_utils.uf import VOTER_UF_CODES


def test_is_valid() -> None:
    assert voter_id.is_valid("690847092828")
    assert voter_id.is_valid("163204010922")
    assert voter_id.validate("690847092828")


def test_digitos_errados() -> None:
    assert not voter_id.is_valid("690847092829")
    assert not voter_id.is_valid("690847092838")


def test_uf_fora_do_intervalo() -> None:
    assert not voter_id.is_valid("690847092928")
    assert not voter_id.is_valid("690847090028")


def test_treze_digitos_somente_sp_e_mg() -> None:
    """Old SP/MG registrations carry a 9-digit sequence."""
    assert voter_id.is_valid("1234567800191")
    assert voter_id.is_valid("123456780191")
    assert not voter_id.is_valid("6908470902828")


def test_comprimento_e_alfabeto() -> None:
    assert not voter_id.is_valid("69084709282")
    assert not voter_id.is_valid("69084709282a")
    assert not voter_id.is_valid("")


def test_calculate_vd() -> None:
    assert voter_id.calculate_vd1("69084709", "28") == 2
    assert voter_id.calculate_vd2("28", 2) == 8


def test_resto_zero_vira_um_em_sp_e_mg() -> None:
    # 00000000: sum 0 -> 1 for UF 01/02, 0 elsewhere
    assert voter_id.calculate_vd1("00000000", "01") == 1
    assert voter_id.calculate_vd1("00000000", "02") == 1
    assert voter_id.calculate_vd1("00000000", "03") == 0


def test_resto_dez_vira_zero() -> None:
    # 5 * 2 == 10
    assert voter_id.calculate_vd1("50000000", "05") == 0


def test_format() -> None:
    assert voter_id.format("690847092828") == "6908 4709 28 28"
    assert voter_id.format_voter_id("1234567800191") == "12345 6780 01 91"
    assert voter_id.format("690847092829") is None


def test_clean() -> None:
    assert voter_id.clean("6908 4709 28 28") == "690847092828"
    assert voter_id.clean("6908.4709-2828") == "690847092828"


@pytest.mark.parametrize("uf", sorted(VOTER_UF_CODES))
def test_generate_por_uf(uf: str) -> None:
    value = voter_id.generate(uf)
    assert voter_id.is_valid(value)
    assert value[-4:-2] == VOTER_UF_CODES[uf]
    assert voter_id.clean(voter_id.format(value)) == value


def test_generate_padrao_zz() -> None:
    value = voter_id.generate()
    assert value[-4:-2] == "28"
    assert voter_id.is_valid(value)


def test_generate_uf_minuscula() -> None:
    assert voter_id.generate("sp")[-4:-2] == "01"


def test_generate_uf_desconhecida() -> None:
    assert voter_id.generate("XX") is None
