# tests/domain/test_cnh.py
from __future__ import annotations

import pytest

from brazilian_utils import cnh


def test_is_valid() -> None:
    assert cnh.is_valid("98765432100")
    assert cnh.is_valid("09770304734")
    assert cnh.is_valid_cnh("09770304734")
    assert cnh.validate("09770304734")


def test_is_valid_ignora_pontuacao() -> None:
    assert cnh.is_valid("097.703.047-34")
    assert cnh.is_valid("097 703 047 34")


def test_digito_errado() -> None:
    assert not cnh.is_valid("09770304735")
    assert not cnh.is_valid("09770304744")


@pytest.mark.parametrize("digit", "0123456789")
def test_todos_digitos_iguais_rejeitados(digit: str) -> None:
    assert not cnh.is_valid(digit * 11)


def test_comprimento() -> None:
    assert not cnh.is_valid("0977030473")
    assert not cnh.is_valid("097703047345")
    assert not cnh.is_valid("")


def test_letra_encurta_o_numero() -> None:
    assert not cnh.is_valid("0977030473a")


def test_primeiro_digito_acima_de_9_vira_zero() -> None:
    # 987654321: sum 285, 285 % 11 == 10 -> 0
    assert cnh.calculate_first_check_digit("987654321") == 0


def test_segundo_digito() -> None:
    assert cnh.calculate_first_check_digit("097703047") == 3
    assert cnh.calculate_second_check_digit("097703047", 3) == 4


def test_segundo_digito_deslocado_quando_primeiro_acima_de_9() -> None:
    # 987654321: weights 1..9 sum 165, 165 % 11 == 0; shifted by -2 wraps to 9
    assert cnh.calculate_second_check_digit("987654321", 0) == 0
    assert cnh.calculate_second_check_digit("987654321", 10) == 9


def test_clean() -> None:
    assert cnh.clean("(097).703-047 34") == "09770304734"
    assert cnh.remove_symbols("097.703.047-34") == "09770304734"


def test_generate() -> None:
    for _ in range(100):
        value = cnh.generate()
        assert len(value) == 11
        assert cnh.is_valid(value)
