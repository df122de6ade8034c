# tests/domain/test_boleto.py
from __future__ import annotations

from brazilian_utils import boleto

LINE = "00190000090114971860168524522114675860000102656"


def _replace(line: str, index: int, digit: str) -> str:
    return line[:index] + digit + line[index + 1:]


def test_linha_digitavel_valida() -> None:
    assert boleto.is_valid(LINE)
    assert boleto.validate(LINE)


def test_pontuacao_e_espacos_sao_ignorados() -> None:
    assert boleto.is_valid("00190.00009 01149.718601 68524.522114 6 75860000102656")


def test_falha_no_mod10() -> None:
    """Index 9 is the check digit of the first field."""
    assert not boleto.is_valid(_replace(LINE, 9, "2"))


def test_falha_no_mod11() -> None:
    """Index 33 belongs to the barcode tail, only the general digit catches it."""
    assert not boleto.is_valid(_replace(LINE, 33, "9"))


def test_comprimento() -> None:
    assert not boleto.is_valid(LINE[:-1])
    assert not boleto.is_valid(LINE + "0")
    assert not boleto.is_valid("")


def test_mod10_dos_campos() -> None:
    assert boleto.mod10("001900000") == 9
    assert boleto.mod10("0114971860") == 1
    assert boleto.mod10("6852452211") == 4


def test_to_barcode() -> None:
    barcode = boleto.to_barcode(LINE)
    assert barcode == "00196758600001026560000001149718606852452211"
    assert len(barcode) == boleto.BARCODE_LENGTH
    assert boleto.to_barcode(LINE[:-1]) is None


def test_mod11_do_codigo_de_barras() -> None:
    barcode = boleto.to_barcode(LINE)
    assert boleto.mod11(barcode[:4] + barcode[5:]) == int(barcode[4])


def test_clean() -> None:
    assert boleto.clean("00190.00009 01149") == "001900000901149"
