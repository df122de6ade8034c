# tests/domain/test_date_utils.py
from __future__ import annotations

from datetime import date, datetime

import pytest

from brazilian_utils import date_utils
from brazilian_utils.uf import UFS


def test_convert_date_to_text() -> None:
    assert (
        date_utils.convert_date_to_text("01/01/2024")
        == "Primeiro de janeiro de dois mil e vinte e quatro"
    )
    assert date_utils.convert_date_to_text("15/03/1999") == (
        "Quinze de março de mil, novecentos e noventa e nove"
    )
    assert date_utils.convert_date_to_text("29/02/2024") == (
        "Vinte e nove de fevereiro de dois mil e vinte e quatro"
    )


@pytest.mark.parametrize(
    "value",
    ["29/02/2023", "31/04/2024", "00/01/2024", "1/1/2024", "2024-01-01", "01/13/2024", "", "aa/bb/cccc"],
)
def test_convert_date_to_text_invalida(value: str) -> None:
    assert date_utils.convert_date_to_text(value) is None


@pytest.mark.parametrize(
    ("year", "easter"),
    [(2023, date(2023, 4, 9)), (2024, date(2024, 3, 31)), (2025, date(2025, 4, 20)), (2000, date(2000, 4, 23))],
)
def test_calculate_easter(year: int, easter: date) -> None:
    assert date_utils.calculate_easter(year) == easter


def test_feriados_nacionais() -> None:
    assert date_utils.is_holiday(date(2024, 1, 1)) is True
    assert date_utils.is_holiday(date(2024, 1, 2)) is False
    assert date_utils.is_holiday(date(2024, 3, 29)) is True  # Sexta-feira Santa
    assert date_utils.is_holiday(date(2024, 12, 25)) is True


def test_limites_historicos_nacionais() -> None:
    assert date_utils.is_holiday(date(1931, 4, 21)) is False
    assert date_utils.is_holiday(date(1933, 4, 21)) is True
    assert date_utils.is_holiday(date(1924, 5, 1)) is False
    assert date_utils.is_holiday(date(1950, 10, 12)) is False
    assert date_utils.is_holiday(date(1930, 10, 12)) is True
    assert date_utils.is_holiday(date(1980, 10, 12)) is True
    assert date_utils.is_holiday(date(1921, 12, 25)) is False


def test_feriados_estaduais() -> None:
    assert date_utils.is_holiday(date(2024, 7, 2), "BA") is True
    assert date_utils.is_holiday(date(2024, 7, 2), "SP") is False
    assert date_utils.is_holiday(date(2024, 7, 9), "SP") is True
    assert date_utils.is_holiday(date(2024, 7, 9)) is False


def test_uf_case_insensitive() -> None:
    assert date_utils.is_holiday(date(2024, 7, 2), "ba") is True


def test_uf_desconhecida() -> None:
    assert date_utils.is_holiday(date(2024, 1, 1), "XX") is None
    assert date_utils.list_holidays(2024, "XX") is None


def test_feriados_estaduais_so_a_partir_de_1996() -> None:
    assert date_utils.is_holiday(date(1995, 7, 2), "BA") is False
    assert date_utils.is_holiday(date(1996, 7, 2), "BA") is True
    assert date_utils.is_holiday(date(1996, 7, 9), "SP") is False


def test_primeiro_domingo_de_marco_em_pernambuco() -> None:
    # 1 March 2024 is a Friday
    assert date_utils.is_holiday(date(2024, 3, 3), "PE") is True
    assert date_utils.is_holiday(date(2024, 3, 1), "PE") is False
    assert date_utils.is_holiday(date(2007, 3, 4), "PE") is False


def test_nossa_senhora_da_penha_no_espirito_santo() -> None:
    assert date_utils.is_holiday(date(2024, 4, 8), "ES") is True
    assert date_utils.is_holiday(date(2019, 4, 29), "ES") is False


def test_santa_catarina() -> None:
    assert date_utils.is_holiday(date(2004, 8, 11), "SC") is True
    # 11 August 2023 is a Friday; the state day moves to Sunday the 13th
    assert date_utils.is_holiday(date(2023, 8, 13), "SC") is True
    assert date_utils.is_holiday(date(2023, 8, 11), "SC") is False
    # 25 November 2018 is a Sunday
    assert date_utils.is_holiday(date(2018, 11, 25), "SC") is True
    assert date_utils.is_holiday(date(2004, 11, 25), "SC") is True
    assert date_utils.is_holiday(date(1998, 11, 25), "SC") is True


def test_santa_catarina_de_alexandria_nao_passa_para_dezembro() -> None:
    # 25 November 2023 is a Saturday; the moved Sunday is still in November
    assert date_utils.is_holiday(date(2023, 11, 26), "SC") is True
    # 25 November 2024 is a Monday; the next Sunday is 1 December, no holiday
    assert date_utils.is_holiday(date(2024, 12, 1), "SC") is False
    assert date_utils.is_holiday(date(2024, 11, 25), "SC") is False
    assert date_utils.is_holiday(date(2019, 12, 1), "SC") is False
    names = {holiday.name for holiday in date_utils.list_holidays(2024, "SC")}
    assert "Santa Catarina de Alexandria" not in names


def test_aceita_datetime() -> None:
    assert date_utils.is_holiday(datetime(2024, 7, 2, 15, 30), "BA") is True


@pytest.mark.parametrize("uf", sorted(UFS))
def test_todas_as_ufs_tem_regras(uf: str) -> None:
    assert date_utils.STATE_RULES[uf]
    assert date_utils.is_holiday(date(2024, 1, 1), uf) is True


def test_list_holidays_nacionais() -> None:
    holidays = date_utils.list_holidays(2024)
    assert [h.date for h in holidays] == [
        date(2024, 1, 1),
        date(2024, 3, 29),
        date(2024, 4, 21),
        date(2024, 5, 1),
        date(2024, 9, 7),
        date(2024, 10, 12),
        date(2024, 11, 2),
        date(2024, 11, 15),
        date(2024, 12, 25),
    ]
    assert all(h.scope == date_utils.NATIONAL for h in holidays)


def test_list_holidays_com_uf() -> None:
    holidays = date_utils.list_holidays(2024, "ba")
    bahia = [h for h in holidays if h.scope == "BA"]
    assert bahia == [date_utils.Holiday(date(2024, 7, 2), "Independência da Bahia", "BA")]


def test_list_holidays_concorda_com_is_holiday() -> None:
    for holiday in date_utils.list_holidays(2024, "SC"):
        assert date_utils.is_holiday(holiday.date, "SC") is True
