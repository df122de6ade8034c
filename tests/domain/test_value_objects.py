# tests/domain/test_value_objects.py
import dataclasses

import pytest

from brazilian_utils import cnh, cpf
from brazilian_utils.value_objects import (
    CEP,
    CNH,
    CNPJ,
    CPF,
    PIS,
    RENAVAM,
    LegalProcess,
    VoterID,
)


def test_cpf_guarda_forma_limpa() -> None:
    assert CPF("111.444.777-35").value == "11144477735"
    assert CPF(" 11144477735 ").formatted == "111.444.777-35"


def test_cpf_invalido_levanta_value_error() -> None:
    with pytest.raises(ValueError, match="CPF inválido"):
        CPF("111.444.777-00")
    with pytest.raises(ValueError, match="vazio"):
        CPF("...-")


def test_cpf_nunca_aparece_completo_em_repr_ou_str() -> None:
    value = CPF("11144477735")
    assert "11144477735" not in repr(value)
    assert repr(value) == "CPF('***.444.777-**')"
    assert str(value) == value.masked == cpf.mask("11144477735")


def test_igualdade_e_hash_por_valor() -> None:
    a = CPF("11144477735")
    b = CPF("111.444.777-35")
    assert a == b
    assert hash(a) == hash(b)
    assert a != CPF("52998224725")
    assert len({a, b}) == 1


def test_tipos_diferentes_nunca_sao_iguais() -> None:
    # same 11 digits, different identifier types
    assert PIS("12056412545") != CNH("98765432100")


def test_imutavel() -> None:
    value = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.value = "33000167000101"  # type: ignore[misc]


def test_cnpj_raiz_e_filial() -> None:
    value = CNPJ("11.222.333/0001-81")
    assert value.root == "11222333"
    assert value.branch == "0001"
    assert value.is_head_office
    assert str(value) == "11.222.333/0001-81"
    assert repr(value) == "CNPJ('11.222.333/0001-81')"


@pytest.mark.parametrize(
    "cls, raw",
    [
        (CPF, "123"),
        (CNPJ, "11.222.333/0001-99"),
        (CEP, "1234-567"),
        (PIS, "12056412546"),
        (CNH, "09770304735"),
        (RENAVAM, "63954195344"),
        (VoterID, "123456780192"),
        (LegalProcess, "6439067-89.2023.4.04.5902"),
    ],
)
def test_parse_devolve_none_quando_invalido(cls, raw) -> None:
    assert cls.parse(raw) is None
    with pytest.raises(ValueError):
        cls(raw)


@pytest.mark.parametrize("cls", [CPF, CNPJ, CEP, PIS, CNH, RENAVAM, VoterID, LegalProcess])
def test_generate_produz_instancia_valida(cls) -> None:
    value = cls.generate()
    assert isinstance(value, cls)
    assert cls.module.is_valid(value.value)
    assert cls.parse(value.value) == value


def test_formatted_sem_pontuacao_devolve_digitos() -> None:
    assert not hasattr(cnh, "format")
    assert CNH("097.703.047-34").formatted == "09770304734"
    assert RENAVAM("63954195343").formatted == "63954195343"


def test_cep_formatado() -> None:
    assert CEP("01310-200").value == "01310200"
    assert CEP("01310200").formatted == "01310-200"


def test_cnpj_generate_com_filial() -> None:
    assert CNPJ.generate(branch=7).branch == "0007"


def test_titulo_de_eleitor_uf() -> None:
    assert VoterID("123456780191").uf_code == "01"
    assert VoterID.generate("SP").uf_code == "01"
    assert VoterID.generate("XX") is None


def test_processo_expoe_campos() -> None:
    value = LegalProcess("6439067-88.2023.4.04.5902")
    fields = value.fields()
    assert fields.year == 2023
    assert fields.segment == "Justiça Federal"
    assert LegalProcess.generate(orgao=10) is None
