# tests/domain/test_email.py
from __future__ import annotations

import pytest

from brazilian_utils import email


@pytest.mark.parametrize(
    "value",
    [
        "brutils@brutils.com",
        "joao.silva@empresa.com.br",
        "user+tag@example.org",
        "first_last%x@sub-domain.example.co",
    ],
)
def test_emails_validos(value: str) -> None:
    assert email.is_valid(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        ".brutils@brutils.com",
        "brutils.@brutils.com",
        "brutils@.brutils.com",
        "bru..tils@brutils.com",
        "brutils@brutils..com",
        "brutils@@brutils.com",
        "bru@tils@brutils.com",
        "brutils.com",
        "brutils@brutils",
        "brutils@brutils.c",
        "brutils@brutils.123",
        "bru#tils@brutils.com",
        "bru!tils@brutils.com",
        "bru tils@brutils.com",
    ],
)
def test_emails_invalidos(value: str) -> None:
    assert not email.is_valid(value)
