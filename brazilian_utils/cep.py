# brazilian_utils/cep.py
#
# CEP (Codigo de Enderecamento Postal): 8 digits, displayed XXXXX-XXX.
# Also the optional ViaCEP lookups (CEP -> address, address -> CEPs).
#
# Design decisions:
#   - Lookups use httpx with the timeout and base URL from config.Settings.
#     Callers may pass their own httpx.Client (connection reuse, tests with
#     httpx.MockTransport); otherwise a short-lived client is opened per call.
#   - Every failure maps to one of two outcomes: None when
#     raise_exceptions=False, or InvalidCEP / CEPNotFound (plus ValueError
#     for an unknown UF) when raise_exceptions=True.
#
# Invariants:
#   - is_valid accepts only the 8-digit cleaned form.
#   - No HTTP request is made for a syntactically invalid CEP or UF.
from __future__ import annotations

import unicodedata
from typing import Any

import httpx
from pydantic import BaseModel

from brazilian_utils._digits import is_digit_string, random_digits
from brazilian_utils.config import get_settings
from brazilian_utils.errors import CEPNotFound, InvalidCEP
from brazilian_utils.log import log
from brazilian_utils.uf import is_valid_uf

SIZE = 8

_SYMBOLS = ".-"


class Address(BaseModel):
    cep: str
    logradouro: str
    complemento: str
    bairro: str
    localidade: str
    uf: str
    ibge: str
    gia: str = ""
    ddd: str
    siafi: str


def clean(dirty: str) -> str:
    """Remove dots and dashes."""
    return dirty.translate(str.maketrans("", "", _SYMBOLS))


def is_valid(cep: str) -> bool:
    """True iff *cep* is exactly 8 ASCII digits."""
    return is_digit_string(cep, SIZE)


def format(cep: str) -> str | None:
    """XXXXX-XXX, or None when *cep* is not valid."""
    if not is_valid(cep):
        return None
    return f"{cep[:5]}-{cep[5:]}"


def generate() -> str:
    return random_digits(SIZE)


def _normalize(text: str) -> str:
    """Strip diacritics and percent-encode spaces for a ViaCEP path segment."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.replace(" ", "%20")


def _get_json(url: str, client: httpx.Client | None) -> Any:
    """GET *url* and decode the JSON body; raises httpx.HTTPError or ValueError."""
    if client is not None:
        response = client.get(url)
        response.raise_for_status()
        return response.json()
    with httpx.Client(timeout=get_settings().http_timeout) as own_client:
        response = own_client.get(url)
        response.raise_for_status()
        return response.json()


def get_address_from_cep(
    cep: str,
    raise_exceptions: bool = False,
    client: httpx.Client | None = None,
) -> Address | None:
    """Look up the address of a CEP on ViaCEP.

    Args:
        cep:              CEP, raw or punctuated.
        raise_exceptions: Raise instead of returning None on failure.
        client:           Optional httpx.Client to send the request with.

    Returns:
        The Address, or None when the CEP is invalid, unknown or the request
        failed (and *raise_exceptions* is False).

    Raises:
        InvalidCEP:  the CEP is not 8 digits after cleaning.
        CEPNotFound: ViaCEP answered {"erro": true}, or the request failed.
    """
    cleaned = clean(cep)
    if not is_valid(cleaned):
        log(f"cep: invalid CEP {cep!r}")
        if raise_exceptions:
            raise InvalidCEP(cep)
        return None

    url = f"{get_settings().viacep_base_url}/{cleaned}/json/"
    log(f"cep: GET {url}")
    try:
        payload = _get_json(url, client)
        if not isinstance(payload, dict) or "erro" in payload:
            log(f"cep: {cleaned} not found")
            raise CEPNotFound(cep)
        return Address.model_validate(payload)
    except (httpx.HTTPError, ValueError) as exc:
        log(f"cep: lookup of {cleaned} failed: {exc}")
        if raise_exceptions:
            raise CEPNotFound(cep) from exc
        return None
    except CEPNotFound:
        if raise_exceptions:
            raise
        return None


def get_cep_information_from_address(
    federal_unit: str,
    city: str,
    street: str,
    raise_exceptions: bool = False,
    client: httpx.Client | None = None,
) -> list[Address] | None:
    """Search ViaCEP for the CEPs of a street.

    City and street are stripped of accents before the request. An empty
    result counts as not found.

    Raises:
        ValueError:  *federal_unit* is not one of the 27 UFs.
        CEPNotFound: no address matched, or the request failed.
    """
    if not is_valid_uf(federal_unit):
        log(f"cep: invalid UF {federal_unit!r}")
        if raise_exceptions:
            raise ValueError(f"Invalid UF: {federal_unit}")
        return None

    query = f"{federal_unit} - {city} - {street}"
    url = (
        f"{get_settings().viacep_base_url}/{federal_unit.upper()}/"
        f"{_normalize(city)}/{_normalize(street)}/json/"
    )
    log(f"cep: GET {url}")
    try:
        payload = _get_json(url, client)
        if not isinstance(payload, list) or not payload:
            log(f"cep: no address for {query}")
            raise CEPNotFound(query)
        return [Address.model_validate(item) for item in payload]
    except (httpx.HTTPError, ValueError) as exc:
        log(f"cep: search for {query} failed: {exc}")
        if raise_exceptions:
            raise CEPNotFound(query) from exc
        return None
    except CEPNotFound:
        if raise_exceptions:
            raise
        return None


remove_symbols = clean
format_cep = format
