# brazilian_utils/frames.py
#
# Batch cleaning, validation and formatting of identifier columns in Polars
# DataFrames.
#
# Design decisions:
#   - map_elements is used instead of native Polars expressions because the
#     check-digit rules live in the Python modules; one element at a time keeps
#     a single source of truth.
#   - Identifier kinds are looked up in an explicit registry of modules, so an
#     unknown kind or an operation the kind lacks fails fast with ValueError.
#
# Invariants:
#   - No function mutates the input DataFrame.
#   - Nulls stay null; they are never passed to a validator.
from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType, ModuleType

import polars as pl

from brazilian_utils import (
    boleto,
    cep,
    cnh,
    cnpj,
    cpf,
    email,
    legal_nature,
    legal_process,
    license_plate,
    phone,
    pis,
    renavam,
    voter_id,
)
from brazilian_utils.log import log

KINDS: MappingProxyType[str, ModuleType] = MappingProxyType({
    "boleto": boleto,
    "cep": cep,
    "cnh": cnh,
    "cnpj": cnpj,
    "cpf": cpf,
    "email": email,
    "legal_nature": legal_nature,
    "legal_process": legal_process,
    "license_plate": license_plate,
    "phone": phone,
    "pis": pis,
    "renavam": renavam,
    "voter_id": voter_id,
})


def _operation(kind: str, name: str) -> Callable:
    module = KINDS.get(kind)
    if module is None:
        raise ValueError(f"unknown identifier kind {kind!r}; expected one of {sorted(KINDS)}")
    func = getattr(module, name, None)
    if func is None:
        raise ValueError(f"identifier kind {kind!r} has no {name}()")
    return func


def _map(df: pl.DataFrame, column: str, func: Callable, dtype: pl.DataType) -> pl.Series:
    return df[column].map_elements(
        lambda v: func(v) if v is not None else None,
        return_dtype=dtype,
        skip_nulls=True,
    )


def validate_column(
    df: pl.DataFrame, column: str, kind: str, alias: str | None = None
) -> pl.DataFrame:
    """Add a boolean column telling whether each value of *column* is a valid *kind*.

    Args:
        df:     Input DataFrame containing *column* (strings).
        column: Name of the column to check.
        kind:   Identifier kind, a key of KINDS ("cpf", "cnpj", ...).
        alias:  Name of the new column; defaults to ``<column>_valid``.

    Returns:
        New DataFrame with the extra column. Null inputs give null.
    """
    is_valid = _operation(kind, "is_valid")
    series = _map(df, column, is_valid, pl.Boolean).alias(alias or f"{column}_valid")
    return df.with_columns(series)


def clean_column(df: pl.DataFrame, column: str, kind: str) -> pl.DataFrame:
    """Replace *column* with its values passed through the kind's clean()."""
    clean = _operation(kind, "clean")
    return df.with_columns(_map(df, column, clean, pl.Utf8).alias(column))


def format_column(
    df: pl.DataFrame, column: str, kind: str, alias: str | None = None
) -> pl.DataFrame:
    """Add ``<column>_formatted`` (or *alias*) with the display form; invalid values give null."""
    format_ = _operation(kind, "format")
    series = _map(df, column, format_, pl.Utf8).alias(alias or f"{column}_formatted")
    return df.with_columns(series)


def filter_valid(df: pl.DataFrame, column: str, kind: str) -> pl.DataFrame:
    """Keep only the rows whose *column* is a valid *kind*; nulls are dropped."""
    is_valid = _operation(kind, "is_valid")
    mask = _map(df, column, is_valid, pl.Boolean).fill_null(False)
    result = df.filter(mask)
    dropped = len(df) - len(result)
    if dropped:
        log(f"frames: {dropped} of {len(df)} rows dropped, invalid {kind} in {column!r}")
    return result
