# brazilian_utils/errors.py
#
# Failure kinds raised by the postal-code client when the caller asks for
# exceptions instead of None.
from __future__ import annotations


class InvalidCEP(ValueError):
    """The CEP is not 8 digits after removing punctuation."""

    def __init__(self, cep: str) -> None:
        self.cep = cep
        super().__init__(f"CEP '{cep}' is invalid.")


class CEPNotFound(LookupError):
    """ViaCEP answered with an error marker or could not be reached."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(query)
