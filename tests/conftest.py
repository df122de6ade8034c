# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest

from brazilian_utils.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Every test starts from default settings, whatever the local .env says."""
    for name in (
        "BRAZILIAN_UTILS_VIACEP_URL",
        "BRAZILIAN_UTILS_HTTP_TIMEOUT",
        "BRAZILIAN_UTILS_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
