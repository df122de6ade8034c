# brazilian_utils/config.py
#
# Library settings loaded from environment variables.
#
# Only the postal-code client and the logger read these settings; the
# validators are pure functions of their arguments.
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

VIACEP_DEFAULT_URL = "https://viacep.com.br/ws"


@dataclass(frozen=True)
class Settings:
    """Immutable library configuration.

    Invariants:
      - viacep_base_url has no trailing slash.
      - http_timeout is a positive number of seconds.
    """

    viacep_base_url: str
    http_timeout: float
    verbose: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    timeout = float(os.environ.get("BRAZILIAN_UTILS_HTTP_TIMEOUT", "10"))
    if timeout <= 0:
        raise ValueError(
            f"BRAZILIAN_UTILS_HTTP_TIMEOUT must be positive, got {timeout}"
        )
    return Settings(
        viacep_base_url=os.environ.get(
            "BRAZILIAN_UTILS_VIACEP_URL", VIACEP_DEFAULT_URL
        ).rstrip("/"),
        http_timeout=timeout,
        verbose=os.environ.get("BRAZILIAN_UTILS_VERBOSE", "false").lower() == "true",
    )
