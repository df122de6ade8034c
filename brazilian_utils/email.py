# brazilian_utils/email.py
#
# Pragmatic e-mail address check: a regular expression for the overall shape
# plus the dot rules the expression alone lets through.
#
# Invariants:
#   - The top-level domain is two or more ASCII letters; numeric TLDs fail.
#   - Local part characters are limited to letters, digits and . _ % + -
from __future__ import annotations

import re

_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid(email: str) -> bool:
    if not email or email.startswith(".") or ".." in email:
        return False
    if email.count("@") != 1:
        return False
    local, domain = email.split("@")
    if local.endswith(".") or domain.startswith("."):
        return False
    return _PATTERN.fullmatch(email) is not None
