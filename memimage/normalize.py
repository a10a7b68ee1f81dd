"""
Normalizers applied to field values before validation and storage.

Every normalizer here is idempotent: f(f(x)) == f(x).
"""

from __future__ import annotations

import re
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE_RUN = re.compile(r"\s+")


def identity(value: T) -> T:
    """Default normalizer, returns the value untouched."""
    return value


def normalize_space(value: str) -> str:
    """
    Trim leading/trailing whitespace and collapse internal runs
    of whitespace (spaces, tabs, newlines) to a single space.

    Whitespace means Unicode whitespace, as for str.strip() and the
    re module: a no-break space (U+00A0) collapses like an ASCII space.

        >>> normalize_space("\\tACME\\t \\tBank ")
        'ACME Bank'
    """
    return _WHITESPACE_RUN.sub(" ", value.strip())
