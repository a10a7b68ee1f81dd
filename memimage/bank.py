"""
Bank — the example entity.

A Bank owns one validated field, its name. Clients read the name
through a read-only property and change it only through rename_to(),
which swaps in the new name and reports the old one. Any future
cross-entity invariant on names (global uniqueness, for instance)
belongs inside rename_to().

Name rules, applied in order after whitespace normalization:
    1000: name must not be blank
    1001: name length must be within [MIN_NAME_LENGTH, MAX_NAME_LENGTH]
"""

from __future__ import annotations

import logging
from typing import Optional

from .entity import Entity, IdAllocator
from .normalize import normalize_space
from .scalar import Scalar, StringScalarBuilder, string
from .domain_types import Name

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

MIN_NAME_LENGTH = 4
MAX_NAME_LENGTH = 32

# Rule codes (stable, used for message lookup by clients)
BLANK_NAME_CODE = 1000
NAME_LENGTH_CODE = 1001


def _blank_name_message(value: str) -> str:
    return "Bank name cannot be blank"


def _name_length_message(value: str) -> str:
    return (
        f"Invalid bank name length ({len(value)}), "
        f"must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH}"
    )


def name_field(initial_name: Name) -> StringScalarBuilder:
    """Builder for a bank name field, with every name rule registered."""
    return (
        string(initial_name)
        .normalize_with(normalize_space)
        .non_empty(BLANK_NAME_CODE, _blank_name_message)
        .length_range(
            NAME_LENGTH_CODE,
            MIN_NAME_LENGTH,
            MAX_NAME_LENGTH,
            _name_length_message,
        )
    )


# Human-readable summary of the name rules, keyed by code.
NAME_RULES = {
    BLANK_NAME_CODE: "name must not be blank",
    NAME_LENGTH_CODE: (
        f"name must be {MIN_NAME_LENGTH} to {MAX_NAME_LENGTH} characters long"
    ),
}


# =============================================================================
# BANK
# =============================================================================

class Bank(Entity):
    """
    A bank with a validated, whitespace-normalized name.

    Raises:
        ValidationError: On construction if the initial name breaks a rule
    """

    def __init__(self, initial_name: Name, *, allocator: Optional[IdAllocator] = None):
        # Validate before allocating so a rejected bank does not consume an id.
        self._name: Scalar[str] = name_field(initial_name).build()
        super().__init__(allocator=allocator)

    @property
    def name(self) -> Name:
        return self._name.get()

    def rename_to(self, new_name: Name) -> Name:
        """
        Rename the bank and return the previous name.

        Raises:
            ValidationError: If new_name breaks a rule. The name is unchanged.
        """
        old_name = self._name.swap(new_name)
        logger.debug("Bank %d renamed from %r to %r", self.id, old_name, self.name)
        return old_name

    def __repr__(self) -> str:
        return f"Bank(id={self.id}, name={self.name!r})"
