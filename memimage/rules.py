"""
Validation rules for scalar fields.

A Rule pairs a numeric code with a predicate and a message factory.
Applying a rule to a value either returns silently or raises a
ValidationError carrying the rule's code and a message built from
the rejected value.

Rules are pure: the same value against the same rule always yields
the same outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sized

from .domain_types import ErrorMessage
from .errors import ValidationError


Predicate = Callable[[Any], bool]
MessageFactory = Callable[[Any], ErrorMessage]


@dataclass(frozen=True)
class Rule:
    """
    A single coded check on a field value.

    Attributes:
        code: Stable numeric identifier, suitable for localization lookup
        predicate: Returns True when the value is acceptable
        message: Builds a human-readable message from the rejected value
    """
    code: int
    predicate: Predicate
    message: MessageFactory

    def __post_init__(self):
        if not isinstance(self.code, int) or isinstance(self.code, bool):
            raise TypeError(f"Rule code must be an int, got {type(self.code).__name__}")
        if not callable(self.predicate):
            raise TypeError(f"Rule {self.code}: predicate must be callable")
        if not callable(self.message):
            raise TypeError(f"Rule {self.code}: message must be callable")

    def check(self, value: Any) -> bool:
        """Evaluate the predicate without raising."""
        return bool(self.predicate(value))

    def apply(self, value: Any) -> None:
        """
        Validate value against this rule.

        Raises:
            ValidationError: If the predicate rejects the value
        """
        if not self.check(value):
            raise ValidationError(self.code, self.message(value))


# =============================================================================
# PREDICATE FACTORIES
# =============================================================================

def non_empty() -> Callable[[Sized], bool]:
    """Predicate accepting any value with a non-zero length."""
    def predicate(value: Sized) -> bool:
        return len(value) > 0
    return predicate


def length_range(min_length: int, max_length: int) -> Callable[[Sized], bool]:
    """
    Predicate accepting values whose length is within
    [min_length, max_length], both ends inclusive.
    """
    if min_length < 0 or max_length < 0:
        raise ValueError(
            f"Length bounds must be non-negative, got [{min_length}, {max_length}]"
        )
    if min_length > max_length:
        raise ValueError(
            f"min_length {min_length} is greater than max_length {max_length}"
        )

    def predicate(value: Sized) -> bool:
        return min_length <= len(value) <= max_length
    return predicate
