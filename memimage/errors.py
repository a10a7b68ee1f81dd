"""
Domain errors for memimage.

There is exactly one domain failure: a value violated a rule.
The numeric code identifies the violated rule and is stable across
releases; the message is free text and may embed the rejected value.

Callers that prefer values over exceptions can wrap a call with
domain_catch() and inspect the resulting Outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .domain_types import ErrorMessage


class DomainError(Exception):
    """Base class for errors raised by domain invariants."""

    def __init__(self, code: int, message: ErrorMessage):
        self.code = code
        self.message = message
        super().__init__(f"{code:05d}: {message}")


class ValidationError(DomainError):
    """Raised when a value fails one of the rules registered for a field."""
    pass


# =============================================================================
# ERROR-AS-VALUE
# =============================================================================

@dataclass(frozen=True)
class Outcome:
    """
    Result of a call wrapped by domain_catch().

    Exactly one of value/error is meaningful: a failed call carries
    the DomainError, a successful one carries whatever was returned
    (which may itself be None).
    """
    value: Any = None
    error: Optional[DomainError] = None

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("Outcome carries either a value or an error, not both")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


def domain_catch(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Call fn and capture a DomainError as an Outcome.

    Only domain errors are captured. Anything else (a TypeError from a
    misconfigured rule, say) is a programming error and propagates.
    """
    try:
        return Outcome(value=fn(*args, **kwargs))
    except DomainError as e:
        return Outcome(error=e)
