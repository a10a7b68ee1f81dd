"""
Validated scalar fields.

A Scalar holds one value of an entity field and guarantees that the
stored value is always normalized and always satisfies every rule
registered for it. Scalars are configured once through a builder:

    name = (
        string("  ACME   Bank ")
        .normalize_with(normalize_space)
        .non_empty(1000, lambda v: "Name cannot be blank")
        .length_range(1001, 4, 32, lambda v: f"Bad length {len(v)}")
        .build()
    )

Every write, including the initial one performed by build(), runs
the same sequence:

    1. normalize the raw value (exactly once)
    2. apply every rule, in registration order, to the normalized value
    3. stop at the first failing rule and raise its ValidationError
    4. otherwise commit the normalized value

A failed write leaves the stored value untouched. A failed build()
creates no Scalar at all.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

from .normalize import identity
from .rules import MessageFactory, Predicate, Rule
from . import rules as predicates

T = TypeVar("T")
B = TypeVar("B", bound="ScalarBuilder")


class Scalar(Generic[T]):
    """
    A value holder whose rules and normalizer are fixed at creation.

    Scalar.builder() (or string() for text fields) is the usual way in.
    The constructor runs the same normalize-then-validate sequence as
    set(), so a Scalar never holds a value its rules reject.

    Raises:
        ValidationError: If the normalized initial value breaks a rule
    """

    __slots__ = ("_value", "_normalizer", "_rules")

    def __init__(
        self,
        value: T,
        normalizer: Callable[[T], T] = identity,
        rules: Iterable[Rule] = (),
    ):
        if not callable(normalizer):
            raise TypeError("normalizer must be callable")
        frozen = tuple(rules)
        self._value = _normalize_and_check(value, normalizer, frozen)
        self._normalizer = normalizer
        self._rules = frozen

    @staticmethod
    def builder(initial_value: T) -> "ScalarBuilder[T]":
        """Start configuring a Scalar for initial_value."""
        return ScalarBuilder(initial_value)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Registered rules, in evaluation order."""
        return self._rules

    @property
    def normalizer(self) -> Callable[[T], T]:
        return self._normalizer

    def get(self) -> T:
        """Return the stored value. Reads never re-validate."""
        return self._value

    def validate(self, value: T) -> T:
        """
        Normalize value and run every rule against it without storing.

        Returns:
            The normalized value

        Raises:
            ValidationError: From the first rule that rejects the value
        """
        return _normalize_and_check(value, self._normalizer, self._rules)

    def set(self, value: T) -> None:
        """
        Replace the stored value with normalized(value).

        Raises:
            ValidationError: If any rule rejects the value. The stored
                value is left unchanged.
        """
        self._value = self.validate(value)

    def swap(self, value: T) -> T:
        """Validated write that returns the previous value."""
        previous = self._value
        self.set(value)
        return previous

    def __repr__(self) -> str:
        codes = ", ".join(str(rule.code) for rule in self._rules)
        return f"Scalar({self._value!r}, rules=[{codes}])"


def _normalize_and_check(
    value: T,
    normalizer: Callable[[T], T],
    rules: tuple[Rule, ...],
) -> T:
    normalized = normalizer(value)
    for rule in rules:
        rule.apply(normalized)
    return normalized


# =============================================================================
# BUILDERS
# =============================================================================

class ScalarBuilder(Generic[T]):
    """
    One-shot configuration for a Scalar.

    Register a normalizer (last call wins) and any number of rules in
    the order they should run, then call build(). A builder can be
    built only once.
    """

    def __init__(self, initial_value: T):
        self._initial_value = initial_value
        self._normalizer: Callable[[T], T] = identity
        self._rules: list[Rule] = []
        self._built = False

    def normalize_with(self: B, normalizer: Callable[[T], T]) -> B:
        """Set the normalization applied before every validation."""
        if not callable(normalizer):
            raise TypeError("normalizer must be callable")
        self._ensure_open()
        self._normalizer = normalizer
        return self

    def rule(
        self: B,
        code: int,
        predicate: Predicate,
        message: MessageFactory,
    ) -> B:
        """Append a rule. Rules run in the order they are registered."""
        self._ensure_open()
        self._rules.append(Rule(code, predicate, message))
        return self

    def build(self) -> Scalar[T]:
        """
        Normalize and validate the initial value, then create the Scalar.

        Raises:
            ValidationError: From the first rule that rejects the
                normalized initial value. No Scalar is created.
            RuntimeError: If this builder was already built
        """
        self._ensure_open()
        scalar = Scalar(self._initial_value, self._normalizer, self._rules)
        self._built = True
        return scalar

    def _ensure_open(self) -> None:
        if self._built:
            raise RuntimeError("Scalar configuration is closed once build() has run")


class StringScalarBuilder(ScalarBuilder[str]):
    """ScalarBuilder with shorthand registrations for text rules."""

    def non_empty(self: B, code: int, message: MessageFactory) -> B:
        self.rule(code, predicates.non_empty(), message)
        return self

    def length_range(
        self: B,
        code: int,
        min_length: int,
        max_length: int,
        message: MessageFactory,
    ) -> B:
        self.rule(code, predicates.length_range(min_length, max_length), message)
        return self


def string(initial_value: str) -> StringScalarBuilder:
    """Start configuring a text Scalar."""
    return StringScalarBuilder(initial_value)
