"""
Tests for rules and domain errors.

These tests verify that:
1. A rule passes silently or raises with its own code
2. Messages are built from the rejected value
3. Predicate factories enforce their bounds
4. domain_catch turns domain errors into values
"""

import pytest

from memimage.errors import DomainError, Outcome, ValidationError, domain_catch
from memimage.rules import Rule, length_range, non_empty


# =============================================================================
# RULE TESTS
# =============================================================================

class TestRule:
    """Test applying a single rule."""

    def test_accepting_rule_returns_none(self):
        """A rule whose predicate accepts the value has no effect."""
        rule = Rule(42, lambda v: v > 0, lambda v: f"{v} is not positive")
        assert rule.apply(5) is None

    def test_rejecting_rule_raises_with_code(self):
        """A rejected value raises ValidationError carrying the rule code."""
        rule = Rule(42, lambda v: v > 0, lambda v: f"{v} is not positive")

        with pytest.raises(ValidationError) as exc_info:
            rule.apply(-3)

        assert exc_info.value.code == 42
        assert exc_info.value.message == "-3 is not positive"

    def test_message_is_only_built_on_failure(self):
        """The message factory is not called for accepted values."""
        calls = []
        rule = Rule(1, lambda v: True, lambda v: calls.append(v) or "unused")
        rule.apply("anything")
        assert calls == []

    def test_check_does_not_raise(self):
        """check() reports the predicate result without raising."""
        rule = Rule(7, lambda v: v == "ok", lambda v: "not ok")
        assert rule.check("ok") is True
        assert rule.check("nope") is False

    def test_rule_is_immutable(self):
        """Rules cannot be modified once constructed."""
        rule = Rule(7, lambda v: True, lambda v: "")
        with pytest.raises(AttributeError):
            rule.code = 8

    def test_rule_requires_int_code(self):
        """Codes must be integers."""
        with pytest.raises(TypeError):
            Rule("1000", lambda v: True, lambda v: "")

    def test_rule_requires_callables(self):
        """Predicate and message must be callable."""
        with pytest.raises(TypeError):
            Rule(1000, True, lambda v: "")
        with pytest.raises(TypeError):
            Rule(1000, lambda v: True, "message")

    def test_same_value_same_outcome(self):
        """Rules are deterministic."""
        rule = Rule(3, lambda v: len(v) < 3, lambda v: "too long")
        for _ in range(3):
            with pytest.raises(ValidationError):
                rule.apply("abcd")
            rule.apply("ab")


# =============================================================================
# PREDICATE FACTORY TESTS
# =============================================================================

class TestPredicates:
    """Test the reusable predicate factories."""

    def test_non_empty(self):
        predicate = non_empty()
        assert predicate("a")
        assert not predicate("")
        assert not predicate([])

    def test_length_range_is_inclusive(self):
        """Both bounds are inclusive."""
        predicate = length_range(4, 32)
        assert predicate("a" * 4)
        assert predicate("z" * 32)
        assert not predicate("abc")
        assert not predicate("n" * 33)

    def test_length_range_rejects_inverted_bounds(self):
        with pytest.raises(ValueError, match="greater than"):
            length_range(10, 2)

    def test_length_range_rejects_negative_bounds(self):
        with pytest.raises(ValueError, match="non-negative"):
            length_range(-1, 2)


# =============================================================================
# ERROR TESTS
# =============================================================================

class TestErrors:
    """Test the structure of domain errors."""

    def test_str_pads_code(self):
        """String form is the zero-padded code followed by the message."""
        error = ValidationError(1000, "Bank name cannot be blank")
        assert str(error) == "01000: Bank name cannot be blank"

    def test_validation_error_is_domain_error(self):
        assert issubclass(ValidationError, DomainError)

    def test_code_and_message_are_separate(self):
        error = ValidationError(1001, "free text 1000")
        assert error.code == 1001
        assert error.message == "free text 1000"


class TestDomainCatch:
    """Test the error-as-value adapter."""

    def test_success_wraps_value(self):
        outcome = domain_catch(lambda x: x * 2, 21)
        assert outcome.ok
        assert outcome.value == 42
        assert outcome.unwrap() == 42

    def test_domain_error_is_captured(self):
        rule = Rule(5, lambda v: False, lambda v: "always fails")
        outcome = domain_catch(rule.apply, "x")

        assert not outcome.ok
        assert outcome.error.code == 5
        with pytest.raises(ValidationError):
            outcome.unwrap()

    def test_other_errors_propagate(self):
        """Programming errors are not turned into values."""
        def broken():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            domain_catch(broken)

    def test_outcome_cannot_hold_value_and_error(self):
        with pytest.raises(ValueError, match="not both"):
            Outcome(value=1, error=ValidationError(1, "nope"))

    def test_none_result_is_ok(self):
        outcome = domain_catch(lambda: None)
        assert outcome == Outcome()
        assert outcome.ok
