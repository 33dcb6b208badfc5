"""
Request validation pipeline.

A rule is a pure function of (field name, field value) returning the
list of violation messages it finds. Routes bind an ordered sequence
of (field, rule) pairs; the pipeline runs every binding, without
short-circuiting, and collects the violations in binding order.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

Rule = Callable[[str, Any], list[str]]
RuleBinding = tuple[str, Rule]


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of running the pipeline: valid, or the full violation list."""

    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def invalid(cls, violations: Sequence[Violation]) -> "ValidationResult":
        return cls(violations=tuple(violations))


def validate(
    fields: Mapping[str, Any], rules: Sequence[RuleBinding]
) -> ValidationResult:
    """Run every rule against its field and collect all violations.

    Args:
        fields: Raw request fields (path parameters and body fields).
            A missing key is passed to the rule as None.
        rules: Ordered (field, rule) bindings for the matched route.

    Returns:
        ValidationResult.valid() when no rule produced a message,
        otherwise an invalid result listing every violation in order.
    """
    violations = [
        Violation(field=field, message=message)
        for field, rule in rules
        for message in rule(field, fields.get(field))
    ]
    if violations:
        return ValidationResult.invalid(violations)
    return ValidationResult.valid()
