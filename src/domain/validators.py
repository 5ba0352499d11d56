"""
Field validators and the declarative registration rule table.

Validators are pure predicates: check() never raises and treats a
missing value as an empty string.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 30


class Validator(Protocol):
    """A pure predicate over one field value or a field pair."""

    def check(self, value) -> bool: ...


@dataclass(frozen=True)
class LengthValidator:
    """True iff min_length <= len(value) <= max_length."""

    min_length: int = NAME_MIN_LENGTH
    max_length: int = NAME_MAX_LENGTH

    def check(self, value: str | None) -> bool:
        if not isinstance(value, str):
            value = ""
        return self.min_length <= len(value) <= self.max_length


@dataclass(frozen=True)
class EmailValidator:
    """
    True iff the value contains "@".

    Deliberately shallow: it only rejects values that cannot be an
    address at all.
    """

    def check(self, value: str | None) -> bool:
        return isinstance(value, str) and "@" in value


@dataclass(frozen=True)
class PasswordValidator:
    """Password length bounds plus exact equality with the confirmation."""

    min_length: int = PASSWORD_MIN_LENGTH
    max_length: int = PASSWORD_MAX_LENGTH

    def check(self, value: Sequence[str | None] | None) -> bool:
        if value is None or isinstance(value, str) or len(value) != 2:
            return False
        password, confirmation = (item if isinstance(item, str) else "" for item in value)
        length = LengthValidator(self.min_length, self.max_length)
        return length.check(password) and password == confirmation


class RuleKind(str, Enum):
    """Validator kinds available to the rule table."""

    LENGTH = "length"
    EMAIL = "email"
    PASSWORD_MATCH = "password_match"


@dataclass(frozen=True)
class ValidationRule:
    """
    One row of the rule table: a validator kind bound to its input field(s).

    PASSWORD_MATCH rules take exactly two fields (password, confirmation);
    every other kind takes one.
    """

    kind: RuleKind
    fields: tuple[str, ...]
    min_length: int = 0
    max_length: int = 0

    def build_validator(self) -> Validator:
        if self.kind is RuleKind.LENGTH:
            return LengthValidator(self.min_length, self.max_length)
        if self.kind is RuleKind.EMAIL:
            return EmailValidator()
        if self.kind is RuleKind.PASSWORD_MATCH:
            return PasswordValidator(self.min_length, self.max_length)
        raise ValueError(f"Unknown rule kind: {self.kind!r}")

    def check(self, values: tuple[str, ...]) -> bool:
        """Run the bound validator over values resolved for self.fields."""
        validator = self.build_validator()
        if self.kind is RuleKind.PASSWORD_MATCH:
            return validator.check(values)
        return validator.check(values[0] if values else "")


REGISTRATION_RULES: tuple[ValidationRule, ...] = (
    ValidationRule(RuleKind.LENGTH, ("name",), NAME_MIN_LENGTH, NAME_MAX_LENGTH),
    ValidationRule(RuleKind.LENGTH, ("company_name",), NAME_MIN_LENGTH, NAME_MAX_LENGTH),
    ValidationRule(RuleKind.EMAIL, ("email",)),
    ValidationRule(
        RuleKind.PASSWORD_MATCH,
        ("password", "password_confirmation"),
        PASSWORD_MIN_LENGTH,
        PASSWORD_MAX_LENGTH,
    ),
)
