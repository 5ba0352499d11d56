"""
Registration domain service - validation pipeline and duplicate check.

Per-request state machine (terminal on first failure)
=====================================================

    VALIDATING -> REJECTED_VALIDATION   (first failing rule, storage untouched)
    VALIDATING -> CHECKING_DUPLICATE    (all rules pass)
    CHECKING_DUPLICATE -> REJECTED_DUPLICATE   (email present, no mutation)
    CHECKING_DUPLICATE -> INSERTING -> ACCEPTED (record durably written)

The duplicate check and the insert run inside one critical section held
on the store, so two concurrent submissions of the same email cannot both
be accepted.

StorageWriteFailure is not an outcome: it propagates to the caller so an
insert that never reached disk is never reported as accepted.
"""

import base64
import hashlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass

import bcrypt

from .ports import RecordStore, RegistrationOutcome
from .validators import REGISTRATION_RULES, ValidationRule

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: rule-table validation,
    duplicate detection by email, password hashing and insert.
    """

    store: RecordStore
    rules: tuple[ValidationRule, ...] = REGISTRATION_RULES
    bcrypt_rounds: int = 10

    def register(self, submission: Mapping[str, str | None]) -> RegistrationOutcome:
        """
        Validate a submission and store it as a new record.

        Args:
            submission: Decoded fields keyed by name, company_name, email,
                password and password_confirmation. Missing keys read as "".

        Returns:
            RegistrationOutcome: accepted with the new record, rejected with
            the failing rule's fields, or rejected as a duplicate email

        Raises:
            StorageWriteFailure: If the new record could not be persisted
        """
        for rule in self.rules:
            values = tuple(self._field(submission, name) for name in rule.fields)
            if not rule.check(values):
                logger.info("Validation failed for fields: %s", ", ".join(rule.fields))
                return RegistrationOutcome.rejected_validation(rule.fields)

        email = self._field(submission, "email")

        with self.store.locked():
            if self.store.find_by_field("email", email) is not None:
                logger.info("Duplicate registration for email %s", email)
                return RegistrationOutcome.rejected_duplicate()

            record = self.store.insert(
                self._field(submission, "name"),
                self._field(submission, "company_name"),
                email,
                self._hash_password(self._field(submission, "password")),
            )

        logger.info("Registered email %s with id %d", record.email, record.id)
        return RegistrationOutcome.accepted(record)

    def _field(self, submission: Mapping[str, str | None], name: str) -> str:
        """Resolve one submitted field, treating missing values as empty."""
        value = submission.get(name)
        return value if isinstance(value, str) else ""

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        return bcrypt.hashpw(
            password_digest(password), bcrypt.gensalt(rounds=self.bcrypt_rounds)
        ).decode()


def password_digest(password: str) -> bytes:
    """
    Reduce a password to a fixed 44-byte value before bcrypt.

    bcrypt accepts at most 72 bytes of input. Verify stored hashes
    against this digest, not the raw password.
    """
    return base64.b64encode(hashlib.sha256(password.encode()).digest())
