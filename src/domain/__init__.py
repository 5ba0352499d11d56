"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation pipeline and the registration
service. It defines its own port interfaces for storage and audit
logging, so adapters can be swapped without touching business rules.
"""

from .exceptions import (
    RegistrationError,
    StorageError,
    StorageReadFailure,
    StorageWriteFailure,
)
from .ports import (
    RECORD_FIELDS,
    AuditLog,
    OutcomeStatus,
    Record,
    RecordStore,
    RegistrationOutcome,
)
from .registration import RegistrationService
from .validators import (
    REGISTRATION_RULES,
    EmailValidator,
    LengthValidator,
    PasswordValidator,
    RuleKind,
    ValidationRule,
)

__all__ = [
    "AuditLog",
    "EmailValidator",
    "LengthValidator",
    "OutcomeStatus",
    "PasswordValidator",
    "RECORD_FIELDS",
    "REGISTRATION_RULES",
    "Record",
    "RecordStore",
    "RegistrationError",
    "RegistrationOutcome",
    "RegistrationService",
    "RuleKind",
    "StorageError",
    "StorageReadFailure",
    "StorageWriteFailure",
    "ValidationRule",
]
