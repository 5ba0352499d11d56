"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the record type, the registration outcome and the
interfaces (ports) that the domain requires from infrastructure.
Adapters implement these protocols.
"""

from collections.abc import Iterator, Mapping
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

# Fixed column order of a persisted record
RECORD_FIELDS = ("id", "name", "company_name", "email", "password")


@dataclass(frozen=True)
class Record:
    """One persisted registration entry."""

    id: int
    name: str
    company_name: str
    email: str
    password: str

    def as_row(self) -> tuple[str, ...]:
        """Field values as strings, in RECORD_FIELDS order."""
        return tuple(str(getattr(self, field)) for field in RECORD_FIELDS)


class OutcomeStatus(str, Enum):
    """
    Terminal states of a registration attempt.

    ACCEPTED: record inserted and durably written
    REJECTED_VALIDATION: a rule failed, storage was not touched
    REJECTED_DUPLICATE: email already present, storage was not mutated
    """

    ACCEPTED = "accepted"
    REJECTED_VALIDATION = "rejected_validation"
    REJECTED_DUPLICATE = "rejected_duplicate"


@dataclass(frozen=True)
class RegistrationOutcome:
    """Result of RegistrationService.register()."""

    status: OutcomeStatus
    record: Record | None = None
    failed_fields: tuple[str, ...] = ()

    @classmethod
    def accepted(cls, record: Record) -> "RegistrationOutcome":
        return cls(status=OutcomeStatus.ACCEPTED, record=record)

    @classmethod
    def rejected_validation(cls, fields: tuple[str, ...]) -> "RegistrationOutcome":
        return cls(status=OutcomeStatus.REJECTED_VALIDATION, failed_fields=tuple(fields))

    @classmethod
    def rejected_duplicate(cls) -> "RegistrationOutcome":
        return cls(status=OutcomeStatus.REJECTED_DUPLICATE)


class RecordStore(Protocol):
    """Port interface for record persistence."""

    def load(self) -> None:
        """
        Hydrate the in-memory sequence from persistent storage.

        A missing or unreadable backing file leaves the store empty.
        """
        ...

    def find_by_field(self, field_name: str, value: str) -> Record | None:
        """
        Return the earliest inserted record whose field equals value.

        Args:
            field_name: One of RECORD_FIELDS
            value: Exact string to compare against

        Returns:
            Matching Record, or None if no record matches
        """
        ...

    def insert(self, name: str, company_name: str, email: str, password: str) -> Record:
        """
        Append a record with the next sequential id and persist the store.

        Returns:
            The newly stored Record

        Raises:
            StorageWriteFailure: If the backing file could not be rewritten
        """
        ...

    def locked(self) -> AbstractContextManager[None]:
        """Hold the store's writer lock for a read-check-write sequence."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Record]: ...


class AuditLog(Protocol):
    """Port interface for the append-only audit trail."""

    def record(self, event: Mapping[str, Any]) -> None:
        """
        Append a structured event to the audit trail.

        Must not raise; failures are reported through logging only.
        """
        ...
