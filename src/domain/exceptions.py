"""
Domain exceptions - Semantic error types for registration.

Validation failures and duplicate emails are expected outcomes and are
returned as RegistrationOutcome values. Only storage problems that must
stop the current request are raised.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class StorageError(RegistrationError):
    """Backing file could not be read or written."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class StorageReadFailure(StorageError):
    """Backing file exists but could not be read or decoded."""

    pass


class StorageWriteFailure(StorageError):
    """Backing file could not be rewritten; the insert is not durable."""

    pass
