# src/kastenator/exceptions.py
"""Exceptions raised by Kastenator."""


class KastenatorError(Exception):
    """Base class for Kastenator errors."""


class NoActiveSession(KastenatorError):
    """Raised when a session-scoped operation runs without a live session."""

    def __init__(self, message: str = "No active session") -> None:
        super().__init__(message)


class ProviderUnavailable(KastenatorError):
    """Raised when the configured text-generation provider cannot be used."""


class ProviderError(KastenatorError):
    """Raised when a text-generation provider call fails."""


class StorageFailure(KastenatorError):
    """Raised when reading, creating or modifying a note fails."""


class MaterialisationError(StorageFailure):
    """Raised when atom creation aborts part-way through a batch.

    Attributes:
        created: Paths of atoms written before the failure.
        candidate_id: Id of the candidate whose atom could not be written.
    """

    def __init__(self, message: str, created: list[str], candidate_id: str) -> None:
        super().__init__(message)
        self.created = created
        self.candidate_id = candidate_id
