"""Domain errors raised at the persistence and access boundaries."""

from uuid import UUID


class EntryNotFoundError(LookupError):
    """Raised when an operation targets an entry id that is not live."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Entry with id {entry_id} not found")
        self.entry_id = entry_id


class StoreUnavailableError(RuntimeError):
    """Raised when the entry store cannot be reached or rejects a request."""


class InvalidPasscodeError(Exception):
    """Raised when a supplied passcode does not match the stored one."""


class PasscodeChangeError(ValueError):
    """Raised when a new passcode fails validation."""
