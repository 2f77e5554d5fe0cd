"""Shared passcode gate for write and admin actions."""

import logging
from dataclasses import dataclass

from coffee_tracker.domain.errors import InvalidPasscodeError, PasscodeChangeError
from coffee_tracker.services.entries import SettingRepository

PASSCODE_SETTING_KEY = "admin_passcode"
MIN_PASSCODE_LENGTH = 4

_logger = logging.getLogger(__name__)


def passcode_matches(candidate: str | None, expected: str) -> bool:
    """Return True when the candidate equals the expected passcode."""
    return candidate is not None and candidate == expected


@dataclass
class PasscodeService:
    """Checks and rotates the passcode stored as a setting."""

    repository: SettingRepository
    default_passcode: str = "coffee123"

    def ensure_default(self) -> None:
        """Store the default passcode when none has been set."""
        if self.repository.get_setting(PASSCODE_SETTING_KEY) is None:
            self.repository.set_setting(PASSCODE_SETTING_KEY, self.default_passcode)
            _logger.info("Initialized default passcode")

    def current(self) -> str:
        """Return the stored passcode, or the default when unset."""
        stored = self.repository.get_setting(PASSCODE_SETTING_KEY)
        return stored if stored is not None else self.default_passcode

    def check(self, candidate: str | None) -> bool:
        """Return True when the candidate passcode is accepted."""
        return passcode_matches(candidate, self.current())

    def require(self, candidate: str | None) -> None:
        """Raise InvalidPasscodeError unless the candidate is accepted."""
        if not self.check(candidate):
            raise InvalidPasscodeError("Invalid passcode")

    def change(self, new_passcode: str, confirm_passcode: str) -> None:
        """Validate and store a new passcode."""
        if not new_passcode:
            raise PasscodeChangeError("Passcode cannot be empty")
        if new_passcode != confirm_passcode:
            raise PasscodeChangeError("Passcodes do not match")
        if len(new_passcode) < MIN_PASSCODE_LENGTH:
            raise PasscodeChangeError(
                f"Passcode must be at least {MIN_PASSCODE_LENGTH} characters"
            )
        self.repository.set_setting(PASSCODE_SETTING_KEY, new_passcode)
        _logger.info("Passcode updated")
