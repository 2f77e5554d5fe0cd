"""Tests for the passcode gate."""

import pytest

from coffee_tracker.adapters.memory_entry_repository import InMemorySettingRepository
from coffee_tracker.domain.errors import InvalidPasscodeError, PasscodeChangeError
from coffee_tracker.services.passcode import (
    PASSCODE_SETTING_KEY,
    PasscodeService,
    passcode_matches,
)


def test_passcode_matches_is_plain_equality() -> None:
    assert passcode_matches("coffee123", "coffee123")
    assert not passcode_matches("Coffee123", "coffee123")
    assert not passcode_matches(None, "coffee123")


def test_ensure_default_only_when_absent() -> None:
    repository = InMemorySettingRepository()
    service = PasscodeService(repository)

    service.ensure_default()
    assert repository.values[PASSCODE_SETTING_KEY] == "coffee123"

    repository.values[PASSCODE_SETTING_KEY] = "brew42"
    service.ensure_default()
    assert repository.values[PASSCODE_SETTING_KEY] == "brew42"


def test_check_falls_back_to_default_when_unset() -> None:
    service = PasscodeService(InMemorySettingRepository())

    assert service.check("coffee123")
    assert not service.check("nope")


def test_change_replaces_old_passcode() -> None:
    service = PasscodeService(InMemorySettingRepository())
    service.ensure_default()

    service.change("brew42", "brew42")

    assert service.check("brew42")
    assert not service.check("coffee123")


def test_require_raises_on_mismatch() -> None:
    service = PasscodeService(InMemorySettingRepository())

    service.require("coffee123")
    with pytest.raises(InvalidPasscodeError):
        service.require("wrong")


@pytest.mark.parametrize(
    ("new", "confirm", "message"),
    [
        ("", "", "empty"),
        ("brew42", "brew43", "do not match"),
        ("abc", "abc", "at least 4"),
    ],
)
def test_change_validation(new: str, confirm: str, message: str) -> None:
    repository = InMemorySettingRepository()
    service = PasscodeService(repository)

    with pytest.raises(PasscodeChangeError, match=message):
        service.change(new, confirm)

    assert PASSCODE_SETTING_KEY not in repository.values
