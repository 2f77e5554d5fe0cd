"""Pydantic models for API request payloads."""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CoffeeSizeLabel = Literal["Small", "Medium", "Large", "Extra Large"]


class EntryCreate(BaseModel):
    """Payload for logging a drink."""

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date
    time: dt.time
    type: str = Field(min_length=1)
    size: CoffeeSizeLabel
    brewing_method: str = Field(alias="brewingMethod", min_length=1)
    notes: str | None = None


class EntryPatch(BaseModel):
    """Partial update for an entry; omitted fields are left untouched."""

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date | None = None
    time: dt.time | None = None
    type: str | None = Field(default=None, min_length=1)
    size: CoffeeSizeLabel | None = None
    brewing_method: str | None = Field(
        default=None, alias="brewingMethod", min_length=1
    )
    caffeine: int | None = Field(default=None, ge=0)
    notes: str | None = None

    def changes(self) -> dict[str, object]:
        """Return supplied fields keyed by domain field name."""
        supplied = self.model_dump(exclude_unset=True)
        return {
            name: value
            for name, value in supplied.items()
            if value is not None or name == "notes"
        }


class PasscodeCheck(BaseModel):
    """Passcode submitted for verification."""

    passcode: str


class PasscodeUpdate(BaseModel):
    """New passcode with its confirmation."""

    model_config = ConfigDict(populate_by_name=True)

    new_passcode: str = Field(alias="newPasscode")
    confirm_passcode: str = Field(alias="confirmPasscode")
