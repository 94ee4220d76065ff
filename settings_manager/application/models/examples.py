"""Example records showing encrypted fields, nested models and in-code defaults."""

from typing import Annotated

from pydantic import BaseModel, Field

from settings_manager.application.models.records import Setting
from settings_manager.application.serialization.encrypted_property import (
    EncryptedProperty,
)


class SettingsManagerEncryptedObjectExample(BaseModel):
    some_setting: str = "hi mom"


class SettingsManagerSettingExample(Setting):
    some_setting: str = "In-code setting default"
    some_setting_not_defaulted: str | None = None
    some_int: int | None = None
    some_encrypted_string: Annotated[str, EncryptedProperty()] = "is it secret? is it safe?"
    some_encrypted_object: Annotated[
        SettingsManagerEncryptedObjectExample, EncryptedProperty()
    ] = Field(default_factory=SettingsManagerEncryptedObjectExample)
