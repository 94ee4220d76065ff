"""Record base classes (capability markers) and example records."""

from settings_manager.application.models.records import (
    Config,
    ConfigT,
    DefaultFeature,
    Feature,
    FeatureT,
    Record,
    Setting,
    SettingT,
    key_of,
)

__all__ = [
    "Record",
    "Setting",
    "Config",
    "Feature",
    "DefaultFeature",
    "SettingT",
    "ConfigT",
    "FeatureT",
    "key_of",
]
