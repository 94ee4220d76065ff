"""Record capability markers: Setting, Config and Feature.

A record opts into service operations by subclassing one or more markers:

- Setting: per-tenant record with a required global default.
- Config: global-only record; never tenant-scoped.
- Feature: record with an is_enabled flag, checked per tenant.

A class may be both Setting and Feature (toggleable and parameterized; both
views share one stored record). A class must not be both Setting and
Config; that combination is rejected when the class is defined.
"""

from typing import Any, ClassVar, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from settings_manager.domain.exceptions import RecordKindConflictError


class Record(BaseModel):
    """Base for all stored records.

    Set ``settings_key`` on a class to pin its storage key (e.g. before
    moving it to another module). Without it the key is
    ``<module>.<qualname>``. Overrides are not inherited.
    """

    settings_key: ClassVar[str | None] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if cls.__module__ == __name__:
            return
        if issubclass(cls, Setting) and issubclass(cls, Config):
            raise RecordKindConflictError(cls)


class Setting(Record):
    """Tenant-overridable record; a global default must be provisioned."""


class Config(Record):
    """Application-wide record stored under the global tenant only."""


class Feature(Record):
    """Record that can be enabled or disabled per tenant."""

    is_enabled: bool = False


class DefaultFeature(Feature):
    """Minimal projection used for enabled checks; other fields are ignored."""

    is_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_enabled", "isEnabled", "IsEnabled"),
    )


SettingT = TypeVar("SettingT", bound=Setting)
ConfigT = TypeVar("ConfigT", bound=Config)
FeatureT = TypeVar("FeatureT", bound=Feature)
RecordT = TypeVar("RecordT", bound=Record)


def key_of(record_type: type[Record]) -> str:
    """Return the storage key for a record type.

    Deterministic across processes and machines: the class's own
    settings_key if set, otherwise its module-qualified name.
    """
    override = vars(record_type).get("settings_key")
    if override:
        return override
    return f"{record_type.__module__}.{record_type.__qualname__}"
