"""Serializer options shared by the service and the field codec."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SerializerOptions:
    """How records are turned into stored JSON text and back.

    Attributes:
        by_alias: Write field aliases instead of attribute names.
        exclude_none: Omit fields whose value is None.
        strict: Validate stored payloads in pydantic strict mode.
    """

    by_alias: bool = False
    exclude_none: bool = False
    strict: bool = False

    def dump_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for BaseModel.model_dump."""
        return {"by_alias": self.by_alias, "exclude_none": self.exclude_none}

    def validate_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for BaseModel.model_validate."""
        return {"strict": self.strict}
