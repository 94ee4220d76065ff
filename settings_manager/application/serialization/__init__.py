"""Structured encoding: serializer options and the encrypted-field codec."""

from settings_manager.application.serialization.encrypted_property import (
    CodecContext,
    EncryptedProperty,
    FieldCodec,
    codec_context,
    has_encrypted_fields,
)
from settings_manager.application.serialization.options import SerializerOptions

__all__ = [
    "CodecContext",
    "EncryptedProperty",
    "FieldCodec",
    "SerializerOptions",
    "codec_context",
    "has_encrypted_fields",
]
