"""Per-field encryption for records.

Some record fields are sensitive and must not be stored in plain text.
Annotate them with EncryptedProperty and the field is encrypted on its own,
independent of how the rest of the record is encoded:

    class SmtpSetting(Setting):
        host: str
        password: Annotated[str, EncryptedProperty()]

The encoded field is always a string. Text values are encrypted verbatim;
any other value is serialized to JSON first and validated from JSON on
the way back. The hook only fires when the pydantic context carries a
CodecContext (see codec_context); building a record in code or calling
model_dump() without it leaves the field as-is.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from functools import cached_property
from typing import Annotated, Any, Generic, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, GetCoreSchemaHandler, TypeAdapter, ValidationError
from pydantic_core import CoreSchema, core_schema, to_json

from settings_manager.application.interfaces.providers import CryptographyProvider
from settings_manager.core.constants import CODEC_CONTEXT_KEY
from settings_manager.domain.exceptions import CipherConfigurationError, DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class CodecContext:
    """Cipher handle passed to encrypted fields through pydantic context.

    strict is forwarded to the validation of decrypted values, so encrypted
    fields follow the same strictness as the rest of the record.
    """

    cryptography_provider: CryptographyProvider | None = None
    strict: bool | None = None

    def require_cipher(self) -> CryptographyProvider:
        """Return the cryptography provider or raise CipherConfigurationError."""
        if self.cryptography_provider is None:
            raise CipherConfigurationError()
        return self.cryptography_provider


def codec_context(
    cryptography_provider: CryptographyProvider | None,
    strict: bool | None = None,
) -> dict[str, Any]:
    """Build the pydantic context dict that activates encrypted fields."""
    return {CODEC_CONTEXT_KEY: CodecContext(cryptography_provider, strict)}


def _active_codec(context: Any) -> CodecContext | None:
    if isinstance(context, dict):
        codec = context.get(CODEC_CONTEXT_KEY)
        if isinstance(codec, CodecContext):
            return codec
    return None


def _is_text_type(tp: Any) -> bool:
    """True for str, Optional[str] and Annotated[str, ...]."""
    if tp is str:
        return True
    origin = get_origin(tp)
    if origin is Annotated:
        return _is_text_type(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(tp) if a is not type(None)]
        return len(args) == 1 and _is_text_type(args[0])
    return False


def _decrypt(cipher: CryptographyProvider, raw: Any) -> str:
    """Decrypt a stored field value. Raises DecodeError on bad input."""
    if not isinstance(raw, str):
        raise DecodeError(
            f"encrypted field must be stored as a string, got {type(raw).__name__}"
        )
    try:
        return cipher.decrypt_string(raw)
    except ValueError as e:
        raise DecodeError(f"failed to decrypt field: {e}") from e


class _PlaintextValidator:
    """Validates decrypted plaintext as the field's declared type.

    Non-text plaintext is JSON written by the serializer, so it is validated
    in JSON mode: ISO datetimes, UUID strings and the like are accepted even
    under strict validation.
    """

    def __init__(self, value_type: Any) -> None:
        self._value_type = value_type
        self.is_text = _is_text_type(value_type)

    @cached_property
    def adapter(self) -> TypeAdapter[Any]:
        # Built on first use; nested models are complete by then.
        return TypeAdapter(self._value_type)

    def validate(self, plaintext: str, context: Any, strict: bool | None) -> Any:
        try:
            if self.is_text:
                return self.adapter.validate_python(plaintext, strict=strict, context=context)
            return self.adapter.validate_json(plaintext, strict=strict, context=context)
        except ValidationError as e:
            if any(err["type"] == "json_invalid" for err in e.errors()):
                raise DecodeError(f"decrypted field is not valid JSON: {e}") from e
            raise DecodeError(f"decrypted field is not a valid value: {e}") from e


class EncryptedProperty:
    """Annotated marker that encrypts a single record field.

    Usage: ``Annotated[T, EncryptedProperty()]`` for any T pydantic can
    validate (str, int, datetime, nested models, lists...).
    """

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        inner = handler(source_type)
        plaintext_validator = _PlaintextValidator(source_type)

        def validate(
            value: Any,
            nxt: core_schema.ValidatorFunctionWrapHandler,
            info: core_schema.ValidationInfo,
        ) -> Any:
            codec = _active_codec(info.context)
            if codec is None:
                return nxt(value)
            if value is None:
                return None
            plaintext = _decrypt(codec.require_cipher(), value)
            # Typed value goes back through the inner schema for field constraints.
            return nxt(plaintext_validator.validate(plaintext, info.context, codec.strict))

        def serialize(
            value: Any,
            nxt: core_schema.SerializerFunctionWrapHandler,
            info: core_schema.SerializationInfo,
        ) -> Any:
            codec = _active_codec(info.context)
            if codec is None:
                return nxt(value)
            if value is None:
                return None
            cipher = codec.require_cipher()
            if plaintext_validator.is_text and isinstance(value, str):
                payload = value
            else:
                payload = to_json(nxt(value)).decode()
            return cipher.encrypt_string(payload)

        return core_schema.with_info_wrap_validator_function(
            validate,
            inner,
            serialization=core_schema.wrap_serializer_function_ser_schema(
                serialize,
                schema=inner,
                info_arg=True,
                when_used="always",
            ),
        )


class FieldCodec(Generic[T]):
    """Standalone encode/decode for one value type.

    Same rules as an EncryptedProperty field, without an enclosing record:
    encode(None) is None, decode(None) is None, and
    decode(encode(v)) == v for any v of value_type.
    """

    def __init__(
        self,
        value_type: Any,
        cryptography_provider: CryptographyProvider | None,
        strict: bool | None = None,
    ) -> None:
        self._plaintext = _PlaintextValidator(value_type)
        self._codec = CodecContext(cryptography_provider, strict)

    def encode(self, value: T | None) -> str | None:
        """Encrypt value; non-text values are serialized to JSON first."""
        if value is None:
            return None
        cipher = self._codec.require_cipher()
        if self._plaintext.is_text and isinstance(value, str):
            payload = value
        else:
            context = {CODEC_CONTEXT_KEY: self._codec}
            payload = to_json(
                self._plaintext.adapter.dump_python(value, mode="json", context=context)
            ).decode()
        return cipher.encrypt_string(payload)

    def decode(self, raw: str | None) -> T | None:
        """Decrypt raw and validate the plaintext as value_type.

        Raises:
            DecodeError: Decryption failed or plaintext is not a valid value.
            CipherConfigurationError: No cryptography provider configured.
        """
        if raw is None:
            return None
        plaintext = _decrypt(self._codec.require_cipher(), raw)
        return self._plaintext.validate(
            plaintext, {CODEC_CONTEXT_KEY: self._codec}, self._codec.strict
        )


def has_encrypted_fields(model_type: type[BaseModel]) -> bool:
    """Return True if model_type (or a nested model) declares an encrypted field."""
    return _model_has_encrypted(model_type, set())


def _model_has_encrypted(model_type: type[BaseModel], seen: set[type]) -> bool:
    if model_type in seen:
        return False
    seen.add(model_type)
    for field in model_type.model_fields.values():
        if any(isinstance(m, EncryptedProperty) for m in field.metadata):
            return True
        if _annotation_has_encrypted(field.annotation, seen):
            return True
    return False


def _annotation_has_encrypted(annotation: Any, seen: set[type]) -> bool:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return _model_has_encrypted(annotation, seen)
    if get_origin(annotation) is Annotated:
        base, *metadata = get_args(annotation)
        if any(isinstance(m, EncryptedProperty) for m in metadata):
            return True
        return _annotation_has_encrypted(base, seen)
    return any(_annotation_has_encrypted(arg, seen) for arg in get_args(annotation))
