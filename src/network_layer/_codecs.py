"""Encoding of request bodies and decoding of response bodies.

The network client only talks to the two narrow protocols defined here, so a
different wire format can be plugged in per request without touching it.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticSerializationError, from_json, to_json

from .models.errors import DecodeError, EncodeError

T = TypeVar("T")


class EncoderProtocol(Protocol):
    def encode(self, value: Any) -> bytes: ...


class DecoderProtocol(Protocol):
    def decode(self, type_: type[T], data: bytes) -> T: ...


class KeyDecodingStrategy(str, Enum):
    """How object keys found on the wire are mapped before validation."""

    USE_DEFAULT_KEYS = "use_default_keys"
    CONVERT_FROM_SNAKE_CASE = "convert_from_snake_case"


class WireModel(BaseModel):
    """Base for response models decoded with ``CONVERT_FROM_SNAKE_CASE``.

    Fields keep their snake_case Python names and accept both the camelCase
    alias and the field name, so ``first_name`` on the wire (converted to
    ``firstName``) and ``first_name`` given in code both populate it.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )


def convert_from_snake_case(key: str) -> str:
    """Convert ``snake_case`` to ``camelCase``.

    Leading and trailing underscores are kept. Keys without an inner
    underscore are returned unchanged.
    """
    stripped = key.strip("_")
    if "_" not in stripped:
        return key

    leading = key[: len(key) - len(key.lstrip("_"))]
    trailing = key[len(key.rstrip("_")) :]
    head, *rest = [part for part in stripped.split("_") if part]
    converted = head + "".join(part.capitalize() for part in rest)
    return f"{leading}{converted}{trailing}"


def _convert_keys(value: Any, strategy: KeyDecodingStrategy) -> Any:
    if strategy is KeyDecodingStrategy.USE_DEFAULT_KEYS:
        return value
    if isinstance(value, dict):
        return {
            convert_from_snake_case(k): _convert_keys(v, strategy)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_convert_keys(item, strategy) for item in value]
    return value


@lru_cache(maxsize=256)
def _type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class JSONEncoder:
    """Serializes models, dataclasses and plain Python values to JSON bytes."""

    def __init__(self, by_alias: bool = False) -> None:
        self.by_alias = by_alias

    def encode(self, value: Any) -> bytes:
        try:
            return to_json(value, by_alias=self.by_alias)
        except PydanticSerializationError as e:
            raise EncodeError(
                f"Unable to encode value of type {type(value).__name__}: {e}"
            ) from e


class JSONDecoder:
    """Parses JSON bytes and validates them into the requested type.

    Args:
        key_decoding_strategy: Mapping applied to every object key before
            validation.
    """

    def __init__(
        self,
        key_decoding_strategy: KeyDecodingStrategy = KeyDecodingStrategy.USE_DEFAULT_KEYS,
    ) -> None:
        self.key_decoding_strategy = key_decoding_strategy

    def decode(self, type_: type[T], data: bytes) -> T:
        try:
            raw = from_json(data)
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

        raw = _convert_keys(raw, self.key_decoding_strategy)

        try:
            return _type_adapter(type_).validate_python(raw)
        except ValidationError as e:
            raise DecodeError(
                f"Response body does not match {getattr(type_, '__name__', type_)}: "
                f"{e.error_count()} validation error(s)\n{e}"
            ) from e


_shared_encoder = JSONEncoder()


def default_encoder() -> JSONEncoder:
    return _shared_encoder


def default_decoder(
    key_decoding_strategy: KeyDecodingStrategy = KeyDecodingStrategy.CONVERT_FROM_SNAKE_CASE,
) -> JSONDecoder:
    """Return a JSON decoder using the given key strategy.

    A new instance is returned on each call so that callers never share a
    mutated configuration.
    """
    return JSONDecoder(key_decoding_strategy=key_decoding_strategy)
