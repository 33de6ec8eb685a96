"""Minimal async HTTP request/response layer built on httpx and pydantic."""

from ._codecs import (
    DecoderProtocol,
    EncoderProtocol,
    JSONDecoder,
    JSONEncoder,
    KeyDecodingStrategy,
    WireModel,
    default_decoder,
    default_encoder,
)
from ._config import ClientConfig
from ._services import NetworkClient, NetworkClientProtocol, get_default_client
from ._utils import CachePolicy, HTTPMethod, LiteralURL, NetworkRequest, URLBuilder
from .models import DecodeError, EncodeError, NetworkError, NetworkErrorKind

__all__ = [
    "CachePolicy",
    "ClientConfig",
    "DecodeError",
    "DecoderProtocol",
    "EncodeError",
    "EncoderProtocol",
    "HTTPMethod",
    "JSONDecoder",
    "JSONEncoder",
    "KeyDecodingStrategy",
    "LiteralURL",
    "NetworkClient",
    "NetworkClientProtocol",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkRequest",
    "URLBuilder",
    "WireModel",
    "default_decoder",
    "default_encoder",
    "get_default_client",
]
