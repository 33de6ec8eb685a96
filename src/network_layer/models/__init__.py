from .errors import DecodeError, EncodeError, NetworkError, NetworkErrorKind

__all__ = ["DecodeError", "EncodeError", "NetworkError", "NetworkErrorKind"]
