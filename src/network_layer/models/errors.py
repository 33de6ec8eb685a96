from enum import Enum


class NetworkErrorKind(str, Enum):
    """Failure categories a network call can end with."""

    INVALID_TARGET = "invalid_target"
    TIMEOUT = "timeout"
    CONNECTION_FAILED = "connection_failed"
    DECODE_FAILED = "decode_failed"
    ENCODE_FAILED = "encode_failed"
    HTTP_STATUS = "http_status"


class NetworkError(Exception):
    """Raised for every failure of a request, from building it to decoding it.

    The ``kind`` attribute tells the failures apart. The underlying exception,
    when there is one, is available as ``__cause__``.
    """

    def __init__(
        self,
        title: str,
        message: str,
        kind: NetworkErrorKind,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ):
        self.title = title
        self.message = message
        self.kind = kind
        self.url = url
        self.status_code = status_code
        super().__init__(f"{title}: {message}")

    @classmethod
    def invalid_target(cls, target: object) -> "NetworkError":
        return cls(
            "Invalid Url",
            f"The Url you are trying to call is not valid: {target!r}",
            NetworkErrorKind.INVALID_TARGET,
            url=None if target is None else str(target),
        )


class EncodeError(NetworkError):
    """Raised when a request body cannot be serialized."""

    def __init__(self, message: str):
        super().__init__("Encoding Failed", message, NetworkErrorKind.ENCODE_FAILED)


class DecodeError(NetworkError):
    """Raised when a response body does not match the expected type."""

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(
            "Decoding Failed", message, NetworkErrorKind.DECODE_FAILED, url=url
        )
