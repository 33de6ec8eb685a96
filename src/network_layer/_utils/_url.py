"""URL targets resolved when a request is dispatched, not when it is built."""

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from httpx import URL, InvalidURL

from ..models.errors import NetworkError

_SUPPORTED_SCHEMES = ("http", "https")


@runtime_checkable
class URLBuilder(Protocol):
    """Anything that can produce the URL of a request on demand.

    Returning ``None`` means no URL is available, and the request fails with
    an invalid target error.
    """

    def produce_url(self) -> Union[URL, str, None]: ...


@dataclass(frozen=True)
class LiteralURL:
    """A target known up front as a plain string."""

    url: str

    def produce_url(self) -> str:
        return self.url

    def __str__(self) -> str:
        return self.url


Target = Union[str, URL, URLBuilder]


def as_url_builder(target: Target) -> URLBuilder:
    if isinstance(target, URL):
        return LiteralURL(str(target))
    if isinstance(target, str):
        return LiteralURL(target)
    if isinstance(target, URLBuilder):
        return target
    raise TypeError(
        f"target must be a str, httpx.URL or URLBuilder, not {type(target).__name__}"
    )


def resolve_url(builder: URLBuilder) -> URL:
    """Ask the builder for its URL and check it can be called.

    Raises:
        NetworkError: With kind ``INVALID_TARGET`` when the builder yields
            nothing, a malformed URL, a non-HTTP scheme or no host.
    """
    try:
        produced = builder.produce_url()
    except Exception as e:
        raise NetworkError.invalid_target(builder) from e

    if produced is None or produced == "":
        raise NetworkError.invalid_target(builder)

    try:
        url = produced if isinstance(produced, URL) else URL(str(produced))
    except InvalidURL as e:
        raise NetworkError.invalid_target(produced) from e

    if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
        raise NetworkError.invalid_target(produced)

    return url
