from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import NetworkError, NetworkErrorKind


@contextmanager
def handle_errors(url: str | None = None) -> Generator[None, None, None]:
    """Context manager translating httpx failures into ``NetworkError``.

    Args:
        url: The URL being called, recorded on the raised error.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        NetworkError: ``HTTP_STATUS`` for error responses, ``TIMEOUT`` when a
            timeout elapsed, ``INVALID_TARGET`` when httpx rejects the URL or
            its scheme, ``CONNECTION_FAILED`` for any other transport error.
    """
    try:
        yield
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        raise NetworkError(
            f"HTTP {status_code}",
            e.response.text or e.response.reason_phrase,
            NetworkErrorKind.HTTP_STATUS,
            url=url,
            status_code=status_code,
        ) from e
    except httpx.TimeoutException as e:
        raise NetworkError(
            "Request Timed Out",
            str(e) or "The request did not complete in time",
            NetworkErrorKind.TIMEOUT,
            url=url,
        ) from e
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise NetworkError.invalid_target(url) from e
    except httpx.TransportError as e:
        raise NetworkError(
            "Connection Failed",
            str(e) or type(e).__name__,
            NetworkErrorKind.CONNECTION_FAILED,
            url=url,
        ) from e
