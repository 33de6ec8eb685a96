from contextlib import asynccontextmanager
from functools import lru_cache
from logging import getLogger
from typing import AsyncIterator, Protocol, TypeVar, runtime_checkable

from httpx import AsyncBaseTransport, AsyncClient

from .._codecs import DecoderProtocol, default_decoder
from .._config import ClientConfig
from .._utils._cache_policy import CachePolicy
from .._utils._errors import handle_errors
from .._utils._request_spec import NetworkRequest
from .._utils._url import resolve_url
from .._utils.constants import DEFAULT_REQUEST_TIMEOUT, LOGGER_NAME
from ..models.errors import DecodeError, NetworkError

T = TypeVar("T")


@runtime_checkable
class NetworkClientProtocol(Protocol):
    @property
    def request_timeout(self) -> float: ...

    async def request(
        self,
        req: NetworkRequest,
        response_type: type[T],
        *,
        cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY,
        decoder: DecoderProtocol | None = None,
    ) -> T: ...


class NetworkClient:
    """Sends ``NetworkRequest`` descriptors and decodes their responses.

    The client holds nothing but its configuration, so a single instance can
    serve any number of concurrent callers. Each call is sent exactly once:
    there is no retry and no queueing.

    Args:
        request_timeout: Timeout in seconds used when a request does not
            set its own. Ignored when ``config`` is given.
        config: Full client configuration.
        transport: httpx transport to send requests through. It is owned by
            the caller and never closed by the client.
    """

    def __init__(
        self,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        *,
        config: ClientConfig | None = None,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or ClientConfig(request_timeout=request_timeout)
        # wraps a caller-owned transport; never closed, since that would close it
        self._transport_client = (
            None
            if transport is None
            else AsyncClient(transport=transport, trust_env=self._config.trust_env)
        )

    @classmethod
    def from_env(
        cls,
        dotenv_path: str | None = None,
        *,
        transport: AsyncBaseTransport | None = None,
    ) -> "NetworkClient":
        return cls(config=ClientConfig.from_env(dotenv_path), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def request_timeout(self) -> float:
        return self._config.request_timeout

    async def request(
        self,
        req: NetworkRequest,
        response_type: type[T],
        *,
        cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY,
        decoder: DecoderProtocol | None = None,
    ) -> T:
        """Send ``req`` and decode the response body into ``response_type``.

        Args:
            req: The request to send.
            response_type: Type the response body is decoded into. Anything
                pydantic can validate works with the default decoder.
            cache_policy: Cache directive forwarded with the request.
            decoder: Decoder for the response body. Defaults to JSON with
                snake_case keys converted to camelCase.

        Returns:
            The decoded response body.

        Raises:
            NetworkError: When the target is not a valid URL (before any
                network I/O), the call fails or times out, or, with
                ``raise_for_status`` configured, the server answers with an
                error status.
            DecodeError: When the response body cannot be decoded.
        """
        timeout = req.timeout if req.timeout is not None else self.request_timeout

        try:
            url = resolve_url(req.url_builder)
        except NetworkError:
            self._logger.debug(f"Invalid target: {req.url_builder!r}")
            raise

        request = req.build_request(
            url, timeout=timeout, extra_headers=cache_policy.headers()
        )
        self._logger.debug(f"Request: {request.method} {url} (timeout={timeout}s)")

        try:
            with handle_errors(str(url)):
                async with self._client() as client:
                    response = await client.send(request, follow_redirects=True)
                self._logger.debug(f"Response: {response.status_code} {url}")
                if self._config.raise_for_status:
                    response.raise_for_status()
        except NetworkError as e:
            self._logger.debug(f"Request failed: {request.method} {url}: {e}")
            raise

        try:
            return _decode(decoder or default_decoder(), response_type, response.content)
        except DecodeError as e:
            if e.url is None:
                e.url = str(url)
            self._logger.debug(f"Decoding failed: {request.method} {url}: {e}")
            raise

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[AsyncClient]:
        if self._transport_client is None:
            async with AsyncClient(trust_env=self._config.trust_env) as client:
                yield client
        else:
            yield self._transport_client


@lru_cache(maxsize=1)
def get_default_client() -> NetworkClient:
    """Return the process-wide client, configured from the environment."""
    return NetworkClient.from_env()


def _decode(decoder: DecoderProtocol, response_type: type[T], content: bytes) -> T:
    try:
        return decoder.decode(response_type, content)
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError(str(e) or type(e).__name__) from e
