from ._cache_policy import CachePolicy
from ._request_spec import HTTPMethod, NetworkRequest
from ._url import LiteralURL, URLBuilder, resolve_url

__all__ = [
    "CachePolicy",
    "HTTPMethod",
    "LiteralURL",
    "NetworkRequest",
    "URLBuilder",
    "resolve_url",
]
