from enum import Enum

from .constants import HEADER_CACHE_CONTROL


class CachePolicy(str, Enum):
    """Cache directive forwarded to the HTTP stack with a request.

    The client keeps no cache of its own. Each policy is translated into the
    matching ``Cache-Control`` request directive and left to whatever cache
    sits between the client and the server.
    """

    USE_PROTOCOL_CACHE_POLICY = "use_protocol_cache_policy"
    RELOAD_IGNORING_CACHE = "reload_ignoring_cache"
    RELOAD_REVALIDATING_CACHE = "reload_revalidating_cache"
    RETURN_CACHE_DATA_ELSE_LOAD = "return_cache_data_else_load"
    RETURN_CACHE_DATA_DONT_LOAD = "return_cache_data_dont_load"

    @property
    def directive(self) -> str | None:
        return _DIRECTIVES[self]

    def headers(self) -> dict[str, str]:
        if self.directive is None:
            return {}
        return {HEADER_CACHE_CONTROL: self.directive}


_DIRECTIVES: dict[CachePolicy, str | None] = {
    CachePolicy.USE_PROTOCOL_CACHE_POLICY: None,
    CachePolicy.RELOAD_IGNORING_CACHE: "no-cache",
    CachePolicy.RELOAD_REVALIDATING_CACHE: "max-age=0",
    CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD: "max-stale",
    CachePolicy.RETURN_CACHE_DATA_DONT_LOAD: "only-if-cached",
}
