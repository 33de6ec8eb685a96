from ._network_client import NetworkClient, NetworkClientProtocol, get_default_client

__all__ = ["NetworkClient", "NetworkClientProtocol", "get_default_client"]
