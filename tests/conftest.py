from pathlib import Path

import httpx
import pytest

from network_layer import NetworkClient
from network_layer._services._network_client import get_default_client
from tests.utils.transport_spy import TransportSpy


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clean environment variables and run each test away from any .env file."""
    monkeypatch.delenv("NETWORK_LAYER_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("NETWORK_LAYER_RAISE_FOR_STATUS", raising=False)
    monkeypatch.delenv("NETWORK_LAYER_TRUST_ENV", raising=False)
    monkeypatch.chdir(tmp_path)
    get_default_client.cache_clear()


@pytest.fixture
def base_url() -> str:
    return "https://test.example.com"


@pytest.fixture
def client() -> NetworkClient:
    return NetworkClient()


@pytest.fixture
def transport_spy() -> TransportSpy:
    return TransportSpy(lambda request: httpx.Response(200, json={"ok": True}))
