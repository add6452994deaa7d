"""Pytest fixtures: sample PokeAPI payloads and a fake PokeAPI transport."""

import asyncio
import copy
import os
import sys

import httpx
import orjson
import pytest
from dacite import from_dict

# Ensure src/ is on sys.path so tests can import "dex_browser_core" without installing it.
SRC_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from dex_browser_core.config import BrowserConfig  # noqa: E402
from dex_browser_core.utils.core.client import PokeAPIClient  # noqa: E402
from dex_browser_core.utils.core.config_registry import clear_config  # noqa: E402
from dex_browser_core.utils.data.models import DACITE_CONFIG, Pokemon, PokemonSpecies  # noqa: E402
from payloads import PIKACHU, PIKACHU_SPECIES  # noqa: E402


class FakePokeAPI:
    """Routes requests by URL path to canned responses and records what was asked."""

    def __init__(self):
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []
        self.errors: dict[str, Exception] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    def add_json(self, path: str, payload, status: int = 200) -> None:
        self.routes[path] = (status, orjson.dumps(payload))

    def add_raw(self, path: str, body: bytes, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def fail(self, path: str) -> None:
        self.errors[path] = httpx.ConnectError("connection refused")

    def requested_paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Yield so that overlapping requests would be observable
            await asyncio.sleep(0)

            path = request.url.path
            if path in self.errors:
                raise self.errors[path]
            if path not in self.routes:
                return httpx.Response(404, content=b"Not Found", request=request)

            status, body = self.routes[path]
            return httpx.Response(
                status,
                content=body,
                headers={"Content-Type": "application/json"},
                request=request,
            )
        finally:
            self.in_flight -= 1

    def client(self, config: BrowserConfig = None) -> PokeAPIClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return PokeAPIClient(config or BrowserConfig(), http_client=http_client)


@pytest.fixture(autouse=True)
def _reset_global_config():
    clear_config()
    yield
    clear_config()


@pytest.fixture
def config() -> BrowserConfig:
    return BrowserConfig(page_size=3)


@pytest.fixture
def fake_api() -> FakePokeAPI:
    return FakePokeAPI()


@pytest.fixture
def pikachu_payload() -> dict:
    return copy.deepcopy(PIKACHU)


@pytest.fixture
def pikachu() -> Pokemon:
    return from_dict(data_class=Pokemon, data=copy.deepcopy(PIKACHU), config=DACITE_CONFIG)


@pytest.fixture
def pikachu_species() -> PokemonSpecies:
    return from_dict(
        data_class=PokemonSpecies, data=copy.deepcopy(PIKACHU_SPECIES), config=DACITE_CONFIG
    )
