from __future__ import annotations

import httpx
import pytest

from jsonapi_client import JSONAPIClient


@pytest.fixture
def make_api_client():
    clients: list[JSONAPIClient] = []

    def _make(handler=None, **overrides) -> JSONAPIClient:
        params = {
            "host": "localhost",
            "port": 20059,
            "username": "bob",
            "password": "pw",
            "salt": "s1",
        }
        params.update(overrides)
        transport = httpx.MockTransport(handler) if handler else None
        client = JSONAPIClient(**params, transport=transport)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
