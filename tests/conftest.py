"""
Shared fixtures: month payloads and a stubbed data-file server.

HTTP goes through ``httpx.MockTransport``, so no test touches the network.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from mask_tasker.core.errors import LoadError
from mask_tasker.core.models import MonthData

DATA_URL = "http://scores.test/data/months"


class StubDataServer:
    """Serves ``files`` by name.

    Values are JSON payloads, raw strings (served as-is), or exceptions
    (raised as transport errors). Missing names answer 404.
    """

    def __init__(self):
        self.files: dict[str, Any] = {}
        self.requested: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        name = request.url.path.rsplit("/", 1)[-1]
        self.requested.append(name)
        if name not in self.files:
            return httpx.Response(404, text="Not Found")
        body = self.files[name]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, str):
            return httpx.Response(200, text=body)
        return httpx.Response(200, json=body)


@pytest.fixture
def month_payloads() -> dict[str, dict]:
    return {
        "1": {"submissions": [{"teamName": "A", "score": 10}]},
        "2": {
            "name": "February",
            "date": "2024-02-29",
            "submissions": [
                {"teamName": "A", "score": 5},
                {"teamName": "B", "score": 7},
            ],
        },
    }


@pytest.fixture
def fake_loader(month_payloads):
    """A month loader backed by ``month_payloads``; unknown months raise LoadError."""
    calls: list[str] = []

    async def loader(month_id):
        calls.append(str(month_id))
        payload = month_payloads.get(str(month_id))
        if payload is None:
            raise LoadError(f"Failed to load month{month_id}.json", status_code=404)
        return MonthData.model_validate(payload)

    loader.calls = calls
    return loader


@pytest.fixture
def data_server(monkeypatch) -> StubDataServer:
    """Route every ``httpx.AsyncClient`` at a stub server rooted at ``DATA_URL``."""
    server = StubDataServer()
    transport = httpx.MockTransport(server.handler)
    real_client = httpx.AsyncClient

    def client_with_transport(*args, **kwargs):
        kwargs["transport"] = transport
        return real_client(*args, **kwargs)

    monkeypatch.setenv("SCORES_DATA_URL", DATA_URL)
    monkeypatch.setattr(httpx, "AsyncClient", client_with_transport)
    return server


@pytest.fixture
def served_months(data_server, month_payloads) -> StubDataServer:
    data_server.files["config.json"] = {"months": list(month_payloads)}
    for month_id, payload in month_payloads.items():
        data_server.files[f"month{month_id}.json"] = payload
    return data_server
