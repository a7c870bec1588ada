"""Shared fixtures: a fake Wikipedia served through `httpx.MockTransport`."""

from __future__ import annotations

import json
import os
from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import build_client
from adapters.wikipedia import WikipediaClient
from core.config import AppSettings

SEARCH_PATH = "/w/api.php"
SUMMARY_PREFIX = "/api/rest_v1/page/summary/"


class FakeWikipedia:
    """Minimal stand-in for the two endpoints; records every request."""

    def __init__(
        self,
        *,
        search: Any = None,
        summary: Any = None,
        search_status: int = 200,
        summary_status: int = 200,
        raise_on: str | None = None,
    ) -> None:
        self.search = search if search is not None else {"query": {"search": []}}
        self.summary = summary if summary is not None else {"type": "standard"}
        self.search_status = search_status
        self.summary_status = summary_status
        self.raise_on = raise_on
        self.requests: list[httpx.Request] = []

    @staticmethod
    def _body(payload: Any) -> bytes:
        if isinstance(payload, str):
            return payload.encode("utf-8")
        return json.dumps(payload).encode("utf-8")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == SEARCH_PATH:
            if self.raise_on == "search":
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(self.search_status, content=self._body(self.search))
        if path.startswith(SUMMARY_PREFIX):
            if self.raise_on == "summary":
                raise httpx.ReadTimeout("timed out", request=request)
            return httpx.Response(self.summary_status, content=self._body(self.summary))
        return httpx.Response(404)

    @property
    def summary_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith(SUMMARY_PREFIX)]

    @property
    def search_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == SEARCH_PATH]


def search_payload(*titles: str) -> dict[str, Any]:
    return {"query": {"search": [{"title": t, "pageid": i} for i, t in enumerate(titles)]}}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Keep developer `.env` files and `WIKI_CLI_*` variables out of the tests."""

    for key in list(os.environ):
        if key.upper().startswith("WIKI_CLI_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def make_source(settings) -> Callable[[FakeWikipedia], WikipediaClient]:
    clients: list[httpx.Client] = []

    def _make(fake: FakeWikipedia) -> WikipediaClient:
        client = build_client(settings, transport=httpx.MockTransport(fake))
        clients.append(client)
        return WikipediaClient(client, settings)

    yield _make
    for client in clients:
        client.close()
