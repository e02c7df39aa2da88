"""Shared fixtures: a config with a credential and a client on a mock transport."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from baseline_mcp.client import BaselineClient
from baseline_mcp.config import BaselineConfig
from baseline_mcp.dispatcher import ToolDispatcher

API_URL = "https://api.test/production/api"


class UpstreamStub:
    """Records outgoing requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.responder: Callable[[httpx.Request], httpx.Response] = self._default

    def respond(self, body: Any = None, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def _default(self, request: httpx.Request) -> httpx.Response:
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture
def config() -> BaselineConfig:
    return BaselineConfig(api_key="test-token", api_url=API_URL)


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def client(config: BaselineConfig, upstream: UpstreamStub) -> BaselineClient:
    return BaselineClient(config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(upstream)))


@pytest.fixture
def dispatcher(client: BaselineClient, config: BaselineConfig) -> ToolDispatcher:
    return ToolDispatcher(client, config)
