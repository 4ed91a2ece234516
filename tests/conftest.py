"""Pytest hooks and fixtures."""

from __future__ import annotations

import json
import os
from typing import Any, Callable

import httpx
import pytest

import odxproxy.client as client_module
from odxproxy.client import OdxProxyClient
from odxproxy.schema import ClientInfo, InstanceInfo


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_gateway: talks to a real ODX proxy gateway (set ODXPROXY_LIVE=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_gateway tests unless live runs are enabled."""
    if os.environ.get("ODXPROXY_LIVE") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a live gateway (set ODXPROXY_LIVE=1)")
    for item in items:
        if "requires_gateway" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def reset_default_client(monkeypatch):
    monkeypatch.setattr(client_module, "_default_client", None)


@pytest.fixture
def client_info() -> ClientInfo:
    return ClientInfo(
        instance=InstanceInfo(url="https://erp.example.com", user_id=2, db="prod", api_key="backend-key"),
        odx_api_key="proxy-key",
        gateway_url="https://gw.example.com/",
    )


class RecordingGateway:
    """Stub gateway: records posted envelopes and answers with `reply`."""

    def __init__(self, reply: Callable[[httpx.Request, dict[str, Any]], httpx.Response] | None = None):
        self.requests: list[httpx.Request] = []
        self.bodies: list[dict[str, Any]] = []
        self._reply = reply

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(request)
        self.bodies.append(body)
        if self._reply is not None:
            return self._reply(request, body)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": True})

    @property
    def last_body(self) -> dict[str, Any]:
        return self.bodies[-1]


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def client(client_info, gateway) -> OdxProxyClient:
    return OdxProxyClient(client_info, transport=httpx.MockTransport(gateway))


@pytest.fixture
def make_client(client_info):
    """Build a client whose gateway answers with `reply(request, body)`."""

    def _make(reply=None) -> tuple[OdxProxyClient, RecordingGateway]:
        stub = RecordingGateway(reply)
        return OdxProxyClient(client_info, transport=httpx.MockTransport(stub)), stub

    return _make
