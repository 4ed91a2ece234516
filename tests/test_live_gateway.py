"""Round trips against a real gateway; configured through ODXPROXY_* variables."""

from __future__ import annotations

import pytest

from odxproxy import operations
from odxproxy.client import OdxProxyClient
from odxproxy.config import load_config

pytestmark = [pytest.mark.requires_gateway, pytest.mark.asyncio]

KEYWORD = {"context": {"tz": "Asia/Jakarta", "default_company_id": 1, "allowed_company_ids": [1]}}
DOMAIN = [[["is_company", "=", False]]]


@pytest.fixture
def live_client() -> OdxProxyClient:
    return OdxProxyClient(load_config().to_client_info())


async def test_read_only_actions(live_client) -> None:
    res = await operations.search("res.partner", DOMAIN, KEYWORD, client=live_client)
    assert res.jsonrpc == "2.0"
    res = await operations.search_read(
        "res.partner", DOMAIN, {**KEYWORD, "limit": 10, "fields": ["name", "email"]}, client=live_client
    )
    assert res.jsonrpc == "2.0"
    res = await operations.read("res.partner", [[2]], KEYWORD, client=live_client)
    assert res.jsonrpc == "2.0"
    res = await operations.fields_get("res.partner", KEYWORD, client=live_client)
    assert res.jsonrpc == "2.0"
    res = await operations.search_count("res.partner", DOMAIN, KEYWORD, client=live_client)
    assert res.jsonrpc == "2.0"


async def test_create_update_call_and_remove(live_client) -> None:
    created = await operations.create("res.partner", [{"name": "Acme"}], {"context": {"tz": "UTC"}}, client=live_client)
    assert created.jsonrpc == "2.0"
    record_id = created.result
    assert isinstance(record_id, int)

    res = await operations.update("res.partner", [[record_id], {"name": "Acme Updated"}], KEYWORD, client=live_client)
    assert res.jsonrpc == "2.0"
    res = await operations.call_method("res.partner", [[record_id]], KEYWORD, "action_archive", client=live_client)
    assert res.jsonrpc == "2.0"
    res = await operations.remove("res.partner", [[record_id]], KEYWORD, client=live_client)
    assert res.jsonrpc == "2.0"
