"""
Model operations forwarded through the gateway.

Every function copies its inputs, filters keyword options according to the
action's descriptor, stamps a request id and backend credentials, then submits
the envelope with the given (or default) client.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping

from ulid import ULID

from odxproxy.actions import ActionSpec, filter_keyword, get_action
from odxproxy.client import OdxProxyClient, get_instance
from odxproxy.schema import ClientRequest, KeywordRequest, ServerResponse

Keyword = KeywordRequest | Mapping[str, Any]


def new_request_id() -> str:
    return str(ULID())


def _keyword_dict(keyword: Keyword) -> dict[str, Any]:
    if isinstance(keyword, KeywordRequest):
        return keyword.model_dump(mode="json", exclude_unset=True)
    return copy.deepcopy(dict(keyword))


def build_request(
    action: str | ActionSpec,
    model: str,
    params: list[Any] | None,
    keyword: Keyword,
    *,
    fn_name: str | None = None,
    request_id: str | None = None,
    client: OdxProxyClient | None = None,
) -> ClientRequest:
    """Compose the envelope for one action without sending it."""
    spec = action if isinstance(action, ActionSpec) else get_action(action)
    client = client or get_instance()
    return ClientRequest(
        id=request_id or new_request_id(),
        action=spec.wire_action,
        model_id=model,
        keyword=filter_keyword(spec, _keyword_dict(keyword)),
        params=copy.deepcopy(list(params or [])) if spec.sends_params else [],
        fn_name=fn_name if spec.requires_fn_name else None,
        odoo_instance=client.get_backend_credentials(),
    )


async def _execute(
    action: str,
    model: str,
    params: list[Any] | None,
    keyword: Keyword,
    *,
    fn_name: str | None = None,
    request_id: str | None = None,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    client = client or get_instance()
    request = build_request(
        action, model, params, keyword, fn_name=fn_name, request_id=request_id, client=client
    )
    return await client.submit(request)


async def search(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """
    Search `model` with a domain; result is a list of record ids.

    Args:
        model: Model name in dot notation (e.g. 'res.partner').
        params: Search domain, passed through unchanged.
        keyword: Keyword options; sort/limit/offset/fields are dropped.
        request_id: Request id; a ULID is generated when omitted.
        client: Client to use instead of the default one.
    """
    return await _execute("search", model, params, keyword, request_id=request_id, client=client)


async def search_read(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """
    Search and read in one call; result is a list of records.

    The only action that keeps `fields`, `sort`, `limit` and `offset`.
    """
    return await _execute("search_read", model, params, keyword, request_id=request_id, client=client)


async def read(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Read records by id (`params` holds the id list)."""
    return await _execute("read", model, params, keyword, request_id=request_id, client=client)


async def fields_get(
    model: str,
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Field metadata of `model`."""
    return await _execute("fields_get", model, [], keyword, request_id=request_id, client=client)


async def search_count(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Number of records matching the domain."""
    return await _execute("search_count", model, params, keyword, request_id=request_id, client=client)


async def create(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Create a record; `params` is `[values]`, result is the new id."""
    return await _execute("create", model, params, keyword, request_id=request_id, client=client)


async def update(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Write values to records; `params` is `[ids, values]`."""
    return await _execute("update", model, params, keyword, request_id=request_id, client=client)


async def remove(
    model: str,
    params: list[Any],
    keyword: Keyword,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Delete (unlink) records by id."""
    return await _execute("remove", model, params, keyword, request_id=request_id, client=client)


async def call_method(
    model: str,
    params: list[Any],
    keyword: Keyword,
    fn_name: str | None,
    request_id: str | None = None,
    *,
    client: OdxProxyClient | None = None,
) -> ServerResponse:
    """Call an arbitrary method `fn_name` on `model` with `params` as arguments."""
    return await _execute(
        "call_method", model, params, keyword, fn_name=fn_name, request_id=request_id, client=client
    )


# Odoo method names for the same operations.
write = update
unlink = remove
