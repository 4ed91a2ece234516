"""HTTP client for the ODX proxy gateway."""

from __future__ import annotations

import asyncio
import threading
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from odxproxy.errors import (
    ClientAlreadyInitializedError,
    ClientNotInitializedError,
    OdxBadResponseError,
    OdxHttpStatusError,
    OdxNetworkError,
    OdxTimeoutError,
    sanitize_error_message,
)
from odxproxy.schema import EXECUTE_PATH, ClientInfo, ClientRequest, InstanceInfo, ServerResponse


class OdxProxyClient:
    """
    One configured connection to the gateway.

    Holds the backend credentials and proxy API key; every operation goes
    through `submit`, which performs a single POST with no retries.
    """

    def __init__(self, info: ClientInfo, *, transport: httpx.AsyncBaseTransport | None = None):
        self._info = info
        self._transport = transport

    @property
    def gateway_url(self) -> str:
        return self._info.gateway_url

    @property
    def timeout(self) -> float:
        return self._info.timeout

    @property
    def timeout_ms(self) -> int:
        return int(round(self._info.timeout * 1000))

    def _headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "x-api-key": self._info.odx_api_key,
        }

    def _http_client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"timeout": self._info.timeout, "headers": self._headers()}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    def get_backend_credentials(self) -> InstanceInfo:
        """Copy of the backend instance credentials."""
        return self._info.instance.model_copy(deep=True)

    async def submit(self, request: ClientRequest) -> ServerResponse:
        url = f"{self._info.gateway_url}{EXECUTE_PATH}"
        logger.debug(f"odxproxy submit action={request.action} model={request.model_id} id={request.id}")
        try:
            async with self._http_client() as client:
                # httpx limits each phase separately; cap the whole exchange too.
                resp = await asyncio.wait_for(client.post(url, json=request.to_wire()), self._info.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning(f"odxproxy timeout after {self.timeout_ms}ms: action={request.action} id={request.id}")
            raise OdxTimeoutError(self.timeout_ms) from exc
        except httpx.RequestError as exc:
            message = str(exc) or type(exc).__name__
            logger.warning(f"odxproxy network error: {sanitize_error_message(message)}")
            raise OdxNetworkError(500, message, None) from exc

        status_code = resp.status_code
        if not resp.is_success:
            logger.warning(f"odxproxy http error {status_code}: action={request.action} id={request.id}")
            raise OdxHttpStatusError(status_code, resp.reason_phrase, self._error_body(resp))

        try:
            body = resp.json()
        except ValueError as exc:
            raise OdxBadResponseError(
                status_code, "invalid JSON response from gateway", {"text": resp.text}
            ) from exc
        if not isinstance(body, dict):
            raise OdxBadResponseError(status_code, "unexpected response shape from gateway", body)
        try:
            return ServerResponse.model_validate(body)
        except ValidationError:
            logger.debug(f"odxproxy passing through non-standard response: id={request.id}")
            return ServerResponse.model_construct(**body)

    @staticmethod
    def _error_body(resp: httpx.Response) -> Any:
        try:
            body = resp.json()
        except ValueError:
            return {"text": resp.text}
        if isinstance(body, str):
            return {"text": body}
        return body


_lock = threading.Lock()
_default_client: OdxProxyClient | None = None


def init(info: ClientInfo | dict[str, Any]) -> OdxProxyClient:
    """Create the process-wide default client. Only one may ever be created."""
    global _default_client
    with _lock:
        if _default_client is not None:
            raise ClientAlreadyInitializedError()
        if not isinstance(info, ClientInfo):
            info = ClientInfo.model_validate(info)
        _default_client = OdxProxyClient(info)
        logger.debug(f"odxproxy default client initialized for {info.gateway_url}")
        return _default_client


def get_instance() -> OdxProxyClient:
    """Return the default client created by `init`."""
    if _default_client is None:
        raise ClientNotInitializedError()
    return _default_client
