"""Wire and connection models using Pydantic."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_GATEWAY_URL = "https://gateway.odxproxy.io"
DEFAULT_TIMEOUT_SECONDS = 45.0
EXECUTE_PATH = "/api/odoo/execute"


class InstanceInfo(BaseModel):
    """Backend Odoo instance credentials forwarded with every request."""
    model_config = ConfigDict(frozen=True)

    url: str
    user_id: int
    db: str
    api_key: str


class ClientInfo(BaseModel):
    """Connection context for one gateway client."""
    model_config = ConfigDict(frozen=True)

    instance: InstanceInfo
    odx_api_key: str
    gateway_url: str = DEFAULT_GATEWAY_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("gateway_url", mode="before")
    @classmethod
    def _default_and_strip(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_GATEWAY_URL
        if isinstance(value, str) and value.endswith("/"):
            return value[:-1]
        return value


class RequestContext(BaseModel):
    """Execution context sent as keyword `context` (timezone, company scoping)."""
    model_config = ConfigDict(extra="allow")

    tz: str
    allowed_company_ids: list[int] | None = None
    default_company_id: int | None = None


class KeywordRequest(BaseModel):
    """Keyword (non-positional) options of a request."""
    model_config = ConfigDict(extra="allow")

    fields: list[str] | None = None
    sort: str | None = None
    limit: int | None = None
    offset: int | None = None
    context: RequestContext


class ClientRequest(BaseModel):
    """Request envelope posted to the gateway."""
    model_config = ConfigDict(frozen=True)

    id: str
    action: str
    model_id: str
    keyword: dict[str, Any] = Field(default_factory=dict)
    params: list[Any] = Field(default_factory=list)
    fn_name: str | None = None
    odoo_instance: InstanceInfo

    def to_wire(self) -> dict[str, Any]:
        """JSON body for the gateway; `fn_name` is only sent when set."""
        exclude = {"fn_name"} if self.fn_name is None else set()
        return self.model_dump(mode="json", exclude=exclude)


class ServerErrorResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Any = None
    message: str | None = None
    data: Any = None


class ServerResponse(BaseModel):
    """Gateway response, passed through to callers as received."""
    model_config = ConfigDict(extra="allow")

    jsonrpc: Any = None
    id: Any = None
    result: Any = None
    error: ServerErrorResponse | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
