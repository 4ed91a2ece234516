"""odxproxy - typed client for Odoo models behind the ODX proxy gateway."""

__version__ = "0.1.0"

from odxproxy.client import OdxProxyClient, get_instance, init
from odxproxy.config import load_config
from odxproxy.errors import (
    ClientAlreadyInitializedError,
    ClientNotInitializedError,
    ConfigError,
    ErrorKind,
    OdxBadResponseError,
    OdxHttpStatusError,
    OdxNetworkError,
    OdxProxyError,
    OdxTimeoutError,
    OdxTransportError,
)
from odxproxy.operations import (
    build_request,
    call_method,
    create,
    fields_get,
    read,
    remove,
    search,
    search_count,
    search_read,
    update,
    unlink,
    write,
)
from odxproxy.schema import (
    ClientInfo,
    ClientRequest,
    InstanceInfo,
    KeywordRequest,
    RequestContext,
    ServerErrorResponse,
    ServerResponse,
)

__all__ = [
    "__version__",
    "init",
    "get_instance",
    "OdxProxyClient",
    "load_config",
    "build_request",
    "search",
    "search_read",
    "read",
    "fields_get",
    "search_count",
    "create",
    "update",
    "remove",
    "call_method",
    "write",
    "unlink",
    "ClientInfo",
    "ClientRequest",
    "InstanceInfo",
    "KeywordRequest",
    "RequestContext",
    "ServerErrorResponse",
    "ServerResponse",
    "OdxProxyError",
    "ClientAlreadyInitializedError",
    "ClientNotInitializedError",
    "ConfigError",
    "ErrorKind",
    "OdxTransportError",
    "OdxTimeoutError",
    "OdxHttpStatusError",
    "OdxNetworkError",
    "OdxBadResponseError",
]
