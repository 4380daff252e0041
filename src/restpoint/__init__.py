"""Typed REST client: describe calls as ``Endpoint`` values and send them through a ``Host``."""

from ._config import HostConfig
from ._host import Host
from ._request import Request, RequestState
from ._utils import (
    AnyJSON,
    Endpoint,
    EndpointConvertible,
    JSONError,
    JSONObject,
    ValidJSONObject,
    parse_value,
    setup_logging,
)
from .models import (
    BaseUrlMissingError,
    DataResponse,
    Failure,
    HTTPError,
    HTTPHeaderField,
    HTTPMethod,
    HTTPStatusCode,
    InvalidBaseURLError,
    InvalidStatusCodeError,
    JSONResponse,
    NonHTTPResponseError,
    Result,
    Success,
    TransportContractError,
    UnexpectedStatusError,
)

__all__ = [
    "Host",
    "HostConfig",
    "Request",
    "RequestState",
    "Endpoint",
    "EndpointConvertible",
    "AnyJSON",
    "JSONError",
    "JSONObject",
    "ValidJSONObject",
    "parse_value",
    "setup_logging",
    "BaseUrlMissingError",
    "DataResponse",
    "Failure",
    "HTTPError",
    "HTTPHeaderField",
    "HTTPMethod",
    "HTTPStatusCode",
    "InvalidBaseURLError",
    "InvalidStatusCodeError",
    "JSONResponse",
    "NonHTTPResponseError",
    "Result",
    "Success",
    "TransportContractError",
    "UnexpectedStatusError",
]
