from .errors import (
    BaseUrlMissingError,
    HTTPError,
    InvalidBaseURLError,
    InvalidStatusCodeError,
    NonHTTPResponseError,
    TransportContractError,
    UnexpectedStatusError,
)
from .header_field import HTTPHeaderField
from .http_method import HTTPMethod
from .results import DataResponse, Failure, JSONResponse, Result, Success
from .status_code import (
    CLIENT_ERROR_RANGE,
    INFORMATIONAL_RANGE,
    REDIRECTION_RANGE,
    SERVER_ERROR_RANGE,
    SUCCESS_RANGE,
    HTTPStatusCode,
)

__all__ = [
    "BaseUrlMissingError",
    "HTTPError",
    "InvalidBaseURLError",
    "InvalidStatusCodeError",
    "NonHTTPResponseError",
    "TransportContractError",
    "UnexpectedStatusError",
    "HTTPHeaderField",
    "HTTPMethod",
    "DataResponse",
    "Failure",
    "JSONResponse",
    "Result",
    "Success",
    "HTTPStatusCode",
    "INFORMATIONAL_RANGE",
    "SUCCESS_RANGE",
    "REDIRECTION_RANGE",
    "CLIENT_ERROR_RANGE",
    "SERVER_ERROR_RANGE",
]
