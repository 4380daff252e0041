from ._endpoint import Endpoint, EndpointConvertible
from ._json import AnyJSON, JSONError, JSONObject, ValidJSONObject, parse_value
from ._logs import setup_logging

__all__ = [
    "Endpoint",
    "EndpointConvertible",
    "AnyJSON",
    "JSONError",
    "JSONObject",
    "ValidJSONObject",
    "parse_value",
    "setup_logging",
]
