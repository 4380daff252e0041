from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP request methods.

    See: https://www.w3.org/Protocols/rfc2616/rfc2616-sec9.html
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"

    @property
    def takes_body(self) -> bool:
        """True for the methods whose JSON parameters travel in the request body."""
        return self in (HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.PATCH)

    def __str__(self) -> str:
        return self.value
