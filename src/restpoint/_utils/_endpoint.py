from logging import getLogger
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, runtime_checkable
from urllib.parse import quote, urlencode

import httpx

from ..models.errors import InvalidBaseURLError
from ..models.header_field import (
    HeaderKey,
    HTTPHeaderField,
    header_fields,
    wire_headers,
)
from ..models.http_method import HTTPMethod
from ._json import ValidJSONObject
from ._query import join_path, json_to_query

JSON_CONTENT_TYPE = "application/json"


@runtime_checkable
class EndpointConvertible(Protocol):
    """Anything that can be represented as an ``Endpoint``.

    Implement this on your own enum or class to describe an API as a closed
    set of operations::

        class UserAPI:
            def __init__(self, user_id: str):
                self.user_id = user_id

            @property
            def endpoint_value(self) -> Endpoint:
                return Endpoint(HTTPMethod.DELETE, f"/user/{self.user_id}")
    """

    @property
    def endpoint_value(self) -> "Endpoint": ...


class Endpoint:
    """The method, path, optional JSON parameters and headers of an HTTP call.

    Args:
        method: The HTTP method to use.
        path: The path of the resource, appended to the URL of a ``Host``. Don't put
            query params in here; that's what ``json`` is for.
        json: Parameters for the call. For GET they are encoded into query params
            (nested values follow Rails conventions). For POST, PUT and PATCH they
            are serialized as the UTF-8 request body and ``Content-Type`` defaults
            to ``application/json``. Other methods ignore them.
        headers: Headers for this call. Plain string keys are treated as custom
            header fields.
    """

    __slots__ = ("_method", "_path", "_json", "_headers")

    def __init__(
        self,
        method: HTTPMethod,
        path: str,
        json: Optional[ValidJSONObject] = None,
        headers: Optional[Mapping[HeaderKey, str]] = None,
    ) -> None:
        self._method = HTTPMethod(method)
        self._path = path
        self._json = json
        self._headers = MappingProxyType(header_fields(headers))

    @property
    def method(self) -> HTTPMethod:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    @property
    def json(self) -> Optional[ValidJSONObject]:
        return self._json

    @property
    def endpoint_value(self) -> "Endpoint":
        return self

    def headers(self) -> dict[HTTPHeaderField, str]:
        """The headers sent with this call.

        Methods that carry a JSON body get ``Content-Type: application/json``
        unless a content type was given explicitly.

        Header names compare as exact strings. A custom ``"content-type"`` key
        doesn't match ``HTTPHeaderField.CONTENT_TYPE``, so both are sent and the
        request carries two ``Content-Type`` headers. Use the named field to
        override the default.
        """
        headers = dict(self._headers)
        if self._method.takes_body and self._json is not None:
            headers.setdefault(HTTPHeaderField.CONTENT_TYPE, JSON_CONTENT_TYPE)
        return headers

    def url(self, base_url: str | httpx.URL) -> httpx.URL:
        base = _resolve_base_url(base_url)
        params = list(base.params.multi_items())
        if self._method == HTTPMethod.GET and self._json is not None:
            params.extend(json_to_query(self._json))

        url = base.copy_with(path=join_path(base.path, self._path))
        if params:
            url = url.copy_with(
                query=urlencode(params, quote_via=quote, safe="[]").encode("ascii")
            )
        return url

    def body(self) -> Optional[bytes]:
        if self._method.takes_body and self._json is not None:
            return self._json.data()
        return None

    def request(self, base_url: str | httpx.URL) -> httpx.Request:
        """Render this endpoint into a wire request against ``base_url``.

        Raises:
            InvalidBaseURLError: ``base_url`` can't be resolved.
        """
        url = self.url(base_url)
        headers = self.headers()

        logger = getLogger("restpoint")
        logger.debug(f"Request: {self._method} {url}")
        logger.debug(f"JSON: {self._json.value if self._json is not None else {}}")
        logger.debug(f"HEADERS: {headers}")

        return httpx.Request(
            self._method.value,
            url,
            headers=wire_headers(headers),
            content=self.body(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return (
            self._method == other._method
            and self._path == other._path
            and self._json == other._json
            and dict(self._headers) == dict(other._headers)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Endpoint(method={self._method.value!r}, path={self._path!r}, "
            f"json={self._json.value if self._json is not None else None!r}, "
            f"headers={dict(self._headers)!r})"
        )


def _resolve_base_url(base_url: str | httpx.URL) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidBaseURLError(str(base_url)) from e
    if not url.scheme or not url.host:
        raise InvalidBaseURLError(str(base_url), "Base URL needs a scheme and a host")
    return url
