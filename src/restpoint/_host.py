from logging import getLogger
from os import environ as env
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv
from httpx import AsyncClient
from pydantic import ValidationError

from ._config import DEFAULT_TIMEOUT, PREFIX, HostConfig
from ._request import Request
from ._utils._endpoint import Endpoint, EndpointConvertible
from ._utils._json import ValidJSONObject, object_from_query
from ._utils._logs import setup_logging
from ._utils._ssl_context import get_httpx_client_kwargs
from .models.errors import BaseUrlMissingError, InvalidBaseURLError
from .models.header_field import HeaderKey, header_fields, wire_headers
from .models.http_method import HTTPMethod

QueryParams = Sequence[tuple[str, Optional[str]]]


class Host:
    """A server hosting a collection of REST endpoints.

    Args:
        url: The URL used to reach this host. It may carry a path, which is then
            prefixed to every request. Rather than a host at ``http://example.com``
            with endpoints at ``/v1/foo`` and ``/v1/bar``, use ``http://example.com/v1``
            with endpoints at ``/foo`` and ``/bar``.
        default_headers: Headers included in every request. Headers given to a
            single request override these. ``Content-Type`` is inferred per request,
            so there's rarely a reason to set it here.
        timeout: The timeout for requests on this host, in seconds.
        ca_bundle: Path to a CA bundle used to verify this host's certificate.

    Raises:
        InvalidBaseURLError: ``url`` isn't an http(s) URL.
        pydantic.ValidationError: ``timeout`` isn't positive.
    """

    def __init__(
        self,
        url: str,
        default_headers: Optional[Mapping[HeaderKey, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        ca_bundle: Optional[str] = None,
    ) -> None:
        self._logger = getLogger("restpoint")
        try:
            self._config = HostConfig(
                base_url=str(url),
                default_headers=wire_headers(header_fields(default_headers)),
                timeout=timeout,
                ca_bundle=ca_bundle,
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"] == ("base_url",):
                    raise InvalidBaseURLError(str(url), error["msg"]) from e
            raise

        self._logger.debug(f"HEADERS: {self._config.default_headers}")
        self._logger.debug(f"TIMEOUT: {self._config.timeout}")

        self._client = AsyncClient(**get_httpx_client_kwargs(self._config))

    @classmethod
    def from_env(
        cls,
        url: Optional[str] = None,
        default_headers: Optional[Mapping[HeaderKey, str]] = None,
        timeout: Optional[float] = None,
    ) -> "Host":
        """Build a host from ``RESTPOINT_*`` environment variables (and a ``.env`` file).

        Explicit arguments win over the environment.
        """
        load_dotenv()

        if env.get(f"{PREFIX}DEBUG", "").lower() in ("1", "true", "yes"):
            setup_logging(debug=True)

        url_value = url or env.get(f"{PREFIX}URL")
        if not url_value:
            raise BaseUrlMissingError()

        timeout_value = timeout
        if timeout_value is None:
            timeout_value = float(env.get(f"{PREFIX}TIMEOUT", DEFAULT_TIMEOUT))

        return cls(
            url_value,
            default_headers=default_headers,
            timeout=timeout_value,
            ca_bundle=env.get(f"{PREFIX}CA_BUNDLE"),
        )

    @property
    def url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> HostConfig:
        return self._config

    def get(
        self,
        path: str,
        params: QueryParams = (),
        headers: Optional[Mapping[HeaderKey, str]] = None,
    ) -> Request:
        """Send a GET request to ``path``.

        ``params`` is a flat list of ``(name, value)`` query pairs. Nested query
        structures need an ``Endpoint`` built with a nested ``ValidJSONObject``.
        """
        endpoint = Endpoint(
            HTTPMethod.GET, path, json=object_from_query(params), headers=headers
        )
        return self.request(endpoint)

    def post(
        self,
        path: str,
        json: ValidJSONObject,
        headers: Optional[Mapping[HeaderKey, str]] = None,
    ) -> Request:
        """Send a POST request with ``json`` as its body."""
        return self.request(Endpoint(HTTPMethod.POST, path, json=json, headers=headers))

    def put(
        self,
        path: str,
        json: ValidJSONObject,
        headers: Optional[Mapping[HeaderKey, str]] = None,
    ) -> Request:
        """Send a PUT request with ``json`` as its body."""
        return self.request(Endpoint(HTTPMethod.PUT, path, json=json, headers=headers))

    def delete(
        self,
        path: str,
        headers: Optional[Mapping[HeaderKey, str]] = None,
    ) -> Request:
        return self.request(Endpoint(HTTPMethod.DELETE, path, headers=headers))

    def request(self, endpoint: EndpointConvertible) -> Request:
        """Send the request described by anything convertible to an ``Endpoint``.

        Raises:
            InvalidBaseURLError: the host URL can't be resolved.
        """
        value = endpoint.endpoint_value
        wire_request = value.request(self._config.base_url)

        # Per-call headers already sit on the request; defaults only fill the gaps.
        for name, header in self._client.headers.multi_items():
            if name not in wire_request.headers:
                wire_request.headers[name] = header

        self._logger.debug(f"Request: {wire_request.method} {wire_request.url}")
        self._logger.debug(f"HEADERS: {dict(wire_request.headers)}")

        return Request(client=self._client, request=wire_request)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "Host":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
