import asyncio
from enum import Enum
from logging import getLogger
from typing import Any, Callable, Coroutine, Optional, TypeVar

import httpx

from ._utils._json import JSONError, parse_value
from .models.errors import (
    InvalidStatusCodeError,
    NonHTTPResponseError,
    TransportContractError,
)
from .models.results import DataResponse, Failure, JSONResponse, Result, Success
from .models.status_code import HTTPStatusCode

T = TypeVar("T")

DataCompletion = Callable[[Result[DataResponse]], None]
JSONCompletion = Callable[[Result[JSONResponse]], None]


class RequestState(str, Enum):
    CREATED = "created"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"


class Request:
    """One HTTP call, bound to the client of the ``Host`` that made it.

    Always obtained from a ``Host`` method, never built directly. The call starts
    when ``data`` or ``json`` is invoked; each ``Request`` can be started once.

    Both methods return an ``asyncio.Task`` resolving to a ``Result`` and accept an
    optional completion callable, invoked exactly once on the event loop::

        request = host.get("/user")
        result = await request.json()
        if isinstance(result, Success):
            status, body = result.value

    Failures carried by the ``Result``:

    - ``httpx.RequestError`` subclasses for connectivity, DNS, TLS and timeouts.
    - ``NonHTTPResponseError`` when the response has no HTTP semantics.
    - ``InvalidStatusCodeError`` when the status code isn't in the registry.
    - ``JSONError`` when ``json`` is used and the body isn't valid JSON.
    - ``asyncio.CancelledError`` when the request was cancelled.
    """

    def __init__(self, client: httpx.AsyncClient, request: httpx.Request) -> None:
        self._logger = getLogger("restpoint")
        self._client = client
        self._request = request
        self._task: Optional[asyncio.Task[Any]] = None
        self._cancelled = False
        self._state = RequestState.CREATED

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def wire_request(self) -> httpx.Request:
        return self._request

    def data(
        self, completion: Optional[DataCompletion] = None
    ) -> "asyncio.Task[Result[DataResponse]]":
        """Start the call and deliver the status, content type and raw body."""
        return self._start(self._fetch_data(), completion)

    def json(
        self, completion: Optional[JSONCompletion] = None
    ) -> "asyncio.Task[Result[JSONResponse]]":
        """Start the call and deliver the status and the body parsed as JSON."""
        return self._start(self._fetch_json(), completion)

    def cancel(self) -> bool:
        """Cancel the call. Safe to call any number of times."""
        if self._task is None or self._task.done() or self._cancelled:
            return False
        self._cancelled = self._task.cancel()
        return self._cancelled

    def _start(
        self,
        coroutine: Coroutine[Any, Any, Result[T]],
        completion: Optional[Callable[[Result[T]], None]],
    ) -> "asyncio.Task[Result[T]]":
        if self._state is not RequestState.CREATED:
            coroutine.close()
            raise RuntimeError("Request has already been started")

        task = asyncio.ensure_future(coroutine)
        self._task = task
        self._state = RequestState.IN_FLIGHT

        def on_done(finished: "asyncio.Task[Result[T]]") -> None:
            self._state = RequestState.COMPLETED
            if finished.cancelled():
                self._logger.debug("CANCELLED: request was cancelled")
                if completion is not None:
                    completion(Failure(asyncio.CancelledError()))
                return
            error = finished.exception()
            if error is not None:
                self._logger.critical(f"FATAL: {error}")
                raise error
            if completion is not None:
                completion(finished.result())

        task.add_done_callback(on_done)
        return task

    async def _fetch_json(self) -> Result[JSONResponse]:
        result = await self._fetch_data()
        return result.flat_map(self._decode_json)

    def _decode_json(self, response: DataResponse) -> Result[JSONResponse]:
        try:
            return Success(JSONResponse(response.status, parse_value(response.body)))
        except JSONError as e:
            self._logger.debug(f"ERROR: {e}")
            return Failure(e)

    async def _fetch_data(self) -> Result[DataResponse]:
        try:
            response = await self._client.send(self._request)
        except httpx.RequestError as e:
            self._logger.debug(f"ERROR: {e!r}")
            return Failure(e)

        self._logger.debug(f"RESPONSE: {response!r}")

        if response is None:
            raise TransportContractError()
        return self._classify(response)

    def _classify(self, response: Any) -> Result[DataResponse]:
        if not isinstance(response, httpx.Response):
            error: Exception = NonHTTPResponseError()
            self._logger.debug(f"ERROR: {error}")
            return Failure(error)

        body = response.content
        self._logger.debug(f"DATA: {body.decode('utf-8', errors='replace')}")

        try:
            status = HTTPStatusCode(response.status_code)
        except ValueError:
            error = InvalidStatusCodeError(response.status_code)
            self._logger.debug(f"ERROR: {error}")
            return Failure(error)

        return Success(
            DataResponse(
                status=status,
                content_type=response.headers.get("Content-Type"),
                body=body,
            )
        )
