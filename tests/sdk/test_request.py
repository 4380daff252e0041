import asyncio
from typing import Any, Callable

import httpx
import pytest
from pytest_httpx import HTTPXMock

from restpoint import (
    DataResponse,
    Failure,
    Host,
    HTTPStatusCode,
    InvalidStatusCodeError,
    JSONError,
    NonHTTPResponseError,
    RequestState,
    Success,
    TransportContractError,
)


def _completion_future() -> tuple["asyncio.Future[Any]", list[Any], Callable[[Any], None]]:
    future = asyncio.get_running_loop().create_future()
    calls: list[Any] = []

    def completion(result: Any) -> None:
        calls.append(result)
        future.set_result(result)

    return future, calls, completion


class TestRequest:
    class TestData:
        @pytest.mark.asyncio
        async def test_success(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(
                text="some text", headers={"Content-Type": "text/html"}
            )

            result = await host.get("/").data()

            assert result == Success(
                DataResponse(HTTPStatusCode.OK, "text/html", b"some text")
            )

        @pytest.mark.asyncio
        async def test_non_success_status_is_not_an_error(
            self, httpx_mock: HTTPXMock, host: Host
        ):
            httpx_mock.add_response(status_code=404)

            result = await host.get("/").data()

            assert isinstance(result, Success)
            assert result.value.status is HTTPStatusCode.NOT_FOUND
            assert result.value.content_type is None

        @pytest.mark.asyncio
        async def test_invalid_status_code(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(status_code=800)

            result = await host.get("/").data()

            assert isinstance(result, Failure)
            assert isinstance(result.error, InvalidStatusCodeError)
            assert result.error.status_code == 800

        @pytest.mark.asyncio
        async def test_timeout_is_passed_through(
            self, httpx_mock: HTTPXMock, host: Host
        ):
            timeout = httpx.ReadTimeout("Timed out")
            httpx_mock.add_exception(timeout)

            result = await host.get("/").json()

            assert result == Failure(timeout)

        @pytest.mark.asyncio
        async def test_connect_error_is_passed_through(
            self, httpx_mock: HTTPXMock, host: Host
        ):
            httpx_mock.add_exception(httpx.ConnectError("Name or service not known"))

            result = await host.get("/").data()

            assert isinstance(result, Failure)
            assert isinstance(result.error, httpx.ConnectError)

        @pytest.mark.asyncio
        async def test_non_http_response(
            self, host: Host, monkeypatch: pytest.MonkeyPatch
        ):
            async def send(request: httpx.Request) -> object:
                return object()

            monkeypatch.setattr(host._client, "send", send)

            result = await host.get("/").data()

            assert isinstance(result, Failure)
            assert isinstance(result.error, NonHTTPResponseError)

        @pytest.mark.asyncio
        async def test_transport_contract_violation_is_fatal(
            self, host: Host, monkeypatch: pytest.MonkeyPatch
        ):
            async def send(request: httpx.Request) -> None:
                return None

            monkeypatch.setattr(host._client, "send", send)
            calls: list[Any] = []
            loop = asyncio.get_running_loop()
            monkeypatch.setattr(loop, "call_exception_handler", lambda context: None)

            with pytest.raises(TransportContractError):
                await host.get("/").data(calls.append)
            await asyncio.sleep(0)

            assert calls == []

    class TestJSON:
        @pytest.mark.asyncio
        async def test_object(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(json={"hello": "world"})

            result = await host.get("/").json()

            assert result.unwrap().json == {"hello": "world"}

        @pytest.mark.asyncio
        async def test_fragment(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(
                text='"fragment"', headers={"Content-Type": "application/json"}
            )

            result = await host.get("/").json()

            assert result.unwrap() == (HTTPStatusCode.OK, "fragment")

        @pytest.mark.asyncio
        async def test_malformed_body(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(
                text="some text", headers={"Content-Type": "text/html"}
            )
            httpx_mock.add_response(
                text="some text", headers={"Content-Type": "text/html"}
            )

            raw = await host.get("/").data()
            parsed = await host.get("/").json()

            assert raw.is_success
            assert isinstance(parsed, Failure)
            assert isinstance(parsed.error, JSONError)
            assert parsed.error.errors()[0]["type"] == "json_invalid"

        @pytest.mark.asyncio
        async def test_raw_failure_passes_through(
            self, httpx_mock: HTTPXMock, host: Host
        ):
            httpx_mock.add_response(status_code=800)

            result = await host.get("/").json()

            assert isinstance(result, Failure)
            assert isinstance(result.error, InvalidStatusCodeError)

    class TestCompletion:
        @pytest.mark.asyncio
        async def test_completion_fires_once(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(json={"id": 1})
            future, calls, completion = _completion_future()

            request = host.get("/")
            assert request.state is RequestState.CREATED
            task = request.json(completion)
            assert request.state is RequestState.IN_FLIGHT

            result = await future
            await task

            assert result.unwrap().json == {"id": 1}
            assert len(calls) == 1
            assert request.state is RequestState.COMPLETED

        @pytest.mark.asyncio
        async def test_request_is_single_use(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response()

            request = host.get("/")
            await request.data()

            with pytest.raises(RuntimeError):
                request.json()

        @pytest.mark.asyncio
        async def test_concurrent_requests(self, httpx_mock: HTTPXMock, host: Host):
            httpx_mock.add_response(url="https://test.restpoint.dev/v1/a", json="a")
            httpx_mock.add_response(url="https://test.restpoint.dev/v1/b", json="b")

            a, b = await asyncio.gather(host.get("/a").json(), host.get("/b").json())

            assert a.unwrap().json == "a"
            assert b.unwrap().json == "b"

    class TestCancel:
        @pytest.mark.asyncio
        async def test_cancel_delivers_cancellation_once(
            self, host: Host, monkeypatch: pytest.MonkeyPatch
        ):
            async def send(request: httpx.Request) -> httpx.Response:
                await asyncio.sleep(10)
                return httpx.Response(200)

            monkeypatch.setattr(host._client, "send", send)
            future, calls, completion = _completion_future()

            request = host.get("/")
            request.data(completion)
            await asyncio.sleep(0)

            assert request.cancel() is True
            assert request.cancel() is False

            result = await future
            await asyncio.sleep(0)

            assert isinstance(result, Failure)
            assert isinstance(result.error, asyncio.CancelledError)
            assert len(calls) == 1
            assert request.cancel() is False

        @pytest.mark.asyncio
        async def test_cancel_before_start(self, host: Host):
            assert host.get("/").cancel() is False
