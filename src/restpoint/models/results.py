from dataclasses import dataclass
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar, Union

from pydantic import JsonValue

from .errors import UnexpectedStatusError
from .status_code import HTTPStatusCode

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, transform: Callable[[T], U]) -> "Success[U]":
        return Success(transform(self.value))

    def flat_map(self, transform: Callable[[T], "Result[U]"]) -> "Result[U]":
        return transform(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: BaseException

    @property
    def is_success(self) -> bool:
        return False

    def map(self, transform: Callable[[Any], Any]) -> "Failure":
        return self

    def flat_map(self, transform: Callable[[Any], Any]) -> "Failure":
        return self

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success[T], Failure]


class DataResponse(NamedTuple):
    """Outcome of a raw completion: status, content type and body bytes."""

    status: HTTPStatusCode
    content_type: Optional[str]
    body: bytes

    def expect(self, *statuses: Union[int, range]) -> "DataResponse":
        _expect(self.status, statuses)
        return self


class JSONResponse(NamedTuple):
    """Outcome of a JSON completion: status and the parsed body."""

    status: HTTPStatusCode
    json: JsonValue

    def expect(self, *statuses: Union[int, range]) -> "JSONResponse":
        _expect(self.status, statuses)
        return self


def _expect(status: HTTPStatusCode, statuses: tuple[Union[int, range], ...]) -> None:
    if not any(status.matches(pattern) for pattern in statuses):
        raise UnexpectedStatusError(status)
