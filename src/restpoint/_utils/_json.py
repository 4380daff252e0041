"""JSON types backed by pydantic.

``ValidJSONObject`` guarantees its top-level value is an object. ``AnyJSON`` is
any JSON value at all, which is what a response body may parse to.
"""

from typing import Optional, Sequence

from pydantic import JsonValue, RootModel, TypeAdapter, ValidationError

AnyJSON = JsonValue
JSONObject = dict[str, JsonValue]

# Malformed JSON surfaces as pydantic's error, unwrapped.
JSONError = ValidationError

_ANY_JSON = TypeAdapter(JsonValue)


class ValidJSONObject(RootModel[JSONObject]):
    """A JSON object, validated on construction.

    ``ValidJSONObject({"name": "Josh"})`` succeeds, while a bare list, scalar or
    a mapping holding non-JSON values raises ``pydantic.ValidationError``.
    """

    @property
    def value(self) -> JSONObject:
        return self.root

    def data(self) -> bytes:
        """UTF-8 encoded, compact serialization."""
        return self.model_dump_json().encode("utf-8")


def parse_value(body: bytes) -> AnyJSON:
    """Parse ``body`` as any JSON value, fragments included.

    Raises:
        JSONError: the body isn't well-formed JSON.
    """
    return _ANY_JSON.validate_json(body)


def object_from_query(params: Sequence[tuple[str, Optional[str]]]) -> ValidJSONObject:
    """Fold a flat list of ``(name, value)`` pairs into a single-level object.

    Later pairs overwrite earlier ones with the same name; a ``None`` value
    removes the name.
    """
    json: JSONObject = {}
    for name, value in params:
        if value is None:
            json.pop(name, None)
        else:
            json[name] = value
    return ValidJSONObject(json)
