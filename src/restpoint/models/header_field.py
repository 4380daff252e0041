from typing import Mapping, Union


class HTTPHeaderField:
    """An alternative to stringly-typed HTTP header names.

    Common headers are available as class constants (``HTTPHeaderField.CONTENT_TYPE``).
    Anything else can be represented with ``HTTPHeaderField.custom("X-Foo")``.

    Equality and hashing are based on the wire name, so a named constant and the
    equivalent custom field are the same dictionary key::

        HTTPHeaderField.ORIGIN == HTTPHeaderField.custom("Origin")

    Comparison is exact, not case-insensitive.
    """

    __slots__ = ("_name",)

    ACCEPT: "HTTPHeaderField"
    ACCEPT_CHARSET: "HTTPHeaderField"
    ACCEPT_ENCODING: "HTTPHeaderField"
    ACCEPT_LANGUAGE: "HTTPHeaderField"
    ACCEPT_VERSION: "HTTPHeaderField"
    AUTHORIZATION: "HTTPHeaderField"
    CACHE_CONTROL: "HTTPHeaderField"
    CONNECTION: "HTTPHeaderField"
    COOKIE: "HTTPHeaderField"
    CONTENT_LENGTH: "HTTPHeaderField"
    CONTENT_MD5: "HTTPHeaderField"
    CONTENT_TYPE: "HTTPHeaderField"
    DATE: "HTTPHeaderField"
    HOST: "HTTPHeaderField"
    ORIGIN: "HTTPHeaderField"
    REFERER: "HTTPHeaderField"
    USER_AGENT: "HTTPHeaderField"

    def __init__(self, name: str) -> None:
        self._name = name

    @classmethod
    def custom(cls, name: str) -> "HTTPHeaderField":
        return cls(name)

    @property
    def description(self) -> str:
        """The header name as it appears on the wire."""
        return self._name

    @property
    def is_custom(self) -> bool:
        return self._name not in _NAMED_FIELDS

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        named = _NAMED_FIELDS.get(self._name)
        if named is not None:
            return f"HTTPHeaderField.{named}"
        return f"HTTPHeaderField.custom({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HTTPHeaderField):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash(self.description)


_NAMED_FIELDS = {
    "Accept": "ACCEPT",
    "Accept-Charset": "ACCEPT_CHARSET",
    "Accept-Encoding": "ACCEPT_ENCODING",
    "Accept-Language": "ACCEPT_LANGUAGE",
    "Accept-Version": "ACCEPT_VERSION",
    "Authorization": "AUTHORIZATION",
    "Cache-Control": "CACHE_CONTROL",
    "Connection": "CONNECTION",
    "Cookie": "COOKIE",
    "Content-Length": "CONTENT_LENGTH",
    "Content-MD5": "CONTENT_MD5",
    "Content-Type": "CONTENT_TYPE",
    "Date": "DATE",
    "Host": "HOST",
    "Origin": "ORIGIN",
    "Referer": "REFERER",
    "User-Agent": "USER_AGENT",
}

for _wire_name, _attribute in _NAMED_FIELDS.items():
    setattr(HTTPHeaderField, _attribute, HTTPHeaderField(_wire_name))


HeaderKey = Union[HTTPHeaderField, str]


def header_fields(headers: Mapping[HeaderKey, str] | None) -> dict[HTTPHeaderField, str]:
    """Normalize a header mapping so every key is an ``HTTPHeaderField``.

    Plain string keys are treated as custom fields. When two keys share a wire
    name the later one wins.
    """
    fields: dict[HTTPHeaderField, str] = {}
    for key, value in (headers or {}).items():
        field = key if isinstance(key, HTTPHeaderField) else HTTPHeaderField.custom(key)
        fields[field] = value
    return fields


def wire_headers(headers: Mapping[HTTPHeaderField, str]) -> dict[str, str]:
    """Convert header fields to their canonical wire-string keys."""
    return {field.description: value for field, value in headers.items()}
