from typing import Any, Optional

from ._json import ValidJSONObject

_DELIMITER = "/"


def json_to_query(json: ValidJSONObject) -> list[tuple[str, str]]:
    """Flatten a JSON object into query parameters using Rails conventions.

    ``{"a": {"b": 1}}`` becomes ``a[b]=1`` and ``{"a": ["x", "y"]}`` becomes
    ``a[]=x&a[]=y``. See http://codefol.io/posts/How-Does-Rack-Parse-Query-Params-With-parse-nested-query
    """
    # The recursive helper has to accept any JSON value; only the entry point
    # is restricted to objects.
    return _any_json_to_query(json.root, prefix=None)


def _any_json_to_query(value: Any, prefix: Optional[str]) -> list[tuple[str, str]]:
    items: list[tuple[str, str]] = []

    if isinstance(value, dict):
        for key, nested in value.items():
            new_prefix = key if prefix is None else f"{prefix}[{key}]"
            items.extend(_any_json_to_query(nested, new_prefix))

    elif isinstance(value, list):
        if prefix is None:
            raise ValueError("Top-level array encountered when converting to params.")
        for element in value:
            items.extend(_any_json_to_query(element, f"{prefix}[]"))

    else:
        if prefix is None:
            raise ValueError("Top-level value encountered when converting to params.")
        items.append((prefix, _stringify(value)))

    return items


def _stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_path(base_path: str, path: str) -> str:
    """Join two URL paths with exactly one separator between them.

    Trailing separators of ``base_path`` and leading separators of ``path`` are
    dropped; separators inside either are kept as is.
    """
    return base_path.rstrip(_DELIMITER) + _DELIMITER + path.lstrip(_DELIMITER)
