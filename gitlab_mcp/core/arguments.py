"""Typed extraction from the untyped tool argument dict.

MCP delivers arguments as decoded JSON, so numbers may arrive as int or
float and any key may be missing or carry the wrong type. Each getter
returns the caller's default in that case instead of raising.
"""

from __future__ import annotations

from typing import Any


def get_string(arguments: dict[str, Any], key: str, default: str = "") -> str:
    """Return arguments[key] if it is a string, else default."""
    value = arguments.get(key)
    return value if isinstance(value, str) else default


def get_int(arguments: dict[str, Any], key: str, default: int) -> int:
    """Return arguments[key] truncated to int if it is numeric, else default."""
    value = arguments.get(key)
    # bool is an int subclass; JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    try:
        return int(value)
    except (OverflowError, ValueError):
        # inf / nan
        return default


def get_bool(arguments: dict[str, Any], key: str) -> bool | None:
    """Return arguments[key] if it is a bool, else None."""
    value = arguments.get(key)
    return value if isinstance(value, bool) else None


def get_list(arguments: dict[str, Any], key: str) -> list | None:
    """Return arguments[key] if it is a list, else None."""
    value = arguments.get(key)
    return value if isinstance(value, list) else None


def require_string(arguments: dict[str, Any], key: str) -> tuple[str, bool]:
    """Return (value, present) where present means a non-empty string was given."""
    value = get_string(arguments, key)
    return value, value != ""


def missing(field: str) -> str:
    """Error message for an absent required argument."""
    return f"{field} is required"


# =============================================================================
# List Parsers
# =============================================================================

def _tokens(value: str) -> list[str]:
    return [part.strip() for part in value.split(",")] if value else []


def split_labels(value: str) -> list[str]:
    """
    Split a comma-separated label string.

    >>> split_labels(" bug , ui ,")
    ['bug', 'ui']
    """
    return [token for token in _tokens(value) if token]


def parse_int_list(value: str) -> list[int]:
    """
    Parse a comma-separated list of integer IDs, skipping invalid tokens.

    >>> parse_int_list("1, 2,,abc,3")
    [1, 2, 3]
    """
    ids = []
    for token in _tokens(value):
        if not token:
            continue
        try:
            ids.append(int(token))
        except ValueError:
            continue
    return ids


def author_options(arguments: dict[str, Any]) -> dict[str, str]:
    """Commit author overrides (author_email, author_name), only the ones given."""
    options = {}
    for key in ("author_email", "author_name"):
        value = get_string(arguments, key)
        if value:
            options[key] = value
    return options
