"""Identifier helpers for building API paths."""

from typing import Any, Union
from urllib.parse import quote

from .exceptions import InvalidIDError

ID = Union[int, str]


def parse_id(value: Any) -> str:
    """Coerce a project, group or user identifier to its string form.

    Args:
        value: Numeric ID or a namespaced path such as ``group/project``

    Returns:
        The identifier as a string

    Raises:
        InvalidIDError: If the value is neither an int nor a string
    """
    if isinstance(value, bool):
        raise InvalidIDError(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidIDError(value)


def path_escape(value: str) -> str:
    """Escape a value for use as a single URL path segment.

    ``diaspora/diaspora`` becomes ``diaspora%2Fdiaspora``.
    """
    return quote(value, safe='')


def path_id(value: Any) -> str:
    """Parse and escape an identifier in one step."""
    return path_escape(parse_id(value))
