"""Response descriptor with pagination metadata."""

from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, field_validator
from requests.structures import CaseInsensitiveDict

X_TOTAL = 'X-Total'
X_TOTAL_PAGES = 'X-Total-Pages'
X_PER_PAGE = 'X-Per-Page'
X_PAGE = 'X-Page'
X_NEXT_PAGE = 'X-Next-Page'
X_PREV_PAGE = 'X-Prev-Page'

LINK_PREV = 'prev'
LINK_NEXT = 'next'
LINK_FIRST = 'first'
LINK_LAST = 'last'

# Statuses treated as success by check_response
SUCCESS_CODES = (200, 201, 202, 204, 304)


class Response(BaseModel):
    """Wrapper around an HTTP response returned by every API call.

    Offset pagination values come from the ``X-*`` headers, keyset cursors
    from the ``Link`` header. Absent values are ``0`` or ``''``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int
    headers: CaseInsensitiveDict = Field(default_factory=CaseInsensitiveDict)
    success: bool = False

    total_items: int = 0
    total_pages: int = 0
    items_per_page: int = 0
    current_page: int = 0
    next_page: int = 0
    previous_page: int = 0

    next_link: str = ''
    previous_link: str = ''
    first_link: str = ''
    last_link: str = ''

    http_response: Optional[Any] = Field(default=None, exclude=True, repr=False)

    @field_validator('headers', mode='before')
    @classmethod
    def validate_headers(cls, v):
        """Keep header lookups case-insensitive."""
        if v is None:
            return CaseInsensitiveDict()
        if isinstance(v, CaseInsensitiveDict):
            return v
        return CaseInsensitiveDict(v)

    @classmethod
    def from_http(cls, http_response: requests.Response) -> 'Response':
        """Build a response descriptor from a ``requests`` response.

        Args:
            http_response: Raw HTTP response

        Returns:
            Response with pagination fields populated
        """
        headers = http_response.headers
        links = _parse_links(headers.get('Link', ''))

        return cls(
            status_code=http_response.status_code,
            headers=CaseInsensitiveDict(headers),
            success=http_response.status_code in SUCCESS_CODES,
            total_items=_header_int(headers, X_TOTAL),
            total_pages=_header_int(headers, X_TOTAL_PAGES),
            items_per_page=_header_int(headers, X_PER_PAGE),
            current_page=_header_int(headers, X_PAGE),
            next_page=_header_int(headers, X_NEXT_PAGE),
            previous_page=_header_int(headers, X_PREV_PAGE),
            next_link=links.get(LINK_NEXT, ''),
            previous_link=links.get(LINK_PREV, ''),
            first_link=links.get(LINK_FIRST, ''),
            last_link=links.get(LINK_LAST, ''),
            http_response=http_response,
        )


def _header_int(headers: Any, name: str) -> int:
    value = headers.get(name)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def _parse_links(value: str) -> Dict[str, str]:
    links: Dict[str, str] = {}
    if not value:
        return links
    for link in requests.utils.parse_header_links(value):
        rel = link.get('rel')
        if rel and link.get('url'):
            links[rel] = link['url']
    return links
