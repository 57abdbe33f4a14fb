"""HTTP plumbing shared by every resource service."""

from .client import GitLabClient, GitLabClientFactory
from .exceptions import (
    GitLabAPIError,
    GitLabAuthenticationError,
    GitLabError,
    GitLabNotFoundError,
    GitLabPermissionError,
    GitLabRateLimitError,
    GitLabServerError,
    GitLabValidationError,
    InvalidIDError,
    WebhookParseError,
)
from .ids import parse_id, path_escape
from .pagination import (
    all_pages,
    all_pages_for_id,
    collect,
    page_iterator,
    page_iterator_for_id,
)
from .request_options import (
    Request,
    RequestOptionFunc,
    with_body,
    with_header,
    with_headers,
    with_json_body,
    with_keyset_pagination_parameters,
    with_md5,
    with_query_parameters,
    with_sudo,
    with_timeout,
    with_token,
)
from .response import Response

__all__ = [
    'GitLabClient',
    'GitLabClientFactory',
    'GitLabError',
    'GitLabAPIError',
    'GitLabAuthenticationError',
    'GitLabNotFoundError',
    'GitLabPermissionError',
    'GitLabRateLimitError',
    'GitLabServerError',
    'GitLabValidationError',
    'InvalidIDError',
    'WebhookParseError',
    'parse_id',
    'path_escape',
    'all_pages',
    'all_pages_for_id',
    'collect',
    'page_iterator',
    'page_iterator_for_id',
    'Request',
    'RequestOptionFunc',
    'Response',
    'with_body',
    'with_header',
    'with_headers',
    'with_json_body',
    'with_keyset_pagination_parameters',
    'with_md5',
    'with_query_parameters',
    'with_sudo',
    'with_timeout',
    'with_token',
]
