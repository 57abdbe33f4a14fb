"""GitLab API exceptions."""

import json
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import unquote, urlsplit

import requests

from .response import SUCCESS_CODES

if TYPE_CHECKING:
    from .response import Response


class GitLabError(Exception):
    """Base exception for all errors raised by this library."""

    pass


class InvalidIDError(GitLabError, TypeError):
    """Identifier that is neither an int nor a string."""

    def __init__(self, value: Any):
        super().__init__(
            f'invalid ID type {_format_id(value)}, the ID must be an int or a string'
        )
        self.value = value


class GitLabAPIError(GitLabError):
    """Base exception for GitLab API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
        response: Optional['Response'] = None,
        body: Optional[bytes] = None,
    ):
        """Initialize GitLab API error.

        Args:
            message: Error message decoded from the response body
            status_code: HTTP status code
            response_data: Decoded JSON error body, if any
            response: Response descriptor of the failed call
            body: Raw response body
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data
        self.response = response
        self.body = body

    def __str__(self) -> str:
        if self.response is None or self.response.http_response is None:
            return self.message

        http_response = self.response.http_response
        request = http_response.request
        method = request.method if request is not None else 'GET'
        target = request.url if request is not None else http_response.url
        parts = urlsplit(target or '')
        url = f'{parts.scheme}://{parts.netloc}{unquote(parts.path)}'

        if not self.message:
            return f'{method} {url}: {self.status_code}'
        return f'{method} {url}: {self.status_code} {self.message}'


class GitLabValidationError(GitLabAPIError):
    """Validation error for API requests (400, 422)."""

    pass


class GitLabAuthenticationError(GitLabAPIError):
    """Authentication error with GitLab API."""

    pass


class GitLabPermissionError(GitLabAPIError):
    """Permission denied error."""

    pass


class GitLabNotFoundError(GitLabAPIError):
    """Resource not found error."""

    pass


class GitLabRateLimitError(GitLabAPIError):
    """Rate limit exceeded error."""

    def __init__(self, message: str, retry_after: int = 60, **kwargs):
        """Initialize rate limit error.

        Args:
            message: Error message
            retry_after: Seconds to wait before retry
            **kwargs: Additional arguments for base class
        """
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class GitLabServerError(GitLabAPIError):
    """Server side (5xx) error."""

    pass


class WebhookParseError(GitLabError):
    """Webhook payload could not be decoded into an event."""

    pass


_STATUS_ERRORS = {
    400: GitLabValidationError,
    401: GitLabAuthenticationError,
    403: GitLabPermissionError,
    404: GitLabNotFoundError,
    422: GitLabValidationError,
}


def _format_id(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return repr(value)


def parse_error(raw: Any) -> str:
    """Flatten a decoded GitLab error body into a single line.

    Objects are rendered as ``{key: value}`` fragments sorted and joined by
    ``, ``; lists as ``[a, b]``.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        return '[' + ', '.join(parse_error(v) for v in raw) + ']'
    if isinstance(raw, dict):
        errs = [f'{{{k}: {parse_error(v)}}}' for k, v in raw.items()]
        return ', '.join(sorted(errs))
    return f'failed to parse unexpected error type: {type(raw).__name__}'


def check_response(response: 'Response') -> None:
    """Raise the matching API error for a non-2xx response.

    Args:
        response: Response descriptor to inspect

    Raises:
        GitLabAPIError: For any status outside the success codes
    """
    if response.status_code in SUCCESS_CODES:
        return

    http_response: requests.Response = response.http_response
    body = http_response.content or b''
    message = ''
    response_data = None

    if body.strip():
        try:
            response_data = json.loads(body)
        except ValueError:
            message = (
                'failed to parse unknown error format: '
                f'{body.decode("utf-8", errors="replace")}'
            )
        else:
            message = parse_error(response_data)

    kwargs = dict(
        status_code=response.status_code,
        response_data=response_data,
        response=response,
        body=body,
    )

    if response.status_code == 429:
        retry_after = response.headers.get('Retry-After', '60')
        try:
            seconds = int(retry_after)
        except ValueError:
            seconds = 60
        raise GitLabRateLimitError(message, retry_after=seconds, **kwargs)

    if response.status_code >= 500:
        raise GitLabServerError(message, **kwargs)

    error_class = _STATUS_ERRORS.get(response.status_code, GitLabAPIError)
    raise error_class(message, **kwargs)
