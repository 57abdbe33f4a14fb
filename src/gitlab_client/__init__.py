"""Python client for the GitLab REST API."""

__version__ = '0.1.0'

from .api import (  # noqa: E402
    GitLabAPIError,
    GitLabAuthenticationError,
    GitLabClient,
    GitLabClientFactory,
    GitLabError,
    GitLabNotFoundError,
    GitLabPermissionError,
    GitLabRateLimitError,
    GitLabServerError,
    GitLabValidationError,
    InvalidIDError,
    Request,
    Response,
    WebhookParseError,
    all_pages,
    all_pages_for_id,
    collect,
    page_iterator,
    page_iterator_for_id,
    parse_id,
    path_escape,
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
from .config import ClientConfig, Config, LoggingConfig  # noqa: E402
from .utils.logging import setup_logging  # noqa: E402
from .webhooks import (  # noqa: E402
    EventType,
    parse_hook,
    parse_system_hook,
    parse_webhook,
    verify_webhook_token,
    webhook_event_type,
)

__all__ = [
    '__version__',
    'GitLabClient',
    'GitLabClientFactory',
    'ClientConfig',
    'Config',
    'LoggingConfig',
    'setup_logging',
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
    'Request',
    'Response',
    'parse_id',
    'path_escape',
    'all_pages',
    'all_pages_for_id',
    'collect',
    'page_iterator',
    'page_iterator_for_id',
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
    'EventType',
    'parse_hook',
    'parse_system_hook',
    'parse_webhook',
    'verify_webhook_token',
    'webhook_event_type',
]
