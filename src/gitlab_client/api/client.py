"""GitLab API client implementation."""

import json
import random
import time
from typing import Any, Callable, Iterable, List, Optional, Tuple
from urllib.parse import urljoin

import requests
from pydantic import TypeAdapter

from .. import __version__
from ..config.config import ClientConfig
from ..utils.logging import get_logger
from .exceptions import GitLabAuthenticationError, check_response
from .rate_limiter import RateLimiter
from .request_options import AUTH_HEADERS, Request, RequestOptionFunc
from .response import Response

# attempt number, response of the failed attempt (None on connection errors)
Backoff = Callable[[int, Optional[requests.Response]], float]

_NO_BODY_METHODS = ('GET', 'HEAD')


class GitLabClient:
    """GitLab API client with authentication, retries and typed decoding.

    Every resource service is available as an attribute, e.g.
    ``client.projects`` or ``client.merge_requests``.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        backoff: Optional[Backoff] = None,
        session: Optional[requests.Session] = None,
        request_options: Iterable[RequestOptionFunc] = (),
    ):
        """Initialize GitLab client.

        Args:
            config: GitLab instance configuration
            backoff: Custom wait calculation between retries
            session: Pre-configured requests session
            request_options: Options applied to every request of this client
        """
        self.config = config or ClientConfig()
        self.base_url = (
            f'{self.config.url}/api/{self.config.api_version}/'
        )
        self.session = session or requests.Session()
        self.session.verify = self.config.verify_ssl
        self.backoff = backoff or self._default_backoff
        self.default_request_options: List[RequestOptionFunc] = list(
            request_options
        )
        self.rate_limiter = (
            RateLimiter(self.config.rate_limit_per_second)
            if self.config.rate_limit_per_second
            else None
        )
        self.logger = get_logger('GitLabClient')

        self._auth_headers = {}
        if self.config.auth_type:
            header, template = AUTH_HEADERS[self.config.auth_type]
            self._auth_headers[header] = template.format(token=self.config.auth_token)

        self._init_services()

        self.logger.info(f'Initialized GitLab client for {self.config.url}')

    def _init_services(self) -> None:
        from ..services import (
            AccessRequestsService,
            BranchesService,
            CommitsService,
            DeploymentsService,
            EventsService,
            GroupsService,
            GroupVariablesService,
            InstanceVariablesService,
            IssuesService,
            JobsService,
            LabelsService,
            MergeRequestsService,
            MilestonesService,
            NotesService,
            PersonalAccessTokensService,
            PipelinesService,
            ProjectsService,
            ProjectVariablesService,
            ProtectedBranchesService,
            ReleasesService,
            RepositoryFilesService,
            SearchService,
            TagsService,
            TodosService,
            UsersService,
            VersionService,
        )

        self.access_requests = AccessRequestsService(self)
        self.branches = BranchesService(self)
        self.commits = CommitsService(self)
        self.deployments = DeploymentsService(self)
        self.events = EventsService(self)
        self.groups = GroupsService(self)
        self.group_variables = GroupVariablesService(self)
        self.instance_variables = InstanceVariablesService(self)
        self.issues = IssuesService(self)
        self.jobs = JobsService(self)
        self.labels = LabelsService(self)
        self.merge_requests = MergeRequestsService(self)
        self.milestones = MilestonesService(self)
        self.notes = NotesService(self)
        self.personal_access_tokens = PersonalAccessTokensService(self)
        self.pipelines = PipelinesService(self)
        self.projects = ProjectsService(self)
        self.project_variables = ProjectVariablesService(self)
        self.protected_branches = ProtectedBranchesService(self)
        self.releases = ReleasesService(self)
        self.repository_files = RepositoryFilesService(self)
        self.search = SearchService(self)
        self.tags = TagsService(self)
        self.todos = TodosService(self)
        self.users = UsersService(self)
        self.version = VersionService(self)

    def _build_url(self, endpoint: str) -> str:
        """Build full API URL from an already escaped endpoint path.

        Args:
            endpoint: API endpoint path

        Returns:
            Full API URL
        """
        return urljoin(self.base_url, endpoint.lstrip('/'))

    def new_request(
        self,
        method: str,
        path: str,
        opt: Any = None,
        options: Iterable[RequestOptionFunc] = (),
    ) -> Request:
        """Create an API request.

        For GET and HEAD requests ``opt`` is encoded into the query string,
        for every other method it becomes the JSON body. Client-level request
        options run first, then ``options`` in order.

        Args:
            method: HTTP method
            path: Escaped path relative to the API base URL
            opt: Options model, mapping or ``None``
            options: Per-call request option functions

        Returns:
            Request ready to be sent with ``do``
        """
        headers = {
            'Accept': 'application/json',
            'User-Agent': self.config.user_agent or f'gitlab-client/{__version__}',
        }
        headers.update(self._auth_headers)

        req = Request(
            method,
            self._build_url(path),
            headers=headers,
            timeout=self.config.timeout,
        )

        if opt is not None:
            if req.method in _NO_BODY_METHODS:
                req.params = (
                    opt.query_params() if hasattr(opt, 'query_params') else dict(opt)
                )
            else:
                data = opt.json_body() if hasattr(opt, 'json_body') else opt
                req.body = json.dumps(data).encode('utf-8')
                req.headers['Content-Type'] = 'application/json'

        for option in [*self.default_request_options, *options]:
            if option is not None:
                option(req)

        return req

    def do(self, request: Request, result_type: Any = None) -> Tuple[Any, Response]:
        """Send an API request and decode the response.

        Args:
            request: Request built by ``new_request``
            result_type: Model class, ``List[Model]``, ``bytes``, ``str`` or
                ``None`` to skip decoding

        Returns:
            Tuple of decoded result and response descriptor

        Raises:
            GitLabAPIError: For non-2xx responses
            requests.RequestException: For transport errors after retries
        """
        http_response = self._send(request)
        response = Response.from_http(http_response)

        try:
            check_response(response)
        except Exception as e:
            self.logger.error(f'{request.method} {request.url} failed: {e}')
            raise

        return self._decode(http_response, result_type), response

    def _send(self, request: Request) -> requests.Response:
        attempt = 0
        while True:
            if self.rate_limiter is not None:
                if not self.rate_limiter.can_proceed():
                    self.logger.debug(
                        'Client rate limit reached, waiting '
                        f'{self.rate_limiter.time_until_next_request():.2f}s'
                    )
                self.rate_limiter.acquire()

            self.logger.debug(
                f'{request.method} {request.url} params={request.params} '
                f'(attempt {attempt + 1})'
            )

            try:
                http_response = self.session.request(
                    request.method,
                    request.url,
                    params=request.params or None,
                    data=request.body,
                    headers=request.headers,
                    timeout=request.timeout,
                )
            except requests.ConnectionError as e:
                if attempt >= self.config.max_retries:
                    self.logger.error(f'Network error during API request: {e}')
                    raise
                wait = self.backoff(attempt, None)
                self.logger.warning(
                    f'Connection error, retrying in {wait:.2f}s: {e}'
                )
                time.sleep(wait)
                attempt += 1
                continue

            if (
                self._should_retry(http_response.status_code)
                and attempt < self.config.max_retries
            ):
                wait = self.backoff(attempt, http_response)
                self.logger.warning(
                    f'Retryable status {http_response.status_code} for '
                    f'{request.method} {request.url}, waiting {wait:.2f}s'
                )
                time.sleep(wait)
                attempt += 1
                continue

            return http_response

    @staticmethod
    def _should_retry(status_code: int) -> bool:
        return status_code == 429 or (status_code >= 500 and status_code != 501)

    def _default_backoff(
        self, attempt: int, http_response: Optional[requests.Response]
    ) -> float:
        """Wait calculation honouring GitLab's rate limit headers."""
        if http_response is not None and http_response.status_code == 429:
            retry_after = http_response.headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass
            reset = http_response.headers.get('RateLimit-Reset')
            if reset:
                try:
                    return max(0.0, float(reset) - time.time())
                except ValueError:
                    pass

        wait = self.config.retry_wait_min * (2**attempt)
        # Jitter spreads concurrent retries
        wait += random.uniform(0, self.config.retry_wait_min)
        return min(wait, self.config.retry_wait_max)

    @staticmethod
    def _decode(http_response: requests.Response, result_type: Any) -> Any:
        if result_type is None:
            return None
        if result_type is bytes:
            return http_response.content
        if result_type is str:
            return http_response.text
        if not http_response.content or not http_response.content.strip():
            return None
        return TypeAdapter(result_type).validate_python(http_response.json())

    def close(self) -> None:
        """Close the client session."""
        self.session.close()
        self.logger.info('GitLab client session closed')

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class GitLabClientFactory:
    """Factory for creating GitLab API clients."""

    @staticmethod
    def create_client(config: ClientConfig, **kwargs) -> GitLabClient:
        """Create GitLab client from configuration.

        Args:
            config: GitLab instance configuration
            **kwargs: Extra arguments for ``GitLabClient``

        Returns:
            Configured GitLab client
        """
        return GitLabClient(config, **kwargs)

    @staticmethod
    def from_token(
        token: str, url: str = 'https://gitlab.com', **kwargs
    ) -> GitLabClient:
        """Create a client authenticated with a personal access token."""
        return GitLabClient(ClientConfig(url=url, token=token), **kwargs)

    @staticmethod
    def from_oauth_token(
        token: str, url: str = 'https://gitlab.com', **kwargs
    ) -> GitLabClient:
        """Create a client authenticated with an OAuth access token."""
        return GitLabClient(ClientConfig(url=url, oauth_token=token), **kwargs)

    @staticmethod
    def from_job_token(
        token: str, url: str = 'https://gitlab.com', **kwargs
    ) -> GitLabClient:
        """Create a client authenticated with a CI job token."""
        return GitLabClient(ClientConfig(url=url, job_token=token), **kwargs)

    @staticmethod
    def from_basic_auth(
        username: str,
        password: str,
        url: str = 'https://gitlab.com',
        session: Optional[requests.Session] = None,
        **kwargs,
    ) -> GitLabClient:
        """Create a client by exchanging credentials for an OAuth token.

        Uses the OAuth2 resource owner password grant on ``/oauth/token``.

        Raises:
            GitLabAuthenticationError: If GitLab does not issue a token
        """
        config = ClientConfig(url=url)
        session = session or requests.Session()
        http_response = session.request(
            'POST',
            f'{config.url}/oauth/token',
            data={
                'grant_type': 'password',
                'username': username,
                'password': password,
            },
            headers={'Accept': 'application/json'},
            timeout=config.timeout,
        )
        response = Response.from_http(http_response)
        check_response(response)

        token = (http_response.json() or {}).get('access_token')
        if not token:
            raise GitLabAuthenticationError(
                'OAuth token response did not contain an access_token',
                status_code=response.status_code,
                response=response,
            )

        oauth_config = config.model_copy(update={'oauth_token': token})
        return GitLabClient(oauth_config, session=session, **kwargs)
