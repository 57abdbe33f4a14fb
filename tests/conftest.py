"""Shared fixtures: a fake GitLab server routed by method and path."""

import json
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import patch
from urllib.parse import urlsplit

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from gitlab_client import ClientConfig, GitLabClient

BASE_URL = 'https://gitlab.example.com'
API_PREFIX = '/api/v4'


def make_response(
    status_code: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    method: str = 'GET',
    url: str = f'{BASE_URL}{API_PREFIX}/',
) -> requests.Response:
    """Build a real ``requests.Response`` from test data."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b''
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    response.request = requests.Request(method, url).prepare()
    response.encoding = 'utf-8'
    return response


class RecordedRequest:
    """Request as seen by the fake server."""

    def __init__(self, method, url, params=None, data=None, headers=None, timeout=None):
        self.method = method
        self.url = url
        path = urlsplit(url).path
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]
        self.path = path
        self.params = params or {}
        self.data = data
        self.headers = headers or {}
        self.timeout = timeout

    @property
    def json(self) -> Any:
        if not self.data:
            return None
        return json.loads(self.data)


class Mux:
    """Routes ``Session.request`` calls to canned responses.

    Paths are matched exactly as sent, i.e. still percent-encoded and
    relative to ``/api/v4``. Several responses registered for one route are
    served in order, the last one repeating. Unknown routes get a 404.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], List[Any]] = {}
        self.requests: List[RecordedRequest] = []

    def handle(
        self,
        method: str,
        path: str,
        body: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.routes.setdefault((method, path), []).append((status_code, body, headers))

    def handle_error(self, method: str, path: str, error: Exception) -> None:
        self.routes.setdefault((method, path), []).append(error)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    def __call__(self, method, url, params=None, data=None, headers=None, timeout=None):
        recorded = RecordedRequest(method, url, params, data, headers, timeout)
        self.requests.append(recorded)

        queue = self.routes.get((method, recorded.path))
        if not queue:
            return make_response(
                404, {'message': '404 Not Found'}, method=method, url=url
            )

        entry = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(entry, Exception):
            raise entry
        status_code, body, headers = entry
        return make_response(status_code, body, headers, method=method, url=url)


@pytest.fixture
def mux():
    server = Mux()
    with patch('requests.Session.request', side_effect=server):
        yield server


@pytest.fixture
def client(mux):
    return GitLabClient(
        ClientConfig(url=BASE_URL, token='test-token'),
        backoff=lambda attempt, response: 0,
    )
