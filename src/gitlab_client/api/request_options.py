"""Request option functions.

A request option is any callable that receives the outgoing ``Request`` and
mutates it. They can be passed to every service method, e.g.::

    client.projects.get_project('group/project', None, with_sudo('root'))

Options that cannot be applied raise, and the error propagates to the caller
before anything is sent.
"""

import base64
import hashlib
import json
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import parse_qs, urlsplit

from .ids import parse_id


class Request:
    """Mutable description of an outgoing API request."""

    def __init__(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Union[bytes, str]] = None,
        timeout: Optional[float] = None,
    ):
        self.method = method.upper()
        self.url = url
        self.params: Dict[str, Any] = params or {}
        self.headers: Dict[str, str] = headers or {}
        self.body = body
        self.timeout = timeout

    def body_bytes(self) -> bytes:
        if self.body is None:
            return b''
        if isinstance(self.body, str):
            return self.body.encode('utf-8')
        return self.body

    def __repr__(self) -> str:
        return f'<Request {self.method} {self.url}>'


RequestOptionFunc = Callable[[Request], None]

# auth type -> (header, value template)
AUTH_HEADERS = {
    'private_token': ('PRIVATE-TOKEN', '{token}'),
    'oauth_token': ('Authorization', 'Bearer {token}'),
    'job_token': ('JOB-TOKEN', '{token}'),
}


def with_sudo(uid: Any) -> RequestOptionFunc:
    """Perform the request as another user (username or user ID)."""

    def apply(req: Request) -> None:
        req.headers['Sudo'] = parse_id(uid)

    return apply


def with_header(name: str, value: str) -> RequestOptionFunc:
    """Set a single header on the request."""

    def apply(req: Request) -> None:
        req.headers[name] = value

    return apply


def with_headers(headers: Mapping[str, str]) -> RequestOptionFunc:
    """Set several headers on the request."""

    def apply(req: Request) -> None:
        req.headers.update(headers)

    return apply


def with_token(auth_type: str, token: str) -> RequestOptionFunc:
    """Authenticate this request with a different token.

    Args:
        auth_type: One of ``private_token``, ``oauth_token`` or ``job_token``
        token: Token value
    """
    if auth_type not in AUTH_HEADERS:
        raise ValueError(f'unknown auth type: {auth_type}')

    def apply(req: Request) -> None:
        for header in ('PRIVATE-TOKEN', 'Authorization', 'JOB-TOKEN'):
            req.headers.pop(header, None)
        header, template = AUTH_HEADERS[auth_type]
        req.headers[header] = template.format(token=token)

    return apply


def with_timeout(seconds: float) -> RequestOptionFunc:
    """Bound this request by a timeout in seconds."""

    def apply(req: Request) -> None:
        req.timeout = seconds

    return apply


def with_keyset_pagination_parameters(next_link: str) -> RequestOptionFunc:
    """Copy the query parameters of a ``Link: rel="next"`` URL onto the request.

    An empty link leaves the request untouched.
    """

    def apply(req: Request) -> None:
        if not next_link:
            return
        query = parse_qs(urlsplit(next_link).query, keep_blank_values=True)
        for key, values in query.items():
            req.params[key] = values[0] if len(values) == 1 else values

    return apply


def with_query_parameters(opt: Any) -> RequestOptionFunc:
    """Replace the query string with the encoded options or mapping."""

    def apply(req: Request) -> None:
        if hasattr(opt, 'query_params'):
            req.params = opt.query_params()
        else:
            req.params = dict(opt or {})

    return apply


def with_body(body: Union[bytes, str], content_type: str = '') -> RequestOptionFunc:
    """Set the raw request body and, if given, its content type."""

    def apply(req: Request) -> None:
        req.body = body
        if content_type:
            req.headers['Content-Type'] = content_type

    return apply


def with_json_body(obj: Any) -> RequestOptionFunc:
    """Serialize ``obj`` to JSON and use it as the request body."""

    def apply(req: Request) -> None:
        data = obj.json_body() if hasattr(obj, 'json_body') else obj
        with_body(json.dumps(data).encode('utf-8'), 'application/json')(req)

    return apply


def with_md5(req: Request) -> None:
    """Set the ``Content-Md5`` header from the current request body."""
    digest = hashlib.md5(req.body_bytes()).digest()
    req.headers['Content-Md5'] = base64.b64encode(digest).decode('ascii')
