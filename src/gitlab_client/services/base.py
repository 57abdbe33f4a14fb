"""Base class of the resource services."""

from typing import TYPE_CHECKING, Any, Iterable, Tuple

from ..api.request_options import RequestOptionFunc
from ..api.response import Response

if TYPE_CHECKING:
    from ..api.client import GitLabClient


class Service:
    """Groups the endpoints of one GitLab API resource family.

    Services hold no state besides the client they were created with, so
    a single instance may be used from several threads.
    """

    def __init__(self, client: 'GitLabClient'):
        """Initialize service.

        Args:
            client: Client used to build and send requests
        """
        self.client = client

    def _call(
        self,
        method: str,
        path: str,
        opt: Any = None,
        options: Iterable[RequestOptionFunc] = (),
        result_type: Any = None,
    ) -> Tuple[Any, Response]:
        request = self.client.new_request(method, path, opt, options)
        return self.client.do(request, result_type)

    def _delete(
        self,
        path: str,
        opt: Any = None,
        options: Iterable[RequestOptionFunc] = (),
    ) -> Response:
        _, response = self._call('DELETE', path, opt, options)
        return response
