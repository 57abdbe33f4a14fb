"""Tests for API error mapping and message flattening."""

import pytest

from gitlab_client import (
    GitLabAPIError,
    GitLabAuthenticationError,
    GitLabNotFoundError,
    GitLabPermissionError,
    GitLabRateLimitError,
    GitLabServerError,
    GitLabValidationError,
    InvalidIDError,
    Response,
)
from gitlab_client.api.exceptions import check_response, parse_error

from .conftest import make_response

URL = 'https://gitlab.example.com/api/v4/projects/group%2Fproject/issues'


def raise_for(status_code, body=None, headers=None, method='GET'):
    http_response = make_response(status_code, body, headers, method=method, url=URL)
    check_response(Response.from_http(http_response))


class TestParseError:
    """Test flattening of decoded error bodies."""

    def test_string(self):
        assert parse_error('Forbidden') == 'Forbidden'

    def test_list(self):
        assert parse_error(['a', 'b']) == '[a, b]'

    def test_nested_object(self):
        raw = {
            'message': {
                'name': ['has already been taken'],
                'path': ['is too short', 'is invalid'],
            }
        }

        assert parse_error(raw) == (
            '{message: {name: [has already been taken]}, '
            '{path: [is too short, is invalid]}}'
        )

    def test_object_fragments_sorted(self):
        assert parse_error({'b': 'second', 'a': 'first'}) == '{a: first}, {b: second}'

    def test_unexpected_type(self):
        assert parse_error(42) == 'failed to parse unexpected error type: int'


class TestCheckResponse:
    """Test status code to exception mapping."""

    @pytest.mark.parametrize('status_code', [200, 201, 202, 204, 304])
    def test_success_codes(self, status_code):
        raise_for(status_code)

    @pytest.mark.parametrize('status_code', [203, 206])
    def test_unlisted_2xx_raises(self, status_code):
        with pytest.raises(GitLabAPIError) as exc_info:
            raise_for(status_code)

        assert exc_info.value.response.success is False

    @pytest.mark.parametrize(
        'status_code, error_class',
        [
            (400, GitLabValidationError),
            (401, GitLabAuthenticationError),
            (403, GitLabPermissionError),
            (404, GitLabNotFoundError),
            (409, GitLabAPIError),
            (422, GitLabValidationError),
            (500, GitLabServerError),
            (503, GitLabServerError),
        ],
    )
    def test_error_classes(self, status_code, error_class):
        with pytest.raises(error_class) as exc_info:
            raise_for(status_code, {'message': 'failed'})

        assert exc_info.value.status_code == status_code
        assert exc_info.value.response_data == {'message': 'failed'}

    def test_rate_limit_retry_after(self):
        with pytest.raises(GitLabRateLimitError) as exc_info:
            raise_for(429, headers={'Retry-After': '12'})

        assert exc_info.value.retry_after == 12

    def test_rate_limit_lowercase_retry_after(self):
        with pytest.raises(GitLabRateLimitError) as exc_info:
            raise_for(429, headers={'retry-after': '7'})

        assert exc_info.value.retry_after == 7

    def test_rate_limit_default_retry_after(self):
        with pytest.raises(GitLabRateLimitError) as exc_info:
            raise_for(429, headers={'Retry-After': 'soon'})

        assert exc_info.value.retry_after == 60

    def test_error_string(self):
        """Test the rendered message names method, unescaped path and status."""
        with pytest.raises(GitLabValidationError) as exc_info:
            raise_for(400, {'message': {'title': ['is missing']}}, method='POST')

        assert str(exc_info.value) == (
            'POST https://gitlab.example.com/api/v4/projects/group/project/issues: '
            '400 {message: {title: [is missing]}}'
        )

    def test_empty_body(self):
        with pytest.raises(GitLabNotFoundError) as exc_info:
            raise_for(404)

        error = exc_info.value
        assert error.message == ''
        assert error.body == b''
        assert str(error) == (
            'GET https://gitlab.example.com/api/v4/projects/group/project/issues: 404'
        )

    def test_unknown_error_format(self):
        with pytest.raises(GitLabServerError) as exc_info:
            raise_for(502, '<html>Bad Gateway</html>')

        assert exc_info.value.message == (
            'failed to parse unknown error format: <html>Bad Gateway</html>'
        )
        assert exc_info.value.body == b'<html>Bad Gateway</html>'


class TestInvalidIDError:
    """Test invalid identifier errors."""

    def test_message(self):
        assert str(InvalidIDError(1.5)) == (
            'invalid ID type 1.5, the ID must be an int or a string'
        )

    def test_is_type_error(self):
        assert isinstance(InvalidIDError(None), TypeError)
