"""Events, to-do items, personal access tokens and version APIs."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.event import ContributionEvent, ListContributionEventsOptions, Version
from ..models.todo import ListTodosOptions, Todo
from ..models.token import (
    ListPersonalAccessTokensOptions,
    PersonalAccessToken,
    RotatePersonalAccessTokenOptions,
)
from .base import Service


class EventsService(Service):
    """Contribution events.

    GitLab API docs: https://docs.gitlab.com/ee/api/events.html
    """

    def list_current_user_contribution_events(
        self,
        opt: Optional[ListContributionEventsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[ContributionEvent], Response]:
        return self._call('GET', 'events', opt, options, List[ContributionEvent])

    def list_user_contribution_events(
        self,
        uid: ID,
        opt: Optional[ListContributionEventsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[ContributionEvent], Response]:
        """List events of a user, given by ID or username."""
        return self._call(
            'GET',
            f'users/{path_id(uid)}/events',
            opt,
            options,
            List[ContributionEvent],
        )

    def list_project_visible_events(
        self,
        pid: ID,
        opt: Optional[ListContributionEventsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[ContributionEvent], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/events',
            opt,
            options,
            List[ContributionEvent],
        )


class TodosService(Service):
    """To-do items of the authenticated user.

    GitLab API docs: https://docs.gitlab.com/ee/api/todos.html
    """

    def list_todos(
        self, opt: Optional[ListTodosOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Todo], Response]:
        return self._call('GET', 'todos', opt, options, List[Todo])

    def mark_todo_as_done(self, todo: int, *options: RequestOptionFunc) -> Response:
        _, response = self._call('POST', f'todos/{todo}/mark_as_done', None, options)
        return response

    def mark_all_todos_as_done(self, *options: RequestOptionFunc) -> Response:
        _, response = self._call('POST', 'todos/mark_as_done', None, options)
        return response


class PersonalAccessTokensService(Service):
    """Personal access token endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/personal_access_tokens.html
    """

    def list_personal_access_tokens(
        self,
        opt: Optional[ListPersonalAccessTokensOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[PersonalAccessToken], Response]:
        """List tokens; administrators see the tokens of every user."""
        return self._call(
            'GET', 'personal_access_tokens', opt, options, List[PersonalAccessToken]
        )

    def get_single_personal_access_token_by_id(
        self, token: int, *options: RequestOptionFunc
    ) -> Tuple[PersonalAccessToken, Response]:
        return self._call(
            'GET', f'personal_access_tokens/{token}', None, options, PersonalAccessToken
        )

    def get_single_personal_access_token(
        self, *options: RequestOptionFunc
    ) -> Tuple[PersonalAccessToken, Response]:
        """Get the token used to authenticate this request."""
        return self._call(
            'GET', 'personal_access_tokens/self', None, options, PersonalAccessToken
        )

    def rotate_personal_access_token(
        self,
        token: int,
        opt: Optional[RotatePersonalAccessTokenOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[PersonalAccessToken, Response]:
        """Revoke a token and issue a new one with the same scopes."""
        return self._call(
            'POST',
            f'personal_access_tokens/{token}/rotate',
            opt,
            options,
            PersonalAccessToken,
        )

    def revoke_personal_access_token(
        self, token: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(f'personal_access_tokens/{token}', None, options)


class VersionService(Service):
    """GitLab server version.

    GitLab API docs: https://docs.gitlab.com/ee/api/version.html
    """

    def get_version(self, *options: RequestOptionFunc) -> Tuple[Version, Response]:
        return self._call('GET', 'version', None, options, Version)
