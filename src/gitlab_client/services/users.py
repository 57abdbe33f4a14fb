"""Users API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.user import (
    AddSSHKeyOptions,
    CreateUserOptions,
    ListSSHKeysOptions,
    ListUsersOptions,
    ModifyUserOptions,
    SSHKey,
    User,
)
from .base import Service


class UsersService(Service):
    """User endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/users.html
    """

    def list_users(
        self, opt: Optional[ListUsersOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[User], Response]:
        """List users.

        Non-administrators only see a reduced set of fields.
        """
        return self._call('GET', 'users', opt, options, List[User])

    def get_user(self, user: int, *options: RequestOptionFunc) -> Tuple[User, Response]:
        return self._call('GET', f'users/{path_id(user)}', None, options, User)

    def current_user(self, *options: RequestOptionFunc) -> Tuple[User, Response]:
        """Get the authenticated user."""
        return self._call('GET', 'user', None, options, User)

    def create_user(
        self, opt: CreateUserOptions, *options: RequestOptionFunc
    ) -> Tuple[User, Response]:
        """Create a user (administrators only)."""
        return self._call('POST', 'users', opt, options, User)

    def modify_user(
        self, user: int, opt: ModifyUserOptions, *options: RequestOptionFunc
    ) -> Tuple[User, Response]:
        return self._call('PUT', f'users/{path_id(user)}', opt, options, User)

    def delete_user(self, user: int, *options: RequestOptionFunc) -> Response:
        return self._delete(f'users/{path_id(user)}', None, options)

    def block_user(self, user: int, *options: RequestOptionFunc) -> Response:
        """Block a user.

        Raises:
            GitLabPermissionError: If the user cannot be blocked, e.g. an
                LDAP-blocked user
            GitLabNotFoundError: If the user does not exist
        """
        _, response = self._call('POST', f'users/{path_id(user)}/block', None, options)
        return response

    def unblock_user(self, user: int, *options: RequestOptionFunc) -> Response:
        _, response = self._call(
            'POST', f'users/{path_id(user)}/unblock', None, options
        )
        return response

    def list_ssh_keys(
        self, opt: Optional[ListSSHKeysOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[SSHKey], Response]:
        """List SSH keys of the authenticated user."""
        return self._call('GET', 'user/keys', opt, options, List[SSHKey])

    def list_ssh_keys_for_user(
        self,
        uid: ID,
        opt: Optional[ListSSHKeysOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[SSHKey], Response]:
        """List SSH keys of a user, given by ID or username."""
        return self._call(
            'GET', f'users/{path_id(uid)}/keys', opt, options, List[SSHKey]
        )

    def add_ssh_key(
        self, opt: AddSSHKeyOptions, *options: RequestOptionFunc
    ) -> Tuple[SSHKey, Response]:
        return self._call('POST', 'user/keys', opt, options, SSHKey)

    def add_ssh_key_for_user(
        self, user: int, opt: AddSSHKeyOptions, *options: RequestOptionFunc
    ) -> Tuple[SSHKey, Response]:
        return self._call(
            'POST', f'users/{path_id(user)}/keys', opt, options, SSHKey
        )

    def delete_ssh_key(self, key: int, *options: RequestOptionFunc) -> Response:
        return self._delete(f'user/keys/{key}', None, options)
