"""Access requests and protected branches APIs."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_escape, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.access import (
    AccessRequest,
    ApproveAccessRequestOptions,
    ListAccessRequestsOptions,
    ListProtectedBranchesOptions,
    ProtectedBranch,
    ProtectRepositoryBranchesOptions,
    UpdateProtectedBranchOptions,
)
from .base import Service


class AccessRequestsService(Service):
    """Requests to join a project or group.

    GitLab API docs: https://docs.gitlab.com/ee/api/access_requests.html
    """

    def list_project_access_requests(
        self,
        pid: ID,
        opt: Optional[ListAccessRequestsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[AccessRequest], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/access_requests',
            opt,
            options,
            List[AccessRequest],
        )

    def list_group_access_requests(
        self,
        gid: ID,
        opt: Optional[ListAccessRequestsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[AccessRequest], Response]:
        return self._call(
            'GET',
            f'groups/{path_id(gid)}/access_requests',
            opt,
            options,
            List[AccessRequest],
        )

    def request_project_access(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[AccessRequest, Response]:
        """Request access to a project for the authenticated user."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/access_requests',
            None,
            options,
            AccessRequest,
        )

    def request_group_access(
        self, gid: ID, *options: RequestOptionFunc
    ) -> Tuple[AccessRequest, Response]:
        return self._call(
            'POST',
            f'groups/{path_id(gid)}/access_requests',
            None,
            options,
            AccessRequest,
        )

    def approve_project_access_request(
        self,
        pid: ID,
        user: int,
        opt: Optional[ApproveAccessRequestOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[AccessRequest, Response]:
        """Approve a user's request to join a project.

        Args:
            pid: Project ID or path
            user: ID of the requesting user
            opt: Access level to grant
            *options: Request options

        Returns:
            The approved request and the response
        """
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/access_requests/{user}/approve',
            opt,
            options,
            AccessRequest,
        )

    def approve_group_access_request(
        self,
        gid: ID,
        user: int,
        opt: Optional[ApproveAccessRequestOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[AccessRequest, Response]:
        return self._call(
            'PUT',
            f'groups/{path_id(gid)}/access_requests/{user}/approve',
            opt,
            options,
            AccessRequest,
        )

    def deny_project_access_request(
        self, pid: ID, user: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/access_requests/{user}', None, options
        )

    def deny_group_access_request(
        self, gid: ID, user: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'groups/{path_id(gid)}/access_requests/{user}', None, options
        )


class ProtectedBranchesService(Service):
    """Protected branch endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/protected_branches.html
    """

    def list_protected_branches(
        self,
        pid: ID,
        opt: Optional[ListProtectedBranchesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[ProtectedBranch], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/protected_branches',
            opt,
            options,
            List[ProtectedBranch],
        )

    def get_protected_branch(
        self, pid: ID, branch: str, *options: RequestOptionFunc
    ) -> Tuple[ProtectedBranch, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/protected_branches/{path_escape(branch)}',
            None,
            options,
            ProtectedBranch,
        )

    def protect_repository_branches(
        self,
        pid: ID,
        opt: ProtectRepositoryBranchesOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[ProtectedBranch, Response]:
        """Protect a branch or every branch matching a wildcard such as ``release-*``."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/protected_branches',
            opt,
            options,
            ProtectedBranch,
        )

    def update_protected_branch(
        self,
        pid: ID,
        branch: str,
        opt: UpdateProtectedBranchOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[ProtectedBranch, Response]:
        return self._call(
            'PATCH',
            f'projects/{path_id(pid)}/protected_branches/{path_escape(branch)}',
            opt,
            options,
            ProtectedBranch,
        )

    def unprotect_repository_branches(
        self, pid: ID, branch: str, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/protected_branches/{path_escape(branch)}',
            None,
            options,
        )
