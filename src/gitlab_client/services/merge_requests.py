"""Merge requests API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.common import BasicUser
from ..models.merge_request import (
    AcceptMergeRequestOptions,
    ApproveMergeRequestOptions,
    CreateMergeRequestOptions,
    GetMergeRequestChangesOptions,
    GetMergeRequestOptions,
    ListGroupMergeRequestsOptions,
    ListMergeRequestCommitsOptions,
    ListMergeRequestsOptions,
    ListProjectMergeRequestsOptions,
    MergeRequest,
    MergeRequestApprovals,
    UpdateMergeRequestOptions,
)
from ..models.pipeline import PipelineInfo
from ..models.repository import Commit, Diff
from .base import Service


class MergeRequestsService(Service):
    """Merge request endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/merge_requests.html
    """

    def list_merge_requests(
        self,
        opt: Optional[ListMergeRequestsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[MergeRequest], Response]:
        """List merge requests visible to the authenticated user.

        GitLab defaults ``scope`` to ``created_by_me`` here.
        """
        return self._call('GET', 'merge_requests', opt, options, List[MergeRequest])

    def list_project_merge_requests(
        self,
        pid: ID,
        opt: Optional[ListProjectMergeRequestsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[MergeRequest], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests',
            opt,
            options,
            List[MergeRequest],
        )

    def list_group_merge_requests(
        self,
        gid: ID,
        opt: Optional[ListGroupMergeRequestsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[MergeRequest], Response]:
        return self._call(
            'GET',
            f'groups/{path_id(gid)}/merge_requests',
            opt,
            options,
            List[MergeRequest],
        )

    def get_merge_request(
        self,
        pid: ID,
        mr: int,
        opt: Optional[GetMergeRequestOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[MergeRequest, Response]:
        """Get a merge request by project and ``iid``."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}',
            opt,
            options,
            MergeRequest,
        )

    def create_merge_request(
        self, pid: ID, opt: CreateMergeRequestOptions, *options: RequestOptionFunc
    ) -> Tuple[MergeRequest, Response]:
        """Create a merge request.

        Args:
            pid: Source project ID or path
            opt: Title, branches and other attributes
            *options: Request options

        Returns:
            The new merge request and the response
        """
        return self._call(
            'POST', f'projects/{path_id(pid)}/merge_requests', opt, options, MergeRequest
        )

    def update_merge_request(
        self,
        pid: ID,
        mr: int,
        opt: UpdateMergeRequestOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[MergeRequest, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/merge_requests/{mr}',
            opt,
            options,
            MergeRequest,
        )

    def delete_merge_request(
        self, pid: ID, mr: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/merge_requests/{mr}', None, options
        )

    def accept_merge_request(
        self,
        pid: ID,
        mr: int,
        opt: Optional[AcceptMergeRequestOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[MergeRequest, Response]:
        """Merge the changes of a merge request.

        Raises:
            GitLabAPIError: 405 when the merge request cannot be merged,
                409 when ``sha`` does not match the source branch head
        """
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/merge_requests/{mr}/merge',
            opt,
            options,
            MergeRequest,
        )

    def rebase_merge_request(
        self, pid: ID, mr: int, *options: RequestOptionFunc
    ) -> Response:
        _, response = self._call(
            'PUT', f'projects/{path_id(pid)}/merge_requests/{mr}/rebase', None, options
        )
        return response

    def approve_merge_request(
        self,
        pid: ID,
        mr: int,
        opt: Optional[ApproveMergeRequestOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[MergeRequestApprovals, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/merge_requests/{mr}/approve',
            opt,
            options,
            MergeRequestApprovals,
        )

    def unapprove_merge_request(
        self, pid: ID, mr: int, *options: RequestOptionFunc
    ) -> Response:
        _, response = self._call(
            'POST',
            f'projects/{path_id(pid)}/merge_requests/{mr}/unapprove',
            None,
            options,
        )
        return response

    def get_merge_request_commits(
        self,
        pid: ID,
        mr: int,
        opt: Optional[ListMergeRequestCommitsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Commit], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/commits',
            opt,
            options,
            List[Commit],
        )

    def list_merge_request_diffs(
        self,
        pid: ID,
        mr: int,
        opt: Optional[GetMergeRequestChangesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Diff], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/diffs',
            opt,
            options,
            List[Diff],
        )

    def list_merge_request_pipelines(
        self, pid: ID, mr: int, *options: RequestOptionFunc
    ) -> Tuple[List[PipelineInfo], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/pipelines',
            None,
            options,
            List[PipelineInfo],
        )

    def get_merge_request_participants(
        self, pid: ID, mr: int, *options: RequestOptionFunc
    ) -> Tuple[List[BasicUser], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/participants',
            None,
            options,
            List[BasicUser],
        )

    def get_merge_request_reviewers(
        self, pid: ID, mr: int, *options: RequestOptionFunc
    ) -> Tuple[List[dict], Response]:
        """List reviewers together with their review state."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/reviewers',
            None,
            options,
            List[dict],
        )
