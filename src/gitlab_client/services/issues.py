"""Issues API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.common import BasicUser, TimeStats
from ..models.issue import (
    AddSpentTimeOptions,
    CreateIssueOptions,
    Issue,
    ListGroupIssuesOptions,
    ListIssuesOptions,
    ListProjectIssuesOptions,
    MoveIssueOptions,
    SetTimeEstimateOptions,
    UpdateIssueOptions,
)
from ..models.merge_request import MergeRequest
from .base import Service


class IssuesService(Service):
    """Issue endpoints.

    Single issues are addressed by project and project-local ``iid``.

    GitLab API docs: https://docs.gitlab.com/ee/api/issues.html
    """

    def list_issues(
        self, opt: Optional[ListIssuesOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Issue], Response]:
        """List issues visible to the authenticated user across all projects."""
        return self._call('GET', 'issues', opt, options, List[Issue])

    def list_group_issues(
        self,
        gid: ID,
        opt: Optional[ListGroupIssuesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Issue], Response]:
        return self._call(
            'GET', f'groups/{path_id(gid)}/issues', opt, options, List[Issue]
        )

    def list_project_issues(
        self,
        pid: ID,
        opt: Optional[ListProjectIssuesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Issue], Response]:
        """List issues of a project.

        Args:
            pid: Project ID or path
            opt: Filters and pagination
            *options: Request options

        Returns:
            Page of issues and the response
        """
        return self._call(
            'GET', f'projects/{path_id(pid)}/issues', opt, options, List[Issue]
        )

    def get_issue_by_id(
        self, issue: int, *options: RequestOptionFunc
    ) -> Tuple[Issue, Response]:
        """Get an issue by its global ID (administrators only)."""
        return self._call('GET', f'issues/{issue}', None, options, Issue)

    def get_issue(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Tuple[Issue, Response]:
        return self._call(
            'GET', f'projects/{path_id(pid)}/issues/{issue}', None, options, Issue
        )

    def create_issue(
        self, pid: ID, opt: CreateIssueOptions, *options: RequestOptionFunc
    ) -> Tuple[Issue, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/issues', opt, options, Issue
        )

    def update_issue(
        self,
        pid: ID,
        issue: int,
        opt: UpdateIssueOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Issue, Response]:
        """Update an issue; set ``state_event`` to close or reopen it."""
        return self._call(
            'PUT', f'projects/{path_id(pid)}/issues/{issue}', opt, options, Issue
        )

    def delete_issue(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(f'projects/{path_id(pid)}/issues/{issue}', None, options)

    def move_issue(
        self,
        pid: ID,
        issue: int,
        opt: MoveIssueOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Issue, Response]:
        """Move an issue to another project."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/issues/{issue}/move', opt, options, Issue
        )

    def subscribe_to_issue(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Tuple[Issue, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/issues/{issue}/subscribe',
            None,
            options,
            Issue,
        )

    def unsubscribe_from_issue(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Tuple[Issue, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/issues/{issue}/unsubscribe',
            None,
            options,
            Issue,
        )

    def get_participants(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Tuple[List[BasicUser], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/issues/{issue}/participants',
            None,
            options,
            List[BasicUser],
        )

    def list_merge_requests_closing_issue(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Tuple[List[MergeRequest], Response]:
        """List merge requests that close the issue when merged."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/issues/{issue}/closed_by',
            None,
            options,
            List[MergeRequest],
        )

    def set_time_estimate(
        self,
        pid: ID,
        issue: int,
        opt: SetTimeEstimateOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[TimeStats, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/issues/{issue}/time_estimate',
            opt,
            options,
            TimeStats,
        )

    def add_spent_time(
        self,
        pid: ID,
        issue: int,
        opt: AddSpentTimeOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[TimeStats, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/issues/{issue}/add_spent_time',
            opt,
            options,
            TimeStats,
        )

    def get_time_spent(
        self, pid: ID, issue: int, *options: RequestOptionFunc
    ) -> Tuple[TimeStats, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/issues/{issue}/time_stats',
            None,
            options,
            TimeStats,
        )
