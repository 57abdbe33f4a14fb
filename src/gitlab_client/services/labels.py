"""Labels and milestones APIs."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.issue import Issue
from ..models.label import CreateLabelOptions, Label, ListLabelsOptions, UpdateLabelOptions
from ..models.merge_request import MergeRequest
from ..models.milestone import (
    CreateMilestoneOptions,
    ListMilestonesOptions,
    Milestone,
    UpdateMilestoneOptions,
)
from .base import Service


class LabelsService(Service):
    """Project label endpoints.

    Labels are addressed by ID or name.

    GitLab API docs: https://docs.gitlab.com/ee/api/labels.html
    """

    def list_labels(
        self,
        pid: ID,
        opt: Optional[ListLabelsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Label], Response]:
        return self._call(
            'GET', f'projects/{path_id(pid)}/labels', opt, options, List[Label]
        )

    def get_label(
        self, pid: ID, label: ID, *options: RequestOptionFunc
    ) -> Tuple[Label, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/labels/{path_id(label)}',
            None,
            options,
            Label,
        )

    def create_label(
        self, pid: ID, opt: CreateLabelOptions, *options: RequestOptionFunc
    ) -> Tuple[Label, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/labels', opt, options, Label
        )

    def update_label(
        self,
        pid: ID,
        label: ID,
        opt: UpdateLabelOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Label, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/labels/{path_id(label)}',
            opt,
            options,
            Label,
        )

    def delete_label(self, pid: ID, label: ID, *options: RequestOptionFunc) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/labels/{path_id(label)}', None, options
        )

    def subscribe_to_label(
        self, pid: ID, label: ID, *options: RequestOptionFunc
    ) -> Tuple[Label, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/labels/{path_id(label)}/subscribe',
            None,
            options,
            Label,
        )


class MilestonesService(Service):
    """Project milestone endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/milestones.html
    """

    def list_milestones(
        self,
        pid: ID,
        opt: Optional[ListMilestonesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Milestone], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/milestones',
            opt,
            options,
            List[Milestone],
        )

    def get_milestone(
        self, pid: ID, milestone: int, *options: RequestOptionFunc
    ) -> Tuple[Milestone, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/milestones/{milestone}',
            None,
            options,
            Milestone,
        )

    def create_milestone(
        self, pid: ID, opt: CreateMilestoneOptions, *options: RequestOptionFunc
    ) -> Tuple[Milestone, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/milestones', opt, options, Milestone
        )

    def update_milestone(
        self,
        pid: ID,
        milestone: int,
        opt: UpdateMilestoneOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Milestone, Response]:
        """Update a milestone; ``state_event='close'`` closes it."""
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/milestones/{milestone}',
            opt,
            options,
            Milestone,
        )

    def delete_milestone(
        self, pid: ID, milestone: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/milestones/{milestone}', None, options
        )

    def get_milestone_issues(
        self, pid: ID, milestone: int, *options: RequestOptionFunc
    ) -> Tuple[List[Issue], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/milestones/{milestone}/issues',
            None,
            options,
            List[Issue],
        )

    def get_milestone_merge_requests(
        self, pid: ID, milestone: int, *options: RequestOptionFunc
    ) -> Tuple[List[MergeRequest], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/milestones/{milestone}/merge_requests',
            None,
            options,
            List[MergeRequest],
        )
