"""Merge request models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BasicUser, TimeStats
from .milestone import Milestone
from .options import COMMA, ListOptions, Options
from .pipeline import PipelineInfo


class DiffRefs(BaseModel):
    base_sha: Optional[str] = None
    head_sha: Optional[str] = None
    start_sha: Optional[str] = None


class MergeRequest(BaseModel):
    """GitLab merge request model."""

    id: int = Field(..., description='Global merge request ID')
    iid: Optional[int] = Field(default=None, description='Project-local ID')
    project_id: Optional[int] = Field(default=None, description='Target project ID')
    title: Optional[str] = Field(default=None, description='Title')
    description: Optional[str] = Field(default=None, description='Description')
    state: Optional[str] = Field(
        default=None, description='opened, closed, locked or merged'
    )
    draft: Optional[bool] = Field(default=None, description='Draft status')

    source_branch: Optional[str] = Field(default=None, description='Source branch')
    target_branch: Optional[str] = Field(default=None, description='Target branch')
    source_project_id: Optional[int] = Field(default=None)
    target_project_id: Optional[int] = Field(default=None)
    sha: Optional[str] = Field(default=None, description='Head commit SHA')
    merge_commit_sha: Optional[str] = Field(default=None)
    squash_commit_sha: Optional[str] = Field(default=None)

    author: Optional[BasicUser] = Field(default=None, description='Author')
    assignee: Optional[BasicUser] = Field(default=None, description='First assignee')
    assignees: List[BasicUser] = Field(default_factory=list)
    reviewers: List[BasicUser] = Field(default_factory=list)
    merged_by: Optional[BasicUser] = Field(default=None)
    closed_by: Optional[BasicUser] = Field(default=None)
    labels: List[str] = Field(default_factory=list, description='Label names')
    milestone: Optional[Milestone] = Field(default=None)

    merge_status: Optional[str] = Field(default=None)
    detailed_merge_status: Optional[str] = Field(default=None)
    has_conflicts: Optional[bool] = Field(default=None)
    squash: Optional[bool] = Field(default=None)
    should_remove_source_branch: Optional[bool] = Field(default=None)
    force_remove_source_branch: Optional[bool] = Field(default=None)
    user_notes_count: Optional[int] = Field(default=None)
    changes_count: Optional[str] = Field(default=None)
    pipeline: Optional[PipelineInfo] = Field(default=None, description='Head pipeline')
    diff_refs: Optional[DiffRefs] = Field(default=None)
    time_stats: Optional[TimeStats] = Field(default=None)
    web_url: Optional[str] = Field(default=None, description='Web URL')

    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)
    merged_at: Optional[datetime] = Field(default=None)
    closed_at: Optional[datetime] = Field(default=None)


class MergeRequestApprovals(BaseModel):
    """Approval state of a merge request."""

    id: Optional[int] = None
    iid: Optional[int] = None
    project_id: Optional[int] = None
    approved: Optional[bool] = None
    approvals_required: Optional[int] = None
    approvals_left: Optional[int] = None
    approved_by: List[dict] = Field(default_factory=list)


class ListMergeRequestsOptions(ListOptions):
    """Options for ``MergeRequestsService.list_merge_requests``."""

    state: Optional[str] = None
    milestone: Optional[str] = None
    view: Optional[str] = None
    labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    not_labels: Optional[List[str]] = Field(
        default=None, alias='not[labels]', json_schema_extra=COMMA
    )
    with_labels_details: Optional[bool] = None
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
    updated_after: Optional[datetime] = None
    updated_before: Optional[datetime] = None
    scope: Optional[str] = None
    author_id: Optional[int] = None
    author_username: Optional[str] = None
    assignee_id: Optional[int] = None
    reviewer_id: Optional[int] = None
    reviewer_username: Optional[str] = None
    my_reaction_emoji: Optional[str] = None
    source_branch: Optional[str] = None
    target_branch: Optional[str] = None
    search: Optional[str] = None
    search_in: Optional[str] = Field(default=None, alias='in')
    draft: Optional[bool] = None
    wip: Optional[str] = None


class ListProjectMergeRequestsOptions(ListMergeRequestsOptions):
    """Options for ``MergeRequestsService.list_project_merge_requests``."""

    iids: Optional[List[int]] = None


class ListGroupMergeRequestsOptions(ListMergeRequestsOptions):
    """Options for ``MergeRequestsService.list_group_merge_requests``."""


class GetMergeRequestOptions(Options):
    """Options for ``MergeRequestsService.get_merge_request``."""

    render_html: Optional[bool] = None
    include_diverged_commits_count: Optional[bool] = None
    include_rebase_in_progress: Optional[bool] = None


class CreateMergeRequestOptions(Options):
    """Options for ``MergeRequestsService.create_merge_request``."""

    title: Optional[str] = None
    description: Optional[str] = None
    source_branch: Optional[str] = None
    target_branch: Optional[str] = None
    labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    assignee_id: Optional[int] = None
    assignee_ids: Optional[List[int]] = None
    reviewer_ids: Optional[List[int]] = None
    target_project_id: Optional[int] = None
    milestone_id: Optional[int] = None
    remove_source_branch: Optional[bool] = None
    squash: Optional[bool] = None
    allow_collaboration: Optional[bool] = None


class UpdateMergeRequestOptions(Options):
    """Options for ``MergeRequestsService.update_merge_request``."""

    title: Optional[str] = None
    description: Optional[str] = None
    target_branch: Optional[str] = None
    assignee_id: Optional[int] = None
    assignee_ids: Optional[List[int]] = None
    reviewer_ids: Optional[List[int]] = None
    labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    add_labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    remove_labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    milestone_id: Optional[int] = None
    state_event: Optional[str] = Field(default=None, description='close or reopen')
    remove_source_branch: Optional[bool] = None
    squash: Optional[bool] = None
    discussion_locked: Optional[bool] = None
    allow_collaboration: Optional[bool] = None


class AcceptMergeRequestOptions(Options):
    """Options for ``MergeRequestsService.accept_merge_request``."""

    merge_commit_message: Optional[str] = None
    squash_commit_message: Optional[str] = None
    squash: Optional[bool] = None
    should_remove_source_branch: Optional[bool] = None
    merge_when_pipeline_succeeds: Optional[bool] = None
    auto_merge: Optional[bool] = None
    sha: Optional[str] = None


class ApproveMergeRequestOptions(Options):
    """Options for ``MergeRequestsService.approve_merge_request``."""

    sha: Optional[str] = None
    approval_password: Optional[str] = None


class GetMergeRequestChangesOptions(Options):
    """Options for listing merge request diffs."""

    unidiff: Optional[bool] = None


class ListMergeRequestCommitsOptions(ListOptions):
    """Options for ``MergeRequestsService.get_merge_request_commits``."""
