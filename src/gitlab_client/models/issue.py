"""Issue models."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BasicUser, TimeStats
from .milestone import Milestone
from .options import COMMA, ListOptions, Options


class IssueReferences(BaseModel):
    short: Optional[str] = None
    relative: Optional[str] = None
    full: Optional[str] = None


class Issue(BaseModel):
    """GitLab issue model."""

    id: int = Field(..., description='Global issue ID')
    iid: Optional[int] = Field(default=None, description='Project-local issue ID')
    project_id: Optional[int] = Field(default=None, description='Project ID')
    title: Optional[str] = Field(default=None, description='Issue title')
    description: Optional[str] = Field(default=None, description='Issue description')
    state: Optional[str] = Field(default=None, description='opened or closed')
    issue_type: Optional[str] = Field(default=None, description='Issue type')
    confidential: Optional[bool] = Field(default=None, description='Confidential')
    discussion_locked: Optional[bool] = Field(default=None)

    author: Optional[BasicUser] = Field(default=None, description='Issue author')
    assignee: Optional[BasicUser] = Field(default=None, description='First assignee')
    assignees: List[BasicUser] = Field(default_factory=list, description='Assignees')
    closed_by: Optional[BasicUser] = Field(default=None, description='User who closed')
    labels: List[str] = Field(default_factory=list, description='Label names')
    milestone: Optional[Milestone] = Field(default=None, description='Milestone')

    upvotes: Optional[int] = None
    downvotes: Optional[int] = None
    user_notes_count: Optional[int] = None
    merge_requests_count: Optional[int] = None
    weight: Optional[int] = None
    time_stats: Optional[TimeStats] = None
    references: Optional[IssueReferences] = None
    web_url: Optional[str] = Field(default=None, description='Web URL')

    due_date: Optional[date] = Field(default=None, description='Due date')
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)
    closed_at: Optional[datetime] = Field(default=None)


class ListIssuesOptions(ListOptions):
    """Options for ``IssuesService.list_issues``."""

    state: Optional[str] = None
    labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    not_labels: Optional[List[str]] = Field(
        default=None, alias='not[labels]', json_schema_extra=COMMA
    )
    with_labels_details: Optional[bool] = None
    milestone: Optional[str] = None
    scope: Optional[str] = None
    author_id: Optional[int] = None
    author_username: Optional[str] = None
    assignee_id: Optional[int] = None
    assignee_username: Optional[List[str]] = None
    my_reaction_emoji: Optional[str] = None
    iids: Optional[List[int]] = None
    search: Optional[str] = None
    search_in: Optional[str] = Field(default=None, alias='in')
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
    due_date: Optional[str] = None
    updated_after: Optional[datetime] = None
    updated_before: Optional[datetime] = None
    confidential: Optional[bool] = None
    issue_type: Optional[str] = None


class ListProjectIssuesOptions(ListIssuesOptions):
    """Options for ``IssuesService.list_project_issues``."""


class ListGroupIssuesOptions(ListIssuesOptions):
    """Options for ``IssuesService.list_group_issues``."""


class CreateIssueOptions(Options):
    """Options for ``IssuesService.create_issue``."""

    iid: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    confidential: Optional[bool] = None
    assignee_ids: Optional[List[int]] = None
    milestone_id: Optional[int] = None
    labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    created_at: Optional[datetime] = None
    due_date: Optional[date] = None
    merge_request_to_resolve_discussions_of: Optional[int] = None
    discussion_to_resolve: Optional[str] = None
    weight: Optional[int] = None
    issue_type: Optional[str] = None


class UpdateIssueOptions(Options):
    """Options for ``IssuesService.update_issue``."""

    title: Optional[str] = None
    description: Optional[str] = None
    confidential: Optional[bool] = None
    assignee_ids: Optional[List[int]] = None
    milestone_id: Optional[int] = None
    labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    add_labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    remove_labels: Optional[List[str]] = Field(default=None, json_schema_extra=COMMA)
    state_event: Optional[str] = Field(default=None, description='close or reopen')
    updated_at: Optional[datetime] = None
    due_date: Optional[date] = None
    weight: Optional[int] = None
    discussion_locked: Optional[bool] = None
    issue_type: Optional[str] = None


class MoveIssueOptions(Options):
    """Options for ``IssuesService.move_issue``."""

    to_project_id: Optional[int] = None


class SetTimeEstimateOptions(Options):
    """Options for setting a time estimate, e.g. ``3h30m``."""

    duration: Optional[str] = None


class AddSpentTimeOptions(Options):
    """Options for adding spent time."""

    duration: Optional[str] = None
    summary: Optional[str] = None
