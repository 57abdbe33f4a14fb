"""Contribution event and version models."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .options import ListOptions


class PushData(BaseModel):
    commit_count: Optional[int] = None
    action: Optional[str] = None
    ref_type: Optional[str] = None
    commit_from: Optional[str] = None
    commit_to: Optional[str] = None
    ref: Optional[str] = None
    commit_title: Optional[str] = None


class ContributionEvent(BaseModel):
    """User activity event."""

    id: int = Field(..., description='Event ID')
    title: Optional[str] = Field(default=None)
    project_id: Optional[int] = Field(default=None)
    action_name: Optional[str] = Field(default=None, description='e.g. pushed to')
    target_id: Optional[int] = Field(default=None)
    target_iid: Optional[int] = Field(default=None)
    target_type: Optional[str] = Field(default=None)
    target_title: Optional[str] = Field(default=None)
    author_id: Optional[int] = Field(default=None)
    author_username: Optional[str] = Field(default=None)
    author: Optional[BasicUser] = Field(default=None)
    push_data: Optional[PushData] = Field(default=None)
    note: Optional[dict] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)


class ListContributionEventsOptions(ListOptions):
    """Options for the contribution event list endpoints."""

    action: Optional[str] = None
    target_type: Optional[str] = None
    before: Optional[date] = None
    after: Optional[date] = None
    scope: Optional[str] = None


class Version(BaseModel):
    """GitLab server version."""

    version: str = Field(..., description='e.g. 16.5.0-ee')
    revision: Optional[str] = Field(default=None, description='Git revision')
    enterprise: Optional[bool] = Field(default=None)
