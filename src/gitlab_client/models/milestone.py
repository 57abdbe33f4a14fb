"""Milestone models."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options


class Milestone(BaseModel):
    """Project or group milestone."""

    id: int = Field(..., description='Milestone ID')
    iid: Optional[int] = Field(default=None, description='Project-local ID')
    project_id: Optional[int] = Field(default=None, description='Project ID')
    group_id: Optional[int] = Field(default=None, description='Group ID')
    title: Optional[str] = Field(default=None, description='Milestone title')
    description: Optional[str] = Field(default=None, description='Description')
    state: Optional[str] = Field(default=None, description='active or closed')
    expired: Optional[bool] = Field(default=None, description='Due date passed')
    web_url: Optional[str] = Field(default=None, description='Web URL')
    start_date: Optional[date] = Field(default=None)
    due_date: Optional[date] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)


class ListMilestonesOptions(ListOptions):
    """Options for ``MilestonesService.list_milestones``."""

    iids: Optional[List[int]] = None
    title: Optional[str] = None
    state: Optional[str] = None
    search: Optional[str] = None
    include_ancestors: Optional[bool] = None


class CreateMilestoneOptions(Options):
    """Options for ``MilestonesService.create_milestone``."""

    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None


class UpdateMilestoneOptions(CreateMilestoneOptions):
    """Options for ``MilestonesService.update_milestone``."""

    state_event: Optional[str] = Field(default=None, description='close or activate')
