"""To-do item models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .options import ListOptions


class TodoProject(BaseModel):
    id: int
    name: Optional[str] = None
    name_with_namespace: Optional[str] = None
    path: Optional[str] = None
    path_with_namespace: Optional[str] = None


class Todo(BaseModel):
    """Pending action for the current user."""

    id: int = Field(..., description='To-do ID')
    project: Optional[TodoProject] = Field(default=None)
    author: Optional[BasicUser] = Field(default=None)
    action_name: Optional[str] = Field(default=None, description='e.g. assigned')
    target_type: Optional[str] = Field(default=None, description='Issue, MergeRequest, ...')
    target: Optional[dict] = Field(default=None, description='Raw target object')
    target_url: Optional[str] = Field(default=None)
    body: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None, description='pending or done')
    created_at: Optional[datetime] = Field(default=None)


class ListTodosOptions(ListOptions):
    """Options for ``TodosService.list_todos``."""

    action: Optional[str] = None
    author_id: Optional[int] = None
    project_id: Optional[int] = None
    group_id: Optional[int] = None
    state: Optional[str] = None
    type: Optional[str] = None
