"""Comment (note) models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .options import ListOptions, Options


class Note(BaseModel):
    """Comment on an issue, merge request, commit or snippet."""

    id: int = Field(..., description='Note ID')
    type: Optional[str] = Field(default=None, description='DiscussionNote, DiffNote, ...')
    body: Optional[str] = Field(default=None, description='Note content')
    attachment: Optional[str] = Field(default=None)
    title: Optional[str] = Field(default=None)
    file_name: Optional[str] = Field(default=None)
    author: Optional[BasicUser] = Field(default=None, description='Author')
    system: Optional[bool] = Field(default=None, description='Generated by GitLab')
    internal: Optional[bool] = Field(default=None, description='Internal note')
    confidential: Optional[bool] = Field(default=None)
    resolvable: Optional[bool] = Field(default=None)
    resolved: Optional[bool] = Field(default=None)
    resolved_by: Optional[BasicUser] = Field(default=None)
    noteable_id: Optional[int] = Field(default=None)
    noteable_type: Optional[str] = Field(default=None)
    noteable_iid: Optional[int] = Field(default=None)
    project_id: Optional[int] = Field(default=None)
    commit_id: Optional[str] = Field(default=None)
    position: Optional[dict] = Field(default=None, description='Diff position')
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)
    expires_at: Optional[datetime] = Field(default=None)


class ListNotesOptions(ListOptions):
    """Options for the note list endpoints.

    ``order_by`` accepts ``created_at`` or ``updated_at``.
    """


class CreateNoteOptions(Options):
    """Options for creating a note."""

    body: Optional[str] = None
    created_at: Optional[datetime] = None
    internal: Optional[bool] = None


class UpdateNoteOptions(Options):
    """Options for updating a note."""

    body: Optional[str] = None
