"""Label models."""

from typing import Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options


class Label(BaseModel):
    """Project or group label."""

    id: int = Field(..., description='Label ID')
    name: str = Field(..., description='Label name')
    color: Optional[str] = Field(default=None, description='Background color')
    text_color: Optional[str] = Field(default=None, description='Text color')
    description: Optional[str] = Field(default=None, description='Description')
    open_issues_count: Optional[int] = Field(default=None)
    closed_issues_count: Optional[int] = Field(default=None)
    open_merge_requests_count: Optional[int] = Field(default=None)
    subscribed: Optional[bool] = Field(default=None)
    priority: Optional[int] = Field(default=None)
    is_project_label: Optional[bool] = Field(default=None)


class ListLabelsOptions(ListOptions):
    """Options for ``LabelsService.list_labels``."""

    with_counts: Optional[bool] = None
    include_ancestor_groups: Optional[bool] = None
    search: Optional[str] = None


class CreateLabelOptions(Options):
    """Options for ``LabelsService.create_label``."""

    name: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[int] = None


class UpdateLabelOptions(Options):
    """Options for ``LabelsService.update_label``."""

    new_name: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[int] = None
