"""Group entity models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options
from .project import Project


class Group(BaseModel):
    """GitLab group model."""

    id: int = Field(..., description='Group ID')
    name: Optional[str] = Field(default=None, description='Group name')
    path: Optional[str] = Field(default=None, description='Group path')
    full_name: Optional[str] = Field(default=None, description='Full group name')
    full_path: Optional[str] = Field(default=None, description='Full group path')
    description: Optional[str] = Field(default=None, description='Group description')
    visibility: Optional[str] = Field(
        default=None, description='Visibility level (private, internal, public)'
    )
    web_url: Optional[str] = Field(default=None, description='Web URL')
    avatar_url: Optional[str] = Field(default=None, description='Avatar URL')
    parent_id: Optional[int] = Field(default=None, description='Parent group ID')

    lfs_enabled: Optional[bool] = Field(default=None, description='Git LFS enabled')
    request_access_enabled: Optional[bool] = Field(
        default=None, description='Request access enabled'
    )
    share_with_group_lock: Optional[bool] = Field(
        default=None, description='Share with group lock'
    )
    require_two_factor_authentication: Optional[bool] = Field(
        default=None, description='Require 2FA'
    )
    two_factor_grace_period: Optional[int] = Field(
        default=None, description='2FA grace period'
    )
    project_creation_level: Optional[str] = Field(
        default=None, description='Project creation level'
    )
    subgroup_creation_level: Optional[str] = Field(
        default=None, description='Subgroup creation level'
    )
    default_branch_protection: Optional[int] = Field(
        default=None, description='Default branch protection'
    )

    projects: List[Project] = Field(default_factory=list, description='Group projects')
    created_at: Optional[datetime] = Field(
        default=None, description='Creation timestamp'
    )
    marked_for_deletion_on: Optional[str] = Field(
        default=None, description='Scheduled deletion date'
    )


class ListGroupsOptions(ListOptions):
    """Options for ``GroupsService.list_groups``."""

    all_available: Optional[bool] = None
    min_access_level: Optional[int] = None
    owned: Optional[bool] = None
    search: Optional[str] = None
    skip_groups: Optional[List[int]] = None
    statistics: Optional[bool] = None
    top_level_only: Optional[bool] = None
    with_custom_attributes: Optional[bool] = None


class ListSubGroupsOptions(ListGroupsOptions):
    """Options for ``GroupsService.list_subgroups``."""


class ListGroupProjectsOptions(ListOptions):
    """Options for ``GroupsService.list_group_projects``."""

    archived: Optional[bool] = None
    include_subgroups: Optional[bool] = None
    min_access_level: Optional[int] = None
    owned: Optional[bool] = None
    search: Optional[str] = None
    simple: Optional[bool] = None
    starred: Optional[bool] = None
    visibility: Optional[str] = None
    with_shared: Optional[bool] = None


class GetGroupOptions(Options):
    """Options for ``GroupsService.get_group``."""

    with_custom_attributes: Optional[bool] = None
    with_projects: Optional[bool] = None


class CreateGroupOptions(Options):
    """Options for ``GroupsService.create_group``."""

    name: Optional[str] = None
    path: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    parent_id: Optional[int] = None
    lfs_enabled: Optional[bool] = None
    request_access_enabled: Optional[bool] = None
    share_with_group_lock: Optional[bool] = None
    require_two_factor_authentication: Optional[bool] = None
    two_factor_grace_period: Optional[int] = None
    project_creation_level: Optional[str] = None
    subgroup_creation_level: Optional[str] = None
    default_branch_protection: Optional[int] = None


class UpdateGroupOptions(CreateGroupOptions):
    """Options for ``GroupsService.update_group``."""


class DeleteGroupOptions(Options):
    """Options for ``GroupsService.delete_group``."""

    permanently_remove: Optional[bool] = None
    full_path: Optional[str] = None


class TransferSubGroupOptions(Options):
    """Options for ``GroupsService.transfer_subgroup``."""

    group_id: Optional[int] = None
