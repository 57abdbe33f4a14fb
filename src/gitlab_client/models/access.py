"""Access requests and protected branch models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import AccessLevel
from .options import ListOptions, Options


class AccessRequest(BaseModel):
    """Request of a user to join a project or group."""

    id: int = Field(..., description='User ID')
    username: Optional[str] = Field(default=None, description='Username')
    name: Optional[str] = Field(default=None, description='Full name')
    state: Optional[str] = Field(default=None, description='User state')
    requested_at: Optional[datetime] = Field(default=None)
    access_level: Optional[AccessLevel] = Field(
        default=None, description='Granted level once approved'
    )


class ListAccessRequestsOptions(ListOptions):
    """Options for the access request list endpoints."""


class ApproveAccessRequestOptions(Options):
    """Options for approving an access request.

    GitLab grants ``DEVELOPER`` when ``access_level`` is not set.
    """

    access_level: Optional[AccessLevel] = None


class BranchAccessDescription(BaseModel):
    """Who may push, merge or unprotect a protected branch."""

    id: Optional[int] = None
    access_level: Optional[AccessLevel] = None
    access_level_description: Optional[str] = None
    deploy_key_id: Optional[int] = None
    user_id: Optional[int] = None
    group_id: Optional[int] = None


class ProtectedBranch(BaseModel):
    """Protected branch of a project."""

    id: int = Field(..., description='Protection rule ID')
    name: str = Field(..., description='Branch name or wildcard')
    push_access_levels: List[BranchAccessDescription] = Field(default_factory=list)
    merge_access_levels: List[BranchAccessDescription] = Field(default_factory=list)
    unprotect_access_levels: List[BranchAccessDescription] = Field(
        default_factory=list
    )
    allow_force_push: Optional[bool] = Field(default=None)
    code_owner_approval_required: Optional[bool] = Field(default=None)


class ListProtectedBranchesOptions(ListOptions):
    """Options for ``ProtectedBranchesService.list_protected_branches``."""

    search: Optional[str] = None


class BranchPermissionOptions(Options):
    id: Optional[int] = None
    user_id: Optional[int] = None
    group_id: Optional[int] = None
    deploy_key_id: Optional[int] = None
    access_level: Optional[AccessLevel] = None
    destroy: Optional[bool] = Field(default=None, alias='_destroy')


class ProtectRepositoryBranchesOptions(Options):
    """Options for ``ProtectedBranchesService.protect_repository_branches``."""

    name: Optional[str] = None
    push_access_level: Optional[AccessLevel] = None
    merge_access_level: Optional[AccessLevel] = None
    unprotect_access_level: Optional[AccessLevel] = None
    allow_force_push: Optional[bool] = None
    allowed_to_push: Optional[List[BranchPermissionOptions]] = None
    allowed_to_merge: Optional[List[BranchPermissionOptions]] = None
    allowed_to_unprotect: Optional[List[BranchPermissionOptions]] = None
    code_owner_approval_required: Optional[bool] = None


class UpdateProtectedBranchOptions(Options):
    """Options for ``ProtectedBranchesService.update_protected_branch``."""

    name: Optional[str] = None
    allow_force_push: Optional[bool] = None
    code_owner_approval_required: Optional[bool] = None
    allowed_to_push: Optional[List[BranchPermissionOptions]] = None
    allowed_to_merge: Optional[List[BranchPermissionOptions]] = None
    allowed_to_unprotect: Optional[List[BranchPermissionOptions]] = None
