"""User entity models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options


class User(BaseModel):
    """GitLab user model."""

    id: int = Field(..., description='User ID')
    username: Optional[str] = Field(default=None, description='Username')
    name: Optional[str] = Field(default=None, description='Full name')
    email: Optional[str] = Field(default=None, description='Email address')
    state: Optional[str] = Field(
        default=None, description='User state (active, blocked, etc.)'
    )
    avatar_url: Optional[str] = Field(default=None, description='Avatar URL')
    web_url: Optional[str] = Field(default=None, description='Web URL')

    # Profile information
    bio: Optional[str] = Field(default=None, description='User bio')
    location: Optional[str] = Field(default=None, description='Location')
    public_email: Optional[str] = Field(default=None, description='Public email')
    linkedin: Optional[str] = Field(default=None, description='LinkedIn profile')
    twitter: Optional[str] = Field(default=None, description='Twitter handle')
    website_url: Optional[str] = Field(default=None, description='Website URL')
    organization: Optional[str] = Field(default=None, description='Organization')
    job_title: Optional[str] = Field(default=None, description='Job title')

    # Timestamps
    created_at: Optional[datetime] = Field(
        default=None, description='Creation timestamp'
    )
    last_sign_in_at: Optional[datetime] = Field(
        default=None, description='Last sign-in timestamp'
    )
    current_sign_in_at: Optional[datetime] = Field(
        default=None, description='Current sign-in timestamp'
    )
    confirmed_at: Optional[datetime] = Field(
        default=None, description='Confirmation timestamp'
    )
    last_activity_on: Optional[str] = Field(
        default=None, description='Last activity date'
    )

    # Access control
    is_admin: Optional[bool] = Field(default=None, description='Administrator')
    bot: Optional[bool] = Field(default=None, description='Bot user')
    can_create_group: Optional[bool] = Field(
        default=None, description='Can create groups'
    )
    can_create_project: Optional[bool] = Field(
        default=None, description='Can create projects'
    )
    two_factor_enabled: Optional[bool] = Field(
        default=None, description='Two-factor authentication enabled'
    )
    external: Optional[bool] = Field(default=None, description='External user')
    private_profile: Optional[bool] = Field(default=None, description='Private profile')
    locked: Optional[bool] = Field(default=None, description='Account locked')

    projects_limit: Optional[int] = Field(default=None, description='Project limit')
    theme_id: Optional[int] = Field(default=None, description='Theme ID')
    color_scheme_id: Optional[int] = Field(default=None, description='Color scheme ID')
    namespace_id: Optional[int] = Field(default=None, description='Personal namespace')


class SSHKey(BaseModel):
    """SSH key of a user."""

    id: int = Field(..., description='Key ID')
    title: Optional[str] = Field(default=None, description='Key title')
    key: Optional[str] = Field(default=None, description='Public key')
    created_at: Optional[datetime] = Field(default=None)
    expires_at: Optional[datetime] = Field(default=None)


class ListUsersOptions(ListOptions):
    """Options for ``UsersService.list_users``."""

    active: Optional[bool] = None
    blocked: Optional[bool] = None
    external: Optional[bool] = None
    exclude_external: Optional[bool] = None
    search: Optional[str] = None
    username: Optional[str] = None
    extern_uid: Optional[str] = None
    provider: Optional[str] = None
    created_before: Optional[datetime] = None
    created_after: Optional[datetime] = None
    two_factor: Optional[str] = None
    admins: Optional[bool] = None
    without_project_bots: Optional[bool] = None


class CreateUserOptions(Options):
    """Options for ``UsersService.create_user``."""

    email: Optional[str] = None
    password: Optional[str] = None
    reset_password: Optional[bool] = None
    force_random_password: Optional[bool] = None
    username: Optional[str] = None
    name: Optional[str] = None
    skype: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    website_url: Optional[str] = None
    organization: Optional[str] = None
    projects_limit: Optional[int] = None
    extern_uid: Optional[str] = None
    provider: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    admin: Optional[bool] = None
    can_create_group: Optional[bool] = None
    skip_confirmation: Optional[bool] = None
    external: Optional[bool] = None
    private_profile: Optional[bool] = None


class ModifyUserOptions(Options):
    """Options for ``UsersService.modify_user``."""

    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = None
    name: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    website_url: Optional[str] = None
    organization: Optional[str] = None
    projects_limit: Optional[int] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    public_email: Optional[str] = None
    admin: Optional[bool] = None
    can_create_group: Optional[bool] = None
    skip_reconfirmation: Optional[bool] = None
    external: Optional[bool] = None
    private_profile: Optional[bool] = None
    note: Optional[str] = None


class AddSSHKeyOptions(Options):
    """Options for adding an SSH key."""

    title: Optional[str] = None
    key: Optional[str] = None
    expires_at: Optional[datetime] = None
    usage_type: Optional[str] = None


class ListSSHKeysOptions(ListOptions):
    """Options for listing SSH keys."""

    pass
