"""Types shared by several resources."""

from datetime import datetime
from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field


class AccessLevel(IntEnum):
    """Membership access levels.

    GitLab API docs: https://docs.gitlab.com/ee/api/members.html#roles
    """

    NO_PERMISSIONS = 0
    MINIMAL_ACCESS = 5
    GUEST = 10
    PLANNER = 15
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50
    ADMIN = 60


class BasicUser(BaseModel):
    """Reduced user representation embedded in other resources."""

    id: int = Field(..., description='User ID')
    username: Optional[str] = Field(default=None, description='Username')
    name: Optional[str] = Field(default=None, description='Full name')
    state: Optional[str] = Field(default=None, description='User state')
    locked: Optional[bool] = Field(default=None, description='Account locked')
    created_at: Optional[datetime] = Field(
        default=None, description='Creation timestamp'
    )
    avatar_url: Optional[str] = Field(default=None, description='Avatar URL')
    web_url: Optional[str] = Field(default=None, description='Web URL')


class TimeStats(BaseModel):
    """Time tracking statistics of an issue or merge request."""

    human_time_estimate: Optional[str] = None
    human_total_time_spent: Optional[str] = None
    time_estimate: Optional[int] = None
    total_time_spent: Optional[int] = None


class Namespace(BaseModel):
    """Namespace a project lives in (user or group)."""

    id: int = Field(..., description='Namespace ID')
    name: Optional[str] = Field(default=None, description='Namespace name')
    path: Optional[str] = Field(default=None, description='Namespace path')
    kind: Optional[str] = Field(default=None, description='user or group')
    full_path: Optional[str] = Field(default=None, description='Full path')
    parent_id: Optional[int] = Field(default=None, description='Parent namespace')
    avatar_url: Optional[str] = Field(default=None, description='Avatar URL')
    web_url: Optional[str] = Field(default=None, description='Web URL')
