"""Personal access token models."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options


class PersonalAccessToken(BaseModel):
    """Personal access token; ``token`` is only set right after creation."""

    id: int = Field(..., description='Token ID')
    name: Optional[str] = Field(default=None, description='Token name')
    revoked: Optional[bool] = Field(default=None)
    active: Optional[bool] = Field(default=None)
    scopes: List[str] = Field(default_factory=list)
    user_id: Optional[int] = Field(default=None)
    description: Optional[str] = Field(default=None)
    token: Optional[str] = Field(default=None, description='Secret token value')
    created_at: Optional[datetime] = Field(default=None)
    last_used_at: Optional[datetime] = Field(default=None)
    expires_at: Optional[date] = Field(default=None)


class ListPersonalAccessTokensOptions(ListOptions):
    """Options for ``PersonalAccessTokensService.list_personal_access_tokens``."""

    user_id: Optional[int] = None
    state: Optional[str] = None
    revoked: Optional[bool] = None
    search: Optional[str] = None
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
    last_used_after: Optional[datetime] = None
    last_used_before: Optional[datetime] = None


class RotatePersonalAccessTokenOptions(Options):
    """Options for ``PersonalAccessTokensService.rotate_personal_access_token``."""

    expires_at: Optional[date] = None
