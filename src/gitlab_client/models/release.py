"""Release models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .milestone import Milestone
from .options import ListOptions, Options
from .repository import Commit


class ReleaseLink(BaseModel):
    """Asset link of a release."""

    id: int
    name: Optional[str] = None
    url: Optional[str] = None
    direct_asset_url: Optional[str] = None
    link_type: Optional[str] = None


class ReleaseSource(BaseModel):
    format: Optional[str] = None
    url: Optional[str] = None


class ReleaseAssets(BaseModel):
    count: Optional[int] = None
    sources: List[ReleaseSource] = Field(default_factory=list)
    links: List[ReleaseLink] = Field(default_factory=list)


class Release(BaseModel):
    """Project release."""

    tag_name: str = Field(..., description='Tag the release is based on')
    name: Optional[str] = Field(default=None, description='Release name')
    description: Optional[str] = Field(default=None, description='Release notes')
    description_html: Optional[str] = Field(default=None)
    author: Optional[BasicUser] = Field(default=None)
    commit: Optional[Commit] = Field(default=None)
    milestones: List[Milestone] = Field(default_factory=list)
    upcoming_release: Optional[bool] = Field(default=None)
    commit_path: Optional[str] = Field(default=None)
    tag_path: Optional[str] = Field(default=None)
    assets: Optional[ReleaseAssets] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)
    released_at: Optional[datetime] = Field(default=None)


class ListReleasesOptions(ListOptions):
    """Options for ``ReleasesService.list_releases``."""

    include_html_description: Optional[bool] = None


class ReleaseAssetLinkOptions(Options):
    name: Optional[str] = None
    url: Optional[str] = None
    direct_asset_path: Optional[str] = None
    link_type: Optional[str] = None


class ReleaseAssetsOptions(Options):
    links: Optional[List[ReleaseAssetLinkOptions]] = None


class CreateReleaseOptions(Options):
    """Options for ``ReleasesService.create_release``."""

    name: Optional[str] = None
    tag_name: Optional[str] = None
    tag_message: Optional[str] = None
    description: Optional[str] = None
    ref: Optional[str] = None
    milestones: Optional[List[str]] = None
    assets: Optional[ReleaseAssetsOptions] = None
    released_at: Optional[datetime] = None


class UpdateReleaseOptions(Options):
    """Options for ``ReleasesService.update_release``."""

    name: Optional[str] = None
    description: Optional[str] = None
    milestones: Optional[List[str]] = None
    released_at: Optional[datetime] = None
