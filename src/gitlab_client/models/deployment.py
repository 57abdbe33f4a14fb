"""Deployment models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .job import Job
from .options import ListOptions, Options


class DeploymentEnvironment(BaseModel):
    id: int
    name: Optional[str] = None
    external_url: Optional[str] = None


class Deployment(BaseModel):
    """Deployment of a ref to an environment."""

    id: int = Field(..., description='Deployment ID')
    iid: Optional[int] = Field(default=None, description='Project-local ID')
    ref: Optional[str] = Field(default=None, description='Deployed ref')
    sha: Optional[str] = Field(default=None, description='Deployed commit')
    status: Optional[str] = Field(default=None, description='Deployment status')
    user: Optional[BasicUser] = Field(default=None)
    environment: Optional[DeploymentEnvironment] = Field(default=None)
    deployable: Optional[Job] = Field(default=None, description='Deploy job')
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)


class ListProjectDeploymentsOptions(ListOptions):
    """Options for ``DeploymentsService.list_project_deployments``."""

    environment: Optional[str] = None
    status: Optional[str] = None
    updated_after: Optional[datetime] = None
    updated_before: Optional[datetime] = None
    finished_after: Optional[datetime] = None
    finished_before: Optional[datetime] = None


class CreateProjectDeploymentOptions(Options):
    """Options for ``DeploymentsService.create_project_deployment``."""

    environment: Optional[str] = None
    ref: Optional[str] = None
    sha: Optional[str] = None
    tag: Optional[bool] = None
    status: Optional[str] = None


class UpdateProjectDeploymentOptions(Options):
    """Options for ``DeploymentsService.update_project_deployment``."""

    status: Optional[str] = None
