"""CI/CD job models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .options import ListOptions, Options


class JobArtifact(BaseModel):
    file_type: Optional[str] = None
    filename: Optional[str] = None
    size: Optional[int] = None
    file_format: Optional[str] = None


class JobPipeline(BaseModel):
    id: int
    project_id: Optional[int] = None
    ref: Optional[str] = None
    sha: Optional[str] = None
    status: Optional[str] = None


class JobCommit(BaseModel):
    id: Optional[str] = None
    short_id: Optional[str] = None
    title: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None


class JobRunner(BaseModel):
    id: int
    description: Optional[str] = None
    active: Optional[bool] = None
    is_shared: Optional[bool] = None
    name: Optional[str] = None


class Job(BaseModel):
    """CI/CD job of a pipeline."""

    id: int = Field(..., description='Job ID')
    name: Optional[str] = Field(default=None, description='Job name')
    stage: Optional[str] = Field(default=None, description='Pipeline stage')
    status: Optional[str] = Field(default=None, description='Job status')
    ref: Optional[str] = Field(default=None, description='Branch or tag')
    tag: Optional[bool] = Field(default=None, description='Ref is a tag')
    allow_failure: Optional[bool] = Field(default=None)
    coverage: Optional[float] = Field(default=None)
    duration: Optional[float] = Field(default=None, description='Duration in seconds')
    queued_duration: Optional[float] = Field(default=None)
    failure_reason: Optional[str] = Field(default=None)
    web_url: Optional[str] = Field(default=None, description='Web URL')
    tag_list: List[str] = Field(default_factory=list)

    user: Optional[BasicUser] = Field(default=None)
    pipeline: Optional[JobPipeline] = Field(default=None)
    commit: Optional[JobCommit] = Field(default=None)
    runner: Optional[JobRunner] = Field(default=None)
    artifacts: List[JobArtifact] = Field(default_factory=list)
    artifacts_expire_at: Optional[datetime] = Field(default=None)

    created_at: Optional[datetime] = Field(default=None)
    started_at: Optional[datetime] = Field(default=None)
    finished_at: Optional[datetime] = Field(default=None)
    erased_at: Optional[datetime] = Field(default=None)


class Bridge(Job):
    """Trigger job that starts a downstream pipeline."""

    downstream_pipeline: Optional[dict] = None


class ListJobsOptions(ListOptions):
    """Options for the job list endpoints.

    ``scope`` is sent as ``scope[]=...`` for each status.
    """

    scope: Optional[List[str]] = None
    include_retried: Optional[bool] = None


class PlayJobOptions(Options):
    """Options for ``JobsService.play_job``."""

    job_variables_attributes: Optional[List[dict]] = None
