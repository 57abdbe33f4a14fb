"""CI/CD pipeline models."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .common import BasicUser
from .options import ListOptions, Options


class DetailedStatus(BaseModel):
    """Rendering information of a pipeline status."""

    icon: Optional[str] = None
    text: Optional[str] = None
    label: Optional[str] = None
    group: Optional[str] = None
    tooltip: Optional[str] = None
    has_details: Optional[bool] = None
    details_path: Optional[str] = None
    illustration: Optional[dict] = None
    favicon: Optional[str] = None


class PipelineInfo(BaseModel):
    """Pipeline as it appears in pipeline lists."""

    id: int = Field(..., description='Pipeline ID')
    iid: Optional[int] = Field(default=None, description='Project-local ID')
    project_id: Optional[int] = Field(default=None, description='Project ID')
    status: Optional[str] = Field(default=None, description='Pipeline status')
    source: Optional[str] = Field(default=None, description='Trigger source')
    ref: Optional[str] = Field(default=None, description='Branch or tag')
    sha: Optional[str] = Field(default=None, description='Commit SHA')
    web_url: Optional[str] = Field(default=None, description='Web URL')
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)


class Pipeline(PipelineInfo):
    """Single pipeline with full details."""

    before_sha: Optional[str] = None
    tag: Optional[bool] = None
    yaml_errors: Optional[str] = None
    user: Optional[BasicUser] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    committed_at: Optional[datetime] = None
    duration: Optional[int] = None
    queued_duration: Optional[int] = None
    coverage: Optional[str] = None
    detailed_status: Optional[DetailedStatus] = None


class PipelineVariable(BaseModel):
    """Variable a pipeline was created with."""

    key: str
    value: Optional[str] = None
    variable_type: Optional[str] = None


class PipelineTestCase(BaseModel):
    status: Optional[str] = None
    name: Optional[str] = None
    classname: Optional[str] = None
    execution_time: Optional[float] = None
    system_output: Any = None
    stack_trace: Optional[str] = None
    attachment_url: Optional[str] = None
    recent_failures: Optional[dict] = None


class PipelineTestSuite(BaseModel):
    name: Optional[str] = None
    total_time: Optional[float] = None
    total_count: Optional[int] = None
    success_count: Optional[int] = None
    failed_count: Optional[int] = None
    skipped_count: Optional[int] = None
    error_count: Optional[int] = None
    test_cases: List[PipelineTestCase] = Field(default_factory=list)


class PipelineTestReport(BaseModel):
    """Unit test report of a pipeline."""

    total_time: Optional[float] = None
    total_count: Optional[int] = None
    success_count: Optional[int] = None
    failed_count: Optional[int] = None
    skipped_count: Optional[int] = None
    error_count: Optional[int] = None
    test_suites: List[PipelineTestSuite] = Field(default_factory=list)


class ListProjectPipelinesOptions(ListOptions):
    """Options for ``PipelinesService.list_project_pipelines``."""

    scope: Optional[str] = None
    status: Optional[str] = None
    source: Optional[str] = None
    ref: Optional[str] = None
    sha: Optional[str] = None
    yaml_errors: Optional[bool] = None
    name: Optional[str] = None
    username: Optional[str] = None
    updated_after: Optional[datetime] = None
    updated_before: Optional[datetime] = None


class GetLatestPipelineOptions(Options):
    """Options for ``PipelinesService.get_latest_pipeline``."""

    ref: Optional[str] = None


class PipelineVariableOptions(Options):
    key: Optional[str] = None
    value: Optional[str] = None
    variable_type: Optional[str] = None


class CreatePipelineOptions(Options):
    """Options for ``PipelinesService.create_pipeline``."""

    ref: Optional[str] = None
    variables: Optional[List[PipelineVariableOptions]] = None
