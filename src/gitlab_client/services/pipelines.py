"""Pipelines API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.pipeline import (
    CreatePipelineOptions,
    GetLatestPipelineOptions,
    ListProjectPipelinesOptions,
    Pipeline,
    PipelineInfo,
    PipelineTestReport,
    PipelineVariable,
)
from .base import Service


class PipelinesService(Service):
    """CI/CD pipeline endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/pipelines.html
    """

    def list_project_pipelines(
        self,
        pid: ID,
        opt: Optional[ListProjectPipelinesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[PipelineInfo], Response]:
        """List pipelines of a project.

        Args:
            pid: Project ID or path
            opt: Filters such as ``status`` or ``ref``, and pagination
            *options: Request options

        Returns:
            Page of pipelines and the response
        """
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/pipelines',
            opt,
            options,
            List[PipelineInfo],
        )

    def get_pipeline(
        self, pid: ID, pipeline: int, *options: RequestOptionFunc
    ) -> Tuple[Pipeline, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/pipelines/{pipeline}',
            None,
            options,
            Pipeline,
        )

    def get_pipeline_variables(
        self, pid: ID, pipeline: int, *options: RequestOptionFunc
    ) -> Tuple[List[PipelineVariable], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/pipelines/{pipeline}/variables',
            None,
            options,
            List[PipelineVariable],
        )

    def get_pipeline_test_report(
        self, pid: ID, pipeline: int, *options: RequestOptionFunc
    ) -> Tuple[PipelineTestReport, Response]:
        """Get the unit test report of a pipeline."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/pipelines/{pipeline}/test_report',
            None,
            options,
            PipelineTestReport,
        )

    def get_latest_pipeline(
        self,
        pid: ID,
        opt: Optional[GetLatestPipelineOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[Pipeline, Response]:
        """Get the latest pipeline of a ref, the default branch if unset."""
        return self._call(
            'GET', f'projects/{path_id(pid)}/pipelines/latest', opt, options, Pipeline
        )

    def create_pipeline(
        self, pid: ID, opt: CreatePipelineOptions, *options: RequestOptionFunc
    ) -> Tuple[Pipeline, Response]:
        """Trigger a new pipeline for a ref."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/pipeline', opt, options, Pipeline
        )

    def retry_pipeline_build(
        self, pid: ID, pipeline: int, *options: RequestOptionFunc
    ) -> Tuple[Pipeline, Response]:
        """Retry the failed or canceled jobs of a pipeline."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/pipelines/{pipeline}/retry',
            None,
            options,
            Pipeline,
        )

    def cancel_pipeline_build(
        self, pid: ID, pipeline: int, *options: RequestOptionFunc
    ) -> Tuple[Pipeline, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/pipelines/{pipeline}/cancel',
            None,
            options,
            Pipeline,
        )

    def delete_pipeline(
        self, pid: ID, pipeline: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/pipelines/{pipeline}', None, options
        )
