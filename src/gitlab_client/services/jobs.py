"""Jobs API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.job import Bridge, Job, ListJobsOptions, PlayJobOptions
from .base import Service


class JobsService(Service):
    """CI/CD job endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/jobs.html
    """

    def list_project_jobs(
        self,
        pid: ID,
        opt: Optional[ListJobsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Job], Response]:
        return self._call(
            'GET', f'projects/{path_id(pid)}/jobs', opt, options, List[Job]
        )

    def list_pipeline_jobs(
        self,
        pid: ID,
        pipeline: int,
        opt: Optional[ListJobsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Job], Response]:
        """List jobs of a pipeline.

        Args:
            pid: Project ID or path
            pipeline: Pipeline ID
            opt: ``scope`` filter and pagination
            *options: Request options

        Returns:
            Page of jobs and the response
        """
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/pipelines/{pipeline}/jobs',
            opt,
            options,
            List[Job],
        )

    def list_pipeline_bridges(
        self,
        pid: ID,
        pipeline: int,
        opt: Optional[ListJobsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Bridge], Response]:
        """List trigger jobs of a pipeline."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/pipelines/{pipeline}/bridges',
            opt,
            options,
            List[Bridge],
        )

    def get_job(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Tuple[Job, Response]:
        return self._call(
            'GET', f'projects/{path_id(pid)}/jobs/{job}', None, options, Job
        )

    def get_trace_file(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Tuple[bytes, Response]:
        """Download the log of a job."""
        return self._call(
            'GET', f'projects/{path_id(pid)}/jobs/{job}/trace', None, options, bytes
        )

    def get_job_artifacts(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Tuple[bytes, Response]:
        """Download the artifacts archive of a job."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/jobs/{job}/artifacts',
            None,
            options,
            bytes,
        )

    def cancel_job(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Tuple[Job, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/jobs/{job}/cancel', None, options, Job
        )

    def retry_job(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Tuple[Job, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/jobs/{job}/retry', None, options, Job
        )

    def erase_job(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Tuple[Job, Response]:
        """Erase the log and artifacts of a job."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/jobs/{job}/erase', None, options, Job
        )

    def play_job(
        self,
        pid: ID,
        job: int,
        opt: Optional[PlayJobOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[Job, Response]:
        """Start a manual job."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/jobs/{job}/play', opt, options, Job
        )

    def delete_artifacts(
        self, pid: ID, job: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/jobs/{job}/artifacts', None, options
        )
