"""Deployments API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.deployment import (
    CreateProjectDeploymentOptions,
    Deployment,
    ListProjectDeploymentsOptions,
    UpdateProjectDeploymentOptions,
)
from ..models.merge_request import MergeRequest
from .base import Service


class DeploymentsService(Service):
    """Deployment endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/deployments.html
    """

    def list_project_deployments(
        self,
        pid: ID,
        opt: Optional[ListProjectDeploymentsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Deployment], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/deployments',
            opt,
            options,
            List[Deployment],
        )

    def get_project_deployment(
        self, pid: ID, deployment: int, *options: RequestOptionFunc
    ) -> Tuple[Deployment, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/deployments/{deployment}',
            None,
            options,
            Deployment,
        )

    def create_project_deployment(
        self,
        pid: ID,
        opt: CreateProjectDeploymentOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Deployment, Response]:
        """Record a deployment made outside of GitLab CI/CD."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/deployments', opt, options, Deployment
        )

    def update_project_deployment(
        self,
        pid: ID,
        deployment: int,
        opt: UpdateProjectDeploymentOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Deployment, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/deployments/{deployment}',
            opt,
            options,
            Deployment,
        )

    def delete_project_deployment(
        self, pid: ID, deployment: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/deployments/{deployment}', None, options
        )

    def list_deployment_merge_requests(
        self, pid: ID, deployment: int, *options: RequestOptionFunc
    ) -> Tuple[List[MergeRequest], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/deployments/{deployment}/merge_requests',
            None,
            options,
            List[MergeRequest],
        )
