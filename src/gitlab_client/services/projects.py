"""Projects API."""

from typing import Dict, List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.project import (
    CreateProjectOptions,
    EditProjectOptions,
    ForkProjectOptions,
    GetProjectOptions,
    ListProjectsOptions,
    ListProjectUserOptions,
    Project,
    ProjectUser,
    ShareWithGroupOptions,
)
from .base import Service


class ProjectsService(Service):
    """Project endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/projects.html
    """

    def list_projects(
        self, opt: Optional[ListProjectsOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Project], Response]:
        """List all projects visible to the authenticated user.

        Args:
            opt: Filters and pagination
            *options: Request options

        Returns:
            Page of projects and the response
        """
        return self._call('GET', 'projects', opt, options, List[Project])

    def list_user_projects(
        self,
        uid: ID,
        opt: Optional[ListProjectsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Project], Response]:
        """List projects owned by a user, given by ID or username."""
        return self._call(
            'GET', f'users/{path_id(uid)}/projects', opt, options, List[Project]
        )

    def list_user_starred_projects(
        self,
        uid: ID,
        opt: Optional[ListProjectsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Project], Response]:
        return self._call(
            'GET',
            f'users/{path_id(uid)}/starred_projects',
            opt,
            options,
            List[Project],
        )

    def list_project_users(
        self,
        pid: ID,
        opt: Optional[ListProjectUserOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[ProjectUser], Response]:
        """List users that are members of a project or its ancestors."""
        return self._call(
            'GET', f'projects/{path_id(pid)}/users', opt, options, List[ProjectUser]
        )

    def get_project(
        self,
        pid: ID,
        opt: Optional[GetProjectOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[Project, Response]:
        """Get a single project.

        Args:
            pid: Project ID or ``namespace/project`` path
            opt: Extra details to include
            *options: Request options

        Returns:
            Project and the response

        Raises:
            InvalidIDError: If ``pid`` is neither an int nor a string
            GitLabNotFoundError: If the project does not exist
        """
        return self._call('GET', f'projects/{path_id(pid)}', opt, options, Project)

    def get_project_languages(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Dict[str, float], Response]:
        """Get language percentages of a project's repository."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/languages',
            None,
            options,
            Dict[str, float],
        )

    def create_project(
        self, opt: CreateProjectOptions, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        """Create a project owned by the authenticated user."""
        return self._call('POST', 'projects', opt, options, Project)

    def create_project_for_user(
        self, user: int, opt: CreateProjectOptions, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        """Create a project for another user (administrators only)."""
        return self._call(
            'POST', f'projects/user/{path_id(user)}', opt, options, Project
        )

    def edit_project(
        self, pid: ID, opt: EditProjectOptions, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        return self._call('PUT', f'projects/{path_id(pid)}', opt, options, Project)

    def fork_project(
        self,
        pid: ID,
        opt: Optional[ForkProjectOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[Project, Response]:
        """Fork a project into the user's or the given namespace."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/fork', opt, options, Project
        )

    def list_project_forks(
        self,
        pid: ID,
        opt: Optional[ListProjectsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Project], Response]:
        return self._call(
            'GET', f'projects/{path_id(pid)}/forks', opt, options, List[Project]
        )

    def star_project(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/star', None, options, Project
        )

    def unstar_project(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/unstar', None, options, Project
        )

    def archive_project(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        """Archive a project, making it read-only."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/archive', None, options, Project
        )

    def unarchive_project(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Project, Response]:
        return self._call(
            'POST', f'projects/{path_id(pid)}/unarchive', None, options, Project
        )

    def share_project_with_group(
        self, pid: ID, opt: ShareWithGroupOptions, *options: RequestOptionFunc
    ) -> Response:
        """Share a project with a group at the given access level."""
        _, response = self._call(
            'POST', f'projects/{path_id(pid)}/share', opt, options
        )
        return response

    def delete_shared_project_from_group(
        self, pid: ID, group_id: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/share/{group_id}', None, options
        )

    def delete_project(self, pid: ID, *options: RequestOptionFunc) -> Response:
        """Delete a project.

        Depending on the instance settings the project is only marked for
        deletion.
        """
        return self._delete(f'projects/{path_id(pid)}', None, options)
