"""CI/CD variables API for projects, groups and the instance."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_escape, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.variable import (
    CreateGroupVariableOptions,
    CreateInstanceVariableOptions,
    CreateProjectVariableOptions,
    GetGroupVariableOptions,
    GetProjectVariableOptions,
    GroupVariable,
    InstanceVariable,
    ListGroupVariablesOptions,
    ListInstanceVariablesOptions,
    ListProjectVariablesOptions,
    ProjectVariable,
    RemoveGroupVariableOptions,
    RemoveProjectVariableOptions,
    UpdateGroupVariableOptions,
    UpdateInstanceVariableOptions,
    UpdateProjectVariableOptions,
)
from .base import Service


class ProjectVariablesService(Service):
    """Project-level CI/CD variables.

    Several variables may share a key with different environment scopes;
    pass ``filter=VariableFilter(environment_scope=...)`` to pick one.

    GitLab API docs: https://docs.gitlab.com/ee/api/project_level_variables.html
    """

    def list_variables(
        self,
        pid: ID,
        opt: Optional[ListProjectVariablesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[ProjectVariable], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/variables',
            opt,
            options,
            List[ProjectVariable],
        )

    def get_variable(
        self,
        pid: ID,
        key: str,
        opt: Optional[GetProjectVariableOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[ProjectVariable, Response]:
        """Get a single variable by key.

        Args:
            pid: Project ID or path
            key: Variable key
            opt: Environment scope filter
            *options: Request options

        Returns:
            Variable and the response
        """
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/variables/{path_escape(key)}',
            opt,
            options,
            ProjectVariable,
        )

    def create_variable(
        self, pid: ID, opt: CreateProjectVariableOptions, *options: RequestOptionFunc
    ) -> Tuple[ProjectVariable, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/variables',
            opt,
            options,
            ProjectVariable,
        )

    def update_variable(
        self,
        pid: ID,
        key: str,
        opt: UpdateProjectVariableOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[ProjectVariable, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/variables/{path_escape(key)}',
            opt,
            options,
            ProjectVariable,
        )

    def remove_variable(
        self,
        pid: ID,
        key: str,
        opt: Optional[RemoveProjectVariableOptions] = None,
        *options: RequestOptionFunc,
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/variables/{path_escape(key)}', opt, options
        )


class GroupVariablesService(Service):
    """Group-level CI/CD variables.

    GitLab API docs: https://docs.gitlab.com/ee/api/group_level_variables.html
    """

    def list_variables(
        self,
        gid: ID,
        opt: Optional[ListGroupVariablesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[GroupVariable], Response]:
        return self._call(
            'GET',
            f'groups/{path_id(gid)}/variables',
            opt,
            options,
            List[GroupVariable],
        )

    def get_variable(
        self,
        gid: ID,
        key: str,
        opt: Optional[GetGroupVariableOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[GroupVariable, Response]:
        return self._call(
            'GET',
            f'groups/{path_id(gid)}/variables/{path_escape(key)}',
            opt,
            options,
            GroupVariable,
        )

    def create_variable(
        self, gid: ID, opt: CreateGroupVariableOptions, *options: RequestOptionFunc
    ) -> Tuple[GroupVariable, Response]:
        return self._call(
            'POST', f'groups/{path_id(gid)}/variables', opt, options, GroupVariable
        )

    def update_variable(
        self,
        gid: ID,
        key: str,
        opt: UpdateGroupVariableOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[GroupVariable, Response]:
        return self._call(
            'PUT',
            f'groups/{path_id(gid)}/variables/{path_escape(key)}',
            opt,
            options,
            GroupVariable,
        )

    def remove_variable(
        self,
        gid: ID,
        key: str,
        opt: Optional[RemoveGroupVariableOptions] = None,
        *options: RequestOptionFunc,
    ) -> Response:
        return self._delete(
            f'groups/{path_id(gid)}/variables/{path_escape(key)}', opt, options
        )


class InstanceVariablesService(Service):
    """Instance-level CI/CD variables (administrators only).

    GitLab API docs: https://docs.gitlab.com/ee/api/instance_level_ci_variables.html
    """

    def list_variables(
        self,
        opt: Optional[ListInstanceVariablesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[InstanceVariable], Response]:
        return self._call(
            'GET', 'admin/ci/variables', opt, options, List[InstanceVariable]
        )

    def get_variable(
        self, key: str, *options: RequestOptionFunc
    ) -> Tuple[InstanceVariable, Response]:
        return self._call(
            'GET',
            f'admin/ci/variables/{path_escape(key)}',
            None,
            options,
            InstanceVariable,
        )

    def create_variable(
        self, opt: CreateInstanceVariableOptions, *options: RequestOptionFunc
    ) -> Tuple[InstanceVariable, Response]:
        return self._call('POST', 'admin/ci/variables', opt, options, InstanceVariable)

    def update_variable(
        self,
        key: str,
        opt: UpdateInstanceVariableOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[InstanceVariable, Response]:
        return self._call(
            'PUT',
            f'admin/ci/variables/{path_escape(key)}',
            opt,
            options,
            InstanceVariable,
        )

    def remove_variable(self, key: str, *options: RequestOptionFunc) -> Response:
        return self._delete(f'admin/ci/variables/{path_escape(key)}', None, options)
