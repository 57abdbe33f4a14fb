"""Groups API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.group import (
    CreateGroupOptions,
    DeleteGroupOptions,
    GetGroupOptions,
    Group,
    ListGroupProjectsOptions,
    ListGroupsOptions,
    ListSubGroupsOptions,
    TransferSubGroupOptions,
    UpdateGroupOptions,
)
from ..models.project import Project
from .base import Service


class GroupsService(Service):
    """Group endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/groups.html
    """

    def list_groups(
        self, opt: Optional[ListGroupsOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Group], Response]:
        """List groups visible to the authenticated user.

        Args:
            opt: Filters and pagination
            *options: Request options

        Returns:
            Page of groups and the response
        """
        return self._call('GET', 'groups', opt, options, List[Group])

    def list_subgroups(
        self,
        gid: ID,
        opt: Optional[ListSubGroupsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Group], Response]:
        """List direct subgroups of a group."""
        return self._call(
            'GET', f'groups/{path_id(gid)}/subgroups', opt, options, List[Group]
        )

    def list_descendant_groups(
        self,
        gid: ID,
        opt: Optional[ListGroupsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Group], Response]:
        return self._call(
            'GET',
            f'groups/{path_id(gid)}/descendant_groups',
            opt,
            options,
            List[Group],
        )

    def list_group_projects(
        self,
        gid: ID,
        opt: Optional[ListGroupProjectsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Project], Response]:
        """List projects of a group."""
        return self._call(
            'GET', f'groups/{path_id(gid)}/projects', opt, options, List[Project]
        )

    def get_group(
        self,
        gid: ID,
        opt: Optional[GetGroupOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[Group, Response]:
        """Get a group by ID or full path."""
        return self._call('GET', f'groups/{path_id(gid)}', opt, options, Group)

    def create_group(
        self, opt: CreateGroupOptions, *options: RequestOptionFunc
    ) -> Tuple[Group, Response]:
        return self._call('POST', 'groups', opt, options, Group)

    def update_group(
        self, gid: ID, opt: UpdateGroupOptions, *options: RequestOptionFunc
    ) -> Tuple[Group, Response]:
        return self._call('PUT', f'groups/{path_id(gid)}', opt, options, Group)

    def transfer_subgroup(
        self, gid: ID, opt: TransferSubGroupOptions, *options: RequestOptionFunc
    ) -> Tuple[Group, Response]:
        """Move a group below another parent group.

        Without ``group_id`` the group becomes a top-level group.
        """
        return self._call(
            'POST', f'groups/{path_id(gid)}/transfer', opt, options, Group
        )

    def transfer_project(
        self, gid: ID, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Group, Response]:
        """Move a project into a group's namespace."""
        return self._call(
            'POST',
            f'groups/{path_id(gid)}/projects/{path_id(pid)}',
            None,
            options,
            Group,
        )

    def restore_group(
        self, gid: ID, *options: RequestOptionFunc
    ) -> Tuple[Group, Response]:
        """Restore a group marked for deletion."""
        return self._call(
            'POST', f'groups/{path_id(gid)}/restore', None, options, Group
        )

    def delete_group(
        self,
        gid: ID,
        opt: Optional[DeleteGroupOptions] = None,
        *options: RequestOptionFunc,
    ) -> Response:
        return self._delete(f'groups/{path_id(gid)}', opt, options)
