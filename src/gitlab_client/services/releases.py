"""Releases API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_escape, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.release import (
    CreateReleaseOptions,
    ListReleasesOptions,
    Release,
    UpdateReleaseOptions,
)
from .base import Service


class ReleasesService(Service):
    """Release endpoints. Releases are addressed by their tag name.

    GitLab API docs: https://docs.gitlab.com/ee/api/releases/
    """

    def list_releases(
        self,
        pid: ID,
        opt: Optional[ListReleasesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Release], Response]:
        return self._call(
            'GET', f'projects/{path_id(pid)}/releases', opt, options, List[Release]
        )

    def get_release(
        self, pid: ID, tag_name: str, *options: RequestOptionFunc
    ) -> Tuple[Release, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/releases/{path_escape(tag_name)}',
            None,
            options,
            Release,
        )

    def get_latest_release(
        self, pid: ID, *options: RequestOptionFunc
    ) -> Tuple[Release, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/releases/permalink/latest',
            None,
            options,
            Release,
        )

    def create_release(
        self, pid: ID, opt: CreateReleaseOptions, *options: RequestOptionFunc
    ) -> Tuple[Release, Response]:
        """Create a release; the tag is created from ``ref`` if missing."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/releases', opt, options, Release
        )

    def update_release(
        self,
        pid: ID,
        tag_name: str,
        opt: UpdateReleaseOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Release, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/releases/{path_escape(tag_name)}',
            opt,
            options,
            Release,
        )

    def delete_release(
        self, pid: ID, tag_name: str, *options: RequestOptionFunc
    ) -> Tuple[Release, Response]:
        """Delete a release; the tag is kept.

        Returns:
            The deleted release and the response
        """
        return self._call(
            'DELETE',
            f'projects/{path_id(pid)}/releases/{path_escape(tag_name)}',
            None,
            options,
            Release,
        )
