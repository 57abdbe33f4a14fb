"""Repository APIs: branches, tags and commits."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_escape, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.merge_request import MergeRequest
from ..models.repository import (
    Branch,
    CherryPickCommitOptions,
    Commit,
    CommitRef,
    CommitStatus,
    CreateBranchOptions,
    CreateCommitOptions,
    CreateTagOptions,
    Diff,
    GetCommitDiffOptions,
    GetCommitOptions,
    GetCommitRefsOptions,
    GetCommitStatusesOptions,
    ListBranchesOptions,
    ListCommitsOptions,
    ListTagsOptions,
    RevertCommitOptions,
    SetCommitStatusOptions,
    Tag,
)
from .base import Service


class BranchesService(Service):
    """Repository branch endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/branches.html
    """

    def list_branches(
        self,
        pid: ID,
        opt: Optional[ListBranchesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Branch], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/branches',
            opt,
            options,
            List[Branch],
        )

    def get_branch(
        self, pid: ID, branch: str, *options: RequestOptionFunc
    ) -> Tuple[Branch, Response]:
        """Get a branch; names containing ``/`` are escaped."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/branches/{path_escape(branch)}',
            None,
            options,
            Branch,
        )

    def create_branch(
        self, pid: ID, opt: CreateBranchOptions, *options: RequestOptionFunc
    ) -> Tuple[Branch, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/repository/branches',
            opt,
            options,
            Branch,
        )

    def delete_branch(
        self, pid: ID, branch: str, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/repository/branches/{path_escape(branch)}',
            None,
            options,
        )

    def delete_merged_branches(self, pid: ID, *options: RequestOptionFunc) -> Response:
        """Delete all branches merged into the default branch.

        Protected branches are kept.
        """
        return self._delete(
            f'projects/{path_id(pid)}/repository/merged_branches', None, options
        )


class TagsService(Service):
    """Repository tag endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/tags.html
    """

    def list_tags(
        self,
        pid: ID,
        opt: Optional[ListTagsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Tag], Response]:
        """List tags, newest first by default.

        Args:
            pid: Project ID or path
            opt: Search, ordering and pagination
            *options: Request options

        Returns:
            Page of tags and the response
        """
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/tags',
            opt,
            options,
            List[Tag],
        )

    def get_tag(
        self, pid: ID, tag: str, *options: RequestOptionFunc
    ) -> Tuple[Tag, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/tags/{path_escape(tag)}',
            None,
            options,
            Tag,
        )

    def create_tag(
        self, pid: ID, opt: CreateTagOptions, *options: RequestOptionFunc
    ) -> Tuple[Tag, Response]:
        """Create a tag; a ``message`` makes it an annotated tag."""
        return self._call(
            'POST', f'projects/{path_id(pid)}/repository/tags', opt, options, Tag
        )

    def delete_tag(self, pid: ID, tag: str, *options: RequestOptionFunc) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/repository/tags/{path_escape(tag)}',
            None,
            options,
        )


class CommitsService(Service):
    """Repository commit endpoints.

    GitLab API docs: https://docs.gitlab.com/ee/api/commits.html
    """

    def list_commits(
        self,
        pid: ID,
        opt: Optional[ListCommitsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Commit], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/commits',
            opt,
            options,
            List[Commit],
        )

    def get_commit(
        self,
        pid: ID,
        sha: str,
        opt: Optional[GetCommitOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[Commit, Response]:
        """Get a commit by SHA, branch or tag name.

        Raises:
            ValueError: If ``sha`` is empty
        """
        if not sha:
            raise ValueError('sha must be a non-empty string')
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}',
            opt,
            options,
            Commit,
        )

    def create_commit(
        self, pid: ID, opt: CreateCommitOptions, *options: RequestOptionFunc
    ) -> Tuple[Commit, Response]:
        """Create a commit with several file actions at once."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/repository/commits',
            opt,
            options,
            Commit,
        )

    def get_commit_diff(
        self,
        pid: ID,
        sha: str,
        opt: Optional[GetCommitDiffOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Diff], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}/diff',
            opt,
            options,
            List[Diff],
        )

    def get_commit_refs(
        self,
        pid: ID,
        sha: str,
        opt: Optional[GetCommitRefsOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[CommitRef], Response]:
        """List branches and tags a commit is pushed to."""
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}/refs',
            opt,
            options,
            List[CommitRef],
        )

    def get_commit_statuses(
        self,
        pid: ID,
        sha: str,
        opt: Optional[GetCommitStatusesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[CommitStatus], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}/statuses',
            opt,
            options,
            List[CommitStatus],
        )

    def set_commit_status(
        self,
        pid: ID,
        sha: str,
        opt: SetCommitStatusOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[CommitStatus, Response]:
        """Add or update the status of a commit, e.g. from an external CI."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/statuses/{path_escape(sha)}',
            opt,
            options,
            CommitStatus,
        )

    def list_merge_requests_by_commit(
        self, pid: ID, sha: str, *options: RequestOptionFunc
    ) -> Tuple[List[MergeRequest], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}'
            '/merge_requests',
            None,
            options,
            List[MergeRequest],
        )

    def cherry_pick_commit(
        self,
        pid: ID,
        sha: str,
        opt: CherryPickCommitOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Commit, Response]:
        """Cherry-pick a commit onto a branch."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}'
            '/cherry_pick',
            opt,
            options,
            Commit,
        )

    def revert_commit(
        self,
        pid: ID,
        sha: str,
        opt: RevertCommitOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Commit, Response]:
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/repository/commits/{path_escape(sha)}/revert',
            opt,
            options,
            Commit,
        )
