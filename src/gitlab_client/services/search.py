"""Search API."""

from typing import Any, List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.common import BasicUser
from ..models.issue import Issue
from ..models.merge_request import MergeRequest
from ..models.milestone import Milestone
from ..models.note import Note
from ..models.project import Project
from ..models.repository import Commit
from ..models.search import Blob, SearchOptions
from .base import Service


class SearchService(Service):
    """Search across the instance, a group or a project.

    Every method takes the search term as ``query``; the matching
    ``scope`` is set automatically.

    GitLab API docs: https://docs.gitlab.com/ee/api/search.html
    """

    def _search(
        self,
        path: str,
        scope: str,
        query: str,
        result_type: Any,
        opt: Optional[SearchOptions],
        options: Tuple[RequestOptionFunc, ...],
    ) -> Tuple[Any, Response]:
        opt = (opt or SearchOptions()).model_copy(
            update={'scope': scope, 'search': query}
        )
        return self._call('GET', path, opt, options, result_type)

    @staticmethod
    def _group(gid: ID) -> str:
        return f'groups/{path_id(gid)}/-/search'

    @staticmethod
    def _project(pid: ID) -> str:
        return f'projects/{path_id(pid)}/-/search'

    def projects(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Project], Response]:
        return self._search('search', 'projects', query, List[Project], opt, options)

    def projects_by_group(
        self,
        gid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Project], Response]:
        return self._search(
            self._group(gid), 'projects', query, List[Project], opt, options
        )

    def issues(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Issue], Response]:
        return self._search('search', 'issues', query, List[Issue], opt, options)

    def issues_by_group(
        self,
        gid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Issue], Response]:
        return self._search(self._group(gid), 'issues', query, List[Issue], opt, options)

    def issues_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Issue], Response]:
        return self._search(
            self._project(pid), 'issues', query, List[Issue], opt, options
        )

    def merge_requests(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[MergeRequest], Response]:
        return self._search(
            'search', 'merge_requests', query, List[MergeRequest], opt, options
        )

    def merge_requests_by_group(
        self,
        gid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[MergeRequest], Response]:
        return self._search(
            self._group(gid), 'merge_requests', query, List[MergeRequest], opt, options
        )

    def merge_requests_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[MergeRequest], Response]:
        return self._search(
            self._project(pid), 'merge_requests', query, List[MergeRequest], opt, options
        )

    def milestones(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Milestone], Response]:
        return self._search('search', 'milestones', query, List[Milestone], opt, options)

    def milestones_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Milestone], Response]:
        return self._search(
            self._project(pid), 'milestones', query, List[Milestone], opt, options
        )

    def notes_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Note], Response]:
        """Search comments of a project; only available with project scope."""
        return self._search(self._project(pid), 'notes', query, List[Note], opt, options)

    def commits(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Commit], Response]:
        """Search commits; requires advanced search on the server."""
        return self._search('search', 'commits', query, List[Commit], opt, options)

    def commits_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Commit], Response]:
        return self._search(
            self._project(pid), 'commits', query, List[Commit], opt, options
        )

    def blobs(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[Blob], Response]:
        return self._search('search', 'blobs', query, List[Blob], opt, options)

    def blobs_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Blob], Response]:
        """Search file content of a project, optionally on ``opt.ref``."""
        return self._search(self._project(pid), 'blobs', query, List[Blob], opt, options)

    def users(
        self, query: str, opt: Optional[SearchOptions] = None, *options: RequestOptionFunc
    ) -> Tuple[List[BasicUser], Response]:
        return self._search('search', 'users', query, List[BasicUser], opt, options)

    def users_by_group(
        self,
        gid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[BasicUser], Response]:
        return self._search(
            self._group(gid), 'users', query, List[BasicUser], opt, options
        )

    def users_by_project(
        self,
        pid: ID,
        query: str,
        opt: Optional[SearchOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[BasicUser], Response]:
        return self._search(
            self._project(pid), 'users', query, List[BasicUser], opt, options
        )
