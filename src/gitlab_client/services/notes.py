"""Notes (comments) API."""

from typing import List, Optional, Tuple

from ..api.ids import ID, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.note import CreateNoteOptions, ListNotesOptions, Note, UpdateNoteOptions
from .base import Service


class NotesService(Service):
    """Comments on issues and merge requests.

    GitLab API docs: https://docs.gitlab.com/ee/api/notes.html
    """

    def list_issue_notes(
        self,
        pid: ID,
        issue: int,
        opt: Optional[ListNotesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Note], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/issues/{issue}/notes',
            opt,
            options,
            List[Note],
        )

    def get_issue_note(
        self, pid: ID, issue: int, note: int, *options: RequestOptionFunc
    ) -> Tuple[Note, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/issues/{issue}/notes/{note}',
            None,
            options,
            Note,
        )

    def create_issue_note(
        self,
        pid: ID,
        issue: int,
        opt: CreateNoteOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Note, Response]:
        """Comment on an issue."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/issues/{issue}/notes',
            opt,
            options,
            Note,
        )

    def update_issue_note(
        self,
        pid: ID,
        issue: int,
        note: int,
        opt: UpdateNoteOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Note, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/issues/{issue}/notes/{note}',
            opt,
            options,
            Note,
        )

    def delete_issue_note(
        self, pid: ID, issue: int, note: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/issues/{issue}/notes/{note}', None, options
        )

    def list_merge_request_notes(
        self,
        pid: ID,
        mr: int,
        opt: Optional[ListNotesOptions] = None,
        *options: RequestOptionFunc,
    ) -> Tuple[List[Note], Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/notes',
            opt,
            options,
            List[Note],
        )

    def get_merge_request_note(
        self, pid: ID, mr: int, note: int, *options: RequestOptionFunc
    ) -> Tuple[Note, Response]:
        return self._call(
            'GET',
            f'projects/{path_id(pid)}/merge_requests/{mr}/notes/{note}',
            None,
            options,
            Note,
        )

    def create_merge_request_note(
        self,
        pid: ID,
        mr: int,
        opt: CreateNoteOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Note, Response]:
        """Comment on a merge request."""
        return self._call(
            'POST',
            f'projects/{path_id(pid)}/merge_requests/{mr}/notes',
            opt,
            options,
            Note,
        )

    def update_merge_request_note(
        self,
        pid: ID,
        mr: int,
        note: int,
        opt: UpdateNoteOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[Note, Response]:
        return self._call(
            'PUT',
            f'projects/{path_id(pid)}/merge_requests/{mr}/notes/{note}',
            opt,
            options,
            Note,
        )

    def delete_merge_request_note(
        self, pid: ID, mr: int, note: int, *options: RequestOptionFunc
    ) -> Response:
        return self._delete(
            f'projects/{path_id(pid)}/merge_requests/{mr}/notes/{note}', None, options
        )
