"""Repository files API."""

import base64
from typing import Optional, Tuple

from ..api.ids import ID, path_escape, path_id
from ..api.request_options import RequestOptionFunc
from ..api.response import Response
from ..models.repository import (
    CreateFileOptions,
    DeleteFileOptions,
    File,
    FileInfo,
    GetFileOptions,
    GetRawFileOptions,
    UpdateFileOptions,
)
from .base import Service


class RepositoryFilesService(Service):
    """Create, read, update and delete repository files.

    File paths are escaped as a single path segment, so ``lib/class.rb``
    becomes ``lib%2Fclass.rb``.

    GitLab API docs: https://docs.gitlab.com/ee/api/repository_files.html
    """

    def _file_path(self, pid: ID, file_path: str) -> str:
        return f'projects/{path_id(pid)}/repository/files/{path_escape(file_path)}'

    def get_file(
        self,
        pid: ID,
        file_path: str,
        opt: GetFileOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[File, Response]:
        """Get file metadata and base64 encoded content.

        Args:
            pid: Project ID or path
            file_path: Path of the file in the repository
            opt: ``ref`` to read the file from
            *options: Request options

        Returns:
            File and the response
        """
        return self._call(
            'GET', self._file_path(pid, file_path), opt, options, File
        )

    def get_file_metadata(
        self,
        pid: ID,
        file_path: str,
        opt: GetFileOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[File, Response]:
        """Get file metadata from the response headers without the content."""
        _, response = self._call('HEAD', self._file_path(pid, file_path), opt, options)
        headers = response.http_response.headers

        def header_int(name: str) -> Optional[int]:
            value = headers.get(name)
            return int(value) if value else None

        execute = headers.get('X-Gitlab-Execute-Filemode')
        return (
            File(
                file_name=headers.get('X-Gitlab-File-Name'),
                file_path=headers.get('X-Gitlab-File-Path'),
                size=header_int('X-Gitlab-Size'),
                encoding=headers.get('X-Gitlab-Encoding'),
                ref=headers.get('X-Gitlab-Ref'),
                blob_id=headers.get('X-Gitlab-Blob-Id'),
                commit_id=headers.get('X-Gitlab-Commit-Id'),
                last_commit_id=headers.get('X-Gitlab-Last-Commit-Id'),
                content_sha256=headers.get('X-Gitlab-Content-Sha256'),
                execute_filemode=execute == 'true' if execute else None,
            ),
            response,
        )

    def get_raw_file(
        self,
        pid: ID,
        file_path: str,
        opt: GetRawFileOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[bytes, Response]:
        """Get the raw file content."""
        return self._call(
            'GET', f'{self._file_path(pid, file_path)}/raw', opt, options, bytes
        )

    def get_decoded_file(
        self,
        pid: ID,
        file_path: str,
        opt: GetFileOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[bytes, Response]:
        file, response = self.get_file(pid, file_path, opt, *options)
        return base64.b64decode(file.content or ''), response

    def create_file(
        self,
        pid: ID,
        file_path: str,
        opt: CreateFileOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[FileInfo, Response]:
        return self._call(
            'POST', self._file_path(pid, file_path), opt, options, FileInfo
        )

    def update_file(
        self,
        pid: ID,
        file_path: str,
        opt: UpdateFileOptions,
        *options: RequestOptionFunc,
    ) -> Tuple[FileInfo, Response]:
        return self._call(
            'PUT', self._file_path(pid, file_path), opt, options, FileInfo
        )

    def delete_file(
        self,
        pid: ID,
        file_path: str,
        opt: DeleteFileOptions,
        *options: RequestOptionFunc,
    ) -> Response:
        return self._delete(self._file_path(pid, file_path), opt, options)
