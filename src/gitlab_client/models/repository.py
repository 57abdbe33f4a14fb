"""Repository models: commits, branches, tags and files."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .options import ListOptions, Options
from .pipeline import PipelineInfo


class CommitStats(BaseModel):
    additions: Optional[int] = None
    deletions: Optional[int] = None
    total: Optional[int] = None


class Commit(BaseModel):
    """Git commit model."""

    id: str = Field(..., description='Full commit SHA')
    short_id: Optional[str] = Field(default=None, description='Abbreviated SHA')
    title: Optional[str] = Field(default=None, description='First line of the message')
    message: Optional[str] = Field(default=None, description='Commit message')
    author_name: Optional[str] = Field(default=None)
    author_email: Optional[str] = Field(default=None)
    authored_date: Optional[datetime] = Field(default=None)
    committer_name: Optional[str] = Field(default=None)
    committer_email: Optional[str] = Field(default=None)
    committed_date: Optional[datetime] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)
    parent_ids: List[str] = Field(default_factory=list)
    trailers: Dict[str, str] = Field(default_factory=dict)
    stats: Optional[CommitStats] = Field(default=None)
    status: Optional[str] = Field(default=None)
    last_pipeline: Optional[PipelineInfo] = Field(default=None)
    project_id: Optional[int] = Field(default=None)
    web_url: Optional[str] = Field(default=None)


class Diff(BaseModel):
    """Changes of a single file."""

    diff: Optional[str] = None
    new_path: Optional[str] = None
    old_path: Optional[str] = None
    a_mode: Optional[str] = None
    b_mode: Optional[str] = None
    new_file: Optional[bool] = None
    renamed_file: Optional[bool] = None
    deleted_file: Optional[bool] = None


class CommitRef(BaseModel):
    """Branch or tag containing a commit."""

    type: Optional[str] = None
    name: Optional[str] = None


class CommitStatus(BaseModel):
    """External status of a commit, e.g. from a CI service."""

    id: int
    sha: Optional[str] = None
    ref: Optional[str] = None
    status: Optional[str] = None
    name: Optional[str] = None
    target_url: Optional[str] = None
    description: Optional[str] = None
    coverage: Optional[float] = None
    pipeline_id: Optional[int] = None
    allow_failure: Optional[bool] = None
    author: Optional[dict] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None


class Branch(BaseModel):
    """Repository branch."""

    name: str = Field(..., description='Branch name')
    commit: Optional[Commit] = Field(default=None, description='Head commit')
    protected: Optional[bool] = Field(default=None)
    merged: Optional[bool] = Field(default=None)
    default: Optional[bool] = Field(default=None)
    can_push: Optional[bool] = Field(default=None)
    developers_can_push: Optional[bool] = Field(default=None)
    developers_can_merge: Optional[bool] = Field(default=None)
    web_url: Optional[str] = Field(default=None)


class TagRelease(BaseModel):
    tag_name: Optional[str] = None
    description: Optional[str] = None


class Tag(BaseModel):
    """Repository tag."""

    name: str = Field(..., description='Tag name')
    message: Optional[str] = Field(default=None, description='Annotation message')
    target: Optional[str] = Field(default=None, description='Target SHA')
    commit: Optional[Commit] = Field(default=None)
    release: Optional[TagRelease] = Field(default=None)
    protected: Optional[bool] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)


class File(BaseModel):
    """Repository file with base64 encoded content."""

    file_name: Optional[str] = None
    file_path: Optional[str] = None
    size: Optional[int] = None
    encoding: Optional[str] = None
    content: Optional[str] = None
    execute_filemode: Optional[bool] = None
    ref: Optional[str] = None
    blob_id: Optional[str] = None
    commit_id: Optional[str] = None
    last_commit_id: Optional[str] = None
    content_sha256: Optional[str] = None


class FileInfo(BaseModel):
    """Result of creating or updating a file."""

    file_path: Optional[str] = None
    branch: Optional[str] = None


class ListCommitsOptions(ListOptions):
    """Options for ``CommitsService.list_commits``."""

    ref_name: Optional[str] = None
    since: Optional[datetime] = None
    until: Optional[datetime] = None
    path: Optional[str] = None
    author: Optional[str] = None
    all: Optional[bool] = None
    with_stats: Optional[bool] = None
    first_parent: Optional[bool] = None
    trailers: Optional[bool] = None


class GetCommitOptions(Options):
    stats: Optional[bool] = None


class CommitActionOptions(Options):
    """Single file action of ``CreateCommitOptions``."""

    action: Optional[str] = Field(
        default=None, description='create, delete, move, update or chmod'
    )
    file_path: Optional[str] = None
    previous_path: Optional[str] = None
    content: Optional[str] = None
    encoding: Optional[str] = None
    last_commit_id: Optional[str] = None
    execute_filemode: Optional[bool] = None


class CreateCommitOptions(Options):
    """Options for ``CommitsService.create_commit``."""

    branch: Optional[str] = None
    commit_message: Optional[str] = None
    start_branch: Optional[str] = None
    start_sha: Optional[str] = None
    start_project: Optional[str] = None
    actions: Optional[List[CommitActionOptions]] = None
    author_email: Optional[str] = None
    author_name: Optional[str] = None
    stats: Optional[bool] = None
    force: Optional[bool] = None


class GetCommitRefsOptions(ListOptions):
    """Options for ``CommitsService.get_commit_refs``."""

    type: Optional[str] = Field(default=None, description='branch, tag or all')


class GetCommitStatusesOptions(ListOptions):
    """Options for ``CommitsService.get_commit_statuses``."""

    ref: Optional[str] = None
    stage: Optional[str] = None
    name: Optional[str] = None
    pipeline_id: Optional[int] = None
    all: Optional[bool] = None


class SetCommitStatusOptions(Options):
    """Options for ``CommitsService.set_commit_status``."""

    state: Optional[str] = None
    ref: Optional[str] = None
    name: Optional[str] = None
    context: Optional[str] = None
    target_url: Optional[str] = None
    description: Optional[str] = None
    coverage: Optional[float] = None
    pipeline_id: Optional[int] = None


class CherryPickCommitOptions(Options):
    """Options for ``CommitsService.cherry_pick_commit``."""

    branch: Optional[str] = None
    dry_run: Optional[bool] = None
    message: Optional[str] = None


class RevertCommitOptions(Options):
    branch: Optional[str] = None


class GetCommitDiffOptions(ListOptions):
    """Options for ``CommitsService.get_commit_diff``."""

    unidiff: Optional[bool] = None


class ListBranchesOptions(ListOptions):
    """Options for ``BranchesService.list_branches``."""

    search: Optional[str] = None
    regex: Optional[str] = None


class CreateBranchOptions(Options):
    """Options for ``BranchesService.create_branch``."""

    branch: Optional[str] = None
    ref: Optional[str] = None


class ListTagsOptions(ListOptions):
    """Options for ``TagsService.list_tags``."""

    search: Optional[str] = None


class CreateTagOptions(Options):
    """Options for ``TagsService.create_tag``."""

    tag_name: Optional[str] = None
    ref: Optional[str] = None
    message: Optional[str] = None


class GetFileOptions(Options):
    """Options for ``RepositoryFilesService.get_file``."""

    ref: Optional[str] = None


class GetRawFileOptions(Options):
    """Options for ``RepositoryFilesService.get_raw_file``."""

    ref: Optional[str] = None
    lfs: Optional[bool] = None


class CreateFileOptions(Options):
    """Options for ``RepositoryFilesService.create_file``."""

    branch: Optional[str] = None
    start_branch: Optional[str] = None
    encoding: Optional[str] = None
    author_email: Optional[str] = None
    author_name: Optional[str] = None
    content: Optional[str] = None
    commit_message: Optional[str] = None
    execute_filemode: Optional[bool] = None


class UpdateFileOptions(CreateFileOptions):
    """Options for ``RepositoryFilesService.update_file``."""

    last_commit_id: Optional[str] = None


class DeleteFileOptions(Options):
    """Options for ``RepositoryFilesService.delete_file``."""

    branch: Optional[str] = None
    start_branch: Optional[str] = None
    author_email: Optional[str] = None
    author_name: Optional[str] = None
    commit_message: Optional[str] = None
    last_commit_id: Optional[str] = None
