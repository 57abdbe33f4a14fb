"""Project entity models."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .common import BasicUser, Namespace
from .options import ListOptions, Options


class ProjectStatistics(BaseModel):
    """Storage statistics of a project."""

    commit_count: Optional[int] = None
    storage_size: Optional[int] = None
    repository_size: Optional[int] = None
    wiki_size: Optional[int] = None
    lfs_objects_size: Optional[int] = None
    job_artifacts_size: Optional[int] = None
    packages_size: Optional[int] = None
    snippets_size: Optional[int] = None


class SharedWithGroup(BaseModel):
    """Group a project is shared with."""

    group_id: int
    group_name: Optional[str] = None
    group_full_path: Optional[str] = None
    group_access_level: Optional[int] = None
    expires_at: Optional[str] = None


class Project(BaseModel):
    """GitLab project model."""

    id: int = Field(..., description='Project ID')
    name: Optional[str] = Field(default=None, description='Project name')
    path: Optional[str] = Field(default=None, description='Project path')
    name_with_namespace: Optional[str] = Field(
        default=None, description='Name including the namespace'
    )
    path_with_namespace: Optional[str] = Field(
        default=None, description='Full path including the namespace'
    )
    description: Optional[str] = Field(default=None, description='Project description')
    visibility: Optional[str] = Field(
        default=None, description='Visibility level (private, internal, public)'
    )
    default_branch: Optional[str] = Field(default=None, description='Default branch')
    topics: List[str] = Field(default_factory=list, description='Project topics')

    # URLs
    web_url: Optional[str] = Field(default=None, description='Web URL')
    ssh_url_to_repo: Optional[str] = Field(default=None, description='SSH clone URL')
    http_url_to_repo: Optional[str] = Field(default=None, description='HTTP clone URL')
    readme_url: Optional[str] = Field(default=None, description='README URL')
    avatar_url: Optional[str] = Field(default=None, description='Avatar URL')

    # Ownership
    namespace: Optional[Namespace] = Field(default=None, description='Namespace')
    owner: Optional[BasicUser] = Field(default=None, description='Project owner')
    creator_id: Optional[int] = Field(default=None, description='Creator user ID')
    forked_from_project: Optional[Dict] = Field(
        default=None, description='Parent project of a fork'
    )

    # Features
    issues_enabled: Optional[bool] = Field(default=None, description='Issues enabled')
    merge_requests_enabled: Optional[bool] = Field(
        default=None, description='Merge requests enabled'
    )
    wiki_enabled: Optional[bool] = Field(default=None, description='Wiki enabled')
    jobs_enabled: Optional[bool] = Field(default=None, description='CI/CD jobs enabled')
    snippets_enabled: Optional[bool] = Field(default=None, description='Snippets enabled')
    container_registry_enabled: Optional[bool] = Field(
        default=None, description='Container registry enabled'
    )
    lfs_enabled: Optional[bool] = Field(default=None, description='Git LFS enabled')
    archived: Optional[bool] = Field(default=None, description='Project archived')
    empty_repo: Optional[bool] = Field(default=None, description='Repository is empty')

    # Merge settings
    merge_method: Optional[str] = Field(default=None, description='Merge method')
    squash_option: Optional[str] = Field(default=None, description='Squash option')
    only_allow_merge_if_pipeline_succeeds: Optional[bool] = Field(default=None)
    only_allow_merge_if_all_discussions_are_resolved: Optional[bool] = Field(
        default=None
    )
    remove_source_branch_after_merge: Optional[bool] = Field(default=None)

    # Counters
    star_count: Optional[int] = Field(default=None, description='Number of stars')
    forks_count: Optional[int] = Field(default=None, description='Number of forks')
    open_issues_count: Optional[int] = Field(default=None, description='Open issues')

    shared_with_groups: List[SharedWithGroup] = Field(default_factory=list)
    statistics: Optional[ProjectStatistics] = Field(default=None)
    permissions: Optional[Dict] = Field(default=None, description='Access permissions')

    created_at: Optional[datetime] = Field(
        default=None, description='Creation timestamp'
    )
    last_activity_at: Optional[datetime] = Field(
        default=None, description='Last activity timestamp'
    )


class ProjectUser(BaseModel):
    """User that is a member of a project or its ancestors."""

    id: int
    name: Optional[str] = None
    username: Optional[str] = None
    state: Optional[str] = None
    avatar_url: Optional[str] = None
    web_url: Optional[str] = None


class ListProjectsOptions(ListOptions):
    """Options for ``ProjectsService.list_projects``."""

    archived: Optional[bool] = None
    id_after: Optional[int] = None
    id_before: Optional[int] = None
    last_activity_after: Optional[datetime] = None
    last_activity_before: Optional[datetime] = None
    membership: Optional[bool] = None
    min_access_level: Optional[int] = None
    owned: Optional[bool] = None
    search: Optional[str] = None
    search_namespaces: Optional[bool] = None
    simple: Optional[bool] = None
    starred: Optional[bool] = None
    statistics: Optional[bool] = None
    topic: Optional[str] = None
    visibility: Optional[str] = None
    with_issues_enabled: Optional[bool] = None
    with_merge_requests_enabled: Optional[bool] = None
    with_programming_language: Optional[str] = None


class GetProjectOptions(Options):
    """Options for ``ProjectsService.get_project``."""

    license: Optional[bool] = None
    statistics: Optional[bool] = None
    with_custom_attributes: Optional[bool] = None


class CreateProjectOptions(Options):
    """Options for ``ProjectsService.create_project``.

    Either ``name`` or ``path`` has to be set.
    """

    name: Optional[str] = None
    path: Optional[str] = None
    namespace_id: Optional[int] = None
    description: Optional[str] = None
    default_branch: Optional[str] = None
    visibility: Optional[str] = None
    initialize_with_readme: Optional[bool] = None
    import_url: Optional[str] = None
    issues_enabled: Optional[bool] = None
    merge_requests_enabled: Optional[bool] = None
    wiki_enabled: Optional[bool] = None
    jobs_enabled: Optional[bool] = None
    snippets_enabled: Optional[bool] = None
    container_registry_enabled: Optional[bool] = None
    lfs_enabled: Optional[bool] = None
    merge_method: Optional[str] = None
    squash_option: Optional[str] = None
    only_allow_merge_if_pipeline_succeeds: Optional[bool] = None
    only_allow_merge_if_all_discussions_are_resolved: Optional[bool] = None
    remove_source_branch_after_merge: Optional[bool] = None
    topics: Optional[List[str]] = None


class EditProjectOptions(CreateProjectOptions):
    """Options for ``ProjectsService.edit_project``."""

    archived: Optional[bool] = None


class ForkProjectOptions(Options):
    """Options for ``ProjectsService.fork_project``."""

    name: Optional[str] = None
    path: Optional[str] = None
    namespace_id: Optional[int] = None
    namespace_path: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    branches: Optional[str] = None


class ListProjectUserOptions(ListOptions):
    """Options for ``ProjectsService.list_project_users``."""

    search: Optional[str] = None


class ShareWithGroupOptions(Options):
    """Options for ``ProjectsService.share_project_with_group``."""

    group_id: Optional[int] = None
    group_access: Optional[int] = None
    expires_at: Optional[str] = None