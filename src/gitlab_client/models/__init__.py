"""Data models for GitLab entities and request options."""

from .access import (
    AccessRequest,
    ApproveAccessRequestOptions,
    BranchAccessDescription,
    BranchPermissionOptions,
    ListAccessRequestsOptions,
    ListProtectedBranchesOptions,
    ProtectedBranch,
    ProtectRepositoryBranchesOptions,
    UpdateProtectedBranchOptions,
)
from .common import AccessLevel, BasicUser, Namespace, TimeStats
from .deployment import (
    CreateProjectDeploymentOptions,
    Deployment,
    DeploymentEnvironment,
    ListProjectDeploymentsOptions,
    UpdateProjectDeploymentOptions,
)
from .event import (
    ContributionEvent,
    ListContributionEventsOptions,
    PushData,
    Version,
)
from .group import (
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
from .issue import (
    AddSpentTimeOptions,
    CreateIssueOptions,
    Issue,
    IssueReferences,
    ListGroupIssuesOptions,
    ListIssuesOptions,
    ListProjectIssuesOptions,
    MoveIssueOptions,
    SetTimeEstimateOptions,
    UpdateIssueOptions,
)
from .job import Bridge, Job, JobPipeline, ListJobsOptions, PlayJobOptions
from .label import CreateLabelOptions, Label, ListLabelsOptions, UpdateLabelOptions
from .merge_request import (
    AcceptMergeRequestOptions,
    ApproveMergeRequestOptions,
    CreateMergeRequestOptions,
    DiffRefs,
    GetMergeRequestChangesOptions,
    GetMergeRequestOptions,
    ListGroupMergeRequestsOptions,
    ListMergeRequestCommitsOptions,
    ListMergeRequestsOptions,
    ListProjectMergeRequestsOptions,
    MergeRequest,
    MergeRequestApprovals,
    UpdateMergeRequestOptions,
)
from .milestone import (
    CreateMilestoneOptions,
    ListMilestonesOptions,
    Milestone,
    UpdateMilestoneOptions,
)
from .note import CreateNoteOptions, ListNotesOptions, Note, UpdateNoteOptions
from .options import COMMA, ListOptions, Options
from .pipeline import (
    CreatePipelineOptions,
    GetLatestPipelineOptions,
    ListProjectPipelinesOptions,
    Pipeline,
    PipelineInfo,
    PipelineTestReport,
    PipelineVariable,
    PipelineVariableOptions,
)
from .project import (
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
from .release import (
    CreateReleaseOptions,
    ListReleasesOptions,
    Release,
    ReleaseAssetLinkOptions,
    ReleaseAssetsOptions,
    UpdateReleaseOptions,
)
from .repository import (
    Branch,
    CherryPickCommitOptions,
    Commit,
    CommitActionOptions,
    CommitRef,
    CommitStats,
    CommitStatus,
    CreateBranchOptions,
    CreateCommitOptions,
    CreateFileOptions,
    CreateTagOptions,
    DeleteFileOptions,
    Diff,
    File,
    FileInfo,
    GetCommitDiffOptions,
    GetCommitOptions,
    GetCommitRefsOptions,
    GetCommitStatusesOptions,
    GetFileOptions,
    GetRawFileOptions,
    ListBranchesOptions,
    ListCommitsOptions,
    ListTagsOptions,
    RevertCommitOptions,
    SetCommitStatusOptions,
    Tag,
    UpdateFileOptions,
)
from .search import Blob, SearchOptions
from .todo import ListTodosOptions, Todo, TodoProject
from .token import (
    ListPersonalAccessTokensOptions,
    PersonalAccessToken,
    RotatePersonalAccessTokenOptions,
)
from .user import (
    AddSSHKeyOptions,
    CreateUserOptions,
    ListSSHKeysOptions,
    ListUsersOptions,
    ModifyUserOptions,
    SSHKey,
    User,
)
from .variable import (
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
    VariableFilter,
)

__all__ = [
    'AcceptMergeRequestOptions',
    'AccessLevel',
    'AccessRequest',
    'AddSSHKeyOptions',
    'AddSpentTimeOptions',
    'ApproveAccessRequestOptions',
    'ApproveMergeRequestOptions',
    'BasicUser',
    'Blob',
    'Branch',
    'BranchAccessDescription',
    'BranchPermissionOptions',
    'Bridge',
    'COMMA',
    'CherryPickCommitOptions',
    'Commit',
    'CommitActionOptions',
    'CommitRef',
    'CommitStats',
    'CommitStatus',
    'ContributionEvent',
    'CreateBranchOptions',
    'CreateCommitOptions',
    'CreateFileOptions',
    'CreateGroupOptions',
    'CreateGroupVariableOptions',
    'CreateInstanceVariableOptions',
    'CreateIssueOptions',
    'CreateLabelOptions',
    'CreateMergeRequestOptions',
    'CreateMilestoneOptions',
    'CreateNoteOptions',
    'CreatePipelineOptions',
    'CreateProjectDeploymentOptions',
    'CreateProjectOptions',
    'CreateProjectVariableOptions',
    'CreateReleaseOptions',
    'CreateTagOptions',
    'CreateUserOptions',
    'DeleteFileOptions',
    'DeleteGroupOptions',
    'Deployment',
    'DeploymentEnvironment',
    'Diff',
    'DiffRefs',
    'EditProjectOptions',
    'File',
    'FileInfo',
    'ForkProjectOptions',
    'GetCommitDiffOptions',
    'GetCommitOptions',
    'GetCommitRefsOptions',
    'GetCommitStatusesOptions',
    'GetFileOptions',
    'GetGroupOptions',
    'GetGroupVariableOptions',
    'GetLatestPipelineOptions',
    'GetMergeRequestChangesOptions',
    'GetMergeRequestOptions',
    'GetProjectOptions',
    'GetProjectVariableOptions',
    'GetRawFileOptions',
    'Group',
    'GroupVariable',
    'InstanceVariable',
    'Issue',
    'IssueReferences',
    'Job',
    'JobPipeline',
    'Label',
    'ListAccessRequestsOptions',
    'ListBranchesOptions',
    'ListCommitsOptions',
    'ListContributionEventsOptions',
    'ListGroupIssuesOptions',
    'ListGroupMergeRequestsOptions',
    'ListGroupProjectsOptions',
    'ListGroupVariablesOptions',
    'ListGroupsOptions',
    'ListInstanceVariablesOptions',
    'ListIssuesOptions',
    'ListJobsOptions',
    'ListLabelsOptions',
    'ListMergeRequestCommitsOptions',
    'ListMergeRequestsOptions',
    'ListMilestonesOptions',
    'ListNotesOptions',
    'ListOptions',
    'ListPersonalAccessTokensOptions',
    'ListProjectDeploymentsOptions',
    'ListProjectIssuesOptions',
    'ListProjectMergeRequestsOptions',
    'ListProjectPipelinesOptions',
    'ListProjectUserOptions',
    'ListProjectVariablesOptions',
    'ListProjectsOptions',
    'ListProtectedBranchesOptions',
    'ListReleasesOptions',
    'ListSSHKeysOptions',
    'ListSubGroupsOptions',
    'ListTagsOptions',
    'ListTodosOptions',
    'ListUsersOptions',
    'MergeRequest',
    'MergeRequestApprovals',
    'Milestone',
    'ModifyUserOptions',
    'MoveIssueOptions',
    'Namespace',
    'Note',
    'Options',
    'PersonalAccessToken',
    'Pipeline',
    'PipelineInfo',
    'PipelineTestReport',
    'PipelineVariable',
    'PipelineVariableOptions',
    'PlayJobOptions',
    'Project',
    'ProjectUser',
    'ProjectVariable',
    'ProtectRepositoryBranchesOptions',
    'ProtectedBranch',
    'PushData',
    'Release',
    'ReleaseAssetLinkOptions',
    'ReleaseAssetsOptions',
    'RemoveGroupVariableOptions',
    'RemoveProjectVariableOptions',
    'RevertCommitOptions',
    'RotatePersonalAccessTokenOptions',
    'SSHKey',
    'SearchOptions',
    'SetCommitStatusOptions',
    'SetTimeEstimateOptions',
    'ShareWithGroupOptions',
    'Tag',
    'TimeStats',
    'Todo',
    'TodoProject',
    'TransferSubGroupOptions',
    'UpdateFileOptions',
    'UpdateGroupOptions',
    'UpdateGroupVariableOptions',
    'UpdateInstanceVariableOptions',
    'UpdateIssueOptions',
    'UpdateLabelOptions',
    'UpdateMergeRequestOptions',
    'UpdateMilestoneOptions',
    'UpdateNoteOptions',
    'UpdateProjectDeploymentOptions',
    'UpdateProjectVariableOptions',
    'UpdateProtectedBranchOptions',
    'UpdateReleaseOptions',
    'User',
    'VariableFilter',
    'Version',
]
