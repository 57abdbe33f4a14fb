"""Resource services, one per GitLab API resource family."""

from .access import AccessRequestsService, ProtectedBranchesService
from .activity import (
    EventsService,
    PersonalAccessTokensService,
    TodosService,
    VersionService,
)
from .base import Service
from .deployments import DeploymentsService
from .groups import GroupsService
from .issues import IssuesService
from .jobs import JobsService
from .labels import LabelsService, MilestonesService
from .merge_requests import MergeRequestsService
from .notes import NotesService
from .pipelines import PipelinesService
from .projects import ProjectsService
from .releases import ReleasesService
from .repository import BranchesService, CommitsService, TagsService
from .repository_files import RepositoryFilesService
from .search import SearchService
from .users import UsersService
from .variables import (
    GroupVariablesService,
    InstanceVariablesService,
    ProjectVariablesService,
)

__all__ = [
    'Service',
    'AccessRequestsService',
    'BranchesService',
    'CommitsService',
    'DeploymentsService',
    'EventsService',
    'GroupsService',
    'GroupVariablesService',
    'InstanceVariablesService',
    'IssuesService',
    'JobsService',
    'LabelsService',
    'MergeRequestsService',
    'MilestonesService',
    'NotesService',
    'PersonalAccessTokensService',
    'PipelinesService',
    'ProjectsService',
    'ProjectVariablesService',
    'ProtectedBranchesService',
    'ReleasesService',
    'RepositoryFilesService',
    'SearchService',
    'TagsService',
    'TodosService',
    'UsersService',
    'VersionService',
]
