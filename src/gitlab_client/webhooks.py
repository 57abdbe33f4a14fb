"""Webhook payload parsing.

Typical use inside a web handler::

    event_type = webhook_event_type(request.headers)
    if not verify_webhook_token(request.headers, secret):
        return 401
    event = parse_webhook(event_type, request.body)
    if isinstance(event, PushEvent):
        ...

Instance-wide system hooks arrive with the ``System Hook`` event type and
decode through ``parse_system_hook``. ``parse_hook`` accepts either kind.

Webhook payloads use several timestamp formats
(``2013-12-03T17:15:43Z`` and ``2013-12-03 17:15:43 UTC``), so timestamps
are kept as strings.
"""

import hmac
import json
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .api.exceptions import WebhookParseError

EVENT_TYPE_HEADER = 'X-Gitlab-Event'
TOKEN_HEADER = 'X-Gitlab-Token'


class EventType(str, Enum):
    """Values of the ``X-Gitlab-Event`` header."""

    BUILD = 'Build Hook'
    CONFIDENTIAL_ISSUE = 'Confidential Issue Hook'
    CONFIDENTIAL_NOTE = 'Confidential Note Hook'
    ISSUE = 'Issue Hook'
    JOB = 'Job Hook'
    MERGE_REQUEST = 'Merge Request Hook'
    NOTE = 'Note Hook'
    PIPELINE = 'Pipeline Hook'
    PUSH = 'Push Hook'
    RELEASE = 'Release Hook'
    TAG_PUSH = 'Tag Push Hook'
    WIKI_PAGE = 'Wiki Page Hook'
    SYSTEM = 'System Hook'


class _Payload(BaseModel):
    model_config = ConfigDict(extra='allow')


class HookUser(_Payload):
    id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


class HookProject(_Payload):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    web_url: Optional[str] = None
    avatar_url: Optional[str] = None
    git_ssh_url: Optional[str] = None
    git_http_url: Optional[str] = None
    namespace: Optional[str] = None
    path_with_namespace: Optional[str] = None
    default_branch: Optional[str] = None
    homepage: Optional[str] = None
    url: Optional[str] = None
    visibility_level: Optional[int] = None


class HookRepository(_Payload):
    name: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    git_http_url: Optional[str] = None
    git_ssh_url: Optional[str] = None
    visibility_level: Optional[int] = None


class HookCommit(_Payload):
    id: Optional[str] = None
    message: Optional[str] = None
    title: Optional[str] = None
    timestamp: Optional[str] = None
    url: Optional[str] = None
    author: Optional[Dict[str, Any]] = None
    added: List[str] = Field(default_factory=list)
    modified: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)


class HookLabel(_Payload):
    id: Optional[int] = None
    title: Optional[str] = None
    color: Optional[str] = None
    project_id: Optional[int] = None
    type: Optional[str] = None
    group_id: Optional[int] = None


class _Event(_Payload):
    object_kind: Optional[str] = None
    event_type: Optional[str] = None


class PushEvent(_Event):
    """Commits pushed to a branch."""

    before: Optional[str] = None
    after: Optional[str] = None
    ref: Optional[str] = None
    checkout_sha: Optional[str] = None
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    user_username: Optional[str] = None
    user_email: Optional[str] = None
    user_avatar: Optional[str] = None
    project_id: Optional[int] = None
    project: Optional[HookProject] = None
    repository: Optional[HookRepository] = None
    commits: List[HookCommit] = Field(default_factory=list)
    total_commits_count: Optional[int] = None


class TagEvent(PushEvent):
    """Tag created or deleted."""

    message: Optional[str] = None


class IssueEvent(_Event):
    """Issue created, updated, closed or reopened."""

    user: Optional[HookUser] = None
    project: Optional[HookProject] = None
    repository: Optional[HookRepository] = None
    object_attributes: Dict[str, Any] = Field(default_factory=dict)
    assignees: List[HookUser] = Field(default_factory=list)
    labels: List[HookLabel] = Field(default_factory=list)
    changes: Dict[str, Any] = Field(default_factory=dict)


class MergeEvent(_Event):
    """Merge request event."""

    user: Optional[HookUser] = None
    project: Optional[HookProject] = None
    repository: Optional[HookRepository] = None
    object_attributes: Dict[str, Any] = Field(default_factory=dict)
    assignees: List[HookUser] = Field(default_factory=list)
    reviewers: List[HookUser] = Field(default_factory=list)
    labels: List[HookLabel] = Field(default_factory=list)
    changes: Dict[str, Any] = Field(default_factory=dict)


class JobEvent(_Event):
    """Job status change. ``Build Hook`` payloads share this shape."""

    ref: Optional[str] = None
    tag: Optional[bool] = None
    before_sha: Optional[str] = None
    sha: Optional[str] = None
    build_id: Optional[int] = None
    build_name: Optional[str] = None
    build_stage: Optional[str] = None
    build_status: Optional[str] = None
    build_started_at: Optional[str] = None
    build_finished_at: Optional[str] = None
    build_duration: Optional[float] = None
    build_allow_failure: Optional[bool] = None
    build_failure_reason: Optional[str] = None
    pipeline_id: Optional[int] = None
    project_id: Optional[int] = None
    project_name: Optional[str] = None
    user: Optional[HookUser] = None
    commit: Dict[str, Any] = Field(default_factory=dict)
    repository: Optional[HookRepository] = None


class BuildEvent(JobEvent):
    """Legacy name of the job event."""


class PipelineEvent(_Event):
    """Pipeline status change."""

    object_attributes: Dict[str, Any] = Field(default_factory=dict)
    merge_request: Optional[Dict[str, Any]] = None
    user: Optional[HookUser] = None
    project: Optional[HookProject] = None
    commit: Optional[HookCommit] = None
    builds: List[Dict[str, Any]] = Field(default_factory=list)


class WikiPageEvent(_Event):
    """Wiki page created, updated or deleted."""

    user: Optional[HookUser] = None
    project: Optional[HookProject] = None
    wiki: Dict[str, Any] = Field(default_factory=dict)
    object_attributes: Dict[str, Any] = Field(default_factory=dict)


class ReleaseEvent(_Event):
    """Release created, updated or deleted."""

    id: Optional[int] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    name: Optional[str] = None
    released_at: Optional[str] = None
    tag: Optional[str] = None
    url: Optional[str] = None
    action: Optional[str] = None
    project: Optional[HookProject] = None
    commit: Optional[HookCommit] = None
    assets: Dict[str, Any] = Field(default_factory=dict)


class _CommentEvent(_Event):
    user: Optional[HookUser] = None
    project_id: Optional[int] = None
    project: Optional[HookProject] = None
    repository: Optional[HookRepository] = None
    object_attributes: Dict[str, Any] = Field(default_factory=dict)


class CommitCommentEvent(_CommentEvent):
    """Comment on a commit."""

    commit: Optional[HookCommit] = None


class MergeCommentEvent(_CommentEvent):
    """Comment on a merge request."""

    merge_request: Dict[str, Any] = Field(default_factory=dict)


class IssueCommentEvent(_CommentEvent):
    """Comment on an issue."""

    issue: Dict[str, Any] = Field(default_factory=dict)


class SnippetCommentEvent(_CommentEvent):
    """Comment on a snippet."""

    snippet: Dict[str, Any] = Field(default_factory=dict)


class _SystemEvent(_Payload):
    event_name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PushSystemEvent(_SystemEvent):
    """Push to any repository of the instance."""

    before: Optional[str] = None
    after: Optional[str] = None
    ref: Optional[str] = None
    checkout_sha: Optional[str] = None
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    user_username: Optional[str] = None
    user_email: Optional[str] = None
    project_id: Optional[int] = None
    project: Optional[HookProject] = None
    commits: List[HookCommit] = Field(default_factory=list)
    total_commits_count: Optional[int] = None


class TagPushSystemEvent(PushSystemEvent):
    """Tag pushed to any repository of the instance."""


class RepositoryUpdateSystemEvent(_SystemEvent):
    """Repository updated, sent once per push."""

    user_id: Optional[int] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    project_id: Optional[int] = None
    project: Optional[HookProject] = None
    changes: List[Dict[str, Any]] = Field(default_factory=list)
    refs: List[str] = Field(default_factory=list)


class ProjectSystemEvent(_SystemEvent):
    """Project created, updated, destroyed, transferred or renamed."""

    name: Optional[str] = None
    path: Optional[str] = None
    path_with_namespace: Optional[str] = None
    project_id: Optional[int] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    project_visibility: Optional[str] = None
    old_path_with_namespace: Optional[str] = None


class GroupSystemEvent(_SystemEvent):
    """Group created, destroyed or renamed."""

    name: Optional[str] = None
    path: Optional[str] = None
    full_path: Optional[str] = None
    group_id: Optional[int] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    old_path: Optional[str] = None
    old_full_path: Optional[str] = None


class KeySystemEvent(_SystemEvent):
    """SSH key added or removed."""

    id: Optional[int] = None
    username: Optional[str] = None
    key: Optional[str] = None


class UserSystemEvent(_SystemEvent):
    """User account lifecycle event."""

    user_id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    old_username: Optional[str] = None
    email: Optional[str] = None
    state: Optional[str] = None


class UserGroupSystemEvent(_SystemEvent):
    """Group membership change."""

    user_id: Optional[int] = None
    user_name: Optional[str] = None
    user_username: Optional[str] = None
    user_email: Optional[str] = None
    group_id: Optional[int] = None
    group_name: Optional[str] = None
    group_path: Optional[str] = None
    group_access: Optional[str] = None


class UserTeamSystemEvent(_SystemEvent):
    """Project membership change."""

    user_id: Optional[int] = None
    user_name: Optional[str] = None
    user_username: Optional[str] = None
    user_email: Optional[str] = None
    project_id: Optional[int] = None
    project_name: Optional[str] = None
    project_path: Optional[str] = None
    project_path_with_namespace: Optional[str] = None
    project_visibility: Optional[str] = None
    access_level: Optional[str] = None


WebhookEvent = Union[
    BuildEvent,
    CommitCommentEvent,
    IssueCommentEvent,
    IssueEvent,
    JobEvent,
    MergeCommentEvent,
    MergeEvent,
    PipelineEvent,
    PushEvent,
    ReleaseEvent,
    SnippetCommentEvent,
    TagEvent,
    WikiPageEvent,
]

# Merge request system hooks carry no event_name and decode as MergeEvent
SystemHookEvent = Union[
    GroupSystemEvent,
    KeySystemEvent,
    MergeEvent,
    ProjectSystemEvent,
    PushSystemEvent,
    RepositoryUpdateSystemEvent,
    TagPushSystemEvent,
    UserGroupSystemEvent,
    UserSystemEvent,
    UserTeamSystemEvent,
]

_EVENT_MODELS = {
    EventType.BUILD: BuildEvent,
    EventType.CONFIDENTIAL_ISSUE: IssueEvent,
    EventType.ISSUE: IssueEvent,
    EventType.JOB: JobEvent,
    EventType.MERGE_REQUEST: MergeEvent,
    EventType.PIPELINE: PipelineEvent,
    EventType.PUSH: PushEvent,
    EventType.RELEASE: ReleaseEvent,
    EventType.TAG_PUSH: TagEvent,
    EventType.WIKI_PAGE: WikiPageEvent,
}

_NOTE_MODELS = {
    'Commit': CommitCommentEvent,
    'MergeRequest': MergeCommentEvent,
    'Issue': IssueCommentEvent,
    'Snippet': SnippetCommentEvent,
}

_SYSTEM_HOOK_MODELS = {
    'push': PushSystemEvent,
    'tag_push': TagPushSystemEvent,
    'repository_update': RepositoryUpdateSystemEvent,
    'project_create': ProjectSystemEvent,
    'project_update': ProjectSystemEvent,
    'project_destroy': ProjectSystemEvent,
    'project_transfer': ProjectSystemEvent,
    'project_rename': ProjectSystemEvent,
    'group_create': GroupSystemEvent,
    'group_destroy': GroupSystemEvent,
    'group_rename': GroupSystemEvent,
    'key_create': KeySystemEvent,
    'key_destroy': KeySystemEvent,
    'user_create': UserSystemEvent,
    'user_destroy': UserSystemEvent,
    'user_rename': UserSystemEvent,
    'user_failed_login': UserSystemEvent,
    'user_add_to_group': UserGroupSystemEvent,
    'user_remove_from_group': UserGroupSystemEvent,
    'user_update_for_group': UserGroupSystemEvent,
    'user_add_to_team': UserTeamSystemEvent,
    'user_remove_from_team': UserTeamSystemEvent,
    'user_update_for_team': UserTeamSystemEvent,
}


def webhook_event_type(headers: Mapping[str, str]) -> str:
    """Return the ``X-Gitlab-Event`` header value, ``''`` if missing.

    Header lookup is case-insensitive even for plain dicts.
    """
    value = headers.get(EVENT_TYPE_HEADER)
    if value is None:
        lowered = EVENT_TYPE_HEADER.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
        return ''
    return value


def verify_webhook_token(headers: Mapping[str, str], secret: str) -> bool:
    """Check the ``X-Gitlab-Token`` header against the configured secret.

    Returns ``False`` when the header is missing.
    """
    token = headers.get(TOKEN_HEADER)
    if token is None:
        lowered = TOKEN_HEADER.lower()
        token = next(
            (v for k, v in headers.items() if k.lower() == lowered), None
        )
    if token is None:
        return False
    return hmac.compare_digest(token.encode('utf-8'), secret.encode('utf-8'))


def parse_webhook(
    event_type: Union[str, EventType], payload: Union[bytes, str, Dict[str, Any]]
) -> WebhookEvent:
    """Decode a webhook payload into the event model for its type.

    Args:
        event_type: Value of the ``X-Gitlab-Event`` header
        payload: Raw request body or already decoded JSON

    Returns:
        Event model, e.g. ``PushEvent`` or ``MergeCommentEvent``

    Raises:
        WebhookParseError: For unknown event types, note payloads with an
            unexpected object kind or noteable type, and malformed payloads
    """
    try:
        kind = EventType(event_type)
    except ValueError:
        raise WebhookParseError(f'unexpected event type: {event_type}') from None

    data = _load(payload)

    if kind in (EventType.NOTE, EventType.CONFIDENTIAL_NOTE):
        object_kind = data.get('object_kind')
        if object_kind != 'note':
            raise WebhookParseError(f'unexpected object kind {object_kind}')
        noteable_type = (data.get('object_attributes') or {}).get('noteable_type')
        model = _NOTE_MODELS.get(noteable_type)
        if model is None:
            raise WebhookParseError(f'unexpected noteable type {noteable_type}')
    else:
        model = _EVENT_MODELS.get(kind)
        if model is None:
            raise WebhookParseError(f'unexpected event type: {event_type}')

    return _validate(model, data, kind)


def parse_system_hook(
    event_type: Union[str, EventType], payload: Union[bytes, str, Dict[str, Any]]
) -> SystemHookEvent:
    """Decode a ``System Hook`` payload by its ``event_name``.

    Payloads without a known ``event_name`` but with an ``object_kind`` of
    ``merge_request`` decode as ``MergeEvent``.

    Raises:
        WebhookParseError: For other event types, unknown system hook names
            and malformed payloads
    """
    if event_type != EventType.SYSTEM:
        raise WebhookParseError(f'unexpected event type: {event_type}')

    data = _load(payload)
    event_name = data.get('event_name')
    model = _SYSTEM_HOOK_MODELS.get(event_name)
    if model is None:
        if data.get('object_kind') != 'merge_request':
            raise WebhookParseError(f'unexpected system hook type {event_name}')
        model = MergeEvent

    return _validate(model, data, EventType.SYSTEM)


def parse_hook(
    event_type: Union[str, EventType], payload: Union[bytes, str, Dict[str, Any]]
) -> Union[WebhookEvent, SystemHookEvent]:
    """Decode a project or group webhook, falling back to system hooks.

    Useful for endpoints registered both as a webhook and as a system hook.
    The error of the system hook attempt is raised when both fail.
    """
    try:
        return parse_webhook(event_type, payload)
    except WebhookParseError:
        return parse_system_hook(event_type, payload)


def _validate(model: Any, data: Dict[str, Any], kind: EventType) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise WebhookParseError(f'invalid {kind.value} payload: {e}') from e


def _load(payload: Union[bytes, str, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise WebhookParseError(f'invalid webhook payload: {e}') from e
    if not isinstance(data, dict):
        raise WebhookParseError('invalid webhook payload: expected a JSON object')
    return data
