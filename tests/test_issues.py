"""Tests for the issues, notes, labels and milestones services."""

from datetime import date, datetime, timezone

import pytest

from gitlab_client import InvalidIDError
from gitlab_client.models import (
    AddSpentTimeOptions,
    BasicUser,
    CreateIssueOptions,
    CreateLabelOptions,
    CreateMilestoneOptions,
    CreateNoteOptions,
    Issue,
    IssueReferences,
    Label,
    ListLabelsOptions,
    ListMilestonesOptions,
    ListNotesOptions,
    ListProjectIssuesOptions,
    MergeRequest,
    Milestone,
    MoveIssueOptions,
    Note,
    SetTimeEstimateOptions,
    TimeStats,
    UpdateIssueOptions,
    UpdateLabelOptions,
    UpdateMilestoneOptions,
    UpdateNoteOptions,
)

ISSUE = {
    'id': 76,
    'iid': 6,
    'project_id': 1,
    'title': 'Consequatur vero maxime deserunt laboriosam est voluptas dolorem.',
    'state': 'opened',
    'labels': ['foo', 'bar'],
    'author': {'id': 1, 'username': 'root'},
    'references': {'short': '#6', 'relative': '#6', 'full': 'group/api#6'},
    'due_date': '2024-06-30',
    'created_at': '2016-01-04T15:31:51.081Z',
}


class TestIssuesService:
    """Test issue endpoints."""

    def test_list_issues(self, client, mux):
        mux.handle('GET', '/issues', [{'id': 1}])

        issues, _ = client.issues.list_issues()

        assert issues == [Issue(id=1)]

    def test_list_project_issues(self, client, mux):
        mux.handle('GET', '/projects/group%2Fapi/issues', [ISSUE])

        issues, _ = client.issues.list_project_issues(
            'group/api',
            ListProjectIssuesOptions(
                state='opened', labels=['foo', 'bar'], not_labels=['baz']
            ),
        )

        assert issues == [
            Issue(
                id=76,
                iid=6,
                project_id=1,
                title=ISSUE['title'],
                state='opened',
                labels=['foo', 'bar'],
                author=BasicUser(id=1, username='root'),
                references=IssueReferences(short='#6', relative='#6', full='group/api#6'),
                due_date=date(2024, 6, 30),
                created_at=datetime(2016, 1, 4, 15, 31, 51, 81000, tzinfo=timezone.utc),
            )
        ]
        assert mux.last.params == {
            'state': 'opened',
            'labels': 'foo,bar',
            'not[labels]': 'baz',
        }

    def test_list_project_issues_invalid_id(self, client, mux):
        with pytest.raises(InvalidIDError) as exc_info:
            client.issues.list_project_issues(1.5)

        assert str(exc_info.value) == (
            'invalid ID type 1.5, the ID must be an int or a string'
        )
        assert mux.requests == []

    def test_list_group_issues(self, client, mux):
        mux.handle('GET', '/groups/3/issues', [{'id': 1}, {'id': 2}])

        issues, _ = client.issues.list_group_issues(3)

        assert [i.id for i in issues] == [1, 2]

    def test_get_issue(self, client, mux):
        mux.handle('GET', '/projects/1/issues/6', ISSUE)

        issue, _ = client.issues.get_issue(1, 6)

        assert issue.iid == 6
        assert issue.references.full == 'group/api#6'

    def test_get_issue_by_id(self, client, mux):
        mux.handle('GET', '/issues/76', {'id': 76})

        issue, _ = client.issues.get_issue_by_id(76)

        assert issue == Issue(id=76)

    def test_create_issue(self, client, mux):
        mux.handle('POST', '/projects/1/issues', {'id': 77, 'iid': 7}, status_code=201)

        issue, _ = client.issues.create_issue(
            1,
            CreateIssueOptions(
                title='Broken build',
                labels=['bug', 'ci'],
                assignee_ids=[4],
                due_date=date(2024, 7, 1),
            ),
        )

        assert issue == Issue(id=77, iid=7)
        assert mux.last.json == {
            'title': 'Broken build',
            'labels': 'bug,ci',
            'assignee_ids': [4],
            'due_date': '2024-07-01',
        }

    def test_update_issue(self, client, mux):
        mux.handle('PUT', '/projects/1/issues/7', {'id': 77, 'state': 'closed'})

        issue, _ = client.issues.update_issue(
            1, 7, UpdateIssueOptions(state_event='close')
        )

        assert issue.state == 'closed'
        assert mux.last.json == {'state_event': 'close'}

    def test_delete_issue(self, client, mux):
        mux.handle('DELETE', '/projects/1/issues/7', status_code=204)

        assert client.issues.delete_issue(1, 7).status_code == 204

    def test_move_issue(self, client, mux):
        mux.handle('POST', '/projects/1/issues/7/move', {'id': 77, 'project_id': 2})

        issue, _ = client.issues.move_issue(1, 7, MoveIssueOptions(to_project_id=2))

        assert issue.project_id == 2
        assert mux.last.json == {'to_project_id': 2}

    def test_subscribe_to_issue(self, client, mux):
        mux.handle('POST', '/projects/1/issues/7/subscribe', {'id': 77})

        issue, _ = client.issues.subscribe_to_issue(1, 7)

        assert issue == Issue(id=77)

    def test_get_participants(self, client, mux):
        mux.handle(
            'GET', '/projects/1/issues/7/participants', [{'id': 1, 'username': 'root'}]
        )

        users, _ = client.issues.get_participants(1, 7)

        assert users == [BasicUser(id=1, username='root')]

    def test_list_merge_requests_closing_issue(self, client, mux):
        mux.handle('GET', '/projects/1/issues/7/closed_by', [{'id': 11, 'iid': 2}])

        mrs, _ = client.issues.list_merge_requests_closing_issue(1, 7)

        assert mrs == [MergeRequest(id=11, iid=2)]

    def test_time_tracking(self, client, mux):
        stats = {'time_estimate': 12600, 'human_time_estimate': '3h 30m'}
        mux.handle('POST', '/projects/1/issues/7/time_estimate', stats)
        mux.handle('POST', '/projects/1/issues/7/add_spent_time', {'total_time_spent': 3600})
        mux.handle('GET', '/projects/1/issues/7/time_stats', stats)

        estimate, _ = client.issues.set_time_estimate(
            1, 7, SetTimeEstimateOptions(duration='3h30m')
        )
        assert mux.last.json == {'duration': '3h30m'}

        spent, _ = client.issues.add_spent_time(
            1, 7, AddSpentTimeOptions(duration='1h', summary='review')
        )
        current, _ = client.issues.get_time_spent(1, 7)

        assert estimate == TimeStats(time_estimate=12600, human_time_estimate='3h 30m')
        assert spent.total_time_spent == 3600
        assert current == estimate


class TestNotesService:
    """Test issue and merge request note endpoints."""

    NOTE = {
        'id': 302,
        'body': 'closed',
        'author': {'id': 1, 'username': 'pipin'},
        'system': True,
        'noteable_type': 'Issue',
        'created_at': '2013-10-02T09:22:45Z',
    }

    def test_list_issue_notes(self, client, mux):
        mux.handle('GET', '/projects/1/issues/7/notes', [self.NOTE])

        notes, _ = client.notes.list_issue_notes(
            1, 7, ListNotesOptions(order_by='updated_at', sort='asc')
        )

        assert notes == [
            Note(
                id=302,
                body='closed',
                author=BasicUser(id=1, username='pipin'),
                system=True,
                noteable_type='Issue',
                created_at=datetime(2013, 10, 2, 9, 22, 45, tzinfo=timezone.utc),
            )
        ]
        assert mux.last.params == {'order_by': 'updated_at', 'sort': 'asc'}

    def test_get_issue_note(self, client, mux):
        mux.handle('GET', '/projects/1/issues/7/notes/302', self.NOTE)

        note, _ = client.notes.get_issue_note(1, 7, 302)

        assert note.id == 302

    def test_create_issue_note(self, client, mux):
        mux.handle('POST', '/projects/1/issues/7/notes', {'id': 303, 'body': 'LGTM'})

        note, _ = client.notes.create_issue_note(1, 7, CreateNoteOptions(body='LGTM'))

        assert note == Note(id=303, body='LGTM')
        assert mux.last.json == {'body': 'LGTM'}

    def test_update_issue_note(self, client, mux):
        mux.handle('PUT', '/projects/1/issues/7/notes/303', {'id': 303, 'body': 'edited'})

        note, _ = client.notes.update_issue_note(
            1, 7, 303, UpdateNoteOptions(body='edited')
        )

        assert note.body == 'edited'

    def test_delete_issue_note(self, client, mux):
        mux.handle('DELETE', '/projects/1/issues/7/notes/303', status_code=204)

        assert client.notes.delete_issue_note(1, 7, 303).status_code == 204

    def test_merge_request_notes(self, client, mux):
        mux.handle('GET', '/projects/1/merge_requests/2/notes', [{'id': 1}])
        mux.handle('POST', '/projects/1/merge_requests/2/notes', {'id': 2, 'body': 'hi'})
        mux.handle('DELETE', '/projects/1/merge_requests/2/notes/2', status_code=204)

        notes, _ = client.notes.list_merge_request_notes(1, 2)
        created, _ = client.notes.create_merge_request_note(
            1, 2, CreateNoteOptions(body='hi', internal=True)
        )
        assert mux.last.json == {'body': 'hi', 'internal': True}
        resp = client.notes.delete_merge_request_note(1, 2, 2)

        assert notes == [Note(id=1)]
        assert created == Note(id=2, body='hi')
        assert resp.status_code == 204

    def test_merge_request_note_invalid_id(self, client):
        with pytest.raises(InvalidIDError):
            client.notes.get_merge_request_note(1.5, 2, 3)


class TestLabelsService:
    """Test label endpoints."""

    def test_list_labels(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/labels',
            [{'id': 1, 'name': 'bug', 'color': '#d9534f', 'open_issues_count': 2}],
        )

        labels, _ = client.labels.list_labels(1, ListLabelsOptions(with_counts=True))

        assert labels == [Label(id=1, name='bug', color='#d9534f', open_issues_count=2)]
        assert mux.last.params == {'with_counts': 'true'}

    def test_get_label_by_name(self, client, mux):
        mux.handle('GET', '/projects/1/labels/needs%20review', {'id': 5, 'name': 'needs review'})

        label, _ = client.labels.get_label(1, 'needs review')

        assert label == Label(id=5, name='needs review')

    def test_create_label(self, client, mux):
        mux.handle('POST', '/projects/1/labels', {'id': 6, 'name': 'docs'}, status_code=201)

        label, _ = client.labels.create_label(
            1, CreateLabelOptions(name='docs', color='#428bca')
        )

        assert label == Label(id=6, name='docs')
        assert mux.last.json == {'name': 'docs', 'color': '#428bca'}

    def test_update_label(self, client, mux):
        mux.handle('PUT', '/projects/1/labels/6', {'id': 6, 'name': 'documentation'})

        label, _ = client.labels.update_label(
            1, 6, UpdateLabelOptions(new_name='documentation')
        )

        assert label.name == 'documentation'

    def test_delete_label(self, client, mux):
        mux.handle('DELETE', '/projects/1/labels/6', status_code=204)

        assert client.labels.delete_label(1, 6).status_code == 204

    def test_subscribe_to_label(self, client, mux):
        mux.handle(
            'POST', '/projects/1/labels/6/subscribe', {'id': 6, 'name': 'docs', 'subscribed': True}
        )

        label, _ = client.labels.subscribe_to_label(1, 6)

        assert label.subscribed is True

    def test_invalid_label_id(self, client):
        with pytest.raises(InvalidIDError):
            client.labels.get_label(1, 1.5)


class TestMilestonesService:
    """Test milestone endpoints."""

    def test_list_milestones(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/milestones',
            [{'id': 12, 'iid': 3, 'title': '10.0', 'due_date': '2013-11-29'}],
        )

        milestones, _ = client.milestones.list_milestones(
            1, ListMilestonesOptions(state='active', iids=[3])
        )

        assert milestones == [
            Milestone(id=12, iid=3, title='10.0', due_date=date(2013, 11, 29))
        ]
        assert mux.last.params == {'state': 'active', 'iids[]': ['3']}

    def test_get_milestone(self, client, mux):
        mux.handle('GET', '/projects/1/milestones/12', {'id': 12})

        milestone, _ = client.milestones.get_milestone(1, 12)

        assert milestone == Milestone(id=12)

    def test_create_milestone(self, client, mux):
        mux.handle('POST', '/projects/1/milestones', {'id': 13, 'title': 'v2'})

        milestone, _ = client.milestones.create_milestone(
            1, CreateMilestoneOptions(title='v2', start_date=date(2024, 1, 1))
        )

        assert milestone == Milestone(id=13, title='v2')
        assert mux.last.json == {'title': 'v2', 'start_date': '2024-01-01'}

    def test_update_milestone(self, client, mux):
        mux.handle('PUT', '/projects/1/milestones/13', {'id': 13, 'state': 'closed'})

        milestone, _ = client.milestones.update_milestone(
            1, 13, UpdateMilestoneOptions(state_event='close')
        )

        assert milestone.state == 'closed'

    def test_delete_milestone(self, client, mux):
        mux.handle('DELETE', '/projects/1/milestones/13', status_code=204)

        assert client.milestones.delete_milestone(1, 13).status_code == 204

    def test_milestone_issues_and_merge_requests(self, client, mux):
        mux.handle('GET', '/projects/1/milestones/12/issues', [{'id': 1}])
        mux.handle('GET', '/projects/1/milestones/12/merge_requests', [{'id': 2}])

        issues, _ = client.milestones.get_milestone_issues(1, 12)
        mrs, _ = client.milestones.get_milestone_merge_requests(1, 12)

        assert issues == [Issue(id=1)]
        assert mrs == [MergeRequest(id=2)]
