"""Tests for the releases, deployments, access requests and search services."""

from datetime import datetime, timezone

import pytest

from gitlab_client import GitLabPermissionError, InvalidIDError
from gitlab_client.models import (
    AccessLevel,
    AccessRequest,
    ApproveAccessRequestOptions,
    BasicUser,
    Blob,
    CreateProjectDeploymentOptions,
    CreateReleaseOptions,
    Deployment,
    DeploymentEnvironment,
    Issue,
    ListProjectDeploymentsOptions,
    MergeRequest,
    Project,
    Release,
    ReleaseAssetLinkOptions,
    ReleaseAssetsOptions,
    SearchOptions,
    UpdateProjectDeploymentOptions,
    UpdateReleaseOptions,
)

RELEASE = {
    'tag_name': 'v0.2',
    'name': 'Awesome app v0.2 beta',
    'description': '## CHANGELOG\r\n\r\n- Escape label and milestone titles',
    'author': {'id': 1, 'username': 'root'},
    'commit': {'id': '079e90101242458910cccd35eab0e211dfc359c0'},
    'milestones': [{'id': 51, 'iid': 1, 'title': 'v1.0'}],
    'assets': {
        'count': 3,
        'sources': [{'format': 'zip', 'url': 'https://gitlab.example.com/v0.2.zip'}],
        'links': [{'id': 2, 'name': 'linux', 'url': 'https://example.com/bin', 'link_type': 'other'}],
    },
    'released_at': '2019-01-03T01:56:19.539Z',
}


class TestReleasesService:
    """Test release endpoints."""

    def test_list_releases(self, client, mux):
        mux.handle('GET', '/projects/24/releases', [RELEASE])

        releases, _ = client.releases.list_releases(24)

        assert len(releases) == 1
        release = releases[0]
        assert release.tag_name == 'v0.2'
        assert release.author == BasicUser(id=1, username='root')
        assert release.milestones[0].title == 'v1.0'
        assert release.assets.links[0].name == 'linux'
        assert release.released_at == datetime(
            2019, 1, 3, 1, 56, 19, 539000, tzinfo=timezone.utc
        )

    def test_get_release_escapes_tag(self, client, mux):
        mux.handle('GET', '/projects/24/releases/release%2F1.0', {'tag_name': 'release/1.0'})

        release, _ = client.releases.get_release(24, 'release/1.0')

        assert release == Release(tag_name='release/1.0')

    def test_get_latest_release(self, client, mux):
        mux.handle('GET', '/projects/24/releases/permalink/latest', RELEASE)

        release, _ = client.releases.get_latest_release(24)

        assert release.name == 'Awesome app v0.2 beta'

    def test_create_release(self, client, mux):
        mux.handle('POST', '/projects/24/releases', {'tag_name': 'v0.3'}, status_code=201)

        release, _ = client.releases.create_release(
            24,
            CreateReleaseOptions(
                name='v0.3',
                tag_name='v0.3',
                ref='main',
                milestones=['v1.0'],
                assets=ReleaseAssetsOptions(
                    links=[ReleaseAssetLinkOptions(name='bin', url='https://example.com/bin')]
                ),
            ),
        )

        assert release == Release(tag_name='v0.3')
        assert mux.last.json == {
            'name': 'v0.3',
            'tag_name': 'v0.3',
            'ref': 'main',
            'milestones': ['v1.0'],
            'assets': {'links': [{'name': 'bin', 'url': 'https://example.com/bin'}]},
        }

    def test_update_release(self, client, mux):
        mux.handle('PUT', '/projects/24/releases/v0.3', {'tag_name': 'v0.3', 'name': 'renamed'})

        release, _ = client.releases.update_release(
            24, 'v0.3', UpdateReleaseOptions(name='renamed')
        )

        assert release.name == 'renamed'

    def test_delete_release_returns_release(self, client, mux):
        mux.handle('DELETE', '/projects/24/releases/v0.3', {'tag_name': 'v0.3', 'name': 'gone'})

        release, resp = client.releases.delete_release(24, 'v0.3')

        assert release == Release(tag_name='v0.3', name='gone')
        assert resp.status_code == 200

    def test_invalid_project_id(self, client):
        with pytest.raises(InvalidIDError):
            client.releases.list_releases(1.5)


class TestDeploymentsService:
    """Test deployment endpoints."""

    def test_list_project_deployments(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/deployments',
            [
                {
                    'id': 42,
                    'iid': 2,
                    'ref': 'main',
                    'status': 'success',
                    'environment': {'id': 9, 'name': 'production'},
                }
            ],
        )

        deployments, _ = client.deployments.list_project_deployments(
            1, ListProjectDeploymentsOptions(environment='production', status='success')
        )

        assert deployments == [
            Deployment(
                id=42,
                iid=2,
                ref='main',
                status='success',
                environment=DeploymentEnvironment(id=9, name='production'),
            )
        ]
        assert mux.last.params == {'environment': 'production', 'status': 'success'}

    def test_get_project_deployment(self, client, mux):
        mux.handle('GET', '/projects/1/deployments/42', {'id': 42, 'deployable': {'id': 7}})

        deployment, _ = client.deployments.get_project_deployment(1, 42)

        assert deployment.deployable.id == 7

    def test_create_project_deployment(self, client, mux):
        mux.handle('POST', '/projects/1/deployments', {'id': 43}, status_code=201)

        deployment, _ = client.deployments.create_project_deployment(
            1,
            CreateProjectDeploymentOptions(
                environment='staging', ref='main', sha='a91957a8', tag=False, status='running'
            ),
        )

        assert deployment == Deployment(id=43)
        assert mux.last.json == {
            'environment': 'staging',
            'ref': 'main',
            'sha': 'a91957a8',
            'tag': False,
            'status': 'running',
        }

    def test_update_project_deployment(self, client, mux):
        mux.handle('PUT', '/projects/1/deployments/43', {'id': 43, 'status': 'success'})

        deployment, _ = client.deployments.update_project_deployment(
            1, 43, UpdateProjectDeploymentOptions(status='success')
        )

        assert deployment.status == 'success'

    def test_delete_project_deployment(self, client, mux):
        mux.handle('DELETE', '/projects/1/deployments/43', status_code=204)

        assert client.deployments.delete_project_deployment(1, 43).status_code == 204

    def test_list_deployment_merge_requests(self, client, mux):
        mux.handle('GET', '/projects/1/deployments/42/merge_requests', [{'id': 5, 'iid': 1}])

        mrs, _ = client.deployments.list_deployment_merge_requests(1, 42)

        assert mrs == [MergeRequest(id=5, iid=1)]


class TestAccessRequestsService:
    """Test access request endpoints."""

    REQUEST = {
        'id': 1,
        'username': 'raymond_smith',
        'name': 'Raymond Smith',
        'state': 'active',
        'requested_at': '2012-10-22T14:13:35Z',
    }

    def test_list_project_access_requests(self, client, mux):
        mux.handle('GET', '/projects/1/access_requests', [self.REQUEST])

        requests_, _ = client.access_requests.list_project_access_requests(1)

        assert requests_ == [
            AccessRequest(
                id=1,
                username='raymond_smith',
                name='Raymond Smith',
                state='active',
                requested_at=datetime(2012, 10, 22, 14, 13, 35, tzinfo=timezone.utc),
            )
        ]

    def test_list_group_access_requests(self, client, mux):
        mux.handle('GET', '/groups/my%2Fgroup/access_requests', [{'id': 2}])

        requests_, _ = client.access_requests.list_group_access_requests('my/group')

        assert requests_ == [AccessRequest(id=2)]

    def test_request_project_access(self, client, mux):
        mux.handle('POST', '/projects/1/access_requests', self.REQUEST, status_code=201)

        request, resp = client.access_requests.request_project_access(1)

        assert request.username == 'raymond_smith'
        assert resp.status_code == 201

    def test_request_group_access(self, client, mux):
        mux.handle('POST', '/groups/2/access_requests', {'id': 1})

        request, _ = client.access_requests.request_group_access(2)

        assert request == AccessRequest(id=1)

    def test_approve_project_access_request(self, client, mux):
        mux.handle(
            'PUT',
            '/projects/1/access_requests/10/approve',
            {'id': 10, 'access_level': 30},
        )

        request, _ = client.access_requests.approve_project_access_request(
            1, 10, ApproveAccessRequestOptions(access_level=AccessLevel.DEVELOPER)
        )

        assert request.access_level == AccessLevel.DEVELOPER
        assert mux.last.json == {'access_level': 30}

    def test_approve_group_access_request(self, client, mux):
        mux.handle('PUT', '/groups/2/access_requests/10/approve', {'id': 10})

        request, _ = client.access_requests.approve_group_access_request(2, 10)

        assert request == AccessRequest(id=10)

    def test_deny_access_requests(self, client, mux):
        mux.handle('DELETE', '/projects/1/access_requests/10', status_code=204)
        mux.handle('DELETE', '/groups/2/access_requests/10', status_code=204)

        assert client.access_requests.deny_project_access_request(1, 10).status_code == 204
        assert client.access_requests.deny_group_access_request(2, 10).status_code == 204

    def test_deny_forbidden(self, client, mux):
        mux.handle(
            'DELETE', '/projects/1/access_requests/10', {'message': '403 Forbidden'}, status_code=403
        )

        with pytest.raises(GitLabPermissionError):
            client.access_requests.deny_project_access_request(1, 10)


class TestSearchService:
    """Test search endpoints."""

    def test_projects(self, client, mux):
        mux.handle('GET', '/search', [{'id': 6, 'name': 'flight'}])

        projects, _ = client.search.projects('flight', SearchOptions(per_page=5))

        assert projects == [Project(id=6, name='flight')]
        assert mux.last.params == {'per_page': '5', 'scope': 'projects', 'search': 'flight'}

    def test_issues_by_group(self, client, mux):
        mux.handle('GET', '/groups/3/-/search', [{'id': 1}])

        issues, _ = client.search.issues_by_group(3, 'file')

        assert issues == [Issue(id=1)]
        assert mux.last.params == {'scope': 'issues', 'search': 'file'}

    def test_merge_requests_by_project(self, client, mux):
        mux.handle('GET', '/projects/group%2Fapi/-/search', [{'id': 2}])

        mrs, _ = client.search.merge_requests_by_project(
            'group/api', 'fix', SearchOptions(state='merged')
        )

        assert mrs == [MergeRequest(id=2)]
        assert mux.last.params == {'scope': 'merge_requests', 'search': 'fix', 'state': 'merged'}

    def test_blobs_by_project(self, client, mux):
        mux.handle(
            'GET',
            '/projects/6/-/search',
            [{'basename': 'README', 'data': '```\n# Sample\n```', 'path': 'README.md', 'startline': 46}],
        )

        blobs, _ = client.search.blobs_by_project(6, 'keyword', SearchOptions(ref='main'))

        assert blobs == [
            Blob(basename='README', data='```\n# Sample\n```', path='README.md', startline=46)
        ]
        assert mux.last.params == {'scope': 'blobs', 'search': 'keyword', 'ref': 'main'}

    def test_users(self, client, mux):
        mux.handle('GET', '/search', [{'id': 1, 'username': 'root'}])

        users, _ = client.search.users('root')

        assert users == [BasicUser(id=1, username='root')]

    def test_options_not_mutated(self, client, mux):
        mux.handle('GET', '/search', [])
        opt = SearchOptions(per_page=10)

        client.search.commits('fix', opt)

        assert opt.scope is None
        assert opt.search is None
        assert mux.last.params['scope'] == 'commits'

    def test_invalid_group_id(self, client):
        with pytest.raises(InvalidIDError):
            client.search.projects_by_group(1.5, 'x')
