"""Tests for the pipelines, jobs and CI/CD variables services."""

from datetime import datetime, timezone

import pytest

from gitlab_client import InvalidIDError
from gitlab_client.models import (
    BasicUser,
    Bridge,
    CreateGroupVariableOptions,
    CreateInstanceVariableOptions,
    CreatePipelineOptions,
    CreateProjectVariableOptions,
    GetLatestPipelineOptions,
    GetProjectVariableOptions,
    GroupVariable,
    InstanceVariable,
    Job,
    JobPipeline,
    ListJobsOptions,
    ListProjectPipelinesOptions,
    Pipeline,
    PipelineInfo,
    PipelineVariable,
    PipelineVariableOptions,
    PlayJobOptions,
    ProjectVariable,
    RemoveProjectVariableOptions,
    UpdateGroupVariableOptions,
    UpdateProjectVariableOptions,
    VariableFilter,
)

PIPELINE = {
    'id': 46,
    'iid': 11,
    'project_id': 1,
    'status': 'success',
    'ref': 'main',
    'sha': 'a91957a858320c0e17f3a0eca7cfacbff50ea29a',
    'tag': False,
    'user': {'id': 1, 'username': 'root'},
    'created_at': '2016-08-11T11:28:34.085Z',
    'duration': 5,
    'coverage': '30.0',
    'detailed_status': {'icon': 'status_success', 'text': 'passed', 'group': 'success'},
}


class TestPipelinesService:
    """Test pipeline endpoints."""

    def test_list_project_pipelines(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/pipelines',
            [{'id': 47, 'status': 'pending', 'ref': 'new-pipeline'}],
        )

        pipelines, _ = client.pipelines.list_project_pipelines(
            1,
            ListProjectPipelinesOptions(
                status='pending',
                ref='new-pipeline',
                updated_after=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            ),
        )

        assert pipelines == [PipelineInfo(id=47, status='pending', ref='new-pipeline')]
        assert mux.last.params == {
            'status': 'pending',
            'ref': 'new-pipeline',
            'updated_after': '2024-01-02T03:04:05Z',
        }

    def test_get_pipeline(self, client, mux):
        mux.handle('GET', '/projects/1/pipelines/46', PIPELINE)

        pipeline, _ = client.pipelines.get_pipeline(1, 46)

        assert pipeline.iid == 11
        assert pipeline.user == BasicUser(id=1, username='root')
        assert pipeline.created_at == datetime(
            2016, 8, 11, 11, 28, 34, 85000, tzinfo=timezone.utc
        )
        assert pipeline.detailed_status.text == 'passed'

    def test_get_pipeline_invalid_id(self, client, mux):
        with pytest.raises(InvalidIDError):
            client.pipelines.get_pipeline(1.5, 46)

        assert mux.requests == []

    def test_get_pipeline_variables(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/pipelines/46/variables',
            [{'key': 'RUN_NIGHTLY_BUILD', 'variable_type': 'env_var', 'value': 'true'}],
        )

        variables, _ = client.pipelines.get_pipeline_variables(1, 46)

        assert variables == [
            PipelineVariable(key='RUN_NIGHTLY_BUILD', variable_type='env_var', value='true')
        ]

    def test_get_pipeline_test_report(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/pipelines/46/test_report',
            {
                'total_time': 5.0,
                'total_count': 1,
                'success_count': 1,
                'test_suites': [
                    {
                        'name': 'Secure',
                        'total_count': 1,
                        'test_cases': [
                            {'status': 'success', 'name': 'Security Reports', 'execution_time': 5}
                        ],
                    }
                ],
            },
        )

        report, _ = client.pipelines.get_pipeline_test_report(1, 46)

        assert report.total_count == 1
        assert report.test_suites[0].name == 'Secure'
        assert report.test_suites[0].test_cases[0].execution_time == 5.0

    def test_get_latest_pipeline(self, client, mux):
        mux.handle('GET', '/projects/1/pipelines/latest', PIPELINE)

        pipeline, _ = client.pipelines.get_latest_pipeline(
            1, GetLatestPipelineOptions(ref='main')
        )

        assert pipeline.id == 46
        assert mux.last.params == {'ref': 'main'}

    def test_create_pipeline(self, client, mux):
        mux.handle('POST', '/projects/1/pipeline', {'id': 61, 'ref': 'main'}, status_code=201)

        pipeline, _ = client.pipelines.create_pipeline(
            1,
            CreatePipelineOptions(
                ref='main',
                variables=[PipelineVariableOptions(key='DEPLOY', value='1')],
            ),
        )

        assert pipeline == Pipeline(id=61, ref='main')
        assert mux.last.json == {
            'ref': 'main',
            'variables': [{'key': 'DEPLOY', 'value': '1'}],
        }

    @pytest.mark.parametrize('action', ['retry', 'cancel'])
    def test_retry_and_cancel(self, client, mux, action):
        mux.handle('POST', f'/projects/1/pipelines/46/{action}', {'id': 46, 'status': 'running'})

        pipeline, _ = getattr(client.pipelines, f'{action}_pipeline_build')(1, 46)

        assert pipeline == Pipeline(id=46, status='running')

    def test_delete_pipeline(self, client, mux):
        mux.handle('DELETE', '/projects/1/pipelines/46', status_code=204)

        assert client.pipelines.delete_pipeline(1, 46).status_code == 204


class TestJobsService:
    """Test job endpoints."""

    def test_list_project_jobs(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/jobs',
            [
                {
                    'id': 7,
                    'name': 'rspec:other',
                    'stage': 'test',
                    'status': 'failed',
                    'duration': 0.465,
                    'pipeline': {'id': 6, 'ref': 'main', 'status': 'pending'},
                    'tag_list': ['docker runner'],
                }
            ],
        )

        jobs, _ = client.jobs.list_project_jobs(
            1, ListJobsOptions(scope=['failed', 'success'])
        )

        assert jobs == [
            Job(
                id=7,
                name='rspec:other',
                stage='test',
                status='failed',
                duration=0.465,
                pipeline=JobPipeline(id=6, ref='main', status='pending'),
                tag_list=['docker runner'],
            )
        ]
        assert mux.last.params == {'scope[]': ['failed', 'success']}

    def test_list_pipeline_jobs(self, client, mux):
        mux.handle('GET', '/projects/1/pipelines/6/jobs', [{'id': 7}, {'id': 8}])

        jobs, _ = client.jobs.list_pipeline_jobs(
            1, 6, ListJobsOptions(include_retried=True)
        )

        assert [j.id for j in jobs] == [7, 8]
        assert mux.last.params == {'include_retried': 'true'}

    def test_list_pipeline_bridges(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/pipelines/6/bridges',
            [{'id': 9, 'name': 'trigger', 'downstream_pipeline': {'id': 12, 'status': 'running'}}],
        )

        bridges, _ = client.jobs.list_pipeline_bridges(1, 6)

        assert bridges == [
            Bridge(id=9, name='trigger', downstream_pipeline={'id': 12, 'status': 'running'})
        ]

    def test_get_job(self, client, mux):
        mux.handle('GET', '/projects/1/jobs/7', {'id': 7, 'status': 'success'})

        job, _ = client.jobs.get_job(1, 7)

        assert job == Job(id=7, status='success')

    def test_get_trace_file(self, client, mux):
        mux.handle('GET', '/projects/1/jobs/7/trace', b'Running with gitlab-runner\n')

        trace, _ = client.jobs.get_trace_file(1, 7)

        assert trace == b'Running with gitlab-runner\n'

    def test_get_job_artifacts(self, client, mux):
        mux.handle('GET', '/projects/1/jobs/7/artifacts', b'PK\x03\x04')

        archive, resp = client.jobs.get_job_artifacts(1, 7)

        assert archive == b'PK\x03\x04'
        assert resp.status_code == 200

    @pytest.mark.parametrize('action', ['cancel', 'retry', 'erase'])
    def test_job_actions(self, client, mux, action):
        mux.handle('POST', f'/projects/1/jobs/7/{action}', {'id': 7})

        job, _ = getattr(client.jobs, f'{action}_job')(1, 7)

        assert job == Job(id=7)

    def test_play_job(self, client, mux):
        mux.handle('POST', '/projects/1/jobs/7/play', {'id': 7, 'status': 'pending'})

        job, _ = client.jobs.play_job(
            1,
            7,
            PlayJobOptions(job_variables_attributes=[{'key': 'TARGET', 'value': 'prod'}]),
        )

        assert job.status == 'pending'
        assert mux.last.json == {
            'job_variables_attributes': [{'key': 'TARGET', 'value': 'prod'}]
        }

    def test_delete_artifacts(self, client, mux):
        mux.handle('DELETE', '/projects/1/jobs/7/artifacts', status_code=204)

        assert client.jobs.delete_artifacts(1, 7).status_code == 204


class TestProjectVariablesService:
    """Test project variable endpoints."""

    def test_list_variables(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/variables',
            [{'key': 'TEST_VARIABLE_1', 'value': 'TEST_1', 'protected': False}],
        )

        variables, _ = client.project_variables.list_variables(1)

        assert variables == [
            ProjectVariable(key='TEST_VARIABLE_1', value='TEST_1', protected=False)
        ]

    def test_get_variable_with_filter(self, client, mux):
        mux.handle(
            'GET',
            '/projects/1/variables/TEST_VARIABLE_1',
            {'key': 'TEST_VARIABLE_1', 'environment_scope': 'prod'},
        )

        variable, _ = client.project_variables.get_variable(
            1,
            'TEST_VARIABLE_1',
            GetProjectVariableOptions(filter=VariableFilter(environment_scope='prod')),
        )

        assert variable.environment_scope == 'prod'
        assert mux.last.params == {'filter[environment_scope]': 'prod'}

    def test_create_variable(self, client, mux):
        mux.handle('POST', '/projects/1/variables', {'key': 'NEW', 'value': 'x'}, status_code=201)

        variable, _ = client.project_variables.create_variable(
            1, CreateProjectVariableOptions(key='NEW', value='x', masked=True)
        )

        assert variable == ProjectVariable(key='NEW', value='x')
        assert mux.last.json == {'key': 'NEW', 'value': 'x', 'masked': True}

    def test_update_variable(self, client, mux):
        mux.handle('PUT', '/projects/1/variables/NEW', {'key': 'NEW', 'value': 'y'})

        variable, _ = client.project_variables.update_variable(
            1,
            'NEW',
            UpdateProjectVariableOptions(
                value='y', filter=VariableFilter(environment_scope='*')
            ),
        )

        assert variable.value == 'y'
        assert mux.last.json == {'value': 'y', 'filter': {'environment_scope': '*'}}

    def test_remove_variable_sends_filter_in_body(self, client, mux):
        mux.handle('DELETE', '/projects/1/variables/NEW', status_code=204)

        resp = client.project_variables.remove_variable(
            1,
            'NEW',
            RemoveProjectVariableOptions(filter=VariableFilter(environment_scope='prod')),
        )

        assert resp.status_code == 204
        assert mux.last.params == {}
        assert mux.last.json == {'filter': {'environment_scope': 'prod'}}

    def test_invalid_project_id(self, client):
        with pytest.raises(InvalidIDError):
            client.project_variables.list_variables(1.5)


class TestGroupVariablesService:
    """Test group variable endpoints."""

    def test_list_variables(self, client, mux):
        mux.handle('GET', '/groups/my%2Fgroup/variables', [{'key': 'A', 'value': '1'}])

        variables, _ = client.group_variables.list_variables('my/group')

        assert variables == [GroupVariable(key='A', value='1')]

    def test_create_update_remove(self, client, mux):
        mux.handle('POST', '/groups/1/variables', {'key': 'B', 'value': '2'})
        mux.handle('PUT', '/groups/1/variables/B', {'key': 'B', 'value': '3'})
        mux.handle('DELETE', '/groups/1/variables/B', status_code=204)

        created, _ = client.group_variables.create_variable(
            1, CreateGroupVariableOptions(key='B', value='2')
        )
        updated, _ = client.group_variables.update_variable(
            1, 'B', UpdateGroupVariableOptions(value='3')
        )
        resp = client.group_variables.remove_variable(1, 'B')

        assert created == GroupVariable(key='B', value='2')
        assert updated.value == '3'
        assert resp.status_code == 204


class TestInstanceVariablesService:
    """Test instance variable endpoints."""

    def test_list_variables(self, client, mux):
        mux.handle('GET', '/admin/ci/variables', [{'key': 'GLOBAL', 'value': 'on'}])

        variables, _ = client.instance_variables.list_variables()

        assert variables == [InstanceVariable(key='GLOBAL', value='on')]

    def test_get_variable(self, client, mux):
        mux.handle('GET', '/admin/ci/variables/GLOBAL', {'key': 'GLOBAL', 'masked': True})

        variable, _ = client.instance_variables.get_variable('GLOBAL')

        assert variable == InstanceVariable(key='GLOBAL', masked=True)

    def test_create_variable(self, client, mux):
        mux.handle('POST', '/admin/ci/variables', {'key': 'NEW', 'value': 'v'})

        variable, _ = client.instance_variables.create_variable(
            CreateInstanceVariableOptions(key='NEW', value='v', protected=True)
        )

        assert variable.key == 'NEW'
        assert mux.last.json == {'key': 'NEW', 'value': 'v', 'protected': True}

    def test_remove_variable(self, client, mux):
        mux.handle('DELETE', '/admin/ci/variables/NEW', status_code=204)

        assert client.instance_variables.remove_variable('NEW').status_code == 204
