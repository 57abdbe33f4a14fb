"""Tests for configuration management."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from gitlab_client.config import ClientConfig, Config, LoggingConfig


class TestClientConfig:
    """Test GitLab instance configuration."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ClientConfig()

        assert config.url == 'https://gitlab.com'
        assert config.api_version == 'v4'
        assert config.timeout == 30
        assert config.max_retries == 5
        assert config.retry_wait_min == 0.1
        assert config.retry_wait_max == 0.4
        assert config.rate_limit_per_second is None
        assert config.auth_type is None
        assert config.auth_token is None

    def test_valid_config(self):
        """Test valid configuration creation."""
        config = ClientConfig(
            url='https://gitlab.example.com',
            token='test-token',
            api_version='v4',
            timeout=10,
            rate_limit_per_second=10,
        )

        assert config.url == 'https://gitlab.example.com'
        assert config.token == 'test-token'
        assert config.timeout == 10
        assert config.rate_limit_per_second == 10
        assert config.auth_type == 'private_token'
        assert config.auth_token == 'test-token'

    def test_url_validation(self):
        """Test URL validation."""
        valid_urls = [
            'https://gitlab.com',
            'https://gitlab.example.com',
            'http://localhost:8080',
        ]

        for url in valid_urls:
            config = ClientConfig(url=url)
            assert config.url == url

        with pytest.raises(ValueError):
            ClientConfig(url='gitlab.example.com')

    def test_trailing_slash_stripped(self):
        """Test trailing slashes are removed from the URL."""
        config = ClientConfig(url='https://gitlab.example.com/')

        assert config.url == 'https://gitlab.example.com'

    def test_single_auth_method(self):
        """Test that only one authentication method is accepted."""
        with pytest.raises(ValueError, match='Only one of'):
            ClientConfig(token='a', oauth_token='b')

        with pytest.raises(ValueError):
            ClientConfig(token='a', job_token='c')

    def test_auth_types(self):
        """Test the auth type follows the configured token."""
        assert ClientConfig(oauth_token='o').auth_type == 'oauth_token'
        assert ClientConfig(job_token='j').auth_type == 'job_token'

    def test_rate_limit_must_be_positive(self):
        """Test rate limit validation."""
        with pytest.raises(ValueError):
            ClientConfig(rate_limit_per_second=0)

    def test_max_retries_not_negative(self):
        """Test retry count validation."""
        assert ClientConfig(max_retries=0).max_retries == 0

        with pytest.raises(ValueError):
            ClientConfig(max_retries=-1)


class TestLoggingConfig:
    """Test logging configuration."""

    def test_level_normalized(self):
        """Test log levels are upper-cased."""
        assert LoggingConfig(level='debug').level == 'DEBUG'

    def test_invalid_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError):
            LoggingConfig(level='verbose')


class TestConfig:
    """Test main configuration class."""

    def test_config_from_dict(self):
        """Test configuration creation from dictionary."""
        config_dict = {
            'gitlab': {'url': 'https://gitlab.example.com', 'token': 'secret'},
            'logging': {'level': 'WARNING'},
        }

        config = Config(**config_dict)

        assert config.gitlab.url == 'https://gitlab.example.com'
        assert config.gitlab.token == 'secret'
        assert config.logging.level == 'WARNING'

    def test_unknown_section_rejected(self):
        """Test unknown top-level keys are rejected."""
        with pytest.raises(ValueError):
            Config(**{'source': {'url': 'https://gitlab.com'}})

    def test_config_from_file(self):
        """Test configuration loading from YAML file."""
        config_content = """
gitlab:
  url: https://gitlab.example.com
  token: file-token
  max_retries: 2

logging:
  level: DEBUG
  file: logs/client.log
"""

        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write(config_content)
            f.flush()

            try:
                config = Config.from_file(f.name)
                assert config.gitlab.url == 'https://gitlab.example.com'
                assert config.gitlab.token == 'file-token'
                assert config.gitlab.max_retries == 2
                assert config.logging.level == 'DEBUG'
                assert config.logging.file == 'logs/client.log'
            finally:
                os.unlink(f.name)

    def test_empty_config_file(self):
        """Test an empty file yields the defaults."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.flush()

            try:
                config = Config.from_file(f.name)
                assert config.gitlab.url == 'https://gitlab.com'
            finally:
                os.unlink(f.name)

    @patch('gitlab_client.config.config.load_dotenv')
    def test_config_from_env(self, mock_load_dotenv):
        """Test configuration loading from environment variables."""
        env_vars = {
            'GITLAB_URL': 'https://env.gitlab.com',
            'GITLAB_JOB_TOKEN': 'job-token',
            'GITLAB_TIMEOUT': '15',
            'GITLAB_MAX_RETRIES': '3',
            'GITLAB_RATE_LIMIT': '2.5',
            'LOG_LEVEL': 'error',
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = Config.from_env()

        mock_load_dotenv.assert_called_once()
        assert config.gitlab.url == 'https://env.gitlab.com'
        assert config.gitlab.job_token == 'job-token'
        assert config.gitlab.token is None
        assert config.gitlab.timeout == 15
        assert config.gitlab.max_retries == 3
        assert config.gitlab.rate_limit_per_second == 2.5
        assert config.logging.level == 'ERROR'

    @patch('gitlab_client.config.config.load_dotenv')
    def test_config_from_empty_env(self, mock_load_dotenv):
        """Test defaults apply when no variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()

        assert config.gitlab.url == 'https://gitlab.com'
        assert config.gitlab.auth_type is None
        assert config.logging.file is None

    def test_to_file_round_trip(self):
        """Test saving and reloading a configuration."""
        config = Config(
            gitlab=ClientConfig(url='https://gitlab.example.com', token='abc')
        )

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'nested' / 'config.yaml'
            config.to_file(str(path))

            loaded = Config.from_file(str(path))

        assert loaded == config

    def test_create_template(self):
        """Test the template contains a loadable configuration."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'template.yaml'
            Config.create_template(str(path))

            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            config = Config.from_file(str(path))

        assert data['gitlab']['url'] == 'https://gitlab.example.com'
        assert config.gitlab.token == 'your-personal-access-token'

    def test_invalid_config_file(self):
        """Test handling of invalid configuration file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write('invalid: yaml: content:')
            f.flush()

            try:
                with pytest.raises(yaml.YAMLError):
                    Config.from_file(f.name)
            finally:
                os.unlink(f.name)

    def test_missing_config_file(self):
        """Test handling of missing configuration file."""
        with pytest.raises(FileNotFoundError):
            Config.from_file('/nonexistent/config.yaml')
