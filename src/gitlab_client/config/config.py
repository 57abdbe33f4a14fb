"""Configuration management for the GitLab client."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .. import __version__


class ClientConfig(BaseModel):
    """Configuration for a GitLab instance."""

    url: str = Field(default='https://gitlab.com', description='GitLab instance URL')
    token: Optional[str] = Field(default=None, description='Personal access token')
    oauth_token: Optional[str] = Field(default=None, description='OAuth access token')
    job_token: Optional[str] = Field(default=None, description='CI job token')
    api_version: str = Field(default='v4', description='GitLab API version')
    timeout: float = Field(default=30, description='Request timeout in seconds')
    max_retries: int = Field(
        default=5, description='Retries for 429, 5xx and connection errors'
    )
    retry_wait_min: float = Field(
        default=0.1, description='Minimum wait between retries in seconds'
    )
    retry_wait_max: float = Field(
        default=0.4, description='Maximum wait between retries in seconds'
    )
    rate_limit_per_second: Optional[float] = Field(
        default=None, description='Client-side API requests per second limit'
    )
    user_agent: str = Field(
        default=f'gitlab-client/{__version__}', description='User-Agent header'
    )
    verify_ssl: bool = Field(default=True, description='Verify TLS certificates')

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        """Validate GitLab URL format."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v.rstrip('/')

    @field_validator('rate_limit_per_second')
    @classmethod
    def validate_rate_limit(cls, v):
        """Validate rate limit is positive."""
        if v is not None and v <= 0:
            raise ValueError('Rate limit must be positive')
        return v

    @field_validator('max_retries')
    @classmethod
    def validate_max_retries(cls, v):
        """Validate retry count is not negative."""
        if v < 0:
            raise ValueError('max_retries cannot be negative')
        return v

    @model_validator(mode='after')
    def validate_single_auth(self):
        """Ensure at most one authentication method is provided."""
        provided = [t for t in (self.token, self.oauth_token, self.job_token) if t]
        if len(provided) > 1:
            raise ValueError(
                'Only one of token, oauth_token or job_token may be provided'
            )
        return self

    @property
    def auth_type(self) -> Optional[str]:
        """Name of the configured authentication method, if any."""
        if self.token:
            return 'private_token'
        if self.oauth_token:
            return 'oauth_token'
        if self.job_token:
            return 'job_token'
        return None

    @property
    def auth_token(self) -> Optional[str]:
        return self.token or self.oauth_token or self.job_token


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default='INFO', description='Log level')
    file: Optional[str] = Field(default=None, description='Log file path')
    format: Optional[str] = Field(default=None, description='Log format')

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class Config(BaseModel):
    """Main configuration class for the GitLab client."""

    model_config = ConfigDict(extra='forbid')

    gitlab: ClientConfig = Field(
        default_factory=ClientConfig, description='GitLab instance'
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description='Logging settings'
    )

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f'Configuration file not found: {config_path}')

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        # Load .env file if it exists
        load_dotenv()

        rate_limit = os.getenv('GITLAB_RATE_LIMIT')
        config_data = {
            'gitlab': {
                'url': os.getenv('GITLAB_URL'),
                'token': os.getenv('GITLAB_TOKEN'),
                'oauth_token': os.getenv('GITLAB_OAUTH_TOKEN'),
                'job_token': os.getenv('GITLAB_JOB_TOKEN'),
                'timeout': float(os.getenv('GITLAB_TIMEOUT', 30)),
                'max_retries': int(os.getenv('GITLAB_MAX_RETRIES', 5)),
                'rate_limit_per_second': float(rate_limit) if rate_limit else None,
            },
            'logging': {
                'level': os.getenv('LOG_LEVEL', 'INFO'),
                'file': os.getenv('LOG_FILE'),
            },
        }

        # Remove None values
        config_data = cls._remove_none_values(config_data)

        return cls(**config_data)

    @staticmethod
    def _remove_none_values(data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively remove None values from dictionary."""
        if isinstance(data, dict):
            return {
                k: Config._remove_none_values(v)
                for k, v in data.items()
                if v is not None
            }
        return data

    def to_file(self, config_path: str) -> None:
        """Save configuration to YAML file."""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                indent=2,
                sort_keys=False,
            )

    @staticmethod
    def create_template(output_path: str) -> None:
        """Create a configuration template file."""
        template_config = {
            'gitlab': {
                'url': 'https://gitlab.example.com',
                'token': 'your-personal-access-token',
                'api_version': 'v4',
                'timeout': 30,
                'max_retries': 5,
            },
            'logging': {
                'level': 'INFO',
                'file': 'gitlab-client.log',
            },
        }

        config_file = Path(output_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(
                template_config, f, default_flow_style=False, indent=2, sort_keys=False
            )
