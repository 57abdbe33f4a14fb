"""Configuration for the GitLab client."""

from .config import ClientConfig, Config, LoggingConfig

__all__ = ['ClientConfig', 'Config', 'LoggingConfig']
