"""Configuration module for fluent-pytest."""

from fluent_pytest.config.models import FluentConfig
from fluent_pytest.config.loader import ConfigLoader

__all__ = ["FluentConfig", "ConfigLoader"]
