"""
Appcast Tool - republish release artifacts as package repositories.

This package pulls releases and their assets from a source host (GitLab,
GitHub, a local directory), assembles a pipe of packaging integrations from
a declarative configuration file, and hands it to the publishing code.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .exceptions import (
    AppcastError,
    AssetNotFoundError,
    InvalidConfigError,
    InvalidKeyError,
    MissingRequiredFieldError,
    MissingSecretError,
    ProviderConstructionError,
    ReleaseNotFoundError,
    UnknownProviderKindError,
)
from .models import Asset, Pipe, ProviderConfig, Release, ReleaseListing
from .pipe import PipeAssembler
from .protocols import SourceProvider, TargetProvider
from .providers import ProviderRegistry, build_registries, register_builtin_providers
from .utils import ConfigManager, SecretStore, create_session_with_retry, get_logger, setup_logging
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "AppcastError",
    "AssetNotFoundError",
    "InvalidConfigError",
    "InvalidKeyError",
    "MissingRequiredFieldError",
    "MissingSecretError",
    "ProviderConstructionError",
    "ReleaseNotFoundError",
    "UnknownProviderKindError",
    "Asset",
    "Pipe",
    "ProviderConfig",
    "Release",
    "ReleaseListing",
    "PipeAssembler",
    "SourceProvider",
    "TargetProvider",
    "ProviderRegistry",
    "build_registries",
    "register_builtin_providers",
    "ConfigManager",
    "SecretStore",
    "create_session_with_retry",
    "get_logger",
    "setup_logging",
    "cli_main",
    "cli_group",
]
