"""
Pydantic models for appcast-tool.

This package contains all models used in the application:
- release: Release, Asset and listing results returned by source providers
- provider: Provider configuration blocks
- integrations: Integration configuration blocks
- pipe: The assembled pipe
- hosting_api: Models for GitLab and GitHub API responses
"""

from .base import AppcastBaseModel
from .release import Asset, Release, AssetWarning, ReleaseListing
from .provider import ProviderConfig
from .integrations import GlobalSettings, IntegrationBlock, ApkBlock, SparkleBlock
from .pipe import IntegrationConfig, ApkConfig, SparkleConfig, Pipe
from .hosting_api import (
    HostingBaseModel,
    GitLabRelease,
    GitLabReleaseLink,
    GitLabUpload,
    GitHubRelease,
    GitHubAsset,
)

__all__ = [
    # Domain Models
    "AppcastBaseModel",
    "Asset",
    "Release",
    "AssetWarning",
    "ReleaseListing",
    "ProviderConfig",
    "GlobalSettings",
    "IntegrationBlock",
    "ApkBlock",
    "SparkleBlock",
    "IntegrationConfig",
    "ApkConfig",
    "SparkleConfig",
    "Pipe",
    # Hosting API Models
    "HostingBaseModel",
    "GitLabRelease",
    "GitLabReleaseLink",
    "GitLabUpload",
    "GitHubRelease",
    "GitHubAsset",
]
