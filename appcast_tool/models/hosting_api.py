"""
Pydantic models for GitLab and GitHub API responses.

Only the fields appcast-tool reads are declared; everything else the APIs
return is kept as extra data.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Base Models
# ============================================================================


class HostingBaseModel(BaseModel):
    """Base model for all hosting API responses."""

    model_config = ConfigDict(extra="allow")  # Allow extra fields from API


# ============================================================================
# GitLab Models
# ============================================================================


class GitLabReleaseLink(HostingBaseModel):
    """A release link (GitLab's name for a release asset)."""

    id: Optional[int] = None
    name: str
    url: str
    direct_asset_url: Optional[str] = None


class GitLabReleaseAssets(HostingBaseModel):
    """Assets block of a GitLab release."""

    links: List[GitLabReleaseLink] = Field(default_factory=list)


class GitLabRelease(HostingBaseModel):
    """Response from GitLab release endpoints."""

    tag_name: str
    name: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    released_at: Optional[datetime] = None
    assets: GitLabReleaseAssets = Field(default_factory=GitLabReleaseAssets)


class GitLabUpload(HostingBaseModel):
    """Response from the GitLab project upload endpoint."""

    alt: Optional[str] = None
    url: str
    full_path: Optional[str] = None
    markdown: Optional[str] = None


# ============================================================================
# GitHub Models
# ============================================================================


class GitHubAsset(HostingBaseModel):
    """A GitHub release asset."""

    id: int
    name: str
    url: str  # API URL, serves bytes with Accept: application/octet-stream
    browser_download_url: str
    size: int = 0


class GitHubRelease(HostingBaseModel):
    """Response from GitHub release endpoints."""

    id: int
    tag_name: str
    name: Optional[str] = None
    body: Optional[str] = None
    draft: bool = False
    prerelease: bool = False
    created_at: datetime
    published_at: Optional[datetime] = None
    upload_url: str
    assets: List[GitHubAsset] = Field(default_factory=list)


__all__ = [
    "HostingBaseModel",
    "GitLabReleaseLink",
    "GitLabReleaseAssets",
    "GitLabRelease",
    "GitLabUpload",
    "GitHubAsset",
    "GitHubRelease",
]
