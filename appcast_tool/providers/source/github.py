"""
GitHub source.

Releases come from the GitHub REST API, which reports asset sizes inline.
Draft releases are skipped: they cannot be fetched by tag.
"""

import logging
import re
from typing import Any, Dict, List
from urllib.parse import quote

import httpx

from ...exceptions import AssetNotFoundError, ReleaseNotFoundError
from ...models.hosting_api import GitHubRelease
from ...models.provider import ProviderConfig
from ...models.release import Asset, Release, ReleaseListing
from ...utils.constants import GITHUB_API_URL, PAGE_SIZE
from ...utils.session import create_session_with_retry

# upload_url is an RFC 6570 template, e.g. ".../assets{?name,label}"
URI_TEMPLATE_SUFFIX = re.compile(r"\{[^}]*\}$")

GITHUB_HEADERS = {
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
}


def _to_release(release: GitHubRelease) -> Release:
    return Release(
        name=release.name or release.tag_name,
        description=release.body or "",
        version=release.tag_name,
        date=release.published_at or release.created_at,
        assets=[Asset(name=a.name, url=a.browser_download_url, size=a.size) for a in release.assets],
    )


class GitHubSource:
    """Source provider backed by GitHub releases."""

    def __init__(self, repo: str, client: httpx.AsyncClient) -> None:
        """
        Initialize the GitHub source.

        Args:
            repo: Repository as "owner/name"
            client: Client whose base URL is the API root (e.g. https://api.github.com)
        """
        self.repo = repo.strip("/")
        self.client = client

    async def _fetch_release(self, version: str) -> GitHubRelease:
        response = await self.client.get(f"/repos/{self.repo}/releases/tags/{quote(version, safe='')}")
        if response.status_code == 404:
            raise ReleaseNotFoundError(version)
        response.raise_for_status()
        return GitHubRelease.model_validate(response.json())

    async def list_releases(self) -> ReleaseListing:
        items: List[Dict[str, Any]] = []
        page = 1
        while True:
            response = await self.client.get(
                f"/repos/{self.repo}/releases", params={"per_page": PAGE_SIZE, "page": page}
            )
            response.raise_for_status()
            batch = response.json()
            items.extend(batch)
            if len(batch) < PAGE_SIZE:
                break
            page += 1

        releases = [GitHubRelease.model_validate(item) for item in items]
        return ReleaseListing(releases=[_to_release(r) for r in releases if not r.draft])

    async def get_release(self, version: str) -> Release:
        return _to_release(await self._fetch_release(version))

    async def upload_asset(self, version: str, name: str, data: bytes) -> None:
        release = await self._fetch_release(version)
        upload_url = URI_TEMPLATE_SUFFIX.sub("", release.upload_url)

        response = await self.client.post(
            upload_url,
            params={"name": name},
            content=data,
            headers={"Content-Type": "application/octet-stream"},
        )
        response.raise_for_status()
        logging.info("Uploaded %s to release %s", name, version)

    async def download_asset(self, version: str, name: str) -> bytes:
        release = await self._fetch_release(version)
        for asset in release.assets:
            if asset.name == name:
                response = await self.client.get(asset.url, headers={"Accept": "application/octet-stream"})
                response.raise_for_status()
                return response.content

        raise AssetNotFoundError(version, name)

    async def aclose(self) -> None:
        await self.client.aclose()

    def __repr__(self) -> str:
        return f"GitHubSource({self.repo!r})"


def new_github_source(config: ProviderConfig) -> GitHubSource:
    """
    Build a GitHubSource from its configuration block.

    Raises:
        ValueError: If the repository is missing or not "owner/name"
    """
    if not config.repo or config.repo.strip("/").count("/") != 1:
        raise ValueError(f"github source requires a repo as owner/name, got {config.repo!r}")

    headers = dict(GITHUB_HEADERS)
    if config.token:
        headers["Authorization"] = f"Bearer {config.token}"
    client = create_session_with_retry(headers, base_url=config.base_url or GITHUB_API_URL)
    return GitHubSource(config.repo, client)


__all__ = ["GitHubSource", "new_github_source"]
