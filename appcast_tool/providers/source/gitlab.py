"""
GitLab source.

Releases come from the GitLab REST API (v4). Release links carry no size, so
sizes are probed with HEAD requests. Uploading is a two-step operation: the
file is uploaded to the project, then linked to the release.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from ...exceptions import AssetNotFoundError, ReleaseNotFoundError
from ...models.hosting_api import GitLabRelease, GitLabReleaseLink, GitLabUpload
from ...models.provider import ProviderConfig
from ...models.release import Asset, AssetWarning, Release, ReleaseListing
from ...utils.constants import GITLAB_API_URL, PAGE_SIZE
from ...utils.session import create_session_with_retry
from ...utils.size_probe import probe_sizes

API_SUFFIX = "/api/v4"


class GitLabSource:
    """Source provider backed by GitLab releases."""

    def __init__(self, repo: str, client: httpx.AsyncClient, *, web_url: Optional[str] = None) -> None:
        """
        Initialize the GitLab source.

        Args:
            repo: Project path ("group/project") or numeric project ID
            client: Client whose base URL is the API root (e.g. https://gitlab.com/api/v4)
            web_url: Instance root used to build upload URLs, derived from the API root if omitted
        """
        self.repo = repo
        self.client = client
        self._project = quote(repo, safe="")
        if web_url is None:
            # Instances served below a sub-path keep it: https://host/gitlab/api/v4 -> https://host/gitlab
            web_url = str(client.base_url).rstrip("/")
            if web_url.endswith(API_SUFFIX):
                web_url = web_url[: -len(API_SUFFIX)]
        self.web_url = web_url.rstrip("/")

    def _releases_path(self, version: Optional[str] = None) -> str:
        path = f"/projects/{self._project}/releases"
        if version is not None:
            path += "/" + quote(version, safe="")
        return path

    async def _get_pages(self, path: str) -> List[Dict[str, Any]]:
        """GET every page of a paginated collection, following x-next-page."""
        items: List[Dict[str, Any]] = []
        page: Optional[str] = "1"
        while page:
            response = await self.client.get(path, params={"per_page": PAGE_SIZE, "page": page})
            response.raise_for_status()
            items.extend(response.json())
            page = response.headers.get("x-next-page")
        return items

    async def _parse_release(self, data: Dict[str, Any]) -> Tuple[Release, List[AssetWarning]]:
        release = GitLabRelease.model_validate(data)
        links = release.assets.links
        sizes, warnings = await probe_sizes(self.client, release.tag_name, [(link.name, link.url) for link in links])

        parsed = Release(
            name=release.name or release.tag_name,
            description=release.description or "",
            version=release.tag_name,
            date=release.created_at,
            assets=[Asset(name=link.name, url=link.url, size=size) for link, size in zip(links, sizes)],
        )
        return parsed, warnings

    async def list_releases(self) -> ReleaseListing:
        releases = []
        warnings: List[AssetWarning] = []
        for data in await self._get_pages(self._releases_path()):
            release, release_warnings = await self._parse_release(data)
            releases.append(release)
            warnings.extend(release_warnings)
        return ReleaseListing(releases=releases, warnings=warnings)

    async def get_release(self, version: str) -> Release:
        response = await self.client.get(self._releases_path(version))
        if response.status_code == 404:
            raise ReleaseNotFoundError(version)
        response.raise_for_status()

        release, _ = await self._parse_release(response.json())
        return release

    async def upload_asset(self, version: str, name: str, data: bytes) -> None:
        response = await self.client.post(f"/projects/{self._project}/uploads", files={"file": (name, data)})
        response.raise_for_status()
        upload = GitLabUpload.model_validate(response.json())

        if upload.full_path:
            url = self.web_url + upload.full_path
        else:
            url = f"{self.web_url}/{self.repo.strip('/')}{upload.url}"

        # No compensation: GitLab keeps the uploaded file if linking fails.
        try:
            response = await self.client.post(
                self._releases_path(version) + "/assets/links", json={"name": name, "url": url}
            )
            if response.status_code == 404:
                raise ReleaseNotFoundError(version)
            response.raise_for_status()
        except Exception:
            logging.error("Uploaded %s to %s but could not link it to release %s", name, url, version)
            raise

        logging.info("Uploaded %s to release %s", name, version)

    async def download_asset(self, version: str, name: str) -> bytes:
        try:
            links = [
                GitLabReleaseLink.model_validate(item)
                for item in await self._get_pages(self._releases_path(version) + "/assets/links")
            ]
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise ReleaseNotFoundError(version) from e
            raise

        for link in links:
            if link.name == name:
                response = await self.client.get(link.url)
                response.raise_for_status()
                return response.content

        raise AssetNotFoundError(version, name)

    async def aclose(self) -> None:
        await self.client.aclose()

    def __repr__(self) -> str:
        return f"GitLabSource({self.repo!r}, api={str(self.client.base_url)!r})"


def new_gitlab_source(config: ProviderConfig) -> GitLabSource:
    """
    Build a GitLabSource from its configuration block.

    Raises:
        ValueError: If no repository is configured
    """
    if not config.repo:
        raise ValueError("gitlab source requires a repo")

    headers = {"PRIVATE-TOKEN": config.token} if config.token else None
    client = create_session_with_retry(headers, base_url=config.base_url or GITLAB_API_URL)
    return GitLabSource(config.repo, client)


__all__ = ["GitLabSource", "new_gitlab_source"]
