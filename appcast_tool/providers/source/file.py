"""
Local filesystem source.

Layout: every subdirectory of the root is a release named after its
version, and the regular files inside it are the release's assets::

    root/
        v1.0.0/
            app.dmg
            app_64-bit.msi
        v1.1.0/
            ...
"""

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ...exceptions import AssetNotFoundError, ReleaseNotFoundError
from ...models.provider import ProviderConfig
from ...models.release import Asset, Release, ReleaseListing


def _valid_name(name: str) -> bool:
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


def _check_name(name: str) -> None:
    if not _valid_name(name):
        raise ValueError(f"invalid file name: {name!r}")


class FileSource:
    """Source provider reading releases from a local directory tree."""

    def __init__(self, root: Path) -> None:
        """
        Initialize the file source.

        Args:
            root: Directory holding one subdirectory per release
        """
        self.root = root

    def _release_dir(self, version: str) -> Path:
        # A version that cannot name a directory below root is simply absent
        if not _valid_name(version):
            raise ReleaseNotFoundError(version)
        path = self.root / version
        if not path.is_dir():
            raise ReleaseNotFoundError(version)
        return path

    def _read_release(self, path: Path, version: str) -> Release:
        assets: List[Asset] = []
        for entry in sorted(path.iterdir()):
            if entry.name.startswith(".") or not entry.is_file():
                continue
            assets.append(Asset(name=entry.name, url=entry.resolve().as_uri(), size=entry.stat().st_size))

        return Release(
            name=version,
            version=version,
            date=datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc),
            assets=assets,
        )

    def _list(self) -> ReleaseListing:
        releases = [
            self._read_release(entry, entry.name)
            for entry in sorted(self.root.iterdir())
            if entry.is_dir() and not entry.name.startswith(".")
        ]
        return ReleaseListing(releases=releases)

    async def list_releases(self) -> ReleaseListing:
        return await asyncio.to_thread(self._list)

    async def get_release(self, version: str) -> Release:
        return await asyncio.to_thread(lambda: self._read_release(self._release_dir(version), version))

    async def upload_asset(self, version: str, name: str, data: bytes) -> None:
        _check_name(name)

        def _write() -> None:
            path = self._release_dir(version) / name
            path.write_bytes(data)
            logging.debug("Wrote %d bytes to %s", len(data), path)

        await asyncio.to_thread(_write)

    async def download_asset(self, version: str, name: str) -> bytes:
        def _read() -> bytes:
            path = self._release_dir(version)
            if not _valid_name(name) or not (path / name).is_file():
                raise AssetNotFoundError(version, name)
            return (path / name).read_bytes()

        return await asyncio.to_thread(_read)

    async def aclose(self) -> None:
        pass

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FileSource) and type(other) is type(self) and self.root == other.root

    def __hash__(self) -> int:
        return hash(("file-source", self.root))

    def __repr__(self) -> str:
        return f"FileSource({str(self.root)!r})"


def new_file_source(config: ProviderConfig) -> FileSource:
    """
    Build a FileSource from its configuration block.

    ``path`` (or ``repo``) names the root directory, which must exist.

    Raises:
        ValueError: If no path is configured or it is not a directory
    """
    path_value = config.path or config.repo
    if not path_value:
        raise ValueError("file source requires a path")

    root = Path(path_value).expanduser().resolve()
    if not root.is_dir():
        raise ValueError(f"file source path is not a directory: {root}")
    return FileSource(root)


__all__ = ["FileSource", "new_file_source"]
