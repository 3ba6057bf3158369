"""
Local filesystem target.

Publishes files below a root directory; ``sub`` scopes the target to a
subfolder, which is how each integration gets its own folder.
"""

import asyncio
from pathlib import Path, PurePosixPath

from ...models.provider import ProviderConfig


def _relative(path: str) -> PurePosixPath:
    relative = PurePosixPath(path.lstrip("/"))
    if not relative.parts or ".." in relative.parts:
        raise ValueError(f"invalid target path: {path!r}")
    return relative


class FileTarget:
    """Target provider writing into a local directory."""

    def __init__(self, root: Path) -> None:
        """
        Initialize the file target.

        Args:
            root: Directory files are published to, created on first write
        """
        self.root = root

    def sub(self, folder: str) -> "FileTarget":
        return FileTarget(self.root / _relative(folder))

    def _path(self, path: str) -> Path:
        return self.root / _relative(path)

    async def read(self, path: str) -> bytes:
        return await asyncio.to_thread(self._path(path).read_bytes)

    async def write(self, path: str, data: bytes) -> None:
        target = self._path(path)

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        await asyncio.to_thread(_write)

    def url(self, path: str) -> str:
        return self._path(path).as_uri()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FileTarget) and self.root == other.root

    def __hash__(self) -> int:
        return hash(("file-target", self.root))

    def __repr__(self) -> str:
        return f"FileTarget({str(self.root)!r})"


def new_file_target(config: ProviderConfig) -> FileTarget:
    """
    Build a FileTarget from its configuration block.

    Raises:
        ValueError: If no path is configured
    """
    if not config.path:
        raise ValueError("file target requires a path")
    return FileTarget(Path(config.path).expanduser().resolve())


__all__ = ["FileTarget", "new_file_target"]
