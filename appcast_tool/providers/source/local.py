"""
Flat local directory source.

The files directly inside the root are the assets of a single release::

    root/
        app.dmg
        app_32-bit.msi
        app_64-bit.msi

The release version comes from the ``version`` option and defaults to
``v0.0.0``.
"""

from pathlib import Path

from ...exceptions import ReleaseNotFoundError
from ...models.provider import ProviderConfig
from ...models.release import ReleaseListing
from .file import FileSource

DEFAULT_LOCAL_VERSION = "v0.0.0"


class LocalSource(FileSource):
    """Source provider exposing one directory as one release."""

    def __init__(self, root: Path, version: str = DEFAULT_LOCAL_VERSION) -> None:
        """
        Initialize the local source.

        Args:
            root: Directory whose files are the release assets
            version: Version (and name) of the single release
        """
        super().__init__(root)
        self.version = version

    def _release_dir(self, version: str) -> Path:
        if version != self.version or not self.root.is_dir():
            raise ReleaseNotFoundError(version)
        return self.root

    def _list(self) -> ReleaseListing:
        return ReleaseListing(releases=[self._read_release(self.root, self.version)])

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self.version == other.version  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(("local-source", self.root, self.version))

    def __repr__(self) -> str:
        return f"LocalSource({str(self.root)!r}, version={self.version!r})"


def new_local_source(config: ProviderConfig) -> LocalSource:
    """
    Build a LocalSource from its configuration block.

    ``path`` (or ``repo``) names the directory, which must exist. The optional
    ``version`` key names the release.

    Raises:
        ValueError: If no path is configured or it is not a directory
    """
    path_value = config.path or config.repo
    if not path_value:
        raise ValueError("local source requires a path")

    root = Path(path_value).expanduser().resolve()
    if not root.is_dir():
        raise ValueError(f"local source path is not a directory: {root}")

    version = config.get_option("version", DEFAULT_LOCAL_VERSION)
    if not isinstance(version, str) or not version:
        raise ValueError(f"local source version must be a non-empty string, got {version!r}")
    return LocalSource(root, version)


__all__ = ["LocalSource", "new_local_source", "DEFAULT_LOCAL_VERSION"]
