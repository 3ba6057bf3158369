"""
Provider protocols.

Every backend conforms to one of these protocols without inheriting from a
shared base class. Network-bound operations are coroutines: cancelling the
calling task aborts them, including any retry backoff in progress.
"""

from typing import Protocol, runtime_checkable

from ..models.release import Release, ReleaseListing


@runtime_checkable
class SourceProvider(Protocol):
    """
    Protocol for release sources (GitLab, GitHub, local filesystem).
    """

    async def list_releases(self) -> ReleaseListing:
        """
        Return every release known to the backend with its assets populated.

        Assets whose size could not be determined keep ``size == 0`` and are
        reported in ``ReleaseListing.warnings``; this never fails the call.
        """
        ...

    async def get_release(self, version: str) -> Release:
        """
        Return the release matching ``version``.

        Raises:
            ReleaseNotFoundError: If no release has that version
        """
        ...

    async def upload_asset(self, version: str, name: str, data: bytes) -> None:
        """
        Attach a named binary blob to an existing release.

        Uploading the same name twice is backend-defined (overwrite or duplicate).
        """
        ...

    async def download_asset(self, version: str, name: str) -> bytes:
        """
        Return the bytes of the asset called ``name``.

        Raises:
            AssetNotFoundError: If the release has no asset with that name
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
        ...


@runtime_checkable
class TargetProvider(Protocol):
    """
    Protocol for publishing targets.
    """

    def sub(self, folder: str) -> "TargetProvider":
        """Return a provider scoped to ``folder`` below this one."""
        ...

    async def read(self, path: str) -> bytes:
        """Read the file at ``path``."""
        ...

    async def write(self, path: str, data: bytes) -> None:
        """Create or replace the file at ``path``."""
        ...

    def url(self, path: str) -> str:
        """Return the public locator of ``path``."""
        ...


__all__ = ["SourceProvider", "TargetProvider"]
