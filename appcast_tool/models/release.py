"""Release and asset models shared by every source provider."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import AppcastBaseModel


class Asset(AppcastBaseModel):
    """
    One downloadable artifact attached to a release.

    Attributes:
        name: Filename, unique within a release
        url: Absolute locator (``file://`` for local backends)
        size: Byte length, 0 when the backend could not determine it
    """

    name: str
    url: str
    size: int = Field(default=0, ge=0)


class Release(AppcastBaseModel):
    """
    One published version of a product.

    Attributes:
        name: Display label
        description: Free text, may be empty
        version: Canonical identifier, used to re-fetch the release
        date: Publish timestamp
        assets: Assets in the order returned by the backend
    """

    name: str
    description: str = ""
    version: str = Field(min_length=1)
    date: datetime
    assets: List[Asset] = Field(default_factory=list)

    def find_asset(self, name: str) -> Optional[Asset]:
        """Return the asset called ``name`` or None."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


class AssetWarning(AppcastBaseModel):
    """
    A non-fatal problem with one asset found while listing releases.

    Attributes:
        version: Version of the release owning the asset
        asset: Asset name
        message: Human-readable reason (e.g. why the size is unknown)
    """

    version: str
    asset: str
    message: str


class ReleaseListing(AppcastBaseModel):
    """
    Result of listing releases: the releases plus per-asset degradations.

    Attributes:
        releases: Releases known to the backend
        warnings: Assets whose fields were degraded (e.g. size fell back to 0)
    """

    releases: List[Release] = Field(default_factory=list)
    warnings: List[AssetWarning] = Field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check if any asset was degraded."""
        return len(self.warnings) > 0


__all__ = ["Asset", "Release", "AssetWarning", "ReleaseListing"]
