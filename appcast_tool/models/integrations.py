"""
Configuration blocks of the integrations, as written in the config file.

These are decoded only after the block's ``disabled`` flag has been checked.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from .base import AppcastBaseModel


class GlobalSettings(AppcastBaseModel):
    """
    Top-level keys used as defaults by every integration.

    Attributes:
        version: Version selector (e.g. "latest")
        prerelease: Whether prereleases are included
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    version: Optional[str] = None
    prerelease: bool = False


class IntegrationBlock(AppcastBaseModel):
    """
    Keys accepted by every integration block.

    Attributes:
        disabled: Skip the integration entirely
        folder: Target subfolder, defaults to the integration name
        version: Overrides the top-level version selector
        prerelease: Overrides the top-level prerelease flag
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    disabled: bool = False
    folder: Optional[str] = None
    version: Optional[str] = None
    prerelease: Optional[bool] = None


class ApkBlock(IntegrationBlock):
    """``[apk]`` block."""

    key_name: Optional[str] = Field(default=None, alias="key-name")


class SparkleBlock(IntegrationBlock):
    """``[sparkle]`` block."""

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None


__all__ = ["GlobalSettings", "IntegrationBlock", "ApkBlock", "SparkleBlock"]
