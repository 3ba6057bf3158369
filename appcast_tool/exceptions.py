"""
Exception types raised by appcast-tool.

Provider-contract errors (release/asset lookups) propagate unchanged to the
caller. Assembly errors abort the whole pipe build.
"""

from typing import Optional


class AppcastError(Exception):
    """Base class for all appcast-tool errors."""


class UnknownProviderKindError(AppcastError):
    """No factory is registered under the requested provider type."""

    def __init__(self, role: str, kind: str) -> None:
        self.role = role
        self.kind = kind
        super().__init__(f"unknown {role} provider type: {kind!r}")


class ProviderConstructionError(AppcastError):
    """A provider factory failed to build its provider."""

    def __init__(self, role: str, kind: str, cause: Exception) -> None:
        self.role = role
        self.kind = kind
        self.cause = cause
        super().__init__(f"failed to create {role} provider {kind!r}: {cause}")


class ReleaseNotFoundError(AppcastError, LookupError):
    """No release with the requested version exists."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"release not found: {version}")


class AssetNotFoundError(AppcastError, LookupError):
    """No asset with the requested name is attached to the release."""

    def __init__(self, version: str, name: str) -> None:
        self.version = version
        self.name = name
        super().__init__(f"asset {name!r} not found in release {version}")


class MissingSecretError(AppcastError):
    """A required secret was never stored."""

    def __init__(self, name: str, integration: Optional[str] = None) -> None:
        self.name = name
        self.integration = integration
        where = f" (required by {integration})" if integration else ""
        super().__init__(f"missing secret {name!r}{where}")


class InvalidKeyError(AppcastError, ValueError):
    """Secret bytes do not parse as the expected key type."""


class MissingRequiredFieldError(AppcastError):
    """A configuration field required by a cross-field rule is unset."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"missing required field: {field_name}")


class InvalidConfigError(AppcastError, ValueError):
    """A configuration block has the wrong shape."""


__all__ = [
    "AppcastError",
    "UnknownProviderKindError",
    "ProviderConstructionError",
    "ReleaseNotFoundError",
    "AssetNotFoundError",
    "MissingSecretError",
    "InvalidKeyError",
    "MissingRequiredFieldError",
    "InvalidConfigError",
]
