"""Provider configuration model."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """
    Configuration block for a source or target provider.

    Only ``type`` is interpreted by the registry. Everything else is handed
    opaquely to the matching factory, including backend-specific keys that are
    not declared here.

    Attributes:
        type: Registry key of the provider (e.g. "gitlab", "file")
        token: API token for hosted backends
        repo: Repository identifier ("group/project", "owner/name")
        path: Filesystem path for local backends
        base_url: API root override for self-hosted instances
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    type: str = Field(min_length=1)
    token: Optional[str] = None
    repo: Optional[str] = None
    path: Optional[str] = None
    base_url: Optional[str] = Field(default=None, alias="base-url")

    def get_option(self, key: str, default: Any = None) -> Any:
        """Return a backend-specific key that is not a declared field."""
        return (self.model_extra or {}).get(key, default)


__all__ = ["ProviderConfig"]
