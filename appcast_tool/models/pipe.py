"""
Assembled pipe models.

A ``Pipe`` carries one optional config per integration. A field is None
exactly when the integration block is absent or disabled.
"""

from typing import List, Optional

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from pydantic import BaseModel, ConfigDict

from ..protocols import SourceProvider, TargetProvider


class IntegrationConfig(BaseModel):
    """
    Settings shared by every integration.

    Attributes:
        source: Resolved source provider
        target: Target provider scoped to the integration's folder
        version: Version selector (e.g. "latest"), None for all versions
        prerelease: Whether prereleases are included
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: SourceProvider
    target: TargetProvider
    version: Optional[str] = None
    prerelease: bool = False


class ApkConfig(IntegrationConfig):
    """
    Alpine package repository integration.

    Attributes:
        rsa_key: Private key used to sign the APKINDEX
        key_name: Public key filename installed on clients (e.g. "me@example.com.rsa.pub")
    """

    rsa_key: RSAPrivateKey
    key_name: str


class SparkleConfig(IntegrationConfig):
    """
    Sparkle appcast feed integration.

    Attributes:
        title: Feed title
        description: Feed description
        link: Product homepage
        ed25519_key: Optional EdDSA key used to sign enclosures
    """

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    ed25519_key: Optional[Ed25519PrivateKey] = None


class Pipe(BaseModel):
    """
    The assembled, ready-to-run pipeline.

    Attributes:
        apk: Alpine integration, None when absent or disabled
        sparkle: Sparkle integration, None when absent or disabled

    Integrations share the source they were assembled with; ``aclose``
    releases it once the pipe is no longer needed.
    """

    model_config = ConfigDict(frozen=True)

    apk: Optional[ApkConfig] = None
    sparkle: Optional[SparkleConfig] = None

    @property
    def enabled(self) -> List[str]:
        """Names of the enabled integrations."""
        return [name for name in type(self).model_fields if getattr(self, name) is not None]

    async def aclose(self) -> None:
        """Close the sources of the enabled integrations, each one once."""
        closed: List[SourceProvider] = []
        for name in self.enabled:
            source = getattr(self, name).source
            if any(source is seen for seen in closed):
                continue
            closed.append(source)
            await source.aclose()


__all__ = ["IntegrationConfig", "ApkConfig", "SparkleConfig", "Pipe"]
