"""
Pipe assembly.

Turns a parsed configuration tree into a fully wired ``Pipe``:

1. read the top-level ``version`` and ``prerelease`` defaults
2. build the source and target providers through their registries
3. decode every enabled integration block in a fixed order, resolving
   defaults, secrets and cross-field requirements
4. return the ``Pipe``

Any error aborts the whole assembly; a partially wired pipe is never
returned. The first error in processing order is the one raised, and a
source built before it is closed again.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Mapping, Set, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..exceptions import (
    InvalidConfigError,
    MissingRequiredFieldError,
    MissingSecretError,
    ProviderConstructionError,
    UnknownProviderKindError,
)
from ..models.integrations import ApkBlock, GlobalSettings, IntegrationBlock, SparkleBlock
from ..models.pipe import ApkConfig, IntegrationConfig, Pipe, SparkleConfig
from ..models.provider import ProviderConfig
from ..protocols import SourceProvider, TargetProvider
from ..providers.registry import ProviderRegistry
from ..utils.constants import ED25519_KEY_SECRET, INTEGRATION_ORDER, RSA_KEY_SECRET
from ..utils.crypto import parse_ed25519_private_key, parse_rsa_private_key
from ..utils.secret_store import SecretStore

B = TypeVar("B", bound=BaseModel)

_BOOL = TypeAdapter(bool)

# Close tasks scheduled on a running loop, referenced until they finish
_pending_closes: Set["asyncio.Task[None]"] = set()


def _validate(model: Type[B], where: str, data: Any) -> B:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigError(f"invalid {where} configuration: {e}") from e


def _discard(source: SourceProvider) -> None:
    """Close a source that will not end up in a pipe."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(source.aclose())
        return
    task = loop.create_task(source.aclose())
    _pending_closes.add(task)
    task.add_done_callback(_pending_closes.discard)


class PipeAssembler:
    """
    Builds a ``Pipe`` from a configuration tree.

    The registries and the secret store are injected; the assembler holds no
    other state and can assemble any number of trees.
    """

    def __init__(
        self,
        sources: ProviderRegistry[SourceProvider],
        targets: ProviderRegistry[TargetProvider],
        secrets: SecretStore,
    ) -> None:
        """
        Initialize the assembler.

        Args:
            sources: Registry used to build the source provider
            targets: Registry used to build the target provider
            secrets: Store holding key material referenced by integrations
        """
        self.sources = sources
        self.targets = targets
        self.secrets = secrets
        self._decoders: Dict[str, Callable[[Mapping[str, Any], Dict[str, Any]], IntegrationConfig]] = {
            "apk": self._decode_apk,
            "sparkle": self._decode_sparkle,
        }

    def assemble(self, tree: Mapping[str, Any]) -> Pipe:
        """
        Assemble a pipe.

        Args:
            tree: Parsed configuration document

        Returns:
            The fully populated pipe

        Raises:
            InvalidConfigError: If a block has the wrong shape
            MissingRequiredFieldError: If a required field is unset
            UnknownProviderKindError: If a provider type is not registered
            ProviderConstructionError: If a provider factory fails
            MissingSecretError: If a required secret was never stored
            InvalidKeyError: If a secret does not parse as the expected key
        """
        settings = _validate(GlobalSettings, "top-level", tree)

        source = self._build_provider(self.sources, tree, "source")
        try:
            pipe = self._assemble_with(source, settings, tree)
        except Exception:
            _discard(source)
            raise

        if not pipe.enabled:
            # Nothing references the source once the pipe is returned
            _discard(source)
        logging.info("Assembled pipe with integrations: %s", ", ".join(pipe.enabled) or "none")
        return pipe

    def _assemble_with(self, source: SourceProvider, settings: GlobalSettings, tree: Mapping[str, Any]) -> Pipe:
        target = self._build_provider(self.targets, tree, "target")

        common = {
            "source": source,
            "target": target,
            "version": settings.version,
            "prerelease": settings.prerelease,
        }

        integrations: Dict[str, IntegrationConfig] = {}
        for name in INTEGRATION_ORDER:
            block = tree.get(name)
            if block is None:
                continue
            if not isinstance(block, Mapping):
                raise InvalidConfigError(f"invalid {name} configuration: expected a table")
            if self._is_disabled(name, block):
                logging.info("Integration %s is disabled", name)
                continue

            integrations[name] = self._decoders[name](block, common)
            logging.debug("Assembled integration %s", name)

        return Pipe(**integrations)

    def _build_provider(self, registry: ProviderRegistry, tree: Mapping[str, Any], role: str) -> Any:
        block = tree.get(role)
        if not isinstance(block, Mapping) or not block.get("type"):
            raise MissingRequiredFieldError(f"{role}.type")

        config = _validate(ProviderConfig, role, block)
        try:
            provider = registry.new(config.type, config)
        except UnknownProviderKindError:
            raise
        except Exception as e:
            raise ProviderConstructionError(role, config.type, e) from e

        logging.debug("Created %s provider %r", role, provider)
        return provider

    @staticmethod
    def _is_disabled(name: str, block: Mapping[str, Any]) -> bool:
        # Only the flag is read; the rest of a disabled block is never inspected
        try:
            return _BOOL.validate_python(block.get("disabled", False))
        except ValidationError as e:
            raise InvalidConfigError(f"invalid {name} configuration: disabled must be a boolean") from e

    @staticmethod
    def _apply_defaults(name: str, block: IntegrationBlock, common: Dict[str, Any]) -> Dict[str, Any]:
        """Resolve the settings every integration shares, falling back to top-level values."""
        try:
            target = common["target"].sub(block.folder or name)
        except ValueError as e:
            raise InvalidConfigError(f"invalid {name} configuration: {e}") from e

        return {
            "source": common["source"],
            "target": target,
            "version": block.version if block.version is not None else common["version"],
            "prerelease": block.prerelease if block.prerelease is not None else common["prerelease"],
        }

    def _decode_apk(self, block: Mapping[str, Any], common: Dict[str, Any]) -> ApkConfig:
        settings = _validate(ApkBlock, "apk", block)
        resolved = self._apply_defaults("apk", settings, common)

        data = self.secrets.get(RSA_KEY_SECRET)
        if data is None:
            raise MissingSecretError(RSA_KEY_SECRET, "apk")
        rsa_key = parse_rsa_private_key(data)

        if not settings.key_name:
            raise MissingRequiredFieldError("apk.key-name")

        return ApkConfig(**resolved, rsa_key=rsa_key, key_name=settings.key_name)

    def _decode_sparkle(self, block: Mapping[str, Any], common: Dict[str, Any]) -> SparkleConfig:
        settings = _validate(SparkleBlock, "sparkle", block)
        resolved = self._apply_defaults("sparkle", settings, common)

        # Signing is optional for sparkle feeds
        data = self.secrets.get(ED25519_KEY_SECRET)
        ed25519_key = parse_ed25519_private_key(data) if data is not None else None

        return SparkleConfig(
            **resolved,
            title=settings.title,
            description=settings.description,
            link=settings.link,
            ed25519_key=ed25519_key,
        )


__all__ = ["PipeAssembler"]
