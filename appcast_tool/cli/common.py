"""
Shared helpers for CLI commands.

This is the composing entry point: registries are populated here, secrets are
loaded into a fresh store, and only then is the pipe assembled.
"""

from typing import Optional

from ..exceptions import MissingRequiredFieldError
from ..models.pipe import Pipe
from ..models.provider import ProviderConfig
from ..pipe import PipeAssembler
from ..protocols import SourceProvider
from ..providers import build_registries
from ..utils.config_manager import ConfigManager
from ..utils.secret_store import SecretStore


def assemble_pipe(config_path: Optional[str]) -> Pipe:
    """
    Load the configuration file and assemble the pipe it describes.

    Args:
        config_path: Path to the config file, appcast.toml if None

    Returns:
        The assembled pipe
    """
    config = ConfigManager(config_path)
    secrets = SecretStore()
    config.load_secrets(secrets)

    sources, targets = build_registries()
    return PipeAssembler(sources, targets, secrets).assemble(config.pipe_tree())


def build_source(config_path: Optional[str]) -> SourceProvider:
    """
    Build only the source provider of the configuration file.

    Asset commands do not need integrations or secrets.

    Raises:
        MissingRequiredFieldError: If the config has no source type
    """
    section = ConfigManager(config_path).get_section("source")
    if not section.get("type"):
        raise MissingRequiredFieldError("source.type")

    sources, _ = build_registries()
    provider_config = ProviderConfig.model_validate(section)
    return sources.new(provider_config.type, provider_config)


__all__ = ["assemble_pipe", "build_source"]
