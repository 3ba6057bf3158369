"""
Provider registries and bundled backends.

Backends are not registered on import. The entry point calls
``register_builtin_providers`` (or ``build_registries``) before assembling
a pipe, so the available backends are explicit.
"""

from typing import Tuple

from ..protocols import SourceProvider, TargetProvider
from .registry import Factory, ProviderRegistry
from .source import new_file_source, new_github_source, new_gitlab_source, new_local_source
from .target import new_file_target


def register_builtin_providers(
    sources: ProviderRegistry[SourceProvider], targets: ProviderRegistry[TargetProvider]
) -> None:
    """
    Register the backends shipped with appcast-tool.

    Args:
        sources: Registry receiving the source backends
        targets: Registry receiving the target backends
    """
    sources.register("file", new_file_source)
    sources.register("gitlab", new_gitlab_source)
    sources.register("github", new_github_source)
    sources.register("local", new_local_source)

    targets.register("file", new_file_target)


def build_registries() -> Tuple[ProviderRegistry[SourceProvider], ProviderRegistry[TargetProvider]]:
    """
    Create a source and a target registry populated with the bundled backends.

    Returns:
        Tuple of (sources, targets)
    """
    sources: ProviderRegistry[SourceProvider] = ProviderRegistry("source")
    targets: ProviderRegistry[TargetProvider] = ProviderRegistry("target")
    register_builtin_providers(sources, targets)
    return sources, targets


__all__ = [
    "Factory",
    "ProviderRegistry",
    "register_builtin_providers",
    "build_registries",
]
