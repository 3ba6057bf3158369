"""Registry for provider factories.

Maps a provider type name (the ``type`` key of a source or target block)
to the factory that builds it. One registry exists per provider role.
"""

import logging
from typing import Callable, Dict, Generic, List, TypeVar

from ..exceptions import UnknownProviderKindError
from ..models.provider import ProviderConfig

P = TypeVar("P")

# A factory builds a provider from its configuration block
Factory = Callable[[ProviderConfig], P]


class ProviderRegistry(Generic[P]):
    """Registry of provider factories for one role ("source" or "target")."""

    def __init__(self, role: str) -> None:
        """
        Initialize an empty registry.

        Args:
            role: Provider role, used in log and error messages
        """
        self.role = role
        self._factories: Dict[str, Factory[P]] = {}

    def register(self, kind: str, factory: Factory[P]) -> None:
        """Register a factory.

        Registering a name twice replaces the earlier factory.

        Args:
            kind: Provider type name
            factory: Callable building the provider from its config
        """
        if kind in self._factories:
            logging.warning("Overwriting existing %s provider: %s", self.role, kind)
        self._factories[kind] = factory
        logging.debug("Registered %s provider: %s", self.role, kind)

    def new(self, kind: str, config: ProviderConfig) -> P:
        """Build a provider with the factory registered under ``kind``.

        Args:
            kind: Provider type name
            config: Configuration handed to the factory unchanged

        Returns:
            Whatever the factory returns

        Raises:
            UnknownProviderKindError: If no factory is registered under ``kind``
        """
        try:
            factory = self._factories[kind]
        except KeyError:
            raise UnknownProviderKindError(self.role, kind) from None
        return factory(config)

    def kinds(self) -> List[str]:
        """List registered provider type names, sorted."""
        return sorted(self._factories)

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories


__all__ = ["ProviderRegistry", "Factory"]
