"""
In-memory store for sensitive configuration values.

The store is populated while loading configuration and read while
assembling the pipe. It is an indirection layer, not a vault: values are
kept in memory as plain bytes and never expire.
"""

import logging
import threading
from typing import Dict, List, Optional


class SecretStore:
    """Thread-safe mapping of secret names to raw bytes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._secrets: Dict[str, bytes] = {}

    def put(self, name: str, value: bytes) -> None:
        """
        Store a secret, replacing any previous value.

        Args:
            name: Secret name (e.g. "rsa_key")
            value: Raw secret bytes
        """
        with self._lock:
            self._secrets[name] = bytes(value)
        logging.debug("Stored secret %s (%d bytes)", name, len(value))

    def get(self, name: str) -> Optional[bytes]:
        """
        Get a secret.

        Args:
            name: Secret name

        Returns:
            The stored bytes, or None if the secret was never set
        """
        with self._lock:
            return self._secrets.get(name)

    def names(self) -> List[str]:
        """Return the names of stored secrets, sorted."""
        with self._lock:
            return sorted(self._secrets)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._secrets

    def __repr__(self) -> str:
        # Never show values
        return f"SecretStore(names={self.names()!r})"


__all__ = ["SecretStore"]
