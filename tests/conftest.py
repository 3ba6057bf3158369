"""
Test fixtures for appcast-tool tests.

This module provides common fixtures for HTTP mocking, key material,
release directories and configuration trees.
"""

from pathlib import Path
from typing import Any, Dict

import pytest
import respx
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa

from appcast_tool.providers import build_registries
from appcast_tool.utils import SecretStore

# Files created in every release of the release_root fixture
RELEASE_FILES = ["test.dmg", "test_32-bit.msi", "test_64-bit.msi"]


def _private_pem(key: Any) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(autouse=True)
def clean_secret_env(monkeypatch):
    """Keep secrets from the developer's environment out of the tests."""
    monkeypatch.delenv("APPCAST_RSA_KEY", raising=False)
    monkeypatch.delenv("APPCAST_ED25519_KEY", raising=False)


@pytest.fixture
def httpx_mock():
    """Provide a respx router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture(scope="session")
def rsa_key():
    """RSA private key (generated once per session, generation is slow)."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_key_bytes(rsa_key) -> bytes:
    """PEM encoding of rsa_key."""
    return _private_pem(rsa_key)


@pytest.fixture(scope="session")
def ed25519_key():
    """Ed25519 private key."""
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture(scope="session")
def ed25519_key_bytes(ed25519_key) -> bytes:
    """PEM encoding of ed25519_key."""
    return _private_pem(ed25519_key)


@pytest.fixture
def secrets() -> SecretStore:
    """Empty secret store."""
    return SecretStore()


@pytest.fixture
def registries():
    """Source and target registries with the bundled backends."""
    return build_registries()


@pytest.fixture
def release_root(tmp_path) -> Path:
    """Directory holding one release (v0.0.0) with three 5-byte assets."""
    root = tmp_path / "releases"
    release = root / "v0.0.0"
    release.mkdir(parents=True)
    for name in RELEASE_FILES:
        (release / name).write_bytes(b"test\n")
    return root


@pytest.fixture
def publish_root(tmp_path) -> Path:
    """Directory used as the file target."""
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def base_tree(release_root, publish_root) -> Dict[str, Any]:
    """Configuration tree with a file source and a file target, no integrations."""
    return {
        "source": {"type": "file", "path": str(release_root)},
        "target": {"type": "file", "path": str(publish_root)},
    }
