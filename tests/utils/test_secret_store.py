"""Tests for SecretStore."""

from concurrent.futures import ThreadPoolExecutor

from appcast_tool.utils import SecretStore


class TestSecretStore:
    """Test SecretStore behaviour."""

    def test_get_unset_returns_none(self):
        """A name that was never set is reported as absent."""
        store = SecretStore()

        assert store.get("rsa_key") is None
        assert "rsa_key" not in store

    def test_put_then_get(self):
        """Stored bytes are returned unchanged."""
        store = SecretStore()
        store.put("rsa_key", b"key material")

        assert store.get("rsa_key") == b"key material"
        assert "rsa_key" in store

    def test_put_overwrites(self):
        """A second put replaces the value."""
        store = SecretStore()
        store.put("rsa_key", b"old")
        store.put("rsa_key", b"new")

        assert store.get("rsa_key") == b"new"

    def test_empty_value_is_present(self):
        """Empty bytes still count as set."""
        store = SecretStore()
        store.put("rsa_key", b"")

        assert store.get("rsa_key") == b""
        assert "rsa_key" in store

    def test_names_and_repr_hide_values(self):
        """Diagnostics list names only."""
        store = SecretStore()
        store.put("rsa_key", b"super secret")
        store.put("ed25519_key", b"also secret")

        assert store.names() == ["ed25519_key", "rsa_key"]
        assert "secret" not in repr(store).replace("SecretStore", "")

    def test_concurrent_access(self):
        """Concurrent writers and readers need no external locking."""
        store = SecretStore()

        def work(i: int) -> None:
            name = f"secret-{i % 10}"
            store.put(name, str(i).encode())
            assert store.get(name) is not None

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(work, range(500)))

        assert len(store.names()) == 10
