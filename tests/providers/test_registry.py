"""Tests for provider registries."""

from unittest.mock import Mock

import pytest

from appcast_tool.exceptions import UnknownProviderKindError
from appcast_tool.models import ProviderConfig
from appcast_tool.providers import ProviderRegistry, build_registries


class TestProviderRegistry:
    """Test ProviderRegistry behaviour."""

    def test_new_calls_factory_with_config(self):
        """The factory receives the configuration unchanged."""
        registry = ProviderRegistry("source")
        factory = Mock(return_value="provider")
        registry.register("dummy", factory)
        config = ProviderConfig(type="dummy", repo="group/project", extra_key="value")

        assert registry.new("dummy", config) == "provider"
        factory.assert_called_once_with(config)

    def test_unknown_kind(self):
        """An unregistered type raises without calling any factory."""
        registry = ProviderRegistry("target")
        factory = Mock()
        registry.register("file", factory)

        with pytest.raises(UnknownProviderKindError) as exc_info:
            registry.new("s3", ProviderConfig(type="s3"))

        assert exc_info.value.role == "target"
        assert exc_info.value.kind == "s3"
        factory.assert_not_called()

    def test_last_registration_wins(self, caplog):
        """Registering a name twice replaces the factory and logs a warning."""
        registry = ProviderRegistry("source")
        registry.register("dummy", Mock(return_value="first"))
        registry.register("dummy", Mock(return_value="second"))

        assert registry.new("dummy", ProviderConfig(type="dummy")) == "second"
        assert "Overwriting existing source provider: dummy" in caplog.text

    def test_factory_error_propagates(self):
        """Factory errors are not wrapped by the registry."""
        registry = ProviderRegistry("source")
        registry.register("broken", Mock(side_effect=ValueError("no repo")))

        with pytest.raises(ValueError, match="no repo"):
            registry.new("broken", ProviderConfig(type="broken"))

    def test_kinds_and_contains(self):
        """Registered names are listed sorted."""
        registry = ProviderRegistry("source")
        registry.register("b", Mock())
        registry.register("a", Mock())

        assert registry.kinds() == ["a", "b"]
        assert "a" in registry
        assert "c" not in registry

    def test_registries_are_independent(self):
        """Each registry has its own factories."""
        first = ProviderRegistry("source")
        second = ProviderRegistry("source")
        first.register("dummy", Mock())

        assert "dummy" not in second


class TestBuiltinProviders:
    """Test the bundled backends."""

    def test_build_registries(self):
        """Both registries carry the bundled backends."""
        sources, targets = build_registries()

        assert sources.kinds() == ["file", "github", "gitlab", "local"]
        assert targets.kinds() == ["file"]
        assert sources.role == "source"
        assert targets.role == "target"
