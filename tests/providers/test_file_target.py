"""Tests for the local filesystem target."""

import asyncio

import pytest

from appcast_tool.models import ProviderConfig
from appcast_tool.protocols import TargetProvider
from appcast_tool.providers.target import FileTarget, new_file_target


class TestFileTarget:
    """Test FileTarget operations."""

    def test_satisfies_protocol(self, publish_root):
        """FileTarget is a TargetProvider."""
        assert isinstance(FileTarget(publish_root), TargetProvider)

    def test_write_read(self, publish_root):
        """Written files can be read back; parents are created."""
        target = FileTarget(publish_root)

        asyncio.run(target.write("x86_64/APKINDEX.tar.gz", b"index"))

        assert (publish_root / "x86_64" / "APKINDEX.tar.gz").read_bytes() == b"index"
        assert asyncio.run(target.read("x86_64/APKINDEX.tar.gz")) == b"index"

    def test_read_missing(self, publish_root):
        """Reading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            asyncio.run(FileTarget(publish_root).read("missing.xml"))

    def test_sub(self, publish_root):
        """sub scopes the target to a subfolder."""
        target = FileTarget(publish_root).sub("sparkle")

        asyncio.run(target.write("appcast.xml", b"<rss/>"))

        assert target == FileTarget(publish_root / "sparkle")
        assert (publish_root / "sparkle" / "appcast.xml").read_bytes() == b"<rss/>"

    def test_sub_nested(self, publish_root):
        """Nested folders and leading slashes stay below the root."""
        assert FileTarget(publish_root).sub("/a/b") == FileTarget(publish_root / "a" / "b")

    @pytest.mark.parametrize("path", ["", "/", "../outside", "a/../../b"])
    def test_rejects_escaping_paths(self, publish_root, path):
        """Paths that are empty or leave the root are rejected."""
        with pytest.raises(ValueError, match="invalid target path"):
            FileTarget(publish_root).sub(path)

    def test_url(self, publish_root):
        """URLs are file URIs."""
        url = FileTarget(publish_root).url("apk/APKINDEX.tar.gz")

        assert url == (publish_root / "apk" / "APKINDEX.tar.gz").as_uri()


class TestNewFileTarget:
    """Test the file target factory."""

    def test_from_path(self, publish_root):
        """The path key names the root."""
        target = new_file_target(ProviderConfig(type="file", path=str(publish_root)))

        assert target == FileTarget(publish_root.resolve())

    def test_missing_path(self):
        """A path is required."""
        with pytest.raises(ValueError, match="requires a path"):
            new_file_target(ProviderConfig(type="file"))
