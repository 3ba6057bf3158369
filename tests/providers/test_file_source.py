"""Tests for the local filesystem source."""

import asyncio

import pytest

from appcast_tool.exceptions import AssetNotFoundError, ReleaseNotFoundError
from appcast_tool.models import ProviderConfig
from appcast_tool.protocols import SourceProvider
from appcast_tool.providers.source import FileSource, new_file_source

RELEASE_FILES = ["test.dmg", "test_32-bit.msi", "test_64-bit.msi"]


class TestFileSource:
    """Test FileSource operations."""

    def test_satisfies_protocol(self, release_root):
        """FileSource is a SourceProvider."""
        assert isinstance(FileSource(release_root), SourceProvider)

    def test_list_releases(self, release_root):
        """Each subdirectory is one release; files are its assets."""
        listing = asyncio.run(FileSource(release_root).list_releases())

        assert listing.warnings == []
        assert len(listing.releases) == 1
        release = listing.releases[0]
        assert release.name == "v0.0.0"
        assert release.version == "v0.0.0"
        assert release.description == ""
        assert [a.name for a in release.assets] == RELEASE_FILES
        assert all(a.size == 5 for a in release.assets)
        assert release.assets[0].url == (release_root / "v0.0.0" / "test.dmg").resolve().as_uri()

    def test_list_skips_hidden_and_files(self, release_root):
        """Hidden entries and top-level files are not releases."""
        (release_root / ".cache").mkdir()
        (release_root / "README").write_text("not a release")
        (release_root / "v0.0.0" / ".DS_Store").write_bytes(b"")

        listing = asyncio.run(FileSource(release_root).list_releases())

        assert [r.version for r in listing.releases] == ["v0.0.0"]
        assert [a.name for a in listing.releases[0].assets] == RELEASE_FILES

    def test_get_release_matches_listing(self, release_root):
        """get_release returns the same release list_releases reports."""
        source = FileSource(release_root)

        listing = asyncio.run(source.list_releases())
        release = asyncio.run(source.get_release("v0.0.0"))

        assert release.model_dump(exclude={"date"}) == listing.releases[0].model_dump(exclude={"date"})

    def test_get_release_not_found(self, release_root):
        """Unknown versions raise ReleaseNotFoundError."""
        with pytest.raises(ReleaseNotFoundError) as exc_info:
            asyncio.run(FileSource(release_root).get_release("v9.9.9"))

        assert exc_info.value.version == "v9.9.9"

    @pytest.mark.parametrize("version", ["v0.0.0/sub", "..", ".", "", "v0.0.0\\sub"])
    def test_get_release_unusable_version(self, release_root, version):
        """Versions that cannot name a release directory are not found."""
        (release_root / "v0.0.0" / "sub").mkdir()

        with pytest.raises(ReleaseNotFoundError) as exc_info:
            asyncio.run(FileSource(release_root).get_release(version))

        assert exc_info.value.version == version

    @pytest.mark.parametrize("name", ["..", ".", "", "sub/test.dmg", "../v0.0.0/test.dmg"])
    def test_download_unusable_name(self, release_root, name):
        """Asset names that leave the release directory are not found."""
        (release_root / "v0.0.0" / "sub").mkdir()
        (release_root / "v0.0.0" / "sub" / "test.dmg").write_bytes(b"nested\n")

        with pytest.raises(AssetNotFoundError) as exc_info:
            asyncio.run(FileSource(release_root).download_asset("v0.0.0", name))

        assert exc_info.value.name == name

    def test_upload_download_roundtrip(self, release_root):
        """Uploaded bytes come back unchanged and show up in the release."""
        source = FileSource(release_root)
        asyncio.run(source.upload_asset("v0.0.0", "test.txt", b"test-upload\n"))

        assert asyncio.run(source.download_asset("v0.0.0", "test.txt")) == b"test-upload\n"
        release = asyncio.run(source.get_release("v0.0.0"))
        assert release.find_asset("test.txt").size == len(b"test-upload\n")

    def test_download_existing_asset(self, release_root):
        """Assets created on disk can be downloaded."""
        data = asyncio.run(FileSource(release_root).download_asset("v0.0.0", "test.dmg"))

        assert data == b"test\n"

    def test_download_asset_not_found(self, release_root):
        """Unknown asset names raise AssetNotFoundError."""
        with pytest.raises(AssetNotFoundError) as exc_info:
            asyncio.run(FileSource(release_root).download_asset("v0.0.0", "missing.zip"))

        assert exc_info.value.name == "missing.zip"
        assert exc_info.value.version == "v0.0.0"

    def test_upload_to_missing_release(self, release_root):
        """Uploading to an unknown release raises ReleaseNotFoundError."""
        with pytest.raises(ReleaseNotFoundError):
            asyncio.run(FileSource(release_root).upload_asset("v9.9.9", "a.txt", b"x"))

    @pytest.mark.parametrize("name", ["../escape.txt", "sub/file.txt", "", ".."])
    def test_rejects_path_names(self, release_root, name):
        """Names must not leave the release directory."""
        with pytest.raises(ValueError):
            asyncio.run(FileSource(release_root).upload_asset("v0.0.0", name, b"x"))

    def test_equality(self, release_root):
        """Sources over the same root compare equal."""
        assert FileSource(release_root) == FileSource(release_root)
        assert FileSource(release_root) != FileSource(release_root / "v0.0.0")


class TestNewFileSource:
    """Test the file source factory."""

    def test_from_path(self, release_root):
        """The path key names the root."""
        source = new_file_source(ProviderConfig(type="file", path=str(release_root)))

        assert source == FileSource(release_root.resolve())

    def test_from_repo(self, release_root):
        """repo is accepted as the root when path is unset."""
        source = new_file_source(ProviderConfig(type="file", repo=str(release_root)))

        assert source.root == release_root.resolve()

    def test_missing_path(self):
        """A path is required."""
        with pytest.raises(ValueError, match="requires a path"):
            new_file_source(ProviderConfig(type="file"))

    def test_not_a_directory(self, tmp_path):
        """The root must be an existing directory."""
        with pytest.raises(ValueError, match="not a directory"):
            new_file_source(ProviderConfig(type="file", path=str(tmp_path / "missing")))
