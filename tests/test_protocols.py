"""Tests for provider protocols."""

import inspect

from appcast_tool.protocols import SourceProvider, TargetProvider
from appcast_tool.providers.source import FileSource, GitHubSource, GitLabSource
from appcast_tool.providers.target import FileTarget
from appcast_tool.utils import create_session_with_retry


def test_source_protocol_methods_are_coroutines():
    """Network-bound operations are declared as coroutines."""
    for name in ("list_releases", "get_release", "upload_asset", "download_asset", "aclose"):
        assert inspect.iscoroutinefunction(getattr(SourceProvider, name)), name


def test_file_source_conforms(tmp_path):
    """FileSource satisfies SourceProvider."""
    assert isinstance(FileSource(tmp_path), SourceProvider)


def test_hosted_sources_conform():
    """GitLabSource and GitHubSource satisfy SourceProvider."""
    gitlab = GitLabSource("1234", create_session_with_retry(base_url="https://gitlab.example.com/api/v4"))
    github = GitHubSource("owner/app", create_session_with_retry(base_url="https://api.github.com"))

    assert isinstance(gitlab, SourceProvider)
    assert isinstance(github, SourceProvider)


def test_file_target_conforms(tmp_path):
    """FileTarget satisfies TargetProvider but not SourceProvider."""
    target = FileTarget(tmp_path)

    assert isinstance(target, TargetProvider)
    assert not isinstance(target, SourceProvider)
