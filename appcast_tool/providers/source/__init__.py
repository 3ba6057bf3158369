"""Source provider backends."""

from .file import FileSource, new_file_source
from .github import GitHubSource, new_github_source
from .gitlab import GitLabSource, new_gitlab_source
from .local import LocalSource, new_local_source

__all__ = [
    "FileSource",
    "new_file_source",
    "GitHubSource",
    "new_github_source",
    "GitLabSource",
    "new_gitlab_source",
    "LocalSource",
    "new_local_source",
]
