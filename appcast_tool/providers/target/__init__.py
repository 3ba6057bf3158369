"""Target provider backends."""

from .file import FileTarget, new_file_target

__all__ = ["FileTarget", "new_file_target"]
