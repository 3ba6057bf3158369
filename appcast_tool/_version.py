"""Version information for appcast-tool."""

__version__ = "1.0.0"
