"""
Utility modules for appcast-tool.
"""

from .logger import setup_logging, WrappingFormatter, get_logger
from .secret_store import SecretStore
from .session import create_session_with_retry
from .retry import RetryTransport
from .size_probe import probe_size, probe_sizes
from .crypto import load_private_key, parse_rsa_private_key, parse_ed25519_private_key, public_key_pem
from .config_manager import ConfigManager

from . import constants
from . import error_handling
from . import logging_utils

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "SecretStore",
    "create_session_with_retry",
    "RetryTransport",
    "probe_size",
    "probe_sizes",
    "load_private_key",
    "parse_rsa_private_key",
    "parse_ed25519_private_key",
    "public_key_pem",
    "ConfigManager",
    "constants",
    "error_handling",
    "logging_utils",
]
