"""
Central constants for appcast-tool.

This module consolidates the constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Configuration Constants
# ============================================================================

# Default configuration file, resolved relative to the working directory
DEFAULT_CONFIG_PATH = "appcast.toml"

# Environment variable prefix for secrets (APPCAST_RSA_KEY, ...)
SECRET_ENV_PREFIX = "APPCAST_"

# Name of the config table mapping secret names to key files
SECRETS_SECTION = "secrets"

# ============================================================================
# Secret Names
# ============================================================================

RSA_KEY_SECRET = "rsa_key"
ED25519_KEY_SECRET = "ed25519_key"

# Every secret the configuration loader knows how to populate
KNOWN_SECRETS = [RSA_KEY_SECRET, ED25519_KEY_SECRET]

# ============================================================================
# Integrations
# ============================================================================

# Integrations are decoded in this order so validation errors are reproducible
INTEGRATION_ORDER = ["apk", "sparkle"]

# ============================================================================
# HTTP Configuration Constants
# ============================================================================

# HTTP status codes that should trigger automatic retries
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]

# Retry configuration
MAX_RETRIES = 3
RETRY_BACKOFF_FACTOR = 0.5  # 0.5s, 1s, 2s delays

# Upper bound for a single backoff wait, including Retry-After hints (seconds)
MAX_BACKOFF = 30.0

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 120.0

# Connect timeout (seconds)
CONNECT_TIMEOUT = 10.0

# Maximum number of concurrent HEAD requests when probing asset sizes
SIZE_PROBE_CONCURRENCY = 8

# Page size for paginated hosting APIs
PAGE_SIZE = 100

# ============================================================================
# Hosting API Defaults
# ============================================================================

GITLAB_API_URL = "https://gitlab.com/api/v4"
GITHUB_API_URL = "https://api.github.com"

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SECRET_ENV_PREFIX",
    "SECRETS_SECTION",
    "RSA_KEY_SECRET",
    "ED25519_KEY_SECRET",
    "KNOWN_SECRETS",
    "INTEGRATION_ORDER",
    "RETRY_STATUS_CODES",
    "MAX_RETRIES",
    "RETRY_BACKOFF_FACTOR",
    "MAX_BACKOFF",
    "DEFAULT_TIMEOUT",
    "CONNECT_TIMEOUT",
    "SIZE_PROBE_CONCURRENCY",
    "PAGE_SIZE",
    "GITLAB_API_URL",
    "GITHUB_API_URL",
]
