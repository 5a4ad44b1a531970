"""Application settings and configuration."""

import os
from pathlib import Path

from servedir.config.models import VALID_LOG_LEVELS, ServerConfig

# Default settings
DEFAULT_HOST = os.getenv("SERVEDIR_HOST", "0.0.0.0")
DEFAULT_PORT = int(os.getenv("SERVEDIR_PORT", "8080"))
DEFAULT_ROOT = Path(os.getenv("SERVEDIR_ROOT", "."))
DEFAULT_LOG_LEVEL = os.getenv("SERVEDIR_LOG_LEVEL", "INFO")
DEFAULT_COMPRESS = os.getenv("SERVEDIR_COMPRESS", "0").lower() in ("1", "true", "yes")
DEFAULT_COMPRESS_MIN_SIZE = int(os.getenv("SERVEDIR_COMPRESS_MIN_SIZE", "500"))


# Server defaults
def get_default_server_config(served_root: Path | None = None) -> ServerConfig:
    """Get default server configuration."""
    return ServerConfig(
        host=DEFAULT_HOST,
        port=DEFAULT_PORT,
        served_root=served_root or DEFAULT_ROOT,
        compress=DEFAULT_COMPRESS,
        compress_min_size=DEFAULT_COMPRESS_MIN_SIZE,
        log_level=DEFAULT_LOG_LEVEL,
    )


# Directory requests are rewritten to this file
INDEX_FILENAME = "index.html"

# Fixed body for 403 responses
FORBIDDEN_BODY = "<h1>Forbidden</h1>\n"

__all__ = [
    "VALID_LOG_LEVELS",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_ROOT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_COMPRESS",
    "DEFAULT_COMPRESS_MIN_SIZE",
    "get_default_server_config",
    "INDEX_FILENAME",
    "FORBIDDEN_BODY",
]
