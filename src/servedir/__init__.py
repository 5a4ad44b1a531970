"""servedir: single-endpoint static file server."""

__version__ = "0.1.0"
__author__ = "servedir contributors"
__license__ = "MIT"

from servedir.config.models import ServedRoot, ServerConfig

__all__ = [
    "ServedRoot",
    "ServerConfig",
    "__version__",
]
