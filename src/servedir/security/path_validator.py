"""Request path resolution against the served root.

Turns an untrusted request path into a canonical file path that is
guaranteed to lie inside the served root, or into a typed rejection.
Canonicalization follows symlinks on the real filesystem, so a link inside
the root that points outside of it is rejected by the containment check
rather than silently served.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from servedir.config.models import ServedRoot
from servedir.config.settings import INDEX_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    """A canonical file path inside the served root."""

    path: Path


@dataclass(frozen=True)
class Forbidden:
    """The request resolved outside the served root."""

    request_path: str


@dataclass(frozen=True)
class NotFound:
    """The target does not exist, is a directory, or became unreadable."""

    request_path: str


@dataclass(frozen=True)
class InternalError:
    """Canonicalization failed for a reason other than absence."""

    request_path: str
    reason: str  # Exception class name, never shown to clients


Resolution = Resolved | Forbidden | NotFound | InternalError


def _join(request_path: str, root: ServedRoot) -> Path:
    """Strip one leading separator and join onto the root without touching disk."""
    relative = request_path[1:] if request_path.startswith("/") else request_path
    # A remaining leading "/" makes the join absolute; containment catches it.
    return root.path / relative


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except (OSError, ValueError):
        return False


def resolve_request_path(request_path: str, root: ServedRoot) -> Resolution:
    """
    Resolve a request path to a file inside the served root.

    Args:
        request_path: Raw URL path, normally starting with "/"
        root: Canonical served root

    Returns:
        Resolved with the canonical path, or Forbidden, NotFound or
        InternalError describing why the request cannot be served
    """
    candidate = _join(request_path, root)
    if _is_dir(candidate):
        candidate = candidate / INDEX_FILENAME

    try:
        canonical = candidate.resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError):
        logger.warning(f"Requested path not found: {request_path!r}")
        return NotFound(request_path)
    except ValueError:
        # Embedded NUL and similar: no such file can exist
        logger.warning(f"Requested path is not representable: {request_path!r}")
        return NotFound(request_path)
    except (OSError, RuntimeError) as e:
        logger.warning(f"Unable to canonicalize path {request_path!r}: {type(e).__name__}")
        return InternalError(request_path, type(e).__name__)

    if not canonical.is_relative_to(root.path):
        logger.warning(f"Client requested forbidden path: {request_path!r}")
        return Forbidden(request_path)

    if _is_dir(canonical):
        logger.warning(f"Requested path is a directory without index: {request_path!r}")
        return NotFound(request_path)

    logger.debug(f"Resolved {request_path!r} to {canonical}")
    return Resolved(canonical)

