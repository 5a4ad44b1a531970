"""Content responder: read resolved files and map outcomes to HTTP."""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, Response

from servedir.config.models import ServedRoot
from servedir.config.settings import FORBIDDEN_BODY
from servedir.security.path_validator import (
    Forbidden,
    InternalError,
    NotFound,
    Resolved,
    resolve_request_path,
)

logger = logging.getLogger(__name__)

# Types for files whose extension mimetypes reports as an encoding
ENCODING_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "br": "application/x-brotli",
    "compress": "application/x-compress",
}


@dataclass(frozen=True)
class Served:
    """A file read in full, ready to be sent."""

    path: Path
    body: bytes
    content_type: str | None  # None lets the client sniff


Outcome = Served | Forbidden | NotFound | InternalError


def guess_content_type(path: Path) -> str | None:
    """
    Infer a MIME type from the file extension.

    Args:
        path: File path, only its name is inspected

    Returns:
        MIME type, or None when the extension is unknown or missing
    """
    content_type, encoding = mimetypes.guess_type(path.name)
    if encoding is not None:
        # The body is sent as stored, so describe the archive itself
        return ENCODING_TYPES.get(encoding)
    return content_type


def _read(resolved: Resolved, request_path: str) -> Served | NotFound:
    try:
        body = resolved.path.read_bytes()
    except OSError as e:
        logger.warning(f"Unable to read resolved file {resolved.path.name!r}: {type(e).__name__}")
        return NotFound(request_path)
    return Served(
        path=resolved.path,
        body=body,
        content_type=guess_content_type(resolved.path),
    )


async def load_file(resolved: Resolved, request_path: str) -> Served | NotFound:
    """Read a resolved file in full without blocking the event loop."""
    return await run_in_threadpool(_read, resolved, request_path)


async def serve_request(request_path: str, root: ServedRoot) -> Outcome:
    """
    Run the full pipeline for one request.

    Resolution and the file read both run in the thread pool. Any
    rejection from resolution short-circuits before the read.

    Args:
        request_path: Raw URL path starting with "/"
        root: Canonical served root

    Returns:
        Served on success, otherwise the rejection outcome
    """
    resolution = await run_in_threadpool(resolve_request_path, request_path, root)
    if not isinstance(resolution, Resolved):
        return resolution
    return await load_file(resolution, request_path)


def to_response(outcome: Outcome) -> Response:
    """Translate a pipeline outcome into an HTTP response."""
    match outcome:
        case Served(body=body, content_type=content_type):
            # Bare inferred type; the file encoding is unknown, so no charset
            headers = {"Content-Type": content_type} if content_type else None
            return Response(content=body, status_code=200, headers=headers)
        case Forbidden():
            return HTMLResponse(content=FORBIDDEN_BODY, status_code=403)
        case NotFound():
            return Response(status_code=404)
        case InternalError():
            return Response(status_code=500)
    raise TypeError(f"Unexpected outcome: {outcome!r}")
