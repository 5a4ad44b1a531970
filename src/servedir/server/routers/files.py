"""Catch-all file router.

Every GET request is mapped onto a file below the served root.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from servedir.config.models import ServedRoot
from servedir.server.dependencies import get_served_root
from servedir.server.responder import serve_request, to_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


@router.get("/{file_path:path}", response_class=Response)
async def serve_path(
    file_path: str,
    served_root: ServedRoot = Depends(get_served_root),
) -> Response:
    """Serve a file from the served root.

    Args:
        file_path: Path captured after the leading "/"
        served_root: Canonical served root (injected)

    Returns:
        File contents, or an empty 404/500 or a fixed 403 page
    """
    request_path = f"/{file_path}"
    logger.debug(f"Handling request for {request_path!r}")
    outcome = await serve_request(request_path, served_root)
    return to_response(outcome)
