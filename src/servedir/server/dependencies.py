"""FastAPI dependency providers backed by application state."""

from fastapi import Request

from servedir.config.models import ServedRoot


def get_served_root(request: Request) -> ServedRoot:
    """Return the canonical served root fixed at startup."""
    return request.app.state.served_root
