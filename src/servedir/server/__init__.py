"""FastAPI server components for servedir."""

from .app import create_app
from .responder import Served, serve_request, to_response

__all__ = ["create_app", "Served", "serve_request", "to_response"]
