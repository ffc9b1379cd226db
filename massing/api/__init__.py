"""REST API for the browser studio."""

from .main import app

__all__ = ["app"]
