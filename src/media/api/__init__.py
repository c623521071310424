"""Media domain API package."""

from media.api.routes import photo_router

__all__ = ["photo_router"]
