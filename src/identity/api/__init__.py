"""Identity domain API package."""

from identity.api.routes import user_router

__all__ = ["user_router"]
