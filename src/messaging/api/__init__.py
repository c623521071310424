"""Messaging domain API package."""

from messaging.api.routes import messenger_router

__all__ = ["messenger_router"]
