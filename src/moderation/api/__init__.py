"""Moderation domain API package."""

from moderation.api.routes import admin_router, report_router

__all__ = ["report_router", "admin_router"]
