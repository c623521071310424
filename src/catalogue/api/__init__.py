"""Catalogue domain API package."""

from catalogue.api.routes import category_router, entity_request_router, entity_router, sector_router

__all__ = ["sector_router", "category_router", "entity_router", "entity_request_router"]
