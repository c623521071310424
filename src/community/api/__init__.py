"""Community domain API package."""

from community.api.routes import comment_router, post_router, review_router, vote_router

__all__ = ["review_router", "post_router", "comment_router", "vote_router"]
