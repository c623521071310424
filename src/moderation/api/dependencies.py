"""FastAPI dependencies for admin-only routes."""

from fastapi import Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from moderation.projections.member import Member


def require_admin(x_user_id: str | None = Header(default=None)) -> Member:
    """Resolve the acting user from ``X-User-Id`` and insist on admin rights."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    try:
        member = current_domain.repository_for(Member).get(x_user_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="User not found") from None
    if not member.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return member
