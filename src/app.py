"""Critique FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (projectors fire in UoW)
#   - "production" → event_processing = "async" (projectors fire via Engine)
from catalogue.domain import catalogue  # noqa: E402
from community.domain import community  # noqa: E402
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.domain import identity  # noqa: E402
from media.domain import media  # noqa: E402
from messaging.domain import messaging  # noqa: E402
from moderation.domain import moderation  # noqa: E402
from notifications.domain import notifications  # noqa: E402
from protean.integrations.fastapi import register_exception_handlers
from shared.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

DOMAINS = (identity, catalogue, community, moderation, notifications, media, messaging)

for _domain in DOMAINS:
    _domain.init()

# Cross-domain delivery for the single-process sync config
from relay import EventRelay  # noqa: E402

relay = EventRelay(DOMAINS)

_READ_METHODS = {"GET", "HEAD", "OPTIONS"}

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/users": identity,
    "/sectors": catalogue,
    "/categories": catalogue,
    "/entities": catalogue,
    "/entity-requests": catalogue,
    "/reviews": community,
    "/posts": community,
    "/comments": community,
    "/votes": community,
    "/reports": moderation,
    "/admin": moderation,
    "/notifications": notifications,
    "/photos": media,
    "/messenger": messaging,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path == prefix or path.startswith(prefix + "/"):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Critique API",
    description="Social review platform: reviews, posts, moderation and an anonymous messenger",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    clear_context()
    add_context(request_path=request.url.path, domain=domain.name if domain else None)
    try:
        if domain is not None:
            with domain.domain_context():
                response = await call_next(request)
        else:
            # No domain match: health check, search and docs pass through
            response = await call_next(request)

        if request.method not in _READ_METHODS and relay.enabled:
            delivered = relay.pump()
            if delivered:
                logger.debug("Relayed cross-domain events", count=delivered)
        return response
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import category_router, entity_request_router, entity_router, sector_router  # noqa: E402
from catalogue.projections.entity_card import search_entities  # noqa: E402
from community.api import comment_router, post_router, review_router, vote_router  # noqa: E402
from identity.api import user_router  # noqa: E402
from identity.projections.user_card import search_users  # noqa: E402
from media.api import photo_router  # noqa: E402
from messaging.api import messenger_router  # noqa: E402
from moderation.api import admin_router, report_router  # noqa: E402
from notifications.api import router as notification_router  # noqa: E402

for _router in (
    user_router,
    sector_router,
    category_router,
    entity_router,
    entity_request_router,
    review_router,
    post_router,
    comment_router,
    vote_router,
    report_router,
    admin_router,
    notification_router,
    photo_router,
    messenger_router,
):
    app.include_router(_router)


# ---------------------------------------------------------------------------
# Health / search
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {domain.name: {"name": domain.name} for domain in DOMAINS},
        }
    )


@app.get("/search")
async def search(q: str = Query(default="")):
    """Search entities and users by case-insensitive name substring."""
    term = q.strip()
    if not term:
        raise HTTPException(status_code=400, detail="Search query is required")

    with catalogue.domain_context():
        entities = [
            {
                "entity_id": str(card.entity_id),
                "name": card.name,
                "category_name": card.category_name,
                "picture": card.picture,
                "average_rating": card.average_rating or 0.0,
                "review_count": card.review_count or 0,
            }
            for card in search_entities(term)
        ]

    with identity.domain_context():
        users = [
            {
                "user_id": str(card.user_id),
                "username": card.username,
                "profile_picture": card.profile_picture,
            }
            for card in search_users(term)
        ]

    logger.debug("Search served", term=term, entities=len(entities), users=len(users))
    return JSONResponse(content={"entities": entities, "users": users, "total": len(entities) + len(users)})
