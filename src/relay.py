"""In-process delivery of cross-domain events.

Under the default ``sync`` config each bounded context keeps its own memory
event store and inline broker, so an event raised in one context never
reaches the handlers another context subscribed with ``stream_category``.
In production the Engine (``server.py``) carries those events over Redis
Streams. For a single-process app running the ``sync`` config, the app
pumps this relay after every write request instead.

The relay reads each source category from the producing domain's event
store, rebuilds the consumer's registered copy of the event and calls the
consumer's handler inside the consumer's domain context.
"""

from dataclasses import dataclass

from catalogue.entity.review_events import CommunityReviewEventHandler
from community.moderation_events import ModerationEventsHandler
from community.review.catalogue_events import CatalogueEventsHandler
from media.content_events import CatalogueEntityEventsHandler as MediaEntityEventsHandler
from media.content_events import CommunityReviewEventsHandler as MediaReviewEventsHandler
from media.identity_events import IdentityEventsHandler as MediaIdentityEventsHandler
from moderation.catalogue_events import CatalogueEntityEventsHandler, CatalogueEntityRequestEventsHandler
from moderation.community_events import CommunityCommentEventsHandler as ModerationCommentEventsHandler
from moderation.community_events import CommunityPostEventsHandler as ModerationPostEventsHandler
from moderation.community_events import CommunityReviewEventsHandler
from moderation.identity_events import IdentityEventsHandler as ModerationIdentityEventsHandler
from notifications.notification.community_events import (
    CommunityCommentEventsHandler,
    CommunityPostEventsHandler,
    CommunityVoteEventsHandler,
)
from notifications.notification.identity_events import IdentityFollowEventsHandler, IdentityUserEventsHandler
from protean.utils.globals import current_domain
from protean.utils.reflection import declared_fields
from shared.events.catalogue import (
    EntityAdded,
    EntityRemoved,
    EntityRequestApproved,
    EntityRequestDeleted,
    EntityRequestRejected,
    EntityRequestSubmitted,
)
from shared.events.community import (
    CommentAdded,
    CommentDeleted,
    CommentEdited,
    PostCreated,
    PostDeleted,
    PostEdited,
    PostRated,
    ReviewDeleted,
    ReviewEdited,
    ReviewSubmitted,
    VoteCast,
)
from shared.events.identity import UserFollowed, UserRegistered
from shared.events.moderation import ReportedContentRemoved
from shared.logging import get_logger

logger = get_logger(__name__)

# Upper bound on messages read from one category per pass
_READ_LIMIT = 1_000_000


@dataclass(frozen=True)
class Route:
    """One consumer handler subscribed to one event type of a source category."""

    source: str
    category: str
    event_type: str
    event_cls: type
    consumer: str
    handler_cls: type
    method: str


# (source domain, source category, event contract, consumer domain, handler class, method)
_SUBSCRIPTIONS = [
    ("identity", "identity::user", UserRegistered, "moderation", ModerationIdentityEventsHandler, "on_user_registered"),
    ("identity", "identity::user", UserRegistered, "notifications", IdentityUserEventsHandler, "on_user_registered"),
    ("identity", "identity::user", UserRegistered, "media", MediaIdentityEventsHandler, "on_user_registered"),
    ("identity", "identity::follow", UserFollowed, "notifications", IdentityFollowEventsHandler, "on_user_followed"),
    ("catalogue", "catalogue::entity", EntityAdded, "community", CatalogueEventsHandler, "on_entity_added"),
    ("catalogue", "catalogue::entity", EntityRemoved, "community", CatalogueEventsHandler, "on_entity_removed"),
    ("catalogue", "catalogue::entity", EntityAdded, "moderation", CatalogueEntityEventsHandler, "on_entity_added"),
    ("catalogue", "catalogue::entity", EntityRemoved, "moderation", CatalogueEntityEventsHandler, "on_entity_removed"),
    ("catalogue", "catalogue::entity", EntityRemoved, "media", MediaEntityEventsHandler, "on_entity_removed"),
    (
        "catalogue",
        "catalogue::entity_request",
        EntityRequestSubmitted,
        "moderation",
        CatalogueEntityRequestEventsHandler,
        "on_request_submitted",
    ),
    (
        "catalogue",
        "catalogue::entity_request",
        EntityRequestApproved,
        "moderation",
        CatalogueEntityRequestEventsHandler,
        "on_request_approved",
    ),
    (
        "catalogue",
        "catalogue::entity_request",
        EntityRequestRejected,
        "moderation",
        CatalogueEntityRequestEventsHandler,
        "on_request_rejected",
    ),
    (
        "catalogue",
        "catalogue::entity_request",
        EntityRequestDeleted,
        "moderation",
        CatalogueEntityRequestEventsHandler,
        "on_request_deleted",
    ),
    (
        "community",
        "community::review",
        ReviewSubmitted,
        "catalogue",
        CommunityReviewEventHandler,
        "on_review_submitted",
    ),
    ("community", "community::review", ReviewEdited, "catalogue", CommunityReviewEventHandler, "on_review_edited"),
    ("community", "community::review", ReviewDeleted, "catalogue", CommunityReviewEventHandler, "on_review_deleted"),
    (
        "community",
        "community::review",
        ReviewSubmitted,
        "moderation",
        CommunityReviewEventsHandler,
        "on_review_submitted",
    ),
    ("community", "community::review", ReviewEdited, "moderation", CommunityReviewEventsHandler, "on_review_edited"),
    ("community", "community::review", ReviewDeleted, "moderation", CommunityReviewEventsHandler, "on_review_deleted"),
    ("community", "community::review", ReviewDeleted, "media", MediaReviewEventsHandler, "on_review_deleted"),
    ("community", "community::post", PostCreated, "moderation", ModerationPostEventsHandler, "on_post_created"),
    ("community", "community::post", PostEdited, "moderation", ModerationPostEventsHandler, "on_post_edited"),
    ("community", "community::post", PostDeleted, "moderation", ModerationPostEventsHandler, "on_post_deleted"),
    ("community", "community::comment", CommentAdded, "moderation", ModerationCommentEventsHandler, "on_comment_added"),
    (
        "community",
        "community::comment",
        CommentEdited,
        "moderation",
        ModerationCommentEventsHandler,
        "on_comment_edited",
    ),
    (
        "community",
        "community::comment",
        CommentDeleted,
        "moderation",
        ModerationCommentEventsHandler,
        "on_comment_deleted",
    ),
    (
        "community",
        "community::comment",
        CommentAdded,
        "notifications",
        CommunityCommentEventsHandler,
        "on_comment_added",
    ),
    ("community", "community::vote", VoteCast, "notifications", CommunityVoteEventsHandler, "on_vote_cast"),
    ("community", "community::post", PostRated, "notifications", CommunityPostEventsHandler, "on_post_rated"),
    (
        "moderation",
        "moderation::report",
        ReportedContentRemoved,
        "community",
        ModerationEventsHandler,
        "on_reported_content_removed",
    ),
]


def _event_type(event_cls):
    """``Identity.UserRegistered.v1`` style type string for a shared event contract."""
    context = event_cls.__module__.rsplit(".", 1)[-1].capitalize()
    return f"{context}.{event_cls.__name__}.v{event_cls.__version__}"


class EventRelay:
    """Forwards events between domains that share a process but no broker."""

    def __init__(self, domains):
        self.domains = {domain.name: domain for domain in domains}
        self.routes = {}
        self._delivered = set()

        for source, category, event_cls, consumer, handler_cls, method in _SUBSCRIPTIONS:
            if source not in self.domains or consumer not in self.domains:
                continue
            route = Route(source, category, _event_type(event_cls), event_cls, consumer, handler_cls, method)
            self.routes.setdefault((source, category), []).append(route)

    @property
    def enabled(self) -> bool:
        return all(domain.config.get("event_processing") == "sync" for domain in self.domains.values())

    def _pending(self):
        """Undelivered (route, message) pairs across every source category."""
        pending = []
        for (source, category), routes in self.routes.items():
            with self.domains[source].domain_context():
                messages = current_domain.event_store.store.read(category, no_of_messages=_READ_LIMIT)

            for message in messages:
                headers = message.metadata.headers
                for route in routes:
                    key = (headers.id, route.consumer, route.handler_cls.__name__, route.method)
                    if route.event_type == headers.type and key not in self._delivered:
                        self._delivered.add(key)
                        pending.append((route, message))
        return pending

    def _deliver(self, route, message):
        fields = declared_fields(route.event_cls)
        event = route.event_cls(**{name: value for name, value in message.data.items() if name in fields})

        with self.domains[route.consumer].domain_context():
            getattr(route.handler_cls(), route.method)(event)

    def pump(self) -> int:
        """Deliver every outstanding event, including those raised by the handlers it runs."""
        delivered = 0
        while True:
            pending = self._pending()
            if not pending:
                return delivered
            for route, message in pending:
                try:
                    self._deliver(route, message)
                except Exception:
                    # Logged and skipped, as the Engine does
                    logger.exception(
                        "Relayed event handler failed",
                        event_type=route.event_type,
                        consumer=route.consumer,
                        handler=route.handler_cls.__name__,
                    )
                delivered += 1
