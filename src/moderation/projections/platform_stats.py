"""PlatformStats: running totals for the admin dashboard.

A single row keyed ``"platform"``, moved by the inbound identity, catalogue
and community handlers. Report counts are not kept here; the dashboard
counts Report rows directly.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Integer, String
from protean.utils.globals import current_domain

from moderation.domain import moderation

STATS_KEY = "platform"


@moderation.projection
class PlatformStats:
    stats_key: String(identifier=True, required=True)
    total_users: Integer(default=0)
    total_entities: Integer(default=0)
    total_reviews: Integer(default=0)
    pending_entity_requests: Integer(default=0)
    updated_at: DateTime()


def load_stats():
    try:
        return current_domain.repository_for(PlatformStats).get(STATS_KEY)
    except ObjectNotFoundError:
        return PlatformStats(
            stats_key=STATS_KEY,
            total_users=0,
            total_entities=0,
            total_reviews=0,
            pending_entity_requests=0,
        )


def bump(counter, delta=1):
    """Shift one counter by ``delta``, never below zero."""
    stats = load_stats()
    setattr(stats, counter, max(0, (getattr(stats, counter) or 0) + delta))
    stats.updated_at = datetime.now(UTC)
    current_domain.repository_for(PlatformStats).add(stats)
