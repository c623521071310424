"""Cross-domain event contracts for Moderation domain events.

Consumed by the Community domain, which owns the reported content and
deletes it when an admin resolves a report with ``delete_content``.

The source-of-truth events are in src/moderation/report/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String


class ReportedContentRemoved(BaseEvent):
    """An admin ordered the removal of reported content."""

    __version__ = 1

    report_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    content_type = String(required=True)
    content_id = Identifier(required=True)
    removed_at = DateTime(required=True)
