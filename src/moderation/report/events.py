"""Domain events for the Report aggregate."""

from protean.fields import DateTime, Identifier, String

from moderation.domain import moderation


@moderation.event(part_of="Report")
class ReportFiled:
    """A user flagged a post, comment or review."""

    __version__ = 1

    report_id = Identifier(required=True)
    reporter_user_id = Identifier(required=True)
    reported_item_type = String(required=True)
    reported_item_id = Identifier(required=True)
    reported_user_id = Identifier()
    reason = String(required=True)
    filed_at = DateTime(required=True)


@moderation.event(part_of="Report")
class ReportStatusChanged:
    __version__ = 1

    report_id = Identifier(required=True)
    previous_status = String(required=True)
    status = String(required=True)
    changed_at = DateTime(required=True)


@moderation.event(part_of="Report")
class ReportedContentRemoved:
    """An admin ordered the removal of reported content."""

    __version__ = 1

    report_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    content_type = String(required=True)
    content_id = Identifier(required=True)
    removed_at = DateTime(required=True)
