"""Domain events for the AdminAction aggregate."""

from protean.fields import DateTime, Identifier, String

from moderation.domain import moderation


@moderation.event(part_of="AdminAction")
class AdminActionRecorded:
    """An admin acted on a report."""

    __version__ = 1

    action_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    report_id = Identifier(required=True)
    action_type = String(required=True)
    target_user_id = Identifier()
    recorded_at = DateTime(required=True)
