"""AdminAction aggregate: the audit trail of admin decisions on reports."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, String, Text

from moderation.action.events import AdminActionRecorded
from moderation.domain import moderation


class ActionType(Enum):
    WARNING = "warning"
    DELETE_CONTENT = "delete_content"
    BAN_USER = "ban_user"
    NO_ACTION = "no_action"


@moderation.aggregate
class AdminAction:
    admin_id = Identifier(required=True)
    report_id = Identifier(required=True)
    action_type = String(choices=ActionType, required=True)
    content_type = String(max_length=20)
    content_id = Identifier()
    target_user_id = Identifier()
    details = Text()  # JSON object
    created_at = DateTime()

    @classmethod
    def record(cls, admin_id, report, action_type, details=None):
        now = datetime.now(UTC)
        action = cls(
            admin_id=admin_id,
            report_id=str(report.id),
            action_type=action_type,
            content_type=report.reported_item_type,
            content_id=str(report.reported_item_id),
            target_user_id=str(report.reported_user_id) if report.reported_user_id else None,
            details=json.dumps(details or {}, default=str),
            created_at=now,
        )
        action.raise_(
            AdminActionRecorded(
                action_id=str(action.id),
                admin_id=str(admin_id),
                report_id=str(report.id),
                action_type=action_type,
                target_user_id=action.target_user_id,
                recorded_at=now,
            )
        )
        return action

    @property
    def details_dict(self):
        return json.loads(self.details) if self.details else {}
