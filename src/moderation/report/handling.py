"""HandleReportAction: an admin's decision on a report.

Every decision is written to the AdminAction trail and resolves the
report. Depending on the action the reported user is warned or banned, or
the reported content is removed through ReportedContentRemoved.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from moderation.action.admin_action import ActionType, AdminAction
from moderation.domain import moderation
from moderation.report.report import Report, ReportStatus
from moderation.sanction.sanction import UserBan, UserWarning

logger = structlog.get_logger(__name__)


@moderation.command(part_of="Report")
class HandleReportAction:
    report_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    action_type = String(required=True)
    reason = Text()
    ban_type = String()
    expires_at = DateTime()


def _parse_action(action_type):
    try:
        return ActionType(action_type)
    except ValueError:
        raise ValidationError({"action_type": ["Invalid action type"]}) from None


def _target_user(report):
    if not report.reported_user_id:
        raise ValidationError({"report": ["This report does not name a user to act on"]})
    return report.reported_user_id


@moderation.command_handler(part_of=Report)
class ReportActionHandler:
    @handle(HandleReportAction)
    def handle_report_action(self, command):
        action_type = _parse_action(command.action_type)

        report = current_domain.repository_for(Report).get(command.report_id)
        if report.is_closed:
            raise ValidationError({"report": [f"Report is already {report.status}"]})

        details = {}
        if action_type == ActionType.WARNING:
            warning = UserWarning.issue(
                user_id=_target_user(report),
                admin_id=command.admin_id,
                reason=command.reason,
                content_type=report.reported_item_type,
                content_id=report.reported_item_id,
                expires_at=command.expires_at,
            )
            current_domain.repository_for(UserWarning).add(warning)
            details = {"warning_id": str(warning.id), "reason": warning.reason, "expires_at": warning.expires_at}
        elif action_type == ActionType.BAN_USER:
            ban = UserBan.impose(
                user_id=_target_user(report),
                admin_id=command.admin_id,
                ban_type=command.ban_type,
                reason=command.reason,
                expires_at=command.expires_at,
            )
            current_domain.repository_for(UserBan).add(ban)
            details = {"ban_id": str(ban.id), "ban_type": ban.ban_type, "expires_at": ban.expires_at}
        elif action_type == ActionType.DELETE_CONTENT:
            report.remove_content(command.admin_id)
            details = {"content_type": report.reported_item_type, "content_id": str(report.reported_item_id)}

        action = AdminAction.record(command.admin_id, report, action_type.value, details)
        current_domain.repository_for(AdminAction).add(action)

        report.change_status(ReportStatus.RESOLVED.value)
        current_domain.repository_for(Report).add(report)

        logger.info(
            "Report handled",
            report_id=str(report.id),
            action_type=action_type.value,
            admin_id=str(command.admin_id),
        )
        return str(action.id)
