"""Entity request workflow: submit, approve, reject and delete.

Approval creates the entity in the same unit of work as the decision, so a
request is never approved without its entity.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.entity.management import add_entity
from catalogue.entity_request.entity_request import EntityRequest, EntityRequestStatus

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="EntityRequest")
class SubmitEntityRequest:
    user_id: Identifier(required=True)
    item_name: String(required=True, max_length=200)
    description: Text()
    category_id: Identifier()
    picture: String(max_length=500)


@catalogue.command(part_of="EntityRequest")
class ApproveEntityRequest:
    request_id: Identifier(required=True)
    admin_id: Identifier(required=True)
    admin_notes: Text()
    category_id: Identifier()  # Overrides the requested category


@catalogue.command(part_of="EntityRequest")
class RejectEntityRequest:
    request_id: Identifier(required=True)
    admin_id: Identifier(required=True)
    admin_notes: Text()


@catalogue.command(part_of="EntityRequest")
class DeleteEntityRequest:
    request_id: Identifier(required=True)


def load_request(request_id):
    """Fetch a request that has not been deleted."""
    request = current_domain.repository_for(EntityRequest).get(request_id)
    if request.is_deleted:
        raise ObjectNotFoundError(f"Entity request {request_id} does not exist")
    return request


@catalogue.command_handler(part_of=EntityRequest)
class EntityRequestHandler:
    @handle(SubmitEntityRequest)
    def submit_request(self, command):
        request = EntityRequest.submit(
            user_id=command.user_id,
            item_name=command.item_name,
            description=command.description,
            category_id=command.category_id,
            picture=command.picture,
        )
        current_domain.repository_for(EntityRequest).add(request)
        return str(request.id)

    @handle(ApproveEntityRequest)
    def approve_request(self, command):
        request = load_request(command.request_id)
        if request.status == EntityRequestStatus.APPROVED.value:
            return str(request.entity_id)
        request.assert_can_transition(EntityRequestStatus.APPROVED)

        category_id = command.category_id or request.category_id
        if not category_id:
            raise ValidationError({"category_id": ["A category is required to approve this request"]})

        entity = add_entity(
            name=request.item_name,
            category_id=category_id,
            description=request.description,
            picture=request.picture,
            created_by=request.user_id,
        )
        request.approve(
            admin_id=command.admin_id,
            entity_id=str(entity.id),
            admin_notes=command.admin_notes,
        )
        current_domain.repository_for(EntityRequest).add(request)

        logger.info("Entity request approved", request_id=str(request.id), entity_id=str(entity.id))
        return str(entity.id)

    @handle(RejectEntityRequest)
    def reject_request(self, command):
        request = load_request(command.request_id)
        request.reject(admin_id=command.admin_id, admin_notes=command.admin_notes)
        current_domain.repository_for(EntityRequest).add(request)

    @handle(DeleteEntityRequest)
    def delete_request(self, command):
        request = load_request(command.request_id)
        request.delete()
        current_domain.repository_for(EntityRequest).add(request)
