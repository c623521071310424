"""Application tests for the entity request workflow."""

import pytest
from catalogue.category.management import CreateCategory
from catalogue.entity.entity import Entity
from catalogue.entity_request.entity_request import EntityRequest, EntityRequestStatus
from catalogue.entity_request.requests import (
    ApproveEntityRequest,
    DeleteEntityRequest,
    RejectEntityRequest,
    SubmitEntityRequest,
    load_request,
)
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


@pytest.fixture()
def category_id():
    return current_domain.process(CreateCategory(name="Bakeries"), asynchronous=False)


def _submit(category_id=None):
    return current_domain.process(
        SubmitEntityRequest(user_id="user-1", item_name="Corner Bakery", category_id=category_id),
        asynchronous=False,
    )


class TestApprove:
    def test_approval_creates_entity(self, category_id):
        request_id = _submit(category_id)

        entity_id = current_domain.process(
            ApproveEntityRequest(request_id=request_id, admin_id="admin-1"),
            asynchronous=False,
        )

        entity = current_domain.repository_for(Entity).get(entity_id)
        assert entity.name == "Corner Bakery"
        assert entity.created_by == "user-1"

        request = current_domain.repository_for(EntityRequest).get(request_id)
        assert request.status == EntityRequestStatus.APPROVED.value
        assert request.entity_id == entity_id

    def test_approval_is_idempotent(self, category_id):
        request_id = _submit(category_id)
        first = current_domain.process(ApproveEntityRequest(request_id=request_id, admin_id="admin-1"), asynchronous=False)
        second = current_domain.process(ApproveEntityRequest(request_id=request_id, admin_id="admin-1"), asynchronous=False)

        assert first == second
        assert len(current_domain.repository_for(Entity)._dao.query.all().items) == 1

    def test_category_override(self, category_id):
        request_id = _submit()
        entity_id = current_domain.process(
            ApproveEntityRequest(request_id=request_id, admin_id="admin-1", category_id=category_id),
            asynchronous=False,
        )
        assert current_domain.repository_for(Entity).get(entity_id).category_id == category_id

    def test_approval_needs_a_category(self):
        request_id = _submit()
        with pytest.raises(ValidationError):
            current_domain.process(ApproveEntityRequest(request_id=request_id, admin_id="admin-1"), asynchronous=False)

    def test_rejected_request_cannot_be_approved(self, category_id):
        request_id = _submit(category_id)
        current_domain.process(RejectEntityRequest(request_id=request_id, admin_id="admin-1"), asynchronous=False)

        with pytest.raises(ValidationError):
            current_domain.process(ApproveEntityRequest(request_id=request_id, admin_id="admin-1"), asynchronous=False)
        assert current_domain.repository_for(Entity)._dao.query.all().items == []


class TestDelete:
    def test_deleted_request_is_hidden(self, category_id):
        request_id = _submit(category_id)
        current_domain.process(DeleteEntityRequest(request_id=request_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            load_request(request_id)
