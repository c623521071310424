"""FastAPI routes for the Catalogue bounded context.

Commands go through ``current_domain.process``; reads come from the
Sector/Category aggregates, the EntityCard projection, and EntityRequest.
"""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddEntityRequest,
    CategoryIdResponse,
    CategoryResponse,
    CategoryStatsResponse,
    CreateCategoryRequest,
    CreateSectorRequest,
    EntityIdResponse,
    EntityListResponse,
    EntityRequestIdResponse,
    EntityRequestListResponse,
    EntityRequestResponse,
    EntityRequestStatsResponse,
    EntityResponse,
    HierarchyCategory,
    HierarchyResponse,
    HierarchySector,
    ReviewEntityRequestRequest,
    SectorIdResponse,
    SectorResponse,
    StatusResponse,
    SubmitEntityRequestRequest,
    UpdateCategoryRequest,
    UpdateEntityRequest,
)
from catalogue.category.category import Category, Sector
from catalogue.category.management import CreateCategory, CreateSector, DeleteCategory, UpdateCategory
from catalogue.entity.management import AddEntity, RemoveEntity, UpdateEntity
from catalogue.entity_request.entity_request import EntityRequest, EntityRequestStatus
from catalogue.entity_request.requests import (
    ApproveEntityRequest,
    DeleteEntityRequest,
    RejectEntityRequest,
    SubmitEntityRequest,
    load_request,
)
from catalogue.projections.entity_card import EntityCard, search_entities

sector_router = APIRouter(prefix="/sectors", tags=["sectors"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
entity_router = APIRouter(prefix="/entities", tags=["entities"])
entity_request_router = APIRouter(prefix="/entity-requests", tags=["entity-requests"])

_STATUS_PATTERN = "^(pending|approved|rejected)$"


def _sector(sector) -> SectorResponse:
    return SectorResponse(sector_id=str(sector.id), name=sector.name, description=sector.description)


def _category(category) -> CategoryResponse:
    return CategoryResponse(
        category_id=str(category.id),
        name=category.name,
        description=category.description,
        sector_id=str(category.sector_id) if category.sector_id else None,
    )


def _entity(card) -> EntityResponse:
    return EntityResponse(
        entity_id=str(card.entity_id),
        name=card.name,
        description=card.description,
        picture=card.picture,
        category_id=str(card.category_id),
        category_name=card.category_name,
        sector_id=str(card.sector_id) if card.sector_id else None,
        sector_name=card.sector_name,
        created_by=str(card.created_by) if card.created_by else None,
        average_rating=card.average_rating or 0.0,
        review_count=card.review_count or 0,
        created_at=card.created_at,
    )


def _entity_list(cards) -> EntityListResponse:
    return EntityListResponse(entities=[_entity(c) for c in cards], count=len(cards))


def _request(request) -> EntityRequestResponse:
    return EntityRequestResponse(
        request_id=str(request.id),
        user_id=str(request.user_id),
        item_name=request.item_name,
        description=request.description,
        category_id=str(request.category_id) if request.category_id else None,
        picture=request.picture,
        status=request.status,
        requested_at=request.requested_at,
        reviewed_by=str(request.reviewed_by) if request.reviewed_by else None,
        reviewed_at=request.reviewed_at,
        admin_notes=request.admin_notes,
        entity_id=str(request.entity_id) if request.entity_id else None,
    )


def _request_list(requests) -> EntityRequestListResponse:
    return EntityRequestListResponse(requests=[_request(r) for r in requests], count=len(requests))


def _cards_in_category(category_id):
    repo = current_domain.repository_for(EntityCard)
    return repo._dao.query.filter(category_id=category_id).order_by("name").all().items


# ---------------------------------------------------------------------------
# Sectors
# ---------------------------------------------------------------------------
@sector_router.post("", status_code=201, response_model=SectorIdResponse)
async def create_sector(body: CreateSectorRequest) -> SectorIdResponse:
    sector_id = current_domain.process(
        CreateSector(name=body.name, description=body.description),
        asynchronous=False,
    )
    return SectorIdResponse(sector_id=sector_id)


@sector_router.get("", response_model=list[SectorResponse])
async def list_sectors() -> list[SectorResponse]:
    sectors = current_domain.repository_for(Sector)._dao.query.order_by("name").all().items
    return [_sector(s) for s in sectors]


@sector_router.get("/{sector_id}/categories", response_model=list[CategoryResponse])
async def list_sector_categories(sector_id: str) -> list[CategoryResponse]:
    current_domain.repository_for(Sector).get(sector_id)
    categories = (
        current_domain.repository_for(Category)._dao.query.filter(sector_id=sector_id).order_by("name").all().items
    )
    return [_category(c) for c in categories]


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------
@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(name=body.name, description=body.description, sector_id=body.sector_id)
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=category_id)


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category)._dao.query.order_by("name").all().items
    return [_category(c) for c in categories]


@category_router.get("/hierarchy", response_model=HierarchyResponse)
async def get_hierarchy() -> HierarchyResponse:
    """Sector → category tree with entity counts."""
    sectors = current_domain.repository_for(Sector)._dao.query.order_by("name").all().items
    categories = current_domain.repository_for(Category)._dao.query.order_by("name").all().items

    by_sector: dict[str, list[HierarchyCategory]] = {}
    unassigned = []
    for category in categories:
        node = HierarchyCategory(
            category_id=str(category.id),
            name=category.name,
            entity_count=len(_cards_in_category(str(category.id))),
        )
        if category.sector_id:
            by_sector.setdefault(str(category.sector_id), []).append(node)
        else:
            unassigned.append(node)

    return HierarchyResponse(
        sectors=[
            HierarchySector(sector_id=str(s.id), name=s.name, categories=by_sector.get(str(s.id), []))
            for s in sectors
        ],
        unassigned_categories=unassigned,
    )


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    return _category(current_domain.repository_for(Category).get(category_id))


@category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
        sector_id=body.sector_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


@category_router.get("/{category_id}/entities", response_model=EntityListResponse)
async def list_category_entities(category_id: str) -> EntityListResponse:
    current_domain.repository_for(Category).get(category_id)
    return _entity_list(_cards_in_category(category_id))


@category_router.get("/{category_id}/stats", response_model=CategoryStatsResponse)
async def get_category_stats(category_id: str) -> CategoryStatsResponse:
    current_domain.repository_for(Category).get(category_id)
    cards = _cards_in_category(category_id)
    return CategoryStatsResponse(
        category_id=category_id,
        entity_count=len(cards),
        review_count=sum(c.review_count or 0 for c in cards),
    )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@entity_router.post("", status_code=201, response_model=EntityIdResponse)
async def add_entity(body: AddEntityRequest) -> EntityIdResponse:
    command = AddEntity(
        name=body.name,
        category_id=body.category_id,
        description=body.description,
        picture=body.picture,
        created_by=body.created_by,
    )
    entity_id = current_domain.process(command, asynchronous=False)
    return EntityIdResponse(entity_id=entity_id)


@entity_router.get("", response_model=EntityListResponse)
async def list_entities() -> EntityListResponse:
    cards = current_domain.repository_for(EntityCard)._dao.query.order_by("-created_at").all().items
    return _entity_list(cards)


@entity_router.get("/search", response_model=EntityListResponse)
async def search(q: str = Query(min_length=1)) -> EntityListResponse:
    return _entity_list(search_entities(q.strip()))


@entity_router.get("/{entity_id}", response_model=EntityResponse)
async def get_entity(entity_id: str) -> EntityResponse:
    """Entity details with category, sector and rating summary."""
    return _entity(current_domain.repository_for(EntityCard).get(entity_id))


@entity_router.put("/{entity_id}", response_model=StatusResponse)
async def update_entity(entity_id: str, body: UpdateEntityRequest) -> StatusResponse:
    command = UpdateEntity(
        entity_id=entity_id,
        name=body.name,
        description=body.description,
        picture=body.picture,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@entity_router.delete("/{entity_id}", response_model=StatusResponse)
async def remove_entity(entity_id: str) -> StatusResponse:
    current_domain.process(RemoveEntity(entity_id=entity_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Entity requests
# ---------------------------------------------------------------------------
def _live_requests(**filters):
    repo = current_domain.repository_for(EntityRequest)
    return repo._dao.query.filter(is_deleted=False, **filters).order_by("-requested_at").all().items


@entity_request_router.post("", status_code=201, response_model=EntityRequestIdResponse)
async def submit_entity_request(body: SubmitEntityRequestRequest) -> EntityRequestIdResponse:
    command = SubmitEntityRequest(
        user_id=body.user_id,
        item_name=body.item_name,
        description=body.description,
        category_id=body.category_id,
        picture=body.picture,
    )
    request_id = current_domain.process(command, asynchronous=False)
    return EntityRequestIdResponse(request_id=request_id)


@entity_request_router.get("", response_model=EntityRequestListResponse)
async def list_entity_requests(
    status: str | None = Query(default=None, pattern=_STATUS_PATTERN),
) -> EntityRequestListResponse:
    filters = {"status": status} if status else {}
    return _request_list(_live_requests(**filters))


@entity_request_router.get("/stats", response_model=EntityRequestStatsResponse)
async def entity_request_stats() -> EntityRequestStatsResponse:
    requests = _live_requests()
    counts = {s.value: 0 for s in EntityRequestStatus}
    for request in requests:
        counts[request.status] += 1
    return EntityRequestStatsResponse(
        total=len(requests),
        pending=counts[EntityRequestStatus.PENDING.value],
        approved=counts[EntityRequestStatus.APPROVED.value],
        rejected=counts[EntityRequestStatus.REJECTED.value],
    )


@entity_request_router.get("/user/{user_id}", response_model=EntityRequestListResponse)
async def list_user_entity_requests(user_id: str) -> EntityRequestListResponse:
    return _request_list(_live_requests(user_id=user_id))


@entity_request_router.get("/{request_id}", response_model=EntityRequestResponse)
async def get_entity_request(request_id: str) -> EntityRequestResponse:
    return _request(load_request(request_id))


@entity_request_router.put("/{request_id}/approve", response_model=EntityIdResponse)
async def approve_entity_request(request_id: str, body: ReviewEntityRequestRequest) -> EntityIdResponse:
    command = ApproveEntityRequest(
        request_id=request_id,
        admin_id=body.admin_id,
        admin_notes=body.admin_notes,
        category_id=body.category_id,
    )
    entity_id = current_domain.process(command, asynchronous=False)
    return EntityIdResponse(entity_id=entity_id)


@entity_request_router.put("/{request_id}/reject", response_model=StatusResponse)
async def reject_entity_request(request_id: str, body: ReviewEntityRequestRequest) -> StatusResponse:
    command = RejectEntityRequest(
        request_id=request_id,
        admin_id=body.admin_id,
        admin_notes=body.admin_notes,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@entity_request_router.delete("/{request_id}", response_model=StatusResponse)
async def delete_entity_request(request_id: str) -> StatusResponse:
    current_domain.process(DeleteEntityRequest(request_id=request_id), asynchronous=False)
    return StatusResponse()
