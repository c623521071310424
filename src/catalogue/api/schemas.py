"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateSectorRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None


class CreateCategoryRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    sector_id: str | None = None


class UpdateCategoryRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    sector_id: str | None = None


class AddEntityRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category_id: str
    description: str | None = None
    picture: str | None = Field(default=None, max_length=500)
    created_by: str | None = None


class UpdateEntityRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    picture: str | None = Field(default=None, max_length=500)


class SubmitEntityRequestRequest(BaseModel):
    user_id: str
    item_name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    category_id: str | None = None
    picture: str | None = Field(default=None, max_length=500)


class ReviewEntityRequestRequest(BaseModel):
    admin_id: str
    admin_notes: str | None = None
    category_id: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class SectorIdResponse(BaseModel):
    sector_id: str


class CategoryIdResponse(BaseModel):
    category_id: str


class EntityIdResponse(BaseModel):
    entity_id: str


class EntityRequestIdResponse(BaseModel):
    request_id: str


class SectorResponse(BaseModel):
    sector_id: str
    name: str
    description: str | None = None


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None
    sector_id: str | None = None


class CategoryStatsResponse(BaseModel):
    category_id: str
    entity_count: int
    review_count: int


class HierarchyCategory(BaseModel):
    category_id: str
    name: str
    entity_count: int


class HierarchySector(BaseModel):
    sector_id: str
    name: str
    categories: list[HierarchyCategory]


class HierarchyResponse(BaseModel):
    sectors: list[HierarchySector]
    unassigned_categories: list[HierarchyCategory]


class EntityResponse(BaseModel):
    entity_id: str
    name: str
    description: str | None = None
    picture: str | None = None
    category_id: str
    category_name: str | None = None
    sector_id: str | None = None
    sector_name: str | None = None
    created_by: str | None = None
    average_rating: float = 0.0
    review_count: int = 0
    created_at: datetime | None = None


class EntityListResponse(BaseModel):
    entities: list[EntityResponse]
    count: int


class EntityRequestResponse(BaseModel):
    request_id: str
    user_id: str
    item_name: str
    description: str | None = None
    category_id: str | None = None
    picture: str | None = None
    status: str
    requested_at: datetime | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    admin_notes: str | None = None
    entity_id: str | None = None


class EntityRequestListResponse(BaseModel):
    requests: list[EntityRequestResponse]
    count: int


class EntityRequestStatsResponse(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int
