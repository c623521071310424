"""Pydantic response schemas for the Media API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str = "ok"


class PhotoResponse(BaseModel):
    photo_id: str
    uploader_id: str
    photo_type: str
    source_id: str
    file_name: str
    url: str
    mime_type: str
    file_size: int
    is_admin_upload: bool
    uploaded_at: datetime | None = None


class PhotoListResponse(BaseModel):
    photos: list[PhotoResponse]
    count: int
