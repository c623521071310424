"""FastAPI routes for the Media bounded context.

Uploads are multipart: the route validates and writes the files, then
records one Photo per file through RecordPhoto.
"""

import time

import structlog
from fastapi import APIRouter, File, Form, Query, UploadFile
from fastapi.responses import FileResponse
from protean.utils.globals import current_domain

from media.api.permissions import check_delete_permission, check_upload_permission, load_uploader
from media.api.schemas import PhotoListResponse, PhotoResponse, StatusResponse
from media.photo.photo import Photo, PhotoType, photo_file_name
from media.photo.recording import RecordPhoto, RemovePhoto, photos
from media.photo.storage import delete_file, extension_for, read_upload, resolve_file, save_file, validate_upload

logger = structlog.get_logger(__name__)

photo_router = APIRouter(prefix="/photos", tags=["photos"])

_TYPE_PATTERN = "^(profile|reviews|entities)$"


def _photo(photo) -> PhotoResponse:
    return PhotoResponse(
        photo_id=str(photo.id),
        uploader_id=str(photo.uploader_id),
        photo_type=photo.photo_type,
        source_id=str(photo.source_id),
        file_name=photo.file_name,
        url=f"{photo_router.prefix}/file/{photo.file_name}",
        mime_type=photo.mime_type,
        file_size=photo.file_size,
        is_admin_upload=photo.is_admin_upload,
        uploaded_at=photo.uploaded_at,
    )


def _photos(items) -> PhotoListResponse:
    return PhotoListResponse(photos=[_photo(p) for p in items], count=len(items))


def _undo_upload(written, recorded):
    for photo in recorded:
        current_domain.process(RemovePhoto(photo_id=str(photo.id)), asynchronous=False)
    for file_path in written[len(recorded):]:
        delete_file(file_path)


@photo_router.post("/upload", status_code=201, response_model=PhotoListResponse)
async def upload_photos(
    files: list[UploadFile] = File(...),
    photo_type: str = Form(..., pattern=_TYPE_PATTERN),
    source_id: str = Form(...),
    uploader_id: str = Form(...),
) -> PhotoListResponse:
    """Upload up to five images for a profile, review or entity.

    A failure part way through removes the files and photos already stored
    for the batch.
    """
    uploader = load_uploader(uploader_id)
    check_upload_permission(uploader, photo_type, source_id)

    validate_upload([(f.filename, f.content_type, f.size) for f in files])
    contents = [await read_upload(f) for f in files]

    is_profile = photo_type == PhotoType.PROFILE.value
    timestamp = int(time.time() * 1000) if is_profile else None
    written = []
    recorded = []
    try:
        for index, (upload, content) in enumerate(zip(files, contents, strict=True), start=1):
            file_name = photo_file_name(
                uploader_id=uploader.user_id,
                is_admin=uploader.is_admin,
                photo_type=photo_type,
                source_id=source_id,
                extension=extension_for(upload.filename, upload.content_type),
                index=index if len(files) > 1 else None,
                timestamp=timestamp,
            )
            written.append(await save_file(content, file_name))
            command = RecordPhoto(
                uploader_id=uploader_id,
                photo_type=photo_type,
                source_id=source_id,
                file_name=file_name,
                file_path=written[-1],
                mime_type=upload.content_type,
                file_size=len(content),
                is_admin_upload=uploader.is_admin,
                replace_existing=is_profile and index == 1,
            )
            photo_id = current_domain.process(command, asynchronous=False)
            recorded.append(current_domain.repository_for(Photo).get(photo_id))
    except Exception:
        logger.warning("Upload failed, removing stored files", source_id=source_id, stored=len(written))
        _undo_upload(written, recorded)
        raise

    return _photos(recorded)


@photo_router.get("/user/{user_id}", response_model=PhotoListResponse)
async def list_user_photos(user_id: str) -> PhotoListResponse:
    return _photos(photos(uploader_id=user_id))


@photo_router.get("/file/{file_name}")
async def serve_photo(file_name: str) -> FileResponse:
    path, mime_type = resolve_file(file_name)
    return FileResponse(path, media_type=mime_type)


@photo_router.get("/{photo_type}/{source_id}", response_model=PhotoListResponse)
async def list_source_photos(photo_type: str, source_id: str) -> PhotoListResponse:
    return _photos(photos(photo_type=photo_type, source_id=source_id))


@photo_router.get("/{photo_id}", response_model=PhotoResponse)
async def get_photo(photo_id: str) -> PhotoResponse:
    return _photo(current_domain.repository_for(Photo).get(photo_id))


@photo_router.delete("/{photo_id}", response_model=StatusResponse)
async def delete_photo(photo_id: str, user_id: str = Query()) -> StatusResponse:
    photo = current_domain.repository_for(Photo).get(photo_id)
    check_delete_permission(load_uploader(user_id), photo)

    current_domain.process(RemovePhoto(photo_id=photo_id), asynchronous=False)
    return StatusResponse()
