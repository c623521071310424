"""Photo permission checks, answered with 403."""

from fastapi import HTTPException
from protean.utils.globals import current_domain

from media.photo.photo import PhotoType
from media.projections.uploader import Uploader


def load_uploader(user_id) -> Uploader:
    return current_domain.repository_for(Uploader).get(str(user_id))


def check_upload_permission(uploader: Uploader, photo_type: str, source_id: str) -> None:
    if photo_type == PhotoType.ENTITIES.value and not uploader.is_admin:
        raise HTTPException(status_code=403, detail="Only admin users can upload entity photos")
    if (
        photo_type == PhotoType.PROFILE.value
        and str(source_id) != str(uploader.user_id)
        and not uploader.is_admin
    ):
        raise HTTPException(status_code=403, detail="You can only upload your own profile photo")


def check_delete_permission(uploader: Uploader, photo) -> None:
    if str(photo.uploader_id) != str(uploader.user_id) and not uploader.is_admin:
        raise HTTPException(status_code=403, detail="You can only delete your own photos")
