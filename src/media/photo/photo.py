"""Photo aggregate: an uploaded image attached to a profile, review or entity.

``photo_type`` plus ``source_id`` name what the photo belongs to: a user id
for profile photos, a review id or an entity id otherwise.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from media.domain import media
from media.photo.events import PhotoUploaded


class PhotoType(Enum):
    PROFILE = "profile"
    REVIEWS = "reviews"
    ENTITIES = "entities"


ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


def photo_file_name(uploader_id, is_admin, photo_type, source_id, extension, index=None, timestamp=None):
    """Build ``{admin|user}{uploaderId}{type}{sourceId}[_index][_timestamp].{ext}``."""
    name = f"{'admin' if is_admin else 'user'}{uploader_id}{photo_type}{source_id}"
    if index is not None:
        name += f"_{index}"
    if timestamp is not None:
        name += f"_{timestamp}"
    return f"{name}.{extension.lstrip('.').lower()}"


@media.aggregate
class Photo:
    uploader_id = Identifier(required=True)
    photo_type = String(choices=PhotoType, required=True)
    source_id = Identifier(required=True)
    file_name = String(required=True, max_length=255)
    file_path = String(required=True, max_length=500)
    mime_type = String(required=True, max_length=50)
    file_size = Integer(required=True, min_value=0)
    is_admin_upload = Boolean(default=False)
    uploaded_at = DateTime()

    @classmethod
    def record(cls, uploader_id, photo_type, source_id, file_name, file_path, mime_type, file_size, is_admin_upload):
        now = datetime.now(UTC)
        photo = cls(
            uploader_id=uploader_id,
            photo_type=photo_type,
            source_id=source_id,
            file_name=file_name,
            file_path=file_path,
            mime_type=mime_type,
            file_size=file_size,
            is_admin_upload=is_admin_upload,
            uploaded_at=now,
        )
        photo.raise_(
            PhotoUploaded(
                photo_id=str(photo.id),
                uploader_id=str(uploader_id),
                photo_type=photo_type,
                source_id=str(source_id),
                file_name=file_name,
                uploaded_at=now,
            )
        )
        return photo
