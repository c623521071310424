"""RecordPhoto / RemovePhoto: commands and handler.

Files are written by the upload route before RecordPhoto runs. A new
profile photo replaces the user's earlier profile photos, rows and files.
"""

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, Integer, String
from protean.utils.globals import current_domain

from media.domain import media
from media.photo.photo import Photo, PhotoType
from media.photo.storage import delete_file

logger = structlog.get_logger(__name__)


@media.command(part_of="Photo")
class RecordPhoto:
    uploader_id = Identifier(required=True)
    photo_type = String(choices=PhotoType, required=True)
    source_id = Identifier(required=True)
    file_name = String(required=True, max_length=255)
    file_path = String(required=True, max_length=500)
    mime_type = String(required=True, max_length=50)
    file_size = Integer(required=True)
    is_admin_upload = Boolean(default=False)
    replace_existing = Boolean(default=False)


@media.command(part_of="Photo")
class RemovePhoto:
    photo_id = Identifier(required=True)


def photos(**filters):
    repo = current_domain.repository_for(Photo)
    return repo._dao.query.filter(**filters).order_by("-uploaded_at").all().items


def _discard(photo, keep_file=None):
    current_domain.repository_for(Photo)._dao.delete(photo)
    if photo.file_path != keep_file:
        delete_file(photo.file_path)


def discard_photos(photo_type, source_id):
    """Delete every photo, row and file, attached to ``source_id``."""
    attached = photos(photo_type=photo_type, source_id=str(source_id))
    for photo in attached:
        _discard(photo)
    return len(attached)


@media.command_handler(part_of=Photo)
class PhotoRecordingHandler:
    @handle(RecordPhoto)
    def record_photo(self, command):
        if command.replace_existing and command.photo_type == PhotoType.PROFILE.value:
            previous = photos(photo_type=PhotoType.PROFILE.value, source_id=str(command.source_id))
            for photo in previous:
                _discard(photo, keep_file=command.file_path)
            if previous:
                logger.info("Replaced profile photos", source_id=str(command.source_id), count=len(previous))

        photo = Photo.record(
            uploader_id=command.uploader_id,
            photo_type=command.photo_type,
            source_id=command.source_id,
            file_name=command.file_name,
            file_path=command.file_path,
            mime_type=command.mime_type,
            file_size=command.file_size,
            is_admin_upload=command.is_admin_upload,
        )
        current_domain.repository_for(Photo).add(photo)
        return str(photo.id)

    @handle(RemovePhoto)
    def remove_photo(self, command):
        _discard(current_domain.repository_for(Photo).get(command.photo_id))
        logger.info("Photo removed", photo_id=str(command.photo_id))
