"""Domain events for the Photo aggregate."""

from protean.fields import DateTime, Identifier, String

from media.domain import media


@media.event(part_of="Photo")
class PhotoUploaded:
    __version__ = 1

    photo_id = Identifier(required=True)
    uploader_id = Identifier(required=True)
    photo_type = String(required=True)
    source_id = Identifier(required=True)
    file_name = String(required=True)
    uploaded_at = DateTime(required=True)
