"""Domain tests for the Photo aggregate and file naming."""

import pytest
from media.photo.events import PhotoUploaded
from media.photo.photo import Photo, photo_file_name
from protean.exceptions import ValidationError


class TestPhotoFileName:
    def test_user_upload(self):
        assert photo_file_name("u1", False, "reviews", "r9", "png") == "useru1reviewsr9.png"

    def test_admin_upload(self):
        assert photo_file_name("a1", True, "entities", "e2", ".JPG") == "admina1entitiese2.jpg"

    def test_index_and_timestamp(self):
        name = photo_file_name("u1", False, "profile", "u1", "webp", index=2, timestamp=1700000000000)
        assert name == "useru1profileu1_2_1700000000000.webp"


class TestPhoto:
    def _record(self, **overrides):
        fields = {
            "uploader_id": "u1",
            "photo_type": "reviews",
            "source_id": "r1",
            "file_name": "useru1reviewsr1.png",
            "file_path": "/tmp/useru1reviewsr1.png",
            "mime_type": "image/png",
            "file_size": 120,
            "is_admin_upload": False,
        }
        fields.update(overrides)
        return Photo.record(**fields)

    def test_record_raises_event(self):
        photo = self._record()
        event = photo._events[-1]
        assert isinstance(event, PhotoUploaded)
        assert event.file_name == "useru1reviewsr1.png"

    def test_unknown_photo_type(self):
        with pytest.raises(ValidationError):
            self._record(photo_type="banner")

    def test_negative_size(self):
        with pytest.raises(ValidationError):
            self._record(file_size=-1)
