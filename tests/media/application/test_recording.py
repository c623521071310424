"""Application tests for recording and removing photos."""

from datetime import UTC, datetime

import pytest
from media.identity_events import IdentityEventsHandler
from media.photo.photo import Photo
from media.photo.recording import RecordPhoto, RemovePhoto, photos
from media.projections.uploader import Uploader
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from shared.events.identity import UserRegistered


def _record(upload_dir, file_name, photo_type="profile", source_id="u1", replace=False):
    path = upload_dir / file_name
    path.write_bytes(b"\x89PNG")
    return current_domain.process(
        RecordPhoto(
            uploader_id="u1",
            photo_type=photo_type,
            source_id=source_id,
            file_name=file_name,
            file_path=str(path),
            mime_type="image/png",
            file_size=4,
            replace_existing=replace,
        ),
        asynchronous=False,
    )


class TestUploaderRoster:
    def test_registered_users_can_upload(self):
        IdentityEventsHandler().on_user_registered(
            UserRegistered(
                user_id="u1",
                username="ann",
                email="ann@example.com",
                is_admin=True,
                registered_at=datetime.now(UTC),
            )
        )
        assert current_domain.repository_for(Uploader).get("u1").is_admin


class TestRecordPhoto:
    def test_record(self, upload_dir):
        photo_id = _record(upload_dir, "one.png", photo_type="reviews", source_id="r1")
        assert current_domain.repository_for(Photo).get(photo_id).source_id == "r1"

    def test_new_profile_photo_replaces_old(self, upload_dir):
        old = _record(upload_dir, "old.png")
        new = _record(upload_dir, "new.png", replace=True)

        assert [str(p.id) for p in photos(photo_type="profile", source_id="u1")] == [new]
        assert not (upload_dir / "old.png").exists()
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Photo).get(old)

    def test_review_photos_accumulate(self, upload_dir):
        _record(upload_dir, "a.png", photo_type="reviews", source_id="r1", replace=True)
        _record(upload_dir, "b.png", photo_type="reviews", source_id="r1", replace=True)
        assert len(photos(photo_type="reviews", source_id="r1")) == 2


class TestRemovePhoto:
    def test_removes_row_and_file(self, upload_dir):
        photo_id = _record(upload_dir, "gone.png")
        current_domain.process(RemovePhoto(photo_id=photo_id), asynchronous=False)

        assert photos(uploader_id="u1") == []
        assert not (upload_dir / "gone.png").exists()

    def test_missing_file_is_tolerated(self, upload_dir):
        photo_id = _record(upload_dir, "vanished.png")
        (upload_dir / "vanished.png").unlink()

        current_domain.process(RemovePhoto(photo_id=photo_id), asynchronous=False)
        assert photos(uploader_id="u1") == []
