"""Tests for upload validation and file lookup."""

import asyncio
import io

import pytest
from fastapi import UploadFile
from media.photo.storage import extension_for, read_upload, resolve_file, validate_upload
from protean.exceptions import ObjectNotFoundError, ValidationError

MB = 1024 * 1024


class TestValidateUpload:
    def test_accepts_images(self):
        validate_upload([("a.png", "image/png", 10), ("b.webp", "image/webp", 5 * MB)])

    def test_no_files(self):
        with pytest.raises(ValidationError):
            validate_upload([])

    def test_too_many_files(self):
        with pytest.raises(ValidationError) as exc:
            validate_upload([(f"{i}.png", "image/png", 1) for i in range(6)])
        assert exc.value.messages["files"] == ["Too many files. Maximum is 5 files"]

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            validate_upload([("doc.pdf", "application/pdf", 10)])

    def test_too_large(self):
        with pytest.raises(ValidationError) as exc:
            validate_upload([("big.png", "image/png", 5 * MB + 1)])
        assert "Maximum size is 5MB" in exc.value.messages["files"][0]

    def test_undeclared_size_is_checked_later(self):
        validate_upload([("a.png", "image/png", None)])


class TestReadUpload:
    def test_reads_content(self):
        upload = UploadFile(file=io.BytesIO(b"\x89PNG"), filename="a.png")
        assert asyncio.run(read_upload(upload)) == b"\x89PNG"

    def test_stops_one_byte_past_the_limit(self):
        upload = UploadFile(file=io.BytesIO(b"x" * (5 * MB + 100)), filename="big.png")

        with pytest.raises(ValidationError) as exc:
            asyncio.run(read_upload(upload))

        assert "Maximum size is 5MB" in exc.value.messages["files"][0]
        assert upload.file.tell() == 5 * MB + 1

    def test_declared_size_rejected_before_reading(self):
        upload = UploadFile(file=io.BytesIO(b"x" * 10), filename="big.png", size=5 * MB + 1)

        with pytest.raises(ValidationError):
            asyncio.run(read_upload(upload))

        assert upload.file.tell() == 0


class TestExtension:
    @pytest.mark.parametrize(
        "filename,mime_type,expected",
        [
            ("cat.PNG", "image/png", "png"),
            ("photo.jpeg", "image/jpeg", "jpeg"),
            ("noext", "image/jpeg", "jpg"),
            (None, "image/webp", "webp"),
        ],
    )
    def test_extension(self, filename, mime_type, expected):
        assert extension_for(filename, mime_type) == expected


class TestResolveFile:
    def test_found(self, upload_dir):
        (upload_dir / "x.gif").write_bytes(b"GIF89a")
        path, mime_type = resolve_file("x.gif")
        assert path == upload_dir / "x.gif"
        assert mime_type == "image/gif"

    @pytest.mark.parametrize("name", ["../secret.png", "a/b.png", "a\\b.png", ""])
    def test_path_tricks(self, name):
        with pytest.raises(ValidationError):
            resolve_file(name)

    def test_missing(self):
        with pytest.raises(ObjectNotFoundError):
            resolve_file("missing.png")
