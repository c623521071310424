"""Local photo storage: upload limits, file writes and lookups.

Limits and the upload directory come from the ``[custom]`` table of
``media/domain.toml``; ``UPLOAD_DIR`` can be overridden from the
environment.
"""

import os
from pathlib import Path

import aiofiles
import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from media.photo.photo import ALLOWED_MIME_TYPES

logger = structlog.get_logger(__name__)

DEFAULT_UPLOAD_DIR = "uploads/photos"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
DEFAULT_MAX_FILES = 5

_MIME_BY_EXTENSION = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def _custom(key, default):
    return current_domain.config.get("custom", {}).get(key, default)


def upload_dir() -> Path:
    return Path(os.getenv("UPLOAD_DIR") or _custom("UPLOAD_DIR", DEFAULT_UPLOAD_DIR))


def max_upload_bytes() -> int:
    return int(_custom("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))


def max_files() -> int:
    return int(_custom("MAX_FILES_PER_UPLOAD", DEFAULT_MAX_FILES))


def _too_large(filename, limit):
    return ValidationError({"files": [f"{filename}: file too large. Maximum size is {limit // (1024 * 1024)}MB"]})


def validate_upload(files):
    """Check a batch of ``(filename, mime_type, size)`` tuples against the limits.

    ``size`` may be ``None`` when the client did not declare it; ``read_upload``
    enforces the limit on those while reading.
    """
    if not files:
        raise ValidationError({"files": ["No files uploaded"]})
    if len(files) > max_files():
        raise ValidationError({"files": [f"Too many files. Maximum is {max_files()} files"]})

    limit = max_upload_bytes()
    for filename, mime_type, size in files:
        if mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                {"files": [f"{filename}: only JPEG, PNG, GIF and WebP images are allowed"]}
            )
        if size is not None and size > limit:
            raise _too_large(filename, limit)


async def read_upload(upload) -> bytes:
    """Read an uploaded file, never buffering more than one byte past the limit."""
    limit = max_upload_bytes()
    if upload.size is not None and upload.size > limit:
        raise _too_large(upload.filename, limit)

    content = await upload.read(limit + 1)
    if len(content) > limit:
        raise _too_large(upload.filename, limit)
    return content


def extension_for(filename, mime_type) -> str:
    suffix = Path(filename or "").suffix.lower()
    if suffix in _MIME_BY_EXTENSION:
        return suffix.lstrip(".")
    return mime_type.split("/")[-1].replace("jpeg", "jpg")


async def save_file(content: bytes, file_name: str) -> str:
    """Write ``content`` under the upload directory and return its path."""
    directory = upload_dir()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name

    async with aiofiles.open(path, "wb") as out_file:
        await out_file.write(content)

    logger.info("Photo file saved", file_name=file_name, size=len(content))
    return str(path)


def delete_file(file_path) -> None:
    path = Path(file_path)
    if path.exists():
        path.unlink()
        logger.info("Photo file deleted", file_path=str(path))
    else:
        logger.warning("Photo file already missing", file_path=str(path))


def resolve_file(file_name):
    """Return ``(path, mime_type)`` for a stored photo name."""
    if not file_name or ".." in file_name or "/" in file_name or "\\" in file_name:
        raise ValidationError({"file_name": ["Invalid filename"]})

    path = upload_dir() / file_name
    if not path.is_file():
        raise ObjectNotFoundError("Photo not found")
    return path, _MIME_BY_EXTENSION.get(path.suffix.lower(), "application/octet-stream")
