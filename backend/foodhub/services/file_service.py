"""
FoodHub Backend — Image Upload Service
========================================

What:  Validates uploaded images and stores them under UPLOAD_DIR.
How:   Checks extension, declared content type, size, and the real file
       type read from the content bytes, then writes the bytes to a
       date-organized directory with a UUID filename.
Who:   Called by POST /api/upload.
When:  Once per upload; the returned relative path is exposed under the
       /uploads static mount.

Checks (cheapest first):
    1. Extension:     must be one of ALLOWED_EXTENSIONS
    2. Content type:  the multipart part's declared type must be an
                      allowed image/* type
    3. Size:          non-empty and at most MAX_FILE_SIZE bytes
    4. Magic bytes:   python-magic must identify the content as an
                      allowed image type (renamed scripts are rejected)
    5. UUID filename: no user input reaches the file system path

Directory Structure:
    uploads/
    └── 2024/
        └── 01/
            └── 15/
                ├── a1b2c3d4-....jpg
                └── e5f6g7h8-....png
"""

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

import aiofiles
import magic

from foodhub.config import settings
from foodhub.exceptions import FileStorageError, ValidationError

logger = logging.getLogger(__name__)

# URL prefix under which UPLOAD_DIR is mounted (see main.create_app)
UPLOADS_URL_PREFIX = "/uploads"

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

ALLOWED_CONTENT_TYPES = {
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/gif",
    "image/webp",
}


class FileService:
    """Manages upload validation and storage for food and profile images."""

    def __init__(self, upload_root: Optional[str] = None):
        """
        Args:
            upload_root: Override the default upload directory (used in tests).
                         If None, uses settings.upload_dir.
        """
        self.upload_root = Path(upload_root or settings.upload_dir).resolve()
        self.upload_root.mkdir(parents=True, exist_ok=True)
        logger.debug("FileService initialized with upload_root=%s", self.upload_root)

    def validate_extension(self, filename: str) -> str:
        """
        Returns: Normalized extension (lowercase with dot).
        Raises:  ValidationError if extension is not allowed.
        """
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                message=(
                    f"File type '{ext or filename}' is not supported. "
                    f"Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
                ),
                field="image",
                context={"extension": ext, "allowed": sorted(ALLOWED_EXTENSIONS)},
            )
        return ext

    def validate_content_type(self, content_type: Optional[str]) -> None:
        """Reject parts whose declared MIME type is not an allowed image type."""
        declared = (content_type or "").split(";")[0].strip().lower()
        if declared not in ALLOWED_CONTENT_TYPES:
            raise ValidationError(
                message=f"Content type '{declared or 'unknown'}' is not supported. Upload an image file.",
                field="image",
                context={"content_type": declared, "allowed": sorted(ALLOWED_CONTENT_TYPES)},
            )

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Validate file size against the configured maximum.

        content_length is the size reported by the client (may be None);
        actual_size is the number of bytes actually received.
        """
        if actual_size == 0:
            raise ValidationError(message="Uploaded file is empty.", field="image")

        max_mb = settings.max_file_size / (1024 * 1024)
        size = max(content_length or 0, actual_size)
        if size > settings.max_file_size:
            raise ValidationError(
                message=f"File is too large. Maximum size is {max_mb:.0f}MB.",
                field="image",
                context={"max_size_bytes": settings.max_file_size, "actual_size": size},
            )

    def validate_declared_size(self, declared_size: Optional[int]) -> None:
        """Reject an upload whose reported size is already over the limit, before reading it."""
        if declared_size is not None and declared_size > settings.max_file_size:
            self.validate_size(declared_size, declared_size)

    def validate_mime_type(self, content: bytes) -> str:
        """
        Identify the real file type from the content's magic bytes.

        Returns: Detected MIME type (e.g. "image/jpeg").
        Raises:  ValidationError if the detected type is not an allowed image;
                 FileStorageError if libmagic cannot inspect the buffer.
        """
        try:
            mime_type = magic.from_buffer(content, mime=True)
        except magic.MagicException as e:
            logger.error("MIME type detection failed: %s", str(e))
            raise FileStorageError(
                message="Could not verify file type. Please try again.",
                context={"error": str(e)},
            )

        if mime_type not in ALLOWED_CONTENT_TYPES:
            raise ValidationError(
                message=f"File content type '{mime_type}' is not supported. Upload an image file.",
                field="image",
                context={"detected_type": mime_type, "allowed": sorted(ALLOWED_CONTENT_TYPES)},
            )
        return mime_type

    def _generate_storage_path(self, extension: str) -> Tuple[Path, str]:
        """
        Creates a YYYY/MM/DD/<uuid><ext> path.

        Returns: Tuple of (absolute_path, relative_path_from_upload_root).
        """
        date_dir = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        relative_path = f"{date_dir}/{uuid.uuid4()}{extension}"
        return self.upload_root / relative_path, relative_path

    async def store_file(self, content: bytes, extension: str) -> Tuple[str, str]:
        """
        Write validated file content to disk.

        Returns: Tuple of (absolute_path, relative_path).
        Raises:  FileStorageError if directory creation or the write fails.
        """
        absolute_path, relative_path = self._generate_storage_path(extension)

        try:
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(absolute_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store file at %s: %s", absolute_path, str(e))
            await self.cleanup_file(str(absolute_path))
            raise FileStorageError(
                message="Failed to save uploaded image. Please try again.",
                context={"path": str(absolute_path), "os_error": str(e)},
            )

        logger.info("File stored: %s (%d bytes)", relative_path, len(content))
        return str(absolute_path), relative_path

    async def cleanup_file(self, file_path: str) -> None:
        """Remove a partially written file. Missing files are ignored."""
        path = Path(file_path)
        try:
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up file: %s", path.name)
        except OSError as e:
            logger.warning("Failed to clean up file %s: %s", file_path, str(e))

    def public_url(self, relative_path: str) -> str:
        return f"{UPLOADS_URL_PREFIX}/{relative_path}"

    async def validate_and_store(
        self,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        content_length: Optional[int] = None,
    ) -> Tuple[str, str]:
        """
        Complete validation and storage pipeline.

        Returns: Tuple of (absolute_path, relative_path).
        """
        ext = self.validate_extension(filename)
        self.validate_content_type(content_type)
        self.validate_size(content_length, len(content))
        self.validate_mime_type(content)
        return await self.store_file(content, ext)


# ── Singleton Instance ────────────────────────────────────────────────────
file_service = FileService()
