"""
FoodHub Backend — File Service Unit Tests
===========================================

What:  Tests for FileService validation and storage (extension, declared
       content type, size, magic-byte file type, date-organized UUID paths).
How:   Each test gets its own upload directory; nothing touches the real one.
"""

import re

import pytest
from unittest.mock import patch

from foodhub.config import settings
from foodhub.exceptions import FileStorageError, ValidationError
from foodhub.services.file_service import FileService


class TestFileValidation:
    """Tests for file validation logic in FileService."""

    @pytest.fixture(autouse=True)
    def _service(self, temp_uploads):
        self.service = FileService(upload_root=temp_uploads)

    # ── Extension Validation ──────────────────────────────────────────────

    @pytest.mark.parametrize("filename", ["pizza.jpg", "pizza.jpeg", "pizza.png", "pizza.gif", "pizza.webp"])
    def test_validate_extension_allowed(self, filename):
        assert self.service.validate_extension(filename).startswith(".")

    def test_validate_extension_uppercase(self):
        """Extension check should be case-insensitive."""
        assert self.service.validate_extension("photo.JPG") == ".jpg"
        assert self.service.validate_extension("photo.Png") == ".png"

    def test_validate_extension_pdf_rejected(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_extension("menu.pdf")

    def test_validate_extension_no_extension_rejected(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_extension("noextension")

    def test_validate_extension_exe_rejected(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_extension("malware.exe")

    # ── Content Type Validation ───────────────────────────────────────────

    def test_validate_content_type_accepts_image(self):
        self.service.validate_content_type("image/jpeg")
        self.service.validate_content_type("image/png; charset=binary")

    def test_validate_content_type_rejects_text(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_content_type("text/plain")

    def test_validate_content_type_rejects_missing(self):
        with pytest.raises(ValidationError, match="unknown"):
            self.service.validate_content_type(None)

    # ── Size Validation ───────────────────────────────────────────────────

    def test_validate_size_within_limit(self):
        self.service.validate_size(None, 1000)

    def test_validate_size_at_limit(self):
        """Files exactly at the limit should pass."""
        self.service.validate_size(settings.max_file_size, settings.max_file_size)

    def test_validate_size_over_limit(self):
        with pytest.raises(ValidationError, match="too large"):
            self.service.validate_size(None, settings.max_file_size + 1)

    def test_validate_size_trusts_larger_declared_length(self):
        with pytest.raises(ValidationError, match="too large"):
            self.service.validate_size(settings.max_file_size + 1, 10)

    def test_validate_size_empty_file(self):
        with pytest.raises(ValidationError, match="empty"):
            self.service.validate_size(0, 0)

    def test_validate_declared_size_rejects_before_read(self):
        with pytest.raises(ValidationError, match="too large"):
            self.service.validate_declared_size(settings.max_file_size + 1)

    def test_validate_declared_size_ignores_unknown_size(self):
        self.service.validate_declared_size(None)
        self.service.validate_declared_size(0)

    # ── Magic Byte Validation ─────────────────────────────────────────────

    def test_validate_mime_type_accepts_real_jpeg(self, sample_image_bytes):
        assert self.service.validate_mime_type(sample_image_bytes) == "image/jpeg"

    def test_validate_mime_type_rejects_script_bytes(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_mime_type(b"<?php system($_GET['c']); ?>")

    @pytest.mark.asyncio
    async def test_renamed_script_is_not_stored(self):
        with pytest.raises(ValidationError, match="not supported"):
            await self.service.validate_and_store(
                filename="shell.png",
                content=b"<?php system($_GET['c']); ?>",
                content_type="image/png",
            )
        assert not any(self.service.upload_root.rglob("*.*"))

    # ── Storage ───────────────────────────────────────────────────────────

    @pytest.mark.asyncio
    async def test_validate_and_store_writes_date_directory(self, temp_uploads, sample_image_bytes):
        abs_path, rel_path = await self.service.validate_and_store(
            filename="burger.JPG",
            content=sample_image_bytes,
            content_type="image/jpeg",
            content_length=len(sample_image_bytes),
        )

        assert re.fullmatch(r"\d{4}/\d{2}/\d{2}/[0-9a-f-]{36}\.jpg", rel_path)
        with open(abs_path, "rb") as f:
            assert f.read() == sample_image_bytes
        assert abs_path.startswith(str(self.service.upload_root))

    @pytest.mark.asyncio
    async def test_validate_and_store_rejects_before_writing(self, temp_uploads):
        with pytest.raises(ValidationError):
            await self.service.validate_and_store(
                filename="notes.txt",
                content=b"hello",
                content_type="text/plain",
            )
        assert not any(self.service.upload_root.rglob("*.*"))

    @pytest.mark.asyncio
    async def test_store_file_os_error_becomes_storage_error(self, sample_image_bytes):
        with patch("foodhub.services.file_service.aiofiles.open", side_effect=OSError("disk full")):
            with pytest.raises(FileStorageError, match="Failed to save"):
                await self.service.store_file(sample_image_bytes, ".jpg")

    def test_public_url(self):
        assert self.service.public_url("2024/01/15/a.png") == "/uploads/2024/01/15/a.png"

    # ── Cleanup ───────────────────────────────────────────────────────────

    @pytest.mark.asyncio
    async def test_cleanup_file_removes_file(self, tmp_path):
        test_file = tmp_path / "test.jpg"
        test_file.write_bytes(b"test content")

        await self.service.cleanup_file(str(test_file))
        assert not test_file.exists()

    @pytest.mark.asyncio
    async def test_cleanup_file_nonexistent(self, tmp_path):
        # Should not raise
        await self.service.cleanup_file(str(tmp_path / "nonexistent.jpg"))
